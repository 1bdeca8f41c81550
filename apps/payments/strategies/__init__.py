from .base import PaymentMode, PaymentStrategy, format_amount
from .paypal import PayPalStrategy
from .google_pay import GooglePayStrategy
from .credit_card import CreditCardStrategy

STRATEGY_CLASSES = {
    PaymentMode.PAYPAL: PayPalStrategy,
    PaymentMode.GOOGLE_PAY: GooglePayStrategy,
    PaymentMode.CREDIT_CARD: CreditCardStrategy,
}


def get_strategy(mode) -> PaymentStrategy:
    strategy_class = STRATEGY_CLASSES.get(PaymentMode.coerce(mode))
    if not strategy_class:
        raise ValueError(f"Unknown payment mode: {mode}")
    return strategy_class()
