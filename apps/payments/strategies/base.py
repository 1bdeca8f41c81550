import sys
from abc import ABC, abstractmethod
from decimal import Decimal, ROUND_HALF_UP, localcontext
from enum import Enum
from typing import Optional, TextIO, Union

from django.conf import settings

Amount = Union[int, float, Decimal, str]

TWO_PLACES = Decimal("0.01")


class PaymentMode(Enum):
    PAYPAL = "PAYPAL"
    GOOGLE_PAY = "GOOGLE_PAY"
    CREDIT_CARD = "CREDIT_CARD"

    @property
    def label(self) -> str:
        return MODE_LABELS[self]

    @classmethod
    def coerce(cls, value) -> Optional["PaymentMode"]:
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value)
        except ValueError:
            return cls.__members__.get(value)


MODE_LABELS = {
    PaymentMode.PAYPAL: "PayPal",
    PaymentMode.GOOGLE_PAY: "GooglePay",
    PaymentMode.CREDIT_CARD: "Credit Card",
}


def format_amount(amount: Amount) -> str:
    """Render an amount with exactly two decimals, rounding half up.

    Floats go through ``str`` first so ``150.759`` rounds on its decimal
    form rather than on its binary approximation.
    """
    value = amount if isinstance(amount, Decimal) else Decimal(str(amount))
    with localcontext() as ctx:
        ctx.prec = max(28, value.adjusted() + 3)
        return str(value.quantize(TWO_PLACES, rounding=ROUND_HALF_UP))


def currency_symbol() -> str:
    return getattr(settings, "PAYMENT_STRATEGIES", {}).get("CURRENCY_SYMBOL", "$")


def write_line(message: str, stdout: Optional[TextIO] = None):
    stream = stdout if stdout is not None else sys.stdout
    stream.write(f"{message}\n")


class PaymentStrategy(ABC):
    mode: PaymentMode

    @property
    def display_name(self) -> str:
        return self.mode.label

    @abstractmethod
    def describe(self, amount: Amount) -> str:
        pass

    def pay(self, amount: Amount, stdout: Optional[TextIO] = None) -> None:
        write_line(self.describe(amount), stdout)

    def __repr__(self):
        return f"<{self.__class__.__name__} mode={self.mode.value}>"


def confirmation(mode: PaymentMode, amount: Amount) -> str:
    return f"Processing {mode.label} payment of {currency_symbol()}{format_amount(amount)}"
