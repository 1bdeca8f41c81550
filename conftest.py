import pytest

from apps.payments.checkout import CheckoutService
from apps.payments.strategies import (
    CreditCardStrategy,
    GooglePayStrategy,
    PayPalStrategy,
    PaymentMode,
)
from apps.payments.strategies.manager import StrategyManager


@pytest.fixture
def empty_manager():
    return StrategyManager()


@pytest.fixture
def manager():
    manager = StrategyManager()
    manager.register(PaymentMode.PAYPAL, PayPalStrategy())
    manager.register(PaymentMode.GOOGLE_PAY, GooglePayStrategy())
    manager.register(PaymentMode.CREDIT_CARD, CreditCardStrategy())
    return manager


@pytest.fixture
def service(manager):
    return CheckoutService(manager)
