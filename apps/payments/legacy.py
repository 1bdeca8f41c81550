"""Switch-based checkout over the closed set of payment modes.

Every mode is hard-wired into one branch chain, so adding or swapping a
payment method means editing this function. ``apps.payments.checkout``
replaces it with a registry lookup.
"""
from typing import Optional, TextIO

from apps.payments.strategies.base import Amount, PaymentMode, confirmation, write_line

INVALID_MODE_MESSAGE = "Invalid payment mode selected!"


def process_payment(mode, amount: Amount, stdout: Optional[TextIO] = None) -> None:
    mode = PaymentMode.coerce(mode)

    if mode == PaymentMode.PAYPAL:
        write_line(confirmation(PaymentMode.PAYPAL, amount), stdout)
    elif mode == PaymentMode.GOOGLE_PAY:
        write_line(confirmation(PaymentMode.GOOGLE_PAY, amount), stdout)
    elif mode == PaymentMode.CREDIT_CARD:
        write_line(confirmation(PaymentMode.CREDIT_CARD, amount), stdout)
    else:
        write_line(INVALID_MODE_MESSAGE, stdout)
