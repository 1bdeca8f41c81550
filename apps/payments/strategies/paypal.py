from apps.payments.strategies.base import PaymentMode, PaymentStrategy, confirmation


class PayPalStrategy(PaymentStrategy):
    mode = PaymentMode.PAYPAL

    def describe(self, amount) -> str:
        return confirmation(self.mode, amount)
