from apps.payments.strategies.base import PaymentMode, PaymentStrategy, confirmation


class GooglePayStrategy(PaymentStrategy):
    mode = PaymentMode.GOOGLE_PAY

    def describe(self, amount) -> str:
        return confirmation(self.mode, amount)
