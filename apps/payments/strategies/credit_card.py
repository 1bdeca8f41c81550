from apps.payments.strategies.base import PaymentMode, PaymentStrategy, confirmation


class CreditCardStrategy(PaymentStrategy):
    mode = PaymentMode.CREDIT_CARD

    def describe(self, amount) -> str:
        return confirmation(self.mode, amount)
