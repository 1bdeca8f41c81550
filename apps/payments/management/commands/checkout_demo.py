from django.core.management.base import BaseCommand

from apps.payments.checkout import CheckoutService
from apps.payments.legacy import process_payment
from apps.payments.strategies import (
    CreditCardStrategy,
    GooglePayStrategy,
    PayPalStrategy,
    PaymentMode,
)
from apps.payments.strategies.manager import StrategyManager


class Command(BaseCommand):
    help = 'Run the sample checkout sequence against every payment mode'

    def add_arguments(self, parser):
        parser.add_argument(
            '--amount',
            type=float,
            default=150.75,
            help='Amount to check out'
        )
        parser.add_argument(
            '--legacy',
            action='store_true',
            help='Use the switch-based checkout instead of the strategy registry'
        )

    def handle(self, *args, **options):
        amount = options['amount']

        if options['legacy']:
            for mode in PaymentMode:
                process_payment(mode, amount, stdout=self.stdout)
            process_payment('UNKNOWN', amount, stdout=self.stdout)
            return

        manager = StrategyManager()
        manager.register(PaymentMode.PAYPAL, PayPalStrategy())
        manager.register(PaymentMode.GOOGLE_PAY, GooglePayStrategy())
        manager.register(PaymentMode.CREDIT_CARD, CreditCardStrategy())
        service = CheckoutService(manager)

        service.checkout(PaymentMode.PAYPAL, amount, stdout=self.stdout)
        service.checkout(PaymentMode.GOOGLE_PAY, amount, stdout=self.stdout)
        service.checkout(PaymentMode.CREDIT_CARD, amount, stdout=self.stdout)

        manager.unregister(PaymentMode.GOOGLE_PAY)
        service.checkout(PaymentMode.GOOGLE_PAY, amount, stdout=self.stdout)
