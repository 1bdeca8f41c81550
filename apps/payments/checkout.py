import logging
from typing import Optional, TextIO

from apps.payments.strategies.base import Amount, write_line
from apps.payments.strategies.manager import StrategyManager, strategy_manager

logger = logging.getLogger(__name__)

NO_STRATEGY_MESSAGE = "No strategy available for this payment mode!"


class CheckoutService:
    def __init__(self, manager: StrategyManager):
        self.manager = manager

    def checkout(self, mode, amount: Amount, stdout: Optional[TextIO] = None) -> None:
        strategy = self.manager.lookup(mode)
        if strategy is None:
            logger.warning(f"No payment strategy registered for {mode}")
            write_line(NO_STRATEGY_MESSAGE, stdout)
            return

        logger.debug(f"Dispatching checkout of {amount} to {strategy!r}")
        strategy.pay(amount, stdout)


def checkout(mode, amount: Amount, stdout: Optional[TextIO] = None) -> None:
    CheckoutService(strategy_manager).checkout(mode, amount, stdout)
