import logging
from threading import Lock
from typing import Dict, List, Optional

from django.conf import settings
from django.utils.module_loading import import_string

from apps.payments.strategies import get_strategy
from apps.payments.strategies.base import PaymentMode, PaymentStrategy

logger = logging.getLogger(__name__)


class StrategyManager:
    """Runtime mapping from payment mode to the strategy that handles it.

    Holds at most one strategy per mode. Registering a mode again replaces
    the previous strategy and unregistering drops the mapping entirely, so
    a removed mode looks exactly like one that was never registered.
    """

    def __init__(self):
        self._strategies: Dict[PaymentMode, PaymentStrategy] = {}
        self._lock = Lock()

    @classmethod
    def from_settings(cls) -> "StrategyManager":
        config = getattr(settings, "PAYMENT_STRATEGIES", {})
        overrides = config.get("CLASSES", {})
        manager = cls()

        for name in config.get("ENABLED", []):
            mode = PaymentMode.coerce(name.strip() if isinstance(name, str) else name)
            if not mode:
                logger.warning(f"Unknown payment mode in settings: {name}")
                continue

            dotted_path = overrides.get(mode.value)
            strategy = import_string(dotted_path)() if dotted_path else get_strategy(mode)
            manager.register(mode, strategy)

        return manager

    def register(self, mode: PaymentMode, strategy: PaymentStrategy):
        key = PaymentMode.coerce(mode)
        if key is None:
            raise ValueError(f"Unknown payment mode: {mode}")

        with self._lock:
            replaced = self._strategies.get(key)
            self._strategies[key] = strategy

        if replaced is not None and replaced is not strategy:
            logger.info(f"Replaced {replaced!r} with {strategy!r} for {key.value}")
        else:
            logger.info(f"Registered {strategy!r} for {key.value}")

    def unregister(self, mode: PaymentMode):
        key = PaymentMode.coerce(mode)
        if key is None:
            return

        with self._lock:
            removed = self._strategies.pop(key, None)

        if removed is not None:
            logger.info(f"Unregistered {removed!r} for {key.value}")

    def lookup(self, mode) -> Optional[PaymentStrategy]:
        key = PaymentMode.coerce(mode)
        if key is None:
            return None
        with self._lock:
            return self._strategies.get(key)

    def registered_modes(self) -> List[PaymentMode]:
        with self._lock:
            return [mode for mode in PaymentMode if mode in self._strategies]

    def __contains__(self, mode) -> bool:
        return self.lookup(mode) is not None

    def __len__(self) -> int:
        with self._lock:
            return len(self._strategies)


strategy_manager = StrategyManager.from_settings()
