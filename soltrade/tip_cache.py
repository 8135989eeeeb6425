"""Process-wide store of the current tip amount."""

from __future__ import annotations

import threading

DEFAULT_TIP = 0.001


class TipCache:
    """Thread-safe holder of the tip amount, in SOL."""

    _instance: TipCache | None = None
    _instance_guard = threading.Lock()

    def __init__(self) -> None:
        self._guard = threading.Lock()
        self._tip_amount = DEFAULT_TIP

    @classmethod
    def get_instance(cls) -> TipCache:
        """Return the shared cache, creating it on first use."""
        with cls._instance_guard:
            if cls._instance is None:
                cls._instance = cls()
            return cls._instance

    def init(self, tip_amount: float | None = None) -> None:
        """Set the tip, falling back to the default when none is given."""
        self.update_tip(DEFAULT_TIP if tip_amount is None else tip_amount)

    def get_tip(self) -> float:
        with self._guard:
            return self._tip_amount

    def update_tip(self, amount: float) -> None:
        with self._guard:
            self._tip_amount = amount