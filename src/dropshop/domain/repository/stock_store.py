"""Abstract store for the StockLevel aggregate.

Defined in the domain layer so handlers never depend on where the
counter lives.  Concrete stores (process memory, JSON key-value file)
live in the infrastructure layer and only implement the three raw
storage hooks; the read-modify-write logic is shared here.
"""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod

from dropshop.domain.model.stock import DEFAULT_STOCK, StockLevel


class StockStore(ABC):

    def __init__(self, default: int = DEFAULT_STOCK) -> None:
        self._default = StockLevel(default).units
        self._lock = threading.Lock()

    # --- Storage hooks --------------------------------------------------------

    @abstractmethod
    def _load(self) -> int | None:
        """Return the stored level, or None when nothing is stored."""

    @abstractmethod
    def _save(self, units: int) -> None:
        """Persist a new level."""

    @abstractmethod
    def _clear(self) -> None:
        """Forget the stored level so the default applies again."""

    # --- Public interface -----------------------------------------------------

    def get(self) -> int:
        with self._lock:
            return self._current().units

    def set(self, raw: object) -> int:
        """Overwrite the level; junk becomes 0, fractions truncate, negatives clamp."""
        level = StockLevel.clamped(raw)
        with self._lock:
            self._save(level.units)
        return level.units

    def decrement(self, quantity: int) -> int:
        """Take ``quantity`` units and return the new level.

        Raises OutOfStockError / InsufficientStockError without touching
        the stored value.
        """
        with self._lock:
            level = self._current()
            level.take(quantity)
            self._save(level.units)
            return level.units

    def reset(self) -> int:
        with self._lock:
            self._clear()
            return self._default

    def _current(self) -> StockLevel:
        stored = self._load()
        return StockLevel(self._default if stored is None else stored)
