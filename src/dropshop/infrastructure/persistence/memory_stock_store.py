"""Process-memory implementation of StockStore (server variant).

The level is lost when the process exits.
"""

from __future__ import annotations

from dropshop.domain.model.stock import DEFAULT_STOCK
from dropshop.domain.repository.stock_store import StockStore


class InMemoryStockStore(StockStore):

    def __init__(self, default: int = DEFAULT_STOCK) -> None:
        super().__init__(default)
        self._units: int | None = None

    def _load(self) -> int | None:
        return self._units

    def _save(self, units: int) -> None:
        self._units = units

    def _clear(self) -> None:
        self._units = None
