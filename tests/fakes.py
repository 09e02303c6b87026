"""In-memory fakes for testing.

FakeStockStore implements the same hooks as the real stores but also
records every write, so tests can assert that a failed request never
touched the stock level.
"""

from __future__ import annotations

from dropshop.domain.model.stock import DEFAULT_STOCK
from dropshop.domain.repository.stock_store import StockStore
from dropshop.domain.service.admin_authorizer import AdminAuthorizer


class FakeStockStore(StockStore):

    def __init__(self, units: int | None = None, default: int = DEFAULT_STOCK) -> None:
        super().__init__(default)
        self._units = units
        self.writes: list[int] = []
        self.clears = 0

    def _load(self) -> int | None:
        return self._units

    def _save(self, units: int) -> None:
        self._units = units
        self.writes.append(units)

    def _clear(self) -> None:
        self._units = None
        self.clears += 1


class FakeAuthorizer(AdminAuthorizer):

    def __init__(self, allowed: bool = True) -> None:
        self._allowed = allowed
        self.seen: list[object] = []

    def is_authorized(self, key: object) -> bool:
        self.seen.append(key)
        return self._allowed
