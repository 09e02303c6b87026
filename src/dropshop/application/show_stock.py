"""Application service: Show Stock use case (query)."""

from __future__ import annotations

from dropshop.application.dto import StockDTO
from dropshop.domain.repository.stock_store import StockStore


class ShowStockHandler:

    def __init__(self, stock_store: StockStore) -> None:
        self._stock_store = stock_store

    def handle(self) -> StockDTO:
        return StockDTO(stock=self._stock_store.get())
