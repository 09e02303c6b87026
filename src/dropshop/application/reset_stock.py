"""Application service: Reset Stock use case."""

from __future__ import annotations

import logging

from dropshop.application.dto import StockDTO
from dropshop.domain.repository.stock_store import StockStore

logger = logging.getLogger(__name__)


class ResetStockHandler:

    def __init__(self, stock_store: StockStore) -> None:
        self._stock_store = stock_store

    def handle(self) -> StockDTO:
        """Forget the stored level; the store's default applies again."""
        stock = self._stock_store.reset()
        logger.info("Stock reset to default (%d)", stock)
        return StockDTO(stock=stock)
