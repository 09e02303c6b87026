"""Application service: Adjust Local Stock use case.

The local shop's admin control has no key, but unlike the server's
set-stock it refuses negative or non-numeric input instead of clamping.
"""

from __future__ import annotations

import logging

from dropshop.application.dto import StockDTO
from dropshop.domain.model.stock import StockLevel
from dropshop.domain.repository.stock_store import StockStore

logger = logging.getLogger(__name__)


class AdjustLocalStockHandler:

    def __init__(self, stock_store: StockStore) -> None:
        self._stock_store = stock_store

    def handle(self, raw_stock: object) -> StockDTO:
        level = StockLevel.strict(raw_stock)
        stock = self._stock_store.set(level.units)
        logger.info("Local stock set to %d", stock)
        return StockDTO(stock=stock)
