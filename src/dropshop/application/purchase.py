"""Application service: Purchase use case.

A purchase without payment: take the requested quantity from stock or
fail without touching it.
"""

from __future__ import annotations

import logging

from dropshop.application.dto import PurchaseResultDTO
from dropshop.domain.model.value_objects import Quantity
from dropshop.domain.repository.stock_store import StockStore

logger = logging.getLogger(__name__)


class PurchaseHandler:

    def __init__(self, stock_store: StockStore) -> None:
        self._stock_store = stock_store

    def handle(self, raw_quantity: object = None) -> PurchaseResultDTO:
        """Decrement stock by the requested quantity (default 1)."""
        quantity = Quantity.parse(raw_quantity)
        remaining = self._stock_store.decrement(quantity.value)
        logger.info("Simulated purchase qty=%d remaining=%d", quantity.value, remaining)
        return PurchaseResultDTO(quantity=quantity.value, stock=remaining)
