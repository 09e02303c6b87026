"""Application service: Set Stock use case (admin, server variant)."""

from __future__ import annotations

import logging

from dropshop.application.dto import StockDTO
from dropshop.domain.repository.stock_store import StockStore
from dropshop.domain.service.admin_authorizer import AdminAuthorizer

logger = logging.getLogger(__name__)


class SetStockHandler:

    def __init__(self, stock_store: StockStore, authorizer: AdminAuthorizer) -> None:
        self._stock_store = stock_store
        self._authorizer = authorizer

    def handle(self, key: object, raw_stock: object) -> StockDTO:
        """Overwrite the stock level after checking the admin key.

        The value is clamped rather than rejected: ``-5`` becomes 0 and
        anything unparseable becomes 0.
        """
        self._authorizer.authorize(key)
        stock = self._stock_store.set(raw_stock)
        logger.info("Admin set stock to %d", stock)
        return StockDTO(stock=stock)
