"""Integration tests for the Purchase use case.

Uses the in-memory fake store — no file I/O.
"""

import logging

import pytest

from dropshop.application.purchase import PurchaseHandler
from dropshop.domain.exceptions import InsufficientStockError, OutOfStockError
from tests.fakes import FakeStockStore


class TestPurchaseHappyPath:

    def test_default_quantity_is_one(self):
        store = FakeStockStore(units=3)
        result = PurchaseHandler(store).handle()
        assert result.quantity == 1
        assert result.stock == 2

    def test_requested_quantity(self):
        store = FakeStockStore(units=10)
        result = PurchaseHandler(store).handle("4")
        assert result.stock == 6
        assert store.get() == 6

    def test_junk_quantity_buys_one(self):
        store = FakeStockStore(units=2)
        assert PurchaseHandler(store).handle("lots").stock == 1

    def test_logs_quantity_and_remaining(self, caplog):
        caplog.set_level(logging.INFO, logger="dropshop")
        PurchaseHandler(FakeStockStore(units=7)).handle(3)

        records = [r for r in caplog.records if r.name == "dropshop.application.purchase"]
        assert len(records) == 1
        assert records[0].getMessage() == "Simulated purchase qty=3 remaining=4"

    def test_failed_purchase_not_logged_as_sale(self, caplog):
        caplog.set_level(logging.INFO, logger="dropshop")
        with pytest.raises(OutOfStockError):
            PurchaseHandler(FakeStockStore(units=0)).handle(1)
        assert "Simulated purchase" not in caplog.text


class TestPurchaseRejected:

    def test_out_of_stock(self):
        store = FakeStockStore(units=0)
        with pytest.raises(OutOfStockError):
            PurchaseHandler(store).handle(1)
        assert store.writes == []

    def test_insufficient_stock(self):
        store = FakeStockStore(units=2)
        with pytest.raises(InsufficientStockError):
            PurchaseHandler(store).handle(3)
        assert store.get() == 2
