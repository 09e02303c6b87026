"""Integration tests for the Checkout use case."""

import logging

import pytest

from dropshop.application.checkout import SUCCESS_MESSAGE, CheckoutHandler
from dropshop.domain.exceptions import (
    InsufficientStockError,
    InvalidCardError,
    InvalidExpiryError,
    OutOfStockError,
)
from dropshop.domain.model.checkout import CheckoutSubmission
from tests.fakes import FakeStockStore

RAW_CARD = "4242424242424242"


def _submission(**overrides) -> CheckoutSubmission:
    fields = {
        "name": "Misty",
        "card_number": RAW_CARD,
        "expiry": "08/27",
        "cvc": "321",
        "quantity": 1,
    }
    fields.update(overrides)
    return CheckoutSubmission(**fields)


class TestCheckoutHappyPath:

    def test_decrements_stock(self):
        store = FakeStockStore(units=3)
        result = CheckoutHandler(store).handle(_submission(quantity=2))
        assert result.stock == 1
        assert result.quantity == 2
        assert result.message == SUCCESS_MESSAGE
        assert store.get() == 1

    def test_result_never_carries_raw_card(self):
        result = CheckoutHandler(FakeStockStore(units=1)).handle(_submission())
        assert result.masked_card == "424242******4242"
        assert RAW_CARD not in repr(result)

    def test_logs_masked_card_only(self, caplog):
        caplog.set_level(logging.INFO, logger="dropshop")
        CheckoutHandler(FakeStockStore(units=1)).handle(_submission())

        assert "424242******4242" in caplog.text
        assert "Misty" in caplog.text
        assert RAW_CARD not in caplog.text
        for record in caplog.records:
            assert "321" not in [str(arg) for arg in record.args]


class TestCheckoutRejected:

    def test_invalid_card_leaves_stock_unchanged(self):
        store = FakeStockStore(units=5)
        with pytest.raises(InvalidCardError):
            CheckoutHandler(store).handle(_submission(card_number="4242424242424241"))
        assert store.get() == 5
        assert store.writes == []

    def test_invalid_expiry_leaves_stock_unchanged(self):
        store = FakeStockStore(units=5)
        with pytest.raises(InvalidExpiryError):
            CheckoutHandler(store).handle(_submission(expiry="soon"))
        assert store.writes == []

    def test_stock_checked_before_card(self):
        store = FakeStockStore(units=0)
        with pytest.raises(OutOfStockError):
            CheckoutHandler(store).handle(_submission(card_number="bogus"))

    def test_insufficient_stock(self):
        store = FakeStockStore(units=1)
        with pytest.raises(InsufficientStockError):
            CheckoutHandler(store).handle(_submission(quantity=2))
        assert store.get() == 1
