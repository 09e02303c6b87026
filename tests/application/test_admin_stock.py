"""Integration tests for the admin stock use cases (set, local adjust, reset)."""

import pytest

from dropshop.application.adjust_local_stock import AdjustLocalStockHandler
from dropshop.application.reset_stock import ResetStockHandler
from dropshop.application.set_stock import SetStockHandler
from dropshop.application.show_stock import ShowStockHandler
from dropshop.domain.exceptions import UnauthorizedError, ValidationError
from dropshop.domain.service.admin_authorizer import SharedSecretAuthorizer
from tests.fakes import FakeAuthorizer, FakeStockStore


class TestSetStock:

    def test_correct_key_sets_stock(self):
        store = FakeStockStore(units=1)
        handler = SetStockHandler(store, SharedSecretAuthorizer("k"))
        assert handler.handle("k", 25).stock == 25
        assert store.get() == 25

    def test_wrong_key_never_mutates(self):
        store = FakeStockStore(units=1)
        handler = SetStockHandler(store, SharedSecretAuthorizer("k"))
        with pytest.raises(UnauthorizedError):
            handler.handle("nope", 25)
        assert store.get() == 1
        assert store.writes == []

    def test_negative_clamps_to_zero(self):
        store = FakeStockStore(units=4)
        handler = SetStockHandler(store, FakeAuthorizer(allowed=True))
        assert handler.handle("any", -5).stock == 0

    def test_key_is_passed_to_authorizer(self):
        authorizer = FakeAuthorizer(allowed=False)
        with pytest.raises(UnauthorizedError):
            SetStockHandler(FakeStockStore(), authorizer).handle("abc", 1)
        assert authorizer.seen == ["abc"]


class TestAdjustLocalStock:

    def test_sets_floored_value(self):
        store = FakeStockStore()
        assert AdjustLocalStockHandler(store).handle("6.5").stock == 6

    @pytest.mark.parametrize("raw", [-5, "-1", "nan", "abc"])
    def test_rejects_and_keeps_level(self, raw):
        store = FakeStockStore(units=3)
        with pytest.raises(ValidationError):
            AdjustLocalStockHandler(store).handle(raw)
        assert store.get() == 3
        assert store.writes == []


class TestResetAndShow:

    def test_reset_returns_default(self):
        store = FakeStockStore(units=9)
        assert ResetStockHandler(store).handle().stock == 1
        assert ShowStockHandler(store).handle().stock == 1
