"""Unit tests for admin authorization."""

import pytest

from dropshop.domain.exceptions import UnauthorizedError
from dropshop.domain.service.admin_authorizer import SharedSecretAuthorizer


class TestSharedSecretAuthorizer:

    def test_exact_match_allowed(self):
        SharedSecretAuthorizer("hunter2").authorize("hunter2")

    @pytest.mark.parametrize("key", ["hunter", "Hunter2", "hunter2 ", "", None, 42])
    def test_anything_else_rejected(self, key):
        with pytest.raises(UnauthorizedError, match="bad key"):
            SharedSecretAuthorizer("hunter2").authorize(key)

    def test_is_authorized_does_not_raise(self):
        assert SharedSecretAuthorizer("k").is_authorized("k")
        assert not SharedSecretAuthorizer("k").is_authorized("x")
