"""Admin authorization capability.

Handlers ask an AdminAuthorizer whether a key is allowed; they never
compare secrets themselves, so the credential scheme can change without
touching them.
"""

from __future__ import annotations

import hmac
from abc import ABC, abstractmethod

from dropshop.domain.exceptions import UnauthorizedError


class AdminAuthorizer(ABC):

    @abstractmethod
    def is_authorized(self, key: object) -> bool:
        """Return True if ``key`` grants admin access."""

    def authorize(self, key: object) -> None:
        if not self.is_authorized(key):
            raise UnauthorizedError()


class SharedSecretAuthorizer(AdminAuthorizer):
    """Exact match against one static secret."""

    def __init__(self, secret: str) -> None:
        self._secret = secret

    def is_authorized(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        return hmac.compare_digest(key.encode("utf-8"), self._secret.encode("utf-8"))
