"""Domain-level exceptions.

Every failure a shopper or admin can trigger is a subclass of
DomainException so the web and CLI layers can catch them uniformly and
surface the message verbatim.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""

    #: Short name of the failure, e.g. for logging.
    kind: str = "DomainError"
    default_message: str = "Request failed"

    def __init__(self, message: str | None = None) -> None:
        if message is None:
            message = self.default_message
        super().__init__(message)

    @property
    def message(self) -> str:
        return str(self)

    @property
    def detail(self) -> str:
        """Message for a human reader; subclasses may add context."""
        return self.message


class ValidationError(DomainException):
    """Submitted input was rejected."""

    kind = "ValidationError"
    default_message = "Invalid input"


class MissingFieldsError(ValidationError):
    kind = "MissingFields"
    default_message = "Missing fields"


class InvalidCardError(ValidationError):
    kind = "InvalidCard"
    default_message = (
        "Card number failed basic validation (Luhn); use test card numbers only"
    )


class InvalidCvcError(ValidationError):
    kind = "InvalidCvc"
    default_message = "Invalid CVC"


class InvalidExpiryError(ValidationError):
    kind = "InvalidExpiry"
    default_message = "Invalid expiry format"


class StockError(DomainException):
    """The requested quantity cannot be taken from stock."""


class OutOfStockError(StockError):
    kind = "OutOfStock"
    default_message = "Out of stock"


class InsufficientStockError(StockError):
    kind = "InsufficientStock"
    default_message = "Not enough stock"

    def __init__(
        self,
        message: str | None = None,
        *,
        requested: int | None = None,
        available: int | None = None,
    ) -> None:
        super().__init__(message)
        self.requested = requested
        self.available = available

    @property
    def detail(self) -> str:
        """Message with the counts, when they are known."""
        if self.requested is None or self.available is None:
            return self.message
        return f"{self.message} (requested {self.requested}, available {self.available})"


class UnauthorizedError(DomainException):
    """The supplied admin key does not match."""

    kind = "Unauthorized"
    default_message = "bad key"
