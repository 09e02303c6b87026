"""Checkout submissions: request-scoped, never persisted."""

from __future__ import annotations

from dataclasses import dataclass, field

from dropshop.domain.model.value_objects import MaskedCard, Quantity


@dataclass(frozen=True)
class CheckoutSubmission:
    """Raw payment-like fields exactly as the client sent them.

    ``card_number`` and ``cvc`` are excluded from ``repr`` so the object
    can never leak them into a log line or traceback.
    """

    name: object = None
    card_number: object = field(default=None, repr=False)
    expiry: object = None
    cvc: object = field(default=None, repr=False)
    quantity: object = None

    @classmethod
    def from_mapping(cls, data: dict) -> CheckoutSubmission:
        """Build from a request body using the wire field names."""
        return cls(
            name=data.get("name"),
            card_number=data.get("cardNumber"),
            expiry=data.get("expiry"),
            cvc=data.get("cvc"),
            quantity=data.get("qty"),
        )


@dataclass(frozen=True)
class ValidatedSubmission:
    name: str
    masked_card: MaskedCard
    expiry: str
    quantity: Quantity
