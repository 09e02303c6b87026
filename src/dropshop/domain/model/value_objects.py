"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass

from dropshop.domain.exceptions import ValidationError

_NON_DIGITS = re.compile(r"\D", re.ASCII)


def digits_only(raw: object) -> str:
    return _NON_DIGITS.sub("", str(raw))


def finite_number(raw: object) -> float | None:
    """Coerce a request value to a finite number, or None."""
    if raw is None or isinstance(raw, bool):
        return None
    try:
        value = float(raw)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return None
    if not math.isfinite(value):
        return None
    return value


def luhn_check(number: object) -> bool:
    """Luhn checksum over the digits of ``number``.

    Every second digit from the right is doubled; doubled values above 9
    have 9 subtracted.  The number is valid when the sum is a multiple
    of 10.
    """
    total = 0
    double = False
    for ch in reversed(digits_only(number)):
        digit = int(ch)
        if double:
            digit *= 2
            if digit > 9:
                digit -= 9
        total += digit
        double = not double
    return total % 10 == 0


@dataclass(frozen=True)
class Quantity:
    """A positive integer quantity of the item."""

    value: int

    def __post_init__(self) -> None:
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value <= 0:
            raise ValidationError("Quantity must be positive")

    def __str__(self) -> str:
        return str(self.value)

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def parse(raw: object) -> Quantity:
        """Lenient parse of a requested quantity.

        Missing or unparseable input means one unit; anything else is
        floored and raised to at least one.
        """
        value = finite_number(raw)
        if value is None:
            return Quantity(1)
        return Quantity(max(1, math.floor(value)))


@dataclass(frozen=True)
class MaskedCard:
    """A card number with everything but the first 6 and last 4 digits hidden.

    Only this form may be logged or returned; the raw digits are dropped
    as soon as the mask is built.
    """

    value: str

    MASK_CHAR = "*"

    def __str__(self) -> str:
        return self.value

    @staticmethod
    def of(raw: object) -> MaskedCard:
        digits = digits_only(raw)
        if len(digits) <= 4:
            return MaskedCard("****")
        if len(digits) <= 10:
            return MaskedCard("****" + digits[-4:])
        hidden = MaskedCard.MASK_CHAR * (len(digits) - 10)
        return MaskedCard(digits[:6] + hidden + digits[-4:])
