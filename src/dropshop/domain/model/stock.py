"""StockLevel aggregate — the single counter a sniper bot watches.

There is exactly one item for sale, so the whole inventory is one
non-negative integer.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from dropshop.domain.exceptions import (
    InsufficientStockError,
    OutOfStockError,
    ValidationError,
)
from dropshop.domain.model.value_objects import finite_number

DEFAULT_STOCK = 1


@dataclass
class StockLevel:
    """Aggregate root for the stock counter.

    Invariants:
    - ``units`` is an integer and always >= 0
    - ``take()`` either removes the full quantity or changes nothing
    """

    units: int = DEFAULT_STOCK

    def __post_init__(self) -> None:
        if not isinstance(self.units, int) or isinstance(self.units, bool):
            raise ValidationError(
                f"Stock must be an integer, got {type(self.units).__name__}"
            )
        if self.units < 0:
            raise ValidationError(f"Stock cannot be negative, got {self.units}")

    def ensure_available(self, quantity: int) -> None:
        """Raise if ``quantity`` units cannot be taken right now."""
        if self.units <= 0:
            raise OutOfStockError()
        if quantity > self.units:
            raise InsufficientStockError(requested=quantity, available=self.units)

    def take(self, quantity: int) -> None:
        """Remove ``quantity`` units (a simulated sale)."""
        if quantity <= 0:
            raise ValidationError("Purchase quantity must be positive")
        self.ensure_available(quantity)
        self.units -= quantity

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def clamped(raw: object) -> StockLevel:
        """Lenient admin input: junk becomes 0, fractions truncate, negatives clamp."""
        value = finite_number(raw)
        if value is None:
            return StockLevel(0)
        return StockLevel(max(0, math.trunc(value)))

    @staticmethod
    def strict(raw: object) -> StockLevel:
        """Strict admin input: junk or negative values are rejected."""
        value = finite_number(raw)
        if value is None:
            raise ValidationError(f"Stock must be a finite number, got {raw!r}")
        if value < 0:
            raise ValidationError(f"Stock cannot be negative, got {raw!r}")
        return StockLevel(math.floor(value))
