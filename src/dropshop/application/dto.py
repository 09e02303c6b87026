"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry results from the handlers to the web and CLI layers without
exposing domain internals.  None of them ever holds card data beyond
the masked form.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class StockDTO:
    stock: int


@dataclass(frozen=True)
class PurchaseResultDTO:
    quantity: int
    stock: int


@dataclass(frozen=True)
class CheckoutResultDTO:
    message: str
    quantity: int
    masked_card: str
    stock: int
