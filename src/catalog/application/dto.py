"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ProductSpec:
    """Input: a product to add, as typed by the user.

    Only the fields of the requested ``kind`` are read.
    """

    kind: str
    name: str
    price: str
    brand: str | None = None
    has_battery: bool = False
    weight: str | None = None
    is_perishable: bool = False
    min_age: int | None = None


@dataclass(frozen=True)
class ProductDTO:
    """Output: a product as displayed to the user."""

    id: int
    kind: str
    name: str
    price: str  # formatted, e.g. "$14.99"
    discounted_price: str  # coupon applied, e.g. "$13.49"
    description: str
