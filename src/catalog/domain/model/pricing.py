"""Coupon pricing."""

from __future__ import annotations

from decimal import Decimal

from catalog.domain.exceptions import ValidationError
from catalog.domain.model.value_objects import Money

# ---------------------------------------------------------------------------
# Constants for business rules
# ---------------------------------------------------------------------------
DISCOUNT_RATE = Decimal("0.10")


def discounted_price(price: Money, rate: Decimal = DISCOUNT_RATE) -> Money:
    """Price after applying the coupon ``rate``, rounded to cents.

    >>> str(discounted_price(Money.of("14.99")))
    '$13.49'
    """
    if not Decimal("0") <= rate <= Decimal("1"):
        raise ValidationError(f"Invalid discount rate {rate}, expected 0..1")
    return (price * (Decimal("1") - rate)).rounded()
