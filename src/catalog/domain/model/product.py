"""Product aggregate and its category variants.

A product is identified by the id handed out by an ``IdentityAllocator``
when it is created. Equality follows that identity: two products are equal
when they share id and name, whatever their price or category fields say.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, ClassVar, final

from catalog.domain.exceptions import ValidationError
from catalog.domain.model.identity import DEFAULT_ALLOCATOR, IdentityAllocator
from catalog.domain.model.value_objects import Money


class ProductKind(Enum):
    GENERIC = "generic"
    ELECTRONICS = "electronics"
    GROCERY = "grocery"
    TOY = "toy"


def _allocate(allocator: IdentityAllocator | None) -> int:
    return (allocator if allocator is not None else DEFAULT_ALLOCATOR).next_id()


def _to_money(price: Money | str | float | int | Decimal) -> Money:
    return price if isinstance(price, Money) else Money.of(price)


def _yes_no(flag: bool) -> str:
    return "Yes" if flag else "No"


@dataclass(frozen=True, eq=False)
class Product:
    """A product in the catalog.

    Use the ``create()`` factories for new products; they allocate the
    id. The ``__init__`` takes an explicit id so a repository or a test
    can reconstitute a known product without touching the allocator.
    """

    kind: ClassVar[ProductKind] = ProductKind.GENERIC

    id: int
    name: str
    price: Money

    # --- Factory (used for NEW products only) ---------------------------------

    @classmethod
    def create(
        cls,
        name: str,
        price: Money | str | float | int | Decimal,
        *,
        allocator: IdentityAllocator | None = None,
    ) -> Product:
        money = _to_money(price)
        return cls(id=_allocate(allocator), name=name, price=money)

    # --- Display --------------------------------------------------------------

    def describe(self) -> str:
        return f"Product ID: {self.id}, Name: {self.name}, Price: {self.price}"

    def __str__(self) -> str:
        return self.describe()

    # --- Equality -------------------------------------------------------------

    def __eq__(self, other: Any) -> bool:
        if other is self:
            return True
        if not isinstance(other, Product):
            return False
        # Price and category fields are not part of a product's identity.
        return self.id == other.id and self.name == other.name

    def __hash__(self) -> int:
        return hash((self.id, self.name))

    def equals(self, other: Any) -> bool:
        return self == other


@dataclass(frozen=True, eq=False)
class Electronics(Product):
    """An electronics product, optionally shipped with a battery."""

    kind: ClassVar[ProductKind] = ProductKind.ELECTRONICS

    brand: str
    has_battery: bool

    @classmethod
    def create(  # type: ignore[override]
        cls,
        name: str,
        price: Money | str | float | int | Decimal,
        brand: str,
        has_battery: bool,
        *,
        allocator: IdentityAllocator | None = None,
    ) -> Electronics:
        money = _to_money(price)
        return cls(
            id=_allocate(allocator),
            name=name,
            price=money,
            brand=brand,
            has_battery=has_battery,
        )

    def describe(self) -> str:
        return (
            f"{super().describe()}, Brand: {self.brand}, "
            f"Battery: {_yes_no(self.has_battery)}"
        )


@dataclass(frozen=True, eq=False)
class Grocery(Product):
    """A grocery item. ``weight`` is in kilograms."""

    kind: ClassVar[ProductKind] = ProductKind.GROCERY

    weight: Decimal
    is_perishable: bool

    @classmethod
    def create(  # type: ignore[override]
        cls,
        name: str,
        price: Money | str | float | int | Decimal,
        weight: str | float | int | Decimal,
        is_perishable: bool,
        *,
        allocator: IdentityAllocator | None = None,
    ) -> Grocery:
        try:
            kilograms = Decimal(str(weight))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid weight: {weight!r}") from exc
        money = _to_money(price)
        return cls(
            id=_allocate(allocator),
            name=name,
            price=money,
            weight=kilograms,
            is_perishable=is_perishable,
        )

    def describe(self) -> str:
        return (
            f"{super().describe()}, Weight: {self.weight}kg, "
            f"Perishable: {_yes_no(self.is_perishable)}"
        )


@final
@dataclass(frozen=True, eq=False)
class Toy(Product):
    """A toy. Terminal variant: not meant to be subclassed."""

    kind: ClassVar[ProductKind] = ProductKind.TOY

    min_age: int

    @classmethod
    def create(  # type: ignore[override]
        cls,
        name: str,
        price: Money | str | float | int | Decimal,
        min_age: int,
        *,
        allocator: IdentityAllocator | None = None,
    ) -> Toy:
        money = _to_money(price)
        return cls(
            id=_allocate(allocator),
            name=name,
            price=money,
            min_age=min_age,
        )

    def describe(self) -> str:
        return f"{super().describe()}, Minimum Age: {self.min_age}"
