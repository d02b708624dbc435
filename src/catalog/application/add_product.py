"""Application service: Add Product use case."""

from __future__ import annotations

import logging

from catalog.application.dto import ProductSpec
from catalog.domain.exceptions import ValidationError
from catalog.domain.model.identity import IdentityAllocator
from catalog.domain.model.product import (
    Electronics,
    Grocery,
    Product,
    ProductKind,
    Toy,
)
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class AddProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        allocator: IdentityAllocator | None = None,
    ) -> None:
        self._product_repo = product_repo
        self._allocator = allocator

    def handle(self, spec: ProductSpec) -> Product:
        """Create a product of the requested kind and add it to the catalog."""
        if not spec.name or not spec.name.strip():
            raise ValidationError("Product name is required")

        kind = self._parse_kind(spec.kind)
        product = self._build(kind, spec)
        self._product_repo.save(product)

        logger.info("Added %s product #%d '%s'", kind.value, product.id, product.name)
        return product

    # --- Internal helpers -----------------------------------------------------

    def _build(self, kind: ProductKind, spec: ProductSpec) -> Product:
        name = spec.name.strip()

        if kind is ProductKind.ELECTRONICS:
            if not spec.brand:
                raise ValidationError("Brand is required for electronics")
            return Electronics.create(
                name, spec.price, spec.brand, spec.has_battery,
                allocator=self._allocator,
            )

        if kind is ProductKind.GROCERY:
            if spec.weight is None:
                raise ValidationError("Weight is required for groceries")
            return Grocery.create(
                name, spec.price, spec.weight, spec.is_perishable,
                allocator=self._allocator,
            )

        if kind is ProductKind.TOY:
            if spec.min_age is None:
                raise ValidationError("Minimum age is required for toys")
            return Toy.create(name, spec.price, spec.min_age, allocator=self._allocator)

        return Product.create(name, spec.price, allocator=self._allocator)

    @staticmethod
    def _parse_kind(raw: str) -> ProductKind:
        try:
            return ProductKind(raw.strip().lower())
        except ValueError:
            allowed = ", ".join(k.value for k in ProductKind)
            raise ValidationError(
                f"Unknown product kind '{raw}' (expected one of: {allowed})"
            ) from None
