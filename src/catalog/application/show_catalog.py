"""Application service: Show Catalog use case (query)."""

from __future__ import annotations

from catalog.application.dto import ProductDTO
from catalog.domain.model.pricing import discounted_price
from catalog.domain.model.product import Product
from catalog.domain.repository.product_repository import ProductRepository


class ShowCatalogHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self) -> list[ProductDTO]:
        return [self.to_dto(p) for p in self._product_repo.list_all()]

    @staticmethod
    def to_dto(product: Product) -> ProductDTO:
        return ProductDTO(
            id=product.id,
            kind=product.kind.value,
            name=product.name,
            price=str(product.price),
            discounted_price=str(discounted_price(product.price)),
            description=product.describe(),
        )
