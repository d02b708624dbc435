"""Application service: Compare Products use case (query)."""

from __future__ import annotations

import logging

from catalog.domain.exceptions import EntityNotFoundError
from catalog.domain.model.product import Product
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class CompareProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, first_id: int, second_id: int) -> bool:
        """True when the two catalog entries are the same product.

        Products compare by id and name only, so two entries created
        separately are never equal even if every other field matches.
        """
        first = self._get(first_id)
        second = self._get(second_id)
        same = first == second
        logger.debug("Compared product #%d with #%d: %s", first_id, second_id, same)
        return same

    def _get(self, product_id: int) -> Product:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
        return product
