"""Tests for the in-memory product repository."""

from catalog.domain.model.product import Product, Toy
from catalog.domain.model.value_objects import Money
from catalog.infrastructure.persistence.in_memory_product_repository import (
    InMemoryProductRepository,
)


def test_save_and_get():
    repo = InMemoryProductRepository()
    widget = Product(id=1, name="Widget", price=Money.of("1"))
    repo.save(widget)
    assert repo.get_by_id(1) is widget


def test_get_missing_returns_none():
    assert InMemoryProductRepository().get_by_id(42) is None


def test_save_replaces_same_id():
    repo = InMemoryProductRepository()
    repo.save(Toy(id=1, name="Doll", price=Money.of("14.99"), min_age=3))
    repo.save(Toy(id=1, name="Doll", price=Money.of("9.99"), min_age=3))
    assert len(repo.list_all()) == 1
    assert repo.get_by_id(1).price == Money.of("9.99")


def test_seeded_products_listed_in_order():
    products = [
        Product(id=2, name="B", price=Money.of("1")),
        Product(id=1, name="A", price=Money.of("1")),
    ]
    repo = InMemoryProductRepository(products)
    assert repo.list_all() == products
