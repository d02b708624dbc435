"""Integration tests for the AddProduct use case.

Uses the in-memory repository and a private allocator per test.
"""

from decimal import Decimal

import pytest

from catalog.application.add_product import AddProductHandler
from catalog.application.dto import ProductSpec
from catalog.domain.exceptions import ValidationError
from catalog.domain.model.identity import IdentityAllocator
from catalog.domain.model.product import Electronics, Grocery, Product, Toy
from catalog.domain.model.value_objects import Money
from catalog.infrastructure.persistence.in_memory_product_repository import (
    InMemoryProductRepository,
)


def _setup() -> tuple[AddProductHandler, InMemoryProductRepository]:
    repo = InMemoryProductRepository()
    handler = AddProductHandler(repo, IdentityAllocator())
    return handler, repo


class TestAddProductHappyPath:

    def test_adds_generic_product(self):
        handler, repo = _setup()
        product = handler.handle(ProductSpec(kind="generic", name="Widget", price="15.00"))
        assert type(product) is Product
        assert product.id == 1
        assert repo.get_by_id(1) is product

    def test_adds_each_variant(self):
        handler, repo = _setup()
        tv = handler.handle(ProductSpec(
            kind="electronics", name="Smart TV", price="399.99",
            brand="Samsung", has_battery=True,
        ))
        apple = handler.handle(ProductSpec(
            kind="grocery", name="Apple", price="0.99",
            weight="0.25", is_perishable=True,
        ))
        doll = handler.handle(ProductSpec(kind="toy", name="Doll", price="14.99", min_age=3))

        assert isinstance(tv, Electronics) and tv.brand == "Samsung"
        assert isinstance(apple, Grocery) and apple.weight == Decimal("0.25")
        assert isinstance(doll, Toy) and doll.price == Money.of("14.99")
        assert [p.id for p in repo.list_all()] == [1, 2, 3]

    def test_kind_is_case_insensitive(self):
        handler, _ = _setup()
        product = handler.handle(ProductSpec(kind=" Toy ", name="Ball", price="2", min_age=1))
        assert isinstance(product, Toy)

    def test_name_is_stripped(self):
        handler, _ = _setup()
        product = handler.handle(ProductSpec(kind="generic", name="  Widget ", price="1"))
        assert product.name == "Widget"

    def test_uses_injected_allocator(self):
        repo = InMemoryProductRepository()
        handler = AddProductHandler(repo, IdentityAllocator(start=41))
        product = handler.handle(ProductSpec(kind="generic", name="Widget", price="1"))
        assert product.id == 41


class TestAddProductValidation:

    @pytest.mark.parametrize("name", ["", "   "])
    def test_name_required(self, name):
        handler, _ = _setup()
        with pytest.raises(ValidationError, match="name is required"):
            handler.handle(ProductSpec(kind="generic", name=name, price="1"))

    def test_unknown_kind_rejected(self):
        handler, _ = _setup()
        with pytest.raises(ValidationError, match="Unknown product kind 'book'"):
            handler.handle(ProductSpec(kind="book", name="Novel", price="9"))

    @pytest.mark.parametrize(
        "spec, message",
        [
            (ProductSpec(kind="electronics", name="TV", price="1"), "Brand is required"),
            (ProductSpec(kind="grocery", name="Pear", price="1"), "Weight is required"),
            (ProductSpec(kind="toy", name="Ball", price="1"), "Minimum age is required"),
        ],
    )
    def test_variant_field_required(self, spec, message):
        handler, repo = _setup()
        with pytest.raises(ValidationError, match=message):
            handler.handle(spec)
        assert repo.list_all() == []

    def test_bad_price_rejected(self):
        handler, repo = _setup()
        with pytest.raises(ValidationError, match="Invalid money amount"):
            handler.handle(ProductSpec(kind="generic", name="Widget", price="abc"))
        assert repo.list_all() == []
