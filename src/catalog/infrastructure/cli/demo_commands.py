"""CLI command running the sample catalog walkthrough."""

from __future__ import annotations

import click

from catalog.application.add_product import AddProductHandler
from catalog.application.compare_products import CompareProductsHandler
from catalog.application.dto import ProductSpec
from catalog.application.show_catalog import ShowCatalogHandler
from catalog.domain.exceptions import DomainException
from catalog.infrastructure.bootstrap import identity_allocator, product_repository

SAMPLE_PRODUCTS = [
    ProductSpec(
        kind="electronics", name="Smart TV", price="399.99",
        brand="Samsung", has_battery=True,
    ),
    ProductSpec(
        kind="grocery", name="Apple", price="0.99",
        weight="0.25", is_perishable=True,
    ),
    ProductSpec(kind="toy", name="Doll", price="14.99", min_age=3),
]


@click.command("demo")
def demo() -> None:
    """Build a sample catalog and show descriptions, equality and discounts."""
    repo = product_repository()
    add = AddProductHandler(product_repo=repo, allocator=identity_allocator())
    compare = CompareProductsHandler(product_repo=repo)

    try:
        products = [add.handle(spec) for spec in SAMPLE_PRODUCTS]
        doll = products[-1]
        doll2 = add.handle(SAMPLE_PRODUCTS[-1])

        for dto in ShowCatalogHandler(product_repo=repo).handle():
            click.echo(dto.description)
        click.echo()

        click.echo(f"doll equals doll:  {compare.handle(doll.id, doll.id)}")
        click.echo(f"doll equals doll2: {compare.handle(doll.id, doll2.id)}")
        dto = ShowCatalogHandler.to_dto(doll)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Discounted price of {dto.name}: {dto.discounted_price}")
