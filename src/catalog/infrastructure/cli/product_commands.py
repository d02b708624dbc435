"""CLI commands for building a single product of each kind."""

from __future__ import annotations

import click

from catalog.application.add_product import AddProductHandler
from catalog.application.dto import ProductSpec
from catalog.application.show_catalog import ShowCatalogHandler
from catalog.domain.exceptions import DomainException
from catalog.infrastructure.bootstrap import identity_allocator, product_repository

_name_option = click.option("--name", required=True, help="Product name.")
_price_option = click.option("--price", required=True, help="Price (e.g. 14.99).")


def _add_and_print(spec: ProductSpec) -> None:
    handler = AddProductHandler(
        product_repo=product_repository(),
        allocator=identity_allocator(),
    )

    try:
        product = handler.handle(spec)
        dto = ShowCatalogHandler.to_dto(product)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(dto.description)
    click.echo(f"Price with coupon: {dto.discounted_price}")


@click.command("generic")
@_name_option
@_price_option
def product_generic(name: str, price: str) -> None:
    """Describe a plain product."""
    _add_and_print(ProductSpec(kind="generic", name=name, price=price))


@click.command("electronics")
@_name_option
@_price_option
@click.option("--brand", required=True, help="Manufacturer brand.")
@click.option("--battery/--no-battery", default=False, help="Ships with a battery.")
def product_electronics(name: str, price: str, brand: str, battery: bool) -> None:
    """Describe an electronics product."""
    _add_and_print(
        ProductSpec(
            kind="electronics", name=name, price=price,
            brand=brand, has_battery=battery,
        )
    )


@click.command("grocery")
@_name_option
@_price_option
@click.option("--weight", required=True, help="Weight in kilograms (e.g. 0.25).")
@click.option("--perishable/--no-perishable", default=False, help="Spoils over time.")
def product_grocery(name: str, price: str, weight: str, perishable: bool) -> None:
    """Describe a grocery product."""
    _add_and_print(
        ProductSpec(
            kind="grocery", name=name, price=price,
            weight=weight, is_perishable=perishable,
        )
    )


@click.command("toy")
@_name_option
@_price_option
@click.option("--min-age", required=True, type=int, help="Minimum age in years.")
def product_toy(name: str, price: str, min_age: int) -> None:
    """Describe a toy."""
    _add_and_print(ProductSpec(kind="toy", name=name, price=price, min_age=min_age))
