import click

from catalog.infrastructure.cli.demo_commands import demo
from catalog.infrastructure.cli.product_commands import (
    product_electronics,
    product_generic,
    product_grocery,
    product_toy,
)
from catalog.infrastructure.config import configure_logging


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr.")
def cli(verbose: bool) -> None:
    """Store Catalog: products, identity and coupon pricing"""
    configure_logging(verbose)


@cli.group()
def product() -> None:
    """Describe a single product."""


# Register subcommands
cli.add_command(demo)
product.add_command(product_generic)
product.add_command(product_electronics)
product.add_command(product_grocery)
product.add_command(product_toy)
