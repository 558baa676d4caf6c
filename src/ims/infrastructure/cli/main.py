import logging

import click

from ims.infrastructure.cli.barcode_commands import barcode_check, barcode_generate
from ims.infrastructure.cli.inventory_commands import (
    demo_load,
    inventory_adjust,
    inventory_count,
    inventory_show,
)
from ims.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
    product_show,
    product_update,
)
from ims.infrastructure.config import get_settings


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Log debug output to stderr.")
def cli(verbose: bool) -> None:
    """IMS: Inventory Management System"""
    level = logging.DEBUG if verbose else get_settings().log_level.upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def inventory() -> None:
    """Count and adjust stock."""


@cli.group()
def barcode() -> None:
    """Generate and check barcodes."""


@cli.group()
def demo() -> None:
    """Sample data."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_show)
product.add_command(product_update)
inventory.add_command(inventory_adjust)
inventory.add_command(inventory_count)
inventory.add_command(inventory_show)
barcode.add_command(barcode_check)
barcode.add_command(barcode_generate)
demo.add_command(demo_load)
