"""CLI commands for enrolling and editing products."""

from __future__ import annotations

import click

from ims.application.delete_product import DeleteProductHandler
from ims.application.dto import ProductDTO
from ims.application.enroll_product import EnrollProductHandler
from ims.application.lookup_product import LookupProductHandler
from ims.application.show_inventory import ShowInventoryHandler
from ims.application.update_product import UpdateProductHandler
from ims.domain.exceptions import DomainException
from ims.infrastructure.bootstrap import (
    barcode_generator,
    low_stock_threshold,
    product_repository,
)


def display_product(dto: ProductDTO) -> None:
    """Shared formatting for showing a single product."""
    click.echo(f"Product #{dto.id}  {dto.name}")
    click.echo(f"Barcode:  {dto.barcode}")
    click.echo(f"Quantity: {dto.quantity}" + (f" {dto.unit_of_measure}" if dto.unit_of_measure else ""))
    if dto.category:
        click.echo(f"Category: {dto.category}")
    if dto.price:
        click.echo(f"Price:    {dto.price}")
    if dto.description:
        click.echo(f"          {dto.description}")
    click.echo(f"Created:  {dto.created_at}")
    click.echo(f"Updated:  {dto.updated_at}")


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--barcode", default=None, help="Barcode value.")
@click.option("--generate", is_flag=True, help="Generate a new barcode.")
@click.option("--quantity", default=0, type=click.IntRange(min=0), help="Initial stock.")
@click.option("--description", default=None, help="Free-text description.")
@click.option("--unit", "unit_of_measure", default=None, help="Unit of measure (e.g. pcs, kg).")
@click.option("--category", default=None, help="Category.")
@click.option("--price", default=None, help="Unit price (e.g. 15.00).")
def product_add(
    name: str,
    barcode: str | None,
    generate: bool,
    quantity: int,
    description: str | None,
    unit_of_measure: str | None,
    category: str | None,
    price: str | None,
) -> None:
    """Enroll a new product."""
    handler = EnrollProductHandler(
        product_repo=product_repository(),
        barcode_generator=barcode_generator(),
    )

    try:
        dto = handler.handle(
            name=name,
            barcode=barcode,
            quantity=quantity,
            description=description,
            unit_of_measure=unit_of_measure,
            category=category,
            price=price,
            generate_barcode=generate,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{dto.id} '{dto.name}' added with barcode {dto.barcode}")


@click.command("list")
@click.option("--search", default="", help="Filter by name, barcode or category.")
def product_list(search: str) -> None:
    """List products in the inventory."""
    handler = ShowInventoryHandler(product_repository(), low_stock_threshold())
    inventory = handler.handle(search=search)

    if not inventory.lines:
        if search:
            click.echo("No products found matching your search.")
        else:
            click.echo("No products in inventory. Add some products to get started!")
        return

    click.echo(f"{'ID':<18} {'Name':<24} {'Barcode':<15} {'Qty':>6}")
    click.echo("-" * 66)
    for line in inventory.lines:
        click.echo(f"{line.product_id:<18} {line.name:<24} {line.barcode:<15} {line.quantity:>6}")


@click.command("show")
@click.argument("barcode")
def product_show(barcode: str) -> None:
    """Show the product with BARCODE."""
    handler = LookupProductHandler(product_repository())

    try:
        dto = handler.handle(barcode)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    display_product(dto)


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--description", default=None, help="New description ('' clears it).")
@click.option("--barcode", default=None, help="New barcode.")
@click.option("--quantity", default=None, type=click.IntRange(min=0), help="New quantity.")
@click.option("--unit", "unit_of_measure", default=None, help="New unit of measure.")
@click.option("--category", default=None, help="New category.")
@click.option("--price", default=None, help="New price (e.g. 29.99).")
def product_update(
    product_id: str,
    name: str | None,
    description: str | None,
    barcode: str | None,
    quantity: int | None,
    unit_of_measure: str | None,
    category: str | None,
    price: str | None,
) -> None:
    """Update a product's details."""
    handler = UpdateProductHandler(product_repo=product_repository())

    try:
        dto = handler.handle(
            product_id=product_id,
            name=name,
            description=description,
            barcode=barcode,
            quantity=quantity,
            unit_of_measure=unit_of_measure,
            category=category,
            price=price,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{dto.id} updated")
    display_product(dto)


@click.command("delete")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.confirmation_option(prompt="Are you sure you want to delete this product?")
def product_delete(product_id: str) -> None:
    """Delete a product."""
    handler = DeleteProductHandler(product_repo=product_repository())

    try:
        handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} deleted")
