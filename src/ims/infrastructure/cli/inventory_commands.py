"""CLI commands for counting and adjusting stock."""

from __future__ import annotations

import click

from ims.application.adjust_stock import AdjustStockHandler
from ims.application.load_demo_data import LoadDemoDataHandler
from ims.application.lookup_product import LookupProductHandler
from ims.application.show_inventory import ShowInventoryHandler
from ims.domain.exceptions import DomainException
from ims.domain.model.stock_adjustment import AdjustmentType
from ims.infrastructure.bootstrap import low_stock_threshold, product_repository
from ims.infrastructure.scanner import KeyboardWedgeScanner

_SIGNS = {
    "+": AdjustmentType.ADD,
    "-": AdjustmentType.SUBTRACT,
    "=": AdjustmentType.SET,
}


def _parse_adjustment(raw: str) -> tuple[AdjustmentType, int]:
    """Parse '+5', '-3' or '=10' (a bare number means add)."""
    raw = raw.strip()
    adjustment = _SIGNS.get(raw[:1])
    digits = raw[1:] if adjustment is not None else raw
    try:
        amount = int(digits)
    except ValueError:
        raise click.BadParameter(
            f"Invalid adjustment '{raw}'. Expected +N, -N or =N."
        )
    return adjustment or AdjustmentType.ADD, amount


@click.command("show")
@click.option("--search", default="", help="Filter by name, barcode or category.")
def inventory_show(search: str) -> None:
    """Show stock levels and totals."""
    handler = ShowInventoryHandler(product_repository(), low_stock_threshold())
    inventory = handler.handle(search=search)

    click.echo(
        f"Products: {inventory.total_products}   "
        f"Units: {inventory.total_units}   "
        f"Low stock: {inventory.low_stock_count}"
    )
    if not inventory.lines:
        click.echo("No inventory records found.")
        return

    click.echo()
    click.echo(f"{'Product':<24} {'Category':<18} {'Qty':>6}")
    click.echo("-" * 50)
    for line in inventory.lines:
        flag = "  LOW STOCK" if line.low_stock else ""
        click.echo(f"{line.name:<24} {line.category or '':<18} {line.quantity:>6}{flag}")


@click.command("adjust")
@click.argument("barcode")
@click.option(
    "--type", "adjustment",
    type=click.Choice([t.value for t in AdjustmentType]),
    default=AdjustmentType.ADD.value, show_default=True,
    help="Add to, remove from, or set the on-hand quantity.",
)
@click.option("--amount", required=True, type=click.IntRange(min=0), help="Number of units.")
def inventory_adjust(barcode: str, adjustment: str, amount: int) -> None:
    """Adjust the stock of the product with BARCODE."""
    handler = AdjustStockHandler(product_repository())

    try:
        dto = handler.handle(barcode=barcode, amount=amount, adjustment=adjustment)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"{dto.product_name}: quantity updated {dto.old_quantity} -> {dto.new_quantity}")


@click.command("count")
def inventory_count() -> None:
    """Scan barcodes one after another and adjust each product's stock.

    Point a keyboard-wedge scanner at the terminal (or type barcodes).
    A blank line ends the session.
    """
    repo = product_repository()
    lookup = LookupProductHandler(repo)
    adjust = AdjustStockHandler(repo)

    with KeyboardWedgeScanner() as scanner:
        while True:
            click.echo("Scan barcode (blank line to finish): ", nl=False)
            barcode = scanner.read()
            if barcode is None:
                click.echo()
                break

            try:
                product = lookup.handle(barcode)
            except DomainException as exc:
                click.echo(f"Error: {exc}", err=True)
                continue

            click.echo(f"Product found: {product.name} (on hand: {product.quantity})")
            raw = click.prompt(
                "Adjust (+N add, -N remove, =N set, blank to skip)",
                default="", show_default=False,
            )
            if not raw.strip():
                continue

            try:
                adjustment, amount = _parse_adjustment(raw)
                dto = adjust.handle(barcode=barcode, amount=amount, adjustment=adjustment)
            except (click.BadParameter, DomainException) as exc:
                click.echo(f"Error: {exc}", err=True)
                continue

            click.echo(f"Quantity updated: {dto.old_quantity} -> {dto.new_quantity}")

    if adjust.recent:
        click.echo("Recent updates:")
        for dto in adjust.recent:
            click.echo(
                f"  {dto.timestamp}  {dto.product_name:<24} "
                f"{dto.old_quantity} -> {dto.new_quantity}"
            )


@click.command("load")
def demo_load() -> None:
    """Load sample products into an empty inventory."""
    added = LoadDemoDataHandler(product_repository()).handle()
    if added:
        click.echo(f"Loaded {added} demo products.")
    else:
        click.echo("Inventory is not empty; demo data not loaded.")
