"""CLI commands for barcodes."""

from __future__ import annotations

import click

from ims.application.generate_barcode import GenerateBarcodeHandler
from ims.domain.exceptions import DomainException
from ims.infrastructure.bootstrap import barcode_generator, product_repository


@click.command("generate")
def barcode_generate() -> None:
    """Print a new time-based barcode."""
    handler = GenerateBarcodeHandler(product_repository(), barcode_generator())
    click.echo(handler.generate())


@click.command("check")
@click.argument("value")
def barcode_check(value: str) -> None:
    """Check that VALUE can be used as a custom barcode."""
    handler = GenerateBarcodeHandler(product_repository(), barcode_generator())

    try:
        barcode = handler.custom(value)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Barcode {barcode} is ready to use")
