"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from ims.domain.model.product import Product
from ims.domain.model.stock_adjustment import StockAdjustment


@dataclass(frozen=True)
class ProductDTO:
    """Output: a product as displayed to the user."""

    id: str
    name: str
    barcode: str
    quantity: int
    description: str | None
    unit_of_measure: str | None
    category: str | None
    price: str | None  # formatted, e.g. "$15.00"
    created_at: str
    updated_at: str


@dataclass(frozen=True)
class InventoryLineDTO:
    product_id: str
    name: str
    barcode: str
    quantity: int
    category: str | None
    low_stock: bool


@dataclass(frozen=True)
class InventoryDTO:
    """Output: (filtered) inventory lines plus whole-inventory stats."""

    lines: list[InventoryLineDTO]
    total_products: int
    total_units: int
    low_stock_count: int


@dataclass(frozen=True)
class StockAdjustmentDTO:
    product_id: str
    product_name: str
    barcode: str
    adjustment: str
    amount: int
    old_quantity: int
    new_quantity: int
    timestamp: str


def to_product_dto(product: Product) -> ProductDTO:
    return ProductDTO(
        id=product.id,
        name=product.name,
        barcode=product.barcode,
        quantity=product.quantity,
        description=product.description,
        unit_of_measure=product.unit_of_measure,
        category=product.category,
        price=str(product.price) if product.price is not None else None,
        created_at=product.created_at.strftime("%Y-%m-%d %H:%M UTC"),
        updated_at=product.updated_at.strftime("%Y-%m-%d %H:%M UTC"),
    )


def to_adjustment_dto(adjustment: StockAdjustment) -> StockAdjustmentDTO:
    return StockAdjustmentDTO(
        product_id=adjustment.product_id,
        product_name=adjustment.product_name,
        barcode=adjustment.barcode,
        adjustment=adjustment.adjustment.value,
        amount=adjustment.amount,
        old_quantity=adjustment.old_quantity,
        new_quantity=adjustment.new_quantity,
        timestamp=adjustment.timestamp.strftime("%H:%M:%S"),
    )
