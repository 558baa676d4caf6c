"""Product entity, the only thing the inventory tracks.

A product is enrolled once (``Product.create``), changed only through
a ``ProductUpdate`` merged by the repository, and deleted outright.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from datetime import datetime

from ims.domain.exceptions import ValidationError
from ims.domain.model.value_objects import Money


@dataclass
class Product:
    """A product in the inventory.

    The ``__init__`` does no validation so the storage adapter can
    reconstitute whatever was persisted. Use ``Product.create()`` for
    new records.

    ``unit_of_measure`` and ``price`` are both optional: older blobs
    carry a price, newer ones a unit of measure, and either loads.
    """

    id: str
    name: str
    barcode: str
    quantity: int
    created_at: datetime
    updated_at: datetime
    description: str | None = None
    unit_of_measure: str | None = None
    category: str | None = None
    price: Money | None = None

    @staticmethod
    def create(
        product_id: str,
        new: NewProduct,
        now: datetime,
    ) -> Product:
        """Build a brand-new product stamped with ``now``."""
        return Product(
            id=product_id,
            name=new.name,
            barcode=new.barcode,
            quantity=new.quantity,
            description=new.description,
            unit_of_measure=new.unit_of_measure,
            category=new.category,
            price=new.price,
            created_at=now,
            updated_at=now,
        )

    def apply(self, changes: ProductUpdate, now: datetime) -> None:
        """Merge the non-``None`` fields of *changes* and stamp ``updated_at``."""
        for name, value in changes.items():
            setattr(self, name, value)
        self.updated_at = now


@dataclass(frozen=True)
class NewProduct:
    """Input for enrolling a product: everything except id and timestamps."""

    name: str
    barcode: str
    quantity: int = 0
    description: str | None = None
    unit_of_measure: str | None = None
    category: str | None = None
    price: Money | None = None

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValidationError("Name and barcode are required")
        if not self.barcode or not self.barcode.strip():
            raise ValidationError("Name and barcode are required")
        _check_quantity(self.quantity)


@dataclass(frozen=True)
class ProductUpdate:
    """Partial update of a product.

    ``None`` means "leave this field alone". Pass an empty string to
    clear one of the optional text fields. ``id`` and ``created_at``
    cannot be changed.
    """

    name: str | None = None
    description: str | None = None
    barcode: str | None = None
    quantity: int | None = None
    unit_of_measure: str | None = None
    category: str | None = None
    price: Money | None = None

    def __post_init__(self) -> None:
        if self.name is not None and not self.name.strip():
            raise ValidationError("Product name cannot be empty")
        if self.barcode is not None and not self.barcode.strip():
            raise ValidationError("Barcode cannot be empty")
        if self.quantity is not None:
            _check_quantity(self.quantity)

    def items(self) -> list[tuple[str, object]]:
        """Return ``(field, value)`` pairs for the fields that are set."""
        return [
            (f.name, getattr(self, f.name))
            for f in fields(self)
            if getattr(self, f.name) is not None
        ]

    def is_empty(self) -> bool:
        return not self.items()


def _check_quantity(quantity: int) -> None:
    # bool is an int subclass; reject it explicitly
    if not isinstance(quantity, int) or isinstance(quantity, bool):
        raise ValidationError(
            f"Quantity must be an integer, got {type(quantity).__name__}"
        )
    if quantity < 0:
        raise ValidationError("Quantity cannot be negative")
