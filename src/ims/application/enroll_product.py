"""Application service: Enroll Product use case."""

from __future__ import annotations

from ims.application.dto import ProductDTO, to_product_dto
from ims.domain.exceptions import DuplicateBarcodeError, ValidationError
from ims.domain.model.product import NewProduct
from ims.domain.model.value_objects import Money
from ims.domain.repository.product_repository import ProductRepository
from ims.domain.service.barcode_generator import BarcodeGenerator


class EnrollProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        barcode_generator: BarcodeGenerator | None = None,
    ) -> None:
        self._product_repo = product_repo
        self._barcode_generator = barcode_generator or BarcodeGenerator()

    def handle(
        self,
        name: str,
        barcode: str | None = None,
        quantity: int = 0,
        description: str | None = None,
        unit_of_measure: str | None = None,
        category: str | None = None,
        price: str | None = None,
        generate_barcode: bool = False,
    ) -> ProductDTO:
        """Add a new product to the inventory."""
        if generate_barcode:
            if barcode:
                raise ValidationError("Give either a barcode or --generate, not both")
            barcode = self._barcode_generator.generate()

        if not name or not name.strip() or not barcode or not barcode.strip():
            raise ValidationError("Name and barcode are required")
        barcode = barcode.strip()

        existing = self._product_repo.find_by_barcode(barcode)
        if existing is not None:
            raise DuplicateBarcodeError(barcode, existing.name)

        fields = NewProduct(
            name=name.strip(),
            barcode=barcode,
            quantity=quantity,
            description=description or None,
            unit_of_measure=unit_of_measure or None,
            category=category or None,
            price=Money.of(price) if price else None,
        )
        return to_product_dto(self._product_repo.create(fields))
