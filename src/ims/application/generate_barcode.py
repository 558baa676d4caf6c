"""Application service: Generate Barcode use case.

Either produces a fresh time-based barcode or vets a custom one
before it is printed or handed to enrollment.
"""

from __future__ import annotations

from ims.domain.exceptions import DuplicateBarcodeError, ValidationError
from ims.domain.repository.product_repository import ProductRepository
from ims.domain.service.barcode_generator import BarcodeGenerator

MIN_CUSTOM_BARCODE_LENGTH = 4


class GenerateBarcodeHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        barcode_generator: BarcodeGenerator | None = None,
    ) -> None:
        self._product_repo = product_repo
        self._barcode_generator = barcode_generator or BarcodeGenerator()

    def generate(self) -> str:
        return self._barcode_generator.generate()

    def custom(self, value: str) -> str:
        """Validate a user-chosen barcode and return it stripped."""
        value = (value or "").strip()
        if not value:
            raise ValidationError("Please enter a barcode value")
        if len(value) < MIN_CUSTOM_BARCODE_LENGTH:
            raise ValidationError(
                f"Barcode must be at least {MIN_CUSTOM_BARCODE_LENGTH} characters long"
            )

        existing = self._product_repo.find_by_barcode(value)
        if existing is not None:
            raise DuplicateBarcodeError(value, existing.name)
        return value
