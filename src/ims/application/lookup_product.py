"""Application service: Lookup Product use case (query).

Used when a barcode is typed or scanned, both while enrolling and
while counting stock.
"""

from __future__ import annotations

from ims.application.dto import ProductDTO, to_product_dto
from ims.domain.exceptions import EntityNotFoundError, ValidationError
from ims.domain.repository.product_repository import ProductRepository


class LookupProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, barcode: str) -> ProductDTO:
        if not barcode or not barcode.strip():
            raise ValidationError("Please enter a barcode")

        product = self._product_repo.find_by_barcode(barcode.strip())
        if product is None:
            raise EntityNotFoundError(
                "Product not found. Please enroll this product first."
            )
        return to_product_dto(product)
