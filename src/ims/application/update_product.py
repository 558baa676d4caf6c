"""Application service: Update Product use case."""

from __future__ import annotations

from ims.application.dto import ProductDTO, to_product_dto
from ims.domain.exceptions import EntityNotFoundError, ValidationError
from ims.domain.model.product import ProductUpdate
from ims.domain.model.value_objects import Money
from ims.domain.repository.product_repository import ProductRepository


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        product_id: str,
        name: str | None = None,
        description: str | None = None,
        barcode: str | None = None,
        quantity: int | None = None,
        unit_of_measure: str | None = None,
        category: str | None = None,
        price: str | None = None,
    ) -> ProductDTO:
        """Change the given details of a product; omitted ones stay as they are."""
        changes = ProductUpdate(
            name=name.strip() if name is not None else None,
            description=description,
            barcode=barcode.strip() if barcode is not None else None,
            quantity=quantity,
            unit_of_measure=unit_of_measure,
            category=category,
            price=Money.of(price) if price is not None else None,
        )
        if changes.is_empty():
            raise ValidationError("Nothing to update")

        product = self._product_repo.update(product_id, changes)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
        return to_product_dto(product)
