"""Application service: Show Inventory use case (query).

Stats always describe the whole inventory; only the lines are
narrowed by the search term.
"""

from __future__ import annotations

from ims.application.dto import InventoryDTO, InventoryLineDTO
from ims.domain.repository.product_repository import ProductRepository

DEFAULT_LOW_STOCK_THRESHOLD = 10


class ShowInventoryHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        low_stock_threshold: int = DEFAULT_LOW_STOCK_THRESHOLD,
    ) -> None:
        self._product_repo = product_repo
        self._low_stock_threshold = low_stock_threshold

    def handle(self, search: str = "") -> InventoryDTO:
        products = self._product_repo.list()
        shown = self._product_repo.search(search) if search else products

        return InventoryDTO(
            lines=[
                InventoryLineDTO(
                    product_id=p.id,
                    name=p.name,
                    barcode=p.barcode,
                    quantity=p.quantity,
                    category=p.category,
                    low_stock=p.quantity < self._low_stock_threshold,
                )
                for p in shown
            ],
            total_products=len(products),
            total_units=sum(p.quantity for p in products),
            low_stock_count=sum(
                1 for p in products if p.quantity < self._low_stock_threshold
            ),
        )
