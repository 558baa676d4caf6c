"""Application service: Adjust Stock use case.

Looks a product up by barcode and adds, removes, or sets its on-hand
quantity. Removing more than is on hand bottoms out at zero.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Callable
from datetime import datetime, timezone

from ims.application.dto import StockAdjustmentDTO, to_adjustment_dto
from ims.domain.exceptions import EntityNotFoundError, ValidationError
from ims.domain.model.product import ProductUpdate
from ims.domain.model.stock_adjustment import AdjustmentType, StockAdjustment
from ims.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)

RECENT_ADJUSTMENTS = 5


class AdjustStockHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        clock: Callable[[], datetime] = lambda: datetime.now(timezone.utc),
    ) -> None:
        self._product_repo = product_repo
        self._clock = clock
        self._recent: deque[StockAdjustmentDTO] = deque(maxlen=RECENT_ADJUSTMENTS)

    @property
    def recent(self) -> list[StockAdjustmentDTO]:
        """Adjustments made through this handler, newest first."""
        return list(self._recent)

    def handle(
        self,
        barcode: str,
        amount: int,
        adjustment: AdjustmentType | str,
    ) -> StockAdjustmentDTO:
        if isinstance(adjustment, str):
            try:
                adjustment = AdjustmentType(adjustment.lower())
            except ValueError as exc:
                raise ValidationError(
                    f"Unknown adjustment {adjustment!r}; expected add, subtract or set"
                ) from exc

        if not barcode or not barcode.strip():
            raise ValidationError("Please enter a barcode")
        product = self._product_repo.find_by_barcode(barcode.strip())
        if product is None:
            raise EntityNotFoundError(
                "Product not found. Please enroll this product first."
            )

        change = StockAdjustment.compute(
            product_id=product.id,
            product_name=product.name,
            barcode=product.barcode,
            current=product.quantity,
            adjustment=adjustment,
            amount=amount,
            now=self._clock(),
        )

        updated = self._product_repo.update(
            product.id, ProductUpdate(quantity=change.new_quantity)
        )
        if updated is None:
            # Deleted between the lookup and the write
            raise EntityNotFoundError("Failed to update quantity")

        logger.info(
            "Stock %s for %s: %d -> %d",
            adjustment.value, product.barcode, change.old_quantity, change.new_quantity,
        )
        dto = to_adjustment_dto(change)
        self._recent.appendleft(dto)
        return dto
