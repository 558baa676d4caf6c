"""Stock adjustments made while counting inventory."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from ims.domain.exceptions import ValidationError


class AdjustmentType(Enum):
    ADD = "add"
    SUBTRACT = "subtract"
    SET = "set"

    def apply(self, current: int, amount: int) -> int:
        """Return the new on-hand quantity, never below zero."""
        if self is AdjustmentType.ADD:
            return current + amount
        if self is AdjustmentType.SUBTRACT:
            return max(0, current - amount)
        return max(0, amount)


@dataclass(frozen=True)
class StockAdjustment:
    """A single recorded change to a product's quantity."""

    product_id: str
    product_name: str
    barcode: str
    adjustment: AdjustmentType
    amount: int
    old_quantity: int
    new_quantity: int
    timestamp: datetime

    @staticmethod
    def compute(
        product_id: str,
        product_name: str,
        barcode: str,
        current: int,
        adjustment: AdjustmentType,
        amount: int,
        now: datetime,
    ) -> StockAdjustment:
        """Validate *amount* and work out the resulting quantity.

        Adding or removing zero units is rejected; setting to zero is
        allowed.
        """
        if not isinstance(amount, int) or isinstance(amount, bool):
            raise ValidationError(
                f"Amount must be an integer, got {type(amount).__name__}"
            )
        if amount < 0:
            raise ValidationError("Amount cannot be negative")
        if amount == 0 and adjustment is not AdjustmentType.SET:
            raise ValidationError("Amount must be positive")

        return StockAdjustment(
            product_id=product_id,
            product_name=product_name,
            barcode=barcode,
            adjustment=adjustment,
            amount=amount,
            old_quantity=current,
            new_quantity=adjustment.apply(current, amount),
            timestamp=now,
        )
