"""Abstract storage capability for the product collection.

The whole collection is loaded and saved as one unit. Implementations
must never raise: a failed ``load`` reports an empty inventory and a
failed ``save`` is a logged no-op.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from ims.domain.model.product import Product


class ProductStorage(ABC):

    @abstractmethod
    def load(self) -> list[Product]:
        """Return every persisted product in insertion order, or [] on failure."""

    @abstractmethod
    def save(self, products: list[Product]) -> None:
        """Overwrite the persisted collection with *products*."""
