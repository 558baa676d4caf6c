"""Product repository: CRUD and barcode lookup over the product collection.

Holds no cache: every operation loads the full collection from the
storage capability and every mutation writes the full collection back.
Last writer wins if the underlying store is shared.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime, timedelta, timezone

from ims.domain.exceptions import DuplicateBarcodeError
from ims.domain.model.product import NewProduct, Product, ProductUpdate
from ims.domain.repository.product_storage import ProductStorage

logger = logging.getLogger(__name__)

_ONE_TICK = timedelta(microseconds=1)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ProductRepository:

    def __init__(
        self,
        storage: ProductStorage,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._storage = storage
        self._clock = clock

    # --- Queries --------------------------------------------------------------

    def list(self) -> list[Product]:
        return self._storage.load()

    def find_by_id(self, product_id: str) -> Product | None:
        for product in self._storage.load():
            if product.id == product_id:
                return product
        return None

    def find_by_barcode(self, barcode: str) -> Product | None:
        """Return the first product whose barcode matches exactly, or None."""
        for product in self._storage.load():
            if product.barcode == barcode:
                return product
        return None

    def search(self, term: str) -> list[Product]:
        """Filter by name or category (case-insensitive) or barcode substring."""
        products = self._storage.load()
        if not term:
            return products
        needle = term.lower()
        return [
            p for p in products
            if needle in p.name.lower()
            or term in p.barcode
            or (p.category is not None and needle in p.category.lower())
        ]

    # --- Mutations ------------------------------------------------------------

    def create(self, fields: NewProduct) -> Product:
        """Enroll a new product.

        Raises:
            DuplicateBarcodeError: another product already has this barcode.
        """
        products = self._storage.load()
        self._assert_barcode_free(products, fields.barcode)

        now = self._clock()
        product = Product.create(self._next_id(products, now), fields, now)
        products.append(product)
        self._storage.save(products)

        logger.info("Created product %s (%s, barcode %s)", product.id, product.name, product.barcode)
        return product

    def update(self, product_id: str, changes: ProductUpdate) -> Product | None:
        """Merge *changes* into the product with *product_id*.

        Returns None, without touching storage, if no such product exists.

        Raises:
            DuplicateBarcodeError: *changes* moves the product onto a
                barcode another product already has.
        """
        products = self._storage.load()
        product = next((p for p in products if p.id == product_id), None)
        if product is None:
            logger.debug("Update skipped: no product with id %s", product_id)
            return None

        if changes.barcode is not None and changes.barcode != product.barcode:
            self._assert_barcode_free(products, changes.barcode)

        now = self._clock()
        # updated_at must strictly increase even on a coarse clock
        if now <= product.updated_at:
            now = product.updated_at + _ONE_TICK
        product.apply(changes, now)
        self._storage.save(products)

        logger.info("Updated product %s", product_id)
        return product

    def delete(self, product_id: str) -> bool:
        products = self._storage.load()
        remaining = [p for p in products if p.id != product_id]
        if len(remaining) == len(products):
            return False
        self._storage.save(remaining)
        logger.info("Deleted product %s", product_id)
        return True

    # --- Internal helpers -----------------------------------------------------

    @staticmethod
    def _assert_barcode_free(products: list[Product], barcode: str) -> None:
        for p in products:
            if p.barcode == barcode:
                raise DuplicateBarcodeError(barcode, p.name)

    @staticmethod
    def _next_id(products: list[Product], now: datetime) -> str:
        """Microseconds since the epoch, bumped past any id already taken."""
        taken = {p.id for p in products}
        candidate = int(now.timestamp()) * 1_000_000 + now.microsecond
        while str(candidate) in taken:
            candidate += 1
        return str(candidate)
