"""Product storage over a local key/value store.

The full product collection is one JSON array stored under a single
key. Field names are camelCase, timestamps ISO-8601 and prices JSON
numbers, the same shape the mobile/web client reads and writes.
Timestamps without an offset are taken to be UTC.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone

from ims.domain.exceptions import DomainException
from ims.domain.model.product import Product
from ims.domain.model.value_objects import Money
from ims.domain.repository.product_storage import ProductStorage
from ims.infrastructure.persistence.key_value_store import KeyValueStore

logger = logging.getLogger(__name__)

STORAGE_KEY = "inventory_products"


class LocalProductStorage(ProductStorage):

    def __init__(self, store: KeyValueStore, key: str = STORAGE_KEY) -> None:
        self._store = store
        self._key = key

    # --- ProductStorage interface ---------------------------------------------

    def load(self) -> list[Product]:
        try:
            blob = self._store.get_item(self._key)
            if not blob:
                return []
            return [self._to_domain(raw) for raw in self._parse(blob)]
        except (OSError, ValueError, KeyError, TypeError, DomainException):
            logger.exception("Error reading products from storage key %r", self._key)
            return []

    def save(self, products: list[Product]) -> None:
        try:
            blob = json.dumps([self._to_raw(p) for p in products])
            self._store.set_item(self._key, blob)
        except (OSError, ValueError, TypeError):
            logger.exception("Error saving products to storage key %r", self._key)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _parse(blob: str) -> list[dict]:
        records = json.loads(blob)
        if not isinstance(records, list):
            raise ValueError(f"Expected a JSON array, got {type(records).__name__}")
        for raw in records:
            if not isinstance(raw, dict):
                raise ValueError(f"Expected a JSON object per product, got {type(raw).__name__}")
        return records

    @staticmethod
    def _to_raw(product: Product) -> dict:
        raw = {
            "id": product.id,
            "name": product.name,
            "barcode": product.barcode,
            "quantity": product.quantity,
            "createdAt": product.created_at.isoformat(),
            "updatedAt": product.updated_at.isoformat(),
        }
        # Optional keys are omitted rather than written as null
        if product.description is not None:
            raw["description"] = product.description
        if product.unit_of_measure is not None:
            raw["unitOfMeasure"] = product.unit_of_measure
        if product.category is not None:
            raw["category"] = product.category
        if product.price is not None:
            raw["price"] = float(product.price.amount)
        return raw

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        price = None
        if raw.get("price") is not None:
            price = Money.of(raw["price"])
        return Product(
            id=str(raw["id"]),
            name=raw["name"],
            barcode=raw["barcode"],
            quantity=raw["quantity"],
            description=raw.get("description"),
            unit_of_measure=raw.get("unitOfMeasure"),
            category=raw.get("category"),
            price=price,
            created_at=_parse_timestamp(raw["createdAt"]),
            updated_at=_parse_timestamp(raw["updatedAt"]),
        )


def _parse_timestamp(value: str) -> datetime:
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed
