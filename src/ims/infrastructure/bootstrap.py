"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from ims.domain.repository.product_repository import ProductRepository
from ims.domain.service.barcode_generator import BarcodeGenerator
from ims.infrastructure.config import get_settings
from ims.infrastructure.persistence.key_value_store import JsonFileKeyValueStore
from ims.infrastructure.persistence.local_product_storage import LocalProductStorage


def product_repository() -> ProductRepository:
    settings = get_settings()
    storage = LocalProductStorage(
        JsonFileKeyValueStore(settings.data_file),
        key=settings.storage_key,
    )
    return ProductRepository(storage)


def barcode_generator() -> BarcodeGenerator:
    return BarcodeGenerator(prefix=get_settings().barcode_prefix)


def low_stock_threshold() -> int:
    return get_settings().low_stock_threshold
