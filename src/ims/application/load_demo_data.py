"""Application service: Load Demo Data use case.

Seeds an empty inventory with a handful of sample products. Does
nothing if any product already exists.
"""

from __future__ import annotations

from ims.domain.model.product import NewProduct
from ims.domain.model.value_objects import Money
from ims.domain.repository.product_repository import ProductRepository

DEMO_PRODUCTS = [
    NewProduct(
        name="Smartphone",
        description="Latest Android smartphone with 5G connectivity",
        barcode="7123456789012",
        quantity=25,
        price=Money.of("599.99"),
        category="Electronics",
    ),
    NewProduct(
        name="Coffee Beans",
        description="Premium Arabica coffee beans from Colombia",
        barcode="7234567890123",
        quantity=8,
        price=Money.of("24.99"),
        category="Food & Beverage",
    ),
    NewProduct(
        name="Wireless Headphones",
        description="Noise-cancelling Bluetooth headphones",
        barcode="7345678901234",
        quantity=15,
        price=Money.of("199.99"),
        category="Electronics",
    ),
    NewProduct(
        name="Notebook",
        description="A5 lined notebook with hardcover",
        barcode="7456789012345",
        quantity=50,
        price=Money.of("12.99"),
        category="Stationery",
    ),
    NewProduct(
        name="T-shirt",
        description="Cotton crew neck t-shirt in various sizes",
        barcode="7567890123456",
        quantity=3,
        price=Money.of("19.99"),
        category="Clothing",
    ),
]


class LoadDemoDataHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self) -> int:
        """Return the number of demo products added (0 if inventory wasn't empty)."""
        if self._product_repo.list():
            return 0
        for fields in DEMO_PRODUCTS:
            self._product_repo.create(fields)
        return len(DEMO_PRODUCTS)
