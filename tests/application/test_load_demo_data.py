"""Integration tests for the LoadDemoData use case."""

from ims.application.load_demo_data import DEMO_PRODUCTS, LoadDemoDataHandler
from ims.domain.model.product import NewProduct
from ims.domain.model.value_objects import Money
from ims.domain.repository.product_repository import ProductRepository
from tests.fakes import FakeClock, FakeProductStorage


class TestLoadDemoData:

    def test_seeds_empty_inventory(self):
        repo = ProductRepository(FakeProductStorage(), clock=FakeClock())

        assert LoadDemoDataHandler(repo).handle() == len(DEMO_PRODUCTS)

        products = repo.list()
        assert [p.name for p in products] == [
            "Smartphone", "Coffee Beans", "Wireless Headphones", "Notebook", "T-shirt",
        ]
        phone = repo.find_by_barcode("7123456789012")
        assert phone.quantity == 25
        assert phone.price == Money.of("599.99")
        assert len({p.id for p in products}) == len(products)

    def test_skips_non_empty_inventory(self):
        repo = ProductRepository(FakeProductStorage(), clock=FakeClock())
        repo.create(NewProduct(name="Widget", barcode="1234"))

        assert LoadDemoDataHandler(repo).handle() == 0
        assert len(repo.list()) == 1
