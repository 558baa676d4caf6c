"""Unit tests for the Product entity and its input types."""

from datetime import datetime, timezone

import pytest

from ims.domain.exceptions import ValidationError
from ims.domain.model.product import NewProduct, Product, ProductUpdate
from ims.domain.model.value_objects import Money

T0 = datetime(2024, 1, 1, 9, 0, tzinfo=timezone.utc)
T1 = datetime(2024, 1, 1, 10, 0, tzinfo=timezone.utc)


def _product(**overrides) -> Product:
    fields = dict(
        id="1", name="Notebook", barcode="7456789012345", quantity=50,
        created_at=T0, updated_at=T0, description="A5 lined", category="Stationery",
    )
    fields.update(overrides)
    return Product(**fields)


class TestNewProduct:

    def test_defaults(self):
        new = NewProduct(name="Widget", barcode="1234")
        assert new.quantity == 0
        assert new.description is None
        assert new.price is None

    @pytest.mark.parametrize("name,barcode", [("", "1234"), ("  ", "1234"), ("Widget", ""), ("Widget", "   ")])
    def test_name_and_barcode_required(self, name, barcode):
        with pytest.raises(ValidationError, match="Name and barcode are required"):
            NewProduct(name=name, barcode=barcode)

    def test_negative_quantity_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            NewProduct(name="Widget", barcode="1234", quantity=-1)

    def test_non_integer_quantity_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            NewProduct(name="Widget", barcode="1234", quantity=2.5)


class TestProductCreate:

    def test_stamps_both_timestamps(self):
        p = Product.create("42", NewProduct(name="Widget", barcode="1234", quantity=3), T0)
        assert p.id == "42"
        assert p.created_at == T0
        assert p.updated_at == T0
        assert p.quantity == 3


class TestProductUpdate:

    def test_only_set_fields_are_reported(self):
        changes = ProductUpdate(quantity=0, category="Office")
        assert changes.items() == [("quantity", 0), ("category", "Office")]

    def test_empty_update(self):
        assert ProductUpdate().is_empty()
        assert not ProductUpdate(quantity=0).is_empty()

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError, match="name cannot be empty"):
            ProductUpdate(name=" ")

    def test_negative_quantity_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            ProductUpdate(quantity=-4)


class TestProductApply:

    def test_merges_only_given_fields(self):
        p = _product()
        p.apply(ProductUpdate(quantity=12), T1)
        assert p.quantity == 12
        assert p.name == "Notebook"
        assert p.description == "A5 lined"
        assert p.category == "Stationery"

    def test_refreshes_updated_at_only(self):
        p = _product()
        p.apply(ProductUpdate(name="Notepad"), T1)
        assert p.updated_at == T1
        assert p.created_at == T0

    def test_empty_string_clears_optional_text(self):
        p = _product()
        p.apply(ProductUpdate(description=""), T1)
        assert p.description == ""

    def test_price_can_be_set(self):
        p = _product()
        p.apply(ProductUpdate(price=Money.of("12.99")), T1)
        assert p.price == Money.of("12.99")
