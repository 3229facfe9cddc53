"""Unit tests for the Product aggregate."""

import pytest

from wms.domain.exceptions import ValidationError
from wms.domain.model.product import Product, ProductStatus
from wms.domain.model.value_objects import Money


class TestProductCreation:

    def test_happy_path(self):
        p = Product.create("A1", "Widget", 5, price=Money.of("2.50"), min_level=10)
        assert p.sku == "A1"
        assert p.quantity == 5
        assert p.id

    def test_ids_are_unique(self):
        assert Product.create("A1", "Widget").id != Product.create("A2", "Gadget").id

    def test_blank_sku_rejected(self):
        with pytest.raises(ValidationError, match="SKU is required"):
            Product.create("  ", "Widget")

    def test_negative_quantity_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Product.create("A1", "Widget", -1)


class TestSetQuantity:

    def test_returns_signed_delta(self):
        p = Product.create("A1", "Widget", 5)
        assert p.set_quantity(2) == -3
        assert p.quantity == 2

    def test_negative_rejected_and_quantity_kept(self):
        p = Product.create("A1", "Widget", 5)
        with pytest.raises(ValidationError):
            p.set_quantity(-1)
        assert p.quantity == 5


class TestStockStatus:

    @pytest.mark.parametrize(
        "qty, expected",
        [
            (0, ProductStatus.OUT_OF_STOCK),
            (3, ProductStatus.LOW_STOCK),
            (10, ProductStatus.LOW_STOCK),
            (11, ProductStatus.IN_STOCK),
        ],
    )
    def test_status_against_min_level(self, qty, expected):
        assert Product.create("A1", "Widget", qty, min_level=10).stock_status == expected

    def test_stock_value(self):
        p = Product.create("A1", "Widget", 4, price=Money.of("2.50"))
        assert p.stock_value == Money.of("10.00")
