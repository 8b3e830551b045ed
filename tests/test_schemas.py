"""Tests for the record schemas (inventory_reports/schemas.py)."""

from datetime import date

import pytest
from pydantic import ValidationError

from inventory_reports.schemas import (
    Category,
    InventoryItem,
    Order,
    Product,
    ReportDataset,
    Supplier,
    Warehouse,
    WarehouseCapacity,
)
from inventory_reports.utils import coerce_number, format_value, squash_label


class TestCamelCaseRecords:
    def test_supplier_aliases(self):
        supplier = Supplier.model_validate(
            {
                "id": "SUP-1",
                "name": "Acme",
                "location": {"city": "Austin", "state": "Texas", "zipCode": "73301"},
                "activeOrders": 4,
            }
        )
        assert supplier.active_orders == 4
        assert supplier.location.zip_code == "73301"

    def test_snake_case_also_accepted(self):
        supplier = Supplier(id="SUP-1", name="Acme", active_orders=2)
        assert supplier.active_orders == 2

    def test_order_date_parsed(self):
        order = Order.model_validate(
            {"id": "ORD-1", "date": "2025-05-01", "status": "Completed", "total": 10}
        )
        assert order.order_date == date(2025, 5, 1)

    def test_warehouse_manager(self):
        warehouse = Warehouse.model_validate(
            {"id": "WH-1", "managedBy": "Jane", "capacity": {"used": 1, "total": 2}}
        )
        assert warehouse.manager == "Jane"
        assert warehouse.location.state == "Unknown"

    def test_unknown_keys_ignored(self):
        category = Category.model_validate({"id": "C", "name": "Books", "colour": "red"})
        assert not hasattr(category, "colour")

    def test_dataset_accepts_raw_records(self, dataset):
        assert len(dataset.products) == 20
        assert isinstance(dataset.products[0], Product)
        assert ReportDataset().orders == []


class TestMalformedNumbers:
    @pytest.mark.parametrize("raw", [None, "", "  ", "n/a", float("nan")])
    def test_price_defaults_to_zero(self, raw):
        assert Product(id="P", name="x", price=raw).price == 0

    def test_missing_fields_default_to_zero(self):
        product = Product(id="P", name="x")
        assert (product.price, product.stock, product.category) == (0, 0, "Unknown")

    def test_currency_strings_parsed(self):
        assert Order(id="O", status="Pending", total="$1,200.50").total == 1200.50

    def test_negative_rejected(self):
        with pytest.raises(ValidationError):
            Product(id="P", name="x", price=-1)

    def test_infinite_rejected(self):
        with pytest.raises(ValidationError):
            Order(id="O", status="Pending", total=float("inf"))

    def test_used_over_total_rejected(self):
        with pytest.raises(ValidationError):
            WarehouseCapacity(used=11, total=10)

    def test_empty_warehouse_capacity(self):
        assert WarehouseCapacity().total == 0


class TestStatusNormalisation:
    @pytest.mark.parametrize("raw", ["In Stock", "InStock", "in_stock", "in-stock", "IN STOCK"])
    def test_inventory_status_spellings(self, raw):
        item = InventoryItem(id="I", status=raw)
        assert item.status == "In Stock"

    def test_order_status_case(self):
        assert Order(id="O", status="completed").status == "Completed"

    def test_unknown_status_rejected(self):
        with pytest.raises(ValidationError):
            Order(id="O", status="Refunded")


class TestUtils:
    def test_coerce_number(self):
        assert coerce_number("12") == 12.0
        assert coerce_number(True) == 0
        assert coerce_number(7) == 7

    def test_squash_label(self):
        assert squash_label("Out of Stock") == squash_label("out_of-stock")

    def test_format_value(self):
        assert format_value(3.0) == "3"
        assert format_value(3.25) == "3.25"
        assert format_value("Texas") == "Texas"
