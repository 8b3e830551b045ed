"""Tests for the per-section report pipelines (inventory_reports/reports/)."""

import pytest

import main
from inventory_reports import catalog, sample_data
from inventory_reports.reports import orders, warehouses
from inventory_reports.schemas import ChartKind, Warehouse


def _panel(report, title):
    return next(panel for panel in report.panels if panel.title == title)


def _rows(panel):
    return {row["name"]: row["value"] for row in panel.data}


# ---------------------------------------------------------------------------
# Section pipelines over the sample collections
# ---------------------------------------------------------------------------


class TestSectionReports:
    @pytest.mark.parametrize("section", sorted(catalog.ENTITY_REPORTS))
    def test_every_panel_is_rendered(self, section, renderer):
        rendered = catalog.build_entity_report(section, main.SECTION_DATA[section], renderer)
        assert rendered.skipped == 0
        assert len(rendered.artifacts) == len(rendered.report.panels)
        assert len(renderer.calls) == len(rendered.report.panels)
        assert rendered.report.category == section

    def test_products(self, renderer):
        report = catalog.build_entity_report("products", sample_data.PRODUCTS, renderer).report
        assert report.metrics["total_products"] == 20
        assert report.metrics["total_stock"] == sum(p["stock"] for p in sample_data.PRODUCTS)
        prices = _rows(_panel(report, "Price Range Distribution"))
        assert sum(prices.values()) == 20
        assert prices["$200+"] == 2

    def test_inventory_lists_every_status(self, renderer):
        report = catalog.build_entity_report("inventory", sample_data.INVENTORY, renderer).report
        statuses = _rows(_panel(report, "Stock Status Distribution"))
        assert statuses == {"In Stock": 6, "Low Stock": 3, "Out of Stock": 1}
        assert report.metrics["low_stock_count"] == 3
        assert len(_panel(report, "Out of Stock Items").data) == 1

    def test_inventory_zero_statuses_still_listed(self, renderer):
        only_in_stock = [item for item in sample_data.INVENTORY if item["status"] == "In Stock"]
        report = catalog.build_entity_report("inventory", only_in_stock, renderer).report
        statuses = _rows(_panel(report, "Stock Status Distribution"))
        assert statuses["Low Stock"] == 0
        assert statuses["Out of Stock"] == 0

    def test_categories_sorted_by_items(self, renderer):
        report = catalog.build_entity_report("categories", sample_data.CATEGORIES, renderer).report
        items = list(_rows(_panel(report, "Items per Category")).values())
        assert items == sorted(items, reverse=True)
        assert report.metrics["total_items"] == 1380
        assert report.metrics["average_items"] == 138

    def test_suppliers_top_table(self, renderer):
        report = catalog.build_entity_report("suppliers", sample_data.SUPPLIERS, renderer).report
        top = _panel(report, "Top 5 Suppliers by Active Orders").data
        assert [row["active_orders"] for row in top] == [8, 8, 7, 6, 5]
        assert [row["name"] for row in top[:2]] == ["Global Electronics", "Midwest Suppliers"]

    def test_orders(self, renderer):
        report = catalog.build_entity_report("orders", sample_data.ORDERS, renderer).report
        assert report.metrics["total_orders"] == 15
        assert _rows(_panel(report, "Order Status Distribution")) == {
            "Completed": 6,
            "Processing": 5,
            "Pending": 4,
        }
        by_status = [row["status"] for row in _panel(report, "Orders by Status").data]
        assert by_status == ["Completed"] * 6 + ["Processing"] * 5 + ["Pending"] * 4

    def test_customers(self, renderer):
        report = catalog.build_entity_report("customers", sample_data.CUSTOMERS, renderer).report
        assert report.metrics["top_state"] == "Texas"
        states = [row["state"] for row in _panel(report, "Customers Grouped by State").data]
        assert states == sorted(states)


# ---------------------------------------------------------------------------
# Edge cases
# ---------------------------------------------------------------------------


class TestEdgeCases:
    def test_empty_orders_report_zero(self, renderer):
        rendered = catalog.build_entity_report("orders", [], renderer)
        metrics = rendered.report.metrics
        assert metrics == {"total_orders": 0, "total_revenue": 0, "average_order_value": 0}
        assert _rows(_panel(rendered.report, "Order Status Distribution")) == {
            "Completed": 0,
            "Processing": 0,
            "Pending": 0,
        }

    def test_invalid_records_skipped(self, renderer):
        records = sample_data.ORDERS[:3] + [
            {"id": "BAD-1", "status": "Completed", "total": -5},
            {"id": "BAD-2", "status": "Lost", "total": 10},
        ]
        rendered = catalog.build_entity_report("orders", records, renderer)
        assert rendered.skipped == 2
        assert rendered.report.metrics["total_orders"] == 3

    def test_unknown_section_placeholder(self, renderer):
        rendered = catalog.build_entity_report("returns", [{"id": 1}], renderer)
        assert rendered.report.placeholder
        assert rendered.report.title == catalog.NO_SECTION_REPORT
        assert rendered.artifacts == []
        assert renderer.calls == []

    def test_average_order_value_guarded(self):
        assert orders.order_metrics([])["average_order_value"] == 0


class TestWarehouseUtilization:
    def test_utilization_percent(self):
        warehouse = Warehouse.model_validate(
            {"id": "WH", "capacity": {"used": 7500, "total": 10000}}
        )
        assert warehouses.utilization(warehouse) == 75

    def test_zero_capacity(self):
        assert warehouses.utilization(Warehouse(id="WH")) == 0

    @pytest.mark.parametrize("percent,level", [(81, "high"), (80, "medium"), (61, "medium"), (60, "low")])
    def test_levels(self, percent, level):
        assert warehouses.utilization_level(percent) == level

    def test_capacity_panel_has_two_series(self, dataset):
        panel = warehouses.capacity_panel(dataset.warehouses)
        assert panel.kind is ChartKind.BAR
        assert panel.options["series"] == ["used", "available"]
        assert all(row["used"] + row["available"] > 0 for row in panel.data)

    def test_average_of_empty(self):
        assert warehouses.average_utilization([]) == 0
