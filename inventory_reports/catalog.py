"""
Report catalog for the report view.

REPORT_CATALOG maps a (category, type) pair to the builder that aggregates
the open dataset into panels. ENTITY_REPORTS maps a console section to its
full report pipeline. Unknown keys resolve to a placeholder, never an error.
"""

import logging
from typing import Any, Iterable, Optional
import numpy as np

from . import aggregations, settings
from .navigation import ReportSelection
from .pipeline import RenderedReport
from .rendering import PlotlyRenderer, Renderer
from .reports import categories, customers, inventory, orders, products, suppliers, warehouses
from .schemas import ChartKind, InventoryStatus, Report, ReportDataset, ReportPanel
from .trends import TimeRange, generate_trend_series, make_rng, period_labels, trend_rows

logger = logging.getLogger(__name__)

PLACEHOLDER_TITLE = "Select a report"
NO_SECTION_REPORT = "No report available for this section"

CATEGORY_DESCRIPTIONS = {
    "financial": "Financial performance metrics and analysis.",
    "inventory": "Inventory status and distribution analysis.",
    "customer": "Customer behavior and demographics analysis.",
    "products": "Product catalogue breakdown by category, price and stock.",
    "suppliers": "Supplier activity and geographic spread.",
    "warehouses": "Storage capacity and utilisation across locations.",
}


def _line_panel(title: str, points: list, percentage: bool = False) -> ReportPanel:
    return ReportPanel(
        title=title,
        kind=ChartKind.LINE,
        data=trend_rows(points),
        options={"percentage": percentage},
    )


# --- Financial ---


def _financial_overview(dataset: ReportDataset, time_range: TimeRange, rng: np.random.Generator):
    metrics = orders.order_metrics(dataset.orders)
    points = generate_trend_series({"revenue": metrics["total_revenue"]}, time_range, rng=rng)
    return metrics, [_line_panel("Revenue Trend", points)]


def _sales_analysis(dataset: ReportDataset, time_range: TimeRange, rng: np.random.Generator):
    panels = [
        orders.status_panel(dataset.orders),
        orders.revenue_by_status_panel(dataset.orders),
    ]
    return orders.order_metrics(dataset.orders), panels


def _order_value(dataset: ReportDataset, time_range: TimeRange, rng: np.random.Generator):
    return orders.order_metrics(dataset.orders), [orders.order_value_panel(dataset.orders)]


# --- Inventory ---


def _stock_levels(dataset: ReportDataset, time_range: TimeRange, rng: np.random.Generator):
    items = dataset.inventory
    metrics = {
        "total_items": aggregations.total(items, "quantity"),
        "total_value": products.inventory_value(dataset.products),
        "low_stock_items": len(
            inventory.items_with_status(items, InventoryStatus.LOW_STOCK)
        ),
    }
    return metrics, [inventory.quantity_panel(items)]


def _category_distribution(
    dataset: ReportDataset, time_range: TimeRange, rng: np.random.Generator
):
    return {"total_products": len(dataset.products)}, [products.category_panel(dataset.products)]


def _low_stock_items(dataset: ReportDataset, time_range: TimeRange, rng: np.random.Generator):
    items = dataset.inventory
    panels = [
        inventory.status_panel(items),
        inventory.status_table(items, InventoryStatus.LOW_STOCK),
        inventory.status_table(items, InventoryStatus.OUT_OF_STOCK),
    ]
    return {}, panels


def _inventory_value(dataset: ReportDataset, time_range: TimeRange, rng: np.random.Generator):
    values = aggregations.sort_desc(products.value_by_category(dataset.products))
    panels = [
        ReportPanel(
            title="Stock Value by Category", kind=ChartKind.BAR, data=aggregations.to_rows(values)
        ),
        products.price_range_panel(dataset.products),
    ]
    return {"total_value": products.inventory_value(dataset.products)}, panels


def _turnover_analysis(dataset: ReportDataset, time_range: TimeRange, rng: np.random.Generator):
    quantities = aggregations.sort_desc(
        aggregations.sum_by(dataset.inventory, "category", "quantity")
    )
    leaders = dict(list(quantities.items())[: settings.REPORT_TOP_N])
    points = generate_trend_series(leaders, time_range, rng=rng)
    return {}, [_line_panel("Stock Level Trend by Category", points)]


# --- Customer ---


def _geographic_distribution(
    dataset: ReportDataset, time_range: TimeRange, rng: np.random.Generator
):
    metrics = {"top_state": customers.top_state(dataset.customers)}
    panels = [
        customers.state_panel(dataset.customers),
        customers.grouped_by_state_table(dataset.customers),
    ]
    return metrics, panels


def _customer_acquisition(
    dataset: ReportDataset, time_range: TimeRange, rng: np.random.Generator
):
    # Spread the current customer base evenly over the range as the baseline.
    periods = len(period_labels(time_range))
    baseline = aggregations.safe_ratio(len(dataset.customers), periods)
    points = generate_trend_series({"new_customers": baseline}, time_range, rng=rng)
    return {"total_customers": len(dataset.customers)}, [
        _line_panel("Customer Acquisition Trend", points)
    ]


# --- Products ---


def _price_ranges(dataset: ReportDataset, time_range: TimeRange, rng: np.random.Generator):
    return {}, [products.price_range_panel(dataset.products)]


def _top_stock(dataset: ReportDataset, time_range: TimeRange, rng: np.random.Generator):
    top = aggregations.top_n(dataset.products, "stock")
    chart = ReportPanel(
        title="Stock of Top Products",
        kind=ChartKind.BAR,
        data=[{"name": product.name, "value": product.stock} for product in top],
    )
    return {}, [chart, products.top_stock_panel(dataset.products)]


# --- Suppliers ---


def _supplier_locations(dataset: ReportDataset, time_range: TimeRange, rng: np.random.Generator):
    return {"total_suppliers": len(dataset.suppliers)}, [
        suppliers.location_panel(dataset.suppliers)
    ]


def _top_suppliers(dataset: ReportDataset, time_range: TimeRange, rng: np.random.Generator):
    top = suppliers.top_suppliers(dataset.suppliers)
    chart = ReportPanel(
        title="Active Orders of Top Suppliers",
        kind=ChartKind.BAR,
        data=[{"name": s.name, "value": s.active_orders} for s in top],
    )
    return {}, [chart, suppliers.top_suppliers_table(dataset.suppliers)]


# --- Warehouses ---


def _capacity_utilization(
    dataset: ReportDataset, time_range: TimeRange, rng: np.random.Generator
):
    metrics = {"average_utilization": warehouses.average_utilization(dataset.warehouses)}
    panels = [
        warehouses.capacity_panel(dataset.warehouses),
        warehouses.utilization_table(dataset.warehouses),
    ]
    return metrics, panels


def _utilization_trend(dataset: ReportDataset, time_range: TimeRange, rng: np.random.Generator):
    average = warehouses.average_utilization(dataset.warehouses)
    points = generate_trend_series({"utilization": average}, time_range, rng=rng, percentage=True)
    return {"average_utilization": average}, [
        _line_panel("Utilization Trend (%)", points, percentage=True)
    ]


REPORT_CATALOG: dict[tuple[str, str], dict[str, Any]] = {
    ("financial", "overview"): {"title": "Financial Overview", "builder": _financial_overview},
    ("financial", "sales-analysis"): {"title": "Sales Analysis", "builder": _sales_analysis},
    ("financial", "order-value"): {"title": "Order Value", "builder": _order_value},
    ("inventory", "stock-levels"): {"title": "Stock Levels", "builder": _stock_levels},
    ("inventory", "category-distribution"): {
        "title": "Category Distribution",
        "builder": _category_distribution,
    },
    ("inventory", "low-stock-items"): {"title": "Low Stock Items", "builder": _low_stock_items},
    ("inventory", "inventory-value"): {"title": "Inventory Value", "builder": _inventory_value},
    ("inventory", "turnover-analysis"): {
        "title": "Turnover Analysis",
        "builder": _turnover_analysis,
    },
    ("customer", "geographic-distribution"): {
        "title": "Geographic Distribution",
        "builder": _geographic_distribution,
    },
    ("customer", "customer-acquisition"): {
        "title": "Customer Acquisition",
        "builder": _customer_acquisition,
    },
    ("products", "category-distribution"): {
        "title": "Category Distribution",
        "builder": _category_distribution,
    },
    ("products", "price-ranges"): {"title": "Price Ranges", "builder": _price_ranges},
    ("products", "top-stock"): {"title": "Top Products by Stock", "builder": _top_stock},
    ("suppliers", "location-distribution"): {
        "title": "Location Distribution",
        "builder": _supplier_locations,
    },
    ("suppliers", "top-suppliers"): {"title": "Top Suppliers", "builder": _top_suppliers},
    ("warehouses", "capacity-utilization"): {
        "title": "Capacity Utilization",
        "builder": _capacity_utilization,
    },
    ("warehouses", "utilization-trend"): {
        "title": "Utilization Trend",
        "builder": _utilization_trend,
    },
}


def available_reports() -> list[tuple[str, str]]:
    return list(REPORT_CATALOG)


def placeholder_report(category: str, report_type: str, title: str = PLACEHOLDER_TITLE) -> Report:
    return Report(
        category=category,
        report_type=report_type,
        title=title,
        description="Choose a report from the menu to view it.",
        placeholder=True,
    )


def resolve(
    selection: ReportSelection,
    dataset: ReportDataset,
    rng: Optional[np.random.Generator] = None,
) -> Report:
    """Builds the report for the current selection, or the placeholder."""
    entry = REPORT_CATALOG.get((selection.category, selection.report_type))
    if entry is None:
        logger.warning(
            f"⚠️ No report registered for '{selection.category}/{selection.report_type}'."
        )
        return placeholder_report(selection.category, selection.report_type)

    rng = rng if rng is not None else make_rng()
    metrics, panels = entry["builder"](dataset, selection.time_range, rng)
    return Report(
        category=selection.category,
        report_type=selection.report_type,
        title=entry["title"],
        description=CATEGORY_DESCRIPTIONS.get(selection.category, ""),
        metrics=metrics,
        panels=panels,
    )


# --- Section reports ---

ENTITY_REPORTS = {
    "products": products.ProductReport,
    "inventory": inventory.InventoryReport,
    "categories": categories.CategoriesReport,
    "suppliers": suppliers.SuppliersReport,
    "orders": orders.OrdersReport,
    "warehouses": warehouses.WarehousesReport,
    "customers": customers.CustomersReport,
}


def build_entity_report(
    section: str, records: Iterable[Any], renderer: Optional[Renderer] = None
) -> RenderedReport:
    """Runs the report pipeline registered for a console section."""
    pipeline_cls = ENTITY_REPORTS.get(section)
    if pipeline_cls is None:
        logger.warning(f"⚠️ {NO_SECTION_REPORT}: '{section}'.")
        return RenderedReport(
            report=placeholder_report(section, "summary", title=NO_SECTION_REPORT)
        )
    return pipeline_cls(records, renderer=renderer or PlotlyRenderer()).run()
