import logging
from typing import Optional

from inventory_reports import aggregations
from inventory_reports.pipeline import ReportPipeline
from inventory_reports.schemas import ChartKind, Report, ReportPanel, Supplier

logger = logging.getLogger(__name__)

SUPPLIER_COLUMNS = ["name", "city", "state", "active_orders"]


def _supplier_row(supplier: Supplier) -> dict:
    return {
        "name": supplier.name,
        "city": supplier.location.city,
        "state": supplier.location.state,
        "active_orders": supplier.active_orders,
    }


def location_panel(suppliers: list[Supplier]) -> ReportPanel:
    counts = aggregations.count_by(suppliers, "location.state")
    return ReportPanel(
        title="Suppliers by State", kind=ChartKind.BAR, data=aggregations.to_rows(counts)
    )


def top_suppliers(suppliers: list[Supplier], n: Optional[int] = None) -> list[Supplier]:
    return aggregations.top_n(suppliers, "active_orders", n)


def top_suppliers_table(suppliers: list[Supplier], n: Optional[int] = None) -> ReportPanel:
    top = top_suppliers(suppliers, n)
    return ReportPanel(
        title=f"Top {len(top)} Suppliers by Active Orders",
        kind=ChartKind.TABLE,
        data=[_supplier_row(supplier) for supplier in top],
        options={"columns": SUPPLIER_COLUMNS},
    )


def state_summary(suppliers: list[Supplier]) -> list[dict]:
    """Supplier count and active-order total per state."""
    counts = aggregations.count_by(suppliers, "location.state")
    orders = aggregations.sum_by(suppliers, "location.state", "active_orders")
    return [
        {"state": state, "suppliers": count, "active_orders": orders.get(state, 0)}
        for state, count in counts.items()
    ]


class SuppliersReport(ReportPipeline):
    section = "suppliers"
    title = "Suppliers Report"
    description = "Supplier activity and geographic spread."
    schema = Supplier

    def transform(self, records: list[Supplier]) -> Report:
        logger.info("Aggregating supplier orders and locations...")

        orders_by_supplier = aggregations.sum_by(records, "name", "active_orders")

        metrics = {
            "total_suppliers": len(records),
            "total_active_orders": aggregations.total(records, "active_orders"),
            "average_active_orders": round(aggregations.safe_mean(records, "active_orders"), 1),
        }
        panels = [
            ReportPanel(
                title="Active Orders by Supplier",
                kind=ChartKind.PIE,
                data=aggregations.to_rows(orders_by_supplier),
            ),
            top_suppliers_table(records),
            ReportPanel(
                title="Suppliers by State",
                kind=ChartKind.TABLE,
                data=state_summary(records),
                options={"columns": ["state", "suppliers", "active_orders"]},
            ),
        ]
        return self.build_report(metrics, panels)
