import logging

from inventory_reports import aggregations, settings
from inventory_reports.pipeline import ReportPipeline
from inventory_reports.schemas import ChartKind, Order, Report, ReportPanel

logger = logging.getLogger(__name__)

ORDER_COLUMNS = ["id", "date", "status", "total"]


def _order_row(order: Order) -> dict:
    return {
        "id": order.id,
        "date": order.order_date.isoformat() if order.order_date else "",
        "status": order.status,
        "total": order.total,
    }


def order_metrics(orders: list[Order]) -> dict:
    """Revenue headline numbers; an empty order list reports zeros."""
    revenue = aggregations.total(orders, "total")
    return {
        "total_orders": len(orders),
        "total_revenue": round(revenue, 2),
        "average_order_value": round(aggregations.safe_ratio(revenue, len(orders)), 2),
    }


def status_panel(orders: list[Order]) -> ReportPanel:
    counts = aggregations.count_by(orders, "status", settings.ORDER_STATUS_ORDER)
    return ReportPanel(
        title="Order Status Distribution", kind=ChartKind.PIE, data=aggregations.to_rows(counts)
    )


def revenue_by_status_panel(orders: list[Order]) -> ReportPanel:
    revenue = {status: 0 for status in settings.ORDER_STATUS_ORDER}
    revenue.update(aggregations.sum_by(orders, "status", "total"))
    return ReportPanel(
        title="Revenue by Status",
        kind=ChartKind.BAR,
        data=aggregations.to_rows({name: round(value, 2) for name, value in revenue.items()}),
    )


def order_value_panel(orders: list[Order]) -> ReportPanel:
    buckets = aggregations.bucket_by_range(orders, "total", settings.ORDER_VALUE_RANGES)
    return ReportPanel(
        title="Order Value Distribution", kind=ChartKind.BAR, data=aggregations.to_rows(buckets)
    )


class OrdersReport(ReportPipeline):
    section = "orders"
    title = "Orders Report"
    description = "Order volume, value and fulfilment status."
    schema = Order

    def transform(self, records: list[Order]) -> Report:
        logger.info("Aggregating orders by status and value...")

        grouped = aggregations.group_by(records, "status")
        by_status = [
            _order_row(order)
            for status in settings.ORDER_STATUS_ORDER
            for order in grouped.get(status, [])
        ]

        panels = [
            status_panel(records),
            order_value_panel(records),
            ReportPanel(
                title="All Orders",
                kind=ChartKind.TABLE,
                data=[_order_row(order) for order in records],
                options={"columns": ORDER_COLUMNS},
            ),
            ReportPanel(
                title="Orders by Status",
                kind=ChartKind.TABLE,
                data=by_status,
                options={"columns": ORDER_COLUMNS},
            ),
        ]
        return self.build_report(order_metrics(records), panels)
