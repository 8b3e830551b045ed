import logging

from inventory_reports import aggregations, settings
from inventory_reports.pipeline import ReportPipeline
from inventory_reports.schemas import (
    ChartKind,
    InventoryItem,
    InventoryStatus,
    Report,
    ReportPanel,
)

logger = logging.getLogger(__name__)

ITEM_COLUMNS = ["id", "category", "quantity", "last_updated"]


def status_panel(items: list[InventoryItem]) -> ReportPanel:
    # All three statuses are shown, even at zero.
    counts = aggregations.count_by(items, "status", settings.INVENTORY_STATUS_ORDER)
    return ReportPanel(
        title="Stock Status Distribution", kind=ChartKind.PIE, data=aggregations.to_rows(counts)
    )


def quantity_panel(items: list[InventoryItem]) -> ReportPanel:
    quantities = aggregations.sum_by(items, "category", "quantity")
    return ReportPanel(
        title="Quantity by Category", kind=ChartKind.BAR, data=aggregations.to_rows(quantities)
    )


def items_with_status(items: list[InventoryItem], status: InventoryStatus) -> list[InventoryItem]:
    return [item for item in items if item.status == status.value]


def status_table(items: list[InventoryItem], status: InventoryStatus) -> ReportPanel:
    return ReportPanel(
        title=f"{status.value} Items",
        kind=ChartKind.TABLE,
        data=[
            {column: getattr(item, column) for column in ITEM_COLUMNS}
            for item in items_with_status(items, status)
        ],
        options={"columns": ITEM_COLUMNS},
    )


class InventoryReport(ReportPipeline):
    section = "inventory"
    title = "Inventory Report"
    description = "Inventory status and distribution analysis."
    schema = InventoryItem

    def transform(self, records: list[InventoryItem]) -> Report:
        logger.info("Aggregating inventory by status and category...")

        metrics = {
            "total_items": len(records),
            "total_quantity": aggregations.total(records, "quantity"),
            "low_stock_count": len(items_with_status(records, InventoryStatus.LOW_STOCK)),
            "out_of_stock_count": len(
                items_with_status(records, InventoryStatus.OUT_OF_STOCK)
            ),
        }
        panels = [
            status_panel(records),
            quantity_panel(records),
            status_table(records, InventoryStatus.LOW_STOCK),
            status_table(records, InventoryStatus.OUT_OF_STOCK),
        ]
        return self.build_report(metrics, panels)
