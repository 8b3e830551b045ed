import logging

from inventory_reports import aggregations, settings
from inventory_reports.pipeline import ReportPipeline
from inventory_reports.schemas import ChartKind, Report, ReportPanel, Warehouse

logger = logging.getLogger(__name__)

UTILIZATION_COLUMNS = ["name", "utilization", "level", "capacity", "used", "available"]


def utilization(warehouse: Warehouse) -> int:
    """Used share of total capacity as a whole percentage (0 when total is 0)."""
    capacity = warehouse.capacity
    return round(aggregations.safe_ratio(capacity.used, capacity.total) * 100)


def utilization_level(percent: float) -> str:
    if percent > settings.UTILIZATION_HIGH:
        return "high"
    if percent > settings.UTILIZATION_MEDIUM:
        return "medium"
    return "low"


def utilization_rows(warehouses: list[Warehouse]) -> list[dict]:
    rows = []
    for warehouse in warehouses:
        percent = utilization(warehouse)
        rows.append(
            {
                "name": f"{warehouse.location.city}, {warehouse.location.state}",
                "utilization": percent,
                "level": utilization_level(percent),
                "capacity": warehouse.capacity.total,
                "used": warehouse.capacity.used,
                "available": warehouse.capacity.total - warehouse.capacity.used,
            }
        )
    return rows


def average_utilization(warehouses: list[Warehouse]) -> int:
    if not warehouses:
        return 0
    percents = [
        aggregations.safe_ratio(w.capacity.used, w.capacity.total) * 100 for w in warehouses
    ]
    return round(sum(percents) / len(percents))


def capacity_panel(warehouses: list[Warehouse]) -> ReportPanel:
    return ReportPanel(
        title="Capacity Usage",
        kind=ChartKind.BAR,
        data=[
            {
                "name": w.location.city,
                "used": w.capacity.used,
                "available": w.capacity.total - w.capacity.used,
            }
            for w in warehouses
        ],
        options={"series": ["used", "available"]},
    )


def utilization_table(warehouses: list[Warehouse]) -> ReportPanel:
    return ReportPanel(
        title="Utilization by Warehouse",
        kind=ChartKind.TABLE,
        data=utilization_rows(warehouses),
        options={"columns": UTILIZATION_COLUMNS},
    )


class WarehousesReport(ReportPipeline):
    section = "warehouses"
    title = "Warehouses Report"
    description = "Storage capacity and utilisation across locations."
    schema = Warehouse

    def transform(self, records: list[Warehouse]) -> Report:
        logger.info("Computing warehouse utilisation...")

        states = aggregations.count_by(records, "location.state")

        metrics = {
            "total_warehouses": len(records),
            "total_capacity": aggregations.total(records, "capacity.total"),
            "average_utilization": average_utilization(records),
        }
        panels = [
            capacity_panel(records),
            ReportPanel(
                title="Warehouses by State", kind=ChartKind.PIE, data=aggregations.to_rows(states)
            ),
            utilization_table(records),
            ReportPanel(
                title="Warehouse Details",
                kind=ChartKind.TABLE,
                data=[
                    {
                        "id": w.id,
                        "location": f"{w.location.city}, {w.location.state}",
                        "manager": w.manager,
                        "phone": w.phone,
                    }
                    for w in records
                ],
                options={"columns": ["id", "location", "manager", "phone"]},
            ),
        ]
        return self.build_report(metrics, panels)
