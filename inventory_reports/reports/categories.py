import logging

from inventory_reports import aggregations
from inventory_reports.pipeline import ReportPipeline
from inventory_reports.schemas import Category, ChartKind, Report, ReportPanel

logger = logging.getLogger(__name__)


class CategoriesReport(ReportPipeline):
    section = "categories"
    title = "Categories Report"
    description = "Item counts across product categories."
    schema = Category

    def transform(self, records: list[Category]) -> Report:
        logger.info("Ranking categories by item count...")

        items = aggregations.sort_desc(aggregations.sum_by(records, "name", "items"))

        metrics = {
            "total_categories": len(records),
            "total_items": aggregations.total(records, "items"),
            "average_items": round(aggregations.safe_mean(records, "items")),
        }
        panels = [
            ReportPanel(
                title="Items per Category", kind=ChartKind.PIE, data=aggregations.to_rows(items)
            ),
            ReportPanel(
                title="Category Details",
                kind=ChartKind.TABLE,
                data=[
                    {
                        "name": category.name,
                        "description": category.description,
                        "items": category.items,
                        "created_on": category.created_on.isoformat()
                        if category.created_on
                        else "",
                    }
                    for category in records
                ],
                options={"columns": ["name", "description", "items", "created_on"]},
            ),
        ]
        return self.build_report(metrics, panels)
