import logging

from inventory_reports import aggregations
from inventory_reports.pipeline import ReportPipeline
from inventory_reports.schemas import ChartKind, Customer, Report, ReportPanel

logger = logging.getLogger(__name__)

CUSTOMER_COLUMNS = ["name", "city", "state", "zipcode"]


def top_state(customers: list[Customer]) -> str:
    """State with the most customers; 'N/A' when there are none."""
    counts = aggregations.sort_desc(aggregations.count_by(customers, "state"))
    return next(iter(counts), "N/A")


def state_panel(customers: list[Customer]) -> ReportPanel:
    counts = aggregations.count_by(customers, "state")
    return ReportPanel(
        title="Customers by State", kind=ChartKind.PIE, data=aggregations.to_rows(counts)
    )


def grouped_by_state_table(customers: list[Customer]) -> ReportPanel:
    grouped = aggregations.group_by(customers, "state")
    return ReportPanel(
        title="Customers Grouped by State",
        kind=ChartKind.TABLE,
        data=[
            {"state": state, "name": customer.name, "city": customer.city}
            for state in sorted(grouped)
            for customer in grouped[state]
        ],
        options={"columns": ["state", "name", "city"]},
    )


class CustomersReport(ReportPipeline):
    section = "customers"
    title = "Customers Report"
    description = "Customer demographics by location."
    schema = Customer

    def transform(self, records: list[Customer]) -> Report:
        logger.info("Aggregating customers by state...")

        metrics = {
            "total_customers": len(records),
            "states_covered": len(aggregations.count_by(records, "state")),
            "top_state": top_state(records),
        }
        panels = [
            state_panel(records),
            ReportPanel(
                title="Customer List",
                kind=ChartKind.TABLE,
                data=[{column: getattr(c, column) for column in CUSTOMER_COLUMNS} for c in records],
                options={"columns": CUSTOMER_COLUMNS},
            ),
            grouped_by_state_table(records),
        ]
        return self.build_report(metrics, panels)
