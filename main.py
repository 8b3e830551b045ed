import logging

from inventory_reports import catalog, data_handler, sample_data
from inventory_reports.logger import setup_logger
from inventory_reports.navigation import ReportNavigator
from inventory_reports.trends import make_rng

logger = logging.getLogger(__name__)

# Console section -> the mock collection its report button is opened with.
SECTION_DATA = {
    "products": sample_data.PRODUCTS,
    "inventory": sample_data.INVENTORY,
    "categories": sample_data.CATEGORIES,
    "suppliers": sample_data.SUPPLIERS,
    "orders": sample_data.ORDERS,
    "warehouses": sample_data.WAREHOUSES,
    "customers": sample_data.CUSTOMERS,
}


def run_process():
    """Builds every section report and the default report view from the mock data."""
    setup_logger()
    logger.info("--- Starting Report Build ---")

    for section, records in SECTION_DATA.items():
        rendered = catalog.build_entity_report(section, records)
        for name, value in rendered.report.metrics.items():
            logger.info(f"  {name}: {value}")

    dataset = sample_data.sample_dataset()
    navigator = ReportNavigator()
    report = catalog.resolve(navigator.selection, dataset, rng=make_rng())
    logger.info(f"\n--- {report.title} ({navigator.selection.time_range.value}) ---")

    path = data_handler.save_report_text(report)
    logger.info(f"Default report saved to {path.name}")

    logger.info("\n--- Process Finished Successfully ---")


if __name__ == "__main__":
    run_process()
