import logging
from typing import Optional

from inventory_reports import aggregations, settings
from inventory_reports.pipeline import ReportPipeline
from inventory_reports.schemas import ChartKind, Product, Report, ReportPanel

logger = logging.getLogger(__name__)

PRODUCT_COLUMNS = ["name", "category", "price", "stock"]


def _product_row(product: Product) -> dict:
    return {
        "name": product.name,
        "category": product.category,
        "price": product.price,
        "stock": product.stock,
    }


def category_panel(products: list[Product]) -> ReportPanel:
    counts = aggregations.count_by(products, "category")
    return ReportPanel(
        title="Products by Category", kind=ChartKind.PIE, data=aggregations.to_rows(counts)
    )


def price_range_panel(products: list[Product]) -> ReportPanel:
    buckets = aggregations.bucket_by_range(products, "price", settings.PRICE_RANGES)
    return ReportPanel(
        title="Price Range Distribution",
        kind=ChartKind.BAR,
        data=aggregations.to_rows(buckets),
    )


def top_stock_panel(products: list[Product], n: Optional[int] = None) -> ReportPanel:
    top = aggregations.top_n(products, "stock", n)
    return ReportPanel(
        title=f"Top {len(top)} Products by Stock",
        kind=ChartKind.TABLE,
        data=[_product_row(product) for product in top],
        options={"columns": PRODUCT_COLUMNS},
    )


def value_by_category(products: list[Product]) -> dict:
    """Stock value (price x stock) per category."""
    values = [
        {"category": product.category, "value": product.price * product.stock}
        for product in products
    ]
    return {
        name: round(value, 2)
        for name, value in aggregations.sum_by(values, "category", "value").items()
    }


def inventory_value(products: list[Product]) -> float:
    return round(sum(product.price * product.stock for product in products), 2)


class ProductReport(ReportPipeline):
    section = "products"
    title = "Products Report"
    description = "Product catalogue breakdown by category, price and stock."
    schema = Product

    def transform(self, records: list[Product]) -> Report:
        logger.info("Aggregating products by category and price range...")

        grouped_rows = [
            {"category": category, **_product_row(product)}
            for category, members in aggregations.group_by(records, "category").items()
            for product in members
        ]

        metrics = {
            "total_products": len(records),
            "average_price": round(aggregations.safe_mean(records, "price"), 2),
            "total_stock": aggregations.total(records, "stock"),
            "inventory_value": inventory_value(records),
        }
        panels = [
            category_panel(records),
            price_range_panel(records),
            top_stock_panel(records),
            ReportPanel(
                title="Products by Category",
                kind=ChartKind.TABLE,
                data=grouped_rows,
                options={"columns": PRODUCT_COLUMNS},
            ),
        ]
        return self.build_report(metrics, panels)
