"""Tests for the report download text (inventory_reports/data_handler.py)."""

from inventory_reports import catalog, data_handler, settings
from inventory_reports.navigation import ReportSelection
from inventory_reports.schemas import ChartKind, Report, ReportPanel


def _report(*panels, category="inventory", report_type="stock-levels"):
    return Report(category=category, report_type=report_type, title="t", panels=list(panels))


class TestFormatReportText:
    def test_exact_layout(self):
        text = data_handler.format_report_text("inventory", "stock-levels", {"A": 1, "B": 2, "C": 3})
        assert text == "INVENTORY REPORT - STOCK-LEVELS\n\nA: 1\nB: 2\nC: 3\n"

    def test_keeps_aggregate_order(self):
        text = data_handler.format_report_text("x", "y", {"zeta": 1, "alpha": 2})
        assert text.splitlines()[2:] == ["zeta: 1", "alpha: 2"]

    def test_empty_aggregate_is_header_only(self):
        assert data_handler.format_report_text("financial", "overview", {}) == (
            "FINANCIAL REPORT - OVERVIEW\n\n"
        )

    def test_integral_floats_lose_trailing_zero(self):
        text = data_handler.format_report_text("a", "b", {"whole": 30.0, "part": 12.5})
        assert "whole: 30\n" in text
        assert "part: 12.5\n" in text


class TestAggregateForDownload:
    def test_uses_first_chart_values(self):
        report = _report(
            ReportPanel(title="table", kind=ChartKind.TABLE, data=[{"name": "x", "value": 9}]),
            ReportPanel(title="bars", kind=ChartKind.BAR, data=[{"name": "A", "value": 4}]),
        )
        assert data_handler.aggregate_for_download(report) == {"A": 4}

    def test_line_chart_uses_first_series(self):
        report = _report(
            ReportPanel(
                title="trend",
                kind=ChartKind.LINE,
                data=[{"name": "Mon", "revenue": 10.5}, {"name": "Tue", "revenue": 11}],
            )
        )
        assert data_handler.aggregate_for_download(report) == {"Mon": 10.5, "Tue": 11}

    def test_placeholder_has_nothing(self):
        assert data_handler.aggregate_for_download(catalog.placeholder_report("x", "y")) == {}


class TestSaveReportText:
    def test_filename(self):
        assert data_handler.report_filename("customer", "geographic-distribution") == (
            "customer-geographic-distribution-report.txt"
        )

    def test_writes_into_output_dir(self, dataset, rng):
        selection = ReportSelection(category="products", report_type="price-ranges")
        report = catalog.resolve(selection, dataset, rng=rng)

        path = data_handler.save_report_text(report)

        assert path.parent == settings.OUTPUT_DIR
        assert path.name == "products-price-ranges-report.txt"
        lines = path.read_text(encoding="utf-8").splitlines()
        assert lines[0] == "PRODUCTS REPORT - PRICE-RANGES"
        assert lines[1] == ""
        assert lines[2:] == [
            f"{label}: {count}"
            for label, count in data_handler.aggregate_for_download(report).items()
        ]
        assert [line.split(":")[0] for line in lines[2:]] == [
            label for label, _, _ in settings.PRICE_RANGES
        ]

    def test_explicit_output_dir(self, tmp_path):
        report = _report(ReportPanel(title="bars", kind=ChartKind.PIE, data=[{"name": "A", "value": 1}]))
        path = data_handler.save_report_text(report, output_dir=tmp_path / "elsewhere")
        assert path.read_text(encoding="utf-8") == "INVENTORY REPORT - STOCK-LEVELS\n\nA: 1\n"
