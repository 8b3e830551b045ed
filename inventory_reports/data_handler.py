import logging
from pathlib import Path
from typing import Any, Mapping, Optional

from . import settings
from .schemas import ChartKind, Report
from .utils import format_value

logger = logging.getLogger(__name__)


def format_report_text(category: str, report_type: str, aggregate: Mapping[str, Any]) -> str:
    """
    Flat text version of one aggregate: an uppercased header line, a blank
    line, then one 'name: value' line per bucket in the aggregate's order.
    """
    lines = [f"{category.upper()} REPORT - {report_type.upper()}", ""]
    lines += [f"{name}: {format_value(value)}" for name, value in aggregate.items()]
    return "\n".join(lines) + "\n"


def report_filename(category: str, report_type: str) -> str:
    return f"{category}-{report_type}-report.txt"


def aggregate_for_download(report: Report) -> dict[str, Any]:
    """
    Key->value pairs of the report's first chart. Single-value charts use
    'value'; trend charts use their first series. Empty for placeholders.
    """
    for panel in report.panels:
        if panel.kind is ChartKind.TABLE or not panel.data:
            continue
        first = panel.data[0]
        series = "value" if "value" in first else next((k for k in first if k != "name"), None)
        if series is None:
            continue
        return {str(row["name"]): row.get(series, 0) for row in panel.data}
    return {}


def save_report_text(report: Report, output_dir: Optional[Path] = None) -> Path:
    """Writes the report's download text and returns the file path."""
    output_dir = output_dir or settings.OUTPUT_DIR
    output_dir.mkdir(parents=True, exist_ok=True)

    path = output_dir / report_filename(report.category, report.report_type)
    content = format_report_text(
        report.category, report.report_type, aggregate_for_download(report)
    )
    path.write_text(content, encoding="utf-8")
    logger.info(f"✅ Report downloaded to: {path}")
    return path
