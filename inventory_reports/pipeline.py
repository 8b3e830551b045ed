import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Iterable, Optional
from pydantic import ValidationError

from .rendering import PlotlyRenderer, Renderer, render_panel
from .schemas import Record, Report

logger = logging.getLogger(__name__)


@dataclass
class RenderedReport:
    report: Report
    artifacts: list[Any] = field(default_factory=list)
    skipped: int = 0


class ReportPipeline(ABC):
    """
    Abstract base class for the per-section reports (products, orders, ...).
    Follows an Extract -> Transform -> Load pattern:
    validate records -> aggregate into panels -> render panels.
    """

    section: str = ""
    title: str = ""
    description: str = ""
    schema: type[Record] = Record

    def __init__(self, records: Iterable[Any], renderer: Optional[Renderer] = None):
        self.raw_records = list(records)
        self.renderer = renderer or PlotlyRenderer()
        self.skipped = 0

    def run(self) -> RenderedReport:
        """
        Orchestrates the pipeline execution.
        """
        logger.info(f"🚀 STEP: {self.section.upper()} REPORT")
        logger.info("-" * 30)

        # --- 1. EXTRACT ---
        records = self.extract()
        if not records:
            logger.warning(f"⚠️ No valid {self.section} records. Rendering an empty report.")

        # --- 2. TRANSFORM ---
        report = self.transform(records)

        # --- 3. LOAD ---
        rendered = self.load(report)

        logger.info(f"✅ {self.section.capitalize()} Report Finished.")
        logger.info("=" * 60)
        return rendered

    def extract(self) -> list[Record]:
        """
        Validates the raw records against the section schema. Invalid
        records are logged and skipped; the rest carry on.
        """
        validated = []
        for index, raw in enumerate(self.raw_records):
            if isinstance(raw, self.schema):
                validated.append(raw)
                continue
            try:
                validated.append(self.schema.model_validate(raw))
            except ValidationError as e:
                self.skipped += 1
                logger.error(f"❌ Skipping {self.section} record #{index}: {e}")

        if self.skipped:
            logger.warning(
                f"⚠️ {self.skipped} of {len(self.raw_records)} {self.section} records failed validation."
            )
        return validated

    @abstractmethod
    def transform(self, records: list[Any]) -> Report:
        """
        Aggregates validated records into headline metrics and panels.
        """
        pass

    def load(self, report: Report) -> RenderedReport:
        """
        Hands every panel to the renderer.
        """
        artifacts = [render_panel(panel, self.renderer) for panel in report.panels]
        logger.info(f"Rendered {len(artifacts)} panels for {self.section}.")
        return RenderedReport(report=report, artifacts=artifacts, skipped=self.skipped)

    def build_report(self, metrics: dict, panels: list) -> Report:
        return Report(
            category=self.section,
            report_type="summary",
            title=self.title,
            description=self.description,
            metrics=metrics,
            panels=panels,
        )
