import logging
from pydantic import BaseModel, ConfigDict, Field

from . import settings
from .trends import TimeRange

logger = logging.getLogger(__name__)


def default_time_range() -> TimeRange:
    """DEFAULT_TIME_RANGE from the environment, or monthly when it is not a known range."""
    try:
        return TimeRange(settings.DEFAULT_TIME_RANGE)
    except ValueError:
        logger.warning(
            f"Unknown DEFAULT_TIME_RANGE '{settings.DEFAULT_TIME_RANGE}'; using '{TimeRange.MONTHLY.value}'."
        )
        return TimeRange.MONTHLY


class ReportSelection(BaseModel):
    """The (category, type, time range) currently shown in the report view."""

    model_config = ConfigDict(frozen=True)

    category: str = settings.DEFAULT_REPORT_CATEGORY
    report_type: str = settings.DEFAULT_REPORT_TYPE
    time_range: TimeRange = Field(default_factory=default_time_range)


class ReportNavigator:
    """
    Holds the report view's selection. Each transition swaps in a new
    immutable ReportSelection, so a selection handed to a report builder
    never changes underneath it. Whether a pair actually maps to a report
    is decided by the catalog, not here.
    """

    def __init__(self, initial: ReportSelection | None = None):
        self._initial = initial or ReportSelection()
        self.selection = self._initial

    def select(self, category: str, report_type: str) -> ReportSelection:
        self.selection = self.selection.model_copy(
            update={"category": category, "report_type": report_type}
        )
        logger.debug(f"Selected report {category}/{report_type}")
        return self.selection

    def select_time_range(self, time_range: TimeRange | str) -> ReportSelection:
        try:
            time_range = TimeRange(time_range)
        except ValueError:
            logger.warning(
                f"Unknown time range '{time_range}'; keeping '{self.selection.time_range.value}'."
            )
            return self.selection

        self.selection = self.selection.model_copy(update={"time_range": time_range})
        return self.selection

    def reset(self) -> ReportSelection:
        """Back to the initial selection, e.g. when navigating away from the view."""
        self.selection = self._initial
        return self.selection
