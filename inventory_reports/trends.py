"""
Synthetic trend lines for the report view.

There is no historical store behind the console, so trend charts are
simulated from a current aggregate: a seasonal sine curve around the
baseline plus bounded uniform noise. The output is for display only.
"""

import logging
import math
from enum import Enum
from typing import Mapping, Optional
import numpy as np

from . import settings
from .schemas import TrendPoint

logger = logging.getLogger(__name__)


class TimeRange(str, Enum):
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"


def period_labels(time_range: TimeRange | str) -> list[str]:
    """Weekday names, 'Day N' for a 30-day month, or month abbreviations."""
    time_range = TimeRange(time_range)
    if time_range is TimeRange.WEEKLY:
        return list(settings.WEEKDAY_LABELS)
    if time_range is TimeRange.MONTHLY:
        return [f"Day {day}" for day in range(1, settings.MONTHLY_PERIODS + 1)]
    return list(settings.MONTH_LABELS)


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Random source for trend noise; falls back to TREND_SEED (None = fresh entropy)."""
    return np.random.default_rng(settings.TREND_SEED if seed is None else seed)


def generate_trend(
    baseline: float,
    time_range: TimeRange | str,
    *,
    amplitude: Optional[float] = None,
    noise: Optional[float] = None,
    rng: Optional[np.random.Generator] = None,
    percentage: bool = False,
) -> list[float]:
    """
    One value per period of `time_range`:

        baseline * (1 + amplitude * sin(2*pi*i / periods) + u_i),  u_i ~ U(-noise, noise)

    Values never go below 0; percentage series are also capped at 100.
    """
    amplitude = settings.TREND_AMPLITUDE if amplitude is None else amplitude
    noise = settings.TREND_NOISE if noise is None else noise
    if amplitude < 0 or noise < 0:
        raise ValueError("Trend amplitude and noise must be non-negative.")

    rng = rng if rng is not None else make_rng()
    periods = len(period_labels(time_range))

    baseline = float(baseline)
    if not math.isfinite(baseline):
        logger.warning(f"Non-finite trend baseline {baseline!r}; using 0.")
        baseline = 0.0

    index = np.arange(periods)
    seasonal = np.sin(2 * np.pi * index / periods)
    jitter = rng.uniform(-noise, noise, size=periods)
    values = baseline * (1 + amplitude * seasonal + jitter)

    values = np.clip(values, 0, 100 if percentage else None)
    return [round(float(value), 2) for value in values]


def generate_trend_series(
    baselines: Mapping[str, float],
    time_range: TimeRange | str,
    *,
    amplitude: Optional[float] = None,
    noise: Optional[float] = None,
    rng: Optional[np.random.Generator] = None,
    percentage: bool = False,
) -> list[TrendPoint]:
    """Aligns one generated series per baseline into a point per period label."""
    rng = rng if rng is not None else make_rng()
    labels = period_labels(time_range)
    series = {
        name: generate_trend(
            baseline,
            time_range,
            amplitude=amplitude,
            noise=noise,
            rng=rng,
            percentage=percentage,
        )
        for name, baseline in baselines.items()
    }
    return [
        TrendPoint(period=label, values={name: values[i] for name, values in series.items()})
        for i, label in enumerate(labels)
    ]


def trend_rows(points: list[TrendPoint]) -> list[dict]:
    """Line-chart rows: {'name': period, <series>: value, ...}."""
    return [{"name": point.period, **point.values} for point in points]
