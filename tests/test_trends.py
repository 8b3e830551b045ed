"""Tests for the synthetic trend generator (inventory_reports/trends.py)."""

import pytest

from inventory_reports import settings
from inventory_reports.trends import (
    TimeRange,
    generate_trend,
    generate_trend_series,
    make_rng,
    period_labels,
    trend_rows,
)

# Rounding to cents can nudge a value past the analytic bound.
EPSILON = 0.01


class TestPeriodLabels:
    def test_weekly(self):
        assert period_labels("weekly") == ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]

    def test_monthly(self):
        labels = period_labels(TimeRange.MONTHLY)
        assert len(labels) == 30
        assert labels[0] == "Day 1"
        assert labels[-1] == "Day 30"

    def test_yearly(self):
        labels = period_labels(TimeRange.YEARLY)
        assert labels == settings.MONTH_LABELS
        assert len(labels) == 12

    def test_unknown_range(self):
        with pytest.raises(ValueError):
            period_labels("hourly")


class TestGenerateTrend:
    @pytest.mark.parametrize("time_range,periods", [("weekly", 7), ("monthly", 30), ("yearly", 12)])
    def test_length_matches_range(self, time_range, periods):
        assert len(generate_trend(100, time_range, rng=make_rng(1))) == periods

    def test_same_seed_same_values(self):
        first = generate_trend(500, "monthly", rng=make_rng(7))
        second = generate_trend(500, "monthly", rng=make_rng(7))
        assert first == second

    def test_within_amplitude_and_noise(self):
        baseline, amplitude, noise = 1000, 0.2, 0.05
        values = generate_trend(
            baseline, "yearly", amplitude=amplitude, noise=noise, rng=make_rng(3)
        )
        low = baseline * (1 - amplitude - noise) - EPSILON
        high = baseline * (1 + amplitude + noise) + EPSILON
        assert all(low <= value <= high for value in values)

    def test_without_noise_follows_sine(self):
        values = generate_trend(100, "weekly", amplitude=0.5, noise=0, rng=make_rng(0))
        assert values[0] == 100.0
        assert max(values) > 100 > min(values)

    def test_counts_never_negative(self):
        values = generate_trend(10, "monthly", amplitude=3, noise=0.5, rng=make_rng(11))
        assert all(value >= 0 for value in values)
        assert min(values) == 0

    def test_negative_baseline_clamps_to_zero(self):
        assert generate_trend(-50, "weekly", rng=make_rng(2)) == [0.0] * 7

    def test_percentage_capped_at_100(self):
        values = generate_trend(95, "monthly", amplitude=0.5, noise=0.1, percentage=True, rng=make_rng(5))
        assert all(0 <= value <= 100 for value in values)
        assert max(values) == 100

    def test_zero_baseline(self):
        assert generate_trend(0, "yearly", rng=make_rng(9)) == [0.0] * 12

    def test_rejects_negative_amplitude(self):
        with pytest.raises(ValueError):
            generate_trend(10, "weekly", amplitude=-0.1)

    def test_non_finite_baseline_reads_as_zero(self):
        assert generate_trend(float("nan"), "weekly", rng=make_rng(4)) == [0.0] * 7


class TestGenerateTrendSeries:
    def test_one_point_per_label(self, rng):
        points = generate_trend_series({"A": 10, "B": 20}, "weekly", rng=rng)
        assert [p.period for p in points] == settings.WEEKDAY_LABELS
        assert all(set(p.values) == {"A", "B"} for p in points)

    def test_empty_baselines(self, rng):
        points = generate_trend_series({}, "yearly", rng=rng)
        assert len(points) == 12
        assert all(p.values == {} for p in points)

    def test_seeded_series_reproducible(self):
        first = generate_trend_series({"revenue": 1000}, "monthly", rng=make_rng(42))
        second = generate_trend_series({"revenue": 1000}, "monthly", rng=make_rng(42))
        assert first == second

    def test_rows_for_line_chart(self, rng):
        rows = trend_rows(generate_trend_series({"units": 5}, "weekly", rng=rng))
        assert rows[0]["name"] == "Mon"
        assert "units" in rows[0]
