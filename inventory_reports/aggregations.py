"""
Pure aggregation helpers that turn entity collections into chart-ready
summaries. Every function accepts pydantic records or plain mappings,
never mutates its input, and returns well-defined zero values for empty
collections.
"""

from typing import Any, Iterable, Mapping, Optional, Sequence
import numpy as np
import pandas as pd
from pydantic import BaseModel

from . import settings
from .schemas import CategoryBucket, RangeBucket
from .utils import format_value

# (label, inclusive min, exclusive max or None for the open-ended last bucket)
Range = tuple[str, float, Optional[float]]


def _as_dict(record: Any) -> dict[str, Any]:
    if isinstance(record, BaseModel):
        return record.model_dump()
    return dict(record)


def to_frame(records: Iterable[Any]) -> pd.DataFrame:
    """
    Flattens records into a DataFrame, one row per record in input order.
    Nested fields become dotted columns, e.g. 'location.state'.
    """
    rows = [_as_dict(record) for record in records]
    if not rows:
        return pd.DataFrame()
    return pd.json_normalize(rows)


def _keys(df: pd.DataFrame, key: str) -> pd.Series:
    """Grouping keys as strings; blank or missing keys fall under UNKNOWN_KEY."""
    if key not in df.columns:
        return pd.Series(settings.UNKNOWN_KEY, index=df.index)
    keys = df[key]
    present = keys.notna() & (keys.astype(str).str.strip() != "")
    # format_value keeps 1 as "1" after pandas widens a gappy int column to float
    return keys.map(format_value).where(present, settings.UNKNOWN_KEY)


def _numbers(df: pd.DataFrame, field: str) -> pd.Series:
    """Numeric column with malformed or missing values read as 0."""
    if field not in df.columns:
        return pd.Series(0, index=df.index)
    return pd.to_numeric(df[field], errors="coerce").fillna(0)


def _plain(value: Any) -> Any:
    # numpy scalars -> builtin int/float
    return value.item() if hasattr(value, "item") else value


def count_by(
    records: Iterable[Any], key: str, categories: Optional[Sequence[str]] = None
) -> dict[str, int]:
    """
    Counts records per distinct value of `key`, in discovery order.

    When `categories` is given those keys are always present (zero when
    unseen) and come first; any unexpected key is appended after them so
    the counts still add up to the number of records.
    """
    counts = {str(name): 0 for name in categories or []}
    df = to_frame(records)
    if len(df) == 0:
        return counts

    keys = _keys(df, key)
    for name, size in keys.groupby(keys, sort=False).size().items():
        counts[name] = counts.get(name, 0) + int(size)
    return counts


def sum_by(records: Iterable[Any], key: str, field: str) -> dict[str, Any]:
    """Sums `field` per distinct value of `key`, in discovery order."""
    df = to_frame(records)
    if len(df) == 0:
        return {}

    keys = _keys(df, key)
    sums = _numbers(df, field).groupby(keys, sort=False).sum()
    return {name: _plain(value) for name, value in sums.items()}


def validate_ranges(ranges: Sequence[Range]) -> None:
    """Raises ValueError unless the ranges tile [first min, inf) with no gaps."""
    if not ranges:
        raise ValueError("At least one range is required.")

    for (label, low, high), (next_label, next_low, _) in zip(ranges, ranges[1:]):
        if high is None or high <= low:
            raise ValueError(f"Range '{label}' needs an upper bound above {low}.")
        if high != next_low:
            raise ValueError(
                f"Range '{label}' ends at {high} but '{next_label}' starts at {next_low}."
            )

    if ranges[-1][2] is not None:
        raise ValueError(f"Last range '{ranges[-1][0]}' must be unbounded.")


def bucket_by_range(
    records: Iterable[Any], field: str, ranges: Sequence[Range]
) -> list[RangeBucket]:
    """
    Classifies each record's `field` into exactly one [min, max) bucket.

    All buckets are returned, in range order, even when empty. A value on a
    boundary lands in the bucket it opens. Values below the first lower
    bound are counted in the first bucket, infinite ones in the last.
    """
    validate_ranges(ranges)
    labels = [label for label, _, _ in ranges]
    counts = dict.fromkeys(labels, 0)

    df = to_frame(records)
    if len(df):
        # pd.cut leaves inf unbinned, so cap at the largest finite float
        values = _numbers(df, field).clip(lower=ranges[0][1], upper=np.finfo(float).max)
        edges = [low for _, low, _ in ranges] + [np.inf]
        binned = pd.cut(values, bins=edges, right=False, labels=labels)
        for label, size in binned.value_counts(sort=False).items():
            counts[label] = int(size)

    return [
        RangeBucket(label=label, min=low, max=high, count=counts[label])
        for label, low, high in ranges
    ]


def top_n(records: Iterable[Any], field: str, n: Optional[int] = None) -> list[Any]:
    """
    Returns at most `n` of the original records, highest `field` first.
    Ties keep their input order.
    """
    n = settings.REPORT_TOP_N if n is None else n
    records = list(records)
    if not records or n <= 0:
        return []

    values = _numbers(to_frame(records), field)
    ranked = values.sort_values(ascending=False, kind="stable")
    return [records[position] for position in ranked.index[:n]]


def group_by(records: Iterable[Any], key: str) -> dict[str, list[Any]]:
    """Maps each distinct `key` to its member records, both in input order."""
    records = list(records)
    grouped: dict[str, list[Any]] = {}
    if not records:
        return grouped

    keys = _keys(to_frame(records), key)
    for record, name in zip(records, keys):
        grouped.setdefault(name, []).append(record)
    return grouped


def total(records: Iterable[Any], field: str) -> Any:
    df = to_frame(records)
    if len(df) == 0:
        return 0
    return _plain(_numbers(df, field).sum())


def safe_mean(records: Iterable[Any], field: str) -> float:
    """Mean of `field`; 0.0 for an empty collection instead of NaN."""
    df = to_frame(records)
    if len(df) == 0:
        return 0.0
    return float(_numbers(df, field).mean())


def safe_ratio(part: float, whole: float) -> float:
    if not whole:
        return 0.0
    return part / whole


def sort_desc(mapping: Mapping[str, Any]) -> dict[str, Any]:
    """Re-orders a mapping by value, largest first; ties keep their order."""
    return dict(sorted(mapping.items(), key=lambda item: item[1], reverse=True))


def to_chart_data(aggregate: Mapping[str, Any] | Sequence[RangeBucket]) -> list[CategoryBucket]:
    """One CategoryBucket per key of a mapping, or per range bucket (its count)."""
    if isinstance(aggregate, Mapping):
        return [CategoryBucket(name=name, value=value) for name, value in aggregate.items()]
    return [CategoryBucket(name=bucket.label, value=bucket.count) for bucket in aggregate]


def to_rows(aggregate: Mapping[str, Any] | Sequence[RangeBucket]) -> list[dict[str, Any]]:
    """Chart rows ({'name', 'value'}) from a key->value mapping or range buckets."""
    return [bucket.model_dump() for bucket in to_chart_data(aggregate)]
