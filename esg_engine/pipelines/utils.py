"""
Shared helpers for the extractors: metric lookup, value selection, trends.
"""

import re
from typing import Optional, Sequence, Tuple

from esg_engine.models.enumerations import Trend
from esg_engine.models.metric import Metric, MetricValue

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")
_LEADING_FLOAT = re.compile(r"^\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+))")


def normalize_label(text: Optional[str]) -> str:
    """Collapse runs of whitespace; source names contain stray double spaces."""
    return " ".join((text or "").split())


def normalize_unit(text: Optional[str]) -> str:
    """Case-folded unit with all whitespace removed ("Non-exe cutive" == "Non-executive")."""
    return "".join((text or "").split()).casefold()


def find_metric(
    metrics: Sequence[Metric],
    name: str,
    unit: Optional[str] = None,
) -> Optional[Metric]:
    """First metric with a matching name (and unit, when given)."""
    wanted_name = normalize_label(name)
    wanted_unit = normalize_unit(unit) if unit is not None else None
    for metric in metrics:
        if normalize_label(metric.metric_name) != wanted_name:
            continue
        if wanted_unit is not None and normalize_unit(metric.unit) != wanted_unit:
            continue
        return metric
    return None


def values_by_year_desc(metric: Metric) -> list:
    """Values newest first. Stable, and never reorders the metric itself."""
    return sorted(metric.values, key=lambda v: v.year, reverse=True)


def value_for_year(metric: Optional[Metric], year: int) -> Optional[MetricValue]:
    if metric is None:
        return None
    for value in metric.values:
        if value.year == year:
            return value
    return None


def most_recent_value(metric: Optional[Metric]) -> Optional[MetricValue]:
    if metric is None or not metric.values:
        return None
    return values_by_year_desc(metric)[0]


def previous_value(metric: Metric, year: int) -> Optional[MetricValue]:
    """Most recent value from a year strictly before `year`."""
    for value in values_by_year_desc(metric):
        if value.year < year:
            return value
    return None


def latest_and_previous(
    metric: Optional[Metric],
    latest_year: Optional[int] = None,
) -> Tuple[Optional[MetricValue], Optional[MetricValue]]:
    """
    Select the values a trend is computed from.

    With `latest_year`, the latest value is the one reported for that year;
    otherwise it is the metric's own most recent value. The previous value
    comes from the next-most-recent distinct year.
    """
    if metric is None or not metric.values:
        return None, None
    if latest_year is None:
        latest = most_recent_value(metric)
    else:
        latest = value_for_year(metric, latest_year)
    if latest is None:
        return None, None
    return latest, previous_value(metric, latest.year)


def parse_leading_int(raw: Optional[str]) -> Optional[int]:
    """Integer prefix of a raw value ("11 members" -> 11)."""
    if not raw:
        return None
    match = _LEADING_INT.match(raw)
    return int(match.group(1)) if match else None


def parse_leading_float(raw: Optional[str]) -> Optional[float]:
    """Float prefix of a raw value after dropping '%' ("67%" -> 67.0)."""
    if not raw:
        return None
    match = _LEADING_FLOAT.match(raw.replace("%", ""))
    return float(match.group(1)) if match else None


def compute_trend(latest: Optional[float], previous: Optional[float]) -> Trend:
    """Direction between two readings; stable when either is missing."""
    if latest is None or previous is None:
        return Trend.STABLE
    if latest > previous:
        return Trend.INCREASING
    if latest < previous:
        return Trend.DECREASING
    return Trend.STABLE
