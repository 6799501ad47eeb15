"""Period-over-period trend deltas."""

from dataclasses import dataclass

from hrmetrics.config import BaselineOffsets
from hrmetrics.utils.transforms import round_half_up
from hrmetrics.utils.types import MetricValue


@dataclass(frozen=True)
class TrendDelta:
    percent: int
    is_positive: bool


@dataclass(frozen=True)
class TrendBaseline:
    """Previous-period values the current metrics are compared against."""

    total_staff: MetricValue
    average_salary: MetricValue
    average_attendance: MetricValue
    average_performance: MetricValue


TRENDED_METRICS = ("total_staff", "average_salary", "average_attendance", "average_performance")


def calc_trend(current: MetricValue, previous: MetricValue) -> TrendDelta:
    """Signed percentage change from ``previous`` to ``current``.

    The percentage is 0 when ``previous`` is not positive. Equal values are
    not a positive trend.
    """
    percent = round_half_up((current - previous) / previous * 100) if previous > 0 else 0
    return TrendDelta(percent=percent, is_positive=current > previous)


def derive_baseline(current: dict[str, MetricValue], offsets: BaselineOffsets) -> TrendBaseline:
    """Approximate the previous period by shifting each current value by its offset."""
    return TrendBaseline(**{name: current[name] + getattr(offsets, name) for name in TRENDED_METRICS})


def compute_trends(current: dict[str, MetricValue], baseline: TrendBaseline) -> dict[str, TrendDelta]:
    return {name: calc_trend(current[name], getattr(baseline, name)) for name in TRENDED_METRICS}
