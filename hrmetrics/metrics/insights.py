"""Qualitative statements derived from DerivedMetrics."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from hrmetrics.domains.workforce.departments import DepartmentRollup
from hrmetrics.metrics.engine import DerivedMetrics
from hrmetrics.utils.transforms import round_half_up, safe_ratio

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Insight:
    key: str
    label: str
    value: str
    caption: str

    @property
    def text(self) -> str:
        return f"{self.label.upper()}: {self.value} {self.caption}"


def top_department(departments: Sequence[DepartmentRollup]) -> DepartmentRollup | None:
    """Department with the highest mean rating; the first one in grouping order on ties.

    The maximum is computed once and the first rollup holding exactly that
    mean is returned.
    """
    if not departments:
        return None
    best = max(d.average_performance for d in departments)
    return next(d for d in departments if d.average_performance == best)


def select_insights(metrics: DerivedMetrics) -> list[Insight]:
    workforce = metrics.workforce
    thresholds = metrics.settings.thresholds
    leader = top_department(metrics.departments)
    high_share = round_half_up(safe_ratio(workforce.high_performers, workforce.total) * 100)
    common_band = max(metrics.salary_distribution, key=lambda b: b.count, default=None)

    insights = [
        Insight(
            "top_department",
            "Top Department",
            leader.name if leader else "N/A",
            "leads in performance metrics and team engagement",
        ),
        Insight(
            "high_performers",
            "Strengths",
            f"{workforce.high_performers} employees ({high_share}%)",
            f"are high performers with {thresholds.high_performer_rating}+ ratings",
        ),
        Insight(
            "low_attendance",
            "Attention Needed",
            str(workforce.low_attendance),
            f"employees require attendance improvement (below {thresholds.low_attendance_rate:g}% threshold)",
        ),
        Insight(
            "pending_reviews",
            "Action Items",
            str(workforce.pending_reviews),
            "performance reviews are pending and should be scheduled",
        ),
        Insight(
            "recent_hires",
            "Growth Trend",
            str(workforce.recent_hires),
            f"new hires in the last {metrics.settings.recent_hire_days} days",
        ),
        Insight(
            "open_positions",
            "Open Positions",
            str(metrics.recruitment.open_positions),
            f"active recruitments across {metrics.recruitment.recruiting_departments} departments",
        ),
        Insight(
            "compensation",
            "Compensation",
            common_band.label if common_band and common_band.count else "N/A",
            "is the most common salary band",
        ),
        Insight(
            "overall_health",
            "Overall Health",
            f"{workforce.average_attendance}%",
            "attendance rate across the workforce",
        ),
    ]
    logger.debug("Selected %d insights (top department: %s)", len(insights), insights[0].value)
    return insights


def select_alerts(metrics: DerivedMetrics) -> list[Insight]:
    """Priority alerts shown on the dashboard; empty when nothing needs attention."""
    alerts = []
    if metrics.workforce.pending_reviews > 0:
        alerts.append(Insight(
            "pending_reviews",
            "Performance Reviews Due",
            str(metrics.workforce.pending_reviews),
            "employees are rated below the review threshold",
        ))
    if metrics.workforce.low_attendance > 0:
        alerts.append(Insight(
            "low_attendance",
            "Low Attendance Issues",
            str(metrics.workforce.low_attendance),
            "employees are below the attendance threshold",
        ))
    return alerts
