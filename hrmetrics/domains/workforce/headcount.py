"""Headcount, averages and threshold counts over the staff roster."""

import logging
from dataclasses import dataclass
from datetime import datetime

import pandas as pd

from hrmetrics.config import MetricThresholds
from hrmetrics.utils.transforms import round_half_up, safe_mean
from hrmetrics.utils.types import StaffStatus

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WorkforceSummary:
    total: int
    active: int
    inactive: int
    average_salary: int
    average_attendance: int
    average_performance: float
    recent_hires: int
    high_performers: int
    low_attendance: int
    pending_reviews: int


def count_recent_hires(staff: pd.DataFrame, now: datetime, window_days: int = 30) -> int:
    """Count staff whose join date is strictly after ``now - window_days``.

    Join dates are compared at local midnight against the wall-clock time of
    the cutoff in ``now``'s timezone, so a join date exactly on the boundary
    is not a recent hire. Midnights skipped or repeated by a DST change are
    compared like any other.
    """
    cutoff = pd.Timestamp(now)
    if cutoff.tz is not None:
        cutoff = cutoff.tz_localize(None)
    cutoff -= pd.Timedelta(days=window_days)
    return int((staff["join_date"] > cutoff).sum())


def summarize_workforce(
    staff: pd.DataFrame,
    now: datetime,
    thresholds: MetricThresholds,
    recent_hire_days: int = 30,
) -> WorkforceSummary:
    """Scalar rollups over the whole roster. An empty roster yields zeros."""
    if staff.empty:
        logger.warning("Staff roster is empty; workforce averages default to zero")

    active = int((staff["status"] == StaffStatus.ACTIVE).sum())
    summary = WorkforceSummary(
        total=len(staff),
        active=active,
        inactive=len(staff) - active,
        average_salary=round_half_up(safe_mean(staff["salary"])),
        average_attendance=round_half_up(safe_mean(staff["attendance_rate"])),
        average_performance=safe_mean(staff["performance_rating"]),
        recent_hires=count_recent_hires(staff, now, recent_hire_days),
        high_performers=int((staff["performance_rating"] >= thresholds.high_performer_rating).sum()),
        low_attendance=int((staff["attendance_rate"] < thresholds.low_attendance_rate).sum()),
        pending_reviews=int((staff["performance_rating"] < thresholds.pending_review_rating).sum()),
    )
    logger.info(
        "Summarized %d staff (%d active, %d recent hires)",
        summary.total,
        summary.active,
        summary.recent_hires,
    )
    return summary
