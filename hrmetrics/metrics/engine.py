"""Aggregation engine: one pure pass from record snapshots to DerivedMetrics.

The dashboard and the exported report both read the value returned by
:func:`compute_metrics`, so the two never disagree.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime

from hrmetrics.config import MetricSettings
from hrmetrics.domains.attendance.models import AttendanceDay
from hrmetrics.domains.attendance.window import AttendanceWindow, build_attendance_window
from hrmetrics.domains.recruitment.funnel import RecruitmentSummary, summarize_recruitment
from hrmetrics.domains.recruitment.models import RecruitmentEntry
from hrmetrics.domains.workforce.compensation import BucketCount, salary_distribution, salary_range
from hrmetrics.domains.workforce.departments import DepartmentRollup, build_department_rollups
from hrmetrics.domains.workforce.headcount import WorkforceSummary, summarize_workforce
from hrmetrics.domains.workforce.models import StaffRecord, staff_frame
from hrmetrics.domains.workforce.performance import rank_top_performers
from hrmetrics.metrics.trends import TrendBaseline, TrendDelta, compute_trends, derive_baseline

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DerivedMetrics:
    now: datetime
    workforce: WorkforceSummary
    salary_range: tuple[int, int] | None
    departments: tuple[DepartmentRollup, ...]
    salary_distribution: tuple[BucketCount, ...]
    top_performers: tuple[StaffRecord, ...]
    attendance: AttendanceWindow
    recruitment: RecruitmentSummary
    recruitment_entries: tuple[RecruitmentEntry, ...]
    baseline: TrendBaseline
    trends: dict[str, TrendDelta]
    settings: MetricSettings

    @property
    def total_staff(self) -> int:
        return self.workforce.total

    @property
    def open_positions(self) -> int:
        return self.recruitment.open_positions


def compute_metrics(
    staff: Sequence[StaffRecord],
    attendance: Sequence[AttendanceDay],
    recruitment: Sequence[RecruitmentEntry],
    now: datetime,
    baseline: TrendBaseline | None = None,
    settings: MetricSettings | None = None,
) -> DerivedMetrics:
    """Compute every derived metric for one snapshot of the record store.

    Inputs are never mutated. Empty collections produce zero counts and
    zero averages rather than errors. When ``baseline`` is omitted the
    comparison period is derived from ``settings.baseline_offsets``.
    """
    settings = settings or MetricSettings()
    staff = tuple(staff)
    attendance = tuple(attendance)
    recruitment = tuple(recruitment)

    frame = staff_frame(staff)
    workforce = summarize_workforce(frame, now, settings.thresholds, settings.recent_hire_days)

    current = {
        "total_staff": workforce.total,
        "average_salary": workforce.average_salary,
        "average_attendance": workforce.average_attendance,
        "average_performance": workforce.average_performance,
    }
    if baseline is None:
        baseline = derive_baseline(current, settings.baseline_offsets)

    metrics = DerivedMetrics(
        now=now,
        workforce=workforce,
        salary_range=salary_range(frame),
        departments=tuple(build_department_rollups(frame)),
        salary_distribution=tuple(salary_distribution(frame)),
        top_performers=tuple(rank_top_performers(staff, frame, settings.top_performer_count)),
        attendance=build_attendance_window(attendance, settings.attendance_window_days),
        recruitment=summarize_recruitment(recruitment),
        recruitment_entries=recruitment,
        baseline=baseline,
        trends=compute_trends(current, baseline),
        settings=settings,
    )
    logger.info(
        "Computed metrics at %s: %d staff, %d departments, %d open positions",
        now.isoformat(),
        workforce.total,
        len(metrics.departments),
        metrics.open_positions,
    )
    return metrics
