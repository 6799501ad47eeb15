"""Trailing attendance window: per-day rates and totals for the latest days."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date

from hrmetrics.domains.attendance.models import AttendanceDay, attendance_frame
from hrmetrics.utils.transforms import round_half_up, safe_ratio
from hrmetrics.utils.validators import require_valid, validate_unique

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DailyAttendance:
    date: date
    present: int
    absent: int
    late: int
    rate: float
    total: int

    @property
    def rate_percent(self) -> int:
        return round_half_up(self.rate * 100)

    @property
    def weekday(self) -> str:
        return self.date.strftime("%a")


@dataclass(frozen=True)
class AttendanceWindow:
    days: tuple[DailyAttendance, ...]
    average_present: int
    average_absent: int


def summarize_day(day: AttendanceDay) -> DailyAttendance:
    """Rate excludes late arrivals (present / (present + absent)); total includes them."""
    return DailyAttendance(
        date=day.date,
        present=day.present,
        absent=day.absent,
        late=day.late,
        rate=safe_ratio(day.present, day.present + day.absent),
        total=day.present + day.absent + day.late,
    )


def latest_days(days: Sequence[AttendanceDay], window: int = 7) -> list[AttendanceDay]:
    """Select the ``window`` chronologically latest days, oldest first.

    Selection is by date, not by position in ``days``. Duplicate dates are
    rejected with RecordValidationError.
    """
    df = attendance_frame(days)
    require_valid(validate_unique(df, ["date"]), "attendance")
    if window <= 0:
        return []
    ordered = df.sort_values("date", kind="stable").tail(window)
    return [days[i] for i in ordered.index]


def build_attendance_window(days: Sequence[AttendanceDay], window: int = 7) -> AttendanceWindow:
    summaries = tuple(summarize_day(day) for day in latest_days(days, window))
    count = len(summaries)
    result = AttendanceWindow(
        days=summaries,
        average_present=round_half_up(safe_ratio(sum(d.present for d in summaries), count)),
        average_absent=round_half_up(safe_ratio(sum(d.absent for d in summaries), count)),
    )
    logger.info("Built attendance window over %d of %d days", count, len(days))
    return result
