"""Per-department rollups of the staff roster."""

import logging
from dataclasses import dataclass

import pandas as pd

from hrmetrics.utils.transforms import round_half_up

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DepartmentRollup:
    name: str
    headcount: int
    average_salary: int
    average_performance: float
    average_attendance: int

    @property
    def performance_score(self) -> int:
        """Average rating expressed as a percentage of the 5.0 scale."""
        return round_half_up(self.average_performance * 20)


def build_department_rollups(staff: pd.DataFrame) -> list[DepartmentRollup]:
    """Group staff by exact department label, in order of first appearance.

    Labels are not normalized; "Sales" and "sales" are two departments.
    """
    if staff.empty:
        return []

    grouped = staff.groupby("department", sort=False).agg(
        headcount=("id", "count"),
        salary_total=("salary", "sum"),
        rating_total=("performance_rating", "sum"),
        attendance_total=("attendance_rate", "sum"),
    )

    rollups = [
        DepartmentRollup(
            name=str(dept),
            headcount=int(row.headcount),
            average_salary=round_half_up(row.salary_total / row.headcount),
            average_performance=float(row.rating_total / row.headcount),
            average_attendance=round_half_up(row.attendance_total / row.headcount),
        )
        for dept, row in grouped.iterrows()
    ]
    logger.info("Built rollups for %d departments", len(rollups))
    return rollups
