"""Staff roster record and its pandera schema."""

from collections.abc import Sequence
from dataclasses import asdict, dataclass, fields
from datetime import date

import pandas as pd
import pandera as pa
from pandera import Check, Column

from hrmetrics.utils.types import StaffStatus
from hrmetrics.utils.validators import RecordValidationError

type SalaryAmount = int
type Rating = float


@dataclass(frozen=True)
class StaffRecord:
    id: str
    name: str
    department: str
    role: str
    status: StaffStatus
    salary: SalaryAmount
    performance_rating: Rating
    attendance_rate: float
    join_date: date
    avatar: str | None = None

    def __post_init__(self):
        errors = []
        if not isinstance(self.department, str) or not self.department:
            errors.append(f"staff {self.id!r} has no department")
        if self.status in (StaffStatus.ACTIVE, StaffStatus.INACTIVE):
            object.__setattr__(self, "status", StaffStatus(self.status))
        else:
            errors.append(f"staff {self.id!r} has unknown status {self.status!r}")
        if self.salary < 0:
            errors.append(f"staff {self.id!r} has negative salary {self.salary}")
        if not 0 <= self.performance_rating <= 5:
            errors.append(f"staff {self.id!r} rating {self.performance_rating} outside [0, 5]")
        if not 0 <= self.attendance_rate <= 100:
            errors.append(f"staff {self.id!r} attendance {self.attendance_rate} outside [0, 100]")
        if not isinstance(self.join_date, date):
            errors.append(f"staff {self.id!r} join date {self.join_date!r} is not a date")
        if errors:
            raise RecordValidationError("staff", errors)


STAFF_COLUMNS = [f.name for f in fields(StaffRecord)]


staff_schema = pa.DataFrameSchema(
    {
        "id": Column(str, Check.str_length(min_value=1), unique=True),
        "name": Column(str, Check.str_length(min_value=1)),
        "department": Column(str, Check.str_length(min_value=1), nullable=False),
        "role": Column(str, nullable=False),
        "status": Column(str, Check.isin([s.value for s in StaffStatus])),
        "salary": Column(int, Check.greater_than_or_equal_to(0)),
        "performance_rating": Column(float, Check.in_range(0, 5)),
        "attendance_rate": Column(float, Check.in_range(0, 100)),
        "join_date": Column(pa.DateTime, nullable=False),
        "avatar": Column(str, nullable=True, required=False),
    },
    strict=False,
    coerce=True,
)


def staff_frame(records: Sequence[StaffRecord]) -> pd.DataFrame:
    """Build a typed DataFrame from staff records, one row per record in input order."""
    df = pd.DataFrame([asdict(r) for r in records], columns=STAFF_COLUMNS)
    df = df.astype({
        "salary": "int64",
        "performance_rating": "float64",
        "attendance_rate": "float64",
    })
    df["join_date"] = pd.to_datetime(df["join_date"])
    return df
