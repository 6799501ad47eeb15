"""Daily attendance record and its pandera schema."""

from collections.abc import Sequence
from dataclasses import asdict, dataclass, fields
from datetime import date

import pandas as pd
import pandera as pa
from pandera import Check, Column

from hrmetrics.utils.validators import RecordValidationError


@dataclass(frozen=True)
class AttendanceDay:
    date: date
    present: int
    absent: int
    late: int

    def __post_init__(self):
        errors = [
            f"{name} count {value} on {self.date} is negative"
            for name, value in (("present", self.present), ("absent", self.absent), ("late", self.late))
            if value < 0
        ]
        if not isinstance(self.date, date):
            errors.append(f"attendance date {self.date!r} is not a date")
        if errors:
            raise RecordValidationError("attendance", errors)


ATTENDANCE_COLUMNS = [f.name for f in fields(AttendanceDay)]


attendance_schema = pa.DataFrameSchema(
    {
        "date": Column(pa.DateTime, nullable=False, unique=True),
        "present": Column(int, Check.greater_than_or_equal_to(0)),
        "absent": Column(int, Check.greater_than_or_equal_to(0)),
        "late": Column(int, Check.greater_than_or_equal_to(0)),
    },
    strict=False,
    coerce=True,
)


def attendance_frame(days: Sequence[AttendanceDay]) -> pd.DataFrame:
    """Build a typed DataFrame from attendance days, in input order."""
    df = pd.DataFrame([asdict(d) for d in days], columns=ATTENDANCE_COLUMNS)
    df = df.astype({"present": "int64", "absent": "int64", "late": "int64"})
    df["date"] = pd.to_datetime(df["date"])
    return df
