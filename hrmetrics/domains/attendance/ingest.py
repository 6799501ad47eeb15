"""Ingest daily attendance counts exported by the time-tracking system."""

import logging
from pathlib import Path

import pandas as pd

from hrmetrics.domains.attendance.models import AttendanceDay, attendance_schema
from hrmetrics.utils.io import find_record_file, read_records
from hrmetrics.utils.transforms import normalize_columns
from hrmetrics.utils.validators import require_valid, validate_dataframe

logger = logging.getLogger(__name__)

ATTENDANCE_EXPORT_STEM = "attendance"


def attendance_days_from_frame(raw: pd.DataFrame) -> list[AttendanceDay]:
    """Validate a raw attendance frame and convert it into AttendanceDays."""
    df = normalize_columns(raw, {"day": "date"})
    outcome = validate_dataframe(df, attendance_schema)
    require_valid(outcome, "attendance")
    return [
        AttendanceDay(
            date=pd.Timestamp(row["date"]).date(),
            present=int(row["present"]),
            absent=int(row["absent"]),
            late=int(row["late"]),
        )
        for row in outcome["data"].to_dict("records")
    ]


def load_attendance_days(data_dir: str | Path, dry_run: bool = False) -> list[AttendanceDay]:
    """Load the attendance export from ``data_dir``."""
    path = find_record_file(data_dir, ATTENDANCE_EXPORT_STEM)
    if dry_run:
        return []

    logger.info("Reading attendance export: %s", path.name)
    days = attendance_days_from_frame(read_records(path))
    logger.info("Ingested %d attendance days", len(days))
    return days
