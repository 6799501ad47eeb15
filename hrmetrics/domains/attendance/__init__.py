"""Attendance domain: daily counts ingest and the trailing attendance window."""

from pathlib import Path

from hrmetrics.domains.attendance.models import AttendanceDay
from hrmetrics.domains.attendance.ingest import load_attendance_days
from hrmetrics.domains.attendance.window import AttendanceWindow, DailyAttendance, build_attendance_window
from hrmetrics.utils.validators import RecordValidationError


def validate(data_dir: str | Path) -> dict:
    """Validate that the attendance export exists and has one row per day."""
    try:
        days = load_attendance_days(data_dir)
        return {"status": "ok", "row_count": len(days)}
    except FileNotFoundError as exc:
        return {"status": "error", "message": str(exc)}
    except RecordValidationError as exc:
        return {"status": "error", "message": "; ".join(exc.errors[:3])}
    except Exception as exc:
        return {"status": "error", "message": f"Unexpected: {exc}"}
