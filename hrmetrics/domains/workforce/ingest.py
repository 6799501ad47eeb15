"""Ingest the staff roster from HRIS exports (CSV or JSON)."""

import logging
from pathlib import Path

import pandas as pd

from hrmetrics.domains.workforce.models import StaffRecord, staff_schema
from hrmetrics.utils.io import find_record_file, read_records
from hrmetrics.utils.transforms import normalize_columns
from hrmetrics.utils.validators import require_valid, validate_dataframe

logger = logging.getLogger(__name__)

STAFF_EXPORT_STEM = "staff"

# HRIS exports name a few columns differently from the engine's records
COLUMN_ALIASES = {
    "employee_id": "id",
    "full_name": "name",
    "position": "role",
    "job_title": "role",
    "base_salary": "salary",
    "rating": "performance_rating",
    "hire_date": "join_date",
}


def _prepare(raw: pd.DataFrame) -> pd.DataFrame:
    df = normalize_columns(raw, COLUMN_ALIASES)
    if "status" in df.columns:
        df["status"] = df["status"].astype(str).str.strip().str.lower()
    return df


def _to_record(row: dict) -> StaffRecord:
    avatar = row.get("avatar")
    return StaffRecord(
        id=str(row["id"]),
        name=row["name"],
        department=row["department"],
        role=row["role"],
        status=row["status"],
        salary=int(row["salary"]),
        performance_rating=float(row["performance_rating"]),
        attendance_rate=float(row["attendance_rate"]),
        join_date=pd.Timestamp(row["join_date"]).date(),
        avatar=avatar if isinstance(avatar, str) else None,
    )


def staff_records_from_frame(raw: pd.DataFrame) -> list[StaffRecord]:
    """Validate a raw roster frame and convert it into StaffRecords, preserving row order."""
    outcome = validate_dataframe(_prepare(raw), staff_schema)
    require_valid(outcome, "staff")
    return [_to_record(row) for row in outcome["data"].to_dict("records")]


def load_staff_records(data_dir: str | Path, dry_run: bool = False) -> list[StaffRecord]:
    """Load the staff roster export from ``data_dir``.

    With ``dry_run`` only the presence of the export is checked.
    """
    path = find_record_file(data_dir, STAFF_EXPORT_STEM)
    if dry_run:
        return []

    logger.info("Reading staff export: %s", path.name)
    records = staff_records_from_frame(read_records(path))
    logger.info("Ingested %d staff records", len(records))
    return records
