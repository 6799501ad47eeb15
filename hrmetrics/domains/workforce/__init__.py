"""Workforce domain: staff roster ingest, headcount, department rollups,
compensation buckets and performance ranking.
"""

from pathlib import Path

from hrmetrics.domains.workforce.models import StaffRecord, staff_frame
from hrmetrics.domains.workforce.ingest import load_staff_records
from hrmetrics.domains.workforce.headcount import WorkforceSummary, summarize_workforce
from hrmetrics.domains.workforce.departments import DepartmentRollup, build_department_rollups
from hrmetrics.domains.workforce.compensation import SALARY_BUCKETS, BucketCount, salary_distribution
from hrmetrics.domains.workforce.performance import rank_top_performers
from hrmetrics.utils.validators import RecordValidationError


def validate(data_dir: str | Path) -> dict:
    """Validate that the staff export exists and matches the roster schema."""
    try:
        records = load_staff_records(data_dir)
        return {"status": "ok", "row_count": len(records)}
    except FileNotFoundError as exc:
        return {"status": "error", "message": str(exc)}
    except RecordValidationError as exc:
        return {"status": "error", "message": "; ".join(exc.errors[:3])}
    except Exception as exc:
        return {"status": "error", "message": f"Unexpected: {exc}"}
