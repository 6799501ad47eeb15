"""Recruitment domain: ATS pipeline ingest and open-position rollups."""

from pathlib import Path

from hrmetrics.domains.recruitment.models import RecruitmentEntry, parse_priority, parse_stage
from hrmetrics.domains.recruitment.ingest import load_recruitment_entries
from hrmetrics.domains.recruitment.funnel import RecruitmentSummary, summarize_recruitment
from hrmetrics.utils.validators import RecordValidationError


def validate(data_dir: str | Path) -> dict:
    """Validate that the recruitment export exists and every stage is recognized."""
    try:
        entries = load_recruitment_entries(data_dir)
        return {"status": "ok", "row_count": len(entries)}
    except FileNotFoundError as exc:
        return {"status": "error", "message": str(exc)}
    except RecordValidationError as exc:
        return {"status": "error", "message": "; ".join(exc.errors[:3])}
    except Exception as exc:
        return {"status": "error", "message": f"Unexpected: {exc}"}
