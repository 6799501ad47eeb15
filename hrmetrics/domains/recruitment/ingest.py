"""Ingest open requisitions from the ATS export."""

import logging
from pathlib import Path

import pandas as pd

from hrmetrics.domains.recruitment.models import RecruitmentEntry, recruitment_schema
from hrmetrics.utils.io import find_record_file, read_records
from hrmetrics.utils.transforms import normalize_columns
from hrmetrics.utils.validators import require_valid, validate_dataframe

logger = logging.getLogger(__name__)

RECRUITMENT_EXPORT_STEM = "recruitment"

COLUMN_ALIASES = {
    "title": "position",
    "job_title": "position",
    "candidate_count": "applicants",
    "current_stage": "stage",
}


def recruitment_entries_from_frame(raw: pd.DataFrame) -> list[RecruitmentEntry]:
    """Validate a raw ATS frame and convert it into RecruitmentEntries.

    Stage and priority labels are normalized through the alias tables in
    ``models``; unknown labels raise RecordValidationError.
    """
    df = normalize_columns(raw, COLUMN_ALIASES)
    outcome = validate_dataframe(df, recruitment_schema)
    require_valid(outcome, "recruitment")
    return [
        RecruitmentEntry(
            position=row["position"],
            department=row["department"],
            applicants=int(row["applicants"]),
            stage=row["stage"],
            priority=row["priority"],
        )
        for row in outcome["data"].to_dict("records")
    ]


def load_recruitment_entries(data_dir: str | Path, dry_run: bool = False) -> list[RecruitmentEntry]:
    """Load the recruitment pipeline export from ``data_dir``."""
    path = find_record_file(data_dir, RECRUITMENT_EXPORT_STEM)
    if dry_run:
        return []

    logger.info("Reading recruitment export: %s", path.name)
    entries = recruitment_entries_from_frame(read_records(path))
    logger.info("Ingested %d recruitment entries", len(entries))
    return entries
