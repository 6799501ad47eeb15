"""Record validation utilities using pandera."""

import pandera as pa
import pandas as pd
from pandera import DataFrameSchema

from hrmetrics.utils.types import ValidationOutcome


class RecordValidationError(ValueError):
    """Raised when input records do not have the shape the engine requires."""

    def __init__(self, source: str, errors: list[str]):
        self.source = source
        self.errors = errors
        summary = "; ".join(errors[:3])
        if len(errors) > 3:
            summary += f" (+{len(errors) - 3} more)"
        super().__init__(f"Invalid {source} records: {summary}")


def validate_dataframe(df: pd.DataFrame, schema: DataFrameSchema) -> ValidationOutcome:
    """Validate a DataFrame against a pandera schema.

    On success the coerced frame is returned under ``data``.
    """
    try:
        validated = schema.validate(df, lazy=True)
        return {"valid": True, "status": "ok", "errors": [], "data": validated}
    except pa.errors.SchemaErrors as e:
        errors = []
        for _, row in e.failure_cases.iterrows():
            match row.to_dict():
                case {"column": col, "check": check, "failure_case": val}:
                    errors.append(f"Column '{col}' failed check '{check}': {val}")
                case failure:
                    errors.append(f"Validation failure: {failure}")
        return {"valid": False, "status": "error", "errors": errors}


def validate_unique(df: pd.DataFrame, columns: list[str]) -> ValidationOutcome:
    """Check that specified columns form a unique key."""
    duplicates = df.duplicated(subset=columns, keep=False)
    dup_count = int(duplicates.sum())

    match dup_count:
        case 0:
            return {"valid": True, "status": "ok", "errors": []}
        case n:
            return {
                "valid": False,
                "status": "error",
                "errors": [f"Found {n} duplicate rows on columns {columns}"],
            }


def require_valid(outcome: ValidationOutcome, source: str) -> None:
    """Raise RecordValidationError for a failed validation outcome."""
    match outcome:
        case {"valid": True}:
            return
        case {"valid": False, "errors": errs}:
            raise RecordValidationError(source, list(errs))
