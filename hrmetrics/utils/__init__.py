"""Shared utilities for the metrics engine."""

from hrmetrics.utils.io import find_record_file, read_records, write_json
from hrmetrics.utils.transforms import normalize_columns, round_half_up, safe_mean, safe_ratio
from hrmetrics.utils.validators import RecordValidationError, validate_dataframe
from hrmetrics.utils.types import PipelineStage, Priority, StaffStatus
