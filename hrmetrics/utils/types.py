"""Shared type definitions for the metrics engine."""

from enum import StrEnum

import pandas as pd

type ValidationOutcome = dict[str, bool | str | list[str] | pd.DataFrame]
type MetricValue = int | float


class StaffStatus(StrEnum):
    ACTIVE = "active"
    INACTIVE = "inactive"


class PipelineStage(StrEnum):
    APPLIED = "applied"
    SCREENING = "screening"
    INTERVIEW = "interview"
    OFFER = "offer"
    HIRED = "hired"

    @property
    def is_terminal(self) -> bool:
        return self is PipelineStage.HIRED


class Priority(StrEnum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class ExportStatus(StrEnum):
    SUCCESS = "success"
    UNAVAILABLE = "unavailable"
    FAILED = "failed"


class Alignment(StrEnum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"
