"""Recruitment pipeline record and its pandera schema."""

from collections.abc import Sequence
from dataclasses import asdict, dataclass, fields

import pandas as pd
import pandera as pa
from pandera import Check, Column

from hrmetrics.utils.types import PipelineStage, Priority
from hrmetrics.utils.validators import RecordValidationError


def parse_stage(raw: str) -> PipelineStage:
    """Map ATS stage names onto the ordered pipeline stages."""
    match str(raw).lower().strip().replace("-", "_").replace(" ", "_"):
        case "applied" | "application" | "new":
            return PipelineStage.APPLIED
        case "screening" | "phone_screen" | "phone" | "recruiter_screen":
            return PipelineStage.SCREENING
        case "interview" | "onsite" | "on_site" | "technical" | "panel":
            return PipelineStage.INTERVIEW
        case "offer" | "offer_extended":
            return PipelineStage.OFFER
        case "hired" | "accepted" | "started":
            return PipelineStage.HIRED
        case _:
            raise RecordValidationError("recruitment", [f"unknown pipeline stage {raw!r}"])


def parse_priority(raw: str) -> Priority:
    match str(raw).lower().strip():
        case "low":
            return Priority.LOW
        case "medium" | "normal":
            return Priority.MEDIUM
        case "high" | "urgent":
            return Priority.HIGH
        case _:
            raise RecordValidationError("recruitment", [f"unknown priority {raw!r}"])


@dataclass(frozen=True)
class RecruitmentEntry:
    position: str
    department: str
    applicants: int
    stage: PipelineStage
    priority: Priority

    def __post_init__(self):
        errors = []
        if not isinstance(self.department, str) or not self.department:
            errors.append(f"position {self.position!r} has no department")
        if self.applicants < 0:
            errors.append(f"position {self.position!r} has negative applicant count")
        if errors:
            raise RecordValidationError("recruitment", errors)
        object.__setattr__(self, "stage", parse_stage(self.stage))
        object.__setattr__(self, "priority", parse_priority(self.priority))

    @property
    def is_open(self) -> bool:
        return not self.stage.is_terminal


RECRUITMENT_COLUMNS = [f.name for f in fields(RecruitmentEntry)]


recruitment_schema = pa.DataFrameSchema(
    {
        "position": Column(str, Check.str_length(min_value=1)),
        "department": Column(str, Check.str_length(min_value=1), nullable=False),
        "applicants": Column(int, Check.greater_than_or_equal_to(0)),
        "stage": Column(str, nullable=False),
        "priority": Column(str, nullable=False),
    },
    strict=False,
    coerce=True,
)


def recruitment_frame(entries: Sequence[RecruitmentEntry]) -> pd.DataFrame:
    df = pd.DataFrame([asdict(e) for e in entries], columns=RECRUITMENT_COLUMNS)
    return df.astype({"applicants": "int64"})
