"""Recruitment pipeline status: open requisitions and per-stage breakdown."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from hrmetrics.domains.recruitment.models import RecruitmentEntry, recruitment_frame
from hrmetrics.utils.types import PipelineStage

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StageCount:
    stage: PipelineStage
    positions: int
    applicants: int


@dataclass(frozen=True)
class RecruitmentSummary:
    open_positions: int
    recruiting_departments: int
    total_applicants: int
    stages: tuple[StageCount, ...]


def summarize_recruitment(entries: Sequence[RecruitmentEntry]) -> RecruitmentSummary:
    """Count open positions (stage other than hired) and roll up each stage.

    Every stage is reported in pipeline order, even when it has no entries.
    """
    df = recruitment_frame(entries)
    by_stage = df.groupby("stage").agg(
        positions=("position", "count"),
        applicants=("applicants", "sum"),
    )

    stages = tuple(
        StageCount(
            stage=stage,
            positions=int(by_stage["positions"].get(stage, 0)),
            applicants=int(by_stage["applicants"].get(stage, 0)),
        )
        for stage in PipelineStage
    )
    summary = RecruitmentSummary(
        open_positions=sum(1 for e in entries if e.is_open),
        recruiting_departments=int(df["department"].nunique()),
        total_applicants=int(df["applicants"].sum()),
        stages=stages,
    )
    logger.info(
        "Recruitment: %d open positions across %d departments",
        summary.open_positions,
        summary.recruiting_departments,
    )
    return summary
