"""
Recruitment pipeline tests.
"""

import pytest

from hrmetrics.domains.recruitment.funnel import summarize_recruitment
from hrmetrics.domains.recruitment.models import RecruitmentEntry, parse_priority, parse_stage
from hrmetrics.utils.types import PipelineStage, Priority
from hrmetrics.utils.validators import RecordValidationError


class TestParseStage:
    @pytest.mark.parametrize(
        "raw, stage",
        [
            ("Applied", PipelineStage.APPLIED),
            ("phone screen", PipelineStage.SCREENING),
            ("On-Site", PipelineStage.INTERVIEW),
            ("offer_extended", PipelineStage.OFFER),
            ("HIRED", PipelineStage.HIRED),
        ],
    )
    def test_aliases(self, raw, stage):
        assert parse_stage(raw) is stage

    def test_unknown_stage_rejected(self):
        with pytest.raises(RecordValidationError, match="unknown pipeline stage"):
            parse_stage("ghosted")

    def test_stages_are_declared_in_pipeline_order(self):
        assert list(PipelineStage) == ["applied", "screening", "interview", "offer", "hired"]


class TestParsePriority:
    def test_aliases(self):
        assert parse_priority("Urgent") is Priority.HIGH
        assert parse_priority("normal") is Priority.MEDIUM

    def test_unknown_priority_rejected(self):
        with pytest.raises(RecordValidationError):
            parse_priority("whenever")


class TestRecruitmentEntry:
    def test_strings_are_coerced(self):
        entry = RecruitmentEntry("SRE", "Engineering", 5, "screening", "high")

        assert entry.stage is PipelineStage.SCREENING
        assert entry.priority is Priority.HIGH
        assert entry.is_open is True

    def test_hired_is_not_open(self):
        assert RecruitmentEntry("SRE", "Engineering", 5, "hired", "low").is_open is False

    def test_negative_applicants_rejected(self):
        with pytest.raises(RecordValidationError):
            RecruitmentEntry("SRE", "Engineering", -5, "applied", "low")


class TestRecruitmentSummary:
    def test_open_positions_exclude_hired(self, recruitment_entries):
        summary = summarize_recruitment(recruitment_entries)

        assert summary.open_positions == 3
        assert summary.recruiting_departments == 3
        assert summary.total_applicants == 115

    def test_every_stage_reported_in_pipeline_order(self, recruitment_entries):
        stages = summarize_recruitment(recruitment_entries).stages

        assert [s.stage for s in stages] == list(PipelineStage)
        assert [s.positions for s in stages] == [0, 1, 1, 1, 1]
        assert stages[2].applicants == 45

    def test_empty_pipeline(self):
        summary = summarize_recruitment([])

        assert summary.open_positions == 0
        assert summary.total_applicants == 0
        assert all(s.positions == 0 for s in summary.stages)
