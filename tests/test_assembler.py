"""
Report assembly tests: page layout, table contents and metadata.
"""

from datetime import datetime

import pytest

from hrmetrics.metrics.engine import compute_metrics
from hrmetrics.report.assembler import assemble_report, report_file_name
from hrmetrics.report.sections import ColumnSpec, InsightBlock, SummaryBlock, Table


@pytest.fixture
def report(metrics, report_config):
    return assemble_report(metrics, report_config)


def section(report, title):
    return next(s for s in report.sections() if s.title == title)


class TestLayout:
    def test_three_pages_in_fixed_order(self, report):
        assert [p.title for p in report.pages] == [
            "HR Dashboard",
            "HR Dashboard Analytics - Detailed Insights",
            "Summary & Metadata",
        ]

    def test_section_order(self, report):
        assert report.section_titles() == [
            "HR DASHBOARD - COMPREHENSIVE ANALYTICS REPORT",
            "Executive Summary",
            "Department Performance Analysis",
            "Top Performers Hall of Fame",
            "Weekly Attendance Trends",
            "Recruitment Pipeline Status",
            "Key Insights & Strategic Recommendations",
            "Report Summary",
            "Report Metadata",
        ]

    def test_section_kinds(self, report):
        kinds = [type(s) for s in report.sections()]

        assert kinds.count(Table) == 4
        assert kinds.count(InsightBlock) == 1
        assert kinds.count(SummaryBlock) == 4

    def test_title_and_footer(self, report):
        assert report.title == "HR Dashboard Analytics Report"
        assert report.footer(2, 3) == "HR Dashboard Analytics Report - Page 2 of 3"

    def test_file_name_uses_generation_date(self, report):
        assert report.file_name == "HR-Dashboard-Report-2024-06-30.pdf"

    def test_file_name_extension(self, report_config):
        assert report_file_name(report_config, datetime(2024, 1, 5), "json") == "HR-Dashboard-Report-2024-01-05.json"


class TestTables:
    def test_one_department_row_per_department(self, report, metrics):
        table = section(report, "Department Performance Analysis")

        assert len(table.rows) == len(metrics.departments)
        assert table.rows[0] == ("Engineering", "2", "$83,500", "4.7/5.0", "93%", "A+")
        assert table.rows[2][-1] == "A"

    def test_top_performer_rows(self, report):
        table = section(report, "Top Performers Hall of Fame")

        assert table.header[0] == "Rank"
        assert table.rows[0] == (
            "#1", "Alice Park", "Engineering", "Senior Engineer", "4.8", "98%", "$95,000", "Mar 2019",
        )
        assert [r[0] for r in table.rows] == ["#1", "#2", "#3", "#4", "#5"]

    def test_attendance_rows(self, report):
        table = section(report, "Weekly Attendance Trends")

        assert len(table.rows) == 7
        assert table.rows[0] == ("Wednesday, Jun 19", "18", "2", "1", "90%", "21")

    def test_recruitment_rows(self, report):
        rows = section(report, "Recruitment Pipeline Status").rows

        assert rows[0] == ("Backend Engineer", "Engineering", "45", "Interview", "High", "In Progress")
        assert rows[2][-1] == "Complete"

    def test_row_length_must_match_columns(self):
        with pytest.raises(ValueError, match="expected 2"):
            Table("Bad", (ColumnSpec("A", 10), ColumnSpec("B", 10)), (("only one",),))


class TestSummaries:
    def test_executive_summary(self, report):
        items = dict(section(report, "Executive Summary").items)

        assert items["Total Workforce"] == "6 employees (5 active, 1 inactive)"
        assert items["Average Annual Salary"] == "$70,500 (Range: $48,000 - $95,000)"
        assert items["Overall Attendance Rate"] == "92% (Target: 95%)"
        assert items["Average Performance Score"] == "4.3/5.0 (86%)"

    def test_metadata(self, report):
        items = dict(section(report, "Report Metadata").items)

        assert items["Report Classification"] == "Internal Use Only - Development"
        assert items["Next Review Date"] == "July 30, 2024"

    def test_insight_block(self, report):
        block = section(report, "Key Insights & Strategic Recommendations")

        assert len(block.insights) == 8
        assert block.insights[0].value == "Engineering"


class TestEmptySnapshot:
    def test_empty_metrics_still_assemble(self, report_config, now):
        report = assemble_report(compute_metrics([], [], [], now), report_config)

        assert len(report.pages) == 3
        assert section(report, "Department Performance Analysis").rows == ()
        assert dict(section(report, "Executive Summary").items)["Average Annual Salary"] == "$0"
