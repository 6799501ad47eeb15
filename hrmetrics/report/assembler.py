"""Assemble DerivedMetrics and insights into an ordered, paginated report."""

import logging
from datetime import datetime, timedelta

from hrmetrics.config import ReportConfig
from hrmetrics.metrics.engine import DerivedMetrics
from hrmetrics.metrics.insights import select_insights
from hrmetrics.report.formatting import (
    capitalize_label,
    format_currency,
    format_long_date,
    format_month_year,
    format_percent,
    format_rating,
    format_weekday_date,
    performance_grade,
)
from hrmetrics.report.sections import ColumnSpec, InsightBlock, Page, Report, SummaryBlock, Table
from hrmetrics.utils.types import Alignment

logger = logging.getLogger(__name__)

L, C, R = Alignment.LEFT, Alignment.CENTER, Alignment.RIGHT

DEPARTMENT_COLUMNS = (
    ColumnSpec("Department", 30, L),
    ColumnSpec("Staff", 25, C),
    ColumnSpec("Avg Salary", 30, R),
    ColumnSpec("Performance", 25, C),
    ColumnSpec("Attendance", 25, C),
    ColumnSpec("Grade", 20, C),
)

TOP_PERFORMER_COLUMNS = (
    ColumnSpec("Rank", 15, C),
    ColumnSpec("Employee Name", 28, L),
    ColumnSpec("Department", 22, L),
    ColumnSpec("Position", 28, L),
    ColumnSpec("Rating", 20, C),
    ColumnSpec("Attendance", 20, C),
    ColumnSpec("Salary", 22, R),
    ColumnSpec("Joined", 20, C),
)

ATTENDANCE_COLUMNS = (
    ColumnSpec("Date", 45, L),
    ColumnSpec("Present", 25, C),
    ColumnSpec("Absent", 25, C),
    ColumnSpec("Late", 25, C),
    ColumnSpec("Rate", 25, C),
    ColumnSpec("Total", 25, C),
)

RECRUITMENT_COLUMNS = (
    ColumnSpec("Position", 35, L),
    ColumnSpec("Department", 25, L),
    ColumnSpec("Applicants", 20, C),
    ColumnSpec("Stage", 25, C),
    ColumnSpec("Priority", 20, C),
    ColumnSpec("Status", 30, C),
)


def _header_block(config: ReportConfig, generated_at: datetime) -> SummaryBlock:
    return SummaryBlock(
        title=f"{config.title.upper()} - {config.subtitle.upper()}",
        items=(
            ("Report Generated", format_long_date(generated_at)),
            ("Report Type", config.report_type),
        ),
    )


def _executive_summary(metrics: DerivedMetrics, config: ReportConfig) -> SummaryBlock:
    w = metrics.workforce
    salary = format_currency(w.average_salary)
    if metrics.salary_range:
        low, high = metrics.salary_range
        salary += f" (Range: {format_currency(low)} - {format_currency(high)})"

    return SummaryBlock(
        title="Executive Summary",
        items=(
            ("Total Workforce", f"{w.total} employees ({w.active} active, {w.inactive} inactive)"),
            ("Average Annual Salary", salary),
            ("Overall Attendance Rate", f"{w.average_attendance}% (Target: {config.attendance_target}%)"),
            (
                "Average Performance Score",
                f"{format_rating(w.average_performance)}/5.0 "
                f"({format_percent(w.average_performance / 5 * 100)})",
            ),
            (
                "Open Positions",
                f"{metrics.recruitment.open_positions} active recruitments across "
                f"{metrics.recruitment.recruiting_departments} departments",
            ),
            (
                "Recent Activity",
                f"{w.recent_hires} new hires in last {metrics.settings.recent_hire_days} days, "
                f"{w.pending_reviews} reviews pending",
            ),
        ),
    )


def _department_table(metrics: DerivedMetrics) -> Table:
    rows = tuple(
        (
            d.name,
            str(d.headcount),
            format_currency(d.average_salary),
            f"{format_rating(d.average_performance)}/5.0",
            format_percent(d.average_attendance),
            performance_grade(d.average_performance),
        )
        for d in metrics.departments
    )
    return Table("Department Performance Analysis", DEPARTMENT_COLUMNS, rows)


def _top_performer_table(metrics: DerivedMetrics) -> Table:
    rows = tuple(
        (
            f"#{rank}",
            s.name,
            s.department,
            s.role,
            format_rating(s.performance_rating),
            format_percent(s.attendance_rate),
            format_currency(s.salary),
            format_month_year(s.join_date),
        )
        for rank, s in enumerate(metrics.top_performers, start=1)
    )
    return Table("Top Performers Hall of Fame", TOP_PERFORMER_COLUMNS, rows)


def _attendance_table(metrics: DerivedMetrics) -> Table:
    rows = tuple(
        (
            format_weekday_date(d.date),
            str(d.present),
            str(d.absent),
            str(d.late),
            format_percent(d.rate_percent),
            str(d.total),
        )
        for d in metrics.attendance.days
    )
    return Table("Weekly Attendance Trends", ATTENDANCE_COLUMNS, rows)


def _recruitment_table(metrics: DerivedMetrics) -> Table:
    rows = tuple(
        (
            e.position,
            e.department,
            str(e.applicants),
            capitalize_label(e.stage),
            capitalize_label(e.priority),
            "In Progress" if e.is_open else "Complete",
        )
        for e in metrics.recruitment_entries
    )
    return Table("Recruitment Pipeline Status", RECRUITMENT_COLUMNS, rows)


def _closing_summary(metrics: DerivedMetrics) -> SummaryBlock:
    w = metrics.workforce
    return SummaryBlock(
        title="Report Summary",
        items=(
            (
                "Performance",
                f"{format_percent(w.average_performance / 5 * 100)} overall performance score "
                "across all departments",
            ),
            ("Attendance", f"{w.average_attendance}% attendance rate across the workforce"),
            (
                "Recruitment",
                f"{metrics.recruitment.open_positions} open positions with "
                f"{metrics.recruitment.total_applicants} applicants in the pipeline",
            ),
        ),
    )


def _metadata_block(metrics: DerivedMetrics, config: ReportConfig) -> SummaryBlock:
    next_review = metrics.now + timedelta(days=config.review_interval_days)
    return SummaryBlock(
        title="Report Metadata",
        items=(
            ("Report Classification", config.classification),
            ("Data Sources", ", ".join(config.data_sources)),
            ("Next Review Date", format_long_date(next_review)),
        ),
    )


def report_file_name(config: ReportConfig, generated_at: datetime, extension: str = "pdf") -> str:
    return f"{config.report_prefix}-{generated_at.date().isoformat()}.{extension}"


def assemble_report(
    metrics: DerivedMetrics,
    config: ReportConfig,
    generated_at: datetime | None = None,
    extension: str = "pdf",
) -> Report:
    """Lay out the report pages in their fixed order.

    Page 1: header, executive summary, department and top performer tables.
    Page 2: weekly attendance, recruitment pipeline and key insights.
    Page 3: closing summary and report metadata.
    ``generated_at`` defaults to the metrics' ``now``.
    """
    generated_at = generated_at or metrics.now
    insights = InsightBlock("Key Insights & Strategic Recommendations", tuple(select_insights(metrics)))

    pages = (
        Page(
            config.title,
            (
                _header_block(config, generated_at),
                _executive_summary(metrics, config),
                _department_table(metrics),
                _top_performer_table(metrics),
            ),
        ),
        Page(
            f"{config.title} Analytics - Detailed Insights",
            (
                _attendance_table(metrics),
                _recruitment_table(metrics),
                insights,
            ),
        ),
        Page(
            "Summary & Metadata",
            (
                _closing_summary(metrics),
                _metadata_block(metrics, config),
            ),
        ),
    )

    report = Report(
        title=f"{config.title} Analytics Report",
        generated_at=generated_at,
        pages=pages,
        file_name=report_file_name(config, generated_at, extension),
    )
    logger.info(
        "Assembled report %s: %d pages, %d sections",
        report.file_name,
        len(pages),
        sum(len(p.sections) for p in pages),
    )
    return report
