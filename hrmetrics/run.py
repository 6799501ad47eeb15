"""Command-line entry point: validate record exports, show the dashboard, export the report."""

import argparse
import logging
import sys
from datetime import datetime
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from hrmetrics.config import (
    ReportConfig,
    apply_overrides,
    get_env_config,
    load_config_file,
    load_report_config,
)
from hrmetrics.domains import attendance, recruitment, workforce
from hrmetrics.export.service import exporter_loader, run_export
from hrmetrics.metrics.engine import DerivedMetrics, compute_metrics
from hrmetrics.metrics.insights import select_alerts, select_insights
from hrmetrics.report.assembler import assemble_report
from hrmetrics.report.formatting import format_currency, format_rating
from hrmetrics.utils.validators import RecordValidationError

type DomainResult = dict[str, bool | str | int]

console = Console()

DOMAINS = {
    "workforce": workforce,
    "attendance": attendance,
    "recruitment": recruitment,
}


def load_config(env: str, config_path: str | None = None) -> ReportConfig:
    config = apply_overrides(load_report_config(env), get_env_config())
    if config_path:
        config = apply_overrides(config, load_config_file(config_path))
    return config


def validate_all(data_dir: Path) -> list[DomainResult]:
    results = []
    for name, module in DOMAINS.items():
        match module.validate(data_dir):
            case {"status": "ok", **rest}:
                results.append({"domain": name, "valid": True, **rest})
            case {"status": "error", "message": msg}:
                results.append({"domain": name, "valid": False, "error": msg})
            case _:
                results.append({"domain": name, "valid": False, "error": "Unknown validation result"})
    return results


def _trend_cell(metrics: DerivedMetrics, name: str) -> str:
    trend = metrics.trends[name]
    arrow, color = ("↑", "green") if trend.is_positive else ("↓", "red")
    return f"[{color}]{arrow} {abs(trend.percent)}%[/{color}]"


def show_dashboard(metrics: DerivedMetrics) -> None:
    """Print the live dashboard view of the derived metrics."""
    w = metrics.workforce

    key_metrics = Table(title="Key Metrics")
    key_metrics.add_column("Metric")
    key_metrics.add_column("Value", justify="right")
    key_metrics.add_column("Trend", justify="right")
    key_metrics.add_row("Total Employees", f"{w.total} ({w.active} active)", _trend_cell(metrics, "total_staff"))
    key_metrics.add_row("Average Salary", format_currency(w.average_salary), _trend_cell(metrics, "average_salary"))
    key_metrics.add_row("Attendance Rate", f"{w.average_attendance}%", _trend_cell(metrics, "average_attendance"))
    key_metrics.add_row(
        "Performance",
        f"{format_rating(w.average_performance)}/5.0",
        _trend_cell(metrics, "average_performance"),
    )
    key_metrics.add_row("Open Positions", str(metrics.open_positions), "")
    console.print(key_metrics)

    departments = Table(title="Departments")
    for column in ("Department", "Staff", "Avg Salary", "Score", "Attendance"):
        departments.add_column(column)
    for d in metrics.departments:
        departments.add_row(
            d.name,
            str(d.headcount),
            format_currency(d.average_salary),
            f"{d.performance_score}%",
            f"{d.average_attendance}%",
        )
    console.print(departments)

    distribution = Table(title="Salary Distribution")
    distribution.add_column("Band")
    distribution.add_column("Staff", justify="right")
    for bucket in metrics.salary_distribution:
        distribution.add_row(bucket.label, str(bucket.count))
    console.print(distribution)

    week = Table(title="Attendance (last 7 days)")
    for column in ("Day", "Present", "Absent", "Late", "Rate"):
        week.add_column(column)
    for day in metrics.attendance.days:
        week.add_row(day.weekday, str(day.present), str(day.absent), str(day.late), f"{day.rate_percent}%")
    console.print(week)
    console.print(
        f"  Avg present: {metrics.attendance.average_present}  "
        f"Avg absent: {metrics.attendance.average_absent}"
    )

    pipeline = Table(title=f"Recruitment Pipeline ({metrics.open_positions} open)")
    pipeline.add_column("Stage")
    pipeline.add_column("Positions", justify="right")
    pipeline.add_column("Applicants", justify="right")
    for stage in metrics.recruitment.stages:
        pipeline.add_row(stage.stage.capitalize(), str(stage.positions), str(stage.applicants))
    console.print(pipeline)

    for alert in select_alerts(metrics):
        console.print(f"[yellow]⚠ {alert.value} {alert.label}[/yellow]")
    for insight in select_insights(metrics):
        console.print(f"  [bold]{insight.label}:[/bold] {insight.value} {insight.caption}")


def _parse_now(value: str | None) -> datetime:
    return datetime.fromisoformat(value) if value else datetime.now()


def main(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(description="Workforce metrics dashboard and report export")
    parser.add_argument("--data-dir", type=Path, default=Path("data"), help="Directory holding record exports")
    parser.add_argument("--env", default="development", help="Configuration environment")
    parser.add_argument("--config", type=str, help="YAML or TOML override file")
    parser.add_argument("--now", type=str, help="Reference instant (ISO format), defaults to the current time")
    parser.add_argument("--validate", action="store_true", help="Only validate the record exports")
    parser.add_argument("--export", choices=["pdf", "json"], help="Export the report in this format")
    parser.add_argument("--output-dir", type=Path, help="Where exported reports are written")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )

    try:
        config = load_config(args.env, args.config)
    except ValueError as exc:
        console.print(f"[red]{exc}[/red]")
        sys.exit(2)

    if args.validate:
        results = validate_all(args.data_dir)
        table = Table(title="Validation Results")
        table.add_column("Domain")
        table.add_column("Valid")
        table.add_column("Details")

        for r in results:
            status = "[green]✓[/green]" if r["valid"] else "[red]✗[/red]"
            detail = r.get("error", f"{r.get('row_count', 0)} rows")
            table.add_row(r["domain"], status, detail)

        console.print(table)

        if not all(r["valid"] for r in results):
            sys.exit(1)
        return

    try:
        metrics = compute_metrics(
            workforce.load_staff_records(args.data_dir),
            attendance.load_attendance_days(args.data_dir),
            recruitment.load_recruitment_entries(args.data_dir),
            now=_parse_now(args.now),
            settings=config.metrics,
        )
    except (FileNotFoundError, RecordValidationError) as exc:
        console.print(f"[red]{exc}[/red]")
        sys.exit(1)

    show_dashboard(metrics)

    if args.export:
        report = assemble_report(metrics, config, extension=args.export)
        output_dir = args.output_dir or config.output_dir
        outcome = run_export(report, exporter_loader(args.export), output_dir, args.export)
        color = "green" if outcome.ok else "red"
        console.print(f"[{color}]{outcome.message}[/{color}]")
        if not outcome.ok:
            sys.exit(1)


if __name__ == "__main__":
    main()
