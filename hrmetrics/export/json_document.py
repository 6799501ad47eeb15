"""JSON rendering of an assembled report, for downstream tooling and archiving."""

import dataclasses
from pathlib import Path

from hrmetrics.report.sections import InsightBlock, Report, SummaryBlock, Table
from hrmetrics.utils.io import write_json


def _section_payload(section) -> dict:
    match section:
        case SummaryBlock(title=title, items=items):
            return {"type": "summary", "title": title, "items": [list(i) for i in items]}
        case Table(title=title, columns=columns, rows=rows):
            return {
                "type": "table",
                "title": title,
                "columns": [dataclasses.asdict(c) for c in columns],
                "rows": [list(r) for r in rows],
            }
        case InsightBlock(title=title, insights=insights):
            return {
                "type": "insights",
                "title": title,
                "insights": [dataclasses.asdict(i) for i in insights],
            }
        case other:
            raise TypeError(f"Unsupported section type: {type(other).__name__}")


def report_payload(report: Report) -> dict:
    return {
        "title": report.title,
        "generated_at": report.generated_at.isoformat(),
        "file_name": report.file_name,
        "pages": [
            {"title": page.title, "sections": [_section_payload(s) for s in page.sections]}
            for page in report.pages
        ],
    }


class JsonExporter:
    format_name = "json"
    extension = "json"

    def export(self, report: Report, output_dir: Path) -> Path:
        path = output_dir / Path(report.file_name).with_suffix(f".{self.extension}").name
        return write_json(report_payload(report), path)
