"""Export collaborator contract and outcome types."""

from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from hrmetrics.report.sections import Report
from hrmetrics.utils.types import ExportStatus


class ExporterUnavailableError(RuntimeError):
    """The document-generation collaborator could not be loaded."""


class ExportGenerationError(RuntimeError):
    """The collaborator failed while building or writing the document."""


class DocumentExporter(Protocol):
    format_name: str
    extension: str

    def export(self, report: Report, output_dir: Path) -> Path:
        """Write ``report`` into ``output_dir`` and return the written file."""
        ...


@dataclass(frozen=True)
class ExportOutcome:
    status: ExportStatus
    message: str
    path: Path | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.status == ExportStatus.SUCCESS
