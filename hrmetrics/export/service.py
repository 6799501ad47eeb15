"""Run report exports and translate their results into user-facing outcomes.

An export is a single request to a document collaborator. It is never
retried automatically, and concurrent requests are not deduplicated: every
submission runs and reports its own outcome.
"""

import importlib
import logging
from collections.abc import Callable
from concurrent.futures import Executor, Future
from pathlib import Path

from hrmetrics.export.base import (
    DocumentExporter,
    ExporterUnavailableError,
    ExportGenerationError,
    ExportOutcome,
)
from hrmetrics.report.sections import Report
from hrmetrics.utils.types import ExportStatus

type ExporterLoader = Callable[[], DocumentExporter]

logger = logging.getLogger(__name__)

_EXPORTER_MODULES = {
    "pdf": ("hrmetrics.export.pdf", "PdfExporter"),
    "json": ("hrmetrics.export.json_document", "JsonExporter"),
}


def load_exporter(fmt: str) -> DocumentExporter:
    """Import the exporter for ``fmt`` on demand.

    An unknown format, a missing document library or any other failure while
    importing or constructing the exporter surfaces as ExporterUnavailableError.
    """
    match _EXPORTER_MODULES.get(fmt):
        case (module_name, class_name):
            try:
                module = importlib.import_module(module_name)
                return getattr(module, class_name)()
            except Exception as exc:
                raise ExporterUnavailableError(f"{fmt} exporter could not be loaded: {exc}") from exc
        case None:
            raise ExporterUnavailableError(f"Unsupported export format: {fmt}")


def exporter_loader(fmt: str) -> ExporterLoader:
    return lambda: load_exporter(fmt)


def success_message(report: Report, path: Path) -> str:
    included = "\n".join(f"  - {title}" for title in report.section_titles())
    return (
        f"{report.title} generated successfully.\n\n"
        f"Report includes:\n{included}\n\n"
        f"Saved to {path}"
    )


def unavailable_message(fmt: str) -> str:
    return (
        f"Error loading the {fmt.upper()} library. Please try again.\n\n"
        "Please make sure the document export dependencies are installed."
    )


def generation_failure_message(fmt: str) -> str:
    return (
        f"Error generating {fmt.upper()} report. Please try again.\n\n"
        "If the issue persists, please contact IT support."
    )


def run_export(report: Report, loader: ExporterLoader, output_dir: Path, fmt: str = "pdf") -> ExportOutcome:
    """Load the collaborator and export ``report``.

    Load failures and generation failures come back as distinct outcomes;
    neither is raised to the caller.
    """
    try:
        exporter = loader()
    except Exception as exc:
        error = exc if isinstance(exc, ExporterUnavailableError) else ExporterUnavailableError(str(exc))
        logger.error("Export collaborator unavailable: %s", error)
        return ExportOutcome(ExportStatus.UNAVAILABLE, unavailable_message(fmt), error=str(error))

    fmt = getattr(exporter, "format_name", fmt)
    try:
        path = exporter.export(report, Path(output_dir))
    except Exception as exc:
        error = exc if isinstance(exc, ExportGenerationError) else ExportGenerationError(str(exc))
        logger.error("Report generation failed: %s", error, exc_info=exc)
        return ExportOutcome(ExportStatus.FAILED, generation_failure_message(fmt), error=str(error))

    logger.info("Exported %s to %s", report.file_name, path)
    return ExportOutcome(ExportStatus.SUCCESS, success_message(report, path), path=path)


def submit_export(
    executor: Executor,
    report: Report,
    loader: ExporterLoader,
    output_dir: Path,
    fmt: str = "pdf",
) -> Future[ExportOutcome]:
    """Fire off an export on ``executor``; abandoning the future is the only way to cancel."""
    return executor.submit(run_export, report, loader, output_dir, fmt)
