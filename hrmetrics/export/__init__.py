"""Export pipeline: hands assembled reports to document collaborators.

Collaborators are loaded lazily through :func:`load_exporter` so the
engine and the assembler never depend on a document library.
"""

from hrmetrics.export.base import (
    DocumentExporter,
    ExporterUnavailableError,
    ExportGenerationError,
    ExportOutcome,
)
from hrmetrics.export.service import exporter_loader, load_exporter, run_export, submit_export
