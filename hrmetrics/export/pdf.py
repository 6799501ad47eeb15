"""PDF rendering of an assembled report with reportlab."""

import logging
from pathlib import Path
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.pdfgen import canvas
from reportlab.platypus import PageBreak, Paragraph, SimpleDocTemplate, Spacer
from reportlab.platypus import Table as PdfTable
from reportlab.platypus import TableStyle

from hrmetrics.export.base import ExportGenerationError
from hrmetrics.report.formatting import format_long_date
from hrmetrics.report.sections import InsightBlock, Report, SummaryBlock, Table

logger = logging.getLogger(__name__)

HEADER_COLOR = colors.HexColor("#3B82F6")


def _numbered_canvas(report: Report):
    """Canvas class that stamps "Page i of n" footers once the page count is known."""

    class NumberedCanvas(canvas.Canvas):
        def __init__(self, *args, **kwargs):
            super().__init__(*args, **kwargs)
            self._page_states = []

        def showPage(self):
            self._page_states.append(dict(self.__dict__))
            self._startPage()

        def save(self):
            count = len(self._page_states)
            for state in self._page_states:
                self.__dict__.update(state)
                self._draw_footer(count)
                super().showPage()
            super().save()

        def _draw_footer(self, count: int):
            width, _ = self._pagesize
            self.setFont("Helvetica", 8)
            self.setFillColor(colors.grey)
            self.drawString(40, 20, report.footer(self._pageNumber, count))
            self.drawRightString(
                width - 40, 20,
                f"Generated: {format_long_date(report.generated_at)} | Confidential",
            )

    return NumberedCanvas


class PdfExporter:
    format_name = "pdf"
    extension = "pdf"

    def __init__(self, pagesize=A4):
        self.pagesize = pagesize
        self.styles = getSampleStyleSheet()

    def _summary(self, block: SummaryBlock) -> list:
        flowables = [Paragraph(escape(block.title), self.styles["Heading2"])]
        for key, value in block.items:
            flowables.append(Paragraph(f"<b>{escape(key)}:</b> {escape(value)}", self.styles["Normal"]))
        return flowables

    def _table(self, table: Table, available_width: float) -> list:
        total_width = sum(c.width for c in table.columns) or 1
        widths = [available_width * c.width / total_width for c in table.columns]

        pdf_table = PdfTable([list(table.header), *map(list, table.rows)], colWidths=widths, repeatRows=1)
        style = [
            ("BACKGROUND", (0, 0), (-1, 0), HEADER_COLOR),
            ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
            ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
            ("FONTSIZE", (0, 0), (-1, -1), 8),
            ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
        ]
        style.extend(("ALIGN", (i, 0), (i, -1), c.align.upper()) for i, c in enumerate(table.columns))
        pdf_table.setStyle(TableStyle(style))
        return [Paragraph(escape(table.title), self.styles["Heading2"]), pdf_table]

    def _insights(self, block: InsightBlock) -> list:
        flowables = [Paragraph(escape(block.title), self.styles["Heading2"])]
        flowables.extend(Paragraph(escape(i.text), self.styles["Normal"]) for i in block.insights)
        return flowables

    def _story(self, report: Report, available_width: float) -> list:
        story = []
        for index, page in enumerate(report.pages):
            if index:
                story.append(PageBreak())
            story.append(Paragraph(escape(page.title.upper()), self.styles["Heading1"]))
            for section in page.sections:
                match section:
                    case SummaryBlock():
                        story.extend(self._summary(section))
                    case Table():
                        story.extend(self._table(section, available_width))
                    case InsightBlock():
                        story.extend(self._insights(section))
                    case other:
                        raise ExportGenerationError(f"Unsupported section type: {type(other).__name__}")
                story.append(Spacer(1, 12))
        return story

    def export(self, report: Report, output_dir: Path) -> Path:
        output_dir.mkdir(parents=True, exist_ok=True)
        path = output_dir / Path(report.file_name).with_suffix(f".{self.extension}").name

        try:
            doc = SimpleDocTemplate(str(path), pagesize=self.pagesize, title=report.title)
            doc.build(self._story(report, doc.width), canvasmaker=_numbered_canvas(report))
        except ExportGenerationError:
            raise
        except Exception as exc:
            raise ExportGenerationError(f"Could not render {path.name}: {exc}") from exc

        logger.info("Rendered %d report pages to %s", len(report.pages), path)
        return path
