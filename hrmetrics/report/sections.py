"""Logical document structure handed to export collaborators."""

from collections.abc import Iterator
from dataclasses import dataclass
from datetime import datetime

from hrmetrics.metrics.insights import Insight
from hrmetrics.utils.types import Alignment


@dataclass(frozen=True)
class ColumnSpec:
    label: str
    width: int
    align: Alignment = Alignment.LEFT


@dataclass(frozen=True)
class SummaryBlock:
    title: str
    items: tuple[tuple[str, str], ...]


@dataclass(frozen=True)
class Table:
    title: str
    columns: tuple[ColumnSpec, ...]
    rows: tuple[tuple[str, ...], ...]

    def __post_init__(self):
        for i, row in enumerate(self.rows):
            if len(row) != len(self.columns):
                raise ValueError(
                    f"Row {i} of table {self.title!r} has {len(row)} cells, "
                    f"expected {len(self.columns)}"
                )

    @property
    def header(self) -> tuple[str, ...]:
        return tuple(c.label for c in self.columns)


@dataclass(frozen=True)
class InsightBlock:
    title: str
    insights: tuple[Insight, ...]


type Section = SummaryBlock | Table | InsightBlock


@dataclass(frozen=True)
class Page:
    title: str
    sections: tuple[Section, ...]


@dataclass(frozen=True)
class Report:
    title: str
    generated_at: datetime
    pages: tuple[Page, ...]
    file_name: str

    def sections(self) -> Iterator[Section]:
        for page in self.pages:
            yield from page.sections

    def section_titles(self) -> list[str]:
        return [s.title for s in self.sections()]

    def footer(self, page_number: int, page_count: int) -> str:
        return f"{self.title} - Page {page_number} of {page_count}"
