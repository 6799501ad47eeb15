"""Report assembly: typed sections laid out across logical pages."""

from hrmetrics.report.assembler import assemble_report, report_file_name
from hrmetrics.report.sections import ColumnSpec, InsightBlock, Page, Report, Section, SummaryBlock, Table
