"""
Report export service.
Turns aggregated report data into downloadable CSV, XLSX and PDF files.
"""

import csv
import io
import logging
from dataclasses import dataclass
from typing import Any, List, Optional

from openpyxl import Workbook
from openpyxl.styles import Font

from timekeeper.application.dto.report_dto import ExportFormat
from timekeeper.application.use_cases.report_use_cases import ReportData
from timekeeper.infrastructure.export.pdf_service import PDFService


logger = logging.getLogger(__name__)


SUMMARY_COLUMNS = ["Period", "TotalHours", "EntryCount"]
DETAIL_COLUMNS = [
    "Date", "StartTime", "EndTime", "DurationHours", "BreakMinutes",
    "Description", "Employee", "Project", "Status"
]
SUMMARY_COST_COLUMNS = ["Costs"]
DETAIL_COST_COLUMNS = ["HourlyRate", "Cost"]

MEDIA_TYPES = {
    ExportFormat.CSV: "text/csv; charset=utf-8",
    ExportFormat.XLSX: "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    ExportFormat.PDF: "application/pdf",
}


@dataclass
class ExportedFile:
    """A rendered report ready to be sent as an attachment."""

    content: bytes
    media_type: str
    filename: str


def format_number(value: Optional[float]) -> str:
    """Two decimals, empty for missing values."""
    if value is None:
        return ""
    return f"{value:.2f}"


class ReportExporter:
    """
    Renders ReportData in the requested format.
    Summary exports have one row per group; detailed exports one row per entry.
    """

    def __init__(self, pdf_service: Optional[PDFService] = None):
        self.pdf_service = pdf_service or PDFService()

    def export(self, report: ReportData, export_format: ExportFormat) -> ExportedFile:
        export_format = ExportFormat(export_format)

        if export_format == ExportFormat.CSV:
            content = self.to_csv(report).encode("utf-8")
        elif export_format == ExportFormat.XLSX:
            content = self.to_xlsx(report)
        else:
            content = self.pdf_service.render_report(report)

        return ExportedFile(
            content=content,
            media_type=MEDIA_TYPES[export_format],
            filename=self.filename(report, export_format)
        )

    def filename(self, report: ReportData, export_format: ExportFormat) -> str:
        kind = "detailed" if report.detailed else report.grouping.value
        return f"report_{kind}_{report.start_date.isoformat()}_{report.end_date.isoformat()}.{export_format.value}"

    def columns(self, report: ReportData) -> List[str]:
        """Header row for the report's shape."""
        if report.detailed:
            return DETAIL_COLUMNS + (DETAIL_COST_COLUMNS if report.include_costs else [])
        return SUMMARY_COLUMNS + (SUMMARY_COST_COLUMNS if report.include_costs else [])

    def rows(self, report: ReportData) -> List[List[Any]]:
        """
        Data rows matching `columns`.
        Hours and money are numbers here; each format decides how to render them.
        """
        if report.detailed:
            rows = []
            for row in report.detail_rows:
                values = [
                    row.date.isoformat(),
                    row.start_time or "",
                    row.end_time or "",
                    float(row.duration_hours),
                    row.break_minutes,
                    row.description,
                    row.employee,
                    row.project,
                    row.status,
                ]
                if report.include_costs:
                    values.extend([float(row.hourly_rate or 0), float(row.cost or 0)])
                rows.append(values)
            return rows

        rows = []
        for group in report.groups:
            values = [group.key, float(group.total_hours), group.entry_count]
            if report.include_costs:
                values.append(float(group.total_costs or 0))
            rows.append(values)
        return rows

    def to_csv(self, report: ReportData) -> str:
        """Render the report as CSV text with two-decimal numbers."""
        output = io.StringIO()
        writer = csv.writer(output)
        writer.writerow(self.columns(report))

        for values in self.rows(report):
            writer.writerow([format_number(value) if isinstance(value, float) else value for value in values])

        return output.getvalue()

    def to_xlsx(self, report: ReportData) -> bytes:
        """Render the report as an XLSX workbook with a bold header row."""
        workbook = Workbook()
        sheet = workbook.active
        sheet.title = "Details" if report.detailed else "Report"

        sheet.append(self.columns(report))
        for cell in sheet[1]:
            cell.font = Font(bold=True)

        for values in self.rows(report):
            sheet.append([round(value, 2) if isinstance(value, float) else value for value in values])

        # Numeric columns display with two decimals
        for row in sheet.iter_rows(min_row=2):
            for cell in row:
                if isinstance(cell.value, float):
                    cell.number_format = "0.00"

        for index, column in enumerate(self.columns(report), start=1):
            sheet.column_dimensions[sheet.cell(row=1, column=index).column_letter].width = max(12, len(column) + 2)

        output = io.BytesIO()
        workbook.save(output)
        logger.debug("Rendered XLSX report with %d rows", sheet.max_row - 1)
        return output.getvalue()
