"""
Unit tests for report exports.
"""

import csv
import io
from datetime import date, datetime
from decimal import Decimal

from openpyxl import load_workbook

from timekeeper.application.dto.report_dto import ExportFormat
from timekeeper.application.use_cases.report_use_cases import ReportData
from timekeeper.domain.models.project import Project
from timekeeper.domain.models.time_entry import TimeEntry
from timekeeper.domain.models.user import User
from timekeeper.domain.services.report_service import ReportService, ReportGrouping
from timekeeper.infrastructure.export.export_service import ReportExporter, format_number
from timekeeper.infrastructure.export.pdf_service import PDFService


def build_report(include_costs=False, detailed=False, grouping=ReportGrouping.DAY) -> ReportData:
    user = User(id="u-1", username="jkoch", first_name="Jana", last_name="Koch", hourly_rate=Decimal("20.00"))
    project = Project(id="p-1", name="Website")
    entries = [
        TimeEntry(
            id="e-1", user_id="u-1", project_id="p-1",
            start_time=datetime(2024, 1, 1, 9, 0), end_time=datetime(2024, 1, 1, 17, 0),
            break_minutes=30, description="Relaunch, Phase 1", user=user, project=project
        ),
        TimeEntry(
            id="e-2", user_id="u-1",
            start_time=datetime(2024, 1, 2, 8, 0), end_time=datetime(2024, 1, 2, 10, 15),
            user=user
        ),
    ]
    service = ReportService()
    groups = service.aggregate(entries, grouping, include_costs)
    return ReportData(
        start_date=date(2024, 1, 1),
        end_date=date(2024, 1, 31),
        grouping=grouping,
        groups=groups,
        include_costs=include_costs,
        is_admin=include_costs,
        total_entries=len(entries),
        summary=service.summarize(groups, include_costs),
        detailed=detailed,
        detail_rows=service.detail_rows(entries, include_costs) if detailed else []
    )


def read_csv(content: bytes):
    return list(csv.reader(io.StringIO(content.decode("utf-8"))))


class TestReportExporter:
    """Test cases for ReportExporter."""

    def setup_method(self):
        """Set up test fixtures."""
        self.exporter = ReportExporter(PDFService(currency_symbol="€"))

    def test_format_number(self):
        """Test numbers render with two decimals."""
        assert format_number(7.5) == "7.50"
        assert format_number(None) == ""

    def test_summary_csv(self):
        """Test a grouped CSV has one row per group."""
        exported = self.exporter.export(build_report(), ExportFormat.CSV)

        rows = read_csv(exported.content)
        assert rows[0] == ["Period", "TotalHours", "EntryCount"]
        assert rows[1] == ["2024-01-01", "7.50", "1"]
        assert rows[2] == ["2024-01-02", "2.25", "1"]
        assert exported.media_type.startswith("text/csv")
        assert exported.filename == "report_day_2024-01-01_2024-01-31.csv"

    def test_summary_csv_with_costs(self):
        """Test the cost column is appended for cost reports."""
        rows = read_csv(self.exporter.export(build_report(include_costs=True), ExportFormat.CSV).content)

        assert rows[0][-1] == "Costs"
        assert rows[1][-1] == "150.00"
        assert rows[2][-1] == "45.00"

    def test_detailed_csv(self):
        """Test a detailed CSV has one row per entry and quotes commas."""
        exported = self.exporter.export(build_report(detailed=True, include_costs=True), ExportFormat.CSV)

        rows = read_csv(exported.content)
        assert rows[0] == [
            "Date", "StartTime", "EndTime", "DurationHours", "BreakMinutes",
            "Description", "Employee", "Project", "Status", "HourlyRate", "Cost"
        ]
        assert rows[1] == [
            "2024-01-01", "09:00", "17:00", "7.50", "30",
            "Relaunch, Phase 1", "Jana Koch", "Website", "draft", "20.00", "150.00"
        ]
        assert rows[2][7] == "No project"
        assert exported.filename == "report_detailed_2024-01-01_2024-01-31.csv"

    def test_xlsx(self):
        """Test the workbook loads and keeps numeric cells."""
        exported = self.exporter.export(build_report(include_costs=True), ExportFormat.XLSX)

        workbook = load_workbook(io.BytesIO(exported.content))
        sheet = workbook.active
        assert sheet.title == "Report"
        assert [cell.value for cell in sheet[1]] == ["Period", "TotalHours", "EntryCount", "Costs"]
        assert sheet[1][0].font.bold is True
        assert sheet["B2"].value == 7.5
        assert sheet["D2"].value == 150.0
        assert sheet["B2"].number_format == "0.00"
        assert exported.filename.endswith(".xlsx")

    def test_pdf_html(self):
        """Test the PDF template renders totals and currency."""
        html = self.exporter.pdf_service.render_html(build_report(include_costs=True, grouping=ReportGrouping.PROJECT))

        assert "Time report by project" in html
        assert "Website" in html
        assert "No project" in html
        assert "150.00 €" in html
        assert "9.75" in html

    def test_detailed_pdf_html(self):
        """Test the detailed template lists each entry."""
        html = self.exporter.pdf_service.render_html(build_report(detailed=True))

        assert "Detailed time report" in html
        assert "Jana Koch" in html
        assert "7:30h" in html
