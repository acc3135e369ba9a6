"""
PDF generation service using WeasyPrint and Jinja2.
Renders report exports from HTML templates.
"""

from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape

from timekeeper.application.use_cases.report_use_cases import ReportData
from timekeeper.config import settings
from timekeeper.domain.services.timer_service import format_duration


class PDFService:
    """Service for generating PDF documents from templates."""

    def __init__(self, templates_dir: Optional[Path] = None, currency_symbol: Optional[str] = None):
        """Initialize the PDF service with template environment."""
        self.templates_dir = templates_dir or Path(__file__).parent / "templates"
        self.currency_symbol = currency_symbol or settings.currency_symbol

        # Setup Jinja2 environment
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=select_autoescape(['html', 'xml'])
        )

        # Add custom filters
        self._register_filters()

    def _register_filters(self):
        """Register custom Jinja2 filters."""

        def currency_format(value: Optional[float]) -> str:
            """Format money with two decimals and the configured symbol."""
            return f"{value or 0:,.2f} {self.currency_symbol}"

        def hours_format(value: Optional[float]) -> str:
            return f"{value or 0:.2f}"

        self.env.filters['currency'] = currency_format
        self.env.filters['duration'] = format_duration
        self.env.filters['hours'] = hours_format

    def render_html(self, report: ReportData, template_name: str = "report.html") -> str:
        """Render the report template to an HTML string."""
        template = self.env.get_template(template_name)
        return template.render(**self._prepare_report_context(report))

    def render_report(self, report: ReportData, template_name: str = "report.html") -> bytes:
        """
        Generate the PDF for a report.

        Args:
            report: Aggregated report data
            template_name: Template file name to use

        Returns:
            bytes: The PDF document
        """
        # WeasyPrint needs the system pango libraries, load it only when a PDF is requested
        from weasyprint import HTML

        html_content = self.render_html(report, template_name)
        return HTML(string=html_content, base_url=str(self.templates_dir)).write_pdf()

    def _prepare_report_context(self, report: ReportData) -> Dict[str, Any]:
        """Prepare context data for report template."""
        return {
            "report": report,
            "title": "Detailed time report" if report.detailed else f"Time report by {report.grouping.value}",
            "groups": report.groups,
            "rows": report.detail_rows,
            "summary": report.summary,
            "include_costs": report.include_costs,
            "generated_at": datetime.now().strftime("%Y-%m-%d %H:%M"),
        }
