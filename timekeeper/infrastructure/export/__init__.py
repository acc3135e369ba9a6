"""
Report export infrastructure.
Renders aggregated reports as CSV, XLSX or PDF files.
"""

from .export_service import ExportedFile, ReportExporter
from .pdf_service import PDFService

__all__ = [
    "ExportedFile",
    "ReportExporter",
    "PDFService",
]
