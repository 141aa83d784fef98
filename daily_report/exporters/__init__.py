"""
Report exporters (Word and PDF) and download helpers.
"""

import logging
from typing import Optional, Tuple

from daily_report import config
from daily_report.date_utils import format_for_display, to_filename_fragment
from daily_report.exporters.base import ReportExporter, SegmentPainter
from daily_report.exporters.docx_exporter import DocxReportExporter
from daily_report.exporters.pdf_exporter import PdfReportExporter
from daily_report.line_classifier import EN_DASH
from daily_report.models import DailyReport

logger = logging.getLogger(__name__)

EXPORTERS = {
    "docx": DocxReportExporter,
    "pdf": PdfReportExporter,
}


def get_exporter(export_format: str) -> ReportExporter:
    """Return an exporter for "docx" or "pdf"."""
    exporter_class = EXPORTERS.get((export_format or "").lower())
    if exporter_class is None:
        raise ValueError(f"Unsupported format: {export_format}")
    return exporter_class()


def build_report_title(report_date: str) -> str:
    """Title line for a report date, e.g. "Daily Report – February 16, 2026"."""
    return f"Daily Report {EN_DASH} {format_for_display(report_date)}"


def build_export_filename(report_date: str, extension: str, author: Optional[str] = None) -> str:
    """Suggested download name: "Daily Report <Name> dd_mm_yy.<ext>"."""
    name = author or config.REPORT_AUTHOR_NAME
    return f"Daily Report {name} {to_filename_fragment(report_date)}.{extension}"


def export_report(report: DailyReport, export_format: str, author: Optional[str] = None) -> Tuple[bytes, str, str]:
    """
    Export a stored report.

    Returns:
        (document bytes, suggested filename, mime type)
    """
    exporter = get_exporter(export_format)
    logger.info(f"[{exporter.format_name.upper()} Export] Exporting report {report.id} ({report.report_date})")
    data = exporter.export(report.full_report, build_report_title(report.report_date))
    filename = build_export_filename(report.report_date, exporter.extension, author)
    return data, filename, exporter.mime_type


__all__ = [
    "ReportExporter",
    "SegmentPainter",
    "DocxReportExporter",
    "PdfReportExporter",
    "get_exporter",
    "build_report_title",
    "build_export_filename",
    "export_report",
]
