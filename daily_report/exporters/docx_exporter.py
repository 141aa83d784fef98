"""
Word (.docx) exporter
Paints report segments into a python-docx Document.
"""

from io import BytesIO

from docx import Document
from docx.shared import Pt

from daily_report.exporters.base import ReportExporter, SegmentPainter
from daily_report.segment_renderer import BODY_FONT_SIZE, FONT_FAMILY, INDENT_STEP


class DocxSegmentPainter(SegmentPainter):
    """One Word paragraph per report line, bold and regular runs inside it."""

    def __init__(self, title: str):
        self.document = Document()

        # Set default font
        style = self.document.styles['Normal']
        font = style.font
        font.name = FONT_FAMILY
        font.size = Pt(BODY_FONT_SIZE)

        self.document.core_properties.title = title
        self._paragraph = None
        # Blank lines have no paragraph of their own in Word; their height
        # is added before the next paragraph instead
        self._pending_space = 0.0

    def start_paragraph(self, spacing_before: float, spacing_after: float) -> None:
        self._paragraph = self.document.add_paragraph()
        paragraph_format = self._paragraph.paragraph_format
        paragraph_format.space_before = Pt(spacing_before + self._pending_space)
        paragraph_format.space_after = Pt(spacing_after)
        self._pending_space = 0.0

    def indent(self, level: int) -> None:
        self._paragraph.paragraph_format.left_indent = Pt(INDENT_STEP * level)

    def paint_bold(self, text: str) -> None:
        run = self._paragraph.add_run(text)
        run.bold = True

    def paint_plain(self, text: str) -> None:
        run = self._paragraph.add_run(text)
        run.bold = False

    def end_paragraph(self) -> None:
        self._paragraph = None

    def advance_spacing(self, lines: float) -> None:
        self._pending_space += lines * BODY_FONT_SIZE

    def build(self) -> bytes:
        buffer = BytesIO()
        self.document.save(buffer)
        return buffer.getvalue()


class DocxReportExporter(ReportExporter):
    format_name = "docx"
    extension = "docx"
    mime_type = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"

    def create_painter(self, title: str) -> SegmentPainter:
        return DocxSegmentPainter(title)
