"""
PDF exporter
Paints report segments into reportlab flowables and builds an A4 document.
"""

import re
from io import BytesIO
from typing import List

from reportlab.lib.enums import TA_LEFT
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle
from reportlab.lib.units import inch
from reportlab.platypus import SimpleDocTemplate, Paragraph, Spacer

from daily_report.exporters.base import ReportExporter, SegmentPainter
from daily_report.segment_renderer import BODY_FONT_SIZE, INDENT_STEP

# Standard Type 1 face; <b> markup maps it to Times-Bold
PDF_FONT_NAME = 'Times-Roman'
LINE_HEIGHT = BODY_FONT_SIZE * 1.2


SPACE_RUN_PATTERN = re.compile(r' {2,}')


def escape_markup(text: str) -> str:
    """
    Escape the characters reportlab's paragraph parser treats as markup.

    Paragraph collapses runs of spaces, so every space after the first in a
    run becomes a non-breaking space.
    """
    escaped = text.replace('&', '&amp;').replace('<', '&lt;').replace('>', '&gt;')
    return SPACE_RUN_PATTERN.sub(lambda m: ' ' + '&nbsp;' * (len(m.group()) - 1), escaped)


class PdfSegmentPainter(SegmentPainter):
    """One reportlab Paragraph per report line, bold runs via inline markup."""

    def __init__(self, title: str):
        self.title = title
        self.story = []
        self._body_style = ParagraphStyle(
            'ReportBody',
            fontName=PDF_FONT_NAME,
            fontSize=BODY_FONT_SIZE,
            leading=LINE_HEIGHT,
            alignment=TA_LEFT,
        )
        self._style = None
        self._fragments: List[str] = []

    def start_paragraph(self, spacing_before: float, spacing_after: float) -> None:
        self._style = ParagraphStyle(
            f'ReportLine{len(self.story)}',
            parent=self._body_style,
            spaceBefore=spacing_before,
            spaceAfter=spacing_after,
        )
        self._fragments = []

    def indent(self, level: int) -> None:
        self._style.leftIndent = INDENT_STEP * level

    def paint_bold(self, text: str) -> None:
        self._fragments.append(f'<b>{escape_markup(text)}</b>')

    def paint_plain(self, text: str) -> None:
        self._fragments.append(escape_markup(text))

    def end_paragraph(self) -> None:
        self.story.append(Paragraph(''.join(self._fragments), self._style))
        self._style = None
        self._fragments = []

    def advance_spacing(self, lines: float) -> None:
        self.story.append(Spacer(1, lines * BODY_FONT_SIZE))

    def build(self) -> bytes:
        buffer = BytesIO()
        doc = SimpleDocTemplate(
            buffer,
            pagesize=A4,
            rightMargin=inch,
            leftMargin=inch,
            topMargin=inch,
            bottomMargin=inch,
            title=self.title,
        )
        # reportlab needs at least one flowable to emit a page
        doc.build(self.story or [Spacer(1, 0)])
        return buffer.getvalue()


class PdfReportExporter(ReportExporter):
    format_name = "pdf"
    extension = "pdf"
    mime_type = "application/pdf"

    def create_painter(self, title: str) -> SegmentPainter:
        return PdfSegmentPainter(title)
