"""
Shared export driver
Every target format runs the same classify -> render -> paint pipeline and
only supplies a SegmentPainter for its document container.
"""

import logging
from abc import ABC, abstractmethod

from daily_report.segment_renderer import BLANK_LINE_ADVANCE, RenderedLine, render_report

logger = logging.getLogger(__name__)


class SegmentPainter(ABC):
    """Writes segments into one concrete document, paragraph by paragraph."""

    @abstractmethod
    def start_paragraph(self, spacing_before: float, spacing_after: float) -> None:
        ...

    @abstractmethod
    def indent(self, level: int) -> None:
        ...

    @abstractmethod
    def paint_bold(self, text: str) -> None:
        ...

    @abstractmethod
    def paint_plain(self, text: str) -> None:
        ...

    @abstractmethod
    def end_paragraph(self) -> None:
        ...

    @abstractmethod
    def advance_spacing(self, lines: float) -> None:
        """Move the cursor down by a number of body lines without adding text."""

    @abstractmethod
    def build(self) -> bytes:
        ...


def paint_line(painter: SegmentPainter, rendered: RenderedLine) -> None:
    """Paint one rendered line as a single paragraph."""
    if rendered.is_break:
        painter.advance_spacing(BLANK_LINE_ADVANCE)
        return

    if not rendered.segments:
        return

    first = rendered.segments[0]
    painter.start_paragraph(first.spacing_before, first.spacing_after)
    if first.indent_level:
        painter.indent(first.indent_level)
    for segment in rendered.segments:
        if segment.bold:
            painter.paint_bold(segment.text)
        else:
            painter.paint_plain(segment.text)
    painter.end_paragraph()


class ReportExporter(ABC):
    """Base class for report exporters."""

    format_name = ""
    extension = ""
    mime_type = ""

    @abstractmethod
    def create_painter(self, title: str) -> SegmentPainter:
        ...

    def export(self, report_text: str, title: str) -> bytes:
        """
        Transcribe report text into a binary document.

        Lines are painted strictly in input order; nothing is added, removed
        or reordered. An empty report produces a document with no paragraphs.

        Args:
            report_text: The stored full report
            title: Document title, e.g. "Daily Report – February 16, 2026"

        Returns:
            The encoded document
        """
        painter = self.create_painter(title)
        line_count = 0
        for rendered in render_report(report_text):
            paint_line(painter, rendered)
            line_count += 1

        try:
            data = painter.build()
        except Exception as e:
            logger.error(f"[{self.format_name.upper()} Export] Document build failed: {e}")
            raise

        logger.info(
            f"[{self.format_name.upper()} Export] Document generated: "
            f"{line_count} lines, {len(data)} bytes"
        )
        return data
