"""
Document Segment Renderer
Maps classified report lines to styled text segments, independent of the
output format. Exporters only decide how a segment is painted.
"""

from dataclasses import dataclass
from typing import Iterator, List

from daily_report.line_classifier import (
    ClassifiedLine,
    LineKind,
    classify,
    split_report_lines,
)

# Typography shared by every export target. The report should read like a
# typed memo: one face, one size, only weight, spacing and indent vary.
FONT_FAMILY = "Times New Roman"
BODY_FONT_SIZE = 12  # pt

TITLE_SPACING_AFTER = 20  # pt
SUMMARY_SPACING = 10  # pt, before and after the summary header
LINE_SPACING_AFTER = 5  # pt
INDENT_STEP = 36  # pt per indent level (0.5 inch)

# Blank lines advance the cursor by half a line
BLANK_LINE_ADVANCE = 0.5


@dataclass(frozen=True)
class Segment:
    """A run of uniformly styled text plus its paragraph layout hints."""
    text: str
    bold: bool = False
    spacing_before: float = 0
    spacing_after: float = 0
    indent_level: int = 0


@dataclass(frozen=True)
class RenderedLine:
    """A classified line with the segments it renders to."""
    line: ClassifiedLine
    segments: List[Segment]

    @property
    def is_break(self) -> bool:
        """Blank lines render nothing but still advance vertical spacing."""
        return self.line.kind is LineKind.BLANK


def _timed_segments(line: ClassifiedLine, spacing_before: float, spacing_after: float) -> List[Segment]:
    if not line.is_split:
        return [Segment(line.text, spacing_before=spacing_before, spacing_after=spacing_after)]
    return [
        Segment(line.bold_part, bold=True, spacing_before=spacing_before, spacing_after=spacing_after),
        Segment(line.plain_part, spacing_before=spacing_before, spacing_after=spacing_after),
    ]


def render(line: ClassifiedLine) -> List[Segment]:
    """
    Render a classified line into an ordered list of segments.

    Segments of one line share the same layout hints and belong to the same
    paragraph. Blank lines produce no segments.
    """
    kind = line.kind

    if kind is LineKind.BLANK:
        return []

    if kind is LineKind.TITLE:
        return [Segment(line.text, bold=True, spacing_after=TITLE_SPACING_AFTER)]

    if kind is LineKind.SUMMARY_HEADER:
        return _timed_segments(line, SUMMARY_SPACING, SUMMARY_SPACING)

    if kind is LineKind.TIMED_ACTIVITY:
        return _timed_segments(line, 0, LINE_SPACING_AFTER)

    if kind is LineKind.BULLET:
        return [Segment(line.text, spacing_after=LINE_SPACING_AFTER, indent_level=1)]

    return [Segment(line.text, spacing_after=LINE_SPACING_AFTER)]


def render_report(report_text: str) -> Iterator[RenderedLine]:
    """Classify and render every line of a report, in input order."""
    for raw_line in split_report_lines(report_text):
        line = classify(raw_line)
        yield RenderedLine(line=line, segments=render(line))
