"""
Report Line Classifier
Assigns a semantic kind to each line of a daily report.

Report text follows the format produced by the composer:

    Daily Report – February 16, 2026

    09:30 AM – Fixed ticket X
    06:00 PM – Summary of today
    - Solved ticket X

Classification never fails. Lines that look timed but cannot be split fall
back to unbolded text so no user content is dropped.
"""

import re
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

logger = logging.getLogger(__name__)

EN_DASH = "–"

TITLE_PREFIX = "Daily Report"
SUMMARY_MARKER = "Summary of today"
BULLET_PREFIX = "-"

# Detection only needs the time and the dash; the split needs a description too
TIMED_PREFIX_PATTERN = re.compile(r'^\d{2}:\d{2} [AP]M\s*' + EN_DASH)
TIMED_LINE_PATTERN = re.compile(r'^(\d{2}:\d{2} [AP]M)\s*' + EN_DASH + r'\s*(.+)$')


class LineKind(str, Enum):
    """Kinds of report lines."""
    TITLE = "title"
    SUMMARY_HEADER = "summary_header"
    BULLET = "bullet"
    TIMED_ACTIVITY = "timed_activity"
    PLAIN = "plain"
    BLANK = "blank"


@dataclass(frozen=True)
class ClassifiedLine:
    """A single report line with its kind and extracted fields."""
    kind: LineKind
    raw_text: str
    text: str  # trimmed line, what gets rendered
    time: Optional[str] = None
    description: Optional[str] = None
    bold_part: Optional[str] = None  # "09:30 AM – " exactly as written
    plain_part: Optional[str] = None

    @property
    def is_split(self) -> bool:
        return self.bold_part is not None


def split_timed_line(line: str) -> Optional[Tuple[str, str]]:
    """
    Split "HH:MM AM – description" into its time and description.

    Shared by summary headers and timed activities.

    Returns:
        (time, description), or None when the line does not match
    """
    match = TIMED_LINE_PATTERN.match(line)
    if not match:
        return None
    return match.group(1), match.group(2)


def _classify_timed(kind: LineKind, raw_text: str, text: str) -> ClassifiedLine:
    parts = split_timed_line(text)
    if parts is None:
        logger.debug(f"Could not split {kind.value} line, rendering as plain text: {text!r}")
        return ClassifiedLine(kind=kind, raw_text=raw_text, text=text)

    time, description = parts
    bold_part = text[:len(text) - len(description)]
    return ClassifiedLine(
        kind=kind,
        raw_text=raw_text,
        text=text,
        time=time,
        description=description,
        bold_part=bold_part,
        plain_part=description,
    )


def classify(line: str) -> ClassifiedLine:
    """
    Classify one line of report text.

    Precedence matters because several patterns are prefixes of each other:
    blank, title, summary header, bullet, timed activity, plain.

    Args:
        line: Raw line, surrounding whitespace allowed

    Returns:
        ClassifiedLine for the line
    """
    text = line.strip()

    if not text:
        return ClassifiedLine(kind=LineKind.BLANK, raw_text=line, text="")

    if text.startswith(TITLE_PREFIX):
        return ClassifiedLine(kind=LineKind.TITLE, raw_text=line, text=text)

    if SUMMARY_MARKER in text:
        return _classify_timed(LineKind.SUMMARY_HEADER, line, text)

    if text.startswith(BULLET_PREFIX):
        return ClassifiedLine(kind=LineKind.BULLET, raw_text=line, text=text)

    if TIMED_PREFIX_PATTERN.match(text):
        return _classify_timed(LineKind.TIMED_ACTIVITY, line, text)

    return ClassifiedLine(kind=LineKind.PLAIN, raw_text=line, text=text)


def split_report_lines(report_text: str):
    """Split report text on newlines, keeping blank lines and input order."""
    return (report_text or "").split('\n')
