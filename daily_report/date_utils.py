"""
Date Utilities
Converts between ISO calendar dates (YYYY-MM-DD) and human-readable spellings.

All date math works on explicit year/month/day integers. No datetime is ever
built from a local-midnight string, so the day stored is the day displayed
regardless of server or client timezone.
"""

import re
import logging
from datetime import date
from typing import Optional, Tuple

logger = logging.getLogger(__name__)


class InvalidDateFormat(ValueError):
    """Raised when a date string matches none of the recognized shapes."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(
            f'Invalid date format: "{value}". '
            f'Expected format: "February 16, 2026" or "16 February 2026"'
        )


MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

# Full names, 3-letter abbreviations and "sept"
MONTH_LOOKUP = {name.lower(): index for index, name in enumerate(MONTH_NAMES, start=1)}
MONTH_LOOKUP.update({name[:3].lower(): index for index, name in enumerate(MONTH_NAMES, start=1)})
MONTH_LOOKUP["sept"] = 9

MIN_YEAR = 1900

ISO_PATTERN = re.compile(r'^(\d{4})-(\d{2})-(\d{2})$')
DAY_MONTH_YEAR_PATTERN = re.compile(r'^(\d{1,2})\s+([a-z]+)\s+(\d{4})$', re.IGNORECASE)
MONTH_DAY_YEAR_PATTERN = re.compile(r'^([a-z]+)\s+(\d{1,2}),?\s+(\d{4})$', re.IGNORECASE)

# Prefix match so stored timestamps ("2026-02-16T00:00:00Z") still format
ISO_PREFIX_PATTERN = re.compile(r'^(\d{4})-(\d{2})-(\d{2})')


def _to_iso(year: int, month: int, day: int) -> str:
    return f"{year:04d}-{month:02d}-{day:02d}"


def _is_valid_fields(year: int, month: Optional[int], day: int) -> bool:
    return bool(month) and 1 <= month <= 12 and 1 <= day <= 31 and year >= MIN_YEAR


def parse_to_iso(value: str) -> str:
    """
    Parse a date string into canonical ISO format.

    Recognized shapes, tried in order:
        "2026-02-16"         (already ISO)
        "16 February 2026"   (day, month name, year)
        "February 16, 2026"  (month name, day, optional comma, year)

    Month names are case-insensitive, full or 3-letter, plus "sept".

    Args:
        value: Human-entered date string

    Returns:
        Zero-padded "YYYY-MM-DD"

    Raises:
        InvalidDateFormat: If no shape matches or the fields are out of range
    """
    cleaned = (value or "").strip()

    match = ISO_PATTERN.match(cleaned)
    if match:
        year, month, day = (int(group) for group in match.groups())
        if _is_valid_fields(year, month, day):
            return _to_iso(year, month, day)

    match = DAY_MONTH_YEAR_PATTERN.match(cleaned)
    if match:
        day = int(match.group(1))
        month = MONTH_LOOKUP.get(match.group(2).lower())
        year = int(match.group(3))
        if _is_valid_fields(year, month, day):
            return _to_iso(year, month, day)

    match = MONTH_DAY_YEAR_PATTERN.match(cleaned)
    if match:
        month = MONTH_LOOKUP.get(match.group(1).lower())
        day = int(match.group(2))
        year = int(match.group(3))
        if _is_valid_fields(year, month, day):
            return _to_iso(year, month, day)

    raise InvalidDateFormat(cleaned)


def _split_iso(iso_date: str) -> Optional[Tuple[str, str, str]]:
    match = ISO_PREFIX_PATTERN.match(iso_date or "")
    if not match:
        return None
    return match.group(1), match.group(2), match.group(3)


def format_from_iso(iso_date: str) -> str:
    """
    Render an ISO date as "Month D, YYYY" (e.g. "February 16, 2026").

    Returns the input unchanged when it is not a usable ISO date.
    """
    fields = _split_iso(iso_date)
    if fields is None:
        logger.warning(f"[Date Format] Invalid ISO date: {iso_date!r}")
        return iso_date

    year, month, day = (int(field) for field in fields)
    if not 1 <= month <= 12 or not 1 <= day <= 31:
        logger.warning(f"[Date Format] Month or day out of range: {iso_date!r}")
        return iso_date

    return f"{MONTH_NAMES[month - 1]} {day}, {year}"


def today_iso() -> str:
    """Today's local calendar date as ISO, no time-of-day."""
    today = date.today()
    return _to_iso(today.year, today.month, today.day)


def is_valid_date(value: str) -> bool:
    try:
        parse_to_iso(value)
        return True
    except InvalidDateFormat:
        return False


def normalize_for_storage(value: str) -> str:
    """
    Strict entry point used before a date is persisted.

    Raises:
        InvalidDateFormat: Propagated to the caller as a rejected request
    """
    try:
        iso_date = parse_to_iso(value)
    except InvalidDateFormat as e:
        logger.error(f"[Save Report] Date parsing failed: {e}")
        raise
    logger.info(f"[Save Report] Date parsed: {value!r} -> {iso_date}")
    return iso_date


def format_for_display(iso_date: Optional[str]) -> str:
    """Lenient entry point for display; never raises."""
    if not iso_date:
        return ""
    return format_from_iso(iso_date)


def to_filename_fragment(iso_date: str) -> str:
    """
    Day, month and 2-digit year joined by underscores: "2026-02-16" -> "16_02_26".

    Falls back to the raw value when it is not ISO.
    """
    fields = _split_iso(iso_date)
    if fields is None:
        logger.warning(f"[Filename] Report date is not ISO, using as-is: {iso_date!r}")
        return iso_date
    year, month, day = fields
    return f"{day}_{month}_{year[-2:]}"
