"""
Activity helpers
Normalizes clock times typed into the form and cleans activity rows.
"""

import re
from typing import Iterable, List, Tuple, Union

from daily_report.line_classifier import EN_DASH
from daily_report.models import Activity

PERIODS = ("AM", "PM")

ACTIVITY_TIME_PATTERN = re.compile(r'^(\d{1,2}:\d{2})\s*(AM|PM)$', re.IGNORECASE)


def format_time_input(raw: str) -> str:
    """
    Format a digits-only clock entry as HH:MM.

    Examples:
        "9"    -> "09:00"
        "12"   -> "12:00"
        "930"  -> "09:30"
        "0225" -> "02:25"
        "1430" -> "14:30"

    Hours are clamped to 23 and minutes to 59. Non-digits are ignored, so
    "09:30" formats to itself. Returns "" when there are no digits.
    """
    digits = re.sub(r'\D', '', raw or '')
    if not digits:
        return ''

    if len(digits) <= 2:
        hours, minutes = digits, '00'
    elif len(digits) == 3:
        hours, minutes = digits[:1], digits[1:3]
    else:
        hours, minutes = digits[:2], digits[2:4]

    hours_num = min(int(hours), 23)
    minutes_num = min(int(minutes), 59)
    return f"{hours_num:02d}:{minutes_num:02d}"


def build_activity_time(raw: str, period: str) -> str:
    """Combine a typed clock entry and an AM/PM choice: ("930", "am") -> "09:30 AM"."""
    period = (period or '').strip().upper()
    if period not in PERIODS:
        raise ValueError(f"Period must be AM or PM, got {period!r}")

    formatted = format_time_input(raw)
    if not formatted:
        return ''
    return f"{formatted} {period}"


def split_activity_time(value: str) -> Tuple[str, str]:
    """Split "09:30 PM" into ("09:30", "PM"); ("", "AM") when it does not parse."""
    match = ACTIVITY_TIME_PATTERN.match((value or '').strip())
    if not match:
        return '', 'AM'
    return match.group(1), match.group(2).upper()


def clean_activities(items: Iterable[Union[Activity, dict]]) -> List[Activity]:
    """Drop rows with a blank time or description, keeping the rest in order."""
    cleaned = []
    for item in items or []:
        if isinstance(item, Activity):
            time, description = item.time, item.description
        else:
            time, description = item.get("time") or "", item.get("description") or ""

        time, description = time.strip(), description.strip()
        if time and description:
            cleaned.append(Activity(time=time, description=description))
    return cleaned


def format_activity_line(activity: Activity) -> str:
    """The report line for an activity: "09:30 AM – Fixed ticket X"."""
    return f"{activity.time} {EN_DASH} {activity.description}"
