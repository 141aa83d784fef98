import pytest

from daily_report.line_classifier import LineKind, classify, split_timed_line, split_report_lines


def test_title():
    line = classify("Daily Report – February 16, 2026")
    assert line.kind is LineKind.TITLE
    assert line.text == "Daily Report – February 16, 2026"
    assert not line.is_split


def test_timed_activity():
    line = classify("09:30 AM – Fixed ticket X")
    assert line.kind is LineKind.TIMED_ACTIVITY
    assert line.time == "09:30 AM"
    assert line.description == "Fixed ticket X"
    assert line.bold_part == "09:30 AM – "
    assert line.plain_part == "Fixed ticket X"


def test_timed_activity_keeps_separator_as_written():
    line = classify("02:15 PM–Deployed build")
    assert line.kind is LineKind.TIMED_ACTIVITY
    assert line.time == "02:15 PM"
    assert line.description == "Deployed build"
    assert line.bold_part + line.plain_part == "02:15 PM–Deployed build"


def test_bullet():
    line = classify("- Solved ticket X")
    assert line.kind is LineKind.BULLET
    assert line.text == "- Solved ticket X"


def test_summary_header():
    line = classify("06:00 PM – Summary of today")
    assert line.kind is LineKind.SUMMARY_HEADER
    assert line.time == "06:00 PM"
    assert line.description == "Summary of today"


def test_summary_header_without_time_degrades_to_unsplit():
    line = classify("Summary of today")
    assert line.kind is LineKind.SUMMARY_HEADER
    assert not line.is_split
    assert line.time is None
    assert line.text == "Summary of today"


def test_summary_takes_precedence_over_bullet():
    assert classify("- Summary of today").kind is LineKind.SUMMARY_HEADER


def test_title_takes_precedence_over_summary():
    assert classify("Daily Report Summary of today").kind is LineKind.TITLE


def test_timed_line_without_description_degrades_to_unsplit():
    line = classify("09:30 AM –")
    assert line.kind is LineKind.TIMED_ACTIVITY
    assert not line.is_split
    assert line.text == "09:30 AM –"


def test_hyphen_is_not_a_timed_separator():
    line = classify("09:30 AM - Fixed ticket X")
    assert line.kind is LineKind.PLAIN


@pytest.mark.parametrize("text", [
    "Lunch break was short",
    "9:30 AM – single digit hour",
    "09:30 am – lowercase period",
])
def test_plain(text):
    line = classify(text)
    assert line.kind is LineKind.PLAIN
    assert line.text == text


@pytest.mark.parametrize("text", ["", "   ", "\t", "\r"])
def test_blank(text):
    line = classify(text)
    assert line.kind is LineKind.BLANK
    assert line.raw_text == text
    assert line.text == ""


def test_classify_trims_surrounding_whitespace():
    line = classify("   09:30 AM – Fixed ticket X  \r")
    assert line.kind is LineKind.TIMED_ACTIVITY
    assert line.raw_text == "   09:30 AM – Fixed ticket X  \r"
    assert line.text == "09:30 AM – Fixed ticket X"


def test_split_timed_line():
    assert split_timed_line("10:00 PM – Wrap up") == ("10:00 PM", "Wrap up")
    assert split_timed_line("10:00 PM Wrap up") is None
    assert split_timed_line("Wrap up") is None


def test_split_report_lines_keeps_blank_lines_and_order():
    assert split_report_lines("a\n\nb") == ["a", "", "b"]
    assert split_report_lines("") == [""]
    assert split_report_lines(None) == [""]
