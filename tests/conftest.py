import pytest

SAMPLE_REPORT = """Daily Report – February 16, 2026

09:30 AM – Fixed ticket X
11:00 AM – Call with support about ticket Y
Lunch break was short
06:00 PM – Summary of today
- Solved ticket X
- Discussed ticket Y with support"""

SAMPLE_ACTIVITIES = [
    {"time": "09:30 AM", "description": "Fixed ticket X"},
    {"time": "11:00 AM", "description": "Call with support about ticket Y"},
]


@pytest.fixture
def sample_report():
    return SAMPLE_REPORT


@pytest.fixture
def sample_activities():
    return [dict(item) for item in SAMPLE_ACTIVITIES]


@pytest.fixture
def visible_lines(sample_report):
    """Non-blank, trimmed lines: what an exported document should show."""
    return [line.strip() for line in sample_report.split('\n') if line.strip()]


@pytest.fixture
def db_file(tmp_path):
    return str(tmp_path / "reports.db")
