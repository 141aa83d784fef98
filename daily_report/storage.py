"""
Report storage
SQLite persistence for saved daily reports.
"""

import re
import json
import uuid
import sqlite3
import logging
from datetime import datetime, timezone
from typing import Iterable, List, Optional, Union

from daily_report import config
from daily_report.activities import clean_activities
from daily_report.date_utils import normalize_for_storage
from daily_report.models import Activity, DailyReport
from daily_report.prompts import SUMMARY_HEADER

logger = logging.getLogger(__name__)

# Everything after the fixed-time summary header is the summary
SUMMARY_PATTERN = re.compile(re.escape(SUMMARY_HEADER) + r'(.+)', re.DOTALL)

PREVIEW_LENGTH = 150


class ReportNotFoundError(LookupError):
    """Raised when a report id does not exist."""

    def __init__(self, report_id: str):
        self.report_id = report_id
        super().__init__(f"Report not found: {report_id}")


# ============================================================================
# Database Functions
# ============================================================================

def get_db_connection(db_file: Optional[str] = None) -> sqlite3.Connection:
    """Create database connection and ensure table exists"""
    conn = sqlite3.connect(db_file or config.REPORTS_DB_FILE)
    c = conn.cursor()
    c.execute('''
        CREATE TABLE IF NOT EXISTS daily_reports (
            id TEXT PRIMARY KEY,
            report_date TEXT NOT NULL,
            activities TEXT NOT NULL,
            summary TEXT,
            full_report TEXT NOT NULL,
            created_at TEXT NOT NULL
        )
    ''')
    conn.commit()
    return conn


def _row_to_report(row) -> DailyReport:
    report_id, report_date, activities_json, summary, full_report, created_at = row
    return DailyReport(
        id=report_id,
        report_date=report_date,
        activities=[Activity(**item) for item in json.loads(activities_json)],
        summary=summary,
        full_report=full_report,
        created_at=created_at,
    )


def extract_summary(full_report: str) -> Optional[str]:
    """Text after the summary header, or None when there is none."""
    match = SUMMARY_PATTERN.search(full_report or "")
    if not match:
        return None
    summary = match.group(1).strip()
    return summary or None


def save_report(date: str, activities: Iterable[Union[Activity, dict]], full_report: str,
                report_id: Optional[str] = None, db_file: Optional[str] = None) -> str:
    """
    Save a new report or replace an existing one.

    Args:
        date: Report date in any recognized spelling, stored as ISO
        activities: Activities the report was generated from
        full_report: Generated report text
        report_id: Id of the report to update; a new report is created when None

    Returns:
        The report id

    Raises:
        ValueError: If a required field is missing
        InvalidDateFormat: If the date cannot be parsed
        ReportNotFoundError: If report_id does not exist
    """
    valid_activities = clean_activities(activities)
    if not (date or "").strip() or not valid_activities or not (full_report or "").strip():
        raise ValueError("Missing required fields")

    report_date = normalize_for_storage(date)
    summary = extract_summary(full_report)
    activities_json = json.dumps([activity.model_dump() for activity in valid_activities])

    conn = get_db_connection(db_file)
    try:
        c = conn.cursor()
        if report_id:
            c.execute(
                "UPDATE daily_reports SET report_date = ?, activities = ?, summary = ?, full_report = ? WHERE id = ?",
                (report_date, activities_json, summary, full_report, report_id),
            )
            if c.rowcount == 0:
                raise ReportNotFoundError(report_id)
            conn.commit()
            logger.info(f"Report updated: {report_id} ({report_date})")
            return report_id

        report_id = str(uuid.uuid4())
        created_at = datetime.now(timezone.utc).isoformat()
        c.execute(
            "INSERT INTO daily_reports (id, report_date, activities, summary, full_report, created_at) "
            "VALUES (?, ?, ?, ?, ?, ?)",
            (report_id, report_date, activities_json, summary, full_report, created_at),
        )
        conn.commit()
        logger.info(f"Report saved: {report_id} ({report_date})")
        return report_id
    finally:
        conn.close()


def get_report(report_id: str, db_file: Optional[str] = None) -> Optional[DailyReport]:
    """Load a single report by id"""
    conn = get_db_connection(db_file)
    try:
        c = conn.cursor()
        c.execute(
            "SELECT id, report_date, activities, summary, full_report, created_at FROM daily_reports WHERE id = ?",
            (report_id,),
        )
        row = c.fetchone()
    finally:
        conn.close()
    return _row_to_report(row) if row else None


def list_reports(db_file: Optional[str] = None) -> List[DailyReport]:
    """Return all reports, newest report date first"""
    conn = get_db_connection(db_file)
    try:
        c = conn.cursor()
        c.execute(
            "SELECT id, report_date, activities, summary, full_report, created_at FROM daily_reports "
            "ORDER BY report_date DESC, created_at DESC"
        )
        rows = c.fetchall()
    finally:
        conn.close()
    return [_row_to_report(row) for row in rows]


def delete_report(report_id: str, db_file: Optional[str] = None) -> bool:
    """Delete a report; False when it did not exist"""
    conn = get_db_connection(db_file)
    try:
        c = conn.cursor()
        c.execute("DELETE FROM daily_reports WHERE id = ?", (report_id,))
        conn.commit()
        deleted = c.rowcount > 0
    finally:
        conn.close()

    if deleted:
        logger.info(f"Report deleted: {report_id}")
    else:
        logger.warning(f"Delete requested for missing report: {report_id}")
    return deleted


def get_report_preview(full_report: str) -> str:
    """First few activity lines (the title is skipped) for list views"""
    lines = [line for line in (full_report or "").split('\n') if line.strip()]
    return ' | '.join(lines[1:4])[:PREVIEW_LENGTH] + '...'
