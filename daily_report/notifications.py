"""
E-mail delivery (demo mode)
Composes the report e-mail and logs it instead of sending.
"""

import re
import logging
from typing import Dict, Optional

from daily_report.date_utils import format_for_display
from daily_report.models import DailyReport

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r'^[^\s@]+@[^\s@]+\.[^\s@]+$')


def build_report_email(report: DailyReport, email: str, message: Optional[str] = None) -> Dict[str, str]:
    """Subject and plain-text body for a report e-mail."""
    body = report.full_report
    if message and message.strip():
        body = f"{message.strip()}\n\n---\n\n{report.full_report}"
    return {
        "to": email,
        "subject": f"Daily Report - {format_for_display(report.report_date)}",
        "body": body,
    }


def send_report_email(report: DailyReport, email: str, message: Optional[str] = None) -> Dict[str, str]:
    """
    Send a report by e-mail.

    Only logs the composed e-mail; wiring a mail provider is left to the
    deployment.

    Raises:
        ValueError: If the address is missing or malformed
    """
    email = (email or "").strip()
    if not email:
        raise ValueError("Missing required fields")
    if not EMAIL_PATTERN.match(email):
        raise ValueError("Invalid email address")

    composed = build_report_email(report, email, message)
    logger.info(
        f"[Email Demo] To: {composed['to']} | Subject: {composed['subject']}\n{composed['body']}"
    )
    return composed
