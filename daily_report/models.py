"""
Pydantic models for daily reports.

Activity is what the form collects; DailyReport is the persisted row.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from daily_report.date_utils import InvalidDateFormat, parse_to_iso


class Activity(BaseModel):
    """A single time-stamped activity, e.g. 09:30 AM / Fixed ticket X."""
    model_config = ConfigDict(frozen=True)

    time: str = Field(..., min_length=1, description='Clock time in "HH:MM AM/PM" format')
    description: str = Field(..., min_length=1, description="Free text description of the activity")


class DailyReport(BaseModel):
    """
    A saved daily report.

    Attributes:
        report_date: Canonical ISO date, never a locale-dependent spelling
        activities: Activities the report was generated from
        summary: Text after the summary header, None when the report has none
        full_report: The report text, the single source of truth for exports
    """
    id: str
    report_date: str = Field(..., description="ISO date (YYYY-MM-DD)")
    activities: List[Activity] = Field(default_factory=list)
    summary: Optional[str] = None
    full_report: str
    created_at: str = Field(..., description="ISO timestamp")

    @field_validator("report_date")
    @classmethod
    def report_date_must_be_iso(cls, value: str) -> str:
        try:
            canonical = parse_to_iso(value)
        except InvalidDateFormat as e:
            raise ValueError(str(e)) from e
        if canonical != value:
            raise ValueError(f"report_date must be canonical YYYY-MM-DD, got {value!r}")
        return value

    @field_validator("summary")
    @classmethod
    def empty_summary_is_none(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not value.strip():
            return None
        return value
