"""
Report composition
Sends the date and activities to the chat model and returns the report text.
"""

import logging
from typing import Iterable, Optional, Union

from langchain_core.messages import HumanMessage, SystemMessage
from langchain_openai import ChatOpenAI

from daily_report import config
from daily_report.activities import clean_activities
from daily_report.date_utils import format_from_iso, normalize_for_storage
from daily_report.models import Activity
from daily_report.prompts import SYSTEM_PROMPT, build_user_prompt

logger = logging.getLogger(__name__)

_llm = None


def get_llm() -> ChatOpenAI:
    """Chat model shared by the app, created on first use."""
    global _llm
    if _llm is None:
        _llm = ChatOpenAI(model=config.OPENAI_MODEL, temperature=config.OPENAI_TEMPERATURE)
    return _llm


def compose_report(date: str, activities: Iterable[Union[Activity, dict]], llm: Optional[ChatOpenAI] = None) -> str:
    """
    Generate the full report text for a day.

    Args:
        date: Report date in any recognized spelling
        activities: Activity rows; blank rows are ignored
        llm: Chat model to use, defaults to the configured ChatOpenAI

    Returns:
        Report text in the "Daily Report – <date>" line format

    Raises:
        InvalidDateFormat: If the date cannot be parsed
        ValueError: If no complete activity was given
    """
    iso_date = normalize_for_storage(date)
    valid_activities = clean_activities(activities)
    if not valid_activities:
        raise ValueError("Please add at least one activity with time and description")

    display_date = format_from_iso(iso_date)
    messages = [
        SystemMessage(content=SYSTEM_PROMPT),
        HumanMessage(content=build_user_prompt(display_date, valid_activities)),
    ]

    model = llm or get_llm()
    logger.info(f"Composing report for {display_date} from {len(valid_activities)} activities")
    try:
        response = model.invoke(messages)
    except Exception as e:
        logger.error(f"Report generation failed: {e}")
        raise

    return (response.content or "").strip()
