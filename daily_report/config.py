"""
Application configuration
Values are read from the environment (and an optional .env file)
"""

import os
import logging
from dotenv import load_dotenv

load_dotenv()

# Database configuration
REPORTS_DB_FILE = os.getenv("REPORTS_DB_FILE", "daily_reports.db")

# Name used in exported filenames: "Daily Report <Name> dd_mm_yy.docx"
REPORT_AUTHOR_NAME = os.getenv("REPORT_AUTHOR_NAME", "Rafief")

# LLM used to compose the report text
OPENAI_MODEL = os.getenv("OPENAI_MODEL", "gpt-4o-mini")
OPENAI_TEMPERATURE = float(os.getenv("OPENAI_TEMPERATURE", "0.1"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Configure logging
logging.basicConfig(
    level=getattr(logging, LOG_LEVEL, logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
