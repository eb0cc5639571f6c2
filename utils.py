# utils.py
"""
Clock, date-key and configuration helpers.

get_local_today() is the single source of "now" for the app. Every page
reads it once per run and passes the day of month down explicitly, so the
rank and the peer window of one render always agree.
"""

import logging
import os
from datetime import date, datetime
from zoneinfo import ZoneInfo

from app_types import DateKey
from constants import DATA_FILE_ENV_VAR, DEFAULT_DATA_FILE, TIMEZONE
from exceptions import ValidationError

logger = logging.getLogger("app.utils")


def get_local_today(tz_name: str = TIMEZONE) -> date:
    """Returns today's date in the configured timezone."""
    return datetime.now(ZoneInfo(tz_name)).date()


def normalize_day_of_month(day_of_month: int) -> int:
    """Clamp a day of month to at least 1 so per-day averages stay defined."""
    if day_of_month < 1:
        logger.warning(f"Day of month {day_of_month} is below 1, using 1")
        return 1
    return int(day_of_month)


def date_key(d: date) -> DateKey:
    """Formats a date as an unpadded 'Y-M-D' key, e.g. '2024-3-7'."""
    return f"{d.year}-{d.month}-{d.day}"


def parse_date_key(key: DateKey) -> date:
    """
    Parses a 'Y-M-D' key back into a date.

    Raises:
        ValidationError: If the key is not a valid date.
    """
    try:
        year, month, day = (int(part) for part in key.split("-"))
        return date(year, month, day)
    except (ValueError, AttributeError) as e:
        raise ValidationError(f"Invalid date key '{key}'") from e


def get_data_file_path() -> str:
    """Path of the daily log file; MISSION_TRACKER_DATA_FILE overrides the default."""
    return os.environ.get(DATA_FILE_ENV_VAR) or DEFAULT_DATA_FILE
