# storage.py
"""
Daily study log persistence.

The log is a single JSON object keyed by date key ("Y-M-D"), one DayRecord
per key. All I/O failures are translated to StorageError for consistent
error handling in the pages.
"""

import json
import logging
import os
from dataclasses import asdict, replace
from datetime import datetime

from analytics import compute_day_efficiency
from app_types import DateKey, DayRecord, MissionData, StudySession
from constants import FIXED_SESSIONS, MAX_SESSION_RATING
from exceptions import StorageError, ValidationError
from utils import get_data_file_path, parse_date_key

logger = logging.getLogger("app.storage")


def default_day() -> DayRecord:
    """A fresh, unsubmitted day with FIXED_SESSIONS empty sessions."""
    return DayRecord(sessions=[StudySession() for _ in range(FIXED_SESSIONS)])


def day_from_dict(data: dict) -> DayRecord:
    """Builds a DayRecord from its stored JSON form."""
    return DayRecord(
        sessions=[
            StudySession(subject=s.get("subject", ""), rating=s.get("rating"))
            for s in data.get("sessions", [])
        ],
        efficiency=int(data.get("efficiency", 0)),
        submitted=bool(data.get("submitted", False)),
        submitted_at=data.get("submittedAt"),
        historical=bool(data.get("historical", False)),
    )


def day_to_dict(day: DayRecord) -> dict:
    """Converts a DayRecord to its stored JSON form."""
    data = {
        "sessions": [asdict(s) for s in day.sessions],
        "efficiency": day.efficiency,
        "submitted": day.submitted,
    }
    if day.submitted_at is not None:
        data["submittedAt"] = day.submitted_at
    if day.historical:
        data["historical"] = True
    return data


def validate_day(day: DayRecord) -> None:
    """
    Checks that every rating is on the 0-10 scale.

    Raises:
        ValidationError: If a rating is out of range.
    """
    for session in day.sessions:
        if session.rating is not None and not 0 <= session.rating <= MAX_SESSION_RATING:
            raise ValidationError(
                f"Session rating {session.rating} is outside 0-{MAX_SESSION_RATING}"
            )


class MissionStore:
    """Handles loading and saving the daily log file."""

    def __init__(self, path: str | None = None):
        self.path = path or get_data_file_path()

    def load(self) -> MissionData:
        """
        Loads the full log. A missing file is an empty log.

        Returns:
            Dict mapping date keys to DayRecord objects.

        Raises:
            StorageError: If the file cannot be read or parsed.
        """
        if not os.path.exists(self.path):
            return {}

        try:
            with open(self.path, encoding="utf-8") as f:
                raw = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.exception(f"Failed to read daily log '{self.path}'")
            raise StorageError(f"Failed to load daily log from '{self.path}'") from e

        if not isinstance(raw, dict):
            logger.error(f"Daily log '{self.path}' is not a JSON object")
            raise StorageError(f"Daily log '{self.path}' is malformed")

        try:
            return {key: day_from_dict(value) for key, value in raw.items()}
        except (AttributeError, TypeError, ValueError) as e:
            logger.exception(f"Daily log '{self.path}' has a malformed day record")
            raise StorageError(f"Daily log '{self.path}' has a malformed day record") from e

    def save(self, records: MissionData) -> None:
        """
        Writes the full log, replacing the file atomically.

        Raises:
            StorageError: If the file cannot be written.
        """
        payload = {key: day_to_dict(day) for key, day in records.items()}
        tmp_path = f"{self.path}.tmp"
        try:
            directory = os.path.dirname(self.path)
            if directory:
                os.makedirs(directory, exist_ok=True)
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(payload, f, indent=2)
            os.replace(tmp_path, self.path)
        except OSError as e:
            logger.exception(f"Failed to write daily log '{self.path}'")
            raise StorageError(f"Failed to save daily log to '{self.path}'") from e

        logger.info(f"Saved {len(records)} day(s) to '{self.path}'")

    @staticmethod
    def get_day(records: MissionData, key: DateKey) -> DayRecord:
        """Returns the stored day, or a default day if nothing is logged yet."""
        parse_date_key(key)
        return records.get(key) or default_day()

    @staticmethod
    def record_day(records: MissionData, key: DateKey, day: DayRecord) -> MissionData:
        """
        Returns a copy of the log with one day replaced.

        Recomputes the day's efficiency from its ratings and marks it as
        submitted now.

        Raises:
            ValidationError: If the key or a rating is invalid.
        """
        parse_date_key(key)
        validate_day(day)
        recorded = replace(
            day,
            efficiency=compute_day_efficiency(day.sessions),
            submitted=True,
            submitted_at=datetime.now().isoformat(),
        )
        updated = dict(records)
        updated[key] = recorded
        return updated
