import random
from datetime import date

import pytest

from app_types import DayRecord, StudySession, UserSummary


@pytest.fixture
def seeded_rng():
    """Returns a random source with a fixed seed for peer jitter."""
    return random.Random(1234)


@pytest.fixture
def mid_month_summary():
    """120 sessions at 85% by day 15: too weak for the elite list."""
    return UserSummary(total_sessions=120, avg_efficiency=85.0)


@pytest.fixture
def elite_summary():
    """A summary strong enough to enter the top 100 on day 15."""
    return UserSummary(total_sessions=300, avg_efficiency=99.0)


@pytest.fixture
def today():
    return date(2024, 3, 15)


@pytest.fixture
def sample_records():
    """Returns a small March 2024 log plus one February day."""
    return {
        "2024-3-1": DayRecord(
            sessions=[StudySession("Physics", 8), StudySession("Math", 6)]
            + [StudySession() for _ in range(6)],
            efficiency=70,
            submitted=True,
        ),
        "2024-3-2": DayRecord(
            sessions=[StudySession(f"S{i}", 9) for i in range(12)],
            efficiency=90,
            submitted=True,
        ),
        # Placeholder created by opening the day, never filled in
        "2024-3-3": DayRecord(sessions=[StudySession() for _ in range(8)]),
        "2024-2-28": DayRecord(
            sessions=[StudySession("Chem", 10)],
            efficiency=100,
            submitted=True,
        ),
    }


@pytest.fixture
def data_file(tmp_path):
    """Returns a path for a daily log file inside a temp dir."""
    return str(tmp_path / "mission_data.json")
