# tests/unit/test_utils.py
"""
Unit tests for clock and date-key helpers.
"""

from datetime import date

import pytest

from exceptions import ValidationError
from utils import date_key, get_local_today, normalize_day_of_month, parse_date_key


class TestDateKeys:
    """Tests for date_key and parse_date_key."""

    def test_key_is_unpadded(self):
        assert date_key(date(2024, 3, 7)) == "2024-3-7"
        assert date_key(date(2024, 12, 31)) == "2024-12-31"

    def test_parse(self):
        assert parse_date_key("2024-3-7") == date(2024, 3, 7)

    def test_parse_accepts_padded(self):
        assert parse_date_key("2024-03-07") == date(2024, 3, 7)

    @pytest.mark.parametrize("key", ["", "2024-3", "2024-13-1", "2024-2-30", "a-b-c", None])
    def test_parse_invalid(self, key):
        with pytest.raises(ValidationError):
            parse_date_key(key)


class TestNormalizeDayOfMonth:
    """Tests for normalize_day_of_month."""

    @pytest.mark.parametrize("day, expected", [(-3, 1), (0, 1), (1, 1), (15, 15), (31, 31)])
    def test_clamp(self, day, expected):
        assert normalize_day_of_month(day) == expected


class TestGetLocalToday:
    """Tests for get_local_today."""

    def test_returns_date(self):
        today = get_local_today()
        assert isinstance(today, date)
        assert 1 <= today.day <= 31

    def test_other_timezone(self):
        assert isinstance(get_local_today("UTC"), date)
