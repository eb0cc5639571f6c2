# tests/unit/test_logger.py
"""
Unit tests for logging setup.
"""

import logging

import pytest

from logger import APP_LOGGER_NAME, LOG_LEVEL_ENV_VAR, get_log_level, setup_logging


class TestGetLogLevel:
    """Tests for get_log_level."""

    @pytest.mark.parametrize(
        "value, expected",
        [("DEBUG", logging.DEBUG), ("warning", logging.WARNING), ("15", 15)],
    )
    def test_from_environment(self, monkeypatch, value, expected):
        monkeypatch.setenv(LOG_LEVEL_ENV_VAR, value)
        assert get_log_level() == expected

    def test_unset_uses_default(self, monkeypatch):
        monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)
        assert get_log_level(logging.ERROR) == logging.ERROR

    def test_unknown_uses_default(self, monkeypatch):
        monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "chatty")
        assert get_log_level() == logging.INFO


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_sets_app_level(self):
        setup_logging(logging.DEBUG)
        assert logging.getLogger(APP_LOGGER_NAME).level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_repeated_calls_do_not_stack_handlers(self):
        setup_logging(logging.INFO)
        count = len(logging.getLogger().handlers)
        setup_logging(logging.INFO)
        assert len(logging.getLogger().handlers) == count
