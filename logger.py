# logger.py
"""
Logging configuration for the Mission Tracker.

This module provides centralized logging setup. The setup_logging() function
should be called once at application startup (e.g., in 1_Tracker.py).

All app modules should use the "app" namespace:
    import logging
    logger = logging.getLogger("app.module_name")

This keeps third-party library logs quiet while allowing granular control
over the app's own logging level via the LOG_LEVEL environment variable.
"""

import logging
import os
import sys

from app_types import LeaderboardView

# App namespace prefix - all app loggers should use this
APP_LOGGER_NAME = "app"
LOG_LEVEL_ENV_VAR = "LOG_LEVEL"


def get_log_level(default: int = logging.INFO) -> int:
    """
    Read the app log level from the LOG_LEVEL environment variable.

    Accepts level names ("DEBUG", "info") or numeric values. Unknown values
    fall back to the default.

    Args:
        default: Level to use when LOG_LEVEL is unset or invalid

    Returns:
        A logging level integer
    """
    raw = os.environ.get(LOG_LEVEL_ENV_VAR, "").strip()
    if not raw:
        return default
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw.upper())
    return level if isinstance(level, int) else default


def setup_logging(app_level: int | None = None) -> None:
    """
    Configure logging for the application.

    - Root logger is set to WARNING (keeps third-party libraries quiet)
    - App namespace logger ("app.*") is set to the specified level

    This should be called ONCE at application startup (entry point).
    Streamlit re-runs the page script on every interaction, so repeated
    calls must not stack handlers.

    Args:
        app_level: The logging level for app modules (default: from LOG_LEVEL, else INFO)
    """
    if app_level is None:
        app_level = get_log_level()

    # Configure root logger to WARNING - silences third-party library noise
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.WARNING)

    # Avoid adding duplicate handlers if setup is called multiple times
    if not root_logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(logging.DEBUG)  # Handler accepts all; loggers filter

        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%H:%M:%S",
        )
        handler.setFormatter(formatter)

        root_logger.addHandler(handler)

    # Configure the app namespace logger
    app_logger = logging.getLogger(APP_LOGGER_NAME)
    app_logger.setLevel(app_level)


def log_rank_debug(logger: logging.Logger, view: LeaderboardView) -> None:
    """
    Log a computed leaderboard in a consistent format.

    Args:
        logger: Logger instance to use
        view: The computed leaderboard
    """
    logger.debug(
        "Summary: sessions=%s efficiency=%.2f day=%s",
        view.summary.total_sessions,
        view.summary.avg_efficiency,
        view.day_of_month,
    )
    logger.debug("Score: %.2f", view.score)
    logger.debug("Global Rank: %s (%s)", view.global_rank, view.badge.display_label)
    logger.debug("In Elite List: %s", view.elite.contains_user)
    if view.peers:
        logger.debug(
            "Peer Window: #%s - #%s (%s entries)",
            view.peers[0].rank,
            view.peers[-1].rank,
            len(view.peers),
        )
