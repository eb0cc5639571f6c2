# exceptions.py
"""
Custom exceptions for the Mission Tracker.

This module defines domain-specific exceptions for better error handling
and debugging throughout the application. The ranking engine itself never
raises in normal operation; these cover the daily log and its inputs.
"""


class MissionTrackerError(Exception):
    """Base exception for all application errors."""

    pass


class StorageError(MissionTrackerError):
    """Raised when the daily log file cannot be read or written."""

    pass


class ValidationError(MissionTrackerError):
    """Raised when input validation fails."""

    pass
