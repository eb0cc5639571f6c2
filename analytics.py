# analytics.py
"""
Monthly analytics over the daily study log.

summarize_month() produces the UserSummary the leaderboard ranks. The other
helpers feed the tracker page's charts.
"""

import calendar
import logging
from datetime import date

import pandas as pd
from pandas.io.formats.style import Styler

from app_types import CalendarStats, MissionData, StudySession, UserSummary
from constants import (
    DAILY_TARGET,
    DAY_FILL_COLORS,
    FIXED_SESSIONS,
    HIGH_QUALITY_EFFICIENCY,
    LOW_DAY_FILL,
    MAX_SESSION_RATING,
    MONTHLY_TARGET_SESSIONS,
    SESSION_BUCKETS,
    TOP_SESSION_BUCKET,
    WEEKDAYS,
)
from exceptions import ValidationError
from utils import date_key, parse_date_key

logger = logging.getLogger("app.analytics")

DAILY_FRAME_COLUMNS = ["date", "day", "sessions", "efficiency"]


def compute_day_efficiency(sessions: list[StudySession]) -> int:
    """Mean rating of the rated sessions as a rounded percentage (0 if none are rated)."""
    ratings = [s.rating for s in sessions if s.rating is not None]
    if not ratings:
        return 0
    avg = sum(ratings) / len(ratings)
    return round(avg / MAX_SESSION_RATING * 100)


def _entries_for_month(records: MissionData, year: int, month: int):
    for key, day in records.items():
        try:
            d = parse_date_key(key)
        except ValidationError:
            logger.warning(f"Skipping log entry with invalid date key {key!r}")
            continue
        if d.year == year and d.month == month:
            yield d, day


def summarize_month(records: MissionData, year: int, month: int) -> UserSummary:
    """
    Computes the leaderboard input for one calendar month.

    Args:
        records: The full daily log
        year: Calendar year
        month: Calendar month (1-12)

    Returns:
        UserSummary where total_sessions counts rated sessions and
        avg_efficiency averages only days with efficiency above zero.
    """
    total_sessions = 0
    total_efficiency = 0
    days_with_efficiency = 0

    for _, day in _entries_for_month(records, year, month):
        total_sessions += day.rated_sessions
        if day.efficiency > 0:
            total_efficiency += day.efficiency
            days_with_efficiency += 1

    avg_efficiency = total_efficiency / days_with_efficiency if days_with_efficiency else 0.0
    logger.debug(f"{year}-{month}: {total_sessions} sessions, {avg_efficiency:.1f}% avg efficiency")
    return UserSummary(total_sessions=total_sessions, avg_efficiency=avg_efficiency)


def build_daily_frame(records: MissionData, year: int, month: int, today: date) -> pd.DataFrame:
    """
    Builds one row per logged day of the month, for charts.

    Placeholder days (created by just opening a date) and future days are
    left out so they do not skew the distributions.
    """
    rows = []
    for d, day in _entries_for_month(records, year, month):
        if d > today or not day.has_activity:
            continue
        rows.append(
            {
                "date": date_key(d),
                "day": d.day,
                "sessions": day.rated_sessions,
                "efficiency": day.efficiency,
            }
        )

    frame = pd.DataFrame(rows, columns=DAILY_FRAME_COLUMNS)
    return frame.sort_values("day").reset_index(drop=True)


def monthly_progress_percent(total_sessions: int) -> int:
    """Progress toward MONTHLY_TARGET_SESSIONS, capped at 100."""
    return min(100, round(total_sessions / MONTHLY_TARGET_SESSIONS * 100))


def session_bucket(sessions: int) -> str:
    for upper, label in SESSION_BUCKETS:
        if sessions < upper:
            return label
    return TOP_SESSION_BUCKET


def session_distribution(frame: pd.DataFrame) -> pd.DataFrame:
    """Counts logged days per sessions-per-day bucket, all buckets included."""
    labels = [label for _, label in SESSION_BUCKETS] + [TOP_SESSION_BUCKET]
    counts = dict.fromkeys(labels, 0)
    for sessions in frame["sessions"]:
        counts[session_bucket(int(sessions))] += 1
    return pd.DataFrame({"bucket": list(counts), "days": list(counts.values())})


def performance_profile(frame: pd.DataFrame, today: date) -> dict[str, float]:
    """
    Percentages describing the month so far.

    Args:
        frame: Output of build_daily_frame
        today: The caller's current date

    Returns:
        Dict of metric name to a percentage. Consistency is capped at 100;
        Volume is not, so it can show over-delivery.
    """
    logged_days = len(frame)
    denominator = logged_days or 1
    total_sessions = int(frame["sessions"].sum()) if logged_days else 0
    avg_efficiency = float(frame["efficiency"].mean()) if logged_days else 0.0

    return {
        "Consistency": min(100.0, logged_days / (today.day or 1) * 100),
        "Volume": total_sessions / MONTHLY_TARGET_SESSIONS * 100,
        "Efficiency": avg_efficiency,
        "Mandatory Met": int((frame["sessions"] >= FIXED_SESSIONS).sum()) / denominator * 100,
        "Targets Met": int((frame["sessions"] >= DAILY_TARGET).sum()) / denominator * 100,
        "Quality": int((frame["efficiency"] >= HIGH_QUALITY_EFFICIENCY).sum()) / denominator * 100,
    }


def calendar_stats(records: MissionData, year: int, month: int) -> CalendarStats:
    """
    Totals for the calendar header.

    Unlike summarize_month, the efficiency average here is over logged
    days and is rounded to a whole percent.
    """
    total_sessions = 0
    total_efficiency = 0
    days_logged = 0

    for _, day in _entries_for_month(records, year, month):
        if day.rated_sessions > 0 or day.efficiency > 0:
            total_sessions += day.rated_sessions
            total_efficiency += day.efficiency
            days_logged += 1

    if not days_logged:
        return CalendarStats()
    return CalendarStats(
        days_logged=days_logged,
        total_sessions=total_sessions,
        avg_efficiency=round(total_efficiency / days_logged),
        avg_sessions_per_day=round(total_sessions / days_logged, 1),
    )


def day_fill_color(rated_sessions: int) -> str | None:
    """Calendar fill for a day with this many rated sessions, None when empty."""
    if rated_sessions <= 0:
        return None
    for minimum, color in DAY_FILL_COLORS:
        if rated_sessions >= minimum:
            return color
    return LOW_DAY_FILL


def build_calendar_frame(year: int, month: int) -> pd.DataFrame:
    """One row per week, Sunday first; cells hold the day number or "" outside the month."""
    weeks = calendar.Calendar(firstweekday=6).monthdayscalendar(year, month)
    rows = [[str(d) if d else "" for d in week] for week in weeks]
    return pd.DataFrame(rows, columns=WEEKDAYS)


def calendar_cell_styles(records: MissionData, frame: pd.DataFrame, year: int, month: int) -> pd.DataFrame:
    """CSS for each cell of build_calendar_frame, coloured by sessions logged that day."""
    styles = pd.DataFrame("", index=frame.index, columns=frame.columns)
    for row in frame.index:
        for col in frame.columns:
            label = frame.at[row, col]
            if not label:
                continue
            day = records.get(date_key(date(year, month, int(label))))
            color = day_fill_color(day.rated_sessions) if day else None
            if color:
                styles.at[row, col] = f"background-color: {color}; color: white"
    return styles


def style_calendar(records: MissionData, year: int, month: int) -> Styler:
    frame = build_calendar_frame(year, month)
    return frame.style.apply(
        lambda f: calendar_cell_styles(records, f, year, month), axis=None
    )
