"""
Service layer for the leaderboard.

This module sits between the UI (pages) and the ranking engine modules,
turning one UserSummary into everything the leaderboard page shows, and
converting entries into DataFrames for display.
"""

import logging

import pandas as pd
from pandas.io.formats.style import Styler

from app_types import LeaderboardEntry, LeaderboardView, UserSummary
from constants import USER_ROW_STYLE
from logger import log_rank_debug
from peer_window import RandomSource, generate_peer_window
from population import generate_elite_list
from rank_locator import rank_from_elite
from scoring import compute_score
from tiers import RANK_TIERS, resolve_badge
from utils import normalize_day_of_month

logger = logging.getLogger("app.ranking_service")


def build_leaderboard(
    summary: UserSummary,
    current_day_of_month: int,
    rng: RandomSource | None = None,
) -> LeaderboardView:
    """
    Computes the user's rank, badge, elite list and peer window.

    Nothing is cached: every call regenerates the population for the given
    day, and the peer jitter is re-rolled unless a seeded rng is supplied.

    Args:
        summary: The user's totals for the period
        current_day_of_month: Day of month from the caller's clock
        rng: Optional jitter source for the peer window

    Returns:
        The complete LeaderboardView
    """
    day = normalize_day_of_month(current_day_of_month)
    sessions = summary.total_sessions
    efficiency = summary.avg_efficiency
    score = compute_score(sessions, efficiency)

    elite = generate_elite_list(day, score, sessions, efficiency)
    global_rank = rank_from_elite(elite, sessions, efficiency, day)

    peers: list[LeaderboardEntry] = []
    if not elite.contains_user:
        peers = generate_peer_window(global_rank, sessions, efficiency, day, rng=rng)

    view = LeaderboardView(
        summary=summary,
        day_of_month=day,
        score=score,
        global_rank=global_rank,
        badge=resolve_badge(global_rank),
        elite=elite,
        peers=peers,
    )
    log_rank_debug(logger, view)
    return view


def entries_to_dataframe(entries: list[LeaderboardEntry]) -> pd.DataFrame:
    """Creates a display DataFrame from leaderboard entries.

    Efficiency and points are rounded here, not in the engine.
    """
    return pd.DataFrame(
        {
            "Rank": [e.rank for e in entries],
            "Name": [e.name for e in entries],
            "Tier": [resolve_badge(e.rank).display_label for e in entries],
            "Sessions": [e.sessions for e in entries],
            "Efficiency": [round(e.efficiency) for e in entries],
            "Points": [round(e.score) for e in entries],
            "is_user": [e.is_user for e in entries],
        },
        columns=["Rank", "Name", "Tier", "Sessions", "Efficiency", "Points", "is_user"],
    )


def user_row_style(row: pd.Series) -> list[str]:
    """Per-cell CSS for one row: USER_ROW_STYLE on the user's row, nothing elsewhere."""
    style = USER_ROW_STYLE if row["is_user"] else ""
    return [style] * len(row)


def style_leaderboard(df: pd.DataFrame) -> Styler:
    """Highlights the user's row in a frame from entries_to_dataframe."""
    return df.style.apply(user_row_style, axis=1)


def tiers_dataframe() -> pd.DataFrame:
    """Creates the tier overview table."""
    return pd.DataFrame(
        {
            "Tier": [t.label for t in RANK_TIERS],
            "Study Hours": [t.session_threshold for t in RANK_TIERS],
            "Share": [t.percentile for t in RANK_TIERS],
            "Best Rank": [t.min_rank for t in RANK_TIERS],
            "Worst Rank": [t.max_rank for t in RANK_TIERS],
            "Divisions": [t.division for t in RANK_TIERS],
        }
    )
