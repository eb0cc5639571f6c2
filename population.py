# population.py
"""
Synthetic population generator.

The top of the population is a fixed, closed-form list of elite candidates.
Entry i (rank i + 1) studies slightly less and slightly less efficiently
than entry i - 1, and everyone's session total scales with how far into the
month we are. Nothing here is random, so the same day always produces the
same list.
"""

import logging
import math

from app_types import EliteListResult, LeaderboardEntry
from constants import (
    BOT_NAMES,
    ELITE_BASE_EFFICIENCY,
    ELITE_BASE_SESSIONS_PER_DAY,
    ELITE_EFFICIENCY_DECAY,
    ELITE_LIST_SIZE,
    ELITE_SESSIONS_DECAY,
    USER_DISPLAY_NAME,
    USER_ENTRY_ID,
)
from scoring import compute_score
from utils import normalize_day_of_month

logger = logging.getLogger("app.population")


def make_user_entry(
    sessions: int, efficiency: float, score: float, rank: int
) -> LeaderboardEntry:
    """Builds the caller's own leaderboard row."""
    return LeaderboardEntry(
        id=USER_ENTRY_ID,
        name=USER_DISPLAY_NAME,
        sessions=sessions,
        efficiency=efficiency,
        score=score,
        rank=rank,
        is_user=True,
    )


def elite_candidate(index: int, current_day_of_month: int) -> LeaderboardEntry:
    """
    Builds the synthetic elite candidate at a 0-based index.

    Args:
        index: Position in the elite list (0 is rank 1)
        current_day_of_month: Day of month the totals are accumulated to

    Returns:
        The candidate's entry, ranked index + 1
    """
    sessions_per_day = ELITE_BASE_SESSIONS_PER_DAY - ELITE_SESSIONS_DECAY * index
    total_sessions = math.floor(sessions_per_day * current_day_of_month)
    efficiency = ELITE_BASE_EFFICIENCY - ELITE_EFFICIENCY_DECAY * index

    return LeaderboardEntry(
        id=f"gm-{index}",
        name=f"{BOT_NAMES[index % len(BOT_NAMES)]}_{index + 1}",
        sessions=total_sessions,
        efficiency=efficiency,
        score=compute_score(total_sessions, efficiency),
        rank=index + 1,
    )


def generate_elite_list(
    current_day_of_month: int,
    user_score: float,
    user_sessions: int,
    user_efficiency: float,
) -> EliteListResult:
    """
    Generates the top-100 list and inserts the user if they beat anyone on it.

    The user takes the position of the first candidate whose score they
    strictly exceed; the last candidate drops off so the list keeps its
    length, and ranks are renumbered by position.

    Args:
        current_day_of_month: Day of month (values below 1 are treated as 1)
        user_score: The user's score
        user_sessions: The user's total sessions
        user_efficiency: The user's average efficiency

    Returns:
        EliteListResult with exactly ELITE_LIST_SIZE entries and the user's
        rank, or None if the user did not make the list.
    """
    day = normalize_day_of_month(current_day_of_month)
    entries = [elite_candidate(i, day) for i in range(ELITE_LIST_SIZE)]

    insert_at = next(
        (pos for pos, entry in enumerate(entries) if user_score > entry.score),
        None,
    )
    if insert_at is None:
        return EliteListResult(entries=entries, user_rank=None)

    entries.insert(
        insert_at,
        make_user_entry(user_sessions, user_efficiency, user_score, insert_at + 1),
    )
    entries.pop()
    for pos, entry in enumerate(entries):
        entry.rank = pos + 1

    logger.debug(f"User entered the elite list at rank {insert_at + 1}")
    return EliteListResult(entries=entries, user_rank=insert_at + 1)
