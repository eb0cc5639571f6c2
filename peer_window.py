# peer_window.py
"""
Peer window generator.

Builds the "My Lobby" leaderboard: up to PEER_WINDOW_SIZE synthetic
candidates around the user's rank, with stats derived from each rank's
percentile. Peer efficiency gets a small random jitter so the lobby does
not look frozen between refreshes; pass a seeded random.Random to make it
reproducible.
"""

import logging
import math
import random
from typing import Protocol

from app_types import LeaderboardEntry, Rank
from constants import (
    ELITE_LIST_SIZE,
    PEER_EFFICIENCY_BANDS,
    PEER_EFFICIENCY_JITTER,
    PEER_MIN_EFFICIENCY,
    PEER_SESSIONS_EXPONENT,
    PEER_SESSIONS_FLOOR,
    PEER_SESSIONS_SCALE,
    PEER_WINDOW_LEAD,
    PEER_WINDOW_SIZE,
    POPULATION_SIZE,
)
from population import make_user_entry
from scoring import compute_score
from utils import normalize_day_of_month

logger = logging.getLogger("app.peer_window")


class RandomSource(Protocol):
    """Anything with a random() -> float in [0, 1), e.g. random.Random."""

    def random(self) -> float: ...


def base_peer_efficiency(percentile: float) -> int:
    """Base efficiency for a rank percentile, before jitter."""
    for lower_bound, efficiency in PEER_EFFICIENCY_BANDS:
        if percentile > lower_bound:
            return efficiency
    return PEER_MIN_EFFICIENCY


def synthesize_peer(
    rank: Rank, current_day_of_month: int, rng: RandomSource
) -> LeaderboardEntry:
    """
    Builds the synthetic candidate sitting at a given rank.

    Args:
        rank: Global rank of the candidate
        current_day_of_month: Day of month (already normalised)
        rng: Source for the efficiency jitter

    Returns:
        The candidate's entry
    """
    percentile = 1 - rank / POPULATION_SIZE
    sessions_per_day = (percentile**PEER_SESSIONS_EXPONENT) * PEER_SESSIONS_SCALE + PEER_SESSIONS_FLOOR
    sessions = math.floor(sessions_per_day * current_day_of_month)
    efficiency = base_peer_efficiency(percentile) + rng.random() * PEER_EFFICIENCY_JITTER

    return LeaderboardEntry(
        id=f"peer-{rank}",
        name=f"Candidate_{str(rank)[-4:]}",
        sessions=sessions,
        efficiency=efficiency,
        score=compute_score(sessions, efficiency),
        rank=rank,
    )


def generate_peer_window(
    user_rank: Rank,
    user_sessions: int,
    user_efficiency: float,
    current_day_of_month: int,
    rng: RandomSource | None = None,
) -> list[LeaderboardEntry]:
    """
    Generates the leaderboard slice around the user.

    The window starts PEER_WINDOW_LEAD ranks above the user (never inside
    the elite list) and runs for PEER_WINDOW_SIZE ranks or until the end of
    the population. Users inside the elite list have no window.

    Args:
        user_rank: The user's global rank
        user_sessions: The user's total sessions
        user_efficiency: The user's average efficiency
        current_day_of_month: Day of month (values below 1 are treated as 1)
        rng: Jitter source; a fresh random.Random() when None

    Returns:
        Entries in ascending rank order, exactly one of them the user's
    """
    if user_rank <= ELITE_LIST_SIZE:
        logger.debug(f"Rank {user_rank} is in the elite list, no peer window")
        return []

    if rng is None:
        rng = random.Random()

    day = normalize_day_of_month(current_day_of_month)
    user_score = compute_score(user_sessions, user_efficiency)
    start_rank = max(ELITE_LIST_SIZE + 1, user_rank - PEER_WINDOW_LEAD)

    peers: list[LeaderboardEntry] = []
    for offset in range(PEER_WINDOW_SIZE):
        current_rank = start_rank + offset
        if current_rank > POPULATION_SIZE:
            break

        if current_rank == user_rank:
            peers.append(make_user_entry(user_sessions, user_efficiency, user_score, user_rank))
        else:
            peers.append(synthesize_peer(current_rank, day, rng))

    return peers
