# rank_locator.py
"""
Global rank placement.

A user is placed in one of three ways, checked in order:

1. Elite: they beat someone on the generated top-100 list, so their rank is
   their position on it.
2. Inactive: no sessions and no efficiency puts them dead last.
3. Interpolated: their average sessions per day picks a tier band, and their
   score relative to an assumed peak picks a rank inside that band.

The interpolation cut points are a separate table from RANK_TIERS and are
coarser than it: the top two cut points both select MASTER, and
GRANDMASTER is only reachable through the elite list. The two paths do not
meet seamlessly; a user who misses the elite list with a very high daily
average lands somewhere inside MASTER, not at rank 101.
"""

import logging
import math

from app_types import EliteListResult, Rank, RankTier, TierDefinition
from constants import (
    MAX_TIER_PROGRESS,
    POPULATION_SIZE,
    REFERENCE_PEAK_EFFICIENCY,
    REFERENCE_PEAK_SESSIONS_PER_DAY,
)
from population import generate_elite_list
from scoring import compute_score
from tiers import get_tier
from utils import normalize_day_of_month

logger = logging.getLogger("app.rank_locator")

# (minimum average sessions/day, tier), checked top-down
INTERPOLATION_CUTPOINTS: list[tuple[float, RankTier]] = [
    (14.4, RankTier.MASTER),
    (9.6, RankTier.MASTER),
    (7.2, RankTier.HEROIC),
    (4.8, RankTier.DIAMOND),
    (3.6, RankTier.PLATINUM),
    (2.4, RankTier.GOLD),
    (1.2, RankTier.SILVER),
]
FALLBACK_INTERPOLATION_TIER = RankTier.BRONZE


def select_interpolation_tier(avg_sessions_per_day: float) -> TierDefinition:
    """Picks the tier band to interpolate within from average sessions/day."""
    for threshold, tier in INTERPOLATION_CUTPOINTS:
        if avg_sessions_per_day >= threshold:
            return get_tier(tier)
    return get_tier(FALLBACK_INTERPOLATION_TIER)


def reference_peak_score(current_day_of_month: int) -> float:
    """Score of the assumed peak performer by this day of the month."""
    return compute_score(
        REFERENCE_PEAK_SESSIONS_PER_DAY * current_day_of_month,
        REFERENCE_PEAK_EFFICIENCY,
    )


def interpolate_rank(score: float, tier: TierDefinition, current_day_of_month: int) -> Rank:
    """
    Places a score inside a tier band.

    Progress saturates at MAX_TIER_PROGRESS, so the result never reaches
    the tier's min_rank and never leaves [min_rank, max_rank].

    Args:
        score: The user's score
        tier: The band to place the user in
        current_day_of_month: Day of month (already normalised)

    Returns:
        A rank inside the tier band
    """
    rank_range = tier.max_rank - tier.min_rank
    progress = min(MAX_TIER_PROGRESS, score / reference_peak_score(current_day_of_month))
    return tier.min_rank + math.floor(rank_range * (1 - progress))


def rank_from_elite(
    elite: EliteListResult, user_sessions: int, user_efficiency: float, current_day_of_month: int
) -> Rank:
    """
    Places the user given an elite list already generated for their score.

    Args:
        elite: Output of generate_elite_list for the same user and day
        user_sessions: Total sessions in the period
        user_efficiency: Average efficiency percent
        current_day_of_month: Day of month (already normalised)

    Returns:
        A rank in [1, POPULATION_SIZE]
    """
    if elite.user_rank is not None:
        return elite.user_rank

    if user_sessions == 0 and user_efficiency == 0:
        return POPULATION_SIZE

    score = compute_score(user_sessions, user_efficiency)
    avg_sessions_per_day = user_sessions / current_day_of_month
    tier = select_interpolation_tier(avg_sessions_per_day)
    rank = interpolate_rank(score, tier, current_day_of_month)
    logger.debug(
        f"Interpolated rank {rank} in {tier.label} "
        f"(avg {avg_sessions_per_day:.2f} sessions/day, score {score:.0f})"
    )
    return rank


def locate_global_rank(
    user_sessions: int, user_efficiency: float, current_day_of_month: int
) -> Rank:
    """
    Determines the user's rank among the full synthetic population.

    Args:
        user_sessions: Total sessions in the period
        user_efficiency: Average efficiency percent
        current_day_of_month: Day of month (values below 1 are treated as 1)

    Returns:
        A rank in [1, POPULATION_SIZE]
    """
    day = normalize_day_of_month(current_day_of_month)
    score = compute_score(user_sessions, user_efficiency)
    elite = generate_elite_list(day, score, user_sessions, user_efficiency)
    return rank_from_elite(elite, user_sessions, user_efficiency, day)
