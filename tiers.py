# tiers.py
"""
Tier table and badge resolution.

The tier table splits the synthetic population into eight contiguous rank
bands, best tier first. Each band except the top one is split into
divisions for display.
"""

import logging
import math

from app_types import Badge, Rank, RankTier, TierDefinition
from constants import POPULATION_SIZE

logger = logging.getLogger("app.tiers")

# Calibrated for a population of POPULATION_SIZE candidates, ordered by rank range
RANK_TIERS: list[TierDefinition] = [
    TierDefinition(RankTier.GRANDMASTER, "Grandmaster", "#facc15", 1, 100, 1, "Top 100 Elite", "12+ Hours/Day"),
    TierDefinition(RankTier.MASTER, "Master", "#d946ef", 101, 19_000, 3, "Top 0.95%", "8-12 Hours/Day"),
    TierDefinition(RankTier.HEROIC, "Heroic", "#f43f5e", 19_001, 49_000, 3, "Top 2.45%", "6-8 Hours/Day"),
    TierDefinition(RankTier.DIAMOND, "Diamond", "#6366f1", 49_001, 149_000, 3, "Top 7.45%", "4-6 Hours/Day"),
    TierDefinition(RankTier.PLATINUM, "Platinum", "#22d3ee", 149_001, 449_000, 3, "Top 22.45%", "3-4 Hours/Day"),
    TierDefinition(RankTier.GOLD, "Gold", "#fbbf24", 449_001, 1_049_000, 3, "Top 52.45%", "2-3 Hours/Day"),
    TierDefinition(RankTier.SILVER, "Silver", "#94a3b8", 1_049_001, 1_749_000, 3, "Top 87.45%", "1-2 Hours/Day"),
    TierDefinition(RankTier.BRONZE, "Bronze", "#cd7f32", 1_749_001, POPULATION_SIZE, 3, "Bottom 12.55%", "0-1 Hours/Day"),
]

TIERS_BY_ID: dict[RankTier, TierDefinition] = {t.tier: t for t in RANK_TIERS}

# The lowest tier is the last row of the table
LOWEST_TIER = RANK_TIERS[-1]


def get_tier(tier: RankTier) -> TierDefinition:
    """Return the table row for a tier identifier."""
    return TIERS_BY_ID[tier]


def get_tier_for_rank(rank: Rank) -> TierDefinition:
    """Find the tier whose band contains rank.

    Falls back to the lowest tier when no band matches, which only happens
    for ranks outside [1, POPULATION_SIZE].
    """
    for tier in RANK_TIERS:
        if tier.contains(rank):
            return tier
    logger.warning(f"Rank {rank} is outside every tier band, using {LOWEST_TIER.label}")
    return LOWEST_TIER


def resolve_badge(rank: Rank) -> Badge:
    """Map a rank to its tier and division.

    Division is computed from the distance to the tier's worst rank:
    divisions are numbered 1..N moving from max_rank toward min_rank.

    Args:
        rank: 1-based global rank

    Returns:
        Badge with the tier definition and a division in [1, tier.division]
    """
    tier = get_tier_for_rank(rank)
    if tier.division <= 1:
        return Badge(definition=tier, division=1)

    div_size = (tier.max_rank - tier.min_rank) / tier.division
    progress_in_tier = tier.max_rank - rank
    division = min(tier.division, math.floor(progress_in_tier / div_size) + 1)
    division = max(1, division)
    return Badge(definition=tier, division=division)


def format_rank(rank: Rank) -> str:
    """Compact rank label: '#42', '#9999', then '#12k' from 10000 up."""
    if rank > 9999:
        return f"#{rank // 1000}k"
    return f"#{rank}"
