# app_types.py
"""
Type definitions for the Mission Tracker.

This module defines the value types passed between the ranking engine,
the analytics helpers and the UI. Everything here is recomputed on demand;
only StudySession/DayRecord are ever written to disk.
"""

from dataclasses import dataclass, field
from enum import Enum

# =============================================================================
# Basic Type Aliases
# =============================================================================


class RankTier(str, Enum):
    """Rank tiers, declared from lowest to highest."""

    BRONZE = "BRONZE"
    SILVER = "SILVER"
    GOLD = "GOLD"
    PLATINUM = "PLATINUM"
    DIAMOND = "DIAMOND"
    HEROIC = "HEROIC"
    MASTER = "MASTER"
    GRANDMASTER = "GRANDMASTER"


# A day key in "Y-M-D" form without zero padding, e.g. "2024-3-7"
DateKey = str

# A 1-based position in the synthetic population (1 is best)
Rank = int


# =============================================================================
# Tier Data Classes
# =============================================================================


@dataclass(frozen=True)
class TierDefinition:
    """One row of the static tier table.

    Attributes:
        tier: Tier identifier
        label: Display name
        color: Display color (hex)
        min_rank: Best rank in the tier (inclusive)
        max_rank: Worst rank in the tier (inclusive)
        division: Number of sub-bands in the tier
        percentile: Display-only population share
        session_threshold: Display-only study-hours hint
    """

    tier: RankTier
    label: str
    color: str
    min_rank: Rank
    max_rank: Rank
    division: int
    percentile: str = ""
    session_threshold: str = ""

    def contains(self, rank: Rank) -> bool:
        return self.min_rank <= rank <= self.max_rank


@dataclass(frozen=True)
class Badge:
    """A resolved tier + division for a rank."""

    definition: TierDefinition
    division: int = 1

    @property
    def tier(self) -> RankTier:
        return self.definition.tier

    @property
    def display_label(self) -> str:
        # Single-division tiers show no division number
        if self.definition.division <= 1:
            return self.definition.label
        return f"{self.definition.label} {self.division}"


# =============================================================================
# Leaderboard Data Classes
# =============================================================================


@dataclass
class LeaderboardEntry:
    """A single row of a generated leaderboard.

    Attributes:
        id: Stable identifier for list rendering
        name: Display name
        sessions: Total sessions in the period
        efficiency: Average efficiency percent (unrounded)
        score: sessions * efficiency
        rank: 1-based position, unique within one list
        is_user: True only for the caller's own entry
    """

    id: str
    name: str
    sessions: int
    efficiency: float
    score: float
    rank: Rank
    is_user: bool = False


@dataclass
class EliteListResult:
    """Result of generating the top-100 list.

    Attributes:
        entries: Exactly ELITE_LIST_SIZE entries ranked 1..N
        user_rank: The user's rank if they made the list, else None
    """

    entries: list[LeaderboardEntry]
    user_rank: Rank | None = None

    @property
    def contains_user(self) -> bool:
        return self.user_rank is not None


@dataclass(frozen=True)
class UserSummary:
    """Aggregate study performance for one period."""

    total_sessions: int = 0
    avg_efficiency: float = 0.0


@dataclass
class LeaderboardView:
    """Everything the leaderboard page renders for one refresh.

    Attributes:
        summary: The input summary
        day_of_month: Day of month the population was generated for
        score: The user's score
        global_rank: The user's rank in the full population
        badge: Tier/division for global_rank
        elite: The top-100 list (with the user inserted if they made it)
        peers: Window around the user; empty when the user is in the elite list
    """

    summary: UserSummary
    day_of_month: int
    score: float
    global_rank: Rank
    badge: Badge
    elite: EliteListResult
    peers: list[LeaderboardEntry] = field(default_factory=list)


# =============================================================================
# Daily Log Data Classes
# =============================================================================


@dataclass
class StudySession:
    """One study block; rating is on a 0-10 scale, None until rated."""

    subject: str = ""
    rating: int | None = None


@dataclass
class DayRecord:
    """A stored day in the study log.

    Attributes:
        sessions: The day's study sessions
        efficiency: Rounded efficiency percent derived from session ratings
        submitted: Whether the day has been filled in
        submitted_at: ISO timestamp of the last submission
        historical: Imported/backfilled day
    """

    sessions: list[StudySession] = field(default_factory=list)
    efficiency: int = 0
    submitted: bool = False
    submitted_at: str | None = None
    historical: bool = False

    @property
    def rated_sessions(self) -> int:
        return sum(1 for s in self.sessions if s.rating is not None)

    @property
    def has_activity(self) -> bool:
        return self.submitted or self.rated_sessions > 0


# The full stored log
MissionData = dict[DateKey, DayRecord]


@dataclass(frozen=True)
class CalendarStats:
    """Month totals shown above the calendar.

    Only days with a rated session or a non-zero efficiency count as logged.
    """

    days_logged: int = 0
    total_sessions: int = 0
    avg_efficiency: int = 0
    avg_sessions_per_day: float = 0.0
