from app_types import LeaderboardEntry
from constants import ELITE_LIST_SIZE
from population import elite_candidate


def last_elite_score(current_day_of_month: int) -> float:
    """Score of the synthetic candidate at the bottom of the elite list."""
    return elite_candidate(ELITE_LIST_SIZE - 1, current_day_of_month).score


def user_entries(entries: list[LeaderboardEntry]) -> list[LeaderboardEntry]:
    """Returns the entries flagged as the user."""
    return [e for e in entries if e.is_user]


def ranks(entries: list[LeaderboardEntry]) -> list[int]:
    return [e.rank for e in entries]
