# scoring.py
"""Score function shared by the user, the elite list and the peer window."""


def compute_score(sessions: float, efficiency_percent: float) -> float:
    """Points = total sessions * efficiency (0-100).

    Inputs are expected to be clamped by the caller (sessions >= 0,
    efficiency in [0, 100]), so the result is non-negative and zero
    whenever either input is zero.
    """
    return sessions * efficiency_percent
