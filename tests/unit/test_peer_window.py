# tests/unit/test_peer_window.py
"""
Unit tests for the peer window generator.
"""

import math
import random

import pytest

from constants import PEER_WINDOW_SIZE, POPULATION_SIZE, USER_ENTRY_ID
from peer_window import base_peer_efficiency, generate_peer_window, synthesize_peer
from tests.helpers import ranks, user_entries


class FixedRandom:
    """Random source that always returns the same value."""

    def __init__(self, value: float):
        self.value = value

    def random(self) -> float:
        return self.value


class TestBasePeerEfficiency:
    """Tests for the percentile -> base efficiency bands."""

    @pytest.mark.parametrize(
        "percentile, expected",
        [
            (0.999, 90),
            (0.99, 80),  # bounds are strict
            (0.96, 80),
            (0.95, 60),
            (0.9, 60),
            (0.6, 40),
            (0.5, 25),
            (0.3, 25),
            (0.2, 10),
            (0.0, 10),
        ],
    )
    def test_bands(self, percentile, expected):
        assert base_peer_efficiency(percentile) == expected


class TestSynthesizePeer:
    """Tests for a single synthetic peer."""

    def test_formula(self):
        peer = synthesize_peer(5000, 15, FixedRandom(0.5))
        percentile = 1 - 5000 / POPULATION_SIZE
        expected_sessions = math.floor((percentile**3.5 * 15 + 0.4) * 15)

        assert peer.rank == 5000
        assert peer.sessions == expected_sessions
        assert peer.efficiency == pytest.approx(95.0)
        assert peer.score == pytest.approx(expected_sessions * 95.0)
        assert peer.id == "peer-5000"
        assert peer.name == "Candidate_5000"
        assert not peer.is_user

    def test_name_uses_last_four_digits(self):
        assert synthesize_peer(1_234_567, 3, FixedRandom(0)).name == "Candidate_4567"

    def test_jitter_range(self):
        low = synthesize_peer(1_500_000, 10, FixedRandom(0.0))
        high = synthesize_peer(1_500_000, 10, FixedRandom(0.999))
        assert low.efficiency == pytest.approx(25.0)
        assert 34.9 < high.efficiency < 35.0


class TestGeneratePeerWindow:
    """Tests for generate_peer_window."""

    def test_rank_5000_window(self, seeded_rng):
        peers = generate_peer_window(5000, 120, 85, 15, rng=seeded_rng)

        assert len(peers) == PEER_WINDOW_SIZE
        assert peers[0].rank == 4975
        assert ranks(peers) == list(range(4975, 4975 + PEER_WINDOW_SIZE))

        users = user_entries(peers)
        assert len(users) == 1
        assert users[0].rank == 5000
        assert users[0].id == USER_ENTRY_ID
        assert users[0].sessions == 120
        assert users[0].efficiency == 85
        assert users[0].score == 10200

    def test_window_never_starts_inside_elite(self, seeded_rng):
        peers = generate_peer_window(120, 300, 90, 15, rng=seeded_rng)
        assert peers[0].rank == 101
        assert len(peers) == PEER_WINDOW_SIZE
        assert [p.rank for p in user_entries(peers)] == [120]

    def test_window_truncated_at_population_end(self, seeded_rng):
        peers = generate_peer_window(POPULATION_SIZE, 0, 0, 15, rng=seeded_rng)
        assert peers[0].rank == POPULATION_SIZE - 25
        assert peers[-1].rank == POPULATION_SIZE
        assert len(peers) == 26
        assert peers[-1].is_user

    def test_window_near_end(self, seeded_rng):
        peers = generate_peer_window(POPULATION_SIZE - 10, 5, 20, 15, rng=seeded_rng)
        assert peers[-1].rank == POPULATION_SIZE
        assert len(peers) == 36
        assert len(user_entries(peers)) == 1

    @pytest.mark.parametrize("rank", [1, 50, 100])
    def test_elite_rank_has_no_window(self, rank, seeded_rng):
        assert generate_peer_window(rank, 300, 99, 15, rng=seeded_rng) == []

    def test_ranks_strictly_ascending(self, seeded_rng):
        peers = generate_peer_window(777_777, 40, 35, 20, rng=seeded_rng)
        assert all(a.rank < b.rank for a, b in zip(peers, peers[1:]))

    def test_same_seed_same_window(self):
        first = generate_peer_window(29_000, 120, 85, 15, rng=random.Random(99))
        second = generate_peer_window(29_000, 120, 85, 15, rng=random.Random(99))
        assert first == second

    def test_different_seed_changes_only_peer_efficiency(self):
        first = generate_peer_window(29_000, 120, 85, 15, rng=random.Random(1))
        second = generate_peer_window(29_000, 120, 85, 15, rng=random.Random(2))
        assert ranks(first) == ranks(second)
        assert [p.sessions for p in first] == [p.sessions for p in second]
        assert [p.efficiency for p in first] != [p.efficiency for p in second]

    def test_default_rng(self):
        peers = generate_peer_window(29_000, 120, 85, 15)
        assert len(peers) == PEER_WINDOW_SIZE
        assert len(user_entries(peers)) == 1

    def test_peer_efficiency_within_bounds(self, seeded_rng):
        for peer in generate_peer_window(5000, 120, 85, 15, rng=seeded_rng):
            assert 0 <= peer.efficiency <= 100
            assert peer.sessions >= 0
