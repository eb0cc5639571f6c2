# tests/unit/test_scoring.py
"""
Unit tests for the score function.
"""

import pytest

from scoring import compute_score


class TestComputeScore:
    """Tests for compute_score."""

    def test_product(self):
        assert compute_score(120, 85) == 10200

    def test_fractional_efficiency(self):
        assert compute_score(217, 93.05) == pytest.approx(20191.85)

    @pytest.mark.parametrize("value", [0, 1, 37, 100, 5000])
    def test_zero_if_either_input_is_zero(self, value):
        assert compute_score(0, value) == 0
        assert compute_score(value, 0) == 0

    def test_monotone_in_each_argument(self):
        values = [0, 1, 2, 10, 55.5, 100]
        for fixed in values:
            scores_by_sessions = [compute_score(v, fixed) for v in values]
            scores_by_efficiency = [compute_score(fixed, v) for v in values]
            assert scores_by_sessions == sorted(scores_by_sessions)
            assert scores_by_efficiency == sorted(scores_by_efficiency)

    def test_positive_for_positive_inputs(self):
        assert compute_score(1, 0.5) > 0
