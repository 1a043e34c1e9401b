"""
Unit tests for FSRS stability formulas
"""

import math

import pytest

from tensor_srs.errors import InvalidGrade
from tensor_srs.fsrs import (
    DEFAULT_W,
    Grade,
    S_MAX,
    init_stability,
    next_forget_stability,
    next_recall_stability,
    next_short_term_stability,
)


class TestGrade:
    """Tests for Grade enum and parsing"""

    def test_grade_values(self):
        assert Grade.AGAIN == 1
        assert Grade.HARD == 2
        assert Grade.GOOD == 3
        assert Grade.EASY == 4

    @pytest.mark.parametrize("value,expected", [
        (Grade.HARD, Grade.HARD),
        (4, Grade.EASY),
        ("Good", Grade.GOOD),
        ("again", Grade.AGAIN),
        (" EASY ", Grade.EASY),
    ])
    def test_parse(self, value, expected):
        assert Grade.parse(value) is expected

    @pytest.mark.parametrize("value", [0, 5, -1, True, 2.0, "meh", None])
    def test_parse_rejects(self, value):
        """Anything but the four grades raises InvalidGrade"""
        with pytest.raises(InvalidGrade):
            Grade.parse(value)


class TestInitStability:
    """Tests for init_stability"""

    def test_reads_grade_weight(self):
        assert init_stability(DEFAULT_W, Grade.GOOD) == DEFAULT_W[2]
        assert init_stability(DEFAULT_W, Grade.EASY) == DEFAULT_W[3]

    def test_floor(self):
        """Initial stability is at least 0.1"""
        w = list(DEFAULT_W)
        w[0] = 0.01
        assert init_stability(w, Grade.AGAIN) == 0.1


class TestRecallStability:
    """Tests for next_recall_stability"""

    def test_success_grows_stability(self):
        assert next_recall_stability(DEFAULT_W, 5.0, 10.0, 0.9, Grade.GOOD) > 10.0

    def test_no_growth_at_perfect_recall(self):
        """R = 1 leaves stability unchanged"""
        assert next_recall_stability(DEFAULT_W, 5.0, 10.0, 1.0, Grade.GOOD) == 10.0

    def test_hard_good_easy_ordering(self):
        """Hard penalty < 1 < easy bonus"""
        hard = next_recall_stability(DEFAULT_W, 5.0, 10.0, 0.9, Grade.HARD)
        good = next_recall_stability(DEFAULT_W, 5.0, 10.0, 0.9, Grade.GOOD)
        easy = next_recall_stability(DEFAULT_W, 5.0, 10.0, 0.9, Grade.EASY)
        assert hard < good < easy

    def test_spaced_success_gains_more(self):
        """Lower recall at review time gives a larger gain"""
        late = next_recall_stability(DEFAULT_W, 5.0, 10.0, 0.7, Grade.GOOD)
        early = next_recall_stability(DEFAULT_W, 5.0, 10.0, 0.95, Grade.GOOD)
        assert late > early

    def test_clamped_to_max(self):
        assert next_recall_stability(DEFAULT_W, 1.0, S_MAX, 0.01, Grade.EASY) == S_MAX


class TestForgetStability:
    """Tests for next_forget_stability"""

    @pytest.mark.parametrize("stability", [0.5, 5.0, 50.0, 500.0])
    def test_never_exceeds_previous_stability(self, stability):
        """Without short-term the lapse result is at most S"""
        result = next_forget_stability(DEFAULT_W, 5.0, stability, 0.5)
        assert 0.001 <= result <= stability

    def test_short_term_ceiling(self):
        """With short-term the ceiling is S / exp(w17 * w18)"""
        stability = 0.5
        ceiling = stability / math.exp(DEFAULT_W[17] * DEFAULT_W[18])
        result = next_forget_stability(DEFAULT_W, 5.0, stability, 0.1, enable_short_term=True)
        assert result <= ceiling + 1e-8

    def test_zero_difficulty_returns_ceiling(self):
        """D = 0 skips the power term and lands on the ceiling"""
        assert next_forget_stability(DEFAULT_W, 0.0, 10.0, 0.9) == 10.0

    def test_zero_difficulty_short_term_ceiling(self):
        expected = round(10.0 / math.exp(DEFAULT_W[17] * DEFAULT_W[18]), 8)
        result = next_forget_stability(DEFAULT_W, 0.0, 10.0, 0.9, enable_short_term=True)
        assert result == expected


class TestShortTermStability:
    """Tests for next_short_term_stability"""

    @pytest.mark.parametrize("grade", [Grade.HARD, Grade.GOOD, Grade.EASY])
    def test_non_lapse_never_shrinks(self, grade):
        assert next_short_term_stability(DEFAULT_W, 10.0, grade) >= 10.0

    def test_again_may_shrink(self):
        assert next_short_term_stability(DEFAULT_W, 10.0, Grade.AGAIN) < 10.0
