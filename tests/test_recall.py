"""
Unit tests for the forgetting curve

Tests cover:
- Decay/factor derivation
- Recall identity at zero elapsed time
- Monotonicity in elapsed time and stability
"""

import math

import pytest

from tensor_srs.errors import InvalidParameter
from tensor_srs.fsrs import DEFAULT_W, compute_decay_factor, forgetting_curve, retrievability


class TestDecayFactor:
    """Tests for compute_decay_factor"""

    def test_default_weights(self):
        """Decay is the negated last weight"""
        decay, factor = compute_decay_factor(DEFAULT_W)

        assert decay == -DEFAULT_W[20]
        assert factor == pytest.approx(math.exp(math.log(0.9) / decay) - 1, abs=1e-8)

    def test_factor_rounded_to_8_digits(self):
        """Factor carries at most 8 fractional digits"""
        _, factor = compute_decay_factor(DEFAULT_W)
        assert factor == round(factor, 8)

    def test_accepts_bare_w20(self):
        """A bare w20 gives the same result as the full vector"""
        assert compute_decay_factor(DEFAULT_W[20]) == compute_decay_factor(DEFAULT_W)

    @pytest.mark.parametrize("w20", [0, 0.0, float("nan"), float("inf")])
    def test_degenerate_decay_rejected(self, w20):
        """Zero or non-finite decay raises InvalidParameter"""
        with pytest.raises(InvalidParameter):
            compute_decay_factor(w20)


class TestForgettingCurve:
    """Tests for forgetting_curve / retrievability"""

    @pytest.mark.parametrize("w20", [0.1, 0.1542, 0.5, 1.0])
    @pytest.mark.parametrize("stability", [0.1, 1.0, 10.0, 36500.0])
    def test_recall_is_one_at_zero_elapsed(self, w20, stability):
        """R(0, S) = 1 for any decay in (0, 1] and S > 0"""
        decay, factor = compute_decay_factor(w20)
        assert forgetting_curve(decay, factor, 0, stability) == 1.0

    @pytest.mark.parametrize("stability", [1.0, 10.0, 100.0])
    def test_recall_at_stability_is_ninety_percent(self, stability):
        """Stability is the 90% recall point"""
        assert retrievability(DEFAULT_W, stability, stability) == pytest.approx(0.9, abs=1e-6)

    def test_strictly_decreasing_in_time(self):
        """R falls as more days pass"""
        values = [retrievability(DEFAULT_W, t, 10.0) for t in (1, 5, 10, 30, 365)]
        assert all(a > b for a, b in zip(values, values[1:]))

    def test_strictly_increasing_in_stability(self):
        """Higher stability forgets more slowly"""
        values = [retrievability(DEFAULT_W, 7.0, s) for s in (1, 5, 10, 50, 100)]
        assert all(a < b for a, b in zip(values, values[1:]))

    def test_result_rounded_to_8_digits(self):
        """R carries at most 8 fractional digits"""
        r = retrievability(DEFAULT_W, 3.3, 7.7)
        assert r == round(r, 8)
