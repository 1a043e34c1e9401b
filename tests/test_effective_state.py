"""
Unit tests for effective time and effective recall
"""

import pytest

from tensor_srs.fsrs import DEFAULT_W, retrievability
from tensor_srs.tensor import compute_effective_state, compute_effective_time


class TestEffectiveTime:
    """Tests for compute_effective_time"""

    def test_on_time_unchanged(self):
        assert compute_effective_time(5.0, scheduled_t=5.0) == 5.0
        assert compute_effective_time(3.0, scheduled_t=5.0) == 3.0
        assert compute_effective_time(7.0) == 7.0

    def test_anti_hoarding_charge(self):
        """Excess delay in full plus 1.5x the scheduled portion"""
        assert compute_effective_time(10.0, scheduled_t=5.0) == pytest.approx(12.5)

    def test_non_decreasing_in_t(self):
        values = [compute_effective_time(t, scheduled_t=5.0) for t in (0, 2, 5, 5.01, 8, 15, 60)]
        assert all(a <= b for a, b in zip(values, values[1:]))

    def test_early_shrinks(self):
        assert compute_effective_time(10.0, early=True) == pytest.approx(8.5)
        assert compute_effective_time(10.0, scheduled_t=5.0, early=True) == pytest.approx(12.5 * 0.85)

    @pytest.mark.parametrize("t", [0.0, 1.0, 5.0, 20.0])
    @pytest.mark.parametrize("scheduled_t", [None, 3.0, 5.0])
    def test_early_never_increases(self, t, scheduled_t):
        on_time = compute_effective_time(t, scheduled_t)
        assert compute_effective_time(t, scheduled_t, early=True) <= on_time

    def test_postponed_without_schedule_grows(self):
        assert compute_effective_time(10.0, postponed=True) == pytest.approx(11.5)

    def test_postponed_with_delay_not_double_charged(self):
        """The anti-hoarding path already charges the delay"""
        assert compute_effective_time(10.0, scheduled_t=5.0, postponed=True) == pytest.approx(12.5)

    @pytest.mark.parametrize("t", [0.0, 1.0, 5.0, 20.0])
    @pytest.mark.parametrize("scheduled_t", [None, 3.0, 5.0])
    def test_postponement_never_decreases(self, t, scheduled_t):
        on_time = compute_effective_time(t, scheduled_t)
        assert compute_effective_time(t, scheduled_t, postponed=True) >= on_time


class TestEffectiveState:
    """Tests for compute_effective_state"""

    def test_anti_hoarding_monotonic_penalty(self):
        """Later reviews cost more effective time than earlier ones"""
        on_time = compute_effective_state(DEFAULT_W, 10.0, 5.0, scheduled_t=5.0)
        slightly_late = compute_effective_state(DEFAULT_W, 10.0, 8.0, scheduled_t=5.0)
        very_late = compute_effective_state(DEFAULT_W, 10.0, 15.0, scheduled_t=5.0)

        assert slightly_late.t_eff < very_late.t_eff
        assert on_time.t_eff < slightly_late.t_eff
        assert on_time.t_eff < very_late.t_eff

    def test_r_eff_from_forgetting_curve(self):
        state = compute_effective_state(DEFAULT_W, 10.0, 5.0)
        assert state.r_eff == retrievability(DEFAULT_W, 5.0, 10.0)
        assert state.t_eff == 5.0

    def test_r_eff_clamped(self):
        """Fresh memories cap at 0.99, long-forgotten ones floor at 0.01"""
        assert compute_effective_state(DEFAULT_W, 10.0, 0.0).r_eff == 0.99
        assert compute_effective_state(DEFAULT_W, 10.0, 0.0, context_multiplier=0.001).r_eff == 0.01

    def test_context_multiplier_scales_recall(self):
        plain = compute_effective_state(DEFAULT_W, 10.0, 5.0)
        scaled = compute_effective_state(DEFAULT_W, 10.0, 5.0, context_multiplier=0.9)
        assert scaled.r_eff == pytest.approx(plain.r_eff * 0.9)
        assert scaled.t_eff == plain.t_eff

    def test_immutable(self):
        state = compute_effective_state(DEFAULT_W, 10.0, 5.0)
        with pytest.raises(AttributeError):
            state.r_eff = 0.5
