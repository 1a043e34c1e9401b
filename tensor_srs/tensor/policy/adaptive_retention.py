"""
Adaptive Retention

Dynamic retention targeting and the pull of R_eff toward that target.

Key principle:
The pull strength is scaled by load pressure by the caller, so higher
load weakens the pull and never strengthens it. Nothing here touches
stability.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from tensor_srs.fsrs.constants import (
    DELTA,
    GAMMA,
    OVERLOAD_PENALTY,
    R_BASE,
    R_MAX,
    R_MIN,
    R_TARGET_MAX,
    R_TARGET_MIN,
)
from tensor_srs.tensor.validation import (
    ensure_non_negative,
    ensure_optional_unit_interval,
    ensure_unit_interval,
)


@dataclass(frozen=True)
class RetentionSignals:
    """
    Workload and performance signals for one review.
    """
    backlog_size: float  # Cards currently overdue
    recent_failure_rate: float  # 0.0-1.0
    session_length: float  # Minutes in the current session
    daily_capacity: float  # Reviews the user can handle per day
    due_today: float  # Cards due today

    recent_success_rate: Optional[float] = None  # Derived from failure rate when None
    user_intent: Optional[float] = None  # Inferred from backlog/session when None

    def __post_init__(self):
        ensure_non_negative("backlog_size", self.backlog_size)
        ensure_unit_interval("recent_failure_rate", self.recent_failure_rate)
        ensure_non_negative("session_length", self.session_length)
        ensure_non_negative("due_today", self.due_today)
        ensure_non_negative("daily_capacity", self.daily_capacity)
        ensure_optional_unit_interval("recent_success_rate", self.recent_success_rate)
        ensure_optional_unit_interval("user_intent", self.user_intent)

    @property
    def resolved_success_rate(self) -> float:
        """recent_success_rate, or 1 - recent_failure_rate."""
        if self.recent_success_rate is not None:
            return self.recent_success_rate
        return 1.0 - self.recent_failure_rate

    @property
    def resolved_user_intent(self) -> float:
        """
        user_intent, or an estimate: lower backlog and shorter sessions
        indicate higher intent.

            clamp(1 - backlog_size / 100 - session_length / 120, 0, 1)
        """
        if self.user_intent is not None:
            return self.user_intent
        return max(0.0, min(1.0, 1.0 - self.backlog_size / 100.0 - self.session_length / 120.0))

    @property
    def load_ratio(self) -> float:
        """due_today / daily_capacity (1.0 when capacity is zero)."""
        if self.daily_capacity > 0:
            return self.due_today / self.daily_capacity
        return 1.0


def compute_r_target(
    signals: RetentionSignals,
    r_base: float = R_BASE,
    gamma: float = GAMMA,
    delta: float = DELTA
) -> float:
    """
    Compute the dynamic retention target.

    Formula:
        R_target = R_base + gamma * success_rate + delta * user_intent
        R_target -= 0.05 * min(1, load_ratio - 1)   if overloaded
        clamped to [0.75, 0.97]
    """
    r_target = r_base + gamma * signals.resolved_success_rate + delta * signals.resolved_user_intent

    load_ratio = signals.load_ratio
    if load_ratio > 1.0:
        r_target -= OVERLOAD_PENALTY * min(1.0, load_ratio - 1.0)

    return min(R_TARGET_MAX, max(R_TARGET_MIN, r_target))


def apply_adaptive_retention(r_eff: float, r_target: float, strength: float) -> float:
    """
    Move R_eff toward R_target.

    Formula:
        R_eff' = R_eff + strength * (R_target - R_eff), clamped to [0.01, 0.99]

    strength must already be scaled by load pressure.
    """
    r_new = r_eff + strength * (r_target - r_eff)
    return min(R_MAX, max(R_MIN, r_new))


def apply_pressure_scaled_adaptive_retention(
    r_eff: float,
    r_target: float,
    base_strength: float,
    pressure: float
) -> float:
    """apply_adaptive_retention with strength = base_strength * pressure."""
    return apply_adaptive_retention(r_eff, r_target, base_strength * pressure)
