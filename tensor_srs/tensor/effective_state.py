"""
Effective State

Derives the effective elapsed time and effective recall probability that
the stability update is driven by.

Workflow:
1. Anti-hoarding: a delayed review is charged its excess delay in full and
   its scheduled portion at 1.5x
2. Early reviews shrink t_eff by 15%
3. Postponed reviews without a schedule grow t_eff by 15%
4. R_eff = forgetting curve at t_eff, times the context multiplier, clamped
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from tensor_srs.fsrs.constants import (
    ANTI_HOARDING_LAMBDA,
    EARLY_FACTOR,
    POSTPONED_FACTOR,
    R_MAX,
    R_MIN,
)
from tensor_srs.fsrs.recall import retrievability


@dataclass(frozen=True)
class EffectiveState:
    """Ephemeral recall/time pair; recomputed on every call, never stored."""
    r_eff: float
    t_eff: float


def compute_effective_time(
    t: float,
    scheduled_t: Optional[float] = None,
    early: bool = False,
    postponed: bool = False
) -> float:
    """
    Effective elapsed time.

    Invariants:
    - For fixed scheduled_t, t_eff is non-decreasing in t
    - early never increases t_eff
    - postponement never decreases t_eff
    """
    if scheduled_t is not None and t > scheduled_t:
        t_eff = (t - scheduled_t) + ANTI_HOARDING_LAMBDA * scheduled_t
    else:
        t_eff = t

    # Applies with or without a schedule
    if early:
        t_eff = max(0.0, t_eff * EARLY_FACTOR)

    # Anti-hoarding already charged the delay when a schedule exists
    if postponed and scheduled_t is None:
        t_eff = t_eff * POSTPONED_FACTOR

    return t_eff


def compute_effective_state(
    w: Sequence[float],
    s: float,
    t: float,
    scheduled_t: Optional[float] = None,
    early: bool = False,
    postponed: bool = False,
    context_multiplier: float = 1.0
) -> EffectiveState:
    """
    Compute effective elapsed time and effective recall probability.

    Args:
        w: Weight vector (decay read from w20)
        s: Stability (must be > 0)
        t: Actual elapsed days
        scheduled_t: Planned elapsed days, if any
        early: Review happened before it was due
        postponed: Review was postponed by the user
        context_multiplier: Multiplier applied to recall before clamping

    Returns:
        EffectiveState with r_eff in [0.01, 0.99]
    """
    t_eff = compute_effective_time(t, scheduled_t, early, postponed)

    r_eff = retrievability(w, t_eff, s) * context_multiplier
    r_eff = min(R_MAX, max(R_MIN, r_eff))

    return EffectiveState(r_eff=r_eff, t_eff=t_eff)
