"""
Stability Tensor Update

Applies the FSRS recall-branch stability formula, optional context and
session multipliers, the anti-hoarding delay penalty, and absolute bounds.

Note: every grade, Again included, goes through the recall branch here.
The dedicated lapse formula (next_forget_stability) is not used by the
pipeline.
"""

from __future__ import annotations

from typing import Optional, Sequence

from tensor_srs.fsrs.constants import (
    DELAY_PENALTY_EXPONENT,
    Grade,
    S_MAX,
    TENSOR_S_MIN,
)
from tensor_srs.fsrs.stability import next_recall_stability


def update_stability_tensor(
    w: Sequence[float],
    s: float,
    r_eff: float,
    grade: Grade,
    difficulty: float,
    scheduled_t: Optional[float] = None,
    actual_t: Optional[float] = None,
    context_multiplier: float = 1.0,
    session_momentum: float = 1.0
) -> float:
    """
    Compute the post-review stability.

    Workflow:
    1. S_base = next_recall_stability(w, D, S, R_eff, grade)
    2. S' = S_base * context_multiplier * session_momentum
    3. If actual_t > scheduled_t: S' /= (actual_t / scheduled_t) ^ 0.8
    4. Clamp to [0.1, 36500]

    Args:
        w: Weight vector
        s: Current stability
        r_eff: Effective recall probability
        grade: Review grade
        difficulty: D
        scheduled_t: Planned elapsed days
        actual_t: Actual elapsed days
        context_multiplier: Already-resolved context multiplier
        session_momentum: Already-resolved session momentum

    Returns:
        New stability in [0.1, 36500]
    """
    s_base = next_recall_stability(w, difficulty, s, r_eff, grade)

    s_new = s_base * context_multiplier * session_momentum

    if scheduled_t is not None and actual_t is not None and actual_t > scheduled_t:
        if scheduled_t > 0:
            s_new = s_new / ((actual_t / scheduled_t) ** DELAY_PENALTY_EXPONENT)
        else:
            # Unbounded delay ratio
            s_new = TENSOR_S_MIN

    return min(S_MAX, max(TENSOR_S_MIN, s_new))
