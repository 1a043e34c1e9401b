"""
Stability Updates

Per-grade stability transitions:
- Initial stability for a first review
- Recall (success) branch
- Forget (lapse) branch
- Short-term (same-day) branch

Every formula result is clamped to [S_MIN, S_MAX] and rounded to
8 fractional digits so that identical inputs give identical outputs.
"""

from __future__ import annotations

import math
from typing import Sequence

from tensor_srs.fsrs.constants import (
    Grade,
    INIT_S_MIN,
    ROUND_DIGITS,
    S_MAX,
    S_MIN,
)


def _clamp(value: float, low: float, high: float) -> float:
    return min(high, max(low, value))


def init_stability(w: Sequence[float], grade: Grade) -> float:
    """
    Initial stability for a new card.

    Formula:
        S0 = max(w[G-1], 0.1)
    """
    grade = Grade.parse(grade)
    return max(w[grade - 1], INIT_S_MIN)


def next_recall_stability(
    w: Sequence[float],
    difficulty: float,
    stability: float,
    retrievability: float,
    grade: Grade
) -> float:
    """
    Stability after a successful recall.

    Formula:
        S' = S * (1 + e^w8 * (11 - D) * S^-w9 * (e^(w10 * (1 - R)) - 1)
                  * hard_penalty * easy_bonus)

    Where hard_penalty = w15 only for Hard, easy_bonus = w16 only for Easy.

    Key principle:
    Spaced success (low R at review time) produces the largest gains.

    Args:
        w: Weight vector
        difficulty: D
        stability: Current S (days)
        retrievability: R at review time
        grade: Review grade

    Returns:
        New stability, clamped to [0.001, 36500]
    """
    grade = Grade.parse(grade)
    hard_penalty = w[15] if grade == Grade.HARD else 1
    easy_bonus = w[16] if grade == Grade.EASY else 1

    new_stability = stability * (
        1
        + math.exp(w[8])
        * (11 - difficulty)
        * math.pow(stability, -w[9])
        * (math.exp((1 - retrievability) * w[10]) - 1)
        * hard_penalty
        * easy_bonus
    )
    return round(_clamp(new_stability, S_MIN, S_MAX), ROUND_DIGITS)


def next_forget_stability(
    w: Sequence[float],
    difficulty: float,
    stability: float,
    retrievability: float,
    enable_short_term: bool = False
) -> float:
    """
    Stability after a lapse.

    Formula:
        S' = w11 * D^-w12 * ((S + 1)^w13 - 1) * e^(w14 * (1 - R))

    Ceiling:
        enable_short_term -> S / e^(w17 * w18)
        otherwise         -> S (a lapse never raises stability)

    Zero difficulty makes D^-w12 unbounded, so the result is the ceiling.
    """
    if enable_short_term:
        ceiling = stability / math.exp(w[17] * w[18])
    else:
        ceiling = stability

    if difficulty <= 0:
        return round(max(S_MIN, ceiling), ROUND_DIGITS)

    new_stability = (
        w[11]
        * math.pow(difficulty, -w[12])
        * (math.pow(stability + 1, w[13]) - 1)
        * math.exp((1 - retrievability) * w[14])
    )
    return round(_clamp(new_stability, S_MIN, ceiling), ROUND_DIGITS)


def next_short_term_stability(
    w: Sequence[float],
    stability: float,
    grade: Grade
) -> float:
    """
    Stability after a same-day review.

    Formula:
        sinc = S^-w19 * e^(w17 * (G - 3 + w18))
        S'   = S * sinc

    Only Again may shrink short-term stability; for Hard and above
    sinc is floored at 1.0.
    """
    grade = Grade.parse(grade)
    sinc = math.pow(stability, -w[19]) * math.exp(w[17] * (grade - 3 + w[18]))

    if grade >= Grade.HARD:
        sinc = max(sinc, 1.0)
    return round(_clamp(stability * sinc, S_MIN, S_MAX), ROUND_DIGITS)
