"""
Session momentum: cognitive fatigue within a session.

Momentum only decreases as the session goes on, and multiplies
stability after the FSRS update. It never touches recall probability.
"""

from __future__ import annotations

import math

from tensor_srs.fsrs.constants import MOMENTUM_K, MOMENTUM_MAX, MOMENTUM_MIN


def compute_session_momentum(reviews_so_far: float, k: float = MOMENTUM_K) -> float:
    """
    Formula:
        momentum = clamp(exp(-k * reviews_so_far), 0.9, 1.0)
    """
    momentum = math.exp(-k * reviews_so_far)
    return min(MOMENTUM_MAX, max(MOMENTUM_MIN, momentum))
