"""
Constants for the Monte Carlo simulation.
"""

from __future__ import annotations

from typing import Final

from tensor_srs.fsrs.constants import Grade


# Grade probabilities, biased toward realistic usage
GRADE_DISTRIBUTION: Final[tuple[tuple[Grade, float], ...]] = (
    (Grade.AGAIN, 0.10),
    (Grade.HARD, 0.20),
    (Grade.GOOD, 0.55),
    (Grade.EASY, 0.15),
)

DEFAULT_NUM_CARDS: Final[int] = 500
DEFAULT_REVIEWS_PER_CARD: Final[int] = 20
DEFAULT_INITIAL_STABILITY: Final[float] = 5.0
DEFAULT_INITIAL_DIFFICULTY: Final[float] = 5.0

# Elapsed days before a card's first simulated review
INITIAL_ELAPSED_DAYS: Final[float] = 1.0

REVIEW_COLUMNS: Final[list[str]] = [
    "card",
    "review",
    "grade",
    "t",
    "s_before",
    "s_new",
    "r_eff",
    "next_interval",
]
