"""
FSRS Constants and Parameters

All fixed bounds and the default weight vector in one place.
Index semantics of the weight vector w:

    w0..w3    initial stability per grade
    w4..w7    difficulty coefficients
    w8..w10   recall stability (exponent, negative power, exponent)
    w11..w14  forget stability (multiplier, negative power, power, exponent)
    w15, w16  Hard penalty / Easy bonus
    w17..w19  short-term stability exponents
    w20       decay
"""

from __future__ import annotations

from enum import IntEnum
from typing import Final, Union

from tensor_srs.errors import InvalidGrade


# ---- Review Grades ----

class Grade(IntEnum):
    """User feedback on a retrieval attempt."""
    AGAIN = 1   # Retrieval failed
    HARD = 2    # Retrieved with high effort
    GOOD = 3    # Retrieved normally
    EASY = 4    # Retrieved fluently

    @classmethod
    def parse(cls, value: Union["Grade", int, str]) -> "Grade":
        """
        Coerce a grade given as enum, ordinal or name ("Good", "again", ...).

        Raises:
            InvalidGrade: value does not name one of the four grades
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                raise InvalidGrade(f"Unknown grade name: {value!r}") from None
        if isinstance(value, int) and not isinstance(value, bool):
            try:
                return cls(value)
            except ValueError:
                raise InvalidGrade(f"Grade must be 1..4, got {value}") from None
        raise InvalidGrade(f"Unsupported grade value: {value!r}")


# ---- Stability / Probability Bounds ----

S_MIN: Final = 0.001        # Floor used inside formula math
S_MAX: Final = 36500.0      # 100 years
INIT_S_MIN: Final = 0.1     # Floor for initial stability
INIT_S_MAX: Final = 100.0
TENSOR_S_MIN: Final = 0.1   # Floor for stability leaving the engine

R_MIN: Final = 0.01
R_MAX: Final = 0.99

ROUND_DIGITS: Final = 8     # Rounding applied at formula boundaries


# ---- Weight Vector ----

FSRS5_DEFAULT_DECAY: Final = 0.5
FSRS6_DEFAULT_DECAY: Final = 0.1542

DEFAULT_W: Final[tuple[float, ...]] = (
    0.212,
    1.2931,
    2.3065,
    8.2956,
    6.4133,
    0.8334,
    3.0194,
    0.001,
    1.8722,
    0.1666,
    0.796,
    1.4835,
    0.0614,
    0.2629,
    1.6483,
    0.6014,
    1.8729,
    0.5425,
    0.0912,
    0.0658,
    FSRS6_DEFAULT_DECAY,
)

VALID_W_LENGTHS: Final = (17, 19, 21)
W17_W18_CEILING: Final = 2.0


def clamp_parameters(
    w17_w18_ceiling: float,
    enable_short_term: bool = True
) -> list[tuple[float, float]]:
    """
    Allowed (min, max) range for every weight index.
    """
    return [
        (S_MIN, INIT_S_MAX),  # initial stability (Again)
        (S_MIN, INIT_S_MAX),  # initial stability (Hard)
        (S_MIN, INIT_S_MAX),  # initial stability (Good)
        (S_MIN, INIT_S_MAX),  # initial stability (Easy)
        (1.0, 10.0),          # initial difficulty (Good)
        (0.001, 4.0),         # initial difficulty (multiplier)
        (0.001, 4.0),         # difficulty (multiplier)
        (0.001, 0.75),        # difficulty (multiplier)
        (0.0, 4.5),           # stability (exponent)
        (0.0, 0.8),           # stability (negative power)
        (0.001, 3.5),         # stability (exponent)
        (0.001, 5.0),         # fail stability (multiplier)
        (0.001, 0.25),        # fail stability (negative power)
        (0.001, 0.9),         # fail stability (power)
        (0.0, 4.0),           # fail stability (exponent)
        (0.0, 1.0),           # stability (multiplier for Hard)
        (1.0, 6.0),           # stability (multiplier for Easy)
        (0.0, w17_w18_ceiling),  # short-term stability (exponent)
        (0.0, w17_w18_ceiling),  # short-term stability (exponent)
        (0.01 if enable_short_term else 0.0, 0.8),  # short-term last-stability (exponent)
        (0.1, 0.8),           # decay
    ]


# ---- Effective State ----

ANTI_HOARDING_LAMBDA: Final = 1.5
EARLY_FACTOR: Final = 0.85
POSTPONED_FACTOR: Final = 1.15
DELAY_PENALTY_EXPONENT: Final = 0.8


# ---- Policy Defaults ----

DEFAULT_R_TARGET: Final = 0.9
BASE_ADAPTIVE_STRENGTH: Final = 0.5

PRESSURE_MIN: Final = 0.85
PRESSURE_MAX: Final = 1.0

R_BASE: Final = 0.85
GAMMA: Final = 0.1          # Weight for recent success rate
DELTA: Final = 0.02         # Weight for user intent
R_TARGET_MIN: Final = 0.75
R_TARGET_MAX: Final = 0.97
OVERLOAD_PENALTY: Final = 0.05

MOMENTUM_K: Final = 0.02
MOMENTUM_MIN: Final = 0.9
MOMENTUM_MAX: Final = 1.0

CONTEXT_MIN: Final = 0.85
CONTEXT_MAX: Final = 1.05
