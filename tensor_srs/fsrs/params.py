"""
Parameter Vector Resolution

Checks, clips and migrates FSRS weight vectors, and holds the resolved
vector in an immutable EngineConfig that is passed into every call.

Length history:
    17 -> FSRS-4.5
    19 -> FSRS-5
    21 -> FSRS-6 (the only length the engine consumes)
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional, Sequence

from tensor_srs.errors import InvalidParameter
from tensor_srs.fsrs.constants import (
    BASE_ADAPTIVE_STRENGTH,
    DEFAULT_R_TARGET,
    DEFAULT_W,
    FSRS5_DEFAULT_DECAY,
    ROUND_DIGITS,
    VALID_W_LENGTHS,
    W17_W18_CEILING,
    clamp_parameters,
)
from tensor_srs.fsrs.recall import compute_decay_factor

logger = logging.getLogger(__name__)


def check_parameters(w: Sequence[float]) -> Sequence[float]:
    """
    Validate a raw weight vector.

    Returns:
        The input unchanged

    Raises:
        InvalidParameter: non-finite value or length not in (17, 19, 21)
    """
    for value in w:
        if not isinstance(value, (int, float)) or not math.isfinite(value):
            raise InvalidParameter(f"Non-finite or NaN value in parameters {list(w)}")
    if len(w) not in VALID_W_LENGTHS:
        raise InvalidParameter(
            f"Invalid parameter length: {len(w)}. "
            "Must be 17, 19 or 21 for FSRS-4.5, 5 and 6 respectively."
        )
    return w


def clip_parameters(
    w: Sequence[float],
    num_relearning_steps: int,
    enable_short_term: bool = True
) -> list[float]:
    """
    Clamp every weight into its allowed range.

    With more than one relearning step the w17 * w18 ceiling is tightened so
    that repeated short-term boosts after a lapse cannot push the
    post-lapse stability above the pre-lapse one:

        steps * w17 * w18 <= -(ln w11 + ln(2^w13 - 1) + 0.3 * w14)

    Raises:
        InvalidParameter: w11 or w13 is not positive when the ceiling is tightened
    """
    ceiling = W17_W18_CEILING
    if max(0, num_relearning_steps) > 1:
        growth = math.pow(2.0, w[13]) - 1.0
        if w[11] <= 0 or growth <= 0:
            raise InvalidParameter(
                f"w11 and w13 must be positive with {num_relearning_steps} relearning steps, "
                f"got w11={w[11]}, w13={w[13]}"
            )
        value = -(
            math.log(w[11])
            + math.log(growth)
            + w[14] * 0.3
        ) / num_relearning_steps
        ceiling = min(2.0, max(0.01, round(value, ROUND_DIGITS)))

    ranges = clamp_parameters(ceiling, enable_short_term)[:len(w)]
    return [
        min(high, max(low, w[index] or 0))
        for index, (low, high) in enumerate(ranges)
    ]


def migrate_parameters(
    w: Optional[Sequence[float]] = None,
    num_relearning_steps: int = 0,
    enable_short_term: bool = True
) -> tuple[float, ...]:
    """
    Resolve any supported weight vector to the 21-length FSRS-6 form.

    Args:
        w: Raw weights (None selects the defaults)
        num_relearning_steps: Relearning step count, tightens the w17*w18 ceiling
        enable_short_term: Whether short-term stability is in use

    Returns:
        Clipped 21-length weight tuple

    Raises:
        InvalidParameter: the raw vector fails check_parameters
    """
    if w is None:
        return DEFAULT_W

    check_parameters(w)
    clipped = clip_parameters(list(w), num_relearning_steps, enable_short_term)

    if len(w) == 21:
        return tuple(clipped)

    if len(w) == 19:
        logger.debug("[FSRS-6] auto fill w from 19 to 21 length")
        return tuple(clipped + [0.0, FSRS5_DEFAULT_DECAY])

    # 17 values: fold the FSRS-4.5 difficulty terms into the FSRS-5 form
    clipped[4] = round(clipped[5] * 2.0 + clipped[4], ROUND_DIGITS)
    clipped[5] = round(math.log(clipped[5] * 3.0 + 1.0) / 3.0, ROUND_DIGITS)
    clipped[6] = round(clipped[6] + 0.5, ROUND_DIGITS)
    logger.debug("[FSRS-6] auto fill w from 17 to 21 length")
    return tuple(clipped + [0.0, 0.0, 0.0, FSRS5_DEFAULT_DECAY])


@dataclass(frozen=True)
class EngineConfig:
    """
    Immutable engine configuration, passed by reference into every call.

    w is always the fully-resolved 21-length vector.
    """
    w: tuple[float, ...] = DEFAULT_W
    enable_short_term: bool = True

    # Pipeline policy knobs
    default_r_target: float = DEFAULT_R_TARGET
    base_strength: float = BASE_ADAPTIVE_STRENGTH

    # Difficulty bound accepted by the pipeline
    difficulty_min: float = 0.0
    difficulty_max: float = 10.0

    def __post_init__(self):
        object.__setattr__(self, "w", tuple(float(v) for v in check_parameters(self.w)))
        if len(self.w) != 21:
            raise InvalidParameter(
                f"EngineConfig needs a resolved 21-length vector, got {len(self.w)}; "
                "use EngineConfig.from_weights to migrate"
            )
        if not self.w[20] > 0:
            raise InvalidParameter(f"w20 must be positive (decay < 0), got {self.w[20]}")
        compute_decay_factor(self.w)

        if not 0 < self.default_r_target < 1:
            raise InvalidParameter(f"default_r_target must be in (0, 1), got {self.default_r_target}")
        if not 0 <= self.base_strength <= 1:
            raise InvalidParameter(f"base_strength must be in [0, 1], got {self.base_strength}")
        if not self.difficulty_min < self.difficulty_max:
            raise InvalidParameter("difficulty_min must be below difficulty_max")

    @property
    def decay(self) -> float:
        return compute_decay_factor(self.w)[0]

    @property
    def factor(self) -> float:
        return compute_decay_factor(self.w)[1]

    @classmethod
    def from_weights(
        cls,
        w: Optional[Sequence[float]] = None,
        num_relearning_steps: int = 0,
        enable_short_term: bool = True,
        **kwargs
    ) -> EngineConfig:
        """
        Build a config from a raw 17/19/21-length vector (or the defaults).
        """
        resolved = migrate_parameters(w, num_relearning_steps, enable_short_term)
        return cls(w=resolved, enable_short_term=enable_short_term, **kwargs)

    @classmethod
    def default(cls) -> EngineConfig:
        """Default FSRS-6 configuration."""
        return cls()
