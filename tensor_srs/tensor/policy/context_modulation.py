"""
Context modulation: light, bounded, multiplicative adjustment for the
study environment.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from tensor_srs.fsrs.constants import CONTEXT_MAX, CONTEXT_MIN
from tensor_srs.tensor.validation import ensure_optional_unit_interval


@dataclass(frozen=True)
class ContextSignals:
    """
    Optional study-context signals, each in [0, 1].

    A field left as None contributes nothing.
    """
    environment_quality: Optional[float] = None  # 1.0 = optimal environment
    difficulty: Optional[float] = None  # 0.0 = easiest material
    time_of_day: Optional[float] = None  # 1.0 = optimal time

    def __post_init__(self):
        ensure_optional_unit_interval("environment_quality", self.environment_quality)
        ensure_optional_unit_interval("difficulty", self.difficulty)
        ensure_optional_unit_interval("time_of_day", self.time_of_day)


def compute_context_multiplier(signals: Optional[ContextSignals] = None) -> float:
    """
    Formula:
        1.0 + 0.1 * (environment_quality - 0.5)
            + 0.05 * (1 - difficulty)
            + 0.05 * (time_of_day - 0.5)
        clamped to [0.85, 1.05]

    Returns:
        1.0 when no signals are given
    """
    if signals is None:
        return 1.0

    multiplier = 1.0

    if signals.environment_quality is not None:
        multiplier += (signals.environment_quality - 0.5) * 0.1

    # Easier material gets a slight boost
    if signals.difficulty is not None:
        multiplier += (1.0 - signals.difficulty) * 0.05

    if signals.time_of_day is not None:
        multiplier += (signals.time_of_day - 0.5) * 0.05

    return min(CONTEXT_MAX, max(CONTEXT_MIN, multiplier))
