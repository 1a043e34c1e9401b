"""
Memory State - per-card values consumed and produced by a review

Key concepts:
- Stability (S): days until recall probability decays to 0.9
- Difficulty (D): how fast stability grows with successful reviews
- Elapsed time (t): days since the last review
- Scheduled time (scheduled_t): planned elapsed days, if the card had a due date

The caller owns MemoryState. The engine never mutates it; each review
returns a new instance.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from tensor_srs.errors import InvalidInput
from tensor_srs.tensor.validation import ensure_finite, ensure_non_negative


@dataclass(frozen=True)
class MemoryState:
    """
    Memory state for a single card.
    """
    S: float  # Stability, in days
    difficulty: float  # D, nominal range 0-10
    t: float  # Days since last review
    scheduled_t: Optional[float] = None  # Planned elapsed days

    def __post_init__(self):
        if ensure_finite("S", self.S) <= 0:
            raise InvalidInput(f"S must be > 0, got {self.S}")
        ensure_finite("difficulty", self.difficulty)
        ensure_non_negative("t", self.t)
        if self.scheduled_t is not None:
            ensure_non_negative("scheduled_t", self.scheduled_t)

    def with_elapsed(self, t: float) -> MemoryState:
        """Copy of this state with a new elapsed time."""
        return replace(self, t=t)
