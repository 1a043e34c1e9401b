"""
Forgetting Curve

Power-law forgetting curve used by FSRS-6:

    decay  = -w20
    factor = exp(ln(0.9) / decay) - 1
    R(t,S) = (1 + factor * t / S) ^ decay

Interpretation:
- Immediately after review: R = 1.0
- When t == S: R = 0.9 (stability is the 90% point)
- As time passes R decays smoothly, more slowly for larger S
"""

from __future__ import annotations

import math
from typing import Sequence, Union

from tensor_srs.errors import InvalidParameter
from tensor_srs.fsrs.constants import ROUND_DIGITS


def compute_decay_factor(w: Union[Sequence[float], float]) -> tuple[float, float]:
    """
    Derive (decay, factor) from a weight vector or a bare w20 value.

    Args:
        w: Full weight vector (w20 is read from index 20) or the w20 value itself

    Returns:
        (decay, factor) with factor rounded to 8 fractional digits

    Raises:
        InvalidParameter: decay is zero or non-finite
    """
    w20 = w if isinstance(w, (int, float)) else w[20]
    decay = -float(w20)
    if decay == 0 or not math.isfinite(decay):
        raise InvalidParameter(f"Degenerate decay: w20={w20!r}")

    factor = math.exp(math.log(0.9) / decay) - 1.0
    return decay, round(factor, ROUND_DIGITS)


def forgetting_curve(
    decay: float,
    factor: float,
    elapsed_days: float,
    stability: float
) -> float:
    """
    Recall probability after elapsed_days for a memory of the given stability.

    Callers must pass stability > 0; no floor is substituted here.

    Args:
        decay: Decay from compute_decay_factor
        factor: Factor from compute_decay_factor
        elapsed_days: Days since last review (t >= 0)
        stability: Stability in days

    Returns:
        Retrievability rounded to 8 fractional digits
    """
    return round(
        math.pow(1 + factor * elapsed_days / stability, decay),
        ROUND_DIGITS
    )


def retrievability(
    w: Sequence[float],
    elapsed_days: float,
    stability: float
) -> float:
    """Forgetting curve evaluated with the decay held in w."""
    decay, factor = compute_decay_factor(w)
    return forgetting_curve(decay, factor, elapsed_days, stability)
