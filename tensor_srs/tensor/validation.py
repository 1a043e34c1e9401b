"""
Input validation helpers.

The formulas themselves do not guard against NaN, infinities or
out-of-domain values, so every entry point checks its inputs here first.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from tensor_srs.errors import InvalidInput
from tensor_srs.fsrs.constants import S_MAX


def ensure_finite(name: str, value: Any) -> float:
    """
    Return value as a float, or raise InvalidInput if it is not a finite number.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidInput(f"{name} must be a number, got {value!r}")
    if not math.isfinite(value):
        raise InvalidInput(f"{name} must be finite, got {value!r}")
    return float(value)


def ensure_non_negative(name: str, value: Any) -> float:
    value = ensure_finite(name, value)
    if value < 0:
        raise InvalidInput(f"{name} must be >= 0, got {value}")
    return value


def ensure_unit_interval(name: str, value: Any) -> float:
    value = ensure_finite(name, value)
    if not 0.0 <= value <= 1.0:
        raise InvalidInput(f"{name} must be in [0, 1], got {value}")
    return value


def ensure_optional_unit_interval(name: str, value: Optional[Any]) -> Optional[float]:
    if value is None:
        return None
    return ensure_unit_interval(name, value)


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a non-raising validation pass."""
    valid: bool
    errors: list[str] = field(default_factory=list)


def _is_number(value: Any) -> bool:
    return (
        isinstance(value, (int, float))
        and not isinstance(value, bool)
        and math.isfinite(value)
    )


def validate_memory_state(
    data: Mapping[str, Any],
    d_min: float = 0.0,
    d_max: float = 10.0
) -> ValidationResult:
    """
    Check a raw memory-state record (e.g. loaded from storage).

    Collects every problem instead of stopping at the first one.

    Args:
        data: Mapping with keys S, difficulty, t and optionally scheduled_t
        d_min: Lowest accepted difficulty
        d_max: Highest accepted difficulty

    Returns:
        ValidationResult with valid flag and error messages
    """
    errors = []

    s = data.get("S")
    if not _is_number(s) or s <= 0:
        errors.append("Stability (S) must be a positive number")
    elif s > S_MAX:
        errors.append(f"Stability (S) exceeds maximum allowed value ({S_MAX:g})")

    difficulty = data.get("difficulty")
    if not _is_number(difficulty):
        errors.append("Difficulty must be a number")
    elif not d_min <= difficulty <= d_max:
        errors.append(f"Difficulty must be between {d_min:g} and {d_max:g}")

    t = data.get("t")
    if not _is_number(t) or t < 0:
        errors.append("Elapsed time (t) must be a non-negative number")

    scheduled_t = data.get("scheduled_t")
    if scheduled_t is not None and (not _is_number(scheduled_t) or scheduled_t < 0):
        errors.append("Scheduled time (scheduled_t) must be a non-negative number")

    return ValidationResult(valid=not errors, errors=errors)
