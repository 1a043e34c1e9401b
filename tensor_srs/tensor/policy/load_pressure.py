"""
Load pressure from due cards vs daily capacity.

Pressure is a single scalar in [0.85, 1.0], non-increasing in due_today.
It only ever dampens.
"""

from __future__ import annotations

from tensor_srs.fsrs.constants import PRESSURE_MAX, PRESSURE_MIN


def compute_load_pressure(due_today: float, daily_capacity: float) -> float:
    """
    Formula:
        pressure = clamp(daily_capacity / due_today, 0.85, 1.0)

    Args:
        due_today: Number of cards due today
        daily_capacity: Reviews the user can handle per day

    Returns:
        Pressure multiplier (0.85 = maximum pressure)
    """
    if due_today <= 0:
        return PRESSURE_MAX  # Nothing due
    if daily_capacity <= 0:
        return PRESSURE_MIN

    return min(PRESSURE_MAX, max(PRESSURE_MIN, daily_capacity / due_today))
