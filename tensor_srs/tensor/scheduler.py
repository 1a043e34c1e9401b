"""
Scheduler capability

The engine hands its finished stability/recall figures to an injected
scheduler exactly once per review and never looks inside it. A scheduler
must be a pure, reentrant function of its input: swapping one scheduler
for another may change next_interval and due, never S_new, R_eff or t_eff.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Mapping, Protocol

from tensor_srs.fsrs.constants import Grade


@dataclass(frozen=True)
class SchedulerInput:
    """Finalized engine output handed to the scheduler."""
    s_eff: float  # Effective stability (> 0)
    r_eff: float  # Effective recall probability, in (0, 1)
    t_eff: float  # Effective elapsed days (>= 0)
    grade: Grade
    difficulty: float
    now: datetime


@dataclass(frozen=True)
class SchedulerOutput:
    """Scheduling suggestion."""
    next_interval: float  # Days
    due: datetime


class Scheduler(Protocol):
    """Anything with a single schedule() method."""

    def schedule(self, scheduler_input: SchedulerInput) -> SchedulerOutput:
        ...


def _due_after(now: datetime, days: float) -> datetime:
    return now + timedelta(days=days)


class DefaultScheduler:
    """Uses effective stability directly as the next interval."""

    def schedule(self, scheduler_input: SchedulerInput) -> SchedulerOutput:
        next_interval = scheduler_input.s_eff
        return SchedulerOutput(
            next_interval=next_interval,
            due=_due_after(scheduler_input.now, next_interval),
        )


class MultiplierScheduler:
    """
    Interval = s_eff * interval_multiplier.

    Handy in tests: two instances with different multipliers are two
    distinct scheduler implementations.
    """

    def __init__(self, interval_multiplier: float = 1.0):
        self.interval_multiplier = interval_multiplier

    def schedule(self, scheduler_input: SchedulerInput) -> SchedulerOutput:
        next_interval = scheduler_input.s_eff * self.interval_multiplier
        return SchedulerOutput(
            next_interval=next_interval,
            due=_due_after(scheduler_input.now, next_interval),
        )


GRADE_INTERVAL_MULTIPLIER: Mapping[Grade, float] = {
    Grade.AGAIN: 0.05,
    Grade.HARD: 0.15,
    Grade.GOOD: 0.3,
    Grade.EASY: 0.6,
}


class GradeScaledScheduler:
    """
    Deterministic scheduler used by the Monte Carlo simulation.

    Interval = max(1, s_eff * multiplier(grade)).
    """

    def __init__(self, multipliers: Mapping[Grade, float] = GRADE_INTERVAL_MULTIPLIER):
        self.multipliers = dict(multipliers)

    def schedule(self, scheduler_input: SchedulerInput) -> SchedulerOutput:
        multiplier = self.multipliers.get(scheduler_input.grade, 1.0)
        next_interval = max(1.0, scheduler_input.s_eff * multiplier)
        return SchedulerOutput(
            next_interval=next_interval,
            due=_due_after(scheduler_input.now, next_interval),
        )
