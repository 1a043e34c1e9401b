"""
Review Step - the review transition pipeline

Pure, stateless composition of the forgetting curve, the policy modules
and the stability update, followed by one call to the injected scheduler.

Main workflow (fixed order; recall is always computed before any
stability change):
1. Effective state (t_eff, R_eff) from the raw memory state
2. Load pressure from retention signals (1.0 without signals)
3. Retention target: explicit override, else from signals, else default
4. Pull R_eff toward the target with pressure-scaled strength
5. Stability tensor update driven by the adjusted R_eff
6. Multiply by session momentum, load pressure and context multiplier
7. Load-monotonicity clamp: under pressure, never exceed the
   pressure-scaled stability obtained without the adaptive pull
8. Hand the finalized figures to the scheduler

This module handles ONLY the algorithm logic. Storing the new state
and the scheduling suggestion is the caller's responsibility.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Union

from tensor_srs.errors import InvalidInput
from tensor_srs.fsrs.constants import Grade
from tensor_srs.fsrs.params import EngineConfig
from tensor_srs.tensor.effective_state import compute_effective_state
from tensor_srs.tensor.memory_state import MemoryState
from tensor_srs.tensor.policy import (
    ContextSignals,
    RetentionSignals,
    apply_adaptive_retention,
    compute_context_multiplier,
    compute_load_pressure,
    compute_r_target,
    compute_session_momentum,
)
from tensor_srs.tensor.scheduler import Scheduler, SchedulerInput
from tensor_srs.tensor.stability_tensor import update_stability_tensor
from tensor_srs.tensor.validation import ensure_finite, ensure_non_negative

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReviewStepResult:
    """
    Outcome of one review.

    next_interval and due come from the scheduler, everything else from
    the engine.
    """
    s_new: float
    r_eff: float
    t_eff: float
    next_interval: float
    due: datetime


def _validate_inputs(
    state: MemoryState,
    config: EngineConfig,
    now: datetime,
    r_target: Optional[float],
    retention_signals: Optional[RetentionSignals],
    reviews_so_far_in_session: float,
    context_signals: Optional[ContextSignals]
):
    """
    Reject anything the formulas would silently turn into NaN.

    MemoryState and the signal dataclasses validate their own fields on
    construction; this checks the remaining inputs and the cross-field
    bounds that depend on the config.
    """
    if not isinstance(state, MemoryState):
        raise InvalidInput(f"state must be a MemoryState, got {type(state).__name__}")
    if not config.difficulty_min <= state.difficulty <= config.difficulty_max:
        raise InvalidInput(
            f"difficulty must be in [{config.difficulty_min:g}, {config.difficulty_max:g}], "
            f"got {state.difficulty}"
        )
    if not isinstance(now, datetime):
        raise InvalidInput(f"now must be a datetime, got {now!r}")
    if r_target is not None and not 0 < ensure_finite("r_target", r_target) < 1:
        raise InvalidInput(f"r_target must be in (0, 1), got {r_target}")
    if retention_signals is not None and not isinstance(retention_signals, RetentionSignals):
        raise InvalidInput("retention_signals must be a RetentionSignals instance")
    if context_signals is not None and not isinstance(context_signals, ContextSignals):
        raise InvalidInput("context_signals must be a ContextSignals instance")
    ensure_non_negative("reviews_so_far_in_session", reviews_so_far_in_session)


def review_step(
    state: MemoryState,
    grade: Union[Grade, int, str],
    *,
    config: EngineConfig,
    scheduler: Scheduler,
    now: datetime,
    early: bool = False,
    postponed: bool = False,
    r_target: Optional[float] = None,
    retention_signals: Optional[RetentionSignals] = None,
    reviews_so_far_in_session: float = 0,
    context_signals: Optional[ContextSignals] = None
) -> ReviewStepResult:
    """
    Run one review through the pipeline.

    No state is stored or mutated. Either a complete result is returned or
    an error is raised before anything is computed.

    Args:
        state: Memory state before the review
        grade: Review outcome (Grade, 1..4, or a grade name)
        config: Resolved engine configuration
        scheduler: Interval/due-date calculator, called exactly once
        now: Review timestamp, passed through to the scheduler
        early: Review happened before it was due
        postponed: Review was postponed by the user
        r_target: Explicit retention target override
        retention_signals: Workload/performance signals (enable load pressure)
        reviews_so_far_in_session: Reviews already done in this session
        context_signals: Study-context signals

    Returns:
        ReviewStepResult

    Raises:
        InvalidGrade: grade is not one of the four grades
        InvalidInput: non-finite or out-of-domain input
    """
    grade = Grade.parse(grade)
    _validate_inputs(
        state, config, now, r_target, retention_signals,
        reviews_so_far_in_session, context_signals
    )

    w = config.w

    # 1. Effective state; context is applied to stability later, not here
    effective = compute_effective_state(
        w,
        state.S,
        state.t,
        scheduled_t=state.scheduled_t,
        early=early,
        postponed=postponed,
        context_multiplier=1.0,
    )

    # 2. Load pressure
    if retention_signals is not None:
        pressure = compute_load_pressure(
            retention_signals.due_today,
            retention_signals.daily_capacity
        )
    else:
        pressure = 1.0

    # 3. Retention target, independent of pressure
    if r_target is not None:
        target = r_target
    elif retention_signals is not None:
        target = compute_r_target(retention_signals)
    else:
        target = config.default_r_target

    # 4. Adaptive retention, strength scaled by pressure
    adjusted_r_eff = apply_adaptive_retention(
        effective.r_eff,
        target,
        config.base_strength * pressure
    )

    # 5. Stability update; multipliers are applied afterwards
    s_new = update_stability_tensor(
        w,
        state.S,
        adjusted_r_eff,
        grade,
        state.difficulty,
        scheduled_t=state.scheduled_t,
        actual_t=state.t,
    )

    # 6. Session momentum x load pressure x context
    session_momentum = compute_session_momentum(reviews_so_far_in_session)
    context_multiplier = compute_context_multiplier(context_signals)
    s_new = s_new * session_momentum * pressure * context_multiplier

    # 7. Higher load must never increase stability
    if retention_signals is not None and pressure < 1.0:
        baseline_s_new = update_stability_tensor(
            w,
            state.S,
            effective.r_eff,
            grade,
            state.difficulty,
            scheduled_t=state.scheduled_t,
            actual_t=state.t,
        )
        max_allowed = baseline_s_new * session_momentum * pressure * context_multiplier
        if s_new > max_allowed:
            logger.debug("Load clamp: S_new %.6f -> %.6f", s_new, max_allowed)
        s_new = min(s_new, max_allowed)

    logger.debug(
        "review_step grade=%s S=%s t=%s -> t_eff=%.4f R_eff=%.6f pressure=%.4f "
        "target=%.4f momentum=%.4f context=%.4f S_new=%.6f",
        grade.name, state.S, state.t, effective.t_eff, adjusted_r_eff, pressure,
        target, session_momentum, context_multiplier, s_new,
    )

    # 8. Scheduling
    scheduled = scheduler.schedule(SchedulerInput(
        s_eff=s_new,
        r_eff=adjusted_r_eff,
        t_eff=effective.t_eff,
        grade=grade,
        difficulty=state.difficulty,
        now=now,
    ))

    return ReviewStepResult(
        s_new=s_new,
        r_eff=adjusted_r_eff,
        t_eff=effective.t_eff,
        next_interval=scheduled.next_interval,
        due=scheduled.due,
    )
