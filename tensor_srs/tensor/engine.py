"""
Tensor engine facade

Single entry point for collaborators that hold a memory state and a
review outcome: merges policy context, runs the pipeline, and returns the
state the caller should store next.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Union

from tensor_srs.fsrs.constants import Grade
from tensor_srs.fsrs.params import EngineConfig
from tensor_srs.tensor.memory_state import MemoryState
from tensor_srs.tensor.policy_merge import (
    PolicyDefaults,
    SessionContext,
    merge_policy_context,
)
from tensor_srs.tensor.review_step import review_step
from tensor_srs.tensor.scheduler import DefaultScheduler, Scheduler, SchedulerOutput


@dataclass(frozen=True)
class ReviewResult:
    """
    Result of TensorEngine.review.
    """
    new_memory_state: MemoryState
    scheduling_suggestion: SchedulerOutput
    r_eff: float  # Effective recall used in the computation
    t_eff: float  # Effective elapsed time used in the computation


class TensorEngine:
    """
    Holds the immutable config and a fallback scheduler; no per-card state.

    Safe to share across threads.
    """

    def __init__(
        self,
        config: Optional[EngineConfig] = None,
        default_scheduler: Optional[Scheduler] = None
    ):
        self.config = config or EngineConfig.default()
        self.default_scheduler = default_scheduler or DefaultScheduler()

    def review(
        self,
        memory_state: MemoryState,
        outcome: Union[Grade, int, str],
        session_context: Optional[SessionContext],
        now: datetime,
        defaults: Optional[PolicyDefaults] = None
    ) -> ReviewResult:
        """
        Review a card and return its next memory state.

        The new state keeps the difficulty, resets t to 0, and records the
        suggested interval as scheduled_t so that a later delayed review
        is charged by the anti-hoarding rule.

        Args:
            memory_state: State before the review
            outcome: Review grade
            session_context: Runtime policy context
            now: Review timestamp
            defaults: Policy defaults merged under the session context

        Returns:
            ReviewResult
        """
        merged = merge_policy_context(
            defaults,
            session_context or SessionContext(),
            self.default_scheduler
        )

        result = review_step(
            memory_state,
            outcome,
            config=self.config,
            scheduler=merged.scheduler,
            now=now,
            early=merged.early,
            postponed=merged.postponed,
            r_target=merged.r_target,
            retention_signals=merged.retention_signals,
            reviews_so_far_in_session=merged.reviews_so_far_in_session,
            context_signals=merged.context_signals,
        )

        return ReviewResult(
            new_memory_state=MemoryState(
                S=result.s_new,
                difficulty=memory_state.difficulty,
                t=0.0,
                scheduled_t=result.next_interval,
            ),
            scheduling_suggestion=SchedulerOutput(
                next_interval=result.next_interval,
                due=result.due,
            ),
            r_eff=result.r_eff,
            t_eff=result.t_eff,
        )
