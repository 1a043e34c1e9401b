"""
Tensor - the review transition pipeline

Quick start:
    from datetime import datetime, timezone
    from tensor_srs.fsrs import EngineConfig
    from tensor_srs.tensor import MemoryState, DefaultScheduler, review_step

    result = review_step(
        MemoryState(S=10, difficulty=5, t=5),
        "Good",
        config=EngineConfig.default(),
        scheduler=DefaultScheduler(),
        now=datetime.now(timezone.utc),
    )
"""

from tensor_srs.tensor.effective_state import (
    EffectiveState,
    compute_effective_state,
    compute_effective_time,
)
from tensor_srs.tensor.engine import ReviewResult, TensorEngine
from tensor_srs.tensor.memory_state import MemoryState
from tensor_srs.tensor.policy import ContextSignals, RetentionSignals
from tensor_srs.tensor.policy_merge import (
    MergedPolicyContext,
    PolicyDefaults,
    SessionContext,
    merge_context_signals,
    merge_policy_context,
    merge_retention_signals,
)
from tensor_srs.tensor.review_step import ReviewStepResult, review_step
from tensor_srs.tensor.scheduler import (
    DefaultScheduler,
    GradeScaledScheduler,
    MultiplierScheduler,
    Scheduler,
    SchedulerInput,
    SchedulerOutput,
)
from tensor_srs.tensor.stability_tensor import update_stability_tensor
from tensor_srs.tensor.validation import ValidationResult, validate_memory_state

__all__ = [
    "EffectiveState",
    "compute_effective_state",
    "compute_effective_time",
    "ReviewResult",
    "TensorEngine",
    "MemoryState",
    "ContextSignals",
    "RetentionSignals",
    "MergedPolicyContext",
    "PolicyDefaults",
    "SessionContext",
    "merge_context_signals",
    "merge_policy_context",
    "merge_retention_signals",
    "ReviewStepResult",
    "review_step",
    "DefaultScheduler",
    "GradeScaledScheduler",
    "MultiplierScheduler",
    "Scheduler",
    "SchedulerInput",
    "SchedulerOutput",
    "update_stability_tensor",
    "ValidationResult",
    "validate_memory_state",
]
