"""
tensor_srs - single-card review transition engine

FSRS-6 forgetting curve and stability formulas, extended with workload,
session and context policies. Scheduling is delegated to a pluggable
Scheduler.

Quick start:
    from datetime import datetime, timezone
    from tensor_srs import MemoryState, TensorEngine

    engine = TensorEngine()
    result = engine.review(
        MemoryState(S=10, difficulty=5, t=5),
        "Good",
        session_context=None,
        now=datetime.now(timezone.utc),
    )
    result.new_memory_state, result.scheduling_suggestion.due
"""

from tensor_srs.errors import InvalidGrade, InvalidInput, InvalidParameter, TensorError
from tensor_srs.fsrs import EngineConfig, Grade
from tensor_srs.tensor import (
    DefaultScheduler,
    MemoryState,
    ReviewResult,
    SessionContext,
    TensorEngine,
    review_step,
)

__version__ = "0.1.0"

__all__ = [
    "InvalidGrade",
    "InvalidInput",
    "InvalidParameter",
    "TensorError",
    "EngineConfig",
    "Grade",
    "DefaultScheduler",
    "MemoryState",
    "ReviewResult",
    "SessionContext",
    "TensorEngine",
    "review_step",
]
