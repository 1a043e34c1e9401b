"""
Policy merging

Combines caller-level policy defaults with runtime session context.
Runtime values always take precedence; defaults only fill gaps.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Mapping, Optional

from tensor_srs.errors import InvalidInput
from tensor_srs.tensor.policy import ContextSignals, RetentionSignals
from tensor_srs.tensor.scheduler import Scheduler


REQUIRED_RETENTION_FIELDS = (
    "backlog_size",
    "recent_failure_rate",
    "session_length",
    "daily_capacity",
    "due_today",
)


@dataclass(frozen=True)
class SessionContext:
    """
    Runtime policy context supplied with a review.

    Signal mappings may be partial; missing fields are filled from
    PolicyDefaults.
    """
    r_target: Optional[float] = None
    retention_signals: Optional[Mapping[str, Any]] = None
    context_signals: Optional[Mapping[str, Any]] = None
    reviews_so_far_in_session: Optional[int] = None
    scheduler: Optional[Scheduler] = None
    early: Optional[bool] = None
    postponed: Optional[bool] = None


@dataclass(frozen=True)
class PolicyDefaults:
    """Defaults that runtime context is merged over."""
    retention_signals: Optional[Mapping[str, Any]] = None
    context_signals: Optional[Mapping[str, Any]] = None
    retention_target: Optional[float] = None
    scheduler: Optional[Scheduler] = None


@dataclass(frozen=True)
class MergedPolicyContext:
    """Fully-resolved policy inputs for one review_step call."""
    r_target: Optional[float]
    retention_signals: Optional[RetentionSignals]
    context_signals: Optional[ContextSignals]
    reviews_so_far_in_session: int
    scheduler: Scheduler
    early: bool
    postponed: bool


def _merge(
    defaults: Optional[Mapping[str, Any]],
    runtime: Optional[Mapping[str, Any]],
    allowed: set[str],
    label: str
) -> dict[str, Any]:
    merged = {}
    for source in (defaults or {}, runtime or {}):
        for key, value in source.items():
            if key not in allowed:
                raise InvalidInput(f"Unknown {label} field: {key!r}")
            if value is not None:
                merged[key] = value
    return merged


def merge_retention_signals(
    defaults: Optional[Mapping[str, Any]],
    runtime: Optional[Mapping[str, Any]]
) -> Optional[RetentionSignals]:
    """
    Merge retention signals, runtime over defaults.

    Returns:
        RetentionSignals, or None if nothing was supplied or any of the
        five required fields is still missing after merging
    """
    if defaults is None and runtime is None:
        return None

    allowed = {f.name for f in fields(RetentionSignals)}
    merged = _merge(defaults, runtime, allowed, "retention signal")

    if any(name not in merged for name in REQUIRED_RETENTION_FIELDS):
        return None
    return RetentionSignals(**merged)


def merge_context_signals(
    defaults: Optional[Mapping[str, Any]],
    runtime: Optional[Mapping[str, Any]]
) -> Optional[ContextSignals]:
    """
    Merge context signals, runtime over defaults.

    Returns:
        ContextSignals, or None if the merged mapping is empty
    """
    if defaults is None and runtime is None:
        return None

    allowed = {f.name for f in fields(ContextSignals)}
    merged = _merge(defaults, runtime, allowed, "context signal")
    return ContextSignals(**merged) if merged else None


def merge_policy_context(
    defaults: Optional[PolicyDefaults],
    session: SessionContext,
    fallback_scheduler: Scheduler
) -> MergedPolicyContext:
    """
    Resolve every policy input for one review.

    Precedence: session context > defaults > fallback.
    """
    defaults = defaults or PolicyDefaults()

    r_target = session.r_target if session.r_target is not None else defaults.retention_target
    scheduler = session.scheduler or defaults.scheduler or fallback_scheduler

    return MergedPolicyContext(
        r_target=r_target,
        retention_signals=merge_retention_signals(
            defaults.retention_signals,
            session.retention_signals
        ),
        context_signals=merge_context_signals(
            defaults.context_signals,
            session.context_signals
        ),
        reviews_so_far_in_session=session.reviews_so_far_in_session or 0,
        scheduler=scheduler,
        early=bool(session.early),
        postponed=bool(session.postponed),
    )
