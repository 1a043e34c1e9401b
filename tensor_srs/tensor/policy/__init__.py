"""Bounded, monotonic policy adjustments applied around the stability update."""

from tensor_srs.tensor.policy.adaptive_retention import (
    RetentionSignals,
    apply_adaptive_retention,
    apply_pressure_scaled_adaptive_retention,
    compute_r_target,
)
from tensor_srs.tensor.policy.context_modulation import (
    ContextSignals,
    compute_context_multiplier,
)
from tensor_srs.tensor.policy.load_pressure import compute_load_pressure
from tensor_srs.tensor.policy.session_momentum import compute_session_momentum

__all__ = [
    "RetentionSignals",
    "apply_adaptive_retention",
    "apply_pressure_scaled_adaptive_retention",
    "compute_r_target",
    "ContextSignals",
    "compute_context_multiplier",
    "compute_load_pressure",
    "compute_session_momentum",
]
