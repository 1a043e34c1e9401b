"""
FSRS - forgetting curve and stability formulas

Pure functions of a resolved 21-length weight vector. No state, no I/O.
"""

from tensor_srs.fsrs.constants import DEFAULT_W, Grade, S_MAX, S_MIN
from tensor_srs.fsrs.params import (
    EngineConfig,
    check_parameters,
    clip_parameters,
    migrate_parameters,
)
from tensor_srs.fsrs.recall import (
    compute_decay_factor,
    forgetting_curve,
    retrievability,
)
from tensor_srs.fsrs.stability import (
    init_stability,
    next_forget_stability,
    next_recall_stability,
    next_short_term_stability,
)

__all__ = [
    "DEFAULT_W",
    "Grade",
    "S_MAX",
    "S_MIN",
    "EngineConfig",
    "check_parameters",
    "clip_parameters",
    "migrate_parameters",
    "compute_decay_factor",
    "forgetting_curve",
    "retrievability",
    "init_stability",
    "next_forget_stability",
    "next_recall_stability",
    "next_short_term_stability",
]
