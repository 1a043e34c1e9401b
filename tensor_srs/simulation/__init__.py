"""
Simulation package exports.
"""

from tensor_srs.simulation.constants import GRADE_DISTRIBUTION
from tensor_srs.simulation.metrics import grade_counts
from tensor_srs.simulation.service import run_monte_carlo, sample_grade
from tensor_srs.simulation.types import DistributionSummary, SimulationReport

__all__ = [
    "GRADE_DISTRIBUTION",
    "grade_counts",
    "run_monte_carlo",
    "sample_grade",
    "DistributionSummary",
    "SimulationReport",
]
