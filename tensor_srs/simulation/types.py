"""
Types for simulation reports.
"""

from __future__ import annotations

from dataclasses import dataclass

import pandas as pd


@dataclass(frozen=True)
class DistributionSummary:
    """
    Population statistics of one simulated quantity.
    """
    mean: float
    variance: float
    minimum: float
    maximum: float


@dataclass(frozen=True)
class SimulationReport:
    """
    Every simulated review plus summary figures.
    """
    num_cards: int
    reviews_per_card: int
    reviews: pd.DataFrame
    final_stability: DistributionSummary
    intervals: DistributionSummary
