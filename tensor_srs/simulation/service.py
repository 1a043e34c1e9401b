"""
Monte Carlo harness: runs many synthetic cards through review_step.
"""

from __future__ import annotations

import logging
import random
from datetime import datetime, timezone
from typing import Optional

from tensor_srs.errors import InvalidInput
from tensor_srs.fsrs.constants import Grade
from tensor_srs.fsrs.params import EngineConfig
from tensor_srs.simulation.constants import (
    DEFAULT_INITIAL_DIFFICULTY,
    DEFAULT_INITIAL_STABILITY,
    DEFAULT_NUM_CARDS,
    DEFAULT_REVIEWS_PER_CARD,
    GRADE_DISTRIBUTION,
    INITIAL_ELAPSED_DAYS,
)
from tensor_srs.simulation.metrics import build_reviews_df, final_stabilities, summarize
from tensor_srs.simulation.types import SimulationReport
from tensor_srs.tensor.memory_state import MemoryState
from tensor_srs.tensor.review_step import review_step
from tensor_srs.tensor.scheduler import GradeScaledScheduler, Scheduler

logger = logging.getLogger(__name__)


def sample_grade(rng: random.Random) -> Grade:
    """Draw a grade from GRADE_DISTRIBUTION."""
    r = rng.random()
    acc = 0.0
    for grade, p in GRADE_DISTRIBUTION:
        acc += p
        if r <= acc:
            return grade
    return Grade.GOOD


def run_monte_carlo(
    config: Optional[EngineConfig] = None,
    num_cards: int = DEFAULT_NUM_CARDS,
    reviews_per_card: int = DEFAULT_REVIEWS_PER_CARD,
    initial_stability: float = DEFAULT_INITIAL_STABILITY,
    initial_difficulty: float = DEFAULT_INITIAL_DIFFICULTY,
    seed: Optional[int] = None,
    scheduler: Optional[Scheduler] = None,
    start: Optional[datetime] = None
) -> SimulationReport:
    """
    Simulate independent cards, each reviewed reviews_per_card times.

    Each card starts at t = 1 day; after every review the next elapsed
    time is max(1, next_interval) and the review counter doubles as the
    in-session review count. The same seed always yields the same report.

    Args:
        config: Engine config (defaults when None)
        num_cards: Number of simulated cards
        reviews_per_card: Reviews per card
        initial_stability: Starting S of every card
        initial_difficulty: Starting difficulty of every card
        seed: Seed for the grade sampler
        scheduler: Scheduler (GradeScaledScheduler when None)
        start: Timestamp of the first review of every card

    Returns:
        SimulationReport
    """
    if num_cards < 0 or reviews_per_card < 0:
        raise InvalidInput("num_cards and reviews_per_card must be non-negative")

    config = config or EngineConfig.default()
    scheduler = scheduler or GradeScaledScheduler()
    start = start or datetime.now(timezone.utc)
    rng = random.Random(seed)

    logger.info(
        "Running Monte Carlo simulation: %d cards x %d reviews (seed=%s)",
        num_cards, reviews_per_card, seed,
    )

    rows = []
    for card in range(num_cards):
        state = MemoryState(
            S=initial_stability,
            difficulty=initial_difficulty,
            t=INITIAL_ELAPSED_DAYS,
        )
        now = start

        for review in range(reviews_per_card):
            grade = sample_grade(rng)
            result = review_step(
                state,
                grade,
                config=config,
                scheduler=scheduler,
                now=now,
                reviews_so_far_in_session=review,
            )
            rows.append({
                "card": card,
                "review": review,
                "grade": grade.name,
                "t": state.t,
                "s_before": state.S,
                "s_new": result.s_new,
                "r_eff": result.r_eff,
                "next_interval": result.next_interval,
            })

            state = MemoryState(
                S=result.s_new,
                difficulty=state.difficulty,
                t=max(1.0, result.next_interval),
            )
            now = result.due

    reviews_df = build_reviews_df(rows)
    report = SimulationReport(
        num_cards=num_cards,
        reviews_per_card=reviews_per_card,
        reviews=reviews_df,
        final_stability=summarize(final_stabilities(reviews_df)),
        intervals=summarize(reviews_df["next_interval"].astype("float64")),
    )

    logger.info(
        "Simulation done: mean final S=%.2f, mean interval=%.2f days",
        report.final_stability.mean, report.intervals.mean,
    )
    return report
