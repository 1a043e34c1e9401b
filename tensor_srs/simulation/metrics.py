"""
Metric computations for simulation reports.
"""

from __future__ import annotations

import pandas as pd

from tensor_srs.simulation.constants import REVIEW_COLUMNS
from tensor_srs.simulation.types import DistributionSummary


def build_reviews_df(rows: list[dict]) -> pd.DataFrame:
    """
    One row per simulated review, in simulation order.
    """
    if not rows:
        return pd.DataFrame(columns=REVIEW_COLUMNS)
    return pd.DataFrame(rows, columns=REVIEW_COLUMNS)


def summarize(values: pd.Series) -> DistributionSummary:
    """
    Mean, population variance, min and max of a series.
    """
    if values.empty:
        nan = float("nan")
        return DistributionSummary(mean=nan, variance=nan, minimum=nan, maximum=nan)
    return DistributionSummary(
        mean=float(values.mean()),
        variance=float(values.var(ddof=0)),
        minimum=float(values.min()),
        maximum=float(values.max()),
    )


def final_stabilities(reviews_df: pd.DataFrame) -> pd.Series:
    """
    Stability of each card after its last review.
    """
    if reviews_df.empty:
        return pd.Series(dtype="float64")
    last = reviews_df.sort_values(["card", "review"]).groupby("card").tail(1)
    return last["s_new"].astype("float64").reset_index(drop=True)


def grade_counts(reviews_df: pd.DataFrame) -> pd.Series:
    """
    Number of simulated reviews per grade name.
    """
    if reviews_df.empty:
        return pd.Series(dtype="int64")
    return reviews_df["grade"].value_counts().astype("int64")
