"""
Client-side factor metrics (alternate stats mode).

The canonical dashboard only displays the precomputed stats snapshot.  In the
``computed`` mode the same table is derived here from the monthly returns in
the Series Store instead: annualised average return, annualised volatility and
Sharpe ratio (no risk-free adjustment), with ranks where only volatility is
lower-is-better.  No alpha or beta figures exist in this mode.
"""

from __future__ import annotations

import logging
import math

import numpy as np
import pandas as pd

from factor_explorer.data_pipeline.schemas import RANK_SUFFIX, STATS_KEY_COLUMN, TOTAL_FACTORS_COLUMN
from factor_explorer.data_pipeline.series_store import SeriesStore

logger = logging.getLogger(__name__)

PERIODS_PER_YEAR = 12

AVERAGE_RETURN = "Average Return (Ann.)"
VOLATILITY = "Volatility (Ann.)"
SHARPE = "Sharpe Ratio"

COMPUTED_METRICS: tuple[str, ...] = (AVERAGE_RETURN, VOLATILITY, SHARPE)
_LOWER_IS_BETTER = frozenset({VOLATILITY})


def annualized_stats(returns: np.ndarray, periods_per_year: int = PERIODS_PER_YEAR) -> dict[str, float]:
    """Annualised mean, volatility and Sharpe of a periodic return array.

    Volatility uses the sample standard deviation; fewer than two
    observations give NaN volatility and Sharpe.
    """
    clean = returns[np.isfinite(returns)]
    if clean.size == 0:
        return {AVERAGE_RETURN: math.nan, VOLATILITY: math.nan, SHARPE: math.nan}

    mean = float(clean.mean())
    std = float(clean.std(ddof=1)) if clean.size > 1 else math.nan
    sharpe = mean / std * math.sqrt(periods_per_year) if std and math.isfinite(std) else math.nan
    return {
        AVERAGE_RETURN: mean * periods_per_year,
        VOLATILITY: std * math.sqrt(periods_per_year),
        SHARPE: sharpe,
    }


def rank_metric(values: pd.Series, *, lower_is_better: bool) -> pd.Series:
    """Rank values with 1 = best; ties share the better rank, NaN stays unranked."""
    ranks = values.rank(ascending=lower_is_better, method="min", na_option="keep")
    return ranks.astype("Int64")


def compute_stats_frame(store: SeriesStore, periods_per_year: int = PERIODS_PER_YEAR) -> pd.DataFrame:
    """Build a frame shaped like ``factor_stats.csv`` from the store's returns."""
    records = []
    for factor_id in store.factor_ids:
        returns = np.array([obs.ret for obs in store.get(factor_id)], dtype=float)
        records.append({STATS_KEY_COLUMN: factor_id, **annualized_stats(returns, periods_per_year)})

    frame = pd.DataFrame.from_records(records, columns=[STATS_KEY_COLUMN, *COMPUTED_METRICS])
    for metric in COMPUTED_METRICS:
        frame[f"{metric}{RANK_SUFFIX}"] = rank_metric(
            frame[metric], lower_is_better=metric in _LOWER_IS_BETTER
        )
    frame[TOTAL_FACTORS_COLUMN] = len(frame)

    logger.info("Computed client-side stats for %d factors", len(frame))
    return frame


__all__ = [
    "AVERAGE_RETURN",
    "COMPUTED_METRICS",
    "PERIODS_PER_YEAR",
    "SHARPE",
    "VOLATILITY",
    "annualized_stats",
    "compute_stats_frame",
    "rank_metric",
]
