"""Shared pytest fixtures for factor_explorer tests."""

from __future__ import annotations

from pathlib import Path

import numpy as np
import pandas as pd
import pytest

from factor_explorer.data_pipeline.name_resolver import NameResolver
from factor_explorer.data_pipeline.series_store import SeriesStore
from factor_explorer.data_pipeline.stats_table import StatsTable

LOCATION = "developed"
WEIGHTING = "vw_cap"


def _rows(name: str, dates: list[str], rets: list[float], location: str = LOCATION, weighting: str = WEIGHTING) -> list[dict[str, object]]:
    return [
        {"location": location, "weighting": weighting, "name": name, "date": d, "ret": r}
        for d, r in zip(dates, rets)
    ]


@pytest.fixture
def returns_frame() -> pd.DataFrame:
    """Two overlapping factors plus rows for other universes that must be filtered out."""
    rows: list[dict[str, object]] = []
    rows += _rows("x", ["2000-01-31", "2000-02-29", "2000-04-30"], [0.01, -0.02, 0.05])
    rows += _rows("y", ["2000-02-29", "2000-03-31", "2000-04-30"], [0.00, 0.02, 0.01])
    rows += _rows("x", ["2000-01-31", "2000-02-29"], [0.50, 0.50], location="usa")
    rows += _rows("y", ["2000-02-29"], [0.90], weighting="ew")
    return pd.DataFrame(rows)


@pytest.fixture
def long_returns_frame() -> pd.DataFrame:
    """Five factors with 60 monthly returns each, starting on different months."""
    rows: list[dict[str, object]] = []
    for idx, name in enumerate(["be_me", "ret_12_1", "qmj", "betabab_1260d", "ivol_capm_21d"]):
        rng = np.random.default_rng(seed=2024 + idx)
        dates = pd.date_range(start="2010-01-31", periods=60 + idx * 3, freq="ME")[idx * 3 :]
        rets = rng.normal(0.005, 0.03, len(dates))
        rows += _rows(name, [d.strftime("%Y-%m-%d") for d in dates], rets.tolist())
    return pd.DataFrame(rows)


@pytest.fixture
def names_frame() -> pd.DataFrame:
    return pd.DataFrame(
        {
            "abr_jkp": ["x", "y", "z"],
            "name_new": ["Value", "Momentum", "Émerging Quality"],
        }
    )


@pytest.fixture
def stats_frame() -> pd.DataFrame:
    """Precomputed snapshot shaped like factor_stats.csv."""
    return pd.DataFrame(
        {
            "Factor": ["x", "y", "z"],
            "Average Return (Ann. %)": [6.5, 9.25, 3.0],
            "Average Return (Ann. %)_rank": [2, 1, 3],
            "Volatility (Ann. %)": [12.0, 18.5, 8.0],
            "Volatility (Ann. %)_rank": [2, 3, 1],
            "Sharpe Ratio": [0.54, 0.5, 0.375],
            "Sharpe Ratio_rank": [1, 2, 3],
            "CAPM Beta": [0.1, -0.2, np.nan],
            "CAPM Beta_rank": [1, 2, np.nan],
            "CAPM Alpha (Ann. %)": [5.0, 8.0, 2.5],
            "CAPM Alpha (Ann. %)_rank": [2, 1, 3],
            "FF4 Alpha (Ann. %)": [1.2, 0.4, -0.3],
            "FF4 Alpha (Ann. %)_rank": [1, 2, 3],
            "total_factors": [153, 153, 153],
        }
    )


@pytest.fixture
def store(returns_frame: pd.DataFrame) -> SeriesStore:
    return SeriesStore.from_frame(returns_frame, location=LOCATION, weighting=WEIGHTING)


@pytest.fixture
def stats(stats_frame: pd.DataFrame) -> StatsTable:
    return StatsTable.from_frame(stats_frame)


@pytest.fixture
def names(names_frame: pd.DataFrame) -> NameResolver:
    return NameResolver.from_frame(names_frame)


@pytest.fixture
def data_dir(
    tmp_path: Path,
    returns_frame: pd.DataFrame,
    names_frame: pd.DataFrame,
    stats_frame: pd.DataFrame,
) -> Path:
    """Temporary data directory holding the three startup snapshots."""
    directory = tmp_path / "data"
    directory.mkdir()
    returns_frame.to_csv(directory / "data.csv", index=False)
    names_frame.to_csv(directory / "factor_names.csv", index=False, sep=";")
    stats_frame.to_csv(directory / "factor_stats.csv", index=False)
    return directory
