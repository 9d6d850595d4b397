"""
Leaderboard - every factor ranked by one metric, truncated to the top N.

``descending=True`` (the default) lists the best factors first.  For
lower-is-better metrics (volatility, annoyance score) that means sorting the
raw values ascending, so the sort direction is inverted for them.  ``Value``
is scaled for display the same way as the performance table, and
``Display`` carries the formatted text (``"16.00%"``).
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

import pandas as pd

from factor_explorer.configs import MetricSpec, is_lower_better
from factor_explorer.data_pipeline.name_resolver import NameResolver
from factor_explorer.data_pipeline.stats_table import StatsTable
from factor_explorer.presentation.performance_table import format_metric

logger = logging.getLogger(__name__)

LEADERBOARD_COLUMNS = ["Position", "Factor", "Code", "Value", "Display", "Rank"]


def metric_spec(metric: str, specs: Sequence[MetricSpec] = ()) -> MetricSpec:
    """The configured spec for *metric*, or an unscaled one labelled by name."""
    for spec in specs:
        if spec.name == metric:
            return spec
    return MetricSpec(name=metric, label=metric, lower_is_better=is_lower_better(metric))


def leaderboard(
    stats: StatsTable,
    metric: str,
    *,
    names: NameResolver | None = None,
    descending: bool = True,
    top_n: int = 10,
    specs: Sequence[MetricSpec] = (),
) -> pd.DataFrame:
    """Rank all factors by *metric* and keep the first *top_n*.

    Factors without a value for the metric are left out.  Ties keep the
    stats-file order.
    """
    if top_n < 1:
        raise ValueError("top_n must be at least 1")
    if not stats.has_metric(metric):
        logger.warning("Metric %r not in stats snapshot; empty leaderboard", metric)
        return pd.DataFrame(columns=LEADERBOARD_COLUMNS)

    spec = metric_spec(metric, specs)
    records = [
        {
            "Code": row.factor_id,
            "Factor": names.display_name(row.factor_id) if names is not None else row.factor_id,
            "Raw": row.value(metric),
            "Rank": row.rank(metric),
        }
        for row in stats
        if row.value(metric) is not None
    ]
    if not records:
        return pd.DataFrame(columns=LEADERBOARD_COLUMNS)

    frame = pd.DataFrame.from_records(records)
    lower_better = is_lower_better(metric, tuple(specs))
    ascending = descending if lower_better else not descending
    frame = frame.sort_values("Raw", ascending=ascending, kind="mergesort").head(top_n)
    frame = frame.reset_index(drop=True)
    frame.insert(0, "Position", range(1, len(frame) + 1))
    frame["Value"] = [spec.display_value(v) for v in frame["Raw"]]
    frame["Display"] = [format_metric(v, spec) for v in frame["Raw"]]
    frame["Rank"] = frame["Rank"].astype("Int64")
    return frame[LEADERBOARD_COLUMNS]


def top_n_bounds(factor_count: int, preferred: int) -> tuple[int, int]:
    """Upper bound and initial value for the "factors shown" control.

    Both are at least 1.  When the upper bound is 1 there is nothing to
    choose, and the page shows the single row without a slider.
    """
    upper = max(1, factor_count)
    return upper, min(max(1, preferred), upper)
