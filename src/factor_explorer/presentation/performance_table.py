"""Rows of the performance table for the current selection."""

from __future__ import annotations

import logging
from collections.abc import Sequence

import pandas as pd

from factor_explorer.configs import MetricSpec
from factor_explorer.data_pipeline.name_resolver import NameResolver
from factor_explorer.data_pipeline.stats_table import StatsTable
from factor_explorer.data_pipeline.types import FactorMetricsRow

logger = logging.getLogger(__name__)

NOT_AVAILABLE = "n/a"
FACTOR_COLUMN = "Factor"
CODE_COLUMN = "Code"


def format_metric(value: float | None, spec: MetricSpec, decimals: int = 2) -> str:
    if value is None:
        return NOT_AVAILABLE
    text = f"{spec.display_value(value):.{decimals}f}"
    return f"{text}%" if spec.percent else text


def format_cell(row: FactorMetricsRow, spec: MetricSpec) -> str:
    """``"12.34% (3/20)"``; the rank suffix is dropped when no rank exists."""
    value = row.value(spec.name)
    if value is None:
        return NOT_AVAILABLE
    text = format_metric(value, spec)
    rank = row.rank(spec.name)
    if rank is None:
        return text
    return f"{text} ({rank}/{row.total})"


def build_performance_rows(
    selection: Sequence[str],
    stats: StatsTable,
    names: NameResolver,
    columns: Sequence[MetricSpec],
) -> list[dict[str, str]]:
    """One row per selected factor that has stats, in selection order."""
    rows: list[dict[str, str]] = []
    for factor_id in selection:
        metrics = stats.get(factor_id)
        if metrics is None:
            logger.warning("No stats row for factor %s; omitted from table", factor_id)
            continue
        row = {FACTOR_COLUMN: names.display_name(factor_id), CODE_COLUMN: factor_id}
        for spec in columns:
            row[spec.label] = format_cell(metrics, spec)
        rows.append(row)
    return rows


def performance_frame(
    selection: Sequence[str],
    stats: StatsTable,
    names: NameResolver,
    columns: Sequence[MetricSpec],
) -> pd.DataFrame:
    rows = build_performance_rows(selection, stats, names, columns)
    headers = [FACTOR_COLUMN, CODE_COLUMN, *(spec.label for spec in columns)]
    return pd.DataFrame(rows, columns=headers)
