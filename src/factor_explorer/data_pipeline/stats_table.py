"""
Stats Table - precomputed per-factor metrics and their cross-sectional ranks.

The snapshot is produced by an external batch job.  Its metric columns vary
between exports (some carry ``AnnoyanceScore``, others ``CAPM Beta`` or
``Treynor``), so the table never assumes a fixed schema: a metric is whatever
numeric column is present, and ``<metric>_rank`` columns are its ranks.
"""

from __future__ import annotations

import logging
import math
from typing import Iterator

import pandas as pd

from factor_explorer.data_pipeline.schemas import (
    RANK_SUFFIX,
    STATS_KEY_COLUMN,
    TOTAL_FACTORS_COLUMN,
    validate_stats_frame,
)
from factor_explorer.data_pipeline.types import FactorMetricsRow

logger = logging.getLogger(__name__)


def _finite(value: object) -> float | None:
    try:
        number = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


class StatsTable:
    """Read-only lookup of :class:`FactorMetricsRow` by factor id."""

    def __init__(self, rows: dict[str, FactorMetricsRow], metric_names: tuple[str, ...], total: int) -> None:
        self._rows = dict(rows)
        self._metric_names = metric_names
        self.total = total

    @classmethod
    def from_frame(cls, frame: pd.DataFrame) -> "StatsTable":
        """Build the table from the stats snapshot keyed by the ``Factor`` column."""
        validated = validate_stats_frame(frame)

        rank_columns = {c for c in validated.columns if str(c).endswith(RANK_SUFFIX)}
        metric_names = tuple(
            str(c)
            for c in validated.columns
            if c not in rank_columns and c not in (STATS_KEY_COLUMN, TOTAL_FACTORS_COLUMN)
        )

        # Every parsed row counts, including ones without a factor key.
        total = len(frame)
        if TOTAL_FACTORS_COLUMN in validated.columns:
            declared = validated[TOTAL_FACTORS_COLUMN].dropna()
            if not declared.empty and _finite(declared.iloc[-1]):
                total = int(declared.iloc[-1])

        rows: dict[str, FactorMetricsRow] = {}
        for record in validated.to_dict(orient="records"):
            factor_id = record[STATS_KEY_COLUMN]
            values: dict[str, float] = {}
            ranks: dict[str, int] = {}
            for metric in metric_names:
                value = _finite(record.get(metric))
                if value is not None:
                    values[metric] = value
                rank = _finite(record.get(f"{metric}{RANK_SUFFIX}"))
                if rank is not None:
                    ranks[metric] = int(rank)
            rows[factor_id] = FactorMetricsRow(
                factor_id=factor_id,
                values=values,
                ranks=ranks,
                total=total,
            )

        logger.info("Loaded stats for %d factors (%d metrics)", len(rows), len(metric_names))
        return cls(rows, metric_names, total)

    def get(self, factor_id: str) -> FactorMetricsRow | None:
        return self._rows.get(factor_id)

    def value_of(self, factor_id: str, metric: str) -> float | None:
        row = self._rows.get(factor_id)
        return row.value(metric) if row is not None else None

    def rank_of(self, factor_id: str, metric: str) -> int | None:
        row = self._rows.get(factor_id)
        return row.rank(metric) if row is not None else None

    def has_metric(self, metric: str) -> bool:
        return metric in self._metric_names

    @property
    def metric_names(self) -> tuple[str, ...]:
        return self._metric_names

    @property
    def factor_ids(self) -> tuple[str, ...]:
        return tuple(self._rows)

    def __contains__(self, factor_id: object) -> bool:
        return factor_id in self._rows

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[FactorMetricsRow]:
        return iter(self._rows.values())
