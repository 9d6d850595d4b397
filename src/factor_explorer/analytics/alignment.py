"""
Alignment & cumulative-return engine.

Factors start on different dates, so each selected series is compounded on a
shared master date axis: the sorted union of every selected factor's dates.
Before a factor's first observation its value is absent (``None``, drawn as a
gap); from then on it compounds ``1 + ret`` on its own dates and carries the
last value across axis dates it does not observe.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from datetime import date

import pandas as pd

from factor_explorer.data_pipeline.series_store import SeriesStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AlignedPoint:
    """Cumulative wealth of one factor at one axis date; ``None`` before inception."""

    timestamp: date
    value: float | None

    @property
    def is_absent(self) -> bool:
        return self.value is None


@dataclass(frozen=True)
class AlignmentResult:
    """Chart-ready output of :func:`align`."""

    axis: tuple[date, ...]
    series: dict[str, tuple[AlignedPoint, ...]] = field(default_factory=dict)
    skipped: tuple[str, ...] = ()

    @property
    def factor_ids(self) -> tuple[str, ...]:
        return tuple(self.series)

    def values(self, factor_id: str) -> list[float | None]:
        return [p.value for p in self.series.get(factor_id, ())]

    def to_frame(self) -> pd.DataFrame:
        """Wide frame indexed by axis date, one column per factor, NaN when absent."""
        index = pd.DatetimeIndex(pd.to_datetime(list(self.axis)), name="date")
        columns = {
            factor_id: [math.nan if p.value is None else p.value for p in points]
            for factor_id, points in self.series.items()
        }
        return pd.DataFrame(columns, index=index, columns=list(self.series), dtype=float)


def master_axis(series_by_factor: Iterable[Sequence]) -> tuple[date, ...]:
    """Ascending, de-duplicated union of the observation dates of every series."""
    dates: set[date] = set()
    for series in series_by_factor:
        dates.update(obs.date for obs in series)
    return tuple(sorted(dates))


def cumulative_on_axis(series: Sequence, axis: Sequence[date]) -> tuple[AlignedPoint, ...]:
    """Compound one factor's returns along *axis*.

    The series must already be sorted and free of duplicate dates; the store
    guarantees both.
    """
    returns_by_date = {obs.date: obs.ret for obs in series}
    running: float | None = None
    points: list[AlignedPoint] = []
    for day in axis:
        ret = returns_by_date.get(day)
        if ret is not None:
            if running is None:
                running = 1.0
            running *= 1.0 + ret
        points.append(AlignedPoint(timestamp=day, value=running))
    return tuple(points)


def align(selection: Sequence[str], store: SeriesStore) -> AlignmentResult:
    """Build aligned cumulative-wealth sequences for the selected factors.

    Factors with no series in the store are skipped (logged), never fatal.
    The result depends only on *selection* and the store, so repeated calls
    return identical sequences.
    """
    present: dict[str, Sequence] = {}
    skipped: list[str] = []
    for factor_id in selection:
        if factor_id in present:
            continue
        series = store.get(factor_id)
        if not series:
            logger.warning("No return series for factor %s; omitted from chart", factor_id)
            skipped.append(factor_id)
            continue
        present[factor_id] = series

    axis = master_axis(present.values())
    aligned = {factor_id: cumulative_on_axis(series, axis) for factor_id, series in present.items()}

    logger.debug(
        "Aligned %d factors on %d dates (%d skipped)",
        len(aligned),
        len(axis),
        len(skipped),
    )
    return AlignmentResult(axis=axis, series=aligned, skipped=tuple(skipped))


__all__ = [
    "AlignedPoint",
    "AlignmentResult",
    "align",
    "cumulative_on_axis",
    "master_axis",
]
