"""
Series Store - per-factor return observations for one market/weighting scheme.

The store is built once from the raw returns snapshot and is read-only
afterwards.  Every series it hands out is strictly increasing by date.
"""

from __future__ import annotations

import logging
from typing import Iterator, Literal

import pandas as pd

from factor_explorer.data_pipeline.errors import (
    DuplicateDateError,
    EmptySelectionFilterError,
    SchemaValidationError,
)
from factor_explorer.data_pipeline.schemas import (
    REQUIRED_RETURNS_COLUMNS,
    ensure_columns,
    validate_returns_frame,
)
from factor_explorer.data_pipeline.types import Observation, Series

logger = logging.getLogger(__name__)

DuplicatePolicy = Literal["last", "first", "error"]
DUPLICATE_POLICIES: tuple[str, ...] = ("last", "first", "error")


class SeriesStore:
    """Immutable mapping of factor id to its ordered return observations."""

    def __init__(self, series: dict[str, Series]) -> None:
        self._series: dict[str, Series] = dict(series)

    @classmethod
    def from_frame(
        cls,
        frame: pd.DataFrame,
        *,
        location: str,
        weighting: str,
        duplicate_policy: DuplicatePolicy = "last",
    ) -> "SeriesStore":
        """Build the store from raw returns rows.

        Args:
            frame: Raw rows with at least ``location``, ``weighting``, ``name``,
                ``date`` and ``ret``.
            location: The single location kept.
            weighting: The single weighting scheme kept.
            duplicate_policy: What to do when a factor repeats a date:
                ``last`` keeps the last row in file order, ``first`` keeps the
                first one, ``error`` rejects the file.

        Raises:
            SchemaValidationError: Missing columns, unparseable dates/returns.
            EmptySelectionFilterError: The location/weighting filter keeps no rows.
            DuplicateDateError: A repeated date under the ``error`` policy.
        """
        if duplicate_policy not in DUPLICATE_POLICIES:
            raise ValueError(f"unknown duplicate policy: {duplicate_policy!r}")
        if frame is None:
            raise SchemaValidationError("returns dataframe is None")

        ensure_columns(frame, REQUIRED_RETURNS_COLUMNS, "returns")

        mask = (frame["location"].astype(str).str.strip() == location) & (
            frame["weighting"].astype(str).str.strip() == weighting
        )
        filtered = frame.loc[mask, REQUIRED_RETURNS_COLUMNS]
        if filtered.empty:
            logger.error(
                "returns: no rows for location=%s weighting=%s (%d rows read)",
                location,
                weighting,
                len(frame),
            )
            raise EmptySelectionFilterError(
                f"returns: no rows match location={location!r} weighting={weighting!r}",
                user_message=f"No return data found for {location} / {weighting}.",
            )

        validated = validate_returns_frame(filtered)
        # Stable sort keeps file order among equal dates so first/last are well defined.
        validated = validated.reset_index(drop=True).sort_values(["name", "date"], kind="mergesort")

        duplicated = validated.duplicated(subset=["name", "date"], keep=False)
        if duplicated.any():
            offenders = sorted(validated.loc[duplicated, "name"].unique().tolist())
            if duplicate_policy == "error":
                raise DuplicateDateError(
                    f"returns: duplicate dates for factors {offenders}",
                    user_message="The returns file repeats dates within a factor.",
                )
            before = len(validated)
            validated = validated.drop_duplicates(subset=["name", "date"], keep=duplicate_policy)
            logger.warning(
                "returns: coalesced %d duplicate-date rows (keep=%s) for factors %s",
                before - len(validated),
                duplicate_policy,
                offenders,
            )

        series: dict[str, Series] = {}
        for name, group in validated.groupby("name", sort=False):
            series[str(name)] = tuple(
                Observation(date=ts.date(), ret=float(ret))
                for ts, ret in zip(group["date"], group["ret"])
            )

        logger.info(
            "Loaded %d factor series (%d observations) for %s/%s",
            len(series),
            len(validated),
            location,
            weighting,
        )
        return cls(series)

    def get(self, factor_id: str) -> Series:
        """Return the ordered observations of *factor_id*, or an empty tuple."""
        return self._series.get(factor_id, ())

    @property
    def factor_ids(self) -> tuple[str, ...]:
        return tuple(sorted(self._series))

    def __contains__(self, factor_id: object) -> bool:
        return factor_id in self._series

    def __len__(self) -> int:
        return len(self._series)

    def __iter__(self) -> Iterator[str]:
        return iter(self.factor_ids)
