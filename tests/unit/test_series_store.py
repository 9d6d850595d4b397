"""Unit tests for SeriesStore."""

from __future__ import annotations

from datetime import date

import pandas as pd
import pytest

from factor_explorer.data_pipeline.errors import (
    DuplicateDateError,
    EmptySelectionFilterError,
    SchemaValidationError,
)
from factor_explorer.data_pipeline.series_store import SeriesStore


def _frame(rows: list[tuple[str, str, float]], location: str = "developed", weighting: str = "vw_cap") -> pd.DataFrame:
    return pd.DataFrame(
        [
            {"location": location, "weighting": weighting, "name": n, "date": d, "ret": r}
            for n, d, r in rows
        ]
    )


def _build(frame: pd.DataFrame, **kwargs) -> SeriesStore:
    return SeriesStore.from_frame(frame, location="developed", weighting="vw_cap", **kwargs)


class TestSeriesStore:
    """Tests for building the store from raw returns rows."""

    def test_filters_location_and_weighting(self, store) -> None:
        assert store.factor_ids == ("x", "y")
        assert [o.ret for o in store.get("x")] == [0.01, -0.02, 0.05]
        assert len(store.get("y")) == 3

    def test_series_sorted_by_date(self) -> None:
        frame = _frame(
            [
                ("a", "2001-03-31", 0.3),
                ("a", "2001-01-31", 0.1),
                ("a", "2001-02-28", 0.2),
            ]
        )
        dates = [o.date for o in _build(frame).get("a")]
        assert dates == [date(2001, 1, 31), date(2001, 2, 28), date(2001, 3, 31)]

    def test_unknown_factor_returns_empty(self, store) -> None:
        assert store.get("missing") == ()
        assert "missing" not in store
        assert "x" in store

    def test_whitespace_in_filter_columns_is_ignored(self) -> None:
        frame = _frame([("a", "2001-01-31", 0.1)], location=" developed ", weighting="vw_cap ")
        assert len(_build(frame)) == 1

    def test_empty_filter_raises(self) -> None:
        frame = _frame([("a", "2001-01-31", 0.1)], location="usa")
        with pytest.raises(EmptySelectionFilterError) as excinfo:
            _build(frame)
        assert "developed" in excinfo.value.user_message

    def test_missing_column_raises(self) -> None:
        frame = _frame([("a", "2001-01-31", 0.1)]).drop(columns=["ret"])
        with pytest.raises(SchemaValidationError, match="ret"):
            _build(frame)

    def test_invalid_date_raises(self) -> None:
        frame = _frame([("a", "not-a-date", 0.1)])
        with pytest.raises(SchemaValidationError, match="invalid dates"):
            _build(frame)

    def test_non_numeric_return_raises(self) -> None:
        frame = _frame([("a", "2001-01-31", 0.1)])
        frame["ret"] = ["abc"]
        with pytest.raises(SchemaValidationError, match="non-numeric"):
            _build(frame)

    def test_unknown_policy_raises(self, returns_frame) -> None:
        with pytest.raises(ValueError):
            _build(returns_frame, duplicate_policy="average")


class TestDuplicateDates:
    """A factor repeating a date is resolved by an explicit policy."""

    @pytest.fixture
    def duplicated(self) -> pd.DataFrame:
        return _frame(
            [
                ("a", "2001-01-31", 0.1),
                ("a", "2001-02-28", 0.2),
                ("a", "2001-02-28", 0.9),
            ]
        )

    def test_last_wins_by_default(self, duplicated) -> None:
        assert [o.ret for o in _build(duplicated).get("a")] == [0.1, 0.9]

    def test_first_policy(self, duplicated) -> None:
        rets = [o.ret for o in _build(duplicated, duplicate_policy="first").get("a")]
        assert rets == [0.1, 0.2]

    def test_error_policy(self, duplicated) -> None:
        with pytest.raises(DuplicateDateError):
            _build(duplicated, duplicate_policy="error")

    def test_coalescing_is_logged(self, duplicated, caplog) -> None:
        with caplog.at_level("WARNING"):
            _build(duplicated)
        assert "duplicate" in caplog.text

    def test_same_date_in_different_factors_is_not_duplicate(self) -> None:
        frame = _frame([("a", "2001-01-31", 0.1), ("b", "2001-01-31", 0.2)])
        store = _build(frame, duplicate_policy="error")
        assert len(store) == 2

    def test_time_of_day_does_not_make_dates_distinct(self) -> None:
        frame = _frame([("a", "2001-01-31 00:00", 0.1), ("a", "2001-01-31 12:00", 0.5)])
        with pytest.raises(DuplicateDateError):
            _build(frame, duplicate_policy="error")

        series = _build(frame).get("a")
        assert [(o.date, o.ret) for o in series] == [(date(2001, 1, 31), 0.5)]
