"""Unit tests for the alignment and cumulative-return engine."""

from __future__ import annotations

import math
from datetime import date

import pandas as pd
import pytest

from factor_explorer.analytics.alignment import align, cumulative_on_axis, master_axis
from factor_explorer.data_pipeline.series_store import SeriesStore
from factor_explorer.data_pipeline.types import Observation

LOCATION = "developed"
WEIGHTING = "vw_cap"


def _store(frame: pd.DataFrame) -> SeriesStore:
    return SeriesStore.from_frame(frame, location=LOCATION, weighting=WEIGHTING)


class TestWorkedExample:
    """X and Y start on different months and share the last one."""

    def test_axis_is_union_of_dates(self, store) -> None:
        result = align(["x", "y"], store)
        assert result.axis == (
            date(2000, 1, 31),
            date(2000, 2, 29),
            date(2000, 3, 31),
            date(2000, 4, 30),
        )

    def test_x_carries_last_value_forward(self, store) -> None:
        values = align(["x", "y"], store).values("x")
        assert values == pytest.approx([1.01, 0.9898, 0.9898, 1.03929])

    def test_y_is_absent_before_first_observation(self, store) -> None:
        values = align(["x", "y"], store).values("y")
        assert values[0] is None
        assert values[1:] == pytest.approx([1.00, 1.02, 1.0302])

    def test_factor_ids_follow_selection_order(self, store) -> None:
        assert align(["y", "x"], store).factor_ids == ("y", "x")


class TestAlignmentProperties:
    def test_axis_length_is_distinct_date_count(self, long_returns_frame) -> None:
        store = _store(long_returns_frame)
        selection = list(store.factor_ids)
        result = align(selection, store)

        distinct = {obs.date for f in selection for obs in store.get(f)}
        assert len(result.axis) == len(distinct)
        assert all(a < b for a, b in zip(result.axis, result.axis[1:]))
        for factor_id in selection:
            assert len(result.series[factor_id]) == len(result.axis)

    def test_first_point_is_one_plus_first_return(self, long_returns_frame) -> None:
        store = _store(long_returns_frame)
        result = align(list(store.factor_ids), store)

        for factor_id in result.factor_ids:
            first = store.get(factor_id)[0]
            k = result.axis.index(first.date)
            points = result.series[factor_id]
            assert all(p.is_absent for p in points[:k])
            assert points[k].value == pytest.approx(1.0 + first.ret)

    def test_other_factor_does_not_change_values(self, long_returns_frame) -> None:
        store = _store(long_returns_frame)
        alone = align(["qmj"], store)
        together = align(["qmj", "be_me", "ivol_capm_21d"], store)

        alone_by_date = dict(zip(alone.axis, alone.values("qmj")))
        together_by_date = dict(zip(together.axis, together.values("qmj")))
        for day, value in alone_by_date.items():
            assert together_by_date[day] == value

    def test_repeated_alignment_is_identical(self, long_returns_frame) -> None:
        store = _store(long_returns_frame)
        selection = ["ret_12_1", "betabab_1260d"]
        assert align(selection, store) == align(selection, store)


class TestMissingData:
    def test_unknown_factor_is_skipped(self, store, caplog) -> None:
        with caplog.at_level("WARNING"):
            result = align(["x", "nope"], store)
        assert result.factor_ids == ("x",)
        assert result.skipped == ("nope",)
        assert "nope" in caplog.text

    def test_all_unknown_gives_empty_axis(self, store) -> None:
        result = align(["nope"], store)
        assert result.axis == ()
        assert result.series == {}

    def test_duplicate_selection_is_aligned_once(self, store) -> None:
        result = align(["x", "x"], store)
        assert result.factor_ids == ("x",)


class TestHelpers:
    def test_master_axis_deduplicates(self) -> None:
        a = (Observation(date(2001, 1, 31), 0.1), Observation(date(2001, 2, 28), 0.1))
        b = (Observation(date(2001, 2, 28), 0.2),)
        assert master_axis([a, b]) == (date(2001, 1, 31), date(2001, 2, 28))

    def test_cumulative_on_axis_without_observations_is_all_absent(self) -> None:
        axis = (date(2001, 1, 31), date(2001, 2, 28))
        points = cumulative_on_axis((), axis)
        assert [p.value for p in points] == [None, None]

    def test_to_frame_uses_nan_for_absent(self, store) -> None:
        frame = align(["x", "y"], store).to_frame()
        assert list(frame.columns) == ["x", "y"]
        assert frame.index.name == "date"
        assert math.isnan(frame["y"].iloc[0])
        assert frame["x"].iloc[-1] == pytest.approx(1.03929)
