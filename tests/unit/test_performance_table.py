"""Unit tests for the performance table rows."""

from __future__ import annotations

from factor_explorer.configs import MetricSpec, load_metric_set
from factor_explorer.data_pipeline.types import FactorMetricsRow
from factor_explorer.presentation.performance_table import (
    NOT_AVAILABLE,
    build_performance_rows,
    format_cell,
    format_metric,
    performance_frame,
)

PERCENT = MetricSpec(name="Average Return (Ann. %)", label="Avg Return", percent=True)
PLAIN = MetricSpec(name="Sharpe Ratio", label="Sharpe")


class TestFormatting:
    def test_percent_cell(self) -> None:
        row = FactorMetricsRow("x", {PERCENT.name: 6.5}, {PERCENT.name: 2}, total=153)
        assert format_cell(row, PERCENT) == "6.50% (2/153)"

    def test_plain_cell_rounds_to_two_decimals(self) -> None:
        row = FactorMetricsRow("x", {PLAIN.name: 0.5349}, {PLAIN.name: 1}, total=20)
        assert format_cell(row, PLAIN) == "0.53 (1/20)"

    def test_missing_value_is_not_available(self) -> None:
        row = FactorMetricsRow("x", {}, {}, total=20)
        assert format_cell(row, PLAIN) == NOT_AVAILABLE == "n/a"

    def test_missing_rank_drops_suffix(self) -> None:
        row = FactorMetricsRow("x", {PLAIN.name: 1.0}, {}, total=20)
        assert format_cell(row, PLAIN) == "1.00"

    def test_scaled_metric(self) -> None:
        spec = MetricSpec(name="Volatility (Ann.)", label="Vol", percent=True, scale=100)
        assert format_metric(0.1234, spec) == "12.34%"


class TestBuildPerformanceRows:
    def test_rows_in_selection_order(self, stats, names) -> None:
        rows = build_performance_rows(["y", "x"], stats, names, load_metric_set("default"))
        assert [r["Factor"] for r in rows] == ["Momentum", "Value"]
        assert rows[0]["Avg Return (Ann.)"] == "9.25% (1/153)"
        assert rows[1]["Sharpe"] == "0.54 (1/153)"

    def test_nan_metric_renders_not_available(self, stats, names) -> None:
        rows = build_performance_rows(["z"], stats, names, load_metric_set("default"))
        assert rows[0]["CAPM Beta"] == "n/a"

    def test_factor_without_stats_is_skipped(self, stats, names, caplog) -> None:
        with caplog.at_level("WARNING"):
            rows = build_performance_rows(["x", "nope"], stats, names, load_metric_set("default"))
        assert [r["Code"] for r in rows] == ["x"]
        assert "nope" in caplog.text

    def test_metric_absent_from_snapshot(self, stats, names) -> None:
        rows = build_performance_rows(["x"], stats, names, load_metric_set("annoyance"))
        assert rows[0]["Annoyance"] == "n/a"

    def test_frame_columns(self, stats, names) -> None:
        columns = load_metric_set("default")
        frame = performance_frame(["x"], stats, names, columns)
        assert list(frame.columns) == ["Factor", "Code", *(c.label for c in columns)]

    def test_empty_frame_keeps_headers(self, stats, names) -> None:
        frame = performance_frame([], stats, names, load_metric_set("default"))
        assert frame.empty
        assert "Factor" in frame.columns
