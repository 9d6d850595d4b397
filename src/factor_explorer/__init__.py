"""
Factor Explorer - cumulative-wealth and performance dashboard for factor returns.

The library loads the exported factor-return series, name mapping and stats
snapshot, aligns selected factors on a shared date axis, and prepares the
table and leaderboard rows shown by the Streamlit app under ``app/``.
"""

from __future__ import annotations

__version__ = "0.1.0"

from .analytics import AlignedPoint, AlignmentResult, align, compute_stats_frame
from .configs import ConfigError, MetricSpec, load_metric_set
from .data_pipeline import (
    DashboardData,
    FactorDataError,
    FactorMetricsRow,
    InputPaths,
    NameEntry,
    NameResolver,
    Observation,
    SchemaValidationError,
    SeriesStore,
    StartupLoadError,
    StatsTable,
    load_dashboard_data,
)
from .presentation import AudioPlayback, DashboardState, SelectionRows, leaderboard
from .settings import DashboardSettings

__all__ = [
    "__version__",
    # Data
    "DashboardData",
    "FactorMetricsRow",
    "InputPaths",
    "NameEntry",
    "NameResolver",
    "Observation",
    "SeriesStore",
    "StatsTable",
    "load_dashboard_data",
    # Engine
    "AlignedPoint",
    "AlignmentResult",
    "align",
    "compute_stats_frame",
    # Presentation
    "AudioPlayback",
    "DashboardState",
    "SelectionRows",
    "leaderboard",
    # Configuration
    "ConfigError",
    "DashboardSettings",
    "MetricSpec",
    "load_metric_set",
    # Errors
    "FactorDataError",
    "SchemaValidationError",
    "StartupLoadError",
]
