"""
Factor Explorer data pipeline.

Parses the static snapshots into typed, read-only lookups.
"""

from __future__ import annotations

from .errors import (
    DuplicateDateError,
    EmptySelectionFilterError,
    FactorDataError,
    SchemaValidationError,
    StartupLoadError,
)
from .loader import DashboardData, load_dashboard_data
from .name_resolver import NameResolver
from .series_store import SeriesStore
from .stats_table import StatsTable
from .types import FactorMetricsRow, InputPaths, NameEntry, Observation, Series

__all__ = [
    "DashboardData",
    "DuplicateDateError",
    "EmptySelectionFilterError",
    "FactorDataError",
    "FactorMetricsRow",
    "InputPaths",
    "NameEntry",
    "NameResolver",
    "Observation",
    "SchemaValidationError",
    "Series",
    "SeriesStore",
    "StartupLoadError",
    "StatsTable",
    "load_dashboard_data",
]
