"""
Startup loader - reads the three static snapshots and builds the lookups.

The returns, names and stats files are read concurrently and awaited
together.  Any one of them failing aborts the whole load with a single
:class:`StartupLoadError`; there is no partially initialised dashboard.
"""

from __future__ import annotations

import logging
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

import pandas as pd

from factor_explorer.data_pipeline.errors import StartupLoadError
from factor_explorer.data_pipeline.name_resolver import NameResolver
from factor_explorer.data_pipeline.series_store import DuplicatePolicy, SeriesStore
from factor_explorer.data_pipeline.stats_table import StatsTable
from factor_explorer.data_pipeline.types import InputPaths

logger = logging.getLogger(__name__)

NAMES_DELIMITER = ";"


@dataclass(frozen=True)
class DashboardData:
    """Everything the dashboard reads, built once per session."""

    series: SeriesStore
    stats: StatsTable
    names: NameResolver
    paths: InputPaths


def read_returns_csv(path: Path) -> pd.DataFrame:
    return pd.read_csv(path, skip_blank_lines=True)


def read_names_csv(path: Path) -> pd.DataFrame:
    return pd.read_csv(path, sep=NAMES_DELIMITER, dtype=str, skip_blank_lines=True)


def read_stats_csv(path: Path) -> pd.DataFrame:
    return pd.read_csv(path, skip_blank_lines=True)


def _read_all(paths: InputPaths, *, include_stats: bool = True) -> dict[str, pd.DataFrame]:
    readers: dict[str, tuple[Callable[[Path], pd.DataFrame], Path]] = {
        "returns": (read_returns_csv, paths.returns_csv),
        "names": (read_names_csv, paths.names_csv),
    }
    if include_stats:
        readers["stats"] = (read_stats_csv, paths.stats_csv)
    with ThreadPoolExecutor(max_workers=len(readers), thread_name_prefix="factor_explorer") as pool:
        futures = {key: pool.submit(reader, path) for key, (reader, path) in readers.items()}
        frames: dict[str, pd.DataFrame] = {}
        for key, future in futures.items():
            try:
                frames[key] = future.result()
            except Exception as exc:
                logger.error("Failed to read %s: %s", readers[key][1], exc)
                raise StartupLoadError(readers[key][1].name, exc) from exc
    return frames


def load_dashboard_data(
    paths: InputPaths,
    *,
    location: str,
    weighting: str,
    duplicate_policy: DuplicatePolicy = "last",
    stats_builder: Callable[[SeriesStore], pd.DataFrame] | None = None,
) -> DashboardData:
    """Read and parse the startup snapshots.

    Args:
        paths: Where the snapshots live.
        location: Fixed location kept from the returns file.
        weighting: Fixed weighting kept from the returns file.
        duplicate_policy: Duplicate-date policy for the series store.
        stats_builder: When given, derives the stats frame from the series
            store instead of reading ``factor_stats.csv`` (client-side mode).

    Raises:
        StartupLoadError: A file could not be read or failed validation.
    """
    started = time.perf_counter()
    frames = _read_all(paths, include_stats=stats_builder is None)

    try:
        series = SeriesStore.from_frame(
            frames["returns"],
            location=location,
            weighting=weighting,
            duplicate_policy=duplicate_policy,
        )
    except Exception as exc:
        raise StartupLoadError(paths.returns_csv.name, exc) from exc

    try:
        names = NameResolver.from_frame(frames["names"])
    except Exception as exc:
        raise StartupLoadError(paths.names_csv.name, exc) from exc

    try:
        stats_frame = stats_builder(series) if stats_builder is not None else frames["stats"]
        stats = StatsTable.from_frame(stats_frame)
    except Exception as exc:
        raise StartupLoadError(paths.stats_csv.name, exc) from exc

    logger.info(
        "Dashboard data ready in %.2fs: %d series, %d names, %d stats rows",
        time.perf_counter() - started,
        len(series),
        len(names),
        len(stats),
    )
    return DashboardData(series=series, stats=stats, names=names, paths=paths)
