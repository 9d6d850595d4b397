"""Runtime configuration for the dashboard."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from factor_explorer.data_pipeline.series_store import DUPLICATE_POLICIES
from factor_explorer.data_pipeline.types import InputPaths
from factor_explorer.presentation.selection import MAX_SERIES

from .environment import parse_env_bool, parse_env_choice, parse_env_int, parse_env_path, parse_env_str

PROJECT_ROOT = Path(__file__).resolve().parents[3]
DEFAULT_DATA_DIR = PROJECT_ROOT / "data"

# Build-time constants: the returns snapshot holds many market/weighting
# combinations and the dashboard only ever shows this one.
FIXED_LOCATION = "developed"
FIXED_WEIGHTING = "vw_cap"

STATS_SOURCES = ("precomputed", "computed")


@dataclass(frozen=True)
class DashboardSettings:
    data_dir: Path
    audio_dir: Path | None
    log_level: str
    log_json: bool
    log_file: str | None
    stats_source: str
    duplicate_policy: str
    leaderboard_top_n: int
    metric_set: str
    location: str = FIXED_LOCATION
    weighting: str = FIXED_WEIGHTING

    @property
    def paths(self) -> InputPaths:
        return InputPaths.from_data_dir(self.data_dir, self.audio_dir)

    @property
    def computes_stats(self) -> bool:
        return self.stats_source == "computed"

    @classmethod
    def from_env(cls, *, environ: Mapping[str, str] | None = None) -> "DashboardSettings":
        stats_source = parse_env_choice(
            "FACTOR_EXPLORER_STATS_SOURCE", "precomputed", STATS_SOURCES, environ=environ
        )
        default_metric_set = "computed" if stats_source == "computed" else "default"
        log_file = parse_env_str("FACTOR_EXPLORER_LOG_FILE", "", environ=environ)
        return cls(
            data_dir=parse_env_path("FACTOR_EXPLORER_DATA_DIR", DEFAULT_DATA_DIR, environ=environ)
            or DEFAULT_DATA_DIR,
            audio_dir=parse_env_path("FACTOR_EXPLORER_AUDIO_DIR", None, environ=environ),
            log_level=parse_env_str("FACTOR_EXPLORER_LOG_LEVEL", "INFO", environ=environ).upper(),
            log_json=parse_env_bool("FACTOR_EXPLORER_LOG_JSON", False, environ=environ),
            log_file=log_file or None,
            stats_source=stats_source,
            duplicate_policy=parse_env_choice(
                "FACTOR_EXPLORER_DUPLICATE_POLICY", "last", DUPLICATE_POLICIES, environ=environ
            ),
            leaderboard_top_n=parse_env_int(
                "FACTOR_EXPLORER_LEADERBOARD_TOP_N", 10, 1, 100, environ=environ
            ),
            metric_set=parse_env_str(
                "FACTOR_EXPLORER_METRIC_SET", default_metric_set, environ=environ
            ).lower(),
        )
