from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True)
class Observation:
    """One periodic fractional return of a factor."""

    date: date
    ret: float


Series = tuple[Observation, ...]


@dataclass(frozen=True)
class FactorMetricsRow:
    """Precomputed metrics of one factor and their cross-sectional ranks."""

    factor_id: str
    values: Mapping[str, float] = field(default_factory=dict)
    ranks: Mapping[str, int] = field(default_factory=dict)
    total: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", MappingProxyType(dict(self.values)))
        object.__setattr__(self, "ranks", MappingProxyType(dict(self.ranks)))

    def value(self, metric: str) -> float | None:
        return self.values.get(metric)

    def rank(self, metric: str) -> int | None:
        return self.ranks.get(metric)


@dataclass(frozen=True)
class NameEntry:
    """Short factor code and its human-readable name."""

    factor_id: str
    display_name: str


@dataclass(frozen=True)
class InputPaths:
    """Filesystem locations of the static snapshots read at startup."""

    data_dir: Path
    returns_csv: Path
    names_csv: Path
    stats_csv: Path
    audio_dir: Path

    @classmethod
    def from_data_dir(cls, data_dir: Path | str, audio_dir: Path | str | None = None) -> "InputPaths":
        base = Path(data_dir).expanduser()
        return cls(
            data_dir=base,
            returns_csv=base / "data.csv",
            names_csv=base / "factor_names.csv",
            stats_csv=base / "factor_stats.csv",
            audio_dir=Path(audio_dir).expanduser() if audio_dir else base / "audio_portfolios",
        )
