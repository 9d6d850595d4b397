"""
Metric catalogue - performance-table column sets loaded from ``metrics.yaml``.

The stats snapshot has no fixed schema, so which metrics the table shows (and
how each is formatted and ranked) is configuration rather than code.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

METRICS_CONFIG_PATH = Path(__file__).resolve().parent / "metrics.yaml"

# Metrics where a smaller value ranks better regardless of the column set.
LOWER_IS_BETTER_DEFAULTS = frozenset(
    {
        "Volatility (Ann. %)",
        "Volatility (Ann.)",
        "AnnoyanceScore",
    }
)


class ConfigError(ValueError):
    """Raised when the metric catalogue is invalid."""


@dataclass(frozen=True)
class MetricSpec:
    """How one metric column is labelled, formatted, and ranked."""

    name: str
    label: str
    percent: bool = False
    scale: float = 1.0
    lower_is_better: bool = False

    def display_value(self, value: float) -> float:
        return value * self.scale


def _parse_spec(set_name: str, raw: Any) -> MetricSpec:
    if not isinstance(raw, dict) or not raw.get("name"):
        raise ConfigError(f"metric set '{set_name}': every entry needs a 'name'")
    name = str(raw["name"])
    try:
        scale = float(raw.get("scale", 1.0))
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"metric '{name}': scale must be numeric") from exc
    return MetricSpec(
        name=name,
        label=str(raw.get("label") or name),
        percent=bool(raw.get("percent", False)),
        scale=scale,
        lower_is_better=bool(raw.get("lower_is_better", name in LOWER_IS_BETTER_DEFAULTS)),
    )


def load_metric_sets(path: Path | str | None = None) -> dict[str, tuple[MetricSpec, ...]]:
    """Read every column set from the YAML catalogue."""
    config_path = Path(path) if path is not None else METRICS_CONFIG_PATH
    with open(config_path, encoding="utf-8") as handle:
        raw = yaml.safe_load(handle) or {}
    if not isinstance(raw, dict):
        raise ConfigError(f"{config_path}: top level must be a mapping of set name to list")

    sets: dict[str, tuple[MetricSpec, ...]] = {}
    for set_name, entries in raw.items():
        if not isinstance(entries, list):
            raise ConfigError(f"metric set '{set_name}' must be a list")
        sets[str(set_name)] = tuple(_parse_spec(str(set_name), entry) for entry in entries)
    return sets


@lru_cache(maxsize=None)
def _default_sets() -> dict[str, tuple[MetricSpec, ...]]:
    return load_metric_sets()


def load_metric_set(name: str = "default") -> tuple[MetricSpec, ...]:
    """Return the named column set from the bundled catalogue."""
    sets = _default_sets()
    if name not in sets:
        raise ConfigError(f"Unknown metric set '{name}'. Available: {sorted(sets)}")
    return sets[name]


def list_metric_sets() -> list[str]:
    return sorted(_default_sets())


def is_lower_better(metric: str, specs: tuple[MetricSpec, ...] = ()) -> bool:
    """Polarity of *metric*, preferring the column set over the built-in defaults."""
    for spec in specs:
        if spec.name == metric:
            return spec.lower_is_better
    return metric in LOWER_IS_BETTER_DEFAULTS


__all__ = [
    "ConfigError",
    "MetricSpec",
    "LOWER_IS_BETTER_DEFAULTS",
    "METRICS_CONFIG_PATH",
    "is_lower_better",
    "list_metric_sets",
    "load_metric_set",
    "load_metric_sets",
]
