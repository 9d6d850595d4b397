"""Environment variable parsing helpers."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping, Sequence
from pathlib import Path

logger = logging.getLogger(__name__)


def parse_env_str(name: str, default: str = "", *, environ: Mapping[str, str] | None = None) -> str:
    source = os.environ if environ is None else environ
    value = source.get(name)
    if value is None:
        return default
    return str(value).strip()


def parse_env_bool(
    name: str,
    default: bool = False,
    *,
    environ: Mapping[str, str] | None = None,
) -> bool:
    raw = parse_env_str(name, "", environ=environ)
    if not raw:
        return default
    return raw.lower() in {"1", "true", "yes", "on", "y"}


def parse_env_int(
    name: str,
    default: int,
    minimum: int,
    maximum: int,
    *,
    environ: Mapping[str, str] | None = None,
) -> int:
    raw = parse_env_str(name, "", environ=environ)
    if not raw:
        return default
    try:
        parsed = int(raw)
    except ValueError:
        logger.warning("%s=%r is not an integer; using %d", name, raw, default)
        return default
    return max(minimum, min(parsed, maximum))


def parse_env_choice(
    name: str,
    default: str,
    choices: Sequence[str],
    *,
    environ: Mapping[str, str] | None = None,
) -> str:
    raw = parse_env_str(name, "", environ=environ).lower()
    if not raw:
        return default
    if raw not in choices:
        logger.warning("%s=%r is not one of %s; using %r", name, raw, list(choices), default)
        return default
    return raw


def parse_env_path(
    name: str,
    default: Path | None = None,
    *,
    environ: Mapping[str, str] | None = None,
) -> Path | None:
    raw = parse_env_str(name, "", environ=environ)
    if not raw:
        return default
    return Path(raw).expanduser()
