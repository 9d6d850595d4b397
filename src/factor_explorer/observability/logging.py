"""Logging setup for the dashboard process."""

from __future__ import annotations

import json
import logging
import logging.config
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

_EXTRA_FIELDS = ("factor_id", "source", "event")


class JsonLogFormatter(logging.Formatter):
    """Serialize logs as line-delimited JSON."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        for key in _EXTRA_FIELDS:
            if hasattr(record, key):
                payload[key] = getattr(record, key)
        return json.dumps(payload, ensure_ascii=True, default=str)


def configure_logging(
    level: str = "INFO",
    *,
    json_format: bool = False,
    log_file: str | None = None,
) -> None:
    """Configure root logging handlers.

    Safe to call on every Streamlit rerun: ``dictConfig`` replaces the
    handlers instead of stacking new ones.
    """
    formatters = {
        "json": {"()": "factor_explorer.observability.logging.JsonLogFormatter"},
        "text": {
            "format": "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            "datefmt": "%Y-%m-%dT%H:%M:%S%z",
        },
    }
    formatter = "json" if json_format else "text"

    handlers: dict[str, dict[str, Any]] = {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": formatter,
        }
    }

    root_handlers = ["console"]
    if log_file:
        file_path = Path(log_file).expanduser().resolve()
        file_path.parent.mkdir(parents=True, exist_ok=True)
        handlers["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "filename": str(file_path),
            "maxBytes": 5 * 1024 * 1024,
            "backupCount": 3,
            "formatter": formatter,
            "encoding": "utf-8",
        }
        root_handlers.append("file")

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": formatters,
            "handlers": handlers,
            "root": {"level": level, "handlers": root_handlers},
        }
    )


def log_event(logger: logging.Logger, event: str, level: int = logging.INFO, **context: Any) -> None:
    """Log a single structured event payload."""
    payload = {"event": event, **context}
    logger.log(level, json.dumps(payload, ensure_ascii=False, default=str), extra={"event": event})
