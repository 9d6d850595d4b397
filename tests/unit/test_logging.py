"""Unit tests for logging setup."""

from __future__ import annotations

import json
import logging

from factor_explorer.observability import JsonLogFormatter, configure_logging, log_event


class TestJsonLogFormatter:
    def test_payload_fields(self) -> None:
        record = logging.LogRecord("factor_explorer.x", logging.WARNING, __file__, 1, "hello %s", ("world",), None)
        record.factor_id = "be_me"
        payload = json.loads(JsonLogFormatter().format(record))

        assert payload["level"] == "WARNING"
        assert payload["logger"] == "factor_explorer.x"
        assert payload["message"] == "hello world"
        assert payload["factor_id"] == "be_me"
        assert "source" not in payload


class TestConfigureLogging:
    def test_file_handler_writes_json(self, tmp_path) -> None:
        log_file = tmp_path / "logs" / "app.log"
        configure_logging("INFO", json_format=True, log_file=str(log_file))
        logger = logging.getLogger("factor_explorer.test")
        try:
            log_event(logger, "startup_load", series=3)
            for handler in logging.getLogger().handlers:
                handler.flush()

            line = log_file.read_text(encoding="utf-8").strip().splitlines()[-1]
            payload = json.loads(line)
            assert payload["event"] == "startup_load"
            assert json.loads(payload["message"]) == {"event": "startup_load", "series": 3}
        finally:
            for handler in list(logging.getLogger().handlers):
                handler.close()
            configure_logging("WARNING")

    def test_reconfigure_does_not_stack_handlers(self) -> None:
        configure_logging("INFO")
        configure_logging("INFO")
        root = logging.getLogger()
        stream_handlers = [h for h in root.handlers if type(h) is logging.StreamHandler]
        assert len(stream_handlers) == 1
        configure_logging("WARNING")
