# tests/unit/logging/test_logger.py — v2
"""Tests for logging/logger.py — logger factory and formatters."""

from __future__ import annotations

import io
import json
import logging

from modscore.logging.context import clear_context, set_phase_context, set_run_context
from modscore.logging.logger import JsonFormatter, TextFormatter, get_logger, setup_logging


def _record(msg: str) -> logging.LogRecord:
    return logging.LogRecord(
        name="test", level=logging.INFO, pathname="", lineno=0,
        msg=msg, args=(), exc_info=None,
    )


class TestJsonFormatter:
    def setup_method(self):
        clear_context()

    def teardown_method(self):
        clear_context()

    def test_format_basic(self):
        parsed = json.loads(JsonFormatter().format(_record("Hello")))
        assert parsed["level"] == "INFO"
        assert parsed["message"] == "Hello"
        assert "timestamp" in parsed
        assert "context" not in parsed

    def test_only_standard_keys(self):
        record = _record("Hello")
        record.data = {"ignored": True}
        parsed = json.loads(JsonFormatter().format(record))
        assert set(parsed) == {"timestamp", "level", "logger", "message"}

    def test_format_with_context(self):
        set_run_context("run1")
        set_phase_context("graph_read", "edges.txt")
        parsed = json.loads(JsonFormatter().format(_record("test msg")))
        assert parsed["context"] == {
            "run_id": "run1", "phase": "graph_read", "input_file": "edges.txt",
        }


class TestTextFormatter:
    def teardown_method(self):
        clear_context()

    def test_format_basic(self):
        output = TextFormatter().format(_record("Hello text"))
        assert "Hello text" in output
        assert "INFO" in output

    def test_format_with_phase(self):
        set_phase_context("cover_read", "cover.txt")
        output = TextFormatter().format(_record("parsed"))
        assert "[cover_read]" in output
        assert "(cover.txt)" in output


class TestGetLogger:
    def test_returns_logger(self):
        logger = get_logger("test_module")
        assert logger.name == "modscore.test_module"


class TestSetupLogging:
    def test_setup_json(self):
        setup_logging(level="DEBUG", log_format="json")
        root = logging.getLogger("modscore")
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1

    def test_setup_text(self):
        setup_logging(level="INFO", log_format="text")
        root = logging.getLogger("modscore")
        assert root.level == logging.INFO
        assert isinstance(root.handlers[0].formatter, TextFormatter)

    def test_reinit_does_not_duplicate(self):
        setup_logging()
        setup_logging()
        assert len(logging.getLogger("modscore").handlers) == 1

    def test_stream_receives_records(self):
        stream = io.StringIO()
        setup_logging(level="INFO", log_format="text", stream=stream)
        get_logger("graph").info("loaded")
        assert "loaded" in stream.getvalue()

    def test_file_handler(self, tmp_path):
        log_file = tmp_path / "logs" / "modscore.log"
        setup_logging(level="INFO", log_file=log_file, stream=io.StringIO())
        get_logger("graph").info("to file")
        root = logging.getLogger("modscore")
        for handler in root.handlers:
            handler.flush()
        assert "to file" in log_file.read_text(encoding="utf-8")
        setup_logging(stream=io.StringIO())
