"""Tests for structured logging configuration."""

import datetime
import json
import logging
import sys

from grind.core.logging_config import JSONFormatter, get_logger, setup_logging


def _record(msg: str = "hello %s", args=("world",), exc_info=None, level=logging.INFO) -> logging.LogRecord:
    return logging.LogRecord(name="test", level=level, pathname="test.py", lineno=1, msg=msg, args=args,
                             exc_info=exc_info)


def test_json_formatter_outputs_valid_json():
    parsed = json.loads(JSONFormatter().format(_record()))
    assert parsed["message"] == "hello world"
    assert parsed["level"] == "INFO"
    assert parsed["logger"] == "test"
    assert parsed["service"] == "grind-api"
    assert "timestamp" in parsed
    assert "context" not in parsed


def test_json_formatter_includes_exception():
    try:
        raise ValueError("test error")
    except ValueError:
        exc_info = sys.exc_info()
    parsed = json.loads(JSONFormatter().format(_record("fail", (), exc_info, logging.ERROR)))
    assert parsed["exception"]["type"] == "ValueError"
    assert parsed["exception"]["message"] == "test error"


def test_json_formatter_collects_context():
    record = _record("Session started", ())
    record.ctx_session_id = 7
    record.ctx_started = datetime.date(2026, 3, 1)
    parsed = json.loads(JSONFormatter().format(record))
    assert parsed["context"] == {"session_id": 7, "started": "2026-03-01"}


def test_setup_logging_is_idempotent():
    root = logging.getLogger()
    setup_logging("DEBUG")
    count = len(root.handlers)
    setup_logging("DEBUG")
    assert len(root.handlers) == count
    assert any(isinstance(h.formatter, JSONFormatter) for h in root.handlers)


def test_get_logger_returns_named_logger():
    assert get_logger("grind.test").name == "grind.test"
