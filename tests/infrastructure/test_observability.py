"""Tests for JSONFormatter and setup_logging."""

import json
import logging

from srms.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra):
    record = logging.LogRecord("srms.test", logging.INFO, __file__, 1, "hello %s", ("world",), None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_base_fields():
    out = json.loads(JSONFormatter().format(_record()))
    assert out["level"] == "INFO"
    assert out["logger"] == "srms.test"
    assert out["message"] == "hello world"
    assert "timestamp" in out


def test_json_formatter_surfaces_extras():
    out = json.loads(JSONFormatter().format(_record(roll_number=7, operation="delete")))
    assert out["roll_number"] == 7
    assert out["operation"] == "delete"
    assert "error_code" not in out


def test_setup_logging_sets_level_and_handler():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    try:
        setup_logging("warning", "json")
        assert root.level == logging.WARNING
        assert isinstance(root.handlers[-1].formatter, JSONFormatter)
    finally:
        root.handlers[:] = handlers
        root.setLevel(level)
