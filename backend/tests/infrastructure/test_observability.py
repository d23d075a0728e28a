"""Structured Logging — JSON formatter fields and handler setup."""

import json
import logging

from eventgraph.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra):
    record = logging.LogRecord(
        "eventgraph.test", logging.INFO, __file__, 1, "User %s", ("created",), None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_base_fields():
    payload = json.loads(JSONFormatter().format(_record()))
    assert payload["level"] == "INFO"
    assert payload["logger"] == "eventgraph.test"
    assert payload["message"] == "User created"
    assert "timestamp" in payload


def test_json_formatter_surfaces_entity_fields():
    payload = json.loads(JSONFormatter().format(
        _record(entity="user", entity_id="abc", error_code=None),
    ))
    assert payload["entity"] == "user"
    assert payload["entity_id"] == "abc"
    assert "error_code" not in payload


def test_setup_logging_replaces_previous_handler():
    first = setup_logging("DEBUG", "json")
    second = setup_logging("WARNING", "text")
    try:
        assert first not in logging.root.handlers
        assert second in logging.root.handlers
        assert logging.root.level == logging.WARNING
        assert not isinstance(second.formatter, JSONFormatter)
    finally:
        logging.root.removeHandler(second)
