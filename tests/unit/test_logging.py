"""Tests for log context propagation and JSON formatting."""

from __future__ import annotations

import json
import logging
from logging.handlers import QueueHandler
import sys
from unittest.mock import MagicMock

import pytest

from demo_service.infra.logging import config as logging_config
from demo_service.infra.logging.context import (
    ContextInjectingFilter,
    clear_log_context,
    get_log_context,
    remove_from_log_context,
    set_log_context,
)
from demo_service.infra.logging.formatters import JSONFormatter


@pytest.fixture(autouse=True)
def _clean_context():
    clear_log_context()
    yield
    clear_log_context()


def make_record(msg: str = "hello %s", *args, **extra) -> logging.LogRecord:
    record = logging.LogRecord("demo", logging.INFO, __file__, 1, msg, args or ("world",), None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_context_helpers() -> None:
    set_log_context(correlation_id="abc", operation="GetAllUsers")
    remove_from_log_context("operation")

    assert get_log_context() == {"correlation_id": "abc"}


def test_filter_injects_context_without_overwriting() -> None:
    set_log_context(correlation_id="abc", user_id=1)
    record = make_record(user_id=99)

    assert ContextInjectingFilter().filter(record) is True
    assert record.correlation_id == "abc"
    assert record.user_id == 99


def test_json_formatter_output() -> None:
    formatter = JSONFormatter(static={"service": "demo-service"})

    payload = json.loads(formatter.format(make_record(correlation_id="abc")))

    assert payload["level"] == "INFO"
    assert payload["logger"] == "demo"
    assert payload["message"] == "hello world"
    assert payload["service"] == "demo-service"
    assert payload["correlation_id"] == "abc"
    assert payload["timestamp"].endswith("Z")
    assert "trace_id" not in payload


def test_json_formatter_keeps_exceptions_on_one_line() -> None:
    try:
        raise ValueError("bad value")
    except ValueError:
        record = make_record()
        record.exc_info = sys.exc_info()

    line = JSONFormatter().format(record)

    assert "\n" not in line
    assert "ValueError: bad value" in json.loads(line)["exception"]


def test_reconfiguring_registers_exit_hook_once(monkeypatch) -> None:
    register = MagicMock()
    monkeypatch.setattr(logging_config.atexit, "register", register)
    monkeypatch.setattr(logging_config, "_ATEXIT_REGISTERED", False)

    try:
        for _ in range(3):
            logging_config.configure_logging(log_level="DEBUG", capture_warnings=False)

        queue_handlers = [
            handler
            for handler in logging.getLogger().handlers
            if isinstance(handler, QueueHandler)
        ]
        assert len(queue_handlers) == 1
    finally:
        logging_config.shutdown()

    register.assert_called_once_with(logging_config.shutdown)
