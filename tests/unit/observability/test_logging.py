"""Unit tests for structured logging setup."""

from __future__ import annotations

import json
import logging
from typing import Iterator

import pytest
import structlog

from log_viewer.observability.correlation import CorrelationContext, RequestContext
from log_viewer.observability.logging import CorrelationProcessor, JsonLoggerFactory, get_logger
from log_viewer.observability.logging.factory import QUIET_LOGGERS


@pytest.fixture
def restore_logging() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    quiet = {name: logging.getLogger(name).level for name in QUIET_LOGGERS}
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    for name, lvl in quiet.items():
        logging.getLogger(name).setLevel(lvl)
    structlog.reset_defaults()
    CorrelationContext.clear()


# ---------------------------------------------------------------------------
# CorrelationProcessor
# ---------------------------------------------------------------------------


class TestCorrelationProcessor:
    def teardown_method(self) -> None:
        CorrelationContext.clear()

    def test_no_context_leaves_event_alone(self) -> None:
        CorrelationContext.clear()
        assert CorrelationProcessor()(None, "info", {"event": "x"}) == {"event": "x"}

    def test_injects_ids(self) -> None:
        CorrelationContext.set(RequestContext(correlation_id="cid", trace_id="tid"))
        event = CorrelationProcessor()(None, "info", {"event": "x"})
        assert event == {"event": "x", "correlation_id": "cid", "trace_id": "tid"}

    def test_trace_id_omitted_when_absent(self) -> None:
        CorrelationContext.set(RequestContext(correlation_id="cid"))
        assert "trace_id" not in CorrelationProcessor()(None, "info", {"event": "x"})

    def test_existing_values_kept(self) -> None:
        CorrelationContext.set(RequestContext(correlation_id="cid"))
        event = CorrelationProcessor()(None, "info", {"event": "x", "correlation_id": "explicit"})
        assert event["correlation_id"] == "explicit"


# ---------------------------------------------------------------------------
# JsonLoggerFactory
# ---------------------------------------------------------------------------


class TestJsonLoggerFactory:
    def test_json_output(self, restore_logging: None, capsys: pytest.CaptureFixture[str]) -> None:
        JsonLoggerFactory.configure("INFO")
        CorrelationContext.set(RequestContext(correlation_id="req-1"))

        get_logger("log_viewer.test").info("search_started", index="filebeat-*")

        line = capsys.readouterr().err.strip().splitlines()[-1]
        record = json.loads(line)
        assert record["event"] == "search_started"
        assert record["index"] == "filebeat-*"
        assert record["level"] == "info"
        assert record["logger"] == "log_viewer.test"
        assert record["correlation_id"] == "req-1"
        assert "timestamp" in record

    def test_level_filtering(self, restore_logging: None, capsys: pytest.CaptureFixture[str]) -> None:
        JsonLoggerFactory.configure("warning")
        get_logger("log_viewer.test").info("hidden")
        assert "hidden" not in capsys.readouterr().err

    def test_stdlib_records_rendered(self, restore_logging: None, capsys: pytest.CaptureFixture[str]) -> None:
        JsonLoggerFactory.configure(logging.INFO)
        logging.getLogger("uvicorn.error").warning("started")
        record = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
        assert record["event"] == "started"
        assert record["logger"] == "uvicorn.error"

    def test_console_renderer(self, restore_logging: None, capsys: pytest.CaptureFixture[str]) -> None:
        JsonLoggerFactory.configure("INFO", json=False)
        get_logger("log_viewer.test").info("plain_event")
        err = capsys.readouterr().err
        assert "plain_event" in err
        assert not err.lstrip().startswith("{")

    def test_quiet_loggers(self, restore_logging: None) -> None:
        JsonLoggerFactory.configure("DEBUG")
        for name in QUIET_LOGGERS:
            assert logging.getLogger(name).level == logging.WARNING

    def test_quiet_loggers_follow_higher_level(self, restore_logging: None) -> None:
        JsonLoggerFactory.configure("ERROR")
        assert logging.getLogger("httpx").level == logging.ERROR


class TestGetLogger:
    def test_initial_values_bound(self) -> None:
        with structlog.testing.capture_logs() as logs:
            get_logger("x", component="gateway").info("hello")
        assert logs == [{"component": "gateway", "event": "hello", "log_level": "info"}]
