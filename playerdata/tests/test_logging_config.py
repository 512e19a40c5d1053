"""Tests for structured logging helpers."""

import json
import logging
import sys
from unittest.mock import patch

import pytest

from playerdata.lib.logging_config import (
    CorrelationFilter,
    StructuredFormatter,
    get_logger,
    log_with_context,
    setup_logging,
)


def _record(message: str = "hello", **attrs) -> logging.LogRecord:
    record = logging.LogRecord(
        name="playerdata.test",
        level=logging.INFO,
        pathname=__file__,
        lineno=10,
        msg=message,
        args=(),
        exc_info=None,
    )
    for key, value in attrs.items():
        setattr(record, key, value)
    return record


@pytest.mark.unit
class TestStructuredFormatter:
    def test_json_fields(self):
        data = json.loads(StructuredFormatter("playerdata").format(_record()))

        assert data["message"] == "hello"
        assert data["level"] == "INFO"
        assert data["service"] == "playerdata"
        assert data["logger"] == "playerdata.test"
        assert data["timestamp"].endswith("Z")

    def test_extra_fields_unprefixed(self):
        record = _record(extra_profile_id=7, extra_page_count=2)

        data = json.loads(StructuredFormatter("playerdata").format(record))

        assert data["profile_id"] == 7
        assert data["page_count"] == 2

    def test_correlation_id(self):
        data = json.loads(StructuredFormatter("playerdata").format(_record(correlation_id="abc")))

        assert data["correlation_id"] == "abc"

    def test_exception_info(self):
        try:
            raise ValueError("boom")
        except ValueError:
            record = _record(exc_info=sys.exc_info())

        data = json.loads(StructuredFormatter("playerdata").format(record))

        assert data["exception"]["type"] == "ValueError"
        assert data["exception"]["message"] == "boom"


@pytest.mark.unit
class TestCorrelationFilter:
    def test_adds_correlation_id(self):
        correlation_filter = CorrelationFilter()
        correlation_filter.set_correlation_id("req-1")
        record = _record()

        assert correlation_filter.filter(record)
        assert record.correlation_id == "req-1"

    def test_keeps_existing_correlation_id(self):
        correlation_filter = CorrelationFilter()
        correlation_filter.set_correlation_id("req-1")
        record = _record(correlation_id="req-0")

        correlation_filter.filter(record)

        assert record.correlation_id == "req-0"


@pytest.mark.unit
class TestLoggingHelpers:
    def test_setup_logging_installs_structured_handler(self):
        root = logging.getLogger()
        level = root.level
        try:
            with patch.object(root, "handlers", []):
                correlation_filter = setup_logging("playerdata", level="debug")
                assert root.level == logging.DEBUG
                assert len(root.handlers) == 1
                handler = root.handlers[0]
        finally:
            root.setLevel(level)

        assert isinstance(handler.formatter, StructuredFormatter)
        assert correlation_filter in handler.filters
        assert logging.getLogger("urllib3").level == logging.WARNING

    def test_setup_logging_level_from_config(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "warning")
        root = logging.getLogger()
        level = root.level
        try:
            with patch.object(root, "handlers", []):
                setup_logging("playerdata")
                assert root.level == logging.WARNING
        finally:
            root.setLevel(level)

    def test_log_with_context(self, caplog):
        logger = get_logger("playerdata.test.context")
        caplog.set_level(logging.INFO, logger="playerdata.test.context")

        log_with_context(logger, "info", "stored", correlation_id="c-1", profile_id=7)

        record = caplog.records[-1]
        assert record.getMessage() == "stored"
        assert record.extra_profile_id == 7
        assert record.correlation_id == "c-1"
