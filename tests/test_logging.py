"""Tests for accessgrid.logging module."""

from __future__ import annotations

import json
import logging
import os
from typing import Iterator
from unittest.mock import patch

import pytest

from accessgrid import AccessGridConfig, AccessGridFormatter, LogLevel, parse_permission, safe_preview, setup_logging


@pytest.fixture
def restore_root_logger() -> Iterator[None]:
    root_logger = logging.getLogger()
    level = root_logger.level
    handlers = root_logger.handlers[:]
    yield
    root_logger.setLevel(level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    for handler in handlers:
        root_logger.addHandler(handler)


def _record(msg: str = "Test message", **extra: object) -> logging.LogRecord:
    record = logging.LogRecord(
        name="accessgrid.test",
        level=logging.WARNING,
        pathname="",
        lineno=0,
        msg=msg,
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestSafePreview:
    """Tests for safe_preview function."""

    def test_none_value(self) -> None:
        assert safe_preview(None) == ""

    def test_string_value(self) -> None:
        assert safe_preview("users:read") == "users:read"

    def test_whitespace_normalized(self) -> None:
        assert safe_preview("users:\nread\t ok") == "users: read ok"

    def test_truncation(self) -> None:
        result = safe_preview("a" * 300, limit=50)
        assert len(result) == 50
        assert result.endswith("…")

    def test_list_value(self) -> None:
        assert safe_preview(["users:read"]) == '["users:read"]'

    def test_other_types_use_repr(self) -> None:
        assert safe_preview(42) == "42"
        assert safe_preview(b"x") == "b'x'"


class TestAccessGridFormatter:
    """Tests for AccessGridFormatter."""

    def test_json_format(self) -> None:
        formatter = AccessGridFormatter(json_format=True, service_name="scheduler-api")
        data = json.loads(formatter.format(_record(permission="bogus")))
        assert data["level"] == "WARNING"
        assert data["logger"] == "accessgrid.test"
        assert data["message"] == "Test message"
        assert data["service"] == "scheduler-api"
        assert data["permission"] == "bogus"

    def test_plain_format(self) -> None:
        result = AccessGridFormatter(json_format=False).format(_record(permission="bogus"))
        assert "WARNING" in result
        assert "permission=bogus" in result
        assert result.endswith(": Test message")

    def test_extras_are_bounded(self) -> None:
        formatter = AccessGridFormatter(json_format=True, preview_limit=16)
        data = json.loads(formatter.format(_record(permission="x" * 500)))
        assert len(data["permission"]) == 16

    def test_asctime_not_treated_as_extra(self) -> None:
        """A record already formatted by a stdlib formatter keeps its fields out of the extras."""
        record = _record(permission="bogus")
        logging.Formatter("%(asctime)s %(message)s").format(record)

        data = json.loads(AccessGridFormatter(json_format=True).format(record))
        assert "asctime" not in data
        assert "asctime=" not in AccessGridFormatter(json_format=False).format(record)


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_setup_with_config(self, restore_root_logger: None) -> None:
        setup_logging(config=AccessGridConfig(log_level=LogLevel.DEBUG))
        root_logger = logging.getLogger()
        assert root_logger.level == logging.DEBUG
        assert len(root_logger.handlers) == 1
        assert isinstance(root_logger.handlers[0].formatter, AccessGridFormatter)

    @patch.dict(os.environ, {"ACCESSGRID_LOG_LEVEL": "ERROR"}, clear=True)
    def test_setup_with_env(self, restore_root_logger: None) -> None:
        setup_logging()
        assert logging.getLogger().level == logging.ERROR

    def test_json_override(self, restore_root_logger: None) -> None:
        setup_logging(config=AccessGridConfig(log_json=False), json_format=True)
        assert logging.getLogger().handlers[0].formatter.json_format is True

    def test_unparsable_diagnostic_output(
        self, restore_root_logger: None, capsys: pytest.CaptureFixture
    ) -> None:
        """The codec warning reaches the configured handler as JSON."""
        setup_logging(config=AccessGridConfig(log_json=True, preview_limit=12))
        parse_permission("not a permission at all")

        line = capsys.readouterr().err.strip().splitlines()[-1]
        data = json.loads(line)
        assert data["logger"] == "accessgrid.permissions.codec"
        assert data["level"] == "WARNING"
        assert data["permission"] == "not a permi…"

    def test_unparsable_message_respects_preview_limit(
        self, restore_root_logger: None, capsys: pytest.CaptureFixture
    ) -> None:
        """Raw input is bounded by preview_limit everywhere in the log line."""
        setup_logging(config=AccessGridConfig(log_json=True, preview_limit=12))
        parse_permission("x" * 500)

        line = capsys.readouterr().err.strip().splitlines()[-1]
        data = json.loads(line)
        assert data["message"] == "Unparsable permission string"
        assert len(data["permission"]) == 12
        assert "x" * 12 not in line
