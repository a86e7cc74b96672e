"""Logging utilities for accessgrid.

This module provides:
- Logging configuration from AccessGridConfig
- Safe previews of untrusted input (raw permission strings)
- A formatter with optional structured JSON output
"""

from __future__ import annotations

import json
import logging
from typing import Any, Optional

from .config import AccessGridConfig, LogLevel

# Attributes every LogRecord carries; anything else was passed via ``extra``.
_RESERVED_ATTRS = frozenset(
    {
        "name", "msg", "args", "created", "filename", "funcName",
        "levelname", "levelno", "lineno", "module", "msecs",
        "message", "pathname", "process", "processName", "relativeCreated",
        "thread", "threadName", "exc_info", "exc_text", "stack_info",
        "taskName", "asctime",
    }
)


def safe_preview(value: Any, limit: int = 120) -> str:
    """Create a safe, length-bounded preview of a value for logging.

    Converts any value to a single-line string, normalizes whitespace
    and truncates to ``limit`` characters.

    Args:
        value: The value to preview (any type)
        limit: Maximum length of the preview (default: 120)

    Returns:
        A truncated single-line string representation
    """
    if value is None:
        return ""

    if isinstance(value, str):
        s = value
    elif isinstance(value, (dict, list, tuple)):
        try:
            s = json.dumps(value, default=str, ensure_ascii=False)
        except (TypeError, ValueError):
            s = str(value)
    else:
        s = repr(value)

    s = " ".join(s.split())

    if len(s) > limit:
        return s[: limit - 1] + "…"

    return s


class AccessGridFormatter(logging.Formatter):
    """Formatter producing plain text or JSON lines.

    Extra fields attached to a record (``extra={"permission": ...}``) are
    rendered through :func:`safe_preview` so that raw input never reaches
    the log unbounded.
    """

    def __init__(
        self,
        json_format: bool = False,
        preview_limit: int = 120,
        service_name: Optional[str] = None,
        *args: Any,
        **kwargs: Any,
    ):
        super().__init__(*args, **kwargs)
        self.json_format = json_format
        self.preview_limit = preview_limit
        self.service_name = service_name

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if self.service_name:
            log_data["service"] = self.service_name

        extras = {
            key: safe_preview(value, limit=self.preview_limit)
            for key, value in record.__dict__.items()
            if key not in _RESERVED_ATTRS and not key.startswith("_")
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        if self.json_format:
            log_data.update(extras)
            return json.dumps(log_data, default=str, ensure_ascii=False)

        parts = [
            f"[{log_data['timestamp']}]",
            log_data["level"],
            log_data["logger"],
        ]
        parts.extend(f"{key}={value}" for key, value in extras.items())
        parts.append(f": {log_data['message']}")
        line = " ".join(parts)
        if "exception" in log_data:
            line = f"{line}\n{log_data['exception']}"
        return line


def setup_logging(
    config: Optional[AccessGridConfig] = None,
    json_format: Optional[bool] = None,
) -> None:
    """Configure the root logger for a process embedding accessgrid.

    Args:
        config: AccessGridConfig instance (if None, loads from environment)
        json_format: Overrides ``config.log_json`` when given
    """
    if config is None:
        from .config import load_config_from_env

        config = load_config_from_env()

    level_map = {
        LogLevel.DEBUG: logging.DEBUG,
        LogLevel.INFO: logging.INFO,
        LogLevel.WARNING: logging.WARNING,
        LogLevel.ERROR: logging.ERROR,
        LogLevel.CRITICAL: logging.CRITICAL,
    }
    log_level = level_map.get(config.log_level, logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Remove existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(
        AccessGridFormatter(
            json_format=config.log_json if json_format is None else json_format,
            preview_limit=config.preview_limit,
            service_name=config.service_name,
        )
    )
    root_logger.addHandler(console_handler)


__all__ = [
    "AccessGridFormatter",
    "safe_preview",
    "setup_logging",
]
