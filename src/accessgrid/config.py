"""Configuration for accessgrid.

Pydantic-validated settings for the ambient concerns of the engine
(logging level and format, preview length of logged input). Matching
semantics are not configurable: the same permission list always yields
the same decision.

Direct os.environ access is limited to :func:`load_config_from_env`.
"""

from __future__ import annotations

import os
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from .exceptions import ConfigurationError

_TRUTHY = ("true", "1", "yes", "on")


class LogLevel(str, Enum):
    """Standard log levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class AccessGridConfig(BaseModel):
    """Settings consumed by :func:`accessgrid.logging.setup_logging`.

    Environment variables (see :func:`load_config_from_env`):
        ACCESSGRID_LOG_LEVEL      DEBUG | INFO | WARNING | ERROR | CRITICAL
        ACCESSGRID_LOG_JSON       emit JSON log lines (true/false)
        ACCESSGRID_PREVIEW_LIMIT  max characters of raw input in diagnostics
        ACCESSGRID_SERVICE_NAME   name of the embedding service
    """

    log_level: LogLevel = Field(
        default=LogLevel.INFO,
        description="Logging level for the engine loggers",
    )
    log_json: bool = Field(
        default=False,
        description="Use JSON log format (default: plain text)",
    )
    preview_limit: int = Field(
        default=120,
        description="Maximum length of raw permission strings echoed into logs",
    )
    service_name: Optional[str] = Field(
        default=None,
        description="Name of the host service (e.g. 'scheduler-api')",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: str | LogLevel) -> LogLevel:
        """Convert string to LogLevel enum."""
        if isinstance(v, LogLevel):
            return v
        if isinstance(v, str):
            try:
                return LogLevel[v.strip().upper()]
            except KeyError:
                raise ValueError(f"Invalid log level: {v}. Must be one of {[e.value for e in LogLevel]}")
        raise ValueError(f"Log level must be string or LogLevel enum, got {type(v)}")

    @field_validator("preview_limit")
    @classmethod
    def validate_preview_limit(cls, v: int) -> int:
        if v < 8:
            raise ValueError("preview_limit must be at least 8")
        return v

    model_config = {
        "use_enum_values": True,
        "extra": "forbid",
    }


def load_config_from_env() -> AccessGridConfig:
    """Load configuration from environment variables.

    Returns:
        AccessGridConfig with values from the environment or defaults.

    Raises:
        ConfigurationError: If any variable holds an invalid value.
    """
    preview_raw = os.getenv("ACCESSGRID_PREVIEW_LIMIT", "120")
    try:
        preview_limit = int(preview_raw)
    except ValueError:
        raise ConfigurationError(
            f"ACCESSGRID_PREVIEW_LIMIT must be an integer, got {preview_raw!r}",
            variable="ACCESSGRID_PREVIEW_LIMIT",
        )

    try:
        return AccessGridConfig(
            log_level=os.getenv("ACCESSGRID_LOG_LEVEL", "INFO"),
            log_json=os.getenv("ACCESSGRID_LOG_JSON", "false").lower() in _TRUTHY,
            preview_limit=preview_limit,
            service_name=os.getenv("ACCESSGRID_SERVICE_NAME") or None,
        )
    except ValidationError as e:
        raise ConfigurationError(f"Invalid accessgrid configuration: {e}") from e


__all__ = [
    "AccessGridConfig",
    "LogLevel",
    "load_config_from_env",
]
