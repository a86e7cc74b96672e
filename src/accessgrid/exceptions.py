"""Exception hierarchy for accessgrid.

The parsing and matching functions never raise on malformed data; they
return best-effort values instead. Exceptions are reserved for:

- ``ConfigurationError``: invalid settings in the environment.
- ``InvalidPermissionError``: opt-in strict parsing via
  :func:`accessgrid.permissions.require_permission`.

Usage:
    from accessgrid.exceptions import AccessGridError, InvalidPermissionError
"""

from __future__ import annotations

from typing import Any

__all__ = [
    "AccessGridError",
    "ConfigurationError",
    "InvalidPermissionError",
]


class AccessGridError(Exception):
    """Base exception for accessgrid.

    Attributes:
        code: Stable error code string (e.g. "INVALID_PERMISSION").
        message: Human-readable error description.
        details: Additional context as keyword arguments.
    """

    code: str = "INTERNAL_ERROR"
    message: str = "An internal error occurred"

    def __init__(self, message: str | None = None, code: str | None = None, **kwargs: Any) -> None:
        self.message = message or self.message
        self.code = code or self.code
        self.details = kwargs
        super().__init__(self.message)


class ConfigurationError(AccessGridError):
    """Invalid or missing configuration."""

    code: str = "CONFIGURATION_ERROR"
    message: str = "Invalid configuration"


class InvalidPermissionError(AccessGridError):
    """A permission string matched neither the canonical nor the verbose syntax."""

    code: str = "INVALID_PERMISSION"
    message: str = "Unparsable permission string"

    def __init__(self, value: Any, message: str | None = None, **kwargs: Any) -> None:
        self.value = value
        super().__init__(message or f"Unparsable permission string: {value!r}", value=value, **kwargs)
