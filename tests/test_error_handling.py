"""Tests for error handling and edge cases in accessgrid."""

from __future__ import annotations

import pytest

from accessgrid import (
    AccessGridError,
    ConfigurationError,
    InvalidPermissionError,
    areas_of,
    areas_with_any_permission,
    has_any_for_area,
    has_permission,
    normalize_permissions,
    parse_permission,
    to_backend_form,
)

MALFORMED = [None, 0, 3.5, b"users:read", ["users:read"], {"area": "users"}, "", ":", "::", "users"]


class TestExceptionHierarchy:
    """Tests for the exception classes."""

    def test_base_defaults(self) -> None:
        error = AccessGridError()
        assert error.code == "INTERNAL_ERROR"
        assert error.message == "An internal error occurred"
        assert error.details == {}

    def test_custom_message_code_details(self) -> None:
        error = AccessGridError("boom", code="CUSTOM", area="users")
        assert str(error) == "boom"
        assert error.code == "CUSTOM"
        assert error.details == {"area": "users"}

    def test_subclasses(self) -> None:
        assert issubclass(ConfigurationError, AccessGridError)
        assert issubclass(InvalidPermissionError, AccessGridError)
        assert ConfigurationError().code == "CONFIGURATION_ERROR"

    def test_invalid_permission_message(self) -> None:
        error = InvalidPermissionError("users")
        assert str(error) == "Unparsable permission string: 'users'"
        assert error.value == "users"


class TestNeverRaises:
    """Malformed input degrades to empty results instead of raising."""

    @pytest.mark.parametrize("value", MALFORMED)
    def test_parse(self, value: object) -> None:
        assert parse_permission(value) == ("", "")

    def test_normalize(self) -> None:
        assert normalize_permissions(MALFORMED) == []

    def test_areas(self) -> None:
        assert areas_of(MALFORMED) == set()
        assert areas_with_any_permission(MALFORMED) == []

    def test_matching(self) -> None:
        assert not has_permission(MALFORMED, "users", "read")
        assert not has_any_for_area(MALFORMED, "users")

    def test_backend_form_keeps_length(self) -> None:
        assert len(to_backend_form(MALFORMED)) == len(MALFORMED)
