"""Tests for core.types module."""

from core.types import ErrorCategory


class TestErrorCategory:
    def test_values(self):
        assert ErrorCategory.PERMANENT.value == "permanent"
        assert ErrorCategory.UNKNOWN.value == "unknown"

    def test_all_members(self):
        assert set(ErrorCategory.__members__.keys()) == {"PERMANENT", "UNKNOWN"}

    def test_from_value(self):
        assert ErrorCategory("permanent") is ErrorCategory.PERMANENT
