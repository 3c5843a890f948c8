"""Unit tests for StrEnum definitions."""

import pytest

from procenv.enums import JoinMode


class TestJoinMode:
    """Tests for JoinMode enum."""

    def test_alias_value(self):
        """ALIAS should have string value 'alias'."""
        assert JoinMode.ALIAS == "alias"
        assert JoinMode.ALIAS.value == "alias"

    def test_copy_value(self):
        """COPY should have string value 'copy'."""
        assert JoinMode.COPY == "copy"
        assert JoinMode.COPY.value == "copy"

    def test_from_string(self):
        assert JoinMode("copy") is JoinMode.COPY

    def test_invalid_value(self):
        with pytest.raises(ValueError):
            JoinMode("merge")
