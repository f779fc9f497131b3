"""Tests for workflow command formatting."""

import pytest

from frieza_action.infrastructure.workflow_commands import (
    escape_data,
    escape_property,
    format_command,
)


class TestEscaping:
    """Test workflow command escaping."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("plain", "plain"),
            ("100%", "100%25"),
            ("line1\nline2", "line1%0Aline2"),
            ("a\r\nb", "a%0D%0Ab"),
            ("::error::x", "::error::x"),
        ],
    )
    def test_escape_data(self, value: str, expected: str) -> None:
        """Test data escaping keeps a message on one line."""
        assert escape_data(value) == expected

    def test_escape_property(self) -> None:
        """Test property values also escape separators."""
        assert escape_property("a:b,c%\n") == "a%3Ab%2Cc%25%0A"


class TestFormatCommand:
    """Test format_command function."""

    def test_without_properties(self) -> None:
        """Test a bare command with data."""
        assert format_command("error", "boom") == "::error::boom"

    def test_empty_message(self) -> None:
        """Test a command with no data."""
        assert format_command("debug") == "::debug::"

    def test_with_properties(self) -> None:
        """Test properties are rendered and escaped."""
        assert (
            format_command("warning", "slow", title="Net: slow")
            == "::warning title=Net%3A slow::slow"
        )

    def test_empty_properties_skipped(self) -> None:
        """Test properties without a value are left out."""
        assert format_command("error", "x", title="") == "::error::x"

    def test_multiline_message_stays_single_line(self) -> None:
        """Test a message cannot inject a second command."""
        line = format_command("error", "first\n::add-mask::oops")
        assert "\n" not in line
        assert line == "::error::first%0A::add-mask::oops"
