"""Tests for CLI Ensure utility class."""

import pytest

from faas_cli.cli.ensure import Ensure


class TestEnsureNotNone:
    """Tests for Ensure.not_none method."""

    def test_returns_value_when_not_none(self) -> None:
        """Ensure.not_none returns the value unchanged when not None."""
        result = Ensure.not_none("hello", "Value is None")
        assert result == "hello"

    def test_exits_when_none(self) -> None:
        """Ensure.not_none raises SystemExit when value is None."""
        with pytest.raises(SystemExit) as exc_info:
            Ensure.not_none(None, "Value is None")
        assert exc_info.value.code == 1

    def test_error_message_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Ensure.not_none outputs error message with red Error prefix to stderr."""
        with pytest.raises(SystemExit):
            Ensure.not_none(None, "Custom error message")

        captured = capsys.readouterr()
        assert "Error:" in captured.err
        assert "Custom error message" in captured.err
        assert captured.out == ""

    def test_empty_string_is_not_none(self) -> None:
        """Ensure.not_none returns empty string since empty string is not None."""
        assert Ensure.not_none("", "Value is None") == ""


class TestEnsureInvariant:
    """Tests for Ensure.invariant method."""

    def test_passes_when_true(self) -> None:
        Ensure.invariant(True, "should not fail")

    def test_exits_when_false(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            Ensure.invariant(False, "Invariant broken")

        assert exc_info.value.code == 1
        assert "Invariant broken" in capsys.readouterr().err
