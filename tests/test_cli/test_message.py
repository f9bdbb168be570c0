"""Tests for message command."""

import pytest
from typer.testing import CliRunner
from hexterm.cli.main import app


runner = CliRunner()


def test_message_default_level():
    """Test default level is info."""
    result = runner.invoke(app, ["message", "System ready"])
    assert result.exit_code == 0
    assert result.stdout == "\x1b[38;2;0;128;0mSystem ready\n"


@pytest.mark.parametrize("level,expected", [
    ("error", "\x1b[38;2;255;0;0mboom\n"),
    ("warning", "\x1b[38;2;255;255;0mboom\n"),
    ("info", "\x1b[38;2;0;128;0mboom\n"),
    ("debug", "boom\n"),
    ("ERROR", "\x1b[38;2;255;0;0mboom\n"),
])
def test_message_levels(level, expected):
    """Test each level writer."""
    result = runner.invoke(app, ["message", "boom", "--level", level])
    assert result.exit_code == 0
    assert result.stdout == expected


def test_message_unknown_level():
    """Test unknown level is rejected."""
    result = runner.invoke(app, ["message", "boom", "--level", "fatal"])
    assert result.exit_code == 1
    assert "unknown level" in result.stdout
    assert "warning" in result.stdout


def test_message_unknown_level_with_brackets():
    """Test markup-like level is printed literally."""
    result = runner.invoke(app, ["message", "boom", "--level", "[/x]"])
    assert result.exit_code == 1
    assert "unknown level '[/x]'" in result.stdout
