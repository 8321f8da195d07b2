"""Tests for CLI output formatting utilities."""

from __future__ import annotations

from date_range_checker.cli import output
from date_range_checker.cli.output import OutputColor


def test_success_with_prefix(capsys: any) -> None:
    """Test success message includes checkmark emoji by default."""
    output.success("No missing ranges.")
    captured = capsys.readouterr()
    assert "✅ No missing ranges." in captured.out


def test_success_without_prefix(capsys: any) -> None:
    output.success("No missing ranges.", prefix=False)
    captured = capsys.readouterr()
    assert "✅" not in captured.out
    assert "No missing ranges." in captured.out


def test_error_writes_to_stderr(capsys: any) -> None:
    """Test error message writes to stderr by default."""
    output.error("Could not find directory")
    captured = capsys.readouterr()
    assert "❌ Could not find directory" in captured.err
    assert captured.out == ""


def test_error_to_stdout_without_prefix(capsys: any) -> None:
    output.error("Error message", prefix=False, err=False)
    captured = capsys.readouterr()
    assert "❌" not in captured.out
    assert "Error message" in captured.out


def test_warning_with_prefix(capsys: any) -> None:
    output.warning("No files with date ranges found")
    captured = capsys.readouterr()
    assert "⚠️" in captured.out
    assert "No files with date ranges found" in captured.out


def test_plain_no_color(capsys: any) -> None:
    output.plain("2023-01-04 - 2023-01-05")
    captured = capsys.readouterr()
    assert captured.out == "2023-01-04 - 2023-01-05\n"


def test_plain_with_color(capsys: any) -> None:
    """Test plain message with color uses enum."""
    output.plain("Missing ranges:", color=OutputColor.RED)
    captured = capsys.readouterr()
    assert "Missing ranges:" in captured.out


def test_output_color_enum_values() -> None:
    assert OutputColor.CYAN.value == "CYAN"
    assert OutputColor.RED.value == "RED"
