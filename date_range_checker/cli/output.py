"""Console output formatting utilities for the CLI.

Logging Strategy:
- Use console output functions (success, error, warning, plain) for the report itself
- Use structured logging (logger.info, logger.error, etc.) for diagnostics
- Console output goes to stdout (errors to stderr); logs always go to stderr
"""

from __future__ import annotations

from enum import Enum

import typer


class OutputColor(str, Enum):
    """Valid color options for plain text output."""

    CYAN = "CYAN"
    RED = "RED"


def success(message: str, *, prefix: bool = True) -> None:
    """Display a success message in green with checkmark emoji.

    Example:
        success("No missing ranges.")
        # Output: ✅ No missing ranges.
    """
    formatted = f"✅ {message}" if prefix else message
    typer.secho(formatted, fg=typer.colors.GREEN)


def error(message: str, *, prefix: bool = True, err: bool = True) -> None:
    """Display an error message in red with cross emoji.

    Args:
        message: The error message to display
        prefix: Whether to include the cross emoji prefix (default: True)
        err: Whether to write to stderr instead of stdout (default: True)
    """
    formatted = f"❌ {message}" if prefix else message
    typer.secho(formatted, fg=typer.colors.RED, err=err)


def warning(message: str, *, prefix: bool = True) -> None:
    formatted = f"⚠️  {message}" if prefix else message
    typer.secho(formatted, fg=typer.colors.YELLOW)


def plain(message: str, *, color: OutputColor | None = None) -> None:
    """Display a plain message without emoji prefix.

    Example:
        plain("2023-01-04 - 2023-01-05", color=OutputColor.RED)
    """
    if color:
        typer.secho(message, fg=getattr(typer.colors, color.value))
    else:
        typer.echo(message)
