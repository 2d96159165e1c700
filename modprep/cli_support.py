"""Shared utilities for modprep CLI modules."""
from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from modprep.models.request import RunResult


def setup_file_logging(log_file: Optional[str] = None, verbose: bool = False) -> Path:
    """Set up file logging for CLI commands.

    Args:
        log_file: Path to log file (optional)
        verbose: Enable verbose logging
    """
    from modprep.core.logger import setup_file_logging as _setup_file_logging
    return _setup_file_logging(log_file=log_file, verbose=verbose)


def confirm_action(message: str, yes_flag: bool = False) -> bool:
    """Prompt user for confirmation unless --yes was given.

    Args:
        message: Confirmation message to display
        yes_flag: Skip prompt if True (from --yes flag)

    Returns:
        True if confirmed, False otherwise (including when input is closed)
    """
    if yes_flag:
        return True
    try:
        return typer.confirm(message, default=False)
    except typer.Abort:
        return False


def handle_cli_error(
    message: str,
    console: Console,
    exit_code: int = 1
) -> None:
    """Print an error with consistent formatting and exit.

    Args:
        message: Error message
        console: Rich console for output
        exit_code: Exit code to use
    """
    console.print(f"[red]Error:[/red] {message}")
    raise typer.Exit(exit_code)


def save_run_log(result: RunResult, path: Path) -> Path:
    """Write the run log of ``result`` to ``path``."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(result.log_text() + "\n", encoding="utf-8")
    return path


def print_success(console: Console, message: str, prefix: str = "✓") -> None:
    """Print success message with consistent formatting."""
    console.print(f"[green]{prefix}[/green] {message}")


def print_warning(console: Console, message: str, prefix: str = "⚠") -> None:
    """Print warning message with consistent formatting."""
    console.print(f"[yellow]{prefix}[/yellow] {message}")


def print_info(console: Console, message: str, prefix: str = "ℹ") -> None:
    """Print info message with consistent formatting."""
    console.print(f"[cyan]{prefix}[/cyan] {message}")
