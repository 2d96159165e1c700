#!/usr/bin/env python3
"""modprep CLI - Prepare a new mod from the ModTemplate tree."""

import typer
from rich.console import Console

from modprep.cli_prepare_commands import register_prepare_commands
from modprep.cli_settings_commands import register_settings_commands
from modprep.cli_utility_commands import register_utility_commands

app = typer.Typer(
    name="modprep",
    help="""modprep - Prepare a new mod from ModTemplate

Copies the template, renames the solution and project, and patches About.xml.

Quick start:
  modprep plan MyMod -t path/to/ModTemplate    # See what will happen
  modprep apply MyMod -t path/to/ModTemplate   # Make it happen

Options you pass are remembered: see 'modprep settings show'.
""",
    add_completion=False,
)

console = Console()

# Attach modular subcommands
register_prepare_commands(app, console)
register_settings_commands(app, console)
register_utility_commands(app, console)

if __name__ == "__main__":
    app()
