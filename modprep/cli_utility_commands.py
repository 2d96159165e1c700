"""Utility commands."""
import typer
from rich.console import Console

from modprep import __version__


def register_utility_commands(app: typer.Typer, console: Console) -> None:
    @app.command()
    def version():
        """Show modprep version."""
        console.print(f"modprep v{__version__}")
