"""Settings commands: inspect and reset remembered options."""
import typer
from rich.console import Console
from rich.table import Table

from modprep.cli_support import print_info, print_success
from modprep.core.settings import SettingsStore


def register_settings_commands(app: typer.Typer, console: Console) -> None:
    """Register the settings command group."""
    settings_app = typer.Typer(help="Inspect or reset remembered options")

    @settings_app.command("show")
    def show():
        """Show the options remembered from the last run."""
        store = SettingsStore()
        settings = store.load()

        table = Table(title=f"Settings ({store.path})")
        table.add_column("Option", style="cyan")
        table.add_column("Value")
        for key, value in settings.model_dump().items():
            table.add_row(key, "" if value is None else str(value))
        console.print(table)

        if not store.path.exists():
            print_info(console, "No settings saved yet, showing defaults")

    @settings_app.command("clear")
    def clear():
        """Forget all remembered options."""
        store = SettingsStore()
        if store.clear():
            print_success(console, f"Removed {store.path}")
        else:
            print_info(console, "No settings to remove")

    app.add_typer(settings_app, name="settings")
