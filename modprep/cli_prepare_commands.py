"""Plan and apply commands: create a new mod from the template."""
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from modprep.cli_support import (
    confirm_action,
    handle_cli_error,
    print_info,
    print_success,
    print_warning,
    save_run_log,
    setup_file_logging,
)
from modprep.core.instantiator import TemplateInstantiator
from modprep.core.settings import SettingsStore, default_dest_base
from modprep.models.request import InstantiationRequest, RunStatus
from modprep.models.settings import Settings


def build_request(
    settings: Settings,
    mod_name: str,
    template_root: Optional[Path] = None,
    dest_base: Optional[Path] = None,
    prefix: Optional[str] = None,
    include_git: Optional[bool] = None,
    open_when_done: Optional[bool] = None,
) -> InstantiationRequest:
    """Combine command line options with saved settings.

    Explicit options win, then saved settings, then built-in defaults.
    """
    template_root = template_root or (Path(settings.template_root) if settings.template_root else Path.cwd())
    if dest_base is None:
        dest_base = Path(settings.dest_base) if settings.dest_base else default_dest_base(template_root)

    return InstantiationRequest.create(
        template_root=template_root,
        dest_base=dest_base,
        mod_name=mod_name,
        pkg_prefix=settings.pkg_prefix if prefix is None else prefix,
        include_git=settings.include_git if include_git is None else include_git,
        open_when_done=settings.open_when_done if open_when_done is None else open_when_done,
    )


def remember(store: SettingsStore, request: InstantiationRequest) -> bool:
    """Save the request's reusable values once its paths check out."""
    if not (request.template_root.is_dir() and request.dest_base.is_dir()):
        return False
    return store.save(Settings(
        template_root=str(request.template_root.resolve()),
        dest_base=str(request.dest_base.resolve()),
        pkg_prefix=request.pkg_prefix,
        include_git=request.include_git,
        open_when_done=request.open_when_done,
    ))


def register_prepare_commands(app: typer.Typer, console: Console) -> None:
    """Register plan and apply on the main app."""

    def execute(
        apply: bool,
        mod_name: str,
        template_root: Optional[Path],
        dest_base: Optional[Path],
        prefix: Optional[str],
        include_git: Optional[bool],
        open_when_done: Optional[bool],
        log_file: Optional[Path],
        verbose: bool,
        save_settings: bool,
        yes: bool = False,
    ) -> None:
        if verbose:
            print_info(console, f"Logging to {setup_file_logging(verbose=True)}")

        store = SettingsStore()
        request = build_request(
            store.load(),
            mod_name,
            template_root=template_root,
            dest_base=dest_base,
            prefix=prefix,
            include_git=include_git,
            open_when_done=open_when_done,
        )
        if save_settings:
            remember(store, request)

        def ask(destination: Path) -> bool:
            return confirm_action(
                f"Destination already exists:\n{destination}\n\nOverwrite its contents?",
                yes_flag=yes,
            )

        instantiator = TemplateInstantiator(
            confirm_overwrite=ask,
            sink=lambda line: console.print(line, markup=False, highlight=False, soft_wrap=True),
        )
        result = instantiator.run(request, apply=apply)

        if log_file:
            save_run_log(result, log_file)

        if result.status is RunStatus.CANCELLED:
            print_warning(console, "Cancelled")
        elif result.status is RunStatus.FAILED:
            handle_cli_error(result.error_message, console)
        elif apply:
            print_success(console, f"Created {result.destination}")
        else:
            console.print(f"\n[yellow]Run 'modprep apply {request.mod_name}' to make these changes[/yellow]")

    @app.command()
    def plan(
        mod_name: str = typer.Argument(..., help="Name of the new mod"),
        template_root: Optional[Path] = typer.Option(None, "--template-root", "-t", help="Template (source) directory"),
        dest_base: Optional[Path] = typer.Option(None, "--dest-base", "-d", help="Directory the mod folder is created in"),
        prefix: Optional[str] = typer.Option(None, "--prefix", "-p", help="Package id prefix (author/org)"),
        include_git: Optional[bool] = typer.Option(None, "--include-git/--no-include-git", help="Copy .git history"),
        open_when_done: Optional[bool] = typer.Option(None, "--open/--no-open", help="Open destination when done"),
        log_file: Optional[Path] = typer.Option(None, "--log-file", help="Also write the run log to this file"),
        verbose: bool = typer.Option(False, "--verbose", "-v", help="Write a debug log file"),
        save_settings: bool = typer.Option(True, "--save-settings/--no-save-settings", help="Remember options for next time"),
    ):
        """Show what would be done, without touching any files (dry run)."""
        execute(False, mod_name, template_root, dest_base, prefix, include_git,
                open_when_done, log_file, verbose, save_settings)

    @app.command()
    def apply(
        mod_name: str = typer.Argument(..., help="Name of the new mod"),
        template_root: Optional[Path] = typer.Option(None, "--template-root", "-t", help="Template (source) directory"),
        dest_base: Optional[Path] = typer.Option(None, "--dest-base", "-d", help="Directory the mod folder is created in"),
        prefix: Optional[str] = typer.Option(None, "--prefix", "-p", help="Package id prefix (author/org)"),
        include_git: Optional[bool] = typer.Option(None, "--include-git/--no-include-git", help="Copy .git history"),
        open_when_done: Optional[bool] = typer.Option(None, "--open/--no-open", help="Open destination when done"),
        log_file: Optional[Path] = typer.Option(None, "--log-file", help="Also write the run log to this file"),
        verbose: bool = typer.Option(False, "--verbose", "-v", help="Write a debug log file"),
        save_settings: bool = typer.Option(True, "--save-settings/--no-save-settings", help="Remember options for next time"),
        yes: bool = typer.Option(False, "--yes", "-y", help="Overwrite an existing destination without asking"),
    ):
        """Copy the template and apply all renames and rewrites."""
        execute(True, mod_name, template_root, dest_base, prefix, include_git,
                open_when_done, log_file, verbose, save_settings, yes=yes)
