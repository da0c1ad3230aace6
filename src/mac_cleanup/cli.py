"""CLI interface for mac-cleanup."""

import logging

import typer
from rich.logging import RichHandler

from mac_cleanup import __version__
from mac_cleanup.config import Settings
from mac_cleanup.display import (
    confirm_action,
    console,
    set_color,
    show_dry_run_estimate,
    show_error,
    show_message,
    show_run_summary,
)
from mac_cleanup.errors import PrivilegeError
from mac_cleanup.models import RunMode
from mac_cleanup.orchestrator import CleanupOrchestrator
from mac_cleanup.privileges import sudo_session

# Create Typer app
app = typer.Typer(
    name="mac-cleanup",
    help="Free up disk space on macOS by removing caches, logs and temp files",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"mac-cleanup version {__version__}")
        raise typer.Exit()


def setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


@app.command()
def main(
    dry_run: bool = typer.Option(
        False, "--dry-run", "-n", help="Print approx space to be cleaned without deleting"
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Print every step, including removed paths"
    ),
    update: bool = typer.Option(
        False, "--update", "-u", help="Update Homebrew formulae before cleaning"
    ),
    no_color: bool = typer.Option(False, "--no-color", help="Disable colored output"),
    version: bool = typer.Option(
        None,
        "--version",
        help="Show version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """Clean up caches, logs and temporary files to reclaim disk space."""
    settings = Settings.from_env()
    set_color(not (no_color or settings.no_color))
    setup_logging(verbose)

    mode = RunMode(dry_run=dry_run, update=update, verbose=verbose)
    orchestrator = CleanupOrchestrator(settings=settings)

    try:
        with sudo_session():
            summary = orchestrator.run(mode, on_message=show_message)

            if not mode.dry_run:
                show_run_summary(summary)
                return

            show_dry_run_estimate(summary)
            if confirm_action("Continue?"):
                live = mode.model_copy(update={"dry_run": False})
                summary = orchestrator.run(live, on_message=show_message)
                show_run_summary(summary)
    except PrivilegeError as e:
        show_error(str(e))
        raise typer.Exit(1)
    except KeyboardInterrupt:
        console.print("[yellow]Interrupted[/yellow]")
        raise typer.Exit(130)


if __name__ == "__main__":
    app()
