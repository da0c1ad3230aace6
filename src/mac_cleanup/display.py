"""Rich terminal display for mac-cleanup."""

from rich.console import Console
from rich.table import Table

from mac_cleanup.models import RunSummary

console = Console()

UNITS = ["B", "KiB", "MiB", "GiB", "TiB", "PiB", "EiB"]


def format_size(size_bytes: int) -> str:
    """Format bytes to human-readable string (binary units, two truncated decimals)."""
    sign = "-" if size_bytes < 0 else ""
    value = abs(size_bytes)
    decimals = ""
    unit = 0

    while value >= 1024 and unit < len(UNITS) - 1:
        decimals = f".{value % 1024 * 100 // 1024:02d}"
        value //= 1024
        unit += 1

    return f"{sign}{value}{decimals} {UNITS[unit]}"


def set_color(enabled: bool) -> None:
    """Turn colored output on or off."""
    console.no_color = not enabled


def show_message(message: str) -> None:
    """Display a target's progress message."""
    console.print(message)


def show_dry_run_estimate(summary: RunSummary) -> None:
    """Display the dry-run estimate."""
    console.print(f"Approx {format_size(summary.estimated_bytes)} of space will be cleaned up")


def show_run_summary(summary: RunSummary) -> None:
    """Display the result of a live run."""
    console.print("[bold green]Success![/bold green]")
    show_failures(summary)
    console.print(f"{format_size(summary.freed_bytes)} of space was cleaned up")


def show_failures(summary: RunSummary) -> None:
    """Display paths that could not be removed."""
    failures = summary.failures
    if not failures:
        return

    table = Table(title="Could not remove", show_header=True, header_style="bold red")
    table.add_column("Path")
    table.add_column("Reason", style="red")

    for failure in failures:
        table.add_row(failure.path, failure.reason)

    console.print(table)


def show_error(message: str) -> None:
    """Display a fatal diagnostic."""
    console.print(f"[red]Error: {message}[/red]")


def confirm_action(message: str) -> bool:
    """Ask for confirmation. Closed or empty stdin counts as no."""
    from rich.prompt import Confirm

    try:
        return Confirm.ask(message, console=console)
    except EOFError:
        console.print()
        return False
