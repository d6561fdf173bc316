"""Shared console helpers for tablescaffold.

All user-facing output goes through one module-level Rich ``Console`` so the
CLI and the scaffold engine print in a consistent style and tests can swap
the console for a recording one.
"""

from __future__ import annotations

from pathlib import Path

from rich.console import Console
from rich.table import Table

console = Console()


# ---------------------------------------------------------------------------
# Status messages
# ---------------------------------------------------------------------------


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{message}[/bold red]")


def print_checklist(title: str) -> None:
    """Print the heading of a follow-up checklist."""
    console.print(f"\n[bold cyan]{title}[/bold cyan]")


def print_cmd(command: str) -> None:
    """Print one shell command the user is expected to run."""
    console.print(f"  [dim]$[/dim] [bold]{command}[/bold]")


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value table."""
    table = Table(title=title, show_header=True, header_style="bold magenta")
    table.add_column("Key", style="cyan", min_width=20)
    table.add_column("Value", style="white")
    for key, value in data.items():
        table.add_row(key, str(value))
    console.print(table)


def print_written_files(paths: list[Path], root: Path) -> None:
    """Print each written path relative to the project *root*."""
    for path in paths:
        try:
            shown = path.relative_to(root)
        except ValueError:
            shown = path
        console.print(f"  [green]write[/green] {shown.as_posix()}")
