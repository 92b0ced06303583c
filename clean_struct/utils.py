"""Shared console helpers for clean-struct.

All user-facing output goes through the Rich consoles defined here: ``console``
for regular output and ``err_console`` for fatal errors.
"""

from __future__ import annotations

from rich.console import Console
from rich.rule import Rule
from rich.table import Table

console = Console()
err_console = Console(stderr=True)


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_header(title: str, subtitle: str = "", *, out: Console | None = None) -> None:
    """Print a full-width rule with *title*, followed by an optional subtitle."""
    out = out or console
    out.print()
    out.print(Rule(f"[bold blue]{title}[/bold blue]", style="blue"))
    if subtitle:
        out.print(f"[dim]{subtitle}[/dim]")
    out.print()


def print_summary_table(
    data: dict[str, str], title: str = "Summary", *, out: Console | None = None
) -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
        out: Console to print to (defaults to the shared console).
    """
    out = out or console
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    out.print(table)
    out.print()


def print_info(message: str, *, out: Console | None = None) -> None:
    """Print a cyan informational message."""
    (out or console).print(f"[cyan]{message}[/cyan]")


def print_success(message: str, *, out: Console | None = None) -> None:
    """Print a green success message."""
    (out or console).print(f"[bold green]{message}[/bold green]")


def print_error(message: str, *, out: Console | None = None) -> None:
    """Print a red error message (to stderr by default)."""
    (out or err_console).print(f"[bold red]{message}[/bold red]")


def print_warning(message: str, *, out: Console | None = None) -> None:
    """Print a yellow warning message."""
    (out or console).print(f"[bold yellow]{message}[/bold yellow]")
