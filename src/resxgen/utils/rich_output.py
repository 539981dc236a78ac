"""Rich output utilities for command-line reporting.

This module provides helper functions to display resource entries and
generation summaries using Rich components (Table, Panel).
"""

from typing import Iterable, Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from resxgen.consistency import ConsistencyReport
from resxgen.extraction.reader import ResourceEntry

_PREVIEW_LENGTH = 60


def _preview(value: str) -> str:
    flat = " ".join(value.split())
    if len(flat) > _PREVIEW_LENGTH:
        return flat[: _PREVIEW_LENGTH - 3] + "..."
    return flat


def build_entries_table(entries: Iterable[ResourceEntry], title: str) -> Table:
    """
    Build a table listing resource entries in document order.

    Args:
        entries: Entries to list.
        title: Table title (usually the resource file name).

    Returns:
        Rich Table with index, key, type and value preview columns.
    """
    table = Table(title=f"[bold]{title}[/bold]", show_header=True, header_style="bold")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Key", style="cyan", no_wrap=True)
    table.add_column("Type", style="magenta")
    table.add_column("Value", style="white")

    for entry in entries:
        table.add_row(
            str(entry.index),
            entry.key,
            entry.type_name or "string",
            _preview(entry.value),
        )

    return table


def print_generation_summary(
    console: Console,
    hint_name: str,
    namespace: str,
    entry_count: int,
    report: ConsistencyReport,
    destination: Optional[str] = None,
) -> None:
    """
    Print a generation summary panel.

    Args:
        console: Console receiving the panel.
        hint_name: Generated file identity.
        namespace: Emitted namespace.
        entry_count: Number of generated accessors.
        report: Consistency report of the run.
        destination: Where the source was written, if anywhere.
    """
    table = Table.grid(padding=(0, 2))
    table.add_column(style="cyan", no_wrap=True)
    table.add_column(style="white")

    table.add_row("File:", f"[bold]{hint_name}[/bold]")
    table.add_row("Namespace:", namespace)
    table.add_row("Accessors:", f"[yellow]{entry_count}[/yellow]")
    if destination:
        table.add_row("Output:", destination)
    table.add_row(
        "Consistency:",
        "[green]ok[/green]" if report.ok else f"[red]{report.describe()}[/red]",
    )
    if report.duplicates or report.invalid_identifiers:
        table.add_row("Warnings:", f"[yellow]{report.describe()}[/yellow]")

    panel = Panel(
        table,
        title="[bold cyan]Generation Summary[/bold cyan]",
        border_style="cyan",
        padding=(1, 2),
    )
    console.print(panel)
