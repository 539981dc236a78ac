"""Demo: generate accessors for the bundled Strings.resx under each typed-entry policy.

Run with:
    uv run python examples/generate_demo.py
"""

from __future__ import annotations

from pathlib import Path

from rich.console import Console
from rich.syntax import Syntax
from rich.table import Table

from resxgen import (
    GeneratorOptions,
    InputFormatError,
    TypedEntryPolicy,
    generate_file,
)

console = Console()

RESX_PATH = Path(__file__).with_name("Strings.resx")


def main() -> None:
    options = GeneratorOptions(
        local_namespace="Demo.Resources",
        custom_tool_namespace="Demo.Ui",
        class_name="Strings",
    )

    table = Table(title="Typed Entry Policies")
    table.add_column("Policy", style="cyan")
    table.add_column("Accessors", justify="right")
    table.add_column("Consistency")

    for policy in TypedEntryPolicy:
        try:
            result = generate_file(RESX_PATH, options, typed_entries=policy)
        except InputFormatError as e:
            table.add_row(policy.value, "-", f"[red]{e.message}[/red]")
            continue
        table.add_row(policy.value, str(result.entry_count), result.report.describe())

    console.print(table)

    result = generate_file(RESX_PATH, options, typed_entries=TypedEntryPolicy.SKIP)
    console.print(Syntax(result.text, "csharp", line_numbers=True))


if __name__ == "__main__":
    main()
