"""Implementation of the resxgen CLI commands.

This module resolves configuration, runs the generator and reports the
outcome. Diagnostics go to stderr; generated source goes to stdout or to
the output directory.
"""

from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from resxgen.config import GeneratorOptions, ToolConfig, load_config
from resxgen.exceptions import ResxGenError
from resxgen.extraction.reader import read_resources
from resxgen.generator import generate_file
from resxgen.output.sink import DirectorySink
from resxgen.utils.logging import configure_package_loggers
from resxgen.utils.rich_output import build_entries_table, print_generation_summary


def default_class_name(path: Path) -> str:
    """Class name derived from a resource file name.

    Everything from the first dot on is dropped, so culture-specific files
    (``Strings.de.resx``) map to the same class as their neutral file.
    """
    return path.name.split(".", 1)[0]


def _resolve_config(
    console: Console,
    typed_entries: Optional[str],
    newline: Optional[str],
    verify: Optional[bool],
    verbose: Optional[bool],
    color: Optional[bool] = None,
) -> ToolConfig:
    try:
        config = load_config(
            typed_entries=typed_entries,
            newline=newline,
            verify=verify,
            verbose=verbose,
            color=color,
        )
    except ValidationError as e:
        console.print(f"[red]✗[/red] Invalid configuration: {e}")
        raise typer.Exit(code=1) from e

    configure_package_loggers(verbose=config.verbose, use_colors=config.color)
    return config


def run_generate(
    path: Path,
    namespace: str,
    custom_namespace: Optional[str] = None,
    class_name: Optional[str] = None,
    output: Optional[Path] = None,
    stdout: bool = False,
    typed_entries: Optional[str] = None,
    newline: Optional[str] = None,
    verify: Optional[bool] = None,
    verbose: Optional[bool] = None,
    color: Optional[bool] = None,
    console: Optional[Console] = None,
) -> None:
    """Generate the accessor class for one resource file.

    Args:
        path: Resource file to read.
        namespace: Local namespace of the resource.
        custom_namespace: Namespace override for the emitted class.
        class_name: Class name; derived from ``path`` when omitted.
        output: Directory receiving ``<namespace>.<class>.g.cs``.
        stdout: Also print the source when ``output`` is set.
        typed_entries: Typed entry policy override.
        newline: Line separator override (lf, crlf).
        verify: Consistency check override.
        verbose: Enable debug logging.
        color: Colored log output override.
        console: Rich console for diagnostics (default: stderr).
    """
    if console is None:
        console = Console(stderr=True)

    config = _resolve_config(console, typed_entries, newline, verify, verbose, color)

    try:
        options = GeneratorOptions(
            local_namespace=namespace,
            custom_tool_namespace=custom_namespace or None,
            class_name=class_name or default_class_name(path),
        )
    except ValidationError as e:
        console.print(f"[red]✗[/red] Invalid generator options: {e}")
        raise typer.Exit(code=1) from e

    sink = DirectorySink(output) if output is not None else None

    try:
        result = generate_file(
            path,
            options,
            typed_entries=config.typed_entries,
            newline=config.line_separator,
            verify=config.verify,
            sink=sink,
        )
    except ResxGenError as e:
        console.print(f"[red]✗[/red] {escape(str(e))}")
        raise typer.Exit(code=1) from e

    if sink is None or stdout:
        typer.echo(result.text, nl=False)

    destination = None
    if sink is not None:
        destination = str(sink.directory / result.hint_name)
        if sink.unchanged:
            destination += " (unchanged)"

    print_generation_summary(
        console,
        hint_name=result.hint_name,
        namespace=options.emitted_namespace,
        entry_count=result.entry_count,
        report=result.report,
        destination=destination,
    )


def run_inspect(
    path: Path,
    typed_entries: Optional[str] = None,
    console: Optional[Console] = None,
) -> None:
    """List the entries of a resource file as a table.

    Args:
        path: Resource file to read.
        typed_entries: Typed entry policy override.
        console: Rich console for the table (default: stdout).
    """
    if console is None:
        console = Console()

    config = _resolve_config(console, typed_entries, None, None, None)

    try:
        with open(path, "rb") as stream:
            entries = list(
                read_resources(stream, config.typed_entries, source=str(path))
            )
    except OSError as e:
        console.print(f"[red]✗[/red] Cannot open resource file: {e}")
        raise typer.Exit(code=1) from e
    except ResxGenError as e:
        console.print(f"[red]✗[/red] {escape(str(e))}")
        raise typer.Exit(code=1) from e

    if not entries:
        console.print(f"[dim]No entries found in {path}[/dim]")
        return

    console.print(build_entries_table(entries, title=path.name))
