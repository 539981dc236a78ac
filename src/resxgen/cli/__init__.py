"""CLI module for resxgen.

This module provides the command-line interface for generating C# resource
accessor classes and inspecting resource files.
"""

from pathlib import Path
from typing import Optional

import typer

from resxgen.cli.commands import run_generate, run_inspect

app = typer.Typer(
    name="resxgen",
    help="resxgen - Strongly-typed C# accessors for .resx resource files",
    add_completion=False,
)


@app.command()
def generate(
    path: Path = typer.Argument(..., help="Resource file (.resx) to read"),
    namespace: str = typer.Option(
        ..., "--namespace", "-n", help="Local namespace of the resource"
    ),
    custom_namespace: str = typer.Option(
        None, "--custom-namespace", help="Namespace emitted for the generated class"
    ),
    class_name: str = typer.Option(
        None, "--class-name", "-c", help="Generated class name (default: file name)"
    ),
    output: Path = typer.Option(
        None, "--output", "-o", help="Directory receiving the generated file"
    ),
    stdout: bool = typer.Option(
        False, "--stdout", help="Print the source even when --output is given"
    ),
    typed_entries: str = typer.Option(
        None, "--typed-entries", help="Typed entries: include, skip or reject"
    ),
    newline: str = typer.Option(None, "--newline", help="Line separator: lf or crlf"),
    verify: Optional[bool] = typer.Option(
        None, "--verify/--no-verify", help="Check accessors against resource keys"
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable verbose output"
    ),
    color: Optional[bool] = typer.Option(
        None, "--color/--no-color", help="Colored log output (default: config)"
    ),
) -> None:
    """Generate the accessor class for a resource file."""
    run_generate(
        path=path,
        namespace=namespace,
        custom_namespace=custom_namespace,
        class_name=class_name,
        output=output,
        stdout=stdout,
        typed_entries=typed_entries,
        newline=newline,
        verify=verify,
        verbose=verbose or None,
        color=color,
    )


@app.command()
def inspect(
    path: Path = typer.Argument(..., help="Resource file (.resx) to read"),
    typed_entries: str = typer.Option(
        None, "--typed-entries", help="Typed entries: include, skip or reject"
    ),
) -> None:
    """List the entries of a resource file."""
    run_inspect(path=path, typed_entries=typed_entries)


if __name__ == "__main__":
    app()
