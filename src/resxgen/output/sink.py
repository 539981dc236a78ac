"""Destinations for generated source text.

A sink receives the rendered text under its hint name
(``<namespace>.<class>.g.cs``). Sinks are the only place generated text
touches the filesystem.
"""

import logging
from pathlib import Path
from typing import Protocol, Union

from rich.markup import escape

from resxgen.exceptions import ResourceUnavailableError
from resxgen.utils.logging import configure_module_logger

logger = configure_module_logger(__name__, level=logging.INFO)


class SourceSink(Protocol):
    def add_source(self, hint_name: str, text: str) -> None: ...


class MemorySink:
    """Collects generated sources in a dict keyed by hint name."""

    def __init__(self) -> None:
        self.sources: dict[str, str] = {}

    def add_source(self, hint_name: str, text: str) -> None:
        if hint_name in self.sources:
            raise ValueError(f"Source '{hint_name}' was already added")
        self.sources[hint_name] = text


class DirectorySink:
    """Writes each source to ``<directory>/<hint_name>`` as UTF-8.

    Files whose current bytes already match the new text are left untouched
    so that unchanged inputs do not bump modification times.
    """

    def __init__(self, directory: Union[str, Path]) -> None:
        self.directory = Path(directory)
        self.written: list[Path] = []
        self.unchanged: list[Path] = []

    def add_source(self, hint_name: str, text: str) -> None:
        target = self.directory / hint_name
        payload = text.encode("utf-8")

        try:
            if target.is_file() and target.read_bytes() == payload:
                logger.debug(f"[dim]Unchanged:[/dim] {escape(str(target))}")
                self.unchanged.append(target)
                return

            self.directory.mkdir(parents=True, exist_ok=True)
            target.write_bytes(payload)
        except OSError as e:
            raise ResourceUnavailableError(
                f"Cannot write generated source: {e}", source=str(target)
            ) from e

        logger.debug(f"[green]✓[/green] Wrote {escape(str(target))}")
        self.written.append(target)
