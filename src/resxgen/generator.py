"""Generation of C# resource accessor classes from .resx streams.

``Generator`` owns the resource stream for the duration of one generation:
use it as a context manager so the stream is closed whether generation
succeeds or fails. All entries are read before anything is rendered, so a
malformed document never produces partial output.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import IO, Any, Iterable, Iterator, Optional, Union

from rich.markup import escape

from resxgen.config import GeneratorOptions
from resxgen.consistency import ConsistencyReport, check_consistency
from resxgen.exceptions import ConsistencyError, ResourceUnavailableError
from resxgen.extraction.reader import ResourceEntry, TypedEntryPolicy, read_resources
from resxgen.output.sink import SourceSink
from resxgen.rendering.formatter import build_unit, render_unit
from resxgen.synthesis.container import build_namespace
from resxgen.synthesis.members import synthesize_member
from resxgen.synthesis.syntax import CompilationUnit
from resxgen.utils.logging import configure_module_logger

logger = configure_module_logger(__name__, level=logging.INFO)


@dataclass(frozen=True)
class GenerationResult:
    """Rendered source together with the tree and entries it came from."""

    hint_name: str
    text: str
    unit: CompilationUnit
    entries: tuple[ResourceEntry, ...]
    report: ConsistencyReport

    @property
    def entry_count(self) -> int:
        return len(self.entries)


class Generator:
    """Single-use generator bound to one resource stream."""

    def __init__(
        self,
        stream: IO[Any],
        options: GeneratorOptions,
        typed_entries: TypedEntryPolicy = TypedEntryPolicy.INCLUDE,
        newline: str = "\n",
        source: Optional[str] = None,
    ) -> None:
        """Initialize the Generator.

        Args:
            stream: Readable stream of the resource document. The generator
                takes ownership and closes it.
            options: Namespace and class naming.
            typed_entries: Policy for typed ``data`` elements.
            newline: Line separator of the rendered source.
            source: Optional label (usually the file path) for diagnostics.
        """
        self._stream = stream
        self.options = options
        self.typed_entries = typed_entries
        self.newline = newline
        self.source = source
        self._consumed = False
        self._closed = False

    def __enter__(self) -> "Generator":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """Close the resource stream. Safe to call more than once."""
        if self._closed:
            return
        self._closed = True
        self._stream.close()

    def entries(self) -> Iterator[ResourceEntry]:
        """Lazily read the entries of the bound stream."""
        if self._closed:
            raise ResourceUnavailableError(
                "Generator is closed; the resource stream was released",
                source=self.source,
            )
        if self._consumed:
            raise ResourceUnavailableError(
                "Resource stream was already consumed by this generator",
                source=self.source,
            )
        self._consumed = True
        return read_resources(self._stream, self.typed_entries, source=self.source)

    def build_unit(self, entries: Iterable[ResourceEntry]) -> CompilationUnit:
        members = [synthesize_member(entry) for entry in entries]
        return build_unit(build_namespace(self.options, members))

    def generate(
        self, verify: bool = False, sink: Optional[SourceSink] = None
    ) -> GenerationResult:
        """Read, synthesize and render the accessor class.

        Args:
            verify: Raise ``ConsistencyError`` if accessors drift from keys.
            sink: Optional destination receiving the text under its hint name.

        Returns:
            GenerationResult with the rendered source.

        Raises:
            InputFormatError: If the resource document is malformed.
            ResourceUnavailableError: If the stream cannot be read.
            ConsistencyError: If ``verify`` is set and the check fails.
        """
        entries = tuple(self.entries())
        unit = self.build_unit(entries)
        logger.debug(
            f"Read {len(entries)} entries for namespace "
            f"[bold]{escape(self.options.emitted_namespace)}[/bold]"
        )

        report = check_consistency(entries, unit)
        self._log_report(report)
        if verify and not report.ok:
            raise ConsistencyError(
                f"Accessors do not match resource keys: {report.describe()}",
                report=report,
            )

        result = GenerationResult(
            hint_name=self.options.hint_name,
            text=render_unit(unit, newline=self.newline),
            unit=unit,
            entries=entries,
            report=report,
        )

        if sink is not None:
            sink.add_source(result.hint_name, result.text)

        logger.info(
            f"[green]✓[/green] Generated [bold]{escape(result.hint_name)}[/bold] "
            f"with [yellow]{result.entry_count}[/yellow] accessors"
        )
        return result

    def _log_report(self, report: ConsistencyReport) -> None:
        for key in report.duplicates:
            logger.warning(
                f"[yellow]⚠[/yellow] Duplicate resource key "
                f"[bold]{escape(key)}[/bold]"
            )
        for key in report.invalid_identifiers:
            logger.warning(
                f"[yellow]⚠[/yellow] Resource key [bold]{escape(key)}[/bold] "
                f"is not a valid C# identifier"
            )


def generate_source(
    stream: IO[Any],
    options: GeneratorOptions,
    typed_entries: TypedEntryPolicy = TypedEntryPolicy.INCLUDE,
    newline: str = "\n",
    verify: bool = False,
) -> str:
    """Generate accessor source from a stream and close the stream."""
    with Generator(
        stream, options, typed_entries=typed_entries, newline=newline
    ) as generator:
        return generator.generate(verify=verify).text


def generate_file(
    path: Union[str, Path],
    options: GeneratorOptions,
    typed_entries: TypedEntryPolicy = TypedEntryPolicy.INCLUDE,
    newline: str = "\n",
    verify: bool = False,
    sink: Optional[SourceSink] = None,
) -> GenerationResult:
    """Generate accessor source for a .resx file on disk.

    Raises:
        ResourceUnavailableError: If the file cannot be opened.
    """
    path = Path(path)
    try:
        stream = open(path, "rb")
    except OSError as e:
        raise ResourceUnavailableError(
            f"Cannot open resource file: {e}", source=str(path)
        ) from e

    with Generator(
        stream,
        options,
        typed_entries=typed_entries,
        newline=newline,
        source=str(path),
    ) as generator:
        return generator.generate(verify=verify, sink=sink)
