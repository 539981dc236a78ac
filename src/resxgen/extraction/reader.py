"""Resource extraction from .resx documents.

The reader feeds the stream into an incremental XML parser in fixed-size
chunks and yields one ``ResourceEntry`` per ``data`` element, in the order the
elements open, as soon as an element and every one opened before it have
closed. Nothing beyond the current chunk and the open element tree
is buffered.
"""

import logging
import xml.etree.ElementTree as ET
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import IO, AnyStr, Iterable, Iterator, Optional

from rich.markup import escape

from resxgen.exceptions import InputFormatError, ResourceUnavailableError
from resxgen.utils.logging import configure_module_logger

logger = configure_module_logger(__name__, level=logging.INFO)

CHUNK_SIZE = 64 * 1024
DATA_TAG = "data"
VALUE_TAG = "value"
TYPE_ATTRIBUTES = ("type", "mimetype")


class TypedEntryPolicy(str, Enum):
    """Handling of ``data`` elements that declare a non-string payload."""

    INCLUDE = "include"
    SKIP = "skip"
    REJECT = "reject"


@dataclass(frozen=True)
class ResourceEntry:
    """One key/value pair read from a resource document."""

    key: str
    value: str
    index: int = 0
    type_name: Optional[str] = None

    @property
    def is_typed(self) -> bool:
        return self.type_name is not None


def _read_chunks(stream: IO[AnyStr], source: Optional[str]) -> Iterator[AnyStr]:
    while True:
        try:
            chunk = stream.read(CHUNK_SIZE)
        except (OSError, ValueError) as e:
            # ValueError is what io raises for reads on a closed stream
            raise ResourceUnavailableError(
                f"Cannot read resource stream: {e}", source=source
            ) from e
        if not chunk:
            return
        yield chunk


@dataclass
class _Slot:
    ordinal: int
    done: bool = False
    entry: Optional[ResourceEntry] = None


class _DataElementCollector:
    """Turns parser events into entries while tracking element depth.

    Each ``data`` element reserves its slot when it opens and is filled when
    it closes. Slots are released strictly in opening order, so a nested
    ``data`` element never overtakes the element that contains it.
    """

    def __init__(self, typed_entries: TypedEntryPolicy) -> None:
        self.typed_entries = typed_entries
        self.depth = 0
        self.ordinal = 0
        self._open: dict[ET.Element, _Slot] = {}
        self._queue: deque[_Slot] = deque()

    def collect(self, events: Iterable[tuple[str, ET.Element]]) -> list[ResourceEntry]:
        for event, elem in events:
            if event == "start":
                # depth 0 is the document root, which never counts as an entry
                if elem.tag == DATA_TAG and self.depth > 0:
                    slot = _Slot(self.ordinal)
                    self.ordinal += 1
                    self._open[elem] = slot
                    self._queue.append(slot)
                self.depth += 1
                continue

            self.depth -= 1
            slot = self._open.pop(elem, None)
            if slot is None:
                continue
            slot.entry = self._to_entry(elem, slot.ordinal)
            slot.done = True

        entries: list[ResourceEntry] = []
        while self._queue and self._queue[0].done:
            entry = self._queue.popleft().entry
            if entry is not None:
                entries.append(entry)
        return entries

    def _to_entry(self, elem: ET.Element, ordinal: int) -> Optional[ResourceEntry]:
        key = elem.get("name")
        if key is None:
            raise InputFormatError(
                f"data element #{ordinal} has no 'name' attribute",
                element=f"data[{ordinal}]",
            )

        value_elem = elem.find(VALUE_TAG)
        if value_elem is None:
            raise InputFormatError(
                f"data element '{key}' has no 'value' child",
                element=key,
            )

        type_name = next(
            (elem.get(attr) for attr in TYPE_ATTRIBUTES if elem.get(attr) is not None),
            None,
        )
        if type_name is not None:
            if self.typed_entries is TypedEntryPolicy.REJECT:
                raise InputFormatError(
                    f"data element '{key}' holds a typed resource ({type_name})",
                    element=key,
                )
            if self.typed_entries is TypedEntryPolicy.SKIP:
                logger.warning(
                    f"[yellow]⚠[/yellow] Skipping typed entry "
                    f"[bold]{escape(key)}[/bold] [dim]({escape(type_name)})[/dim]"
                )
                return None

        return ResourceEntry(
            key=key,
            value="".join(value_elem.itertext()),
            index=ordinal,
            type_name=type_name,
        )


def read_resources(
    stream: IO[AnyStr],
    typed_entries: TypedEntryPolicy = TypedEntryPolicy.INCLUDE,
    source: Optional[str] = None,
) -> Iterator[ResourceEntry]:
    """Yield the entries of a resource document in document order.

    Args:
        stream: Readable stream positioned at the start of the document.
        typed_entries: Policy for ``data`` elements with a type or mimetype.
        source: Optional label (usually a file path) used in diagnostics.

    Yields:
        ResourceEntry for every selected ``data`` element.

    Raises:
        InputFormatError: If the XML is malformed or a ``data`` element is
            missing its ``name`` attribute or ``value`` child.
        ResourceUnavailableError: If the stream cannot be read.
    """
    parser = ET.XMLPullParser(events=("start", "end"))
    collector = _DataElementCollector(typed_entries)

    try:
        for chunk in _read_chunks(stream, source):
            parser.feed(chunk)
            yield from collector.collect(parser.read_events())
        parser.close()
        yield from collector.collect(parser.read_events())
    except ET.ParseError as e:
        line, column = e.position
        where = f"{source}:" if source else "line "
        raise InputFormatError(
            f"Malformed resource document at {where}{line}:{column}: {e}",
            line=line,
            column=column,
        ) from e
