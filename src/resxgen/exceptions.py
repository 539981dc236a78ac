"""Exception hierarchy for resxgen.

Every failure raised by the generator derives from ``ResxGenError`` so that
host integrations can report any generation problem as a single diagnostic
type while still matching the concrete classes when they need to.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from resxgen.consistency import ConsistencyReport


class ResxGenError(Exception):
    """Base class for all resxgen failures."""


class InputFormatError(ResxGenError):
    """The resource document is malformed.

    Raised for XML that is not well-formed, for ``data`` elements without a
    ``name`` attribute or ``value`` child, and for typed entries rejected by
    ``TypedEntryPolicy.REJECT``.
    """

    def __init__(
        self,
        message: str,
        line: Optional[int] = None,
        column: Optional[int] = None,
        element: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.line = line
        self.column = column
        self.element = element

    @property
    def position(self) -> Optional[tuple[int, int]]:
        """Parser position as ``(line, column)`` when known."""
        if self.line is None or self.column is None:
            return None
        return (self.line, self.column)


class ResourceUnavailableError(ResxGenError):
    """A resource stream could not be read or an output could not be written."""

    def __init__(self, message: str, source: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.source = source


class ConsistencyError(ResxGenError):
    """Generated accessors drifted from the resource keys they were built from."""

    def __init__(self, message: str, report: "ConsistencyReport") -> None:
        super().__init__(message)
        self.message = message
        self.report = report
