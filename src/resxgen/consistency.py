"""Drift detection between resource keys and generated accessors.

Generated accessors pass their own name to ``nameof`` so the C# compiler
rejects a lookup whose member was renamed or removed. This module performs
the equivalent check on the Python side by reading the ``nameof`` targets
back out of the rendered tree and matching them against the resource keys.
"""

from __future__ import annotations

import re
from collections import Counter
from dataclasses import dataclass
from typing import Iterable

from resxgen.extraction.reader import ResourceEntry
from resxgen.synthesis.members import is_valid_identifier
from resxgen.synthesis.syntax import CompilationUnit, PropertyDeclaration

_NAMEOF_PATTERN = re.compile(r"\bnameof\((@?[^\s()]+)\)")


@dataclass(frozen=True)
class ConsistencyReport:
    missing: tuple[str, ...] = ()
    unexpected: tuple[str, ...] = ()
    duplicates: tuple[str, ...] = ()
    invalid_identifiers: tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.missing and not self.unexpected

    def describe(self) -> str:
        parts = []
        if self.missing:
            parts.append(f"missing accessors for {', '.join(self.missing)}")
        if self.unexpected:
            parts.append(f"unexpected accessors {', '.join(self.unexpected)}")
        if self.duplicates:
            parts.append(f"duplicate keys {', '.join(self.duplicates)}")
        if self.invalid_identifiers:
            parts.append(f"invalid identifiers {', '.join(self.invalid_identifiers)}")
        return "; ".join(parts) or "consistent"


def _strip_verbatim(identifier: str) -> str:
    return identifier[1:] if identifier.startswith("@") else identifier


def accessor_lookups(unit: CompilationUnit) -> list[tuple[str, str]]:
    """Return ``(member name, looked-up key)`` for every ``nameof`` accessor."""
    lookups = []
    for member in unit.accessor_class.members:
        if not isinstance(member, PropertyDeclaration) or member.expression_body is None:
            continue
        match = _NAMEOF_PATTERN.search(member.expression_body)
        if match is None:
            continue
        lookups.append((member.name, _strip_verbatim(match.group(1))))
    return lookups


def _ordered_unique(items: Iterable[str]) -> tuple[str, ...]:
    return tuple(dict.fromkeys(items))


def check_consistency(
    entries: Iterable[ResourceEntry], unit: CompilationUnit
) -> ConsistencyReport:
    """Match resource keys against the accessors generated for them."""
    keys = [entry.key for entry in entries]
    lookups = accessor_lookups(unit)

    # an accessor looking up another member's key is drift even if that key exists
    unexpected = [
        member for member, key in lookups if _strip_verbatim(member) != key
    ]
    looked_up = Counter(key for member, key in lookups if _strip_verbatim(member) == key)
    expected = Counter(keys)

    missing = expected - looked_up
    unexpected.extend((looked_up - expected).elements())

    return ConsistencyReport(
        missing=_ordered_unique(key for key in keys if key in missing),
        unexpected=_ordered_unique(unexpected),
        duplicates=_ordered_unique(key for key in keys if expected[key] > 1),
        invalid_identifiers=_ordered_unique(
            key for key in keys if not is_valid_identifier(key)
        ),
    )
