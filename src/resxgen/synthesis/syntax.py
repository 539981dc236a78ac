"""Declaration tree for generated C# accessor classes.

The tree is deliberately small: it models exactly the declarations the
generator emits (using directives, one namespace, one static class, fields
and properties) and leaves all text layout to ``resxgen.rendering``.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional, Union


@dataclass(frozen=True)
class UsingDirective:
    name: str


@dataclass(frozen=True)
class FieldDeclaration:
    modifiers: tuple[str, ...]
    type_name: str
    name: str


@dataclass(frozen=True)
class PropertyDeclaration:
    """A property with either an expression body or auto accessors.

    ``documentation`` holds the XML documentation lines without the ``///``
    marker; the renderer adds it.
    """

    modifiers: tuple[str, ...]
    type_name: str
    name: str
    expression_body: Optional[str] = None
    accessors: tuple[str, ...] = ()
    documentation: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if (self.expression_body is None) == (not self.accessors):
            raise ValueError(
                f"Property {self.name!r} needs exactly one of an expression "
                "body or accessors"
            )


MemberDeclaration = Union[FieldDeclaration, PropertyDeclaration]


@dataclass(frozen=True)
class ClassDeclaration:
    name: str
    modifiers: tuple[str, ...]
    members: tuple[MemberDeclaration, ...] = ()

    def add_members(self, *members: MemberDeclaration) -> ClassDeclaration:
        return replace(self, members=self.members + tuple(members))


@dataclass(frozen=True)
class NamespaceDeclaration:
    name: str
    usings: tuple[UsingDirective, ...] = ()
    classes: tuple[ClassDeclaration, ...] = ()

    def add_classes(self, *classes: ClassDeclaration) -> NamespaceDeclaration:
        return replace(self, classes=self.classes + tuple(classes))


@dataclass(frozen=True)
class CompilationUnit:
    """Root of the tree: banner, nullable context and one namespace."""

    namespace: NamespaceDeclaration
    header: str = ""
    nullable_enabled: bool = True

    @property
    def accessor_class(self) -> ClassDeclaration:
        return self.namespace.classes[0]
