"""Assembly of the static accessor class and its namespace."""

from __future__ import annotations

from typing import Iterable

from resxgen.config import GeneratorOptions
from resxgen.synthesis.members import (
    CULTURE_INFO_PROPERTY,
    PUBLIC_STATIC,
    RESOURCE_MANAGER_PROPERTY,
)
from resxgen.synthesis.syntax import (
    ClassDeclaration,
    FieldDeclaration,
    NamespaceDeclaration,
    PropertyDeclaration,
    UsingDirective,
)

SYSTEM_GLOBALIZATION = "System.Globalization"
SYSTEM_RESOURCES = "System.Resources"
RESOURCE_MANAGER_FIELD = "s_resourceManager"


def _csharp_string_literal(text: str) -> str:
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def build_class(options: GeneratorOptions) -> ClassDeclaration:
    """Create the static class with its three infrastructure members.

    ``ResourceManager`` is built on first access and cached in
    ``s_resourceManager`` with ``??=``. The cache is not synchronized: two
    threads racing on first access may each construct a manager and the last
    assignment wins. Both instances read the same embedded resources, so the
    race only costs a redundant construction.
    """
    resource_manager = (
        f"{RESOURCE_MANAGER_FIELD} ??= new ResourceManager("
        f"{_csharp_string_literal(options.resource_base_name)}, "
        f"typeof({options.class_name}).Assembly)"
    )
    return ClassDeclaration(
        name=options.class_name,
        modifiers=PUBLIC_STATIC,
        members=(
            FieldDeclaration(
                modifiers=("private", "static"),
                type_name="ResourceManager?",
                name=RESOURCE_MANAGER_FIELD,
            ),
            PropertyDeclaration(
                modifiers=PUBLIC_STATIC,
                type_name="ResourceManager",
                name=RESOURCE_MANAGER_PROPERTY,
                expression_body=resource_manager,
            ),
            PropertyDeclaration(
                modifiers=PUBLIC_STATIC,
                type_name="CultureInfo?",
                name=CULTURE_INFO_PROPERTY,
                accessors=("get", "set"),
            ),
        ),
    )


def build_namespace(
    options: GeneratorOptions, members: Iterable[PropertyDeclaration]
) -> NamespaceDeclaration:
    """Wrap the accessors in the class and the class in its namespace.

    The namespace is ``custom_tool_namespace`` when one is set; the
    ``ResourceManager`` base name always uses ``local_namespace``.
    """
    accessor_class = build_class(options).add_members(*members)
    return NamespaceDeclaration(
        name=options.emitted_namespace,
        usings=(
            UsingDirective(SYSTEM_GLOBALIZATION),
            UsingDirective(SYSTEM_RESOURCES),
        ),
    ).add_classes(accessor_class)
