"""Text rendering of compilation units.

Layout is fixed rather than configurable so that identical trees always give
identical bytes: four-space indentation, braces on their own lines, one blank
line between the using block and the class and between class members, no
trailing whitespace, and a single trailing line separator.
"""

from __future__ import annotations

from textwrap import indent

from resxgen.rendering.templates import (
    AUTO_GENERATED_HEADER,
    AUTO_PROPERTY_TEMPLATE,
    CLASS_TEMPLATE,
    DOC_COMMENT_MARKER,
    EXPRESSION_PROPERTY_TEMPLATE,
    FIELD_TEMPLATE,
    NAMESPACE_TEMPLATE,
    NULLABLE_ENABLE_DIRECTIVE,
    UNIT_TEMPLATE,
    USING_TEMPLATE,
)
from resxgen.synthesis.syntax import (
    ClassDeclaration,
    CompilationUnit,
    FieldDeclaration,
    MemberDeclaration,
    NamespaceDeclaration,
)

_INDENT = " " * 4
_BLANK_LINE = "\n\n"
_LINE_SEPARATORS = ("\n", "\r\n")


def build_unit(namespace: NamespaceDeclaration) -> CompilationUnit:
    """Wrap a namespace with the generated-file banner and nullable context."""
    return CompilationUnit(
        namespace=namespace,
        header=AUTO_GENERATED_HEADER,
        nullable_enabled=True,
    )


def _render_doc_line(line: str) -> str:
    if not line:
        return DOC_COMMENT_MARKER
    return f"{DOC_COMMENT_MARKER} {line}"


def render_member(member: MemberDeclaration) -> str:
    modifiers = " ".join(member.modifiers)
    if isinstance(member, FieldDeclaration):
        return FIELD_TEMPLATE.format(
            modifiers=modifiers,
            type_name=member.type_name,
            name=member.name,
        )

    if member.expression_body is not None:
        declaration = EXPRESSION_PROPERTY_TEMPLATE.format(
            modifiers=modifiers,
            type_name=member.type_name,
            name=member.name,
            expression=member.expression_body,
        )
    else:
        declaration = AUTO_PROPERTY_TEMPLATE.format(
            modifiers=modifiers,
            type_name=member.type_name,
            name=member.name,
            accessors_block=" ".join(f"{accessor};" for accessor in member.accessors),
        )

    doc_lines = [_render_doc_line(line) for line in member.documentation]
    return "\n".join([*doc_lines, declaration])


def render_class(declaration: ClassDeclaration) -> str:
    body = _BLANK_LINE.join(render_member(member) for member in declaration.members)
    return CLASS_TEMPLATE.format(
        modifiers=" ".join(declaration.modifiers),
        name=declaration.name,
        body_block=indent(body, _INDENT),
    )


def render_namespace(namespace: NamespaceDeclaration) -> str:
    blocks = []
    if namespace.usings:
        blocks.append(
            "\n".join(USING_TEMPLATE.format(name=using.name) for using in namespace.usings)
        )
    blocks.extend(render_class(declaration) for declaration in namespace.classes)
    return NAMESPACE_TEMPLATE.format(
        name=namespace.name,
        body_block=indent(_BLANK_LINE.join(blocks), _INDENT),
    )


def render_unit(unit: CompilationUnit, newline: str = "\n") -> str:
    """Render a compilation unit to source text.

    Args:
        unit: Tree to render.
        newline: Line separator, ``"\\n"`` or ``"\\r\\n"``.

    Returns:
        Source text ending with exactly one line separator.

    Raises:
        ValueError: If ``newline`` is not a supported separator.
    """
    if newline not in _LINE_SEPARATORS:
        raise ValueError(f"Unsupported line separator: {newline!r}")

    header_parts = [unit.header] if unit.header else []
    if unit.nullable_enabled:
        header_parts.append(NULLABLE_ENABLE_DIRECTIVE)

    text = UNIT_TEMPLATE.format(
        header_block=_BLANK_LINE.join(header_parts),
        namespace_block=render_namespace(unit.namespace),
    )
    if not header_parts:
        text = text.lstrip("\n")

    lines = [line.rstrip() for line in text.split("\n")]
    return newline.join(lines) + newline
