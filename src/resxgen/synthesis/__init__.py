"""Synthesis of the declaration tree for generated accessor classes."""

from resxgen.synthesis.container import build_class, build_namespace
from resxgen.synthesis.members import (
    doc_comment_lines,
    escape_identifier,
    is_valid_identifier,
    synthesize_member,
)
from resxgen.synthesis.syntax import (
    ClassDeclaration,
    CompilationUnit,
    FieldDeclaration,
    NamespaceDeclaration,
    PropertyDeclaration,
    UsingDirective,
)

__all__ = [
    "ClassDeclaration",
    "CompilationUnit",
    "FieldDeclaration",
    "NamespaceDeclaration",
    "PropertyDeclaration",
    "UsingDirective",
    "build_class",
    "build_namespace",
    "doc_comment_lines",
    "escape_identifier",
    "is_valid_identifier",
    "synthesize_member",
]
