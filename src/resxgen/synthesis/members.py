"""Accessor synthesis for individual resource entries.

Each entry becomes::

    /// <summary>
    /// Looks up a localized string similar to <escaped value>.
    /// </summary>
    public static string? Key => ResourceManager.GetString(nameof(Key), CultureInfo);

The key reaches ``GetString`` through ``nameof`` so that renaming or removing
the accessor breaks compilation instead of silently looking up a stale key.
"""

from __future__ import annotations

import html

from resxgen.extraction.reader import ResourceEntry
from resxgen.synthesis.syntax import PropertyDeclaration

SUMMARY_PREFIX = "Looks up a localized string similar to "
RESOURCE_MANAGER_PROPERTY = "ResourceManager"
CULTURE_INFO_PROPERTY = "CultureInfo"

PUBLIC_STATIC = ("public", "static")
EXTRA_LINE_SEPARATORS = ("\u0085", "\u2028", "\u2029")

# Reserved C# keywords; contextual keywords are legal identifiers.
CSHARP_KEYWORDS = frozenset(
    {
        "abstract", "as", "base", "bool", "break", "byte", "case", "catch",
        "char", "checked", "class", "const", "continue", "decimal", "default",
        "delegate", "do", "double", "else", "enum", "event", "explicit",
        "extern", "false", "finally", "fixed", "float", "for", "foreach",
        "goto", "if", "implicit", "in", "int", "interface", "internal", "is",
        "lock", "long", "namespace", "new", "null", "object", "operator",
        "out", "override", "params", "private", "protected", "public",
        "readonly", "ref", "return", "sbyte", "sealed", "short", "sizeof",
        "stackalloc", "static", "string", "struct", "switch", "this", "throw",
        "true", "try", "typeof", "uint", "ulong", "unchecked", "unsafe",
        "ushort", "using", "virtual", "void", "volatile", "while",
    }
)  # fmt: skip


def is_valid_identifier(key: str) -> bool:
    """Whether ``key`` can name a C# member (after keyword escaping)."""
    return key.isidentifier()


def escape_identifier(key: str) -> str:
    """Prefix reserved keywords with ``@`` so they can name a member."""
    if key in CSHARP_KEYWORDS:
        return f"@{key}"
    return key


def doc_comment_lines(value: str) -> list[str]:
    """Build the ``<summary>`` block for a resource value.

    The value is trimmed, its line endings are normalized to ``\\n``, markup
    characters are entity-escaped, and each resulting line becomes its own
    documentation line. Returned lines carry no ``///`` marker.
    """
    text = value.strip().replace("\r\n", "\n").replace("\r", "\n")
    # the C# lexer also ends a comment line at these
    for separator in EXTRA_LINE_SEPARATORS:
        text = text.replace(separator, "\n")
    # numeric apostrophe reference, as HtmlEncode writes it
    text = html.escape(text, quote=True).replace("&#x27;", "&#39;")
    lines = f"{SUMMARY_PREFIX}{text}.".split("\n")
    return ["<summary>", *lines, "</summary>"]


def lookup_expression(identifier: str) -> str:
    return (
        f"{RESOURCE_MANAGER_PROPERTY}.GetString(nameof({identifier}), "
        f"{CULTURE_INFO_PROPERTY})"
    )


def synthesize_member(entry: ResourceEntry) -> PropertyDeclaration:
    """Create the documented ``string?`` accessor for one entry."""
    identifier = escape_identifier(entry.key)
    return PropertyDeclaration(
        modifiers=PUBLIC_STATIC,
        type_name="string?",
        name=identifier,
        expression_body=lookup_expression(identifier),
        documentation=tuple(doc_comment_lines(entry.value)),
    )
