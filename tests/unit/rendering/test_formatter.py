"""Test cases for resxgen.rendering.formatter module."""

import pytest

from resxgen.config import GeneratorOptions
from resxgen.extraction.reader import ResourceEntry
from resxgen.rendering.formatter import (
    build_unit,
    render_class,
    render_member,
    render_unit,
)
from resxgen.rendering.templates import AUTO_GENERATED_HEADER
from resxgen.synthesis.container import build_namespace
from resxgen.synthesis.members import synthesize_member
from resxgen.synthesis.syntax import (
    ClassDeclaration,
    CompilationUnit,
    FieldDeclaration,
    PropertyDeclaration,
)

GREETING_SOURCE = (
    AUTO_GENERATED_HEADER
    + """

#nullable enable

namespace App.Resources
{
    using System.Globalization;
    using System.Resources;

    public static class Strings
    {
        private static ResourceManager? s_resourceManager;

        public static ResourceManager ResourceManager => s_resourceManager ??= new ResourceManager("App.Resources.Strings", typeof(Strings).Assembly);

        public static CultureInfo? CultureInfo { get; set; }

        /// <summary>
        /// Looks up a localized string similar to Hello, world!.
        /// </summary>
        public static string? Greeting => ResourceManager.GetString(nameof(Greeting), CultureInfo);
    }
}
"""
)


def _unit(*entries: ResourceEntry) -> CompilationUnit:
    options = GeneratorOptions(local_namespace="App.Resources", class_name="Strings")
    members = [synthesize_member(entry) for entry in entries]
    return build_unit(build_namespace(options, members))


class TestBuildUnit:
    """Test cases for build_unit."""

    def test_banner_and_nullable(self) -> None:
        unit = _unit()

        assert unit.header == AUTO_GENERATED_HEADER
        assert unit.nullable_enabled is True
        assert unit.accessor_class.name == "Strings"

    def test_banner_text(self) -> None:
        lines = AUTO_GENERATED_HEADER.split("\n")

        assert lines[0] == "// " + "-" * 78
        assert lines[1] == "// <auto-generated>"
        assert lines[2] == "//     This code was generated by a tool."
        assert lines[3] == "//"
        assert lines[-2] == "// </auto-generated>"
        assert lines[-1] == lines[0]


class TestRenderMember:
    """Test cases for member rendering."""

    def test_field(self) -> None:
        field = FieldDeclaration(("private", "static"), "int", "s_count")

        assert render_member(field) == "private static int s_count;"

    def test_auto_property(self) -> None:
        prop = PropertyDeclaration(
            ("public", "static"), "CultureInfo?", "CultureInfo", accessors=("get", "set")
        )

        assert render_member(prop) == "public static CultureInfo? CultureInfo { get; set; }"

    def test_documented_expression_property(self) -> None:
        prop = PropertyDeclaration(
            ("public",),
            "int",
            "Answer",
            expression_body="42",
            documentation=("<summary>", "", "Text", "</summary>"),
        )

        assert render_member(prop) == (
            "/// <summary>\n///\n/// Text\n/// </summary>\npublic int Answer => 42;"
        )

    def test_class_members_separated_by_blank_line(self) -> None:
        declaration = ClassDeclaration(
            name="C",
            modifiers=("static",),
            members=(
                FieldDeclaration(("private",), "int", "a"),
                FieldDeclaration(("private",), "int", "b"),
            ),
        )

        assert render_class(declaration) == (
            "static class C\n{\n    private int a;\n\n    private int b;\n}"
        )


class TestRenderUnit:
    """Test cases for render_unit."""

    def test_greeting_golden_output(self) -> None:
        unit = _unit(ResourceEntry(key="Greeting", value="Hello, world!"))

        assert render_unit(unit) == GREETING_SOURCE

    def test_deterministic(self) -> None:
        entries = [
            ResourceEntry(key="A", value="<a> & b"),
            ResourceEntry(key="B", value="x\r\ny"),
        ]

        assert render_unit(_unit(*entries)) == render_unit(_unit(*entries))

    def test_multiline_doc_is_indented(self) -> None:
        text = render_unit(_unit(ResourceEntry(key="Lines", value="Line1\r\nLine2")))

        assert (
            "        /// Looks up a localized string similar to Line1\n"
            "        /// Line2.\n"
        ) in text

    def test_crlf_newline(self) -> None:
        text = render_unit(_unit(ResourceEntry(key="Lines", value="Line1\nLine2")), newline="\r\n")

        assert text.endswith("}\r\n")
        assert "\n" not in text.replace("\r\n", "")
        assert "/// Line2.\r\n" in text

    def test_no_trailing_whitespace(self) -> None:
        text = render_unit(_unit(ResourceEntry(key="Pad", value="a   \n\n   b")))

        assert all(line == line.rstrip() for line in text.split("\n"))

    def test_single_trailing_newline(self) -> None:
        text = render_unit(_unit())

        assert text.endswith("}\n")
        assert not text.endswith("\n\n")

    def test_empty_class_keeps_infrastructure(self) -> None:
        text = render_unit(_unit())

        assert "s_resourceManager" in text
        assert "string?" not in text

    def test_without_header_or_nullable(self) -> None:
        unit = CompilationUnit(
            namespace=_unit().namespace,
            header="",
            nullable_enabled=False,
        )

        assert render_unit(unit).startswith("namespace App.Resources\n{\n")

    def test_rejects_unknown_newline(self) -> None:
        with pytest.raises(ValueError):
            render_unit(_unit(), newline="\r")
