import io
from pathlib import Path

import pytest
from pydantic import ValidationError
from typer.testing import CliRunner

import resxgen
from resxgen.cli import app


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    for name in (
        "RESXGEN_TYPED_ENTRIES",
        "RESXGEN_NEWLINE",
        "RESXGEN_VERIFY",
        "RESXGEN_VERBOSE",
        "RESXGEN_COLOR",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def options() -> resxgen.GeneratorOptions:
    return resxgen.GeneratorOptions(local_namespace="App", class_name="Strings")


def test_error_missing_value_names_the_key(options: resxgen.GeneratorOptions) -> None:
    """Verify that a data element without value is fatal and names the key."""
    stream = io.BytesIO(b'<root><data name="Title"></data></root>')
    sink = resxgen.MemorySink()

    with pytest.raises(resxgen.InputFormatError) as excinfo:
        with resxgen.Generator(stream, options) as generator:
            generator.generate(sink=sink)

    assert excinfo.value.element == "Title"
    assert "'Title'" in str(excinfo.value)
    assert sink.sources == {}
    assert stream.closed


def test_error_malformed_xml_reports_position(
    options: resxgen.GeneratorOptions,
) -> None:
    """Verify that XML syntax errors carry the parser position."""
    stream = io.BytesIO(b"<root>\n  <data name='A'>\n    <value>x</data>\n</root>")

    with pytest.raises(resxgen.InputFormatError) as excinfo:
        resxgen.generate_source(stream, options)

    assert excinfo.value.position is not None
    assert excinfo.value.line == 3
    assert excinfo.value.__cause__ is not None
    assert stream.closed


def test_error_empty_class_name() -> None:
    """Verify that empty option strings are rejected before any reading."""
    with pytest.raises(ValidationError):
        resxgen.GeneratorOptions(local_namespace="App", class_name="")


def test_error_cli_missing_file(tmp_path: Path) -> None:
    """Verify that the CLI reports unreadable files with exit code 1."""
    result = CliRunner().invoke(
        app, ["generate", str(tmp_path / "Nope.resx"), "-n", "App"]
    )

    assert result.exit_code == 1
    assert "Cannot open resource file" in result.output


def test_error_cli_rejected_typed_entry(tmp_path: Path) -> None:
    """Verify that --typed-entries reject turns binary resources into errors."""
    resx = tmp_path / "Images.resx"
    resx.write_bytes(
        b'<root><data name="Logo" type="System.Drawing.Bitmap, System.Drawing">'
        b"<value>AAEAAAD/////</value></data></root>"
    )

    result = CliRunner().invoke(
        app, ["generate", str(resx), "-n", "App", "--typed-entries", "reject"]
    )

    assert result.exit_code == 1
    assert "Logo" in result.output


def test_error_cli_invalid_policy_name(tmp_path: Path) -> None:
    """Verify that an unknown policy name is a configuration error."""
    resx = tmp_path / "Strings.resx"
    resx.write_bytes(b"<root/>")

    result = CliRunner().invoke(
        app, ["generate", str(resx), "-n", "App", "--typed-entries", "ignore"]
    )

    assert result.exit_code == 1
    assert "Invalid configuration" in result.output
