"""Test cases for configuration system."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from resxgen.config import (
    GeneratorOptions,
    ToolConfig,
    _load_from_env,
    _load_from_pyproject_toml,
    load_config,
)
from resxgen.extraction.reader import TypedEntryPolicy

RESXGEN_ENV = (
    "RESXGEN_TYPED_ENTRIES",
    "RESXGEN_NEWLINE",
    "RESXGEN_VERIFY",
    "RESXGEN_VERBOSE",
    "RESXGEN_COLOR",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in RESXGEN_ENV:
        monkeypatch.delenv(name, raising=False)


class TestGeneratorOptions:
    """Test cases for GeneratorOptions Pydantic model."""

    def test_derived_names(self) -> None:
        options = GeneratorOptions(local_namespace="App.Resources", class_name="Strings")

        assert options.custom_tool_namespace is None
        assert options.emitted_namespace == "App.Resources"
        assert options.resource_base_name == "App.Resources.Strings"
        assert options.hint_name == "App.Resources.Strings.g.cs"

    def test_custom_namespace_precedence(self) -> None:
        options = GeneratorOptions(
            local_namespace="App.Resources",
            custom_tool_namespace="App.Ui",
            class_name="Strings",
        )

        assert options.emitted_namespace == "App.Ui"
        assert options.resource_base_name == "App.Resources.Strings"

    def test_empty_custom_namespace_ignored(self) -> None:
        options = GeneratorOptions(
            local_namespace="App", custom_tool_namespace="", class_name="S"
        )

        assert options.emitted_namespace == "App"

    @pytest.mark.parametrize("field", ["local_namespace", "class_name"])
    def test_required_fields_non_empty(self, field: str) -> None:
        values = {"local_namespace": "App", "class_name": "Strings", field: ""}

        with pytest.raises(ValidationError) as exc_info:
            GeneratorOptions(**values)

        assert any(error["loc"] == (field,) for error in exc_info.value.errors())

    def test_extra_fields_forbidden(self) -> None:
        with pytest.raises(ValidationError):
            GeneratorOptions(
                local_namespace="App",
                class_name="Strings",
                visibility="internal",  # type: ignore[call-arg]
            )

    def test_frozen(self) -> None:
        options = GeneratorOptions(local_namespace="App", class_name="Strings")

        with pytest.raises(ValidationError):
            options.class_name = "Other"  # type: ignore[misc]


class TestToolConfig:
    """Test cases for ToolConfig Pydantic model."""

    def test_default_values(self) -> None:
        config = ToolConfig()

        assert config.typed_entries is TypedEntryPolicy.INCLUDE
        assert config.newline == "lf"
        assert config.line_separator == "\n"
        assert config.verify is False
        assert config.verbose is False
        assert config.color is True

    def test_crlf(self) -> None:
        assert ToolConfig(newline="crlf").line_separator == "\r\n"

    def test_invalid_newline(self) -> None:
        with pytest.raises(ValidationError):
            ToolConfig(newline="cr")  # type: ignore[arg-type]

    def test_invalid_policy(self) -> None:
        with pytest.raises(ValidationError):
            ToolConfig(typed_entries="ignore")  # type: ignore[arg-type]


class TestLoadFromEnv:
    """Test cases for _load_from_env function."""

    def test_load_all_env_variables(self) -> None:
        env_vars = {
            "RESXGEN_TYPED_ENTRIES": "Skip",
            "RESXGEN_NEWLINE": "CRLF",
            "RESXGEN_VERIFY": "yes",
            "RESXGEN_VERBOSE": "1",
        }
        with patch.dict(os.environ, env_vars):
            config = _load_from_env()

        assert config == {
            "typed_entries": "skip",
            "newline": "crlf",
            "verify": True,
            "verbose": True,
        }

    def test_false_boolean_values(self) -> None:
        with patch.dict(os.environ, {"RESXGEN_VERIFY": "off"}):
            assert _load_from_env() == {"verify": False}

    def test_color_is_boolean(self) -> None:
        with patch.dict(os.environ, {"RESXGEN_COLOR": "no"}):
            assert _load_from_env() == {"color": False}

    def test_no_env_variables(self) -> None:
        assert _load_from_env() == {}


class TestLoadFromPyproject:
    """Test cases for _load_from_pyproject_toml function."""

    def test_section_found(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text(
            '[tool.resxgen]\nnewline = "crlf"\nverify = true\n'
        )

        assert _load_from_pyproject_toml(tmp_path) == {"newline": "crlf", "verify": True}

    def test_string_values_normalized(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text(
            '[tool.resxgen]\ntyped_entries = " SKIP "\nnewline = "CRLF"\nverify = true\n'
        )

        config = load_config(start=tmp_path)

        assert config.typed_entries is TypedEntryPolicy.SKIP
        assert config.newline == "crlf"
        assert config.verify is True

    def test_searches_parent_directories(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text('[tool.resxgen]\ntyped_entries = "reject"\n')
        nested = tmp_path / "src" / "Resources"
        nested.mkdir(parents=True)

        assert _load_from_pyproject_toml(nested) == {"typed_entries": "reject"}

    def test_skips_pyproject_without_section(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text('[tool.resxgen]\nverbose = true\n')
        child = tmp_path / "child"
        child.mkdir()
        (child / "pyproject.toml").write_text('[project]\nname = "other"\n')

        assert _load_from_pyproject_toml(child) == {"verbose": True}

    def test_invalid_toml_is_skipped(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text("[tool.resxgen\n")

        with patch("resxgen.config.logger") as mock_logger:
            result = _load_from_pyproject_toml(tmp_path)

        assert result == {}
        mock_logger.warning.assert_called()


class TestLoadConfig:
    """Test cases for hierarchical load_config."""

    def test_defaults(self, tmp_path: Path) -> None:
        assert load_config(start=tmp_path) == ToolConfig()

    def test_priority_runtime_over_env_over_file(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text(
            '[tool.resxgen]\nnewline = "crlf"\ntyped_entries = "skip"\nverify = true\n'
        )
        env_vars = {"RESXGEN_TYPED_ENTRIES": "reject", "RESXGEN_VERIFY": "false"}

        with patch.dict(os.environ, env_vars):
            config = load_config(verify=True, start=tmp_path)

        assert config.newline == "crlf"
        assert config.typed_entries is TypedEntryPolicy.REJECT
        assert config.verify is True

    def test_invalid_value_raises(self, tmp_path: Path) -> None:
        with pytest.raises(ValidationError):
            load_config(newline="mac", start=tmp_path)
