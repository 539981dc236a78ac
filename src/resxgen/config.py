"""Configuration models for resxgen.

``GeneratorOptions`` carries the three strings the generator core needs and
is always supplied explicitly by the caller. ``ToolConfig`` holds command-line
front-end settings and is resolved with the following priority order
(highest to lowest):
1. Runtime Parameters (passed directly to ``load_config``)
2. Environment Variables (prefixed with RESXGEN_)
3. Project Config ([tool.resxgen] in pyproject.toml)
4. Defaults (hardcoded fallbacks)
"""

import logging
import os
import tomllib
from pathlib import Path
from typing import Any, Literal, Optional

from pydantic import BaseModel, Field
from rich.markup import escape

from resxgen.extraction.reader import TypedEntryPolicy
from resxgen.utils.logging import configure_module_logger

logger = configure_module_logger(__name__, level=logging.INFO)

LINE_SEPARATORS = {"lf": "\n", "crlf": "\r\n"}


class GeneratorOptions(BaseModel):
    """Namespace and class naming for one generated accessor class."""

    local_namespace: str = Field(
        min_length=1,
        description="Namespace used to build the ResourceManager base name",
    )

    custom_tool_namespace: Optional[str] = Field(
        default=None,
        description="Overrides the emitted namespace when non-empty",
    )

    class_name: str = Field(
        min_length=1,
        description="Name of the generated static class",
    )

    model_config = {
        "extra": "forbid",
        "frozen": True,
    }

    @property
    def emitted_namespace(self) -> str:
        return self.custom_tool_namespace or self.local_namespace

    @property
    def resource_base_name(self) -> str:
        """Identity of the embedded resource, always rooted at the local namespace."""
        return f"{self.local_namespace}.{self.class_name}"

    @property
    def hint_name(self) -> str:
        return f"{self.resource_base_name}.g.cs"


class ToolConfig(BaseModel):
    """Settings for the command-line front end."""

    typed_entries: TypedEntryPolicy = Field(
        default=TypedEntryPolicy.INCLUDE,
        description="How data elements carrying a type or mimetype are handled",
    )

    newline: Literal["lf", "crlf"] = Field(
        default="lf",
        description="Line separator of the generated source",
    )

    verify: bool = Field(
        default=False,
        description="Run the accessor/key consistency check after generation",
    )

    verbose: bool = Field(
        default=False,
        description="Enable debug logging",
    )

    color: bool = Field(
        default=True,
        description="Rich colored log output; plain text when disabled",
    )

    model_config = {
        "extra": "forbid",
    }

    @property
    def line_separator(self) -> str:
        return LINE_SEPARATORS[self.newline]


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in ("true", "1", "yes", "on")


def _load_from_pyproject_toml(start: Optional[Path] = None) -> dict[str, Any]:
    """Load configuration from the [tool.resxgen] section in pyproject.toml.

    Walks from ``start`` (default: the working directory) up to the
    filesystem root and returns the first section found.

    Returns:
        Dictionary with config values, or empty dict if not found.
    """
    current_dir = start if start is not None else Path.cwd()
    for path in [current_dir] + list(current_dir.parents):
        pyproject_path = path / "pyproject.toml"
        if not pyproject_path.is_file():
            continue
        try:
            with open(pyproject_path, "rb") as f:
                data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            logger.warning(
                f"[yellow]⚠[/yellow] Ignoring unreadable "
                f"[dim]{escape(str(pyproject_path))}[/dim]: {escape(str(e))}"
            )
            continue
        section = data.get("tool", {}).get("resxgen")
        if isinstance(section, dict):
            return {
                key: value.strip().lower() if isinstance(value, str) else value
                for key, value in section.items()
            }

    return {}


def _load_from_env() -> dict[str, Any]:
    """Load configuration from environment variables (prefixed with RESXGEN_).

    Returns:
        Dictionary with config values from environment.
    """
    config: dict[str, Any] = {}

    env_mapping = {
        "RESXGEN_TYPED_ENTRIES": "typed_entries",
        "RESXGEN_NEWLINE": "newline",
        "RESXGEN_VERIFY": "verify",
        "RESXGEN_VERBOSE": "verbose",
        "RESXGEN_COLOR": "color",
    }

    for env_var, config_key in env_mapping.items():
        value = os.getenv(env_var)
        if value is None:
            continue
        if config_key in ("verify", "verbose", "color"):
            config[config_key] = _parse_bool(value)
        else:
            config[config_key] = value.strip().lower()

    return config


def load_config(
    typed_entries: Optional[str] = None,
    newline: Optional[str] = None,
    verify: Optional[bool] = None,
    verbose: Optional[bool] = None,
    color: Optional[bool] = None,
    start: Optional[Path] = None,
) -> ToolConfig:
    """Load front-end configuration with hierarchical priority.

    Args:
        typed_entries: Typed entry policy name (include, skip, reject).
        newline: Line separator name (lf, crlf).
        verify: Run the consistency check.
        verbose: Enable debug logging.
        color: Colored log output.
        start: Directory where the pyproject.toml search begins.

    Returns:
        ToolConfig instance with merged configuration.

    Raises:
        pydantic.ValidationError: If a merged value is invalid.
    """
    runtime_config: dict[str, Any] = {}
    if typed_entries is not None:
        runtime_config["typed_entries"] = typed_entries
    if newline is not None:
        runtime_config["newline"] = newline
    if verify is not None:
        runtime_config["verify"] = verify
    if verbose is not None:
        runtime_config["verbose"] = verbose
    if color is not None:
        runtime_config["color"] = color

    merged_config = ToolConfig().model_dump()
    merged_config.update(_load_from_pyproject_toml(start))
    merged_config.update(_load_from_env())
    merged_config.update(runtime_config)

    return ToolConfig(**merged_config)
