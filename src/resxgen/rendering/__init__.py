"""Rendering of declaration trees to C# source text."""

from resxgen.rendering.formatter import build_unit, render_unit
from resxgen.rendering.templates import AUTO_GENERATED_HEADER

__all__ = ["AUTO_GENERATED_HEADER", "build_unit", "render_unit"]
