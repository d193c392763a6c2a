"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

DEFAULT_TEMPLATE_SUFFIX = ".template"
DEFAULT_SCHEMA_SUFFIX = "-schema.json"
DEFAULT_JSON_INDENT = 2


@dataclass(frozen=True)
class GeneratorSettings:
    """Output naming and formatting settings for one generation run."""

    output_directory: Path | None = None
    template_suffix: str = DEFAULT_TEMPLATE_SUFFIX
    schema_suffix: str = DEFAULT_SCHEMA_SUFFIX
    lowercase_names: bool = True
    json_indent: int = DEFAULT_JSON_INDENT
