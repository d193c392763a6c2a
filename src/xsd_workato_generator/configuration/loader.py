"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from .runtime_settings import (
    DEFAULT_JSON_INDENT,
    DEFAULT_SCHEMA_SUFFIX,
    DEFAULT_TEMPLATE_SUFFIX,
    GeneratorSettings,
)

_KNOWN_SECTIONS = frozenset({"output", "schema_json"})


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> GeneratorSettings:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigurationError(f"Failed to read configuration file {path}: {exc}") from exc

    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    unknown = sorted(str(key) for key in parsed if key not in _KNOWN_SECTIONS)
    if unknown:
        raise ConfigurationError(f"Unknown configuration section(s): {', '.join(unknown)}")

    output = _optional_mapping(parsed.get("output"), "output")
    schema_json = _optional_mapping(parsed.get("schema_json"), "schema_json")

    return GeneratorSettings(
        output_directory=_optional_directory(output.get("directory"), path.parent),
        template_suffix=_require_non_empty_string(
            output.get("template_suffix", DEFAULT_TEMPLATE_SUFFIX), "output.template_suffix"
        ),
        schema_suffix=_require_non_empty_string(
            output.get("schema_suffix", DEFAULT_SCHEMA_SUFFIX), "output.schema_suffix"
        ),
        lowercase_names=_require_bool(
            output.get("lowercase_names", True), "output.lowercase_names"
        ),
        json_indent=_require_non_negative_int(
            schema_json.get("indent", DEFAULT_JSON_INDENT), "schema_json.indent"
        ),
    )


def _optional_directory(value: Any, base_path: Path) -> Path | None:
    if value is None:
        return None
    raw_path = _require_non_empty_string(value, "output.directory")
    return _resolve_path(base_path, raw_path)


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _optional_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _require_bool(value: Any, field_name: str) -> bool:
    if not isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be true or false.")
    return value


def _require_non_negative_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value < 0:
        raise ConfigurationError(f"{field_name} must not be negative.")
    return value
