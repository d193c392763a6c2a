"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "xsd2wkt.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Generator configuration for xsd2wkt.
# Every setting is optional; delete a line to fall back to its default.

output:
  # Directory for the generated files. Relative paths resolve against this file.
  # Defaults to the directory of the input XSD.
  # directory: "generated"
  # Appended to the output base name for the Mustache template.
  template_suffix: ".template"
  # Appended to the output base name for the Workato schema JSON.
  schema_suffix: "-schema.json"
  # Lowercase the output base name derived from the XSD file name.
  lowercase_names: true

schema_json:
  # Indentation of the Workato schema JSON; 0 writes a single line.
  indent: 2
"""


def build_placeholder_configuration() -> str:
    """Build a YAML generator configuration with defaults and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the generator configuration scaffold to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
