"""Output path derivation for generated artifacts."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from xsd_workato_generator.configuration.runtime_settings import GeneratorSettings

_XSD_SUFFIX = ".xsd"


@dataclass(frozen=True)
class ArtifactPaths:
    """Destination files for one input schema."""

    template_path: Path
    schema_path: Path


def resolve_artifact_paths(input_path: Path | str, settings: GeneratorSettings) -> ArtifactPaths:
    """Derive template and schema output paths from the input XSD path."""
    input_file = Path(input_path)
    destination = settings.output_directory or input_file.parent
    base_name = _output_base_name(input_file.name, lowercase=settings.lowercase_names)
    return ArtifactPaths(
        template_path=destination / f"{base_name}{settings.template_suffix}",
        schema_path=destination / f"{base_name}{settings.schema_suffix}",
    )


def _output_base_name(file_name: str, *, lowercase: bool) -> str:
    base_name = file_name.lower() if lowercase else file_name
    if base_name.lower().endswith(_XSD_SUFFIX):
        return base_name[: -len(_XSD_SUFFIX)]
    return base_name
