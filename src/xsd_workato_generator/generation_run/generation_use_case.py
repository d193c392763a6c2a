"""Generation run use-case service."""

from __future__ import annotations

import dataclasses
import logging
from pathlib import Path

from xsd_workato_generator.artifact_writing import resolve_artifact_paths, write_artifact
from xsd_workato_generator.configuration import (
    ConfigurationError,
    GeneratorSettings,
    load_configuration,
)
from xsd_workato_generator.element_tree import SchemaReadError, read_element_tree
from xsd_workato_generator.field_schema import dump_field_schema, project_field_schema
from xsd_workato_generator.template_rendering import render_template

from .run_contracts import GenerationOutcome, GenerationRequest

logger = logging.getLogger(__name__)


class GenerationError(Exception):
    """Raised when a generation run cannot be completed."""


def execute_generation(request: GenerationRequest) -> GenerationOutcome:
    """Read the XSD, render both artifacts, and write them next to each other."""
    try:
        settings = _load_settings(request)
        tree = read_element_tree(request.input_path)
    except (ConfigurationError, SchemaReadError) as exc:
        raise GenerationError(str(exc)) from exc

    if len(tree.elements) > 1:
        logger.warning(
            "%d top-level elements found; all are rendered inside <%s>",
            len(tree.elements),
            tree.elements[0].name,
        )

    template_text = render_template(tree)
    schema_text = dump_field_schema(project_field_schema(tree), indent=settings.json_indent)
    paths = resolve_artifact_paths(request.input_path, settings)

    try:
        template_path = write_artifact(paths.template_path, template_text)
        logger.info("Template written to %s", template_path)
        schema_path = write_artifact(paths.schema_path, schema_text)
        logger.info("Workato schema written to %s", schema_path)
    except OSError as exc:
        raise GenerationError(f"Failed to write generated artifacts: {exc}") from exc

    return GenerationOutcome(
        template_path=template_path,
        schema_path=schema_path,
        element_count=len(tree.elements),
    )


def _load_settings(request: GenerationRequest) -> GeneratorSettings:
    settings = (
        load_configuration(request.config_path) if request.config_path else GeneratorSettings()
    )
    if request.output_dir:
        settings = dataclasses.replace(settings, output_directory=Path(request.output_dir))
    return settings
