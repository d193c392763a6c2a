"""Field schema JSON document writer."""

from __future__ import annotations

import json
from collections.abc import Sequence
from typing import Any

from .field_models import FieldSchemaNode


def to_workato_fields(nodes: Sequence[FieldSchemaNode]) -> list[dict[str, Any]]:
    """Convert field schema nodes into JSON-ready Workato field objects."""
    return [_to_workato_field(node) for node in nodes]


def dump_field_schema(nodes: Sequence[FieldSchemaNode], *, indent: int = 2) -> str:
    """Serialize field schema nodes as a JSON array; ``indent=0`` writes one line."""
    return json.dumps(
        to_workato_fields(nodes),
        indent=indent or None,
        ensure_ascii=False,
    )


def _to_workato_field(node: FieldSchemaNode) -> dict[str, Any]:
    field: dict[str, Any] = {
        "name": node.name,
        "label": node.label,
        "type": node.kind.wire_type,
    }
    if node.container_element_kind is not None:
        field["of"] = node.container_element_kind
    field["optional"] = node.optional
    if node.properties:
        field["properties"] = to_workato_fields(node.properties)
    return field
