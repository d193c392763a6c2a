"""Projection of the element tree onto field schema nodes."""

from __future__ import annotations

from collections.abc import Sequence

from xsd_workato_generator.element_tree.element_models import (
    SchemaElement,
    SchemaElementTree,
    field_key,
)

from .field_models import FieldKind, FieldSchemaNode
from .type_mapping import map_scalar_type


def project_field_schema(tree: SchemaElementTree) -> tuple[FieldSchemaNode, ...]:
    """Return one field schema node per top-level element, in source order."""
    return tuple(_project_element(element, key=element.name) for element in tree.elements)


def _project_children(
    children: Sequence[SchemaElement], enclosing_name: str
) -> tuple[FieldSchemaNode, ...]:
    return tuple(
        _project_element(child, key=field_key(enclosing_name, child.name)) for child in children
    )


def _project_element(element: SchemaElement, *, key: str) -> FieldSchemaNode:
    if not element.is_complex:
        return FieldSchemaNode(name=key, kind=map_scalar_type(element.scalar_type))
    # The element's own name, not the accumulated key, prefixes its children.
    return FieldSchemaNode(
        name=key,
        kind=FieldKind.OBJECT_ARRAY,
        properties=_project_children(element.children, element.name),
    )
