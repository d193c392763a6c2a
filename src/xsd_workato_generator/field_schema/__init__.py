"""Field schema exports."""

from .field_models import FieldKind, FieldSchemaNode
from .field_schema_projection import project_field_schema
from .field_schema_serializer import dump_field_schema, to_workato_fields
from .type_mapping import map_scalar_type

__all__ = [
    "FieldKind",
    "FieldSchemaNode",
    "dump_field_schema",
    "map_scalar_type",
    "project_field_schema",
    "to_workato_fields",
]
