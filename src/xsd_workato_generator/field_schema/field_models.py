"""Field schema entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

OBJECT_CONTAINER_KIND = "object"


class FieldKind(str, Enum):
    """Declared type of one field schema node."""

    STRING = "string"
    DATE_TIME = "date_time"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    NUMBER = "number"
    OBJECT_ARRAY = "object-array"

    @property
    def wire_type(self) -> str:
        """Value written to the ``type`` key of the JSON document."""
        if self is FieldKind.OBJECT_ARRAY:
            return "array"
        return self.value


@dataclass(frozen=True)
class FieldSchemaNode:
    """One field of the projected schema."""

    name: str
    kind: FieldKind
    properties: tuple[FieldSchemaNode, ...] = ()
    optional: bool = True

    @property
    def label(self) -> str:
        return self.name

    @property
    def container_element_kind(self) -> str | None:
        if self.kind is FieldKind.OBJECT_ARRAY:
            return OBJECT_CONTAINER_KIND
        return None
