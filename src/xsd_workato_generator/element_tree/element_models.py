"""Element tree entities."""

from __future__ import annotations

from dataclasses import dataclass

FIELD_KEY_SEPARATOR = "_"


@dataclass(frozen=True)
class SchemaElement:
    """One element declaration with its nested sequence children."""

    name: str
    scalar_type: str | None = None
    children: tuple[SchemaElement, ...] = ()

    @property
    def is_complex(self) -> bool:
        return bool(self.children)


@dataclass(frozen=True)
class SchemaElementTree:
    """Top-level element declarations in source order."""

    elements: tuple[SchemaElement, ...] = ()

    @property
    def root(self) -> SchemaElement | None:
        return self.elements[0] if self.elements else None


def field_key(enclosing_name: str, name: str) -> str:
    """Key shared by template placeholders/sections and schema fields.

    Only the immediately enclosing element prefixes the name; an empty
    enclosing name leaves it unprefixed.
    """
    if not enclosing_name:
        return name
    return f"{enclosing_name}{FIELD_KEY_SEPARATOR}{name}"
