"""Element tree exports."""

from .element_models import FIELD_KEY_SEPARATOR, SchemaElement, SchemaElementTree, field_key
from .xsd_reader import SchemaReadError, parse_element_tree, read_element_tree

__all__ = [
    "FIELD_KEY_SEPARATOR",
    "SchemaElement",
    "SchemaElementTree",
    "SchemaReadError",
    "field_key",
    "parse_element_tree",
    "read_element_tree",
]
