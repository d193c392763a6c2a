"""XSD scalar type to field kind lookup."""

from __future__ import annotations

from collections.abc import Mapping

from .field_models import FieldKind

_KIND_BY_LOCAL_NAME: Mapping[str, FieldKind] = {
    **dict.fromkeys(
        (
            "string",
            "normalizedString",
            "token",
            "anyURI",
            "language",
            "Name",
            "NCName",
            "NMTOKEN",
            "ID",
            "IDREF",
            "QName",
        ),
        FieldKind.STRING,
    ),
    **dict.fromkeys(("dateTime", "dateTimeStamp", "date", "time"), FieldKind.DATE_TIME),
    "boolean": FieldKind.BOOLEAN,
    **dict.fromkeys(
        (
            "integer",
            "int",
            "long",
            "short",
            "byte",
            "nonNegativeInteger",
            "positiveInteger",
            "nonPositiveInteger",
            "negativeInteger",
            "unsignedLong",
            "unsignedInt",
            "unsignedShort",
            "unsignedByte",
        ),
        FieldKind.INTEGER,
    ),
    **dict.fromkeys(("float", "double", "decimal"), FieldKind.NUMBER),
}

DEFAULT_KIND = FieldKind.STRING


def map_scalar_type(scalar_type: str | None) -> FieldKind:
    """Return the field kind for an XSD type tag such as ``xs:dateTime``.

    The namespace prefix is ignored. Unknown or missing tags map to ``string``.
    """
    if not scalar_type:
        return DEFAULT_KIND
    local_name = scalar_type.rpartition(":")[2].strip()
    return _KIND_BY_LOCAL_NAME.get(local_name, DEFAULT_KIND)
