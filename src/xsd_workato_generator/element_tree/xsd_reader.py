"""XSD ingestion into the element tree."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

from lxml import etree

from .element_models import SchemaElement, SchemaElementTree

logger = logging.getLogger(__name__)

_CHILD_ELEMENT_PATH: tuple[str, ...] = ("complexType", "sequence", "element")


class SchemaReadError(Exception):
    """Raised when XSD source cannot be turned into an element tree."""


def read_element_tree(path: Path | str) -> SchemaElementTree:
    """Read an XSD file and return its element tree."""
    source_path = Path(path)
    if not source_path.exists():
        raise SchemaReadError(f"Schema file not found: {source_path}")
    try:
        source = source_path.read_bytes()
    except OSError as exc:
        raise SchemaReadError(f"Failed to read schema file {source_path}: {exc}") from exc
    logger.debug("Read %d bytes from %s", len(source), source_path)
    return parse_element_tree(source)


def parse_element_tree(source: str | bytes) -> SchemaElementTree:
    """Parse XSD text and collect element declarations with their sequence children."""
    # Text input is already decoded; its declared encoding no longer applies.
    encoding: str | None = None
    if isinstance(source, str):
        source = source.encode("utf-8")
        encoding = "utf-8"
    if not source.strip():
        raise SchemaReadError("Schema document is empty.")

    parser = etree.XMLParser(
        encoding=encoding, resolve_entities=False, no_network=True, remove_comments=True
    )
    try:
        document_root = etree.fromstring(source, parser=parser)
    except (etree.XMLSyntaxError, ValueError) as exc:
        raise SchemaReadError(f"Failed to parse schema XML: {exc}") from exc

    elements = tuple(
        _build_element(node) for node in _children_named(document_root, "element")
    )
    logger.debug("Parsed %d top-level element(s)", len(elements))
    return SchemaElementTree(elements=elements)


def _build_element(node: etree._Element) -> SchemaElement:
    return SchemaElement(
        name=_element_name(node),
        scalar_type=node.get("type") or None,
        children=tuple(_build_element(child) for child in _sequence_elements(node)),
    )


def _element_name(node: etree._Element) -> str:
    name = node.get("name") or node.get("ref")
    if not name:
        raise SchemaReadError(
            f"Element declaration on line {node.sourceline} has neither a name nor a ref."
        )
    return name


def _sequence_elements(node: etree._Element) -> Iterator[etree._Element]:
    level = [node]
    for local_name in _CHILD_ELEMENT_PATH:
        level = [child for parent in level for child in _children_named(parent, local_name)]
    yield from level


def _children_named(node: etree._Element, local_name: str) -> Iterator[etree._Element]:
    for child in node:
        if not isinstance(child.tag, str):
            continue
        if etree.QName(child).localname == local_name:
            yield child
