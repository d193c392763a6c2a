"""Mustache template rendering service."""

from __future__ import annotations

from xsd_workato_generator.element_tree.element_models import (
    SchemaElement,
    SchemaElementTree,
    field_key,
)

from .constants import TEMPLATE_HEADER


def render_template(tree: SchemaElementTree) -> str:
    """Render the Mustache template mirroring the element tree.

    Every top-level element is rendered inside the tag pair of the first one.
    Complex elements below the top level become sections keyed by
    ``<enclosing>_<element>``; leaves become ``{{<parent>_<leaf>}}`` placeholders.
    """
    lines: list[str] = [TEMPLATE_HEADER]
    root = tree.root
    if root is None:
        return _join(lines)

    if root.is_complex:
        lines.append(_open_section(root.name))
    lines.append(_open_tag(root.name))
    for element in tree.elements:
        _emit_element(lines, element, enclosing_name="")
    lines.append(_close_tag(root.name))
    if root.is_complex:
        lines.append(_close_section(root.name))
    return _join(lines)


def _emit_element(lines: list[str], element: SchemaElement, *, enclosing_name: str) -> None:
    section_key = field_key(enclosing_name, element.name)
    if enclosing_name:
        lines.append(_open_section(section_key))
        lines.append(_open_tag(element.name))

    for child in element.children:
        if child.is_complex:
            # Children of a nested element are keyed by that element alone.
            _emit_element(lines, child, enclosing_name=element.name)
        else:
            lines.append(_leaf_line(element.name, child.name))

    if enclosing_name:
        lines.append(_close_tag(element.name))
        lines.append(_close_section(section_key))


def _leaf_line(parent_name: str, leaf_name: str) -> str:
    placeholder = "{{" + field_key(parent_name, leaf_name) + "}}"
    return f"{_open_tag(leaf_name)}{placeholder}{_close_tag(leaf_name)}"


def _open_section(key: str) -> str:
    return "{{#" + key + "}}"


def _close_section(key: str) -> str:
    return "{{/" + key + "}}"


def _open_tag(name: str) -> str:
    return f"<{name}>"


def _close_tag(name: str) -> str:
    return f"</{name}>"


def _join(lines: list[str]) -> str:
    return "".join(f"{line}\n" for line in lines)
