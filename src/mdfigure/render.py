"""Render-hint aware conversion of tree nodes into HTML elements."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any
from xml.etree import ElementTree

from markdown.serializers import to_html_string

from .exceptions import UnsupportedNodeError
from .tree import Node, get_render_hint


_DEFAULT_TAGS: dict[str, str] = {
    "root": "div",
    "paragraph": "p",
    "strong": "strong",
    "emphasis": "em",
    "image": "img",
}


def _default_properties(node: Node) -> dict[str, str]:
    if node.get("type") != "image":
        return {}
    properties: dict[str, str] = {}
    url = node.get("url")
    if url is not None:
        properties["src"] = str(url)
    properties["alt"] = str(node.get("alt") or "")
    return properties


def _append_children(element: ElementTree.Element, children: Iterable[Any]) -> None:
    last: ElementTree.Element | None = None
    for child in children:
        if child.get("type") == "text":
            value = str(child.get("value") or "")
            if last is None:
                element.text = (element.text or "") + value
            else:
                last.tail = (last.tail or "") + value
            continue
        last = to_element(child)
        element.append(last)


def to_element(node: Node) -> ElementTree.Element:
    """Convert ``node`` and its children into an ElementTree element.

    ``data.hName`` and ``data.hProperties`` take precedence over the default
    tag and attributes of the node type.
    """
    node_type = node.get("type")
    name, properties = get_render_hint(node)
    tag = name or _DEFAULT_TAGS.get(str(node_type))
    if tag is None:
        raise UnsupportedNodeError(f"Cannot render node of type '{node_type}'.")
    if properties is None:
        properties = _default_properties(node)

    element = ElementTree.Element(tag, {key: str(value) for key, value in properties.items()})
    _append_children(element, node.get("children") or ())
    return element


def to_html(node: Node) -> str:
    """Serialise ``node`` as an HTML5 fragment."""
    return to_html_string(to_element(node))


__all__ = ["to_element", "to_html"]
