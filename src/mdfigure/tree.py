"""mdast-shaped syntax tree helpers.

Nodes are plain dictionaries so trees exported as JSON by a remark pipeline
can be processed without conversion. Render hints live under ``data`` using
the ``hName``/``hProperties`` keys understood by mdast-to-hast renderers.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any


Node = dict[str, Any]
Visitor = Callable[[Node, int | None, Node | None], Node | None]

H_NAME = "hName"
H_PROPERTIES = "hProperties"


def root_node(children: list[Node] | None = None) -> Node:
    return {"type": "root", "children": list(children or [])}


def paragraph_node(children: list[Node] | None = None) -> Node:
    return {"type": "paragraph", "children": list(children or [])}


def strong_node(children: list[Node] | None = None) -> Node:
    return {"type": "strong", "children": list(children or [])}


def text_node(value: str) -> Node:
    return {"type": "text", "value": value}


def html_node(value: str) -> Node:
    return {"type": "html", "value": value}


def image_node(url: str | None, alt: str = "") -> Node:
    return {"type": "image", "url": url, "alt": alt}


def render_hint(node: Node, name: str, properties: Mapping[str, str] | None = None) -> Node:
    """Attach an output tag name and attribute mapping to ``node``."""
    data = node.setdefault("data", {})
    data[H_NAME] = name
    data[H_PROPERTIES] = dict(properties or {})
    return node


def get_render_hint(node: Mapping[str, Any]) -> tuple[str | None, dict[str, str] | None]:
    """Return the ``(hName, hProperties)`` pair attached to ``node``."""
    data = node.get("data") or {}
    properties = data.get(H_PROPERTIES)
    return data.get(H_NAME), dict(properties) if properties is not None else None


def visit(tree: Node, node_type: str | None, visitor: Visitor) -> int:
    """Walk ``tree`` depth-first and let ``visitor`` replace matching nodes.

    ``visitor`` is called with ``(node, index, parent)`` for every node whose
    ``type`` equals ``node_type`` (or every node when ``node_type`` is
    ``None``). A non-``None`` return value is written back at
    ``parent["children"][index]`` and is not descended into. The root has no
    parent and is never replaced.

    Returns the number of replaced nodes.
    """
    replaced = 0

    def walk(node: Node, index: int | None, parent: Node | None) -> None:
        nonlocal replaced
        if node_type is None or node.get("type") == node_type:
            replacement = visitor(node, index, parent)
            if replacement is not None and parent is not None and index is not None:
                parent["children"][index] = replacement
                replaced += 1
                return
        children = node.get("children")
        if not children:
            return
        # Iterate over a snapshot; replacements are 1-to-1 so indices stay valid.
        for child_index, child in enumerate(list(children)):
            walk(child, child_index, node)

    walk(tree, None, None)
    return replaced


__all__ = [
    "H_NAME",
    "H_PROPERTIES",
    "Node",
    "Visitor",
    "get_render_hint",
    "html_node",
    "image_node",
    "paragraph_node",
    "render_hint",
    "root_node",
    "strong_node",
    "text_node",
    "visit",
]
