"""Rewrite raw HTML ``<figure>``/``<img>`` blocks into structured tree nodes.

Raw HTML passes through a Markdown parser untouched, so images authored as
HTML would otherwise bypass every image-aware step downstream. This module
turns such nodes into ``image`` nodes (optionally wrapped in a figure with a
caption) carrying render hints that preserve the original attributes.

The rewrite is lenient: a snippet that cannot be understood is left in the
tree exactly as it was, and nothing is raised.
"""

from __future__ import annotations

from collections.abc import Callable
import logging

from .attributes import match_caption, match_figure, match_image
from .tree import (
    Node,
    image_node,
    paragraph_node,
    render_hint,
    strong_node,
    text_node,
    visit,
)


logger = logging.getLogger(__name__)

_IMG_MARKER = "<img"
_FIGURE_MARKER = "<figure"


def build_image(attributes: dict[str, str]) -> Node:
    """Return an ``image`` node rendered as ``<img>`` with ``attributes``."""
    node = image_node(attributes.get("src"), attributes.get("alt") or "")
    return render_hint(node, "img", attributes)


def build_caption(attributes: dict[str, str], text: str) -> Node:
    node = strong_node([text_node(text)])
    return render_hint(node, "figcaption", attributes)


def build_figure(
    attributes: dict[str, str],
    image: Node,
    caption: Node | None = None,
) -> Node:
    """Return a block node rendered as ``<figure>`` around an image and caption."""
    children = [image]
    if caption is not None:
        children.append(caption)
    return render_hint(paragraph_node(children), "figure", attributes)


def rewrite_html(html: str, *, figures: bool = True, images: bool = True) -> Node | None:
    """Return the structured replacement for a raw HTML literal, or ``None``."""
    if _IMG_MARKER not in html:
        return None

    if _FIGURE_MARKER in html:
        if not figures:
            return None
        image_attributes = match_image(html)
        if image_attributes is None:
            logger.debug("Skipping figure without a parsable <img> tag: %r", html)
            return None
        caption = None
        caption_match = match_caption(html)
        if caption_match is not None:
            caption_attributes, caption_text = caption_match
            if caption_text:
                caption = build_caption(caption_attributes, caption_text)
        return build_figure(match_figure(html) or {}, build_image(image_attributes), caption)

    if not images:
        return None
    image_attributes = match_image(html)
    if image_attributes is None:
        logger.debug("Skipping raw HTML without a parsable <img> tag: %r", html)
        return None
    return build_image(image_attributes)


def rewrite_html_node(node: Node, *, figures: bool = True, images: bool = True) -> Node | None:
    """Return the replacement for a raw-HTML node, or ``None`` to keep it."""
    if node.get("type") != "html":
        return None
    value = node.get("value")
    if not isinstance(value, str):
        return None
    return rewrite_html(value, figures=figures, images=images)


def transform_tree(tree: Node, *, figures: bool = True, images: bool = True) -> int:
    """Replace every convertible raw-HTML node of ``tree`` in place.

    Returns the number of replaced nodes.
    """

    def visitor(node: Node, _index: int | None, _parent: Node | None) -> Node | None:
        return rewrite_html_node(node, figures=figures, images=images)

    replaced = visit(tree, "html", visitor)
    if replaced:
        logger.debug("Rewrote %d raw HTML node(s) into image nodes.", replaced)
    return replaced


def remark_html_figure(*, figures: bool = True, images: bool = True) -> Callable[[Node], None]:
    """Return a tree transformer suitable for a plugin-style pipeline."""

    def transformer(tree: Node) -> None:
        transform_tree(tree, figures=figures, images=images)

    return transformer


__all__ = [
    "build_caption",
    "build_figure",
    "build_image",
    "remark_html_figure",
    "rewrite_html",
    "rewrite_html_node",
    "transform_tree",
]
