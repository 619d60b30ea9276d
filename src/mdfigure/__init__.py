"""Rewrite raw HTML figures and images in Markdown syntax trees."""

from __future__ import annotations

from .attributes import parse_attributes
from .exceptions import MdFigureError, UnsupportedNodeError
from .extension import HtmlFigureExtension, makeExtension
from .figures import remark_html_figure, rewrite_html, rewrite_html_node, transform_tree
from .render import to_element, to_html
from .tree import visit


__version__ = "0.1.0"

__all__ = [
    "HtmlFigureExtension",
    "MdFigureError",
    "UnsupportedNodeError",
    "__version__",
    "makeExtension",
    "parse_attributes",
    "remark_html_figure",
    "rewrite_html",
    "rewrite_html_node",
    "to_element",
    "to_html",
    "transform_tree",
    "visit",
]
