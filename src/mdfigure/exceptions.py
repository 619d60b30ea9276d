"""Errors raised while rendering rewritten nodes.

The rewriter itself never raises; malformed snippets stay in the tree.
"""

from __future__ import annotations


class MdFigureError(RuntimeError):
    """Base exception for mdfigure failures."""


class UnsupportedNodeError(MdFigureError):
    """Raised when the renderer receives a node type it cannot emit."""


__all__ = ["MdFigureError", "UnsupportedNodeError"]
