"""Lexical helpers for the small HTML micro-grammar found in Markdown sources.

Only ``name="value"`` attributes are recognised. Single-quoted values,
unquoted values and boolean attributes are ignored rather than rejected.
"""

from __future__ import annotations

import re


ATTRIBUTE_RE = re.compile(r'([a-z0-9_-]+)="([^"]*)"', re.IGNORECASE)
FIGURE_RE = re.compile(r"<figure([^>]*)>", re.IGNORECASE)
IMG_RE = re.compile(r"<img\s+([^>]+)>", re.IGNORECASE)
FIGCAPTION_RE = re.compile(r"<figcaption([^>]*)>([\s\S]*?)</figcaption>", re.IGNORECASE)


def parse_attributes(attr_string: str | None) -> dict[str, str]:
    """Return the ``name="value"`` pairs found in a start tag's attribute text."""
    if not attr_string:
        return {}
    return {match.group(1): match.group(2) for match in ATTRIBUTE_RE.finditer(attr_string)}


def match_figure(html: str) -> dict[str, str] | None:
    """Return the attributes of the first ``<figure>`` start tag, if any."""
    match = FIGURE_RE.search(html)
    if match is None:
        return None
    return parse_attributes(match.group(1))


def match_image(html: str) -> dict[str, str] | None:
    """Return the attributes of the first ``<img>`` tag, if any."""
    match = IMG_RE.search(html)
    if match is None:
        return None
    return parse_attributes(match.group(1))


def match_caption(html: str) -> tuple[dict[str, str], str] | None:
    """Return the attributes and trimmed text of the first ``<figcaption>`` block."""
    match = FIGCAPTION_RE.search(html)
    if match is None:
        return None
    return parse_attributes(match.group(1)), match.group(2).strip()


__all__ = [
    "ATTRIBUTE_RE",
    "FIGCAPTION_RE",
    "FIGURE_RE",
    "IMG_RE",
    "match_caption",
    "match_figure",
    "match_image",
    "parse_attributes",
]
