"""Python-Markdown extension rewriting raw HTML figures and images."""

from __future__ import annotations

import logging
from typing import Any

from markdown import Markdown
from markdown.extensions import Extension
from markdown.postprocessors import Postprocessor

from .figures import rewrite_html_node
from .render import to_html
from .tree import html_node


logger = logging.getLogger(__name__)


class _HtmlFigurePostprocessor(Postprocessor):
    """Rewrite stashed raw HTML before Python-Markdown restores it.

    Every stashed string is treated as a raw-HTML node. A replacement is
    rendered back to HTML and stored in the same stash slot, so placeholder
    positions in the document are unchanged.
    """

    def __init__(self, md: Markdown, extension: HtmlFigureExtension) -> None:
        super().__init__(md)
        self.extension = extension

    def run(self, text: str) -> str:
        stash = self.md.htmlStash
        figures = bool(self.extension.getConfig("figures"))
        images = bool(self.extension.getConfig("images"))

        rewritten = 0
        for index, raw in enumerate(stash.rawHtmlBlocks):
            if not isinstance(raw, str):
                continue
            replacement = rewrite_html_node(html_node(raw), figures=figures, images=images)
            if replacement is None:
                continue
            stash.rawHtmlBlocks[index] = to_html(replacement)
            rewritten += 1

        if rewritten:
            logger.debug("Rewrote %d stashed HTML block(s).", rewritten)
        return text


class HtmlFigureExtension(Extension):
    """Turn raw ``<figure>`` and ``<img>`` HTML into normalised figure markup."""

    def __init__(self, **kwargs: Any) -> None:
        self.config = {
            "figures": [True, "Rewrite <figure> blocks containing an <img> tag."],
            "images": [True, "Rewrite bare <img> tags."],
        }
        super().__init__(**kwargs)

    def extendMarkdown(self, md: Markdown) -> None:  # type: ignore[override]  # noqa: N802
        md.registerExtension(self)
        # Must run before the built-in 'raw_html' postprocessor (priority 30).
        md.postprocessors.register(
            _HtmlFigurePostprocessor(md, self), "mdfigure_html_figure", 35
        )


def makeExtension(**kwargs: Any) -> HtmlFigureExtension:  # noqa: N802 - markdown hook
    """Entry point exposed to Python-Markdown."""
    return HtmlFigureExtension(**kwargs)


__all__ = ["HtmlFigureExtension", "makeExtension"]
