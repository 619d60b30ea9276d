from __future__ import annotations

import pytest

from mdfigure.attributes import match_caption, match_figure, match_image, parse_attributes


def test_parse_attributes_collects_double_quoted_pairs() -> None:
    attrs = parse_attributes(' src="a.png" alt="A cat" data-width="300"')

    assert attrs == {"src": "a.png", "alt": "A cat", "data-width": "300"}


def test_parse_attributes_keeps_name_case() -> None:
    assert parse_attributes('SRC="a.png" Alt="x"') == {"SRC": "a.png", "Alt": "x"}


@pytest.mark.parametrize("value", ["", None])
def test_parse_attributes_handles_empty_input(value: str | None) -> None:
    assert parse_attributes(value) == {}


def test_parse_attributes_ignores_unsupported_forms() -> None:
    attrs = parse_attributes("""src='a.png' width=300 loading hidden alt="ok" """)

    assert attrs == {"alt": "ok"}


def test_parse_attributes_last_duplicate_wins() -> None:
    assert parse_attributes('class="a" class="b"') == {"class": "b"}


def test_parse_attributes_accepts_empty_values() -> None:
    assert parse_attributes('alt=""') == {"alt": ""}


def test_match_image_returns_first_tag() -> None:
    html = '<img src="one.png"><img src="two.png">'

    assert match_image(html) == {"src": "one.png"}


def test_match_image_requires_whitespace_after_tag_name() -> None:
    assert match_image("<img>") is None


def test_match_figure_reads_start_tag() -> None:
    assert match_figure('<FIGURE class="wide" id="f1"><img src="a.png"></FIGURE>') == {
        "class": "wide",
        "id": "f1",
    }
    assert match_figure('<img src="a.png">') is None


def test_match_caption_trims_multiline_text() -> None:
    html = '<figcaption class="note">\n   Sunset over\n the bay  \n</figcaption>'

    attrs, text = match_caption(html)  # type: ignore[misc]

    assert attrs == {"class": "note"}
    assert text == "Sunset over\n the bay"


def test_match_caption_is_non_greedy() -> None:
    html = "<figcaption>first</figcaption><figcaption>second</figcaption>"

    assert match_caption(html) == ({}, "first")
