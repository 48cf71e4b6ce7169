"""Tests for :mod:`navwalker.escaping`."""

from __future__ import annotations

import pytest

from navwalker.escaping import escape_attribute, escape_html, escape_url


def test_escape_html_encodes_special_characters() -> None:
    """Given markup characters When escaped Then all five specials are encoded."""

    assert escape_html("<b>\"Tom\" & 'Jerry'</b>") == "&lt;b&gt;&quot;Tom&quot; &amp; &#039;Jerry&#039;&lt;/b&gt;"


def test_escape_html_keeps_existing_entities() -> None:
    """Given text with valid entities When escaped Then entities are not encoded twice."""

    assert escape_html("Fish &amp; Chips &#8211; &#x2014;") == "Fish &amp; Chips &#8211; &#x2014;"


def test_escape_attribute_handles_none_and_numbers() -> None:
    """Given non string values When escaped as attributes Then they are rendered as text."""

    assert escape_attribute(None) == ""
    assert escape_attribute(42) == "42"


@pytest.mark.parametrize(
    ("url", "expected"),
    [
        ("/", "/"),
        ("about.html", "about.html"),
        ("https://example.com/docs", "https://example.com/docs"),
        (" https://example.com/a b", "https://example.com/a%20b"),
        ("/search?q=a&b=c", "/search?q=a&#038;b=c"),
        ("/search?q=a&amp;b=c", "/search?q=a&#038;b=c"),
        ("/it's", "/it&#039;s"),
        ('/x"onmouseover=alert(1)', "/xonmouseover=alert(1)"),
        ("http://example.com/%0d%0aSet-Cookie", "http://example.com/Set-Cookie"),
        ("http;//example.com", "http://example.com"),
        ("mailto:me@example.com", "mailto:me@example.com"),
        ("#section", "#section"),
    ],
)
def test_escape_url_cleans_links(url: str, expected: str) -> None:
    """Given link targets When escaped Then unsafe characters are removed and specials encoded."""

    assert escape_url(url) == expected


@pytest.mark.parametrize("url", ["javascript:alert(1)", "JaVaScRiPt:alert(1)", "data:text/html,hi", "", None])
def test_escape_url_rejects_unsafe_or_empty(url) -> None:
    """Given a disallowed scheme or empty input When escaped Then an empty string is returned."""

    assert escape_url(url) == ""
