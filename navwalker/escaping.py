"""Escaping helpers used when writing menu markup.

``escape_html`` and ``escape_attribute`` encode the five HTML special
characters without double-encoding entities that are already well formed,
which is why they do not delegate to :func:`html.escape`.
``escape_url`` cleans a link target for use in an ``href`` attribute and
rejects schemes outside :data:`ALLOWED_PROTOCOLS`.
"""

from __future__ import annotations

import re
from typing import Any

ALLOWED_PROTOCOLS = frozenset(
    {
        "http",
        "https",
        "ftp",
        "ftps",
        "mailto",
        "news",
        "irc",
        "irc6",
        "ircs",
        "gopher",
        "nntp",
        "feed",
        "telnet",
        "mms",
        "rtsp",
        "sms",
        "svn",
        "tel",
        "fax",
        "xmpp",
        "webcal",
        "urn",
    }
)

_BARE_AMPERSAND = re.compile(r"&(?!(?:#\d+|#x[0-9a-fA-F]+|[A-Za-z][A-Za-z0-9]*);)")
_SPECIAL_CHARS = {"<": "&lt;", ">": "&gt;", '"': "&quot;", "'": "&#039;"}
_SPECIAL_PATTERN = re.compile("[<>\"']")
_URL_DISALLOWED = re.compile(r"[^a-z0-9\-~+_.?#=!&;,/:%@$|*'()\[\]\x80-\uffff]", re.IGNORECASE)
_URL_LINE_BREAKS = re.compile(r"%0[da]", re.IGNORECASE)
_SCHEME = re.compile(r"^([^:]*):")


def _to_text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def escape_html(text: Any) -> str:
    """Return ``text`` safe for use as HTML element content."""

    value = _BARE_AMPERSAND.sub("&amp;", _to_text(text))
    return _SPECIAL_PATTERN.sub(lambda match: _SPECIAL_CHARS[match.group(0)], value)


def escape_attribute(text: Any) -> str:
    """Return ``text`` safe for use inside a double-quoted attribute value."""

    return escape_html(text)


def escape_url(url: Any) -> str:
    """Return a cleaned ``url`` for an ``href`` attribute, or ``""`` if unsafe."""

    value = _to_text(url).lstrip()
    if not value:
        return ""

    value = value.replace(" ", "%20")
    value = _URL_DISALLOWED.sub("", value)
    if not value:
        return ""

    if not value.lower().startswith("mailto:"):
        # Repeat until stable so that "%0%0ad" cannot reassemble a line break.
        while _URL_LINE_BREAKS.search(value):
            value = _URL_LINE_BREAKS.sub("", value)
    value = value.replace(";//", "://")

    match = _SCHEME.match(value)
    if match and not any(char in match.group(1) for char in "/?#"):
        if match.group(1).lower() not in ALLOWED_PROTOCOLS:
            return ""

    value = _BARE_AMPERSAND.sub("&amp;", value)
    return value.replace("&amp;", "&#038;").replace("'", "&#039;")


__all__ = ["ALLOWED_PROTOCOLS", "escape_attribute", "escape_html", "escape_url"]
