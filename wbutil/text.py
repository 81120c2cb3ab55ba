"""Small string helpers: whitespace trimming, markup escaping and column width."""

from __future__ import annotations

import unicodedata

WHITESPACE = " \n\r\t\f\v"

_MARKUP_REPLACEMENTS = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&apos;"),
)


def ltrim(s: str) -> str:
    """Strip leading whitespace."""
    return s.lstrip(WHITESPACE)


def rtrim(s: str) -> str:
    """Strip trailing whitespace."""
    return s.rstrip(WHITESPACE)


def trim(s: str) -> str:
    """Strip whitespace from both ends."""
    return rtrim(ltrim(s))


def sanitize_string(text: str) -> str:
    """Escape the characters ``&<>"'`` as markup entities."""
    # '&' must be replaced first so the other entities are not escaped twice.
    for char, entity in _MARKUP_REPLACEMENTS:
        text = text.replace(char, entity)
    return text


def column_width(text: str) -> int:
    """Return the number of terminal columns the text occupies.

    Wide and full-width characters take two columns, everything else one.
    """
    return sum(2 if unicodedata.east_asian_width(ch) in ("W", "F") else 1 for ch in text)