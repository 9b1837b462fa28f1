"""Whitespace removal and trimming."""

from __future__ import annotations

import regex

_HORIZONTAL_WHITESPACE = regex.compile(r"[\p{Zs}\t]+")
_EDGE_WHITESPACE_AND_NEWLINES = regex.compile(
    r"^[\p{Z}\t\n\x0b\x0c\r\x85]+|[\p{Z}\t\n\x0b\x0c\r\x85]+$"
)


def removing_whitespaces(text: str) -> str:
    """Remove every space/tab character, including those between words.

    Line breaks are not whitespace here and survive.
    """

    return _HORIZONTAL_WHITESPACE.sub("", text)


def trimming_whitespaces_and_newlines(text: str) -> str:
    """Strip leading and trailing whitespace and line breaks."""

    return _EDGE_WHITESPACE_AND_NEWLINES.sub("", text)


__all__ = ["removing_whitespaces", "trimming_whitespaces_and_newlines"]
