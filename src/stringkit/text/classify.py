"""Numeric and alphabetic character classification.

Digits are Unicode decimal digits (``Nd``); letters are Unicode letters and
combining marks (``L`` and ``M``), so accented text written with combining
accents still counts as letters.
"""

from __future__ import annotations

import regex

_DIGIT = regex.compile(r"\p{Nd}")
_NON_DIGITS = regex.compile(r"\P{Nd}+")
_LETTER = regex.compile(r"[\p{L}\p{M}]")
_NON_LETTERS = regex.compile(r"[^\p{L}\p{M}]+")
_NON_ALPHANUMERIC = regex.compile(r"[^\p{L}\p{M}\p{N}]")


def numbers_only(text: str) -> str:
    """Return only the decimal digits of ``text`` (possibly empty)."""

    return _NON_DIGITS.sub("", text)


def has_numbers(text: str) -> bool:
    return _DIGIT.search(text) is not None


def has_only_numbers(text: str) -> bool:
    """Return ``True`` when no character is outside the digit set.

    The empty string qualifies.
    """

    return _NON_DIGITS.search(text) is None


def letters_only(text: str) -> str:
    """Return only the letters of ``text`` (possibly empty)."""

    return _NON_LETTERS.sub("", text)


def has_letters(text: str) -> bool:
    return _LETTER.search(text) is not None


def has_only_letters(text: str) -> bool:
    """Return ``True`` when no character is outside the letter set.

    The empty string qualifies.
    """

    return _NON_LETTERS.search(text) is None


def is_alpha_numeric(text: str) -> bool:
    """Return ``True`` for text made only of letters and digits that has both.

    ``"abc123"`` qualifies; ``"abc"``, ``"123"`` and ``"abc 123"`` do not.
    """

    if _NON_ALPHANUMERIC.search(text) is not None:
        return False
    return has_letters(text) and has_numbers(text)


__all__ = [
    "has_letters",
    "has_numbers",
    "has_only_letters",
    "has_only_numbers",
    "is_alpha_numeric",
    "letters_only",
    "numbers_only",
]
