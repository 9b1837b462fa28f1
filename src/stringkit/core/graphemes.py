"""Grapheme cluster segmentation and boundary tables.

Offsets throughout ``stringkit.core`` count user-perceived characters
(Unicode extended grapheme clusters), not code points. ``regex`` supplies the
segmentation through its ``\\X`` class; the helpers here turn that into
boundary tables mapping grapheme offsets to code-point indices.
"""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass, field
from typing import Any, Iterator

import regex

from .errors import OffsetOutOfBoundsError
from .ranges import is_range_shape, shape_from_slice

_GRAPHEME_PATTERN = regex.compile(r"\X")


def split_graphemes(text: str) -> list[str]:
    """Split ``text`` into extended grapheme clusters."""

    if not text:
        return []
    return _GRAPHEME_PATTERN.findall(text)


def grapheme_boundaries(text: str, limit: int | None = None) -> tuple[int, ...]:
    """Return the code-point index of every grapheme boundary in ``text``.

    The table always starts with ``0``; for a text of ``n`` clusters it holds
    ``n + 1`` entries ending at ``len(text)``. When ``limit`` is given the walk
    stops once ``limit`` clusters have been passed, so resolving a small offset
    in a long string never segments the whole string.
    """

    boundaries = [0]
    if limit is not None and limit <= 0:
        return (0,)
    for match in _GRAPHEME_PATTERN.finditer(text):
        boundaries.append(match.end())
        if limit is not None and len(boundaries) > limit:
            break
    return tuple(boundaries)


def grapheme_length(text: str) -> int:
    """Return the number of grapheme clusters in ``text``."""

    return len(grapheme_boundaries(text)) - 1


def resolve_bounds(
    boundaries: tuple[int, ...],
    lower: int,
    upper: int | None,
    *,
    shape: str,
) -> tuple[int, int]:
    """Validate half-open grapheme offsets against ``boundaries``.

    ``upper=None`` means "end of text" and requires a table built without a
    ``limit``. A table cut short by ``limit`` still reports the exact text
    length on failure: the walk only stops early once ``upper`` is reachable.
    """

    available = len(boundaries) - 1
    if upper is not None and lower > upper:
        raise OffsetOutOfBoundsError.inverted(lower, upper, shape=shape)
    end = available if upper is None else upper
    if lower > available or end > available:
        raise OffsetOutOfBoundsError.beyond_end(lower, end, available, shape=shape)
    return lower, end


@dataclass(slots=True, frozen=True, eq=False)
class GraphemeText:
    """Immutable text with a precomputed grapheme boundary table.

    ``len()`` and integer/slice/range-shape indexing all count grapheme
    clusters. The table is built once at construction and never mutated, so
    instances can be shared freely between threads.

    Equality and hashing follow canonical equivalence: texts that differ only
    in Unicode normalization (``"e\\u0301"`` and ``"\\u00e9"``) compare equal.
    """

    text: str
    boundaries: tuple[int, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not isinstance(self.text, str):
            raise TypeError(f"GraphemeText requires a str, not {type(self.text).__name__}")
        object.__setattr__(self, "boundaries", grapheme_boundaries(self.text))

    def __len__(self) -> int:
        return len(self.boundaries) - 1

    def __str__(self) -> str:
        return self.text

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GraphemeText):
            return NotImplemented
        return _canonical(self.text) == _canonical(other.text)

    def __hash__(self) -> int:
        return hash(_canonical(self.text))

    def __iter__(self) -> Iterator[str]:
        for start, end in zip(self.boundaries, self.boundaries[1:]):
            yield self.text[start:end]

    def __getitem__(self, key: Any) -> str:
        if isinstance(key, bool):
            raise TypeError("GraphemeText indices must be integers, slices or range shapes")
        if isinstance(key, int):
            return self._grapheme_at(key)
        if isinstance(key, slice):
            key = shape_from_slice(key)
        if not is_range_shape(key):
            raise TypeError(
                f"GraphemeText indices must be integers, slices or range shapes, not {type(key).__name__}"
            )
        lower, upper = key.half_open_bounds()
        lower, upper = resolve_bounds(self.boundaries, lower, upper, shape=type(key).__name__)
        return self.text[self.boundaries[lower] : self.boundaries[upper]]

    def index_of(self, offset: int) -> int:
        """Return the code-point index of grapheme boundary ``offset``."""

        if offset < 0:
            raise OffsetOutOfBoundsError.negative(offset, label="lower", shape="index")
        if offset > len(self):
            raise OffsetOutOfBoundsError.beyond_end(offset, offset, len(self), shape="index")
        return self.boundaries[offset]

    def _grapheme_at(self, offset: int) -> str:
        if offset < 0:
            raise OffsetOutOfBoundsError.negative(offset, label="lower", shape="index")
        if offset >= len(self):
            raise OffsetOutOfBoundsError.beyond_end(offset, offset + 1, len(self), shape="index")
        return self.text[self.boundaries[offset] : self.boundaries[offset + 1]]


def _canonical(text: str) -> str:
    return unicodedata.normalize("NFC", text)


__all__ = [
    "GraphemeText",
    "grapheme_boundaries",
    "grapheme_length",
    "resolve_bounds",
    "split_graphemes",
]
