"""Range-based substring extraction over grapheme offsets.

Every function accepts either a plain ``str`` or a :class:`GraphemeText`.
Plain strings are segmented on demand, walking only as far as the upper
bound requires; ``GraphemeText`` reuses its precomputed boundary table.

Offsets that violate ``0 <= lower <= upper <= length`` raise
:class:`~stringkit.core.errors.OffsetOutOfBoundsError`. Ranges are never
clamped.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .graphemes import GraphemeText, grapheme_boundaries, resolve_bounds
from .ranges import Closed, From, HalfOpen, RangeShape, TextRange, Through, UpTo, is_range_shape

TextLike = Union[str, GraphemeText]


@dataclass(slots=True, frozen=True)
class GraphemeSpan:
    """A resolved range: grapheme offsets, code-point range and the slice itself."""

    start: int
    end: int
    code_points: TextRange
    text: str

    @property
    def length(self) -> int:
        return self.end - self.start


def resolve_span(text: TextLike, shape: RangeShape) -> GraphemeSpan:
    """Resolve ``shape`` against ``text`` and return the covered span."""

    if not is_range_shape(shape):
        raise TypeError(f"Expected a range shape, not {type(shape).__name__}")
    lower, upper = shape.half_open_bounds()
    if isinstance(text, GraphemeText):
        source = text.text
        boundaries = text.boundaries
    elif isinstance(text, str):
        source = text
        boundaries = grapheme_boundaries(text, limit=upper)
    else:
        raise TypeError(f"Expected str or GraphemeText, not {type(text).__name__}")
    start, end = resolve_bounds(boundaries, lower, upper, shape=type(shape).__name__)
    code_points = TextRange(boundaries[start], boundaries[end])
    return GraphemeSpan(
        start=start,
        end=end,
        code_points=code_points,
        text=source[code_points.start : code_points.end],
    )


def slice_range(text: TextLike, shape: RangeShape) -> str:
    """Return the graphemes of ``text`` covered by ``shape``."""

    return resolve_span(text, shape).text


def slice_half_open(text: TextLike, lower: int, upper: int) -> str:
    """Return graphemes ``[lower, upper)``; requires ``upper <= length``."""

    return slice_range(text, HalfOpen(lower, upper))


def slice_closed(text: TextLike, lower: int, upper: int) -> str:
    """Return graphemes ``[lower, upper]``; requires ``upper < length``."""

    return slice_range(text, Closed(lower, upper))


def slice_up_to(text: TextLike, upper: int) -> str:
    return slice_range(text, UpTo(upper))


def slice_through(text: TextLike, upper: int) -> str:
    return slice_range(text, Through(upper))


def slice_from(text: TextLike, lower: int) -> str:
    return slice_range(text, From(lower))


__all__ = [
    "GraphemeSpan",
    "TextLike",
    "resolve_span",
    "slice_closed",
    "slice_from",
    "slice_half_open",
    "slice_range",
    "slice_through",
    "slice_up_to",
]
