"""Grapheme-safe range indexing.

This package turns grapheme offsets into substrings without ever splitting a
user-perceived character.
"""

from .errors import ErrorCode, OffsetOutOfBoundsError, StringKitError
from .graphemes import GraphemeText, grapheme_boundaries, grapheme_length, split_graphemes
from .ranges import Closed, From, HalfOpen, RangeShape, TextRange, Through, UpTo
from .slicing import (
    GraphemeSpan,
    resolve_span,
    slice_closed,
    slice_from,
    slice_half_open,
    slice_range,
    slice_through,
    slice_up_to,
)

__all__ = [
    "Closed",
    "ErrorCode",
    "From",
    "GraphemeSpan",
    "GraphemeText",
    "HalfOpen",
    "OffsetOutOfBoundsError",
    "RangeShape",
    "StringKitError",
    "TextRange",
    "Through",
    "UpTo",
    "grapheme_boundaries",
    "grapheme_length",
    "resolve_span",
    "slice_closed",
    "slice_from",
    "slice_half_open",
    "slice_range",
    "slice_through",
    "slice_up_to",
    "split_graphemes",
]
