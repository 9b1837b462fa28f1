"""stringkit - string helpers with grapheme-safe range indexing."""

from .core import (
    Closed,
    From,
    GraphemeText,
    HalfOpen,
    OffsetOutOfBoundsError,
    Through,
    UpTo,
    slice_closed,
    slice_from,
    slice_half_open,
    slice_range,
    slice_through,
    slice_up_to,
)

__version__ = "0.1.0"

__all__ = [
    "Closed",
    "From",
    "GraphemeText",
    "HalfOpen",
    "OffsetOutOfBoundsError",
    "Through",
    "UpTo",
    "__version__",
    "slice_closed",
    "slice_from",
    "slice_half_open",
    "slice_range",
    "slice_through",
    "slice_up_to",
]
