"""Structured helpers for representing grapheme ranges and text spans."""

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Any, Iterator, Union

from .errors import OffsetOutOfBoundsError


def _coerce_offset(value: Any, label: str, shape: str) -> int:
    if isinstance(value, bool):
        raise TypeError(f"{shape} {label} offset must be an integer, not bool")
    try:
        number = operator.index(value)
    except TypeError as exc:
        raise TypeError(
            f"{shape} {label} offset must be an integer, not {type(value).__name__}"
        ) from exc
    if number < 0:
        raise OffsetOutOfBoundsError.negative(number, label=label, shape=shape)
    return number


@dataclass(slots=True, frozen=True)
class HalfOpen:
    """Graphemes at offsets ``[lower, upper)``."""

    lower: int
    upper: int

    def __post_init__(self) -> None:
        lower = _coerce_offset(self.lower, "lower", "HalfOpen")
        upper = _coerce_offset(self.upper, "upper", "HalfOpen")
        if lower > upper:
            raise OffsetOutOfBoundsError.inverted(lower, upper, shape="HalfOpen")
        object.__setattr__(self, "lower", lower)
        object.__setattr__(self, "upper", upper)

    def half_open_bounds(self) -> tuple[int, int | None]:
        return (self.lower, self.upper)


@dataclass(slots=True, frozen=True)
class Closed:
    """Graphemes at offsets ``[lower, upper]``; ``upper`` must itself be a grapheme."""

    lower: int
    upper: int

    def __post_init__(self) -> None:
        lower = _coerce_offset(self.lower, "lower", "Closed")
        upper = _coerce_offset(self.upper, "upper", "Closed")
        if lower > upper:
            raise OffsetOutOfBoundsError.inverted(lower, upper, shape="Closed")
        object.__setattr__(self, "lower", lower)
        object.__setattr__(self, "upper", upper)

    def half_open_bounds(self) -> tuple[int, int | None]:
        return (self.lower, self.upper + 1)


@dataclass(slots=True, frozen=True)
class UpTo:
    """Graphemes before ``upper``."""

    upper: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "upper", _coerce_offset(self.upper, "upper", "UpTo"))

    def half_open_bounds(self) -> tuple[int, int | None]:
        return (0, self.upper)


@dataclass(slots=True, frozen=True)
class Through:
    """Graphemes up to and including ``upper``."""

    upper: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "upper", _coerce_offset(self.upper, "upper", "Through"))

    def half_open_bounds(self) -> tuple[int, int | None]:
        return (0, self.upper + 1)


@dataclass(slots=True, frozen=True)
class From:
    """Graphemes from ``lower`` to the end of the text."""

    lower: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "lower", _coerce_offset(self.lower, "lower", "From"))

    def half_open_bounds(self) -> tuple[int, int | None]:
        return (self.lower, None)


RangeShape = Union[HalfOpen, Closed, UpTo, Through, From]
RANGE_SHAPES: tuple[type, ...] = (HalfOpen, Closed, UpTo, Through, From)


def is_range_shape(value: Any) -> bool:
    """Return ``True`` when ``value`` is one of the grapheme range shapes."""

    return isinstance(value, RANGE_SHAPES)


def shape_from_slice(value: slice) -> RangeShape:
    """Convert a step-less Python ``slice`` into the matching range shape."""

    if value.step not in (None, 1):
        raise ValueError(f"Grapheme slices do not support a step, got {value.step!r}")
    if value.start is None and value.stop is None:
        return From(0)
    if value.start is None:
        return UpTo(value.stop)
    if value.stop is None:
        return From(value.start)
    return HalfOpen(value.start, value.stop)


@dataclass(slots=True, frozen=True)
class TextRange:
    """Span of code-point offsets ``[start, end)`` inside a Python string."""

    start: int
    end: int

    def __post_init__(self) -> None:
        start = int(self.start)
        end = int(self.end)
        if start < 0 or end < 0:
            raise ValueError("TextRange offsets must be non-negative")
        if end < start:
            raise ValueError(f"TextRange end ({end}) precedes start ({start})")
        object.__setattr__(self, "start", start)
        object.__setattr__(self, "end", end)

    def __iter__(self) -> Iterator[int]:
        yield self.start
        yield self.end

    @property
    def length(self) -> int:
        """Return the width of the range."""

        return self.end - self.start

    @property
    def is_empty(self) -> bool:
        return self.start == self.end

    def to_tuple(self) -> tuple[int, int]:
        return (self.start, self.end)

    def to_dict(self) -> dict[str, int]:
        """Return the range as a JSON-friendly object."""

        return {"start": self.start, "end": self.end}


__all__ = [
    "Closed",
    "From",
    "HalfOpen",
    "RANGE_SHAPES",
    "RangeShape",
    "TextRange",
    "Through",
    "UpTo",
    "is_range_shape",
    "shape_from_slice",
]
