"""Standardized error types for grapheme offset handling.

Offsets that fall outside a text are programming errors: the indexer raises
instead of clamping, and callers are expected to bounds-check first.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar


# -----------------------------------------------------------------------------
# Error Code Constants
# -----------------------------------------------------------------------------

class ErrorCode:
    """Constants for machine-readable error codes."""

    OFFSET_OUT_OF_BOUNDS = "offset_out_of_bounds"
    INVALID_RANGE = "invalid_range"
    INVALID_OFFSET = "invalid_offset"


# -----------------------------------------------------------------------------
# Base Error Class
# -----------------------------------------------------------------------------

@dataclass
class StringKitError(Exception):
    """Base exception class for stringkit errors.

    Attributes:
        error_code: Machine-readable error identifier.
        message: Human-readable error description.
        details: Additional structured error information.
    """

    error_code: str
    message: str
    details: dict[str, Any] = field(default_factory=dict)

    severity: ClassVar[str] = "error"

    def __post_init__(self) -> None:
        Exception.__init__(self, self.message)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a plain dictionary."""
        result: dict[str, Any] = {
            "error": self.error_code,
            "message": self.message,
        }
        if self.details:
            result["details"] = dict(self.details)
        return result

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"


# -----------------------------------------------------------------------------
# Offset Errors
# -----------------------------------------------------------------------------

@dataclass
class OffsetOutOfBoundsError(StringKitError, IndexError):
    """Raised when a grapheme offset pair violates ``0 <= lower <= upper <= length``."""

    error_code: str = field(default=ErrorCode.OFFSET_OUT_OF_BOUNDS)
    message: str = field(default="Grapheme offset is out of bounds")
    details: dict[str, Any] = field(default_factory=dict)

    lower: int | None = field(default=None)
    upper: int | None = field(default=None)
    length: int | None = field(default=None)
    shape: str | None = field(default=None)

    def __post_init__(self) -> None:
        if self.lower is not None:
            self.details["lower"] = self.lower
        if self.upper is not None:
            self.details["upper"] = self.upper
        if self.length is not None:
            self.details["length"] = self.length
        if self.shape is not None:
            self.details["shape"] = self.shape
        super().__post_init__()

    @classmethod
    def inverted(cls, lower: int, upper: int, *, shape: str) -> OffsetOutOfBoundsError:
        """Build the error for a range whose lower bound exceeds its upper bound."""
        return cls(
            error_code=ErrorCode.INVALID_RANGE,
            message=f"{shape} range requires lower <= upper, got {lower} > {upper}",
            lower=lower,
            upper=upper,
            shape=shape,
        )

    @classmethod
    def negative(cls, value: int, *, label: str, shape: str) -> OffsetOutOfBoundsError:
        """Build the error for a negative offset."""
        return cls(
            error_code=ErrorCode.INVALID_OFFSET,
            message=f"{shape} {label} offset must be non-negative, got {value}",
            shape=shape,
            **{label: value},
        )

    @classmethod
    def beyond_end(
        cls,
        lower: int,
        upper: int,
        length: int,
        *,
        shape: str,
    ) -> OffsetOutOfBoundsError:
        """Build the error for a range reaching past the last grapheme boundary."""
        return cls(
            message=(
                f"{shape} range [{lower}, {upper}) exceeds text of {length} grapheme(s)"
            ),
            lower=lower,
            upper=upper,
            length=length,
            shape=shape,
        )


__all__ = ["ErrorCode", "StringKitError", "OffsetOutOfBoundsError"]
