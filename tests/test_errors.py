"""Tests for the stringkit error hierarchy."""

from __future__ import annotations

from stringkit.core.errors import ErrorCode, OffsetOutOfBoundsError, StringKitError


def test_base_error_serializes_to_dict() -> None:
    error = StringKitError(error_code="custom", message="Something broke", details={"key": 1})

    assert error.to_dict() == {"error": "custom", "message": "Something broke", "details": {"key": 1}}
    assert str(error) == "[custom] Something broke"
    assert error.args == ("Something broke",)


def test_base_error_omits_empty_details() -> None:
    error = StringKitError(error_code="custom", message="No details")

    assert "details" not in error.to_dict()


def test_offset_error_defaults() -> None:
    error = OffsetOutOfBoundsError()

    assert error.error_code == ErrorCode.OFFSET_OUT_OF_BOUNDS
    assert error.details == {}
    assert isinstance(error, IndexError)
    assert isinstance(error, StringKitError)


def test_offset_error_builders_fill_details() -> None:
    inverted = OffsetOutOfBoundsError.inverted(4, 2, shape="Closed")
    negative = OffsetOutOfBoundsError.negative(-3, label="upper", shape="UpTo")
    beyond = OffsetOutOfBoundsError.beyond_end(1, 9, 5, shape="HalfOpen")

    assert inverted.error_code == ErrorCode.INVALID_RANGE
    assert inverted.details == {"lower": 4, "upper": 2, "shape": "Closed"}
    assert negative.error_code == ErrorCode.INVALID_OFFSET
    assert negative.upper == -3
    assert negative.details == {"upper": -3, "shape": "UpTo"}
    assert beyond.details == {"lower": 1, "upper": 9, "length": 5, "shape": "HalfOpen"}
    assert "5 grapheme" in beyond.message
