"""Tests for date reformatting."""

from __future__ import annotations

from stringkit.text.dates import transform_date_format


def test_transform_date_format_converts_between_patterns() -> None:
    assert transform_date_format("16/11/2018", "%d/%m/%Y", "%Y-%m-%d") == "2018-11-16"
    assert transform_date_format("2018-11-16 09:30", "%Y-%m-%d %H:%M", "%d/%m %Hh%M") == "16/11 09h30"


def test_transform_date_format_returns_none_on_mismatch() -> None:
    assert transform_date_format("2018-11-16", "%d/%m/%Y", "%Y") is None
    assert transform_date_format("31/02/2020", "%d/%m/%Y", "%Y") is None
    assert transform_date_format("", "%d/%m/%Y", "%Y") is None


def test_transform_date_format_rejects_trailing_text() -> None:
    assert transform_date_format("16/11/2018 extra", "%d/%m/%Y", "%Y") is None
