"""Tests for locale-aware currency parsing."""

from __future__ import annotations

from decimal import Decimal

import pytest

from stringkit.settings import get_settings
from stringkit.text.currency import brazilian_currency_number, parse_currency


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("R$ 1.234,56", Decimal("1234.56")),
        ("R$ 10,00", Decimal("10.00")),
        ("R$ 0,99", Decimal("0.99")),
        ("1.234,56", Decimal("1234.56")),
        ("-R$ 5,50", Decimal("-5.50")),
        ("R$ -5,50", Decimal("-5.50")),
    ],
)
def test_brazilian_currency_number_parses_amounts(text: str, expected: Decimal) -> None:
    assert brazilian_currency_number(text) == expected


@pytest.mark.parametrize(
    "text", ["", "   ", "abc", "R$", "R$ abc", "US$ 10,00", "-R$ -5,50", "--5,50", "10,00 R$"]
)
def test_brazilian_currency_number_rejects_non_amounts(text: str) -> None:
    assert brazilian_currency_number(text) is None


def test_require_symbol_rejects_bare_numbers() -> None:
    assert parse_currency("1.234,56", locale="pt_BR", currency="BRL", require_symbol=True) is None
    assert parse_currency("R$ 1.234,56", locale="pt_BR", currency="BRL", require_symbol=True) == Decimal(
        "1234.56"
    )


def test_parse_currency_other_locale() -> None:
    assert parse_currency("$1,234.56", locale="en_US", currency="USD") == Decimal("1234.56")


def test_parse_currency_trailing_symbol_locale() -> None:
    assert parse_currency("1.234,56 €", locale="de_DE", currency="EUR") == Decimal("1234.56")
    assert parse_currency("-1.234,56 €", locale="de_DE", currency="EUR") == Decimal("-1234.56")
    assert parse_currency("1.234,56", locale="de_DE", currency="EUR") == Decimal("1234.56")
    assert parse_currency("1.234,56", locale="de_DE", currency="EUR", require_symbol=True) is None
    assert parse_currency("€ 1.234,56", locale="de_DE", currency="EUR", require_symbol=True) is None


def test_unknown_locale_returns_none() -> None:
    assert parse_currency("10", locale="xx_YY", currency="BRL") is None


def test_defaults_follow_environment_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("STRINGKIT_CURRENCY_LOCALE", "en_US")
    monkeypatch.setenv("STRINGKIT_CURRENCY_CODE", "USD")
    monkeypatch.setenv("STRINGKIT_REQUIRE_CURRENCY_SYMBOL", "true")
    get_settings.cache_clear()

    assert parse_currency("$12.50") == Decimal("12.50")
    assert parse_currency("12.50") is None
