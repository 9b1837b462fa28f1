"""Locale-aware currency parsing backed by Babel."""

from __future__ import annotations

import logging
from decimal import Decimal

from babel.core import Locale, UnknownLocaleError
from babel.numbers import NumberFormatError, get_currency_symbol, parse_decimal

from ..settings import get_settings

LOGGER = logging.getLogger(__name__)

_MINUS_SIGNS = ("-", "−")
_CURRENCY_PLACEHOLDER = "¤"


def parse_currency(
    text: str,
    *,
    locale: str | None = None,
    currency: str | None = None,
    require_symbol: bool | None = None,
) -> Decimal | None:
    """Parse a localized currency amount such as ``"R$ 1.234,56"`` or ``"1.234,56 €"``.

    The currency symbol for ``currency`` is stripped from the side of the
    amount where ``locale``'s standard currency pattern places it, then the
    number is parsed with the locale's grouping and decimal separators. One
    minus sign is accepted, either leading the whole amount or between the
    symbol and the digits. Unset arguments fall back to
    :func:`stringkit.settings.get_settings`. Returns ``None`` when ``text`` is
    not an amount in that locale.
    """

    if locale is None or currency is None or require_symbol is None:
        settings = get_settings()
        locale = locale or settings.currency_locale
        currency = currency or settings.currency_code
        if require_symbol is None:
            require_symbol = settings.require_currency_symbol

    raw = (text or "").strip()
    if not raw:
        return None

    try:
        symbol = get_currency_symbol(currency, locale=locale)
        symbol_trails = _symbol_follows_amount(locale)
    except (UnknownLocaleError, ValueError) as exc:
        LOGGER.warning("Unknown locale %r for currency parsing: %s", locale, exc)
        return None

    negative, raw = _strip_minus(raw)
    if symbol_trails and raw.endswith(symbol):
        raw = raw[: -len(symbol)].rstrip()
    elif not symbol_trails and raw.startswith(symbol):
        raw = raw[len(symbol) :].lstrip()
    elif require_symbol:
        LOGGER.debug("Amount %r is missing the %s symbol %r", text, currency, symbol)
        return None

    inner_negative, raw = _strip_minus(raw)
    if inner_negative and negative:
        LOGGER.debug("Amount %r carries more than one minus sign", text)
        return None
    negative = negative or inner_negative

    if not raw:
        return None
    try:
        value = parse_decimal(raw, locale=locale, strict=True)
    except NumberFormatError as exc:
        LOGGER.debug("Could not parse %r as a %s amount: %s", text, locale, exc)
        return None
    return -value if negative else value


def brazilian_currency_number(text: str) -> Decimal | None:
    """Parse a Brazilian real amount, e.g. ``"R$ 1.234,56"`` -> ``Decimal("1234.56")``."""

    return parse_currency(text, locale="pt_BR", currency="BRL")


def _symbol_follows_amount(locale: str) -> bool:
    pattern = Locale.parse(locale).currency_formats.get("standard")
    if pattern is None:
        return False
    return _CURRENCY_PLACEHOLDER in pattern.suffix[0]


def _strip_minus(raw: str) -> tuple[bool, str]:
    if raw.startswith(_MINUS_SIGNS):
        return True, raw[1:].lstrip()
    return False, raw


__all__ = ["brazilian_currency_number", "parse_currency"]
