"""Peripheral string helpers.

Modules here cover whitespace trimming, character classification, date
reformatting, JSON decoding, currency parsing and HTML to rich text.
Parse failures surface as ``None`` (or an empty value), never as exceptions.
"""

from .classify import (
    has_letters,
    has_numbers,
    has_only_letters,
    has_only_numbers,
    is_alpha_numeric,
    letters_only,
    numbers_only,
)
from .currency import brazilian_currency_number, parse_currency
from .dates import transform_date_format
from .html_rich_text import AttributedText, TextAttributes, TextRun, html_to_attributed_string
from .json_value import (
    JsonArray,
    JsonBool,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonString,
    JsonValue,
    decode_json,
    to_dictionary,
)
from .whitespace import removing_whitespaces, trimming_whitespaces_and_newlines

__all__ = [
    "AttributedText",
    "JsonArray",
    "JsonBool",
    "JsonNull",
    "JsonNumber",
    "JsonObject",
    "JsonString",
    "JsonValue",
    "TextAttributes",
    "TextRun",
    "brazilian_currency_number",
    "decode_json",
    "has_letters",
    "has_numbers",
    "has_only_letters",
    "has_only_numbers",
    "html_to_attributed_string",
    "is_alpha_numeric",
    "letters_only",
    "numbers_only",
    "parse_currency",
    "removing_whitespaces",
    "to_dictionary",
    "transform_date_format",
    "trimming_whitespaces_and_newlines",
]
