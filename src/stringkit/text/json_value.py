"""JSON decoding into a tagged-union value type.

``decode_json`` never raises on bad input: malformed documents decode to
``None``. Decoded objects keep their key order; when a key repeats, the last
occurrence wins.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from json import JSONDecodeError
from typing import Any, Iterator, Union

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class JsonNull:
    def to_python(self) -> None:
        return None


@dataclass(slots=True, frozen=True)
class JsonBool:
    value: bool

    def to_python(self) -> bool:
        return self.value


@dataclass(slots=True, frozen=True)
class JsonNumber:
    value: int | float

    @property
    def is_integer(self) -> bool:
        return isinstance(self.value, int)

    def to_python(self) -> int | float:
        return self.value


@dataclass(slots=True, frozen=True)
class JsonString:
    value: str

    def to_python(self) -> str:
        return self.value


@dataclass(slots=True, frozen=True)
class JsonArray:
    items: tuple["JsonValue", ...] = ()

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator["JsonValue"]:
        return iter(self.items)

    def __getitem__(self, index: int) -> "JsonValue":
        return self.items[index]

    def to_python(self) -> list[Any]:
        return [item.to_python() for item in self.items]


@dataclass(slots=True, frozen=True)
class JsonObject:
    """Ordered JSON object; ``members`` holds ``(key, value)`` pairs with unique keys."""

    members: tuple[tuple[str, "JsonValue"], ...] = ()

    def __len__(self) -> int:
        return len(self.members)

    def __contains__(self, key: object) -> bool:
        return any(name == key for name, _ in self.members)

    def __getitem__(self, key: str) -> "JsonValue":
        for name, value in self.members:
            if name == key:
                return value
        raise KeyError(key)

    def get(self, key: str, default: "JsonValue | None" = None) -> "JsonValue | None":
        try:
            return self[key]
        except KeyError:
            return default

    def keys(self) -> list[str]:
        return [name for name, _ in self.members]

    def items(self) -> list[tuple[str, "JsonValue"]]:
        return list(self.members)

    def to_python(self) -> dict[str, Any]:
        return {name: value.to_python() for name, value in self.members}


JsonValue = Union[JsonNull, JsonBool, JsonNumber, JsonString, JsonArray, JsonObject]


def decode_json(text: str) -> JsonValue | None:
    """Decode ``text`` into a :data:`JsonValue`, or ``None`` when it is not valid JSON."""

    parsed = _loads(text)
    if parsed is _INVALID:
        return None
    return from_python(parsed)


def to_dictionary(text: str) -> dict[str, Any] | None:
    """Decode ``text`` into a key-ordered ``dict`` when it holds a JSON object."""

    parsed = _loads(text)
    if parsed is _INVALID:
        return None
    if not isinstance(parsed, dict):
        LOGGER.debug("JSON document is a %s, not an object", type(parsed).__name__)
        return None
    return parsed


def from_python(value: Any) -> JsonValue:
    """Wrap a value produced by :func:`json.loads` in the tagged-union types."""

    if value is None:
        return JsonNull()
    if isinstance(value, bool):
        return JsonBool(value)
    if isinstance(value, (int, float)):
        return JsonNumber(value)
    if isinstance(value, str):
        return JsonString(value)
    if isinstance(value, list):
        return JsonArray(tuple(from_python(item) for item in value))
    if isinstance(value, dict):
        return JsonObject(tuple((key, from_python(item)) for key, item in value.items()))
    raise TypeError(f"Unsupported JSON value type: {type(value).__name__}")


# ---------------------------------------------------------------------------
# Decoding helpers
# ---------------------------------------------------------------------------
_INVALID = object()


class NonFiniteJSONNumberError(ValueError):
    """Raised when a JSON document uses ``NaN`` or ``Infinity`` literals."""

    def __init__(self, literal: str) -> None:
        super().__init__(f"Non-finite number literal '{literal}' is not valid JSON.")
        self.literal = literal


def _reject_constant(literal: str) -> Any:
    raise NonFiniteJSONNumberError(literal)


def _loads(text: str) -> Any:
    if isinstance(text, (bytes, bytearray)):
        try:
            text = text.decode("utf-8")
        except UnicodeDecodeError as exc:
            LOGGER.debug("JSON payload is not valid UTF-8: %s", exc)
            return _INVALID
    if not isinstance(text, str):
        LOGGER.debug("Cannot decode JSON from %s", type(text).__name__)
        return _INVALID
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except NonFiniteJSONNumberError as exc:
        LOGGER.debug("Rejected JSON document: %s", exc)
    except JSONDecodeError as exc:
        LOGGER.debug("Malformed JSON (line %s, column %s): %s", exc.lineno, exc.colno, exc.msg)
    except RecursionError:
        LOGGER.debug("JSON document is nested too deeply")
    return _INVALID


__all__ = [
    "JsonArray",
    "JsonBool",
    "JsonNull",
    "JsonNumber",
    "JsonObject",
    "JsonString",
    "JsonValue",
    "decode_json",
    "from_python",
    "to_dictionary",
]
