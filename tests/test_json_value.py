"""Tests for the tagged-union JSON decoder."""

from __future__ import annotations

import pytest

from stringkit.text.json_value import (
    JsonArray,
    JsonBool,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonString,
    decode_json,
    from_python,
    to_dictionary,
)


def test_decode_scalars() -> None:
    assert decode_json("null") == JsonNull()
    assert decode_json("true") == JsonBool(True)
    assert decode_json('"hi"') == JsonString("hi")
    assert decode_json("3") == JsonNumber(3)
    assert decode_json("3").is_integer
    assert not decode_json("2.5").is_integer


def test_decode_nested_document() -> None:
    value = decode_json('{"name": "Ana", "tags": ["a", 1, null], "nested": {"ok": false}}')

    assert isinstance(value, JsonObject)
    assert value.keys() == ["name", "tags", "nested"]
    assert value["name"] == JsonString("Ana")
    tags = value["tags"]
    assert isinstance(tags, JsonArray)
    assert len(tags) == 3
    assert list(tags) == [JsonString("a"), JsonNumber(1), JsonNull()]
    assert value["nested"]["ok"] == JsonBool(False)
    assert "tags" in value
    assert value.get("missing") is None


def test_object_lookup_raises_key_error() -> None:
    value = decode_json("{}")

    with pytest.raises(KeyError):
        value["missing"]


def test_duplicate_keys_keep_last_value() -> None:
    value = decode_json('{"a": 1, "b": 2, "a": 3}')

    assert value.to_python() == {"a": 3, "b": 2}
    assert len(value) == 2


def test_decode_returns_none_for_malformed_input() -> None:
    assert decode_json("{") is None
    assert decode_json("") is None
    assert decode_json("[1, 2,]") is None
    assert decode_json("NaN") is None
    assert decode_json('{"x": Infinity}') is None


def test_decode_accepts_utf8_bytes() -> None:
    assert decode_json(b'{"city": "S\xc3\xa3o Paulo"}') == JsonObject((("city", JsonString("São Paulo")),))
    assert decode_json(b"\xff") is None


def test_to_python_roundtrip_preserves_structure() -> None:
    source = {"a": [1, 2.5, {"b": None}], "c": "d"}

    assert from_python(source).to_python() == source


def test_to_dictionary_requires_object() -> None:
    assert to_dictionary('{"a": 1}') == {"a": 1}
    assert to_dictionary("[1, 2]") is None
    assert to_dictionary("not json") is None


def test_from_python_rejects_unknown_types() -> None:
    with pytest.raises(TypeError):
        from_python({1, 2})
