"""Tests for settings persistence and overrides."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from stringkit.settings import Settings, SettingsStore, get_settings


def test_settings_store_defaults_when_missing(tmp_path: Path) -> None:
    store = SettingsStore(tmp_path / "missing.json")

    settings = store.load()

    assert settings == Settings()
    assert settings.currency_locale == "pt_BR"
    assert settings.currency_code == "BRL"


def test_settings_store_roundtrip(tmp_path: Path) -> None:
    path = tmp_path / "settings.json"
    store = SettingsStore(path)
    settings = Settings(currency_locale="en_US", currency_code="USD", require_currency_symbol=True)

    saved = store.save(settings)
    loaded = store.load()

    assert saved == path
    assert loaded == settings
    assert json.loads(path.read_text(encoding="utf-8"))["version"] == 1
    assert not path.with_suffix(".tmp").exists()


def test_settings_store_ignores_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "settings.json"
    path.write_text("{not json", encoding="utf-8")

    assert SettingsStore(path).load() == Settings()


def test_settings_store_ignores_non_object_payload(tmp_path: Path) -> None:
    path = tmp_path / "settings.json"
    path.write_text("[1, 2, 3]", encoding="utf-8")

    assert SettingsStore(path).load() == Settings()


def test_settings_store_drops_unknown_fields(tmp_path: Path) -> None:
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"currency_code": "EUR", "legacy": True, "version": 1}), encoding="utf-8")

    settings = SettingsStore(path).load()

    assert settings.currency_code == "EUR"
    assert settings.currency_locale == "pt_BR"


def test_runtime_overrides_skip_unknown_and_none(tmp_path: Path) -> None:
    store = SettingsStore(tmp_path / "settings.json")
    store.save(Settings(currency_locale="en_US"))

    settings = store.load(overrides={"currency_code": "USD", "currency_locale": None, "unknown": "x"})

    assert settings.currency_code == "USD"
    assert settings.currency_locale == "en_US"


def test_settings_file_values_are_coerced(tmp_path: Path) -> None:
    path = tmp_path / "settings.json"
    payload = {
        "require_currency_symbol": "false",
        "debug_logging": 1,
        "currency_locale": " de_DE ",
        "currency_code": 978,
    }
    path.write_text(json.dumps(payload), encoding="utf-8")

    settings = SettingsStore(path).load()

    assert settings.require_currency_symbol is False
    assert settings.debug_logging is True
    assert settings.currency_locale == "de_DE"
    assert settings.currency_code == "BRL"


def test_settings_file_drops_unusable_booleans(tmp_path: Path) -> None:
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"require_currency_symbol": ["yes"]}), encoding="utf-8")

    assert SettingsStore(path).load().require_currency_symbol is False


def test_environment_overrides_win(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    store = SettingsStore(tmp_path / "settings.json")
    store.save(Settings(currency_locale="en_US"))
    monkeypatch.setenv("STRINGKIT_CURRENCY_LOCALE", " de_DE ")
    monkeypatch.setenv("STRINGKIT_DEBUG_LOGGING", "yes")
    monkeypatch.setenv("STRINGKIT_REQUIRE_CURRENCY_SYMBOL", "0")

    settings = store.load(overrides={"currency_locale": "fr_FR"})

    assert settings.currency_locale == "de_DE"
    assert settings.debug_logging is True
    assert settings.require_currency_symbol is False


def test_store_path_follows_environment(isolated_settings: Path) -> None:
    assert SettingsStore().path == isolated_settings


def test_get_settings_is_cached(isolated_settings: Path) -> None:
    SettingsStore().save(Settings(currency_code="JPY"))
    get_settings.cache_clear()

    first = get_settings()

    assert first.currency_code == "JPY"
    assert get_settings() is first
