"""Shared pytest fixtures."""

from __future__ import annotations

from pathlib import Path
from typing import Iterator

import pytest

from stringkit.settings import get_settings

_SETTINGS_ENV = (
    "STRINGKIT_CURRENCY_LOCALE",
    "STRINGKIT_CURRENCY_CODE",
    "STRINGKIT_REQUIRE_CURRENCY_SYMBOL",
    "STRINGKIT_DEBUG_LOGGING",
    "STRINGKIT_LOG_DIR",
)


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[Path]:
    """Point the settings store at a temp file and drop cached settings."""

    settings_path = tmp_path / "stringkit-settings.json"
    monkeypatch.setenv("STRINGKIT_SETTINGS_PATH", str(settings_path))
    for name in _SETTINGS_ENV:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield settings_path
    get_settings.cache_clear()


@pytest.fixture
def combining_text() -> str:
    """``e`` + combining acute accent (one grapheme) followed by ``b``."""

    return "e\u0301b"


@pytest.fixture
def emoji_text() -> str:
    """Family emoji (ZWJ sequence), a flag and plain ASCII."""

    return "a\U0001F469\u200d\U0001F469\u200d\U0001F467\U0001F1E7\U0001F1F7z"
