"""Settings dataclass and persistence helpers."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import asdict, dataclass, fields, replace
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Mapping

__all__ = [
    "Settings",
    "SettingsStore",
    "get_settings",
]

LOGGER = logging.getLogger(__name__)
_SETTINGS_DIR = Path.home() / ".stringkit"
_DEFAULT_SETTINGS_PATH = _SETTINGS_DIR / "settings.json"
_SETTINGS_PATH_ENV = "STRINGKIT_SETTINGS_PATH"
_SETTINGS_VERSION = 1
_ENV_OVERRIDES: Mapping[str, str] = {
    "STRINGKIT_CURRENCY_LOCALE": "currency_locale",
    "STRINGKIT_CURRENCY_CODE": "currency_code",
}
_BOOL_ENV_OVERRIDES: Mapping[str, str] = {
    "STRINGKIT_REQUIRE_CURRENCY_SYMBOL": "require_currency_symbol",
    "STRINGKIT_DEBUG_LOGGING": "debug_logging",
}
_TRUE_VALUES = {"1", "true", "yes", "on", "debug"}
_TEXT_FIELDS = frozenset({"currency_locale", "currency_code"})
_BOOL_FIELDS = frozenset({"require_currency_symbol", "debug_logging"})


@dataclass(slots=True)
class Settings:
    """User-configurable defaults for the locale-aware helpers."""

    currency_locale: str = "pt_BR"
    currency_code: str = "BRL"
    require_currency_symbol: bool = False
    debug_logging: bool = False


class SettingsStore:
    """Persistence adapter for :class:`Settings`."""

    def __init__(self, path: Path | None = None) -> None:
        env_path = os.environ.get(_SETTINGS_PATH_ENV)
        self._path = path or (Path(env_path).expanduser() if env_path else _DEFAULT_SETTINGS_PATH)

    @property
    def path(self) -> Path:
        """Return the resolved path backing this store."""

        return self._path

    def load(self, *, overrides: Mapping[str, Any] | None = None) -> Settings:
        """Load settings from disk, applying runtime/environment overrides when present."""

        payload = self._read_payload()
        settings = Settings()
        if payload:
            settings = Settings(**_filter_fields(payload))
            if payload.get("version") != _SETTINGS_VERSION:
                LOGGER.debug(
                    "Settings file %s has version %s; expected %s",
                    self._path,
                    payload.get("version"),
                    _SETTINGS_VERSION,
                )

        if overrides:
            settings = self._apply_overrides(settings, overrides, source="runtime")

        return self._apply_env_overrides(settings)

    def save(self, settings: Settings) -> Path:
        """Persist settings to disk with atomic file writes."""

        payload = asdict(settings)
        payload["version"] = _SETTINGS_VERSION
        body = json.dumps(payload, indent=2, sort_keys=True)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self._path.with_suffix(".tmp")
        tmp_path.write_text(body, encoding="utf-8")
        tmp_path.replace(self._path)
        LOGGER.debug("Settings saved to %s", self._path)
        return self._path

    def _read_payload(self) -> Dict[str, Any]:
        if not self._path.exists():
            return {}
        try:
            text = self._path.read_text(encoding="utf-8")
            payload = json.loads(text)
        except FileNotFoundError:
            return {}
        except json.JSONDecodeError as exc:
            LOGGER.warning("Settings file %s is not valid JSON: %s", self._path, exc)
            return {}
        if not isinstance(payload, dict):
            LOGGER.warning("Settings file %s does not contain a JSON object", self._path)
            return {}
        return payload

    def _apply_overrides(
        self,
        settings: Settings,
        overrides: Mapping[str, Any],
        *,
        source: str,
    ) -> Settings:
        allowed = {field.name for field in fields(Settings)}
        filtered: Dict[str, Any] = {}
        for key, value in overrides.items():
            if key not in allowed or value is None:
                continue
            filtered[key] = value
        if filtered:
            LOGGER.debug("Applying %s settings overrides: %s", source, sorted(filtered))
            settings = replace(settings, **filtered)
        return settings

    def _apply_env_overrides(self, settings: Settings) -> Settings:
        overrides: Dict[str, Any] = {}
        for env_name, field_name in _ENV_OVERRIDES.items():
            value = os.environ.get(env_name)
            if value is not None and value.strip():
                overrides[field_name] = value.strip()
        for env_name, field_name in _BOOL_ENV_OVERRIDES.items():
            value = os.environ.get(env_name)
            if value is not None:
                overrides[field_name] = _coerce_bool(value)
        if overrides:
            settings = self._apply_overrides(settings, overrides, source="environment")
        return settings


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings loaded from the default store.

    Call ``get_settings.cache_clear()`` after changing the environment to
    pick up new values.
    """

    return SettingsStore().load()


def _filter_fields(payload: Mapping[str, Any]) -> Dict[str, Any]:
    result: Dict[str, Any] = {}
    for key, value in payload.items():
        if key in _BOOL_FIELDS:
            flag = _coerce_bool(value)
            if flag is None:
                LOGGER.warning("Ignoring non-boolean settings value %s=%r", key, value)
                continue
            result[key] = flag
        elif key in _TEXT_FIELDS:
            if not isinstance(value, str) or not value.strip():
                LOGGER.warning("Ignoring invalid settings value %s=%r", key, value)
                continue
            result[key] = value.strip()
    return result


def _coerce_bool(value: Any) -> bool | None:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() in _TRUE_VALUES
    if isinstance(value, int):
        return value != 0
    return None
