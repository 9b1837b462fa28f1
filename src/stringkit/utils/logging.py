"""Opt-in log file for stringkit diagnostics.

Library modules only call ``logging.getLogger(__name__)`` and stay silent
until an application asks for output. :func:`setup_logging` attaches a
rotating file handler (and optionally a console handler) to the ``stringkit``
package logger, so parse failures logged at DEBUG by the text helpers can be
inspected without touching the host application's root logger.
"""

from __future__ import annotations

import logging
import logging.handlers
import os
from pathlib import Path

from ..settings import get_settings

__all__ = ["setup_logging", "get_log_path"]

PACKAGE_LOGGER = "stringkit"
LOG_FILE_NAME = "stringkit.log"
_DEFAULT_LOG_DIR = Path.home() / ".stringkit" / "logs"
_LOG_DIR_ENV = "STRINGKIT_LOG_DIR"
_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_LOG_PATH: Path | None = None


class _StringKitFileHandler(logging.handlers.RotatingFileHandler):
    """Marker subclass so repeated setup calls can find their own handlers."""


class _StringKitConsoleHandler(logging.StreamHandler):
    """Marker subclass for the optional console handler."""


def setup_logging(
    level: int | None = None,
    *,
    log_dir: Path | str | None = None,
    console: bool = False,
    max_bytes: int = 1_000_000,
    backup_count: int = 3,
) -> Path:
    """Route ``stringkit`` log records to ``<log_dir>/stringkit.log``.

    ``level`` defaults to DEBUG when ``Settings.debug_logging`` is set and
    WARNING otherwise. Calling again replaces the handlers installed by the
    previous call. Returns the log file path.
    """

    global _LOG_PATH
    if level is None:
        level = logging.DEBUG if get_settings().debug_logging else logging.WARNING

    target_dir = Path(log_dir or os.environ.get(_LOG_DIR_ENV) or _DEFAULT_LOG_DIR).expanduser()
    target_dir.mkdir(parents=True, exist_ok=True)
    log_path = target_dir / LOG_FILE_NAME

    logger = logging.getLogger(PACKAGE_LOGGER)
    _remove_installed_handlers(logger)

    formatter = logging.Formatter(fmt=_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    file_handler = _StringKitFileHandler(
        log_path, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
    )
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)
    if console:
        console_handler = _StringKitConsoleHandler()
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)
    logger.setLevel(level)

    _LOG_PATH = log_path
    return log_path


def get_log_path() -> Path | None:
    """Return the log file configured by the last :func:`setup_logging` call."""

    return _LOG_PATH


def _remove_installed_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        if isinstance(handler, (_StringKitFileHandler, _StringKitConsoleHandler)):
            logger.removeHandler(handler)
            handler.close()
