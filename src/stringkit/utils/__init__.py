"""Utility helpers shared across stringkit."""

from .logging import get_log_path, setup_logging

__all__ = ["get_log_path", "setup_logging"]
