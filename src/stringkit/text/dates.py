"""Date string reformatting."""

from __future__ import annotations

import logging
from datetime import datetime

LOGGER = logging.getLogger(__name__)


def transform_date_format(text: str, receiving_format: str, new_format: str) -> str | None:
    """Reformat a date string from ``receiving_format`` to ``new_format``.

    Both formats use ``strftime`` directives, e.g.
    ``transform_date_format("16/11/2018", "%d/%m/%Y", "%Y-%m-%d")`` returns
    ``"2018-11-16"``. Returns ``None`` when ``text`` does not match
    ``receiving_format``.
    """

    try:
        parsed = datetime.strptime(text, receiving_format)
    except (TypeError, ValueError) as exc:
        LOGGER.debug("Could not parse %r with format %r: %s", text, receiving_format, exc)
        return None
    return parsed.strftime(new_format)


__all__ = ["transform_date_format"]
