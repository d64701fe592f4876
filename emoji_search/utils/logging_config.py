"""Helpers for configuring consistent project logging output."""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional

_DEFAULT_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
_LEVEL_ENV = "EMOJI_SEARCH_LOG_LEVEL"
_CONFIGURED = False


def _resolve_level(level: str | int | None) -> int:
    if level is None:
        return logging.INFO
    if isinstance(level, int):
        return level
    try:
        return int(level)
    except (TypeError, ValueError):
        normalized = str(level).strip().upper()
        return getattr(logging, normalized, logging.INFO)


def configure_logging(level: Optional[str | int] = None, *, force: bool = False) -> None:
    """Initialise root logging handlers for the application.

    Launcher hosts read the script-filter payload from stdout, so log records
    always go to stderr. The level comes from ``level``, then the
    ``EMOJI_SEARCH_LOG_LEVEL`` environment variable, then ``INFO``.
    """

    global _CONFIGURED

    if _CONFIGURED and not force:
        return

    env_level = os.environ.get(_LEVEL_ENV)
    resolved_level = _resolve_level(level if level is not None else env_level)

    logging.basicConfig(
        level=resolved_level,
        format=_DEFAULT_FORMAT,
        stream=sys.stderr,
        force=force,
    )
    logging.getLogger("emoji_search").setLevel(resolved_level)
    _CONFIGURED = True


__all__ = ["configure_logging"]
