"""Environment variable loaders for configuration."""

from __future__ import annotations

import logging
import os

from .errors import ConfigurationError


def env_log_level(name: str, default: int) -> int:
    """Read a logging level name (``DEBUG``, ``warning``...) from ``name``.

    Blank or unset variables fall back to ``default``; unknown names raise
    ``ConfigurationError`` rather than silently picking a level.
    """

    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    level = logging.getLevelNamesMapping().get(raw.strip().upper())
    if level is None:
        raise ConfigurationError(f"Invalid log level for {name}: {raw!r}")
    return level
