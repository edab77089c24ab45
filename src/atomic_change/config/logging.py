"""Shared logging helpers for atomic-change."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .env import env_log_level

LOG_LEVEL_ENV = "ATOMIC_CHANGE_LOG_LEVEL"


@dataclass(frozen=True, slots=True)
class LoggingConfig:
    level: int = logging.INFO


def get_logging_config() -> LoggingConfig:
    return LoggingConfig(level=env_log_level(LOG_LEVEL_ENV, logging.INFO))


def configure_logging(*, level: int | None = None, force: bool = False) -> None:
    """Initialise the root logger once with sensible defaults.

    Parameters mirror ``logging.basicConfig`` with a simplified contract: the
    level defaults to ``ATOMIC_CHANGE_LOG_LEVEL`` (INFO when unset) and the
    format is terse enough for CLI output. Pass ``force=True`` to reconfigure
    during tests or specialised entry points.
    """

    if level is None:
        level = get_logging_config().level
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )


__all__ = ["LOG_LEVEL_ENV", "LoggingConfig", "configure_logging", "get_logging_config"]
