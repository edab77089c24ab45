"""Application configuration helpers."""

from __future__ import annotations

from .env import env_log_level
from .errors import ConfigurationError
from .logging import LOG_LEVEL_ENV, LoggingConfig, configure_logging, get_logging_config
from .transaction import (
    DEFAULT_FAILURE_LOG_LEVEL,
    FAILURE_LOG_LEVEL_ENV,
    TransactionConfig,
    get_transaction_config,
)

__all__ = [
    "DEFAULT_FAILURE_LOG_LEVEL",
    "FAILURE_LOG_LEVEL_ENV",
    "LOG_LEVEL_ENV",
    "ConfigurationError",
    "LoggingConfig",
    "TransactionConfig",
    "configure_logging",
    "env_log_level",
    "get_logging_config",
    "get_transaction_config",
]
