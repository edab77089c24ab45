"""Transaction engine defaults."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .env import env_log_level

FAILURE_LOG_LEVEL_ENV = "ATOMIC_CHANGE_FAILURE_LOG_LEVEL"
DEFAULT_FAILURE_LOG_LEVEL = logging.DEBUG


@dataclass(frozen=True, slots=True)
class TransactionConfig:
    # level used when a transaction aborts; commits always log at DEBUG
    failure_log_level: int = DEFAULT_FAILURE_LOG_LEVEL


def get_transaction_config() -> TransactionConfig:
    return TransactionConfig(
        failure_log_level=env_log_level(FAILURE_LOG_LEVEL_ENV, DEFAULT_FAILURE_LOG_LEVEL)
    )
