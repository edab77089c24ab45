from __future__ import annotations

import logging

import pytest

from atomic_change.config import TransactionConfig
from atomic_change.record import Record


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("ATOMIC_CHANGE_LOG_LEVEL", raising=False)
    monkeypatch.delenv("ATOMIC_CHANGE_FAILURE_LOG_LEVEL", raising=False)


@pytest.fixture
def record() -> Record:
    return Record()


@pytest.fixture
def seeded_record() -> Record:
    record = Record(position="Intern")
    record.set_name("Grace")
    record.set_age(30)
    return record


@pytest.fixture
def warning_config() -> TransactionConfig:
    return TransactionConfig(failure_log_level=logging.WARNING)
