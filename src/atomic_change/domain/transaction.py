"""Copy-on-write transaction applying a change batch to one object."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Literal

from atomic_change.config import get_transaction_config

from .errors import TransactionStateError
from .state import ensure_supported, overwrite, working_copy

if TYPE_CHECKING:
    from types import TracebackType

    from atomic_change.config import TransactionConfig

    from .batch import ChangeBatch
    from .mutations import Mutation, MutationResult

log = logging.getLogger(__name__)


class TransactionState(StrEnum):
    PENDING = "pending"
    COMMITTED = "committed"
    ABORTED = "aborted"


@dataclass(frozen=True, slots=True)
class TransactionOutcome[T]:
    """Result of one transaction; truthy iff it committed.

    On abort, ``failed_index`` is the batch position of the first failing
    mutation and ``result`` holds its failure. Mutations after it never ran.
    """

    state: TransactionState
    applied: int = 0
    failed_index: int | None = None
    failed_mutation: Mutation[T] | None = None
    result: MutationResult | None = None

    def __bool__(self) -> bool:
        return self.state is TransactionState.COMMITTED

    @property
    def committed(self) -> bool:
        return bool(self)

    @property
    def reason(self) -> str | None:
        return None if self.result is None else self.result.reason


class AtomicTransaction[T]:
    """Apply mutations to a private copy of ``target`` and commit all or nothing.

    The target is read once, when the working copy is taken, and written
    once, on commit. A transaction is single-use: it ends COMMITTED or
    ABORTED and cannot be executed again.

    Besides ``execute``, the transaction is a context manager for ad-hoc
    edits: the working copy is yielded, a clean exit commits it, and an
    exception aborts and propagates.
    """

    def __init__(self, target: T, *, config: TransactionConfig | None = None) -> None:
        ensure_supported(target)
        self._original = target
        self._copy = working_copy(target)
        self._config = config or get_transaction_config()
        self.state = TransactionState.PENDING

    def execute(self, batch: ChangeBatch[T]) -> bool:
        """Apply ``batch``; return whether the target was updated."""

        return bool(self.execute_detailed(batch))

    def execute_detailed(self, batch: ChangeBatch[T]) -> TransactionOutcome[T]:
        """Apply ``batch`` and report where it stopped if it did not commit."""

        self._require_pending()
        applied = 0
        for index, mutation in enumerate(batch.entries()):
            try:
                result = mutation.apply(self._copy)
            except BaseException:
                # programming errors propagate; the target stays untouched
                self._abort()
                raise
            if not result:
                self._abort()
                log.log(
                    self._config.failure_log_level,
                    "Transaction on %s aborted at mutation %d: %s",
                    type(self._original).__name__,
                    index,
                    result.reason,
                )
                return TransactionOutcome(
                    state=self.state,
                    applied=applied,
                    failed_index=index,
                    failed_mutation=mutation,
                    result=result,
                )
            applied += 1

        self._commit()
        log.debug(
            "Transaction on %s committed %d mutation(s)", type(self._original).__name__, applied
        )
        return TransactionOutcome(state=self.state, applied=applied)

    def __enter__(self) -> T:
        self._require_pending()
        return self._copy

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> Literal[False]:
        if self.state is not TransactionState.PENDING:
            return False
        if exc_type is not None:
            self._abort()
            log.log(
                self._config.failure_log_level,
                "Transaction on %s aborted by %s",
                type(self._original).__name__,
                exc_type.__name__,
            )
        else:
            self._commit()
        return False  # don't swallow exceptions

    def _commit(self) -> None:
        overwrite(self._original, self._copy)
        self._release()
        self.state = TransactionState.COMMITTED

    def _abort(self) -> None:
        self._release()
        self.state = TransactionState.ABORTED

    def _release(self) -> None:
        del self._copy

    def _require_pending(self) -> None:
        if self.state is not TransactionState.PENDING:
            raise TransactionStateError(f"Transaction already {self.state}")
