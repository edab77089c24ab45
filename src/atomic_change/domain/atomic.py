"""Entry points: apply mutations to an object as one transaction."""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal, overload

from .batch import ChangeBatch
from .transaction import AtomicTransaction, TransactionOutcome

if TYPE_CHECKING:
    from atomic_change.config import TransactionConfig

    from .mutations import Mutation


@overload
def apply_atomically[T](
    target: T,
    batch: ChangeBatch[T],
    *,
    detailed: Literal[False] = False,
    config: TransactionConfig | None = None,
) -> bool: ...
@overload
def apply_atomically[T](
    target: T,
    batch: ChangeBatch[T],
    *,
    detailed: Literal[True],
    config: TransactionConfig | None = None,
) -> TransactionOutcome[T]: ...
def apply_atomically[T](
    target: T,
    batch: ChangeBatch[T],
    *,
    detailed: bool = False,
    config: TransactionConfig | None = None,
) -> bool | TransactionOutcome[T]:
    """Run ``batch`` against ``target`` in a fresh transaction."""

    transaction = AtomicTransaction(target, config=config)
    if detailed:
        return transaction.execute_detailed(batch)
    return transaction.execute(batch)


class AtomicChange[T]:
    """Callable bound to one target; each call is an independent transaction."""

    __slots__ = ("_config", "_target")

    def __init__(self, target: T, *, config: TransactionConfig | None = None) -> None:
        self._target = target
        self._config = config

    def __call__(self, *mutations: Mutation[T]) -> bool:
        return self.apply(ChangeBatch.of(*mutations))

    def apply(self, batch: ChangeBatch[T]) -> bool:
        return apply_atomically(self._target, batch, config=self._config)

    def apply_detailed(self, batch: ChangeBatch[T]) -> TransactionOutcome[T]:
        return apply_atomically(self._target, batch, detailed=True, config=self._config)


def atomic_change_to[T](target: T, *, config: TransactionConfig | None = None) -> AtomicChange[T]:
    """Bind ``target`` for atomic updates.

    ``atomic_change_to(person)(name.to("Ada"), age.to(22))`` returns ``True``
    when both mutations succeeded and were committed, ``False`` otherwise.
    """

    return AtomicChange(target, config=config)
