"""Ordered, append-only container of mutations."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Self

from .mutations import Mutation

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator


@dataclass(slots=True)
class ChangeBatch[T]:
    """Mutations to be applied together, in insertion order.

    The batch only collects; committing or discarding is the transaction's
    job, so the same batch can be inspected or replayed against other targets.
    """

    _mutations: list[Mutation[T]] = field(default_factory=list["Mutation[T]"], repr=False)

    @classmethod
    def of(cls, *mutations: Mutation[T]) -> Self:
        return cls().extend(mutations)

    def add(self, mutation: Mutation[T]) -> Self:
        if not isinstance(mutation, Mutation):
            raise TypeError(f"Expected a mutation, got {type(mutation).__name__}")
        self._mutations.append(mutation)
        return self

    def extend(self, mutations: Iterable[Mutation[T]]) -> Self:
        for mutation in mutations:
            self.add(mutation)
        return self

    def entries(self) -> tuple[Mutation[T], ...]:
        return tuple(self._mutations)

    def __len__(self) -> int:
        return len(self._mutations)

    def __iter__(self) -> Iterator[Mutation[T]]:
        return iter(self.entries())
