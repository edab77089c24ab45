"""Selector helpers binding a field or operation once, then producing mutations.

Declare the selectors next to a type and reuse them for every batch::

    position = FieldRef[Record, str]("position")
    name = CheckedMethod[Record, str](Record.set_name)
    age = GuardedMethod[Record, int](Record.set_age)

    atomic_change_to(person)(name.to("Ada"), age.to(22), position.to("Lead"))
"""

from __future__ import annotations

from dataclasses import dataclass

from .mutations import CheckedCall, FieldAssignment, GuardedCall, Operation


@dataclass(frozen=True, slots=True)
class FieldRef[T, V]:
    name: str

    def to(self, value: V) -> FieldAssignment[T]:
        return FieldAssignment(self.name, value)


@dataclass(frozen=True, slots=True)
class CheckedMethod[T, A]:
    operation: Operation

    def to(self, argument: A) -> CheckedCall[T]:
        return CheckedCall(self.operation, argument)


@dataclass(frozen=True, slots=True)
class GuardedMethod[T, A]:
    operation: Operation
    catch: tuple[type[Exception], ...] = (Exception,)

    def to(self, argument: A) -> GuardedCall[T]:
        return GuardedCall(self.operation, argument, self.catch)
