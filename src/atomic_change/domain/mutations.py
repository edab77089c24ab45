"""Mutation variants: deferred, single-object changes.

A mutation binds an operation (a field name, a method name or a callable)
to the argument it will receive, and performs nothing until ``apply`` is
called on a target. ``apply`` never lets a validation failure escape as an
exception: failures come back as a falsy ``MutationResult``. Only selector
mistakes (``InvalidSelectorError``) propagate, since those are bugs in the
caller rather than rejected input.
"""

from __future__ import annotations

from collections.abc import Callable, MutableMapping
from dataclasses import dataclass
from functools import partial
from typing import Any, Protocol, Self, runtime_checkable

from .errors import InvalidSelectorError

type Operation = str | Callable[[Any, Any], object]
"""Method name resolved on the target, or a callable invoked as ``op(target, arg)``."""


@dataclass(frozen=True, slots=True)
class MutationResult:
    """Outcome of applying one mutation; truthy iff the mutation succeeded."""

    ok: bool
    reason: str | None = None
    error: Exception | None = None

    def __bool__(self) -> bool:
        return self.ok

    @classmethod
    def success(cls) -> Self:
        return cls(ok=True)

    @classmethod
    def failure(cls, reason: str, *, error: Exception | None = None) -> Self:
        return cls(ok=False, reason=reason, error=error)


_SUCCESS = MutationResult.success()


@runtime_checkable
class Mutation[T](Protocol):
    """Contract implemented by every mutation variant."""

    def apply(self, target: T) -> MutationResult: ...


@dataclass(frozen=True, slots=True)
class FieldAssignment[T]:
    """Write ``value`` into ``field``.

    Mapping targets receive an item assignment (new keys allowed). Any other
    target must already expose the attribute as writable. Plain attributes
    always accept the value; targets that validate on assignment (pydantic
    ``validate_assignment``, frozen dataclasses) may reject it, which is a
    failed result.
    """

    field: str
    value: Any

    def apply(self, target: T) -> MutationResult:
        if isinstance(target, MutableMapping):
            target[self.field] = self.value
            return _SUCCESS
        _require_writable(target, self.field)
        try:
            setattr(target, self.field, self.value)
        except Exception as exc:  # noqa: BLE001
            return MutationResult.failure(
                f"{self.field} rejected {self.value!r}: {type(exc).__name__}: {exc}", error=exc
            )
        return _SUCCESS


def _require_writable(target: object, field: str) -> None:
    descriptor = getattr(type(target), field, None)
    if isinstance(descriptor, property):
        if descriptor.fset is None:
            raise InvalidSelectorError(
                f"{type(target).__name__}.{field} is read-only and cannot be assigned"
            )
        return
    if not hasattr(target, field):
        raise InvalidSelectorError(f"{type(target).__name__} has no field {field!r} to assign")


@dataclass(frozen=True, slots=True)
class CheckedCall[T]:
    """Invoke an operation that reports success through its return value."""

    operation: Operation
    argument: Any

    def apply(self, target: T) -> MutationResult:
        invoke = bind_operation(target, self.operation)
        name = operation_name(self.operation)
        try:
            accepted = invoke(self.argument)
        except Exception as exc:  # noqa: BLE001
            return MutationResult.failure(f"{name} raised {type(exc).__name__}: {exc}", error=exc)
        if not accepted:
            return MutationResult.failure(f"{name} rejected {self.argument!r}")
        return _SUCCESS


@dataclass(frozen=True, slots=True)
class GuardedCall[T]:
    """Invoke an operation that signals invalid input by raising.

    Exceptions matching ``catch`` become a failed result carrying the
    exception. Anything else keeps propagating.
    """

    operation: Operation
    argument: Any
    catch: tuple[type[Exception], ...] = (Exception,)

    def apply(self, target: T) -> MutationResult:
        invoke = bind_operation(target, self.operation)
        try:
            invoke(self.argument)
        except self.catch as exc:
            name = operation_name(self.operation)
            return MutationResult.failure(f"{name} raised {type(exc).__name__}: {exc}", error=exc)
        return _SUCCESS


def bind_operation(target: object, operation: Operation) -> Callable[[Any], object]:
    """Resolve ``operation`` against ``target`` into a one-argument callable."""

    if isinstance(operation, str):
        bound = getattr(target, operation, None)
        if bound is None or not callable(bound):
            raise InvalidSelectorError(
                f"{type(target).__name__} has no operation {operation!r}"
            )
        return bound
    if not callable(operation):
        raise InvalidSelectorError(f"Operation {operation!r} is not callable")
    return partial(operation, target)


def operation_name(operation: Operation) -> str:
    if isinstance(operation, str):
        return operation
    return getattr(operation, "__qualname__", None) or repr(operation)


def assign[T](field: str, value: Any) -> FieldAssignment[T]:
    """Describe assigning ``value`` to ``field``."""

    return FieldAssignment(field, value)


def call_checked[T](operation: Operation, argument: Any) -> CheckedCall[T]:
    """Describe calling ``operation(argument)`` and trusting its returned flag."""

    return CheckedCall(operation, argument)


def call_guarded[T](
    operation: Operation,
    argument: Any,
    *,
    catch: tuple[type[Exception], ...] = (Exception,),
) -> GuardedCall[T]:
    """Describe calling ``operation(argument)`` where invalid input raises."""

    return GuardedCall(operation, argument, catch)
