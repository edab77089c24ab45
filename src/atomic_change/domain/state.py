"""Working copies and in-place commits.

``working_copy`` produces a value copy that shares no mutable state with the
original. ``overwrite`` later writes that copy's state back into the
original object itself, so every reference the caller holds observes the
commit.
"""

from __future__ import annotations

import contextlib
import copy
from typing import Any

from pydantic import BaseModel

from .errors import UnsupportedTargetError

_PYDANTIC_STATE = (
    "__dict__",
    "__pydantic_fields_set__",
    "__pydantic_extra__",
    "__pydantic_private__",
)
_IGNORED_SLOTS = frozenset({"__dict__", "__weakref__"})


def ensure_supported(target: object) -> None:
    """Raise ``UnsupportedTargetError`` unless ``target`` can be overwritten in place."""

    if isinstance(target, BaseModel | dict | list | set | bytearray):
        return
    if hasattr(target, "__dict__") or _slot_names(type(target)):
        return
    raise UnsupportedTargetError(
        f"Cannot update {type(target).__name__} in place; wrap immutable values in an object"
    )


def working_copy[T](target: T) -> T:
    if isinstance(target, BaseModel):
        return target.model_copy(deep=True)
    return copy.deepcopy(target)


def overwrite[T](target: T, source: T) -> None:
    """Replace the state of ``target`` with the state of ``source``."""

    if isinstance(target, BaseModel):
        for name in _PYDANTIC_STATE:
            object.__setattr__(target, name, getattr(source, name, None))
        return
    if isinstance(target, dict):
        target.clear()
        target.update(source)  # pyright: ignore[reportUnknownMemberType]
        return
    if isinstance(target, list | bytearray):
        target[:] = source  # pyright: ignore[reportUnknownMemberType]
        return
    if isinstance(target, set):
        target.clear()
        target.update(source)  # pyright: ignore[reportUnknownMemberType]
        return
    _overwrite_attributes(target, source)


def _overwrite_attributes(target: Any, source: Any) -> None:
    slots = _slot_names(type(target))
    if not slots and not hasattr(target, "__dict__"):
        raise UnsupportedTargetError(f"Cannot update {type(target).__name__} in place")

    if hasattr(target, "__dict__"):
        # keep the dict object itself; some libraries hold on to it
        target.__dict__.clear()
        target.__dict__.update(source.__dict__)

    for name in slots:
        try:
            value = object.__getattribute__(source, name)
        except AttributeError:
            # unset on the copy: the original must not keep a stale value
            with contextlib.suppress(AttributeError):
                object.__delattr__(target, name)
            continue
        object.__setattr__(target, name, value)


def _slot_names(cls: type) -> tuple[str, ...]:
    names: list[str] = []
    for klass in cls.__mro__:
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for slot in slots:
            if slot in _IGNORED_SLOTS:
                continue
            name = slot
            # private slots are stored under their mangled name
            if slot.startswith("__") and not slot.endswith("__"):
                name = f"_{klass.__name__.lstrip('_')}{slot}"
            if name not in names:
                names.append(name)
    return tuple(names)
