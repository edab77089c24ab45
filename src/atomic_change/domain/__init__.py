"""Atomic change core: mutations, batches and the copy-on-write transaction."""

from __future__ import annotations

from .atomic import AtomicChange, apply_atomically, atomic_change_to
from .batch import ChangeBatch
from .errors import (
    AtomicChangeError,
    InvalidSelectorError,
    TransactionStateError,
    UnsupportedTargetError,
)
from .mutations import (
    CheckedCall,
    FieldAssignment,
    GuardedCall,
    Mutation,
    MutationResult,
    Operation,
    assign,
    call_checked,
    call_guarded,
)
from .selectors import CheckedMethod, FieldRef, GuardedMethod
from .transaction import AtomicTransaction, TransactionOutcome, TransactionState

__all__ = [
    "AtomicChange",
    "AtomicChangeError",
    "AtomicTransaction",
    "ChangeBatch",
    "CheckedCall",
    "CheckedMethod",
    "FieldAssignment",
    "FieldRef",
    "GuardedCall",
    "GuardedMethod",
    "InvalidSelectorError",
    "Mutation",
    "MutationResult",
    "Operation",
    "TransactionOutcome",
    "TransactionState",
    "TransactionStateError",
    "UnsupportedTargetError",
    "apply_atomically",
    "assign",
    "atomic_change_to",
    "call_checked",
    "call_guarded",
]
