from __future__ import annotations

from importlib import metadata

from atomic_change.domain import (
    AtomicChange,
    AtomicTransaction,
    ChangeBatch,
    CheckedCall,
    CheckedMethod,
    FieldAssignment,
    FieldRef,
    GuardedCall,
    GuardedMethod,
    Mutation,
    MutationResult,
    TransactionOutcome,
    TransactionState,
    apply_atomically,
    assign,
    atomic_change_to,
    call_checked,
    call_guarded,
)

try:
    __version__ = metadata.version("atomic-change")
except metadata.PackageNotFoundError:
    __version__ = "0.0.0+local"

__all__ = [
    "AtomicChange",
    "AtomicTransaction",
    "ChangeBatch",
    "CheckedCall",
    "CheckedMethod",
    "FieldAssignment",
    "FieldRef",
    "GuardedCall",
    "GuardedMethod",
    "Mutation",
    "MutationResult",
    "TransactionOutcome",
    "TransactionState",
    "__version__",
    "apply_atomically",
    "assign",
    "atomic_change_to",
    "call_checked",
    "call_guarded",
]
