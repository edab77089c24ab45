"""Error types raised by the atomic change core.

Validation failures never surface as exceptions; they come back as failed
``MutationResult`` values. The errors below are reserved for programming
mistakes, which propagate to the caller unchanged.
"""

from __future__ import annotations


class AtomicChangeError(Exception):
    """Base class for all atomic-change errors."""


class InvalidSelectorError(AtomicChangeError, AttributeError):
    """Raised when a mutation names a field or operation the target lacks."""


class TransactionStateError(AtomicChangeError, RuntimeError):
    """Raised when a transaction is executed outside the PENDING state."""


class UnsupportedTargetError(AtomicChangeError, TypeError):
    """Raised when a target's state cannot be copied or written back in place."""
