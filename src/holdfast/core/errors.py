# holdfast:header:start
#
#   project      : Holdfast
#   file         : errors.py
#   file_relpath : src/holdfast/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 The Holdfast Authors
#
# holdfast:header:end

"""Library exceptions for Holdfast.

These errors are raised by the core containers and views. They are plain Python
exceptions (no Click dependency) so they can be caught by library callers; the
CLI layer maps them onto its own `click.ClickException` hierarchy.

Hierarchy:
    - `HoldfastError`: base class for all library errors.
    - `UnsupportedOperationError`: a structural mutation was attempted on a
      read-only view or on a traversal that does not allow removal. Also a
      `TypeError`, matching what Python raises for item assignment on a tuple.
    - `IllegalIteratorStateError`: ``remove()`` was called on a removable
      iterator before ``next()`` or twice for the same element.
"""

from __future__ import annotations


class HoldfastError(Exception):
    """Base class for all Holdfast library errors."""


class UnsupportedOperationError(HoldfastError, TypeError):
    """A structural mutation was attempted on a read-only view or traversal.

    Args:
        operation (str): Name of the rejected mutator (e.g. ``"clear"``).
        target (str): Type name of the object that rejected the call.

    Attributes:
        operation (str): Name of the rejected mutator.
        target (str): Type name of the object that rejected the call.
    """

    operation: str
    target: str

    def __init__(self, operation: str, target: str) -> None:
        self.operation = operation
        self.target = target
        super().__init__(f"{target} does not support '{operation}'")


class IllegalIteratorStateError(HoldfastError, RuntimeError):
    """``remove()`` was called without a preceding, unconsumed ``next()``."""
