# holdfast:header:start
#
#   project      : Holdfast
#   file         : __init__.py
#   file_relpath : src/holdfast/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The Holdfast Authors
#
# holdfast:header:end

"""Holdfast package.

Holdfast is a set of small teaching snippets about encapsulation. Its core is
`ProtectedCollection`, a container that hides its element sequence and hands
out copies, read-only views, guarded iterators or per-element callbacks
instead. A Click CLI runs the demonstration next to two standalone utilities
(planet weights and a class synopsis printer).
"""

from __future__ import annotations

from holdfast.core.collection import ProtectedCollection
from holdfast.core.errors import (
    HoldfastError,
    IllegalIteratorStateError,
    UnsupportedOperationError,
)
from holdfast.core.views import GuardedIterator, ReadOnlyView, structural_copy

__all__: list[str] = [
    "ProtectedCollection",
    "ReadOnlyView",
    "GuardedIterator",
    "structural_copy",
    "HoldfastError",
    "UnsupportedOperationError",
    "IllegalIteratorStateError",
]
