# holdfast:header:start
#
#   project      : Holdfast
#   file         : __init__.py
#   file_relpath : src/holdfast/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The Holdfast Authors
#
# holdfast:header:end

"""Core, UI-agnostic primitives of Holdfast.

The ``holdfast.core`` package holds the encapsulation container and the small
building blocks it relies on. It is safe to import from anywhere (CLI, demo,
tests) without pulling in Click or rendering concerns.

Included modules:

- ``collection``
  `ProtectedCollection`, the owner of a hidden element sequence with four
  access modes (mutable copy, read-only view, guarded iterator, callback).

- ``views``
  `ReadOnlyView`, `GuardedIterator` and the `structural_copy` helper.

- ``errors``
  Library exceptions (`UnsupportedOperationError` and friends).

- ``enum_mixins``
  Typing-friendly Enum lookup helpers shared by the CLI and the utilities.
"""

from __future__ import annotations
