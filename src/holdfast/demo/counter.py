# holdfast:header:start
#
#   project      : Holdfast
#   file         : counter.py
#   file_relpath : src/holdfast/demo/counter.py
#   license      : MIT
#   copyright    : (c) 2025 The Holdfast Authors
#
# holdfast:header:end

"""A simple, mutable element used by the demo."""

from __future__ import annotations


class Counter:
    """An integer counter whose state is only reachable through its own methods.

    Args:
        value (int): Initial count.
    """

    __slots__ = ("_count",)

    def __init__(self, value: int) -> None:
        self._count: int = value

    @property
    def value(self) -> int:
        """Current count."""
        return self._count

    def add(self, data: int) -> None:
        """Increase the count by ``data``."""
        self._count += data

    def double(self) -> None:
        """Multiply the count by two."""
        self._count *= 2

    # Aliases
    do_something = add
    do_something_else = double

    def __str__(self) -> str:
        return str(self._count)

    def __repr__(self) -> str:
        return f"Counter({self._count})"
