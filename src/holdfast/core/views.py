# holdfast:header:start
#
#   project      : Holdfast
#   file         : views.py
#   file_relpath : src/holdfast/core/views.py
#   license      : MIT
#   copyright    : (c) 2025 The Holdfast Authors
#
# holdfast:header:end

"""Read-only views and guarded traversals over working sequences.

This module defines the building blocks `ProtectedCollection` uses to hand out
its content without handing out its backing list:

- `structural_copy` duplicates a sequence container while keeping the very same
  element objects (no deep copy). Structural edits to the copy never reach the
  source; state changes on an element are visible through every holder.
- `ReadOnlyView` is a `collections.abc.Sequence`, not a `MutableSequence`: the
  capability to mutate is absent from its type. For callers that try anyway,
  every list-style mutator is present and raises `UnsupportedOperationError`.
- `GuardedIterator` is a single-pass iterator carrying a ``removable``
  capability flag fixed at construction. When the flag is off, ``remove()``
  fails deterministically.

The views are intentionally minimal and do not track the collection they came
from: they wrap a fresh working copy and are discarded by the caller.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import TYPE_CHECKING, Any, Generic, NoReturn, TypeVar, cast, overload

from holdfast.config.logging import get_logger
from holdfast.core.errors import IllegalIteratorStateError, UnsupportedOperationError

if TYPE_CHECKING:
    from holdfast.config.logging import HoldfastLogger

logger: HoldfastLogger = get_logger(__name__)

E = TypeVar("E")

__all__: list[str] = [
    "structural_copy",
    "ReadOnlyView",
    "GuardedIterator",
]


def structural_copy(items: Iterable[E]) -> list[E]:
    """Return a new list holding the same element objects as ``items``.

    Args:
        items (Iterable[E]): Source elements; consumed once if it is an iterator.

    Returns:
        list[E]: An independent list container. ``copy[i] is items[i]`` holds
        for every index.
    """
    return list(items)


class ReadOnlyView(Sequence[E], Generic[E]):
    """Sequence wrapper that rejects every structural mutation.

    Reads (indexing, slicing, ``len``, iteration, membership, ``count``,
    ``index``) are delegated to the wrapped list. Slicing returns another
    `ReadOnlyView` over a fresh structural copy of the selected range.

    Args:
        items (list[E]): Working list to expose. The view keeps a reference;
            callers should pass a list nobody else mutates (see
            `structural_copy`).
    """

    __slots__ = ("_items",)

    _items: list[E]

    def __init__(self, items: list[E]) -> None:
        self._items = items

    @overload
    def __getitem__(self, index: int) -> E: ...

    @overload
    def __getitem__(self, index: slice) -> ReadOnlyView[E]: ...

    def __getitem__(self, index: int | slice) -> E | ReadOnlyView[E]:
        if isinstance(index, slice):
            return ReadOnlyView(self._items[index])
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[E]:
        return iter(self._items)

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ReadOnlyView):
            return self._items == cast("ReadOnlyView[Any]", other)._items
        if isinstance(other, Sequence) and not isinstance(other, (str, bytes)):
            return self._items == list(cast("Sequence[Any]", other))
        return NotImplemented

    # Views compare by content like lists, so they are unhashable like lists.
    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"ReadOnlyView({self._items!r})"

    def __str__(self) -> str:
        return "[" + ", ".join(str(e) for e in self._items) + "]"

    # --- Rejected structural mutators ----------------------------------------

    def _reject(self, operation: str) -> NoReturn:
        logger.debug("Rejected '%s' on %s", operation, type(self).__name__)
        raise UnsupportedOperationError(operation, type(self).__name__)

    def __setitem__(self, index: Any, value: Any) -> NoReturn:
        self._reject("__setitem__")

    def __delitem__(self, index: Any) -> NoReturn:
        self._reject("__delitem__")

    def __iadd__(self, other: Any) -> NoReturn:
        self._reject("__iadd__")

    def __imul__(self, other: Any) -> NoReturn:
        self._reject("__imul__")

    def append(self, value: Any) -> NoReturn:
        """Reject: views cannot grow."""
        self._reject("append")

    def extend(self, values: Any) -> NoReturn:
        """Reject: views cannot grow."""
        self._reject("extend")

    def insert(self, index: Any, value: Any) -> NoReturn:
        """Reject: views cannot grow."""
        self._reject("insert")

    def remove(self, value: Any) -> NoReturn:
        """Reject: views cannot shrink."""
        self._reject("remove")

    def pop(self, index: Any = -1) -> NoReturn:
        """Reject: views cannot shrink."""
        self._reject("pop")

    def clear(self) -> NoReturn:
        """Reject: views cannot shrink."""
        self._reject("clear")

    def sort(self, *args: Any, **kwargs: Any) -> NoReturn:
        """Reject: views cannot be reordered."""
        self._reject("sort")

    def reverse(self) -> NoReturn:
        """Reject: views cannot be reordered."""
        self._reject("reverse")


class GuardedIterator(Iterator[E], Generic[E]):
    """Single-pass iterator with an explicit removal capability.

    Each instance walks its own working list exactly once; an exhausted
    instance keeps raising ``StopIteration``. ``remove()`` drops the element
    most recently returned by ``next()`` from the iterator's working list,
    and only when the iterator was built with ``removable=True``.

    Args:
        items (list[E]): Working list to traverse (owned by the iterator).
        removable (bool): Whether ``remove()`` is permitted. Defaults to False.
    """

    __slots__ = ("_items", "_cursor", "_last", "_removable")

    def __init__(self, items: list[E], *, removable: bool = False) -> None:
        self._items: list[E] = items
        self._cursor: int = 0
        self._last: int = -1
        self._removable: bool = removable

    @property
    def removable(self) -> bool:
        """The removal capability, fixed at construction."""
        return self._removable

    def __iter__(self) -> GuardedIterator[E]:
        return self

    def __next__(self) -> E:
        if self._cursor >= len(self._items):
            raise StopIteration
        self._last = self._cursor
        self._cursor += 1
        return self._items[self._last]

    def has_next(self) -> bool:
        """Return True if another ``next()`` call would yield an element."""
        return self._cursor < len(self._items)

    def remove(self) -> None:
        """Remove the element most recently returned by ``next()``.

        Raises:
            UnsupportedOperationError: If this iterator is not removable.
            IllegalIteratorStateError: If ``next()`` was not called since the
                last removal (or at all).
        """
        if not self._removable:
            logger.debug("Rejected 'remove' on non-removable %s", type(self).__name__)
            raise UnsupportedOperationError("remove", type(self).__name__)
        if self._last < 0:
            raise IllegalIteratorStateError("remove() requires a preceding next()")
        del self._items[self._last]
        self._cursor = self._last
        self._last = -1

    def __repr__(self) -> str:
        return (
            f"GuardedIterator(position={self._cursor}, size={len(self._items)}, "
            f"removable={self._removable})"
        )
