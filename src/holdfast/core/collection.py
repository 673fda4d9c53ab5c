# holdfast:header:start
#
#   project      : Holdfast
#   file         : collection.py
#   file_relpath : src/holdfast/core/collection.py
#   license      : MIT
#   copyright    : (c) 2025 The Holdfast Authors
#
# holdfast:header:end

"""A container that hides its element sequence behind several access modes.

`ProtectedCollection` owns a canonical list of elements (the *original*
sequence) and never hands that list out. Every exposing call derives a fresh
*working* sequence from the current original and exposes it in one of four
ways:

| Method                 | Structural mutation by caller       | Element-state mutation |
|------------------------|-------------------------------------|------------------------|
| `get_mutable_view`     | allowed, no effect on the container | allowed                |
| `get_immutable_view`   | raises `UnsupportedOperationError`  | allowed                |
| `iterate` / ``iter()`` | ``remove()`` raises                 | allowed                |
| `for_each`             | not reachable                       | allowed                |

Working sequences share element objects with the original (structural copy,
not deep copy), so an element mutated through any view is mutated for good.
There is no cached working copy: a view damaged by one caller can never leak
into the next call.

Example:
    ```python
    from holdfast.core.collection import ProtectedCollection

    holder = ProtectedCollection([1, 2, 3])
    holder.get_mutable_view().clear()
    assert list(holder.get_immutable_view()) == [1, 2, 3]
    ```
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import TYPE_CHECKING, Generic, TypeVar

from holdfast.config.logging import get_logger
from holdfast.core.views import GuardedIterator, ReadOnlyView, structural_copy

if TYPE_CHECKING:
    from holdfast.config.logging import HoldfastLogger

logger: HoldfastLogger = get_logger(__name__)

E = TypeVar("E")


class ProtectedCollection(Iterable[E], Generic[E]):
    """Owner of an element sequence that controls how callers may reach it.

    Args:
        items (Iterable[E]): Initial elements. The container keeps its own
            list holding the same element objects, so later structural changes
            to ``items`` (or to anything the container returns) are not seen
            by the container.

    Notes:
        The container assumes single-threaded access. Share it across threads
        only behind the caller's own lock.
    """

    __slots__ = ("_original",)

    _original: list[E]

    def __init__(self, items: Iterable[E]) -> None:
        self._original = structural_copy(items)
        logger.debug("ProtectedCollection created with %d element(s)", len(self._original))

    def _working_copy(self) -> list[E]:
        """Derive a fresh working sequence from the current original sequence."""
        working: list[E] = structural_copy(self._original)
        logger.trace("Derived working copy of %d element(s)", len(working))
        return working

    def get_mutable_view(self) -> list[E]:
        """Return a fresh, freely mutable list of the current elements.

        Structural changes to the returned list (append, remove, clear, sort,
        ...) are allowed but have no durable effect: the next call starts from
        the unchanged original sequence again.

        Returns:
            list[E]: A new list holding the container's element objects.
        """
        return self._working_copy()

    def get_immutable_view(self) -> ReadOnlyView[E]:
        """Return a fresh read-only view of the current elements.

        Returns:
            ReadOnlyView[E]: A view whose structural mutators raise
            `UnsupportedOperationError`. Elements themselves stay mutable.
        """
        return ReadOnlyView(self._working_copy())

    def iterate(self) -> GuardedIterator[E]:
        """Return a new single-pass iterator over the current elements.

        Each call returns an independent traversal. The iterator is built
        without the removal capability: ``remove()`` raises
        `UnsupportedOperationError`.

        Returns:
            GuardedIterator[E]: A fresh, non-removable iterator.
        """
        return GuardedIterator(self._working_copy(), removable=False)

    def __iter__(self) -> Iterator[E]:
        return self.iterate()

    def for_each(self, action: Callable[[E], object]) -> None:
        """Apply ``action`` to every element, in order, on the caller's thread.

        The caller only ever sees individual elements, never a sequence.
        Return values of ``action`` are ignored. Exceptions raised by
        ``action`` propagate and stop the traversal.

        Args:
            action (Callable[[E], object]): Callback invoked once per element.
        """
        for element in self._working_copy():
            action(element)

    def __len__(self) -> int:
        return len(self._original)

    def __str__(self) -> str:
        return "[" + ", ".join(str(e) for e in self._original) + "]"

    def __repr__(self) -> str:
        return f"ProtectedCollection({self._original!r})"
