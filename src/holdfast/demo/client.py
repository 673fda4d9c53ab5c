# holdfast:header:start
#
#   project      : Holdfast
#   file         : client.py
#   file_relpath : src/holdfast/demo/client.py
#   license      : MIT
#   copyright    : (c) 2025 The Holdfast Authors
#
# holdfast:header:end

"""A caller that combines its own datum with every counter of a holder.

Each loop exercises one access mode of `ProtectedCollection` and then tries
something the mode is meant to prevent (or to render harmless).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from holdfast.config.logging import get_logger
from holdfast.demo.counter import Counter

if TYPE_CHECKING:
    from holdfast.config.logging import HoldfastLogger
    from holdfast.core.collection import ProtectedCollection
    from holdfast.core.views import GuardedIterator, ReadOnlyView

logger: HoldfastLogger = get_logger(__name__)

REMOVE_PREFIX: str = "5"


class Client:
    """Demo caller holding a datum and a `ProtectedCollection` of counters.

    Args:
        data (int): Value added to each counter by the loops.
        holder (ProtectedCollection[Counter]): The collection to work on.
    """

    def __init__(self, data: int, holder: ProtectedCollection[Counter]) -> None:
        self._data: int = data
        self._holder: ProtectedCollection[Counter] = holder

    @property
    def data(self) -> int:
        """The datum this client adds to each counter."""
        return self._data

    def simple_loop(self) -> None:
        """Add the datum through a mutable copy, then clear the copy.

        Clearing is harmless: the holder hands out a fresh copy every time.
        """
        values: list[Counter] = self._holder.get_mutable_view()
        for c in values:
            c.add(self._data)
        values.clear()
        logger.debug("Cleared a mutable view; holder still has %d counter(s)", len(self._holder))

    def immutable_loop(self) -> None:
        """Add the datum through a read-only view, then try to clear it.

        Raises:
            UnsupportedOperationError: Always, once the loop is done.
        """
        values: ReadOnlyView[Counter] = self._holder.get_immutable_view()
        for c in values:
            c.add(self._data)
        values.clear()

    def iterator_loop(self) -> None:
        """Add the datum via ``for`` and via an explicit iterator with removal.

        The explicit loop removes counters whose text starts with ``"5"``.

        Raises:
            UnsupportedOperationError: When the first such counter is reached.
        """
        for c in self._holder:
            c.add(self._data)

        it: GuardedIterator[Counter] = self._holder.iterate()
        while it.has_next():
            c = next(it)
            c.add(self._data)
            if str(c).startswith(REMOVE_PREFIX):
                it.remove()

    def lambda_loop(self) -> None:
        """Add the datum and then double every counter through callbacks only."""
        self._holder.for_each(lambda c: c.add(self._data))
        self._holder.for_each(Counter.double)

    def __str__(self) -> str:
        return str(self._holder)
