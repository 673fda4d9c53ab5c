# holdfast:header:start
#
#   project      : Holdfast
#   file         : test_collection.py
#   file_relpath : tests/core/test_collection.py
#   license      : MIT
#   copyright    : (c) 2025 The Holdfast Authors
#
# holdfast:header:end

"""Unit tests for `ProtectedCollection` and its four access modes."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from holdfast import ProtectedCollection, UnsupportedOperationError
from holdfast.core.views import GuardedIterator, ReadOnlyView
from holdfast.demo.counter import Counter
from tests.conftest import values_of


def test_construction_preserves_content_and_order() -> None:
    """Immediately after construction the content equals the input."""
    holder = ProtectedCollection([3, 1, 2])

    assert list(holder.get_immutable_view()) == [3, 1, 2]
    assert len(holder) == 3


def test_construction_accepts_any_iterable() -> None:
    """Generators are consumed once into the container's own list."""
    holder = ProtectedCollection(n * n for n in range(4))

    assert list(holder.get_immutable_view()) == [0, 1, 4, 9]


def test_construction_severs_structural_aliasing_with_input(counters: list[Counter]) -> None:
    """Later structural changes to the caller's list are not seen by the container."""
    holder = ProtectedCollection(counters)

    counters.append(Counter(99))
    counters.pop(0)

    assert values_of(holder.get_immutable_view()) == [1, 2, 3]


def test_construction_shares_element_handles(counters: list[Counter]) -> None:
    """The container keeps the very same element objects (no deep copy)."""
    holder = ProtectedCollection(counters)

    view = holder.get_immutable_view()
    assert all(a is b for a, b in zip(view, counters))

    counters[0].add(100)
    assert values_of(holder.get_immutable_view()) == [101, 2, 3]


def test_mutable_view_clear_has_no_durable_effect() -> None:
    """Clearing a mutable view leaves the container untouched."""
    holder = ProtectedCollection([1, 2, 3])

    view = holder.get_mutable_view()
    view.clear()

    assert view == []
    assert list(holder.get_immutable_view()) == [1, 2, 3]


@pytest.mark.parametrize(
    "mutate",
    [
        lambda v: v.append(4),
        lambda v: v.insert(0, 0),
        lambda v: v.remove(2),
        lambda v: v.pop(),
        lambda v: v.reverse(),
        lambda v: v.sort(reverse=True),
        lambda v: v.__setitem__(0, 42),
        lambda v: v.__delitem__(slice(None)),
    ],
)
def test_mutable_view_structural_mutation_is_isolated(mutate: Callable[[Any], object]) -> None:
    """Any structural change to a mutable view stays local to that view."""
    holder = ProtectedCollection([1, 2, 3])

    mutate(holder.get_mutable_view())

    assert list(holder.get_immutable_view()) == [1, 2, 3]
    assert list(holder.iterate()) == [1, 2, 3]


def test_mutable_view_is_fresh_each_call() -> None:
    """Each call returns a new list, never a previously handed out one."""
    holder = ProtectedCollection([1, 2, 3])

    first = holder.get_mutable_view()
    first.clear()
    second = holder.get_mutable_view()

    assert first is not second
    assert second == [1, 2, 3]


def test_mutable_view_element_state_changes_are_visible(counters: list[Counter]) -> None:
    """Element-state mutation through a mutable view is not blocked."""
    holder = ProtectedCollection(counters)

    for c in holder.get_mutable_view():
        c.double()

    assert values_of(holder.get_immutable_view()) == [2, 4, 6]


def test_immutable_view_clear_raises_and_leaves_content() -> None:
    """Structural mutation of an immutable view raises UnsupportedOperationError."""
    holder = ProtectedCollection([1, 2, 3])
    view = holder.get_immutable_view()

    with pytest.raises(UnsupportedOperationError) as exc_info:
        view.clear()  # type: ignore[attr-defined]

    assert exc_info.value.operation == "clear"
    assert list(view) == [1, 2, 3]
    assert list(holder.get_immutable_view()) == [1, 2, 3]


def test_immutable_view_is_read_only_view(counters: list[Counter]) -> None:
    """The immutable view type is a ReadOnlyView; elements stay mutable."""
    holder = ProtectedCollection(counters)
    view = holder.get_immutable_view()

    assert isinstance(view, ReadOnlyView)
    view[1].add(10)
    assert values_of(holder.get_immutable_view()) == [1, 12, 3]


def test_immutable_view_idempotent() -> None:
    """Two immutable views in a row have identical content."""
    holder = ProtectedCollection(["a", "b"])

    assert holder.get_immutable_view() == holder.get_immutable_view()


def test_iterate_remove_at_first_element_raises() -> None:
    """Removing through the traversal fails and leaves the container intact."""
    holder = ProtectedCollection([1, 2, 3])
    it = holder.iterate()

    assert next(it) == 1
    with pytest.raises(UnsupportedOperationError):
        it.remove()

    assert list(holder.get_immutable_view()) == [1, 2, 3]


def test_iterate_returns_fresh_non_removable_iterator() -> None:
    """Every call yields an independent, non-removable single-pass traversal."""
    holder = ProtectedCollection([1, 2, 3])

    first = holder.iterate()
    second = holder.iterate()

    assert isinstance(first, GuardedIterator)
    assert first is not second
    assert first.removable is False
    assert list(first) == [1, 2, 3]
    assert list(first) == []  # exhausted instances stay exhausted
    assert list(second) == [1, 2, 3]


def test_for_loop_uses_guarded_iterator() -> None:
    """``iter(holder)`` is the same access mode as ``iterate()``."""
    holder = ProtectedCollection([1, 2])

    it = iter(holder)

    assert isinstance(it, GuardedIterator)
    assert [x for x in holder] == [1, 2]


def test_for_each_visits_in_order() -> None:
    """``for_each`` calls the action once per element, in sequence order."""
    holder = ProtectedCollection(["x", "y", "z"])
    seen: list[str] = []

    holder.for_each(seen.append)

    assert seen == ["x", "y", "z"]


def test_for_each_state_mutation_is_visible() -> None:
    """for_each(e -> e.add(10)) on [1, 2] shows [11, 12] afterwards."""
    holder = ProtectedCollection([Counter(1), Counter(2)])

    holder.for_each(lambda c: c.add(10))

    assert values_of(holder.get_immutable_view()) == [11, 12]


def test_for_each_propagates_action_errors() -> None:
    """An exception from the action stops the traversal and propagates."""
    holder = ProtectedCollection([1, 2, 3])
    seen: list[int] = []

    def action(n: int) -> None:
        if n == 2:
            raise KeyError(n)
        seen.append(n)

    with pytest.raises(KeyError):
        holder.for_each(action)

    assert seen == [1]
    assert list(holder.get_immutable_view()) == [1, 2, 3]


def test_empty_collection() -> None:
    """An empty container exposes empty views and never calls the action."""
    holder: ProtectedCollection[int] = ProtectedCollection([])
    calls: list[int] = []

    holder.for_each(calls.append)

    assert holder.get_mutable_view() == []
    assert len(holder.get_immutable_view()) == 0
    assert not holder.iterate().has_next()
    assert calls == []


def test_str_and_repr_render_current_content(counters: list[Counter]) -> None:
    """``str()`` shows element text; ``repr()`` names the container."""
    holder = ProtectedCollection(counters)

    holder.for_each(Counter.double)

    assert str(holder) == "[2, 4, 6]"
    assert repr(holder).startswith("ProtectedCollection([")


def test_logs_construction(caplog: pytest.LogCaptureFixture) -> None:
    """Construction is logged at DEBUG through the holdfast logger."""
    caplog.set_level("DEBUG", logger="holdfast")

    ProtectedCollection([1, 2])

    assert "ProtectedCollection created with 2 element(s)" in caplog.text
