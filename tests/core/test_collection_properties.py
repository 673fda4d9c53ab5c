# holdfast:header:start
#
#   project      : Holdfast
#   file         : test_collection_properties.py
#   file_relpath : tests/core/test_collection_properties.py
#   license      : MIT
#   copyright    : (c) 2025 The Holdfast Authors
#
# holdfast:header:end

"""Property-based tests for `ProtectedCollection`.

Random element lists are combined with random sequences of structural edits
applied to the exposed views. Whatever the edits, the container's content must
stay equal to its construction input.

Run the long version with `nox -s property_test`.
"""

from __future__ import annotations

from typing import Any

from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from holdfast import ProtectedCollection, UnsupportedOperationError
from holdfast.demo.counter import Counter
from tests.conftest import values_of

# Structural edits expressed as (name, argument) pairs so Hypothesis can shrink them.
EDITS = st.one_of(
    st.tuples(st.just("append"), st.integers()),
    st.tuples(st.just("clear"), st.none()),
    st.tuples(st.just("reverse"), st.none()),
    st.tuples(st.just("sort"), st.none()),
    st.tuples(st.just("pop"), st.none()),
    st.tuples(st.just("insert"), st.integers()),
)

PROPERTY_SETTINGS = settings(
    max_examples=200,
    deadline=None,
    suppress_health_check=[HealthCheck.too_slow],
)


def _apply(target: Any, edit: tuple[str, Any]) -> None:
    name, arg = edit
    if name == "append":
        target.append(arg)
    elif name == "insert":
        target.insert(0, arg)
    elif name == "pop":
        if len(target):
            target.pop()
    else:
        getattr(target, name)()


@PROPERTY_SETTINGS
@given(items=st.lists(st.integers()), edits=st.lists(EDITS, max_size=10))
def test_mutable_view_edits_never_reach_container(
    items: list[int],
    edits: list[tuple[str, Any]],
) -> None:
    """Edits on any number of mutable views leave the container unchanged."""
    holder = ProtectedCollection(items)

    for edit in edits:
        _apply(holder.get_mutable_view(), edit)

    assert holder.get_mutable_view() == items
    assert list(holder.iterate()) == items


@PROPERTY_SETTINGS
@given(items=st.lists(st.integers()), edits=st.lists(EDITS, min_size=1, max_size=10))
def test_immutable_view_edits_always_raise(
    items: list[int],
    edits: list[tuple[str, Any]],
) -> None:
    """Every structural edit on an immutable view is rejected."""
    holder = ProtectedCollection(items)
    view = holder.get_immutable_view()

    for edit in edits:
        try:
            _apply(view, edit)
        except UnsupportedOperationError:
            continue
        # ``pop`` on an empty view is skipped by `_apply` before reaching the view.
        assert edit[0] == "pop" and not items

    assert list(view) == items
    assert list(holder.get_immutable_view()) == items


@PROPERTY_SETTINGS
@given(items=st.lists(st.integers()), data=st.data())
def test_input_edits_after_construction_are_invisible(
    items: list[int],
    data: st.DataObject,
) -> None:
    """Structural edits to the construction input are not seen by the container."""
    source = list(items)
    holder = ProtectedCollection(source)

    for edit in data.draw(st.lists(EDITS, max_size=5)):
        _apply(source, edit)

    assert list(holder.get_immutable_view()) == items


@PROPERTY_SETTINGS
@given(values=st.lists(st.integers(min_value=-1000, max_value=1000)), delta=st.integers(-50, 50))
def test_for_each_element_state_is_durable(values: list[int], delta: int) -> None:
    """State changes made through ``for_each`` are visible via every access mode."""
    holder = ProtectedCollection([Counter(v) for v in values])

    holder.for_each(lambda c: c.add(delta))

    expected = [v + delta for v in values]
    assert values_of(holder.get_immutable_view()) == expected
    assert values_of(holder.get_mutable_view()) == expected
    assert values_of(holder.iterate()) == expected


@PROPERTY_SETTINGS
@given(items=st.lists(st.text(max_size=3)))
def test_views_idempotent(items: list[str]) -> None:
    """Repeated calls with no intervening mutation expose equal content."""
    holder = ProtectedCollection(items)

    assert holder.get_immutable_view() == holder.get_immutable_view()
    assert holder.get_mutable_view() == holder.get_mutable_view()
    assert list(holder.iterate()) == list(holder.iterate())
