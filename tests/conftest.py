# holdfast:header:start
#
#   project      : Holdfast
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 The Holdfast Authors
#
# holdfast:header:end

"""Pytest configuration for the Holdfast test suite.

This file sets up global fixtures and customizes the logging configuration for
test runs, ensuring consistent and verbose logging output during testing.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any, TypeVar, cast

import pytest

from holdfast.config import logging
from holdfast.demo.counter import Counter

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_holdfast_logging(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Ensure Holdfast's runtime log level is not forced via env during tests.

    CLI invocations reconfigure the root logger; restore the test-suite
    configuration afterwards so later tests log to the live capture stream.

    Args:
        monkeypatch (pytest.MonkeyPatch): Used to clear ``HOLDFAST_LOG_LEVEL``.
    """
    monkeypatch.delenv("HOLDFAST_LOG_LEVEL", raising=False)
    yield
    logging.setup_logging(level=logging.TRACE_LEVEL)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE for all tests.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def counters() -> list[Counter]:
    """Return three fresh counters valued 1, 2, 3."""
    return [Counter(1), Counter(2), Counter(3)]


def values_of(items: Any) -> list[int]:
    """Return the integer values of an iterable of counters."""
    return [c.value for c in items]
