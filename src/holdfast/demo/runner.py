# holdfast:header:start
#
#   project      : Holdfast
#   file         : runner.py
#   file_relpath : src/holdfast/demo/runner.py
#   license      : MIT
#   copyright    : (c) 2025 The Holdfast Authors
#
# holdfast:header:end

"""Drive the four `Client` loops against one shared holder.

All loops run in order against the same `ProtectedCollection`, so counter
state accumulates from one scenario to the next while the holder's sequence
(length and order) never changes. A loop that trips a library error is
recorded as `ScenarioStatus.REJECTED` and the run continues with the next one.

This module performs no output; the CLI renders the returned `DemoReport`.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from yachalk import chalk

from holdfast.config.logging import get_logger
from holdfast.core.collection import ProtectedCollection
from holdfast.core.errors import HoldfastError
from holdfast.demo.client import Client
from holdfast.demo.counter import Counter
from holdfast.rendering.colored_enum import ColoredStrEnum
from holdfast.utils.introspection import format_callable_pretty

if TYPE_CHECKING:
    from holdfast.config.logging import HoldfastLogger
    from holdfast.config.model import DemoConfig

logger: HoldfastLogger = get_logger(__name__)


class ScenarioStatus(ColoredStrEnum):
    """Outcome of one demo scenario."""

    OK = ("ok", chalk.green)
    REJECTED = ("rejected", chalk.red_bright)


@dataclass(frozen=True, slots=True)
class ScenarioResult:
    """Result of running one `Client` loop.

    Attributes:
        label (str): Human-readable scenario label.
        status (ScenarioStatus): Whether the loop completed or was rejected.
        content (str): Holder content after the loop (``str(holder)``).
        error (HoldfastError | None): The rejection, if any.
    """

    label: str
    status: ScenarioStatus
    content: str
    error: HoldfastError | None = None


@dataclass(slots=True)
class DemoReport:
    """Everything a demo run observed.

    Attributes:
        original (str): Holder content before any loop ran.
        results (list[ScenarioResult]): One entry per scenario, in run order.
    """

    original: str
    results: list[ScenarioResult] = field(default_factory=lambda: [])


Scenario = tuple[str, Callable[[Client], None]]

SCENARIOS: tuple[Scenario, ...] = (
    ("Getter, cleared", Client.simple_loop),
    ("Immutable, clear attempted", Client.immutable_loop),
    ("Iterator, remove attempted", Client.iterator_loop),
    ("Lambda, not exposed", Client.lambda_loop),
)


def make_counters(count: int) -> list[Counter]:
    """Return counters valued ``1..count``."""
    return [Counter(k) for k in range(1, count + 1)]


def run_scenario(label: str, client: Client, loop: Callable[[Client], None]) -> ScenarioResult:
    """Run one loop and capture its outcome.

    Library errors are expected here (that is what the loops demonstrate) and
    are captured; anything else propagates.
    """
    try:
        loop(client)
    except HoldfastError as exc:
        logger.debug("Scenario '%s' rejected: %s", label, exc, exc_info=True)
        return ScenarioResult(label, ScenarioStatus.REJECTED, str(client), exc)
    logger.debug("Scenario '%s' completed %s", label, format_callable_pretty(loop))
    return ScenarioResult(label, ScenarioStatus.OK, str(client))


def run_demo(
    config: DemoConfig,
    *,
    scenarios: tuple[Scenario, ...] = SCENARIOS,
) -> DemoReport:
    """Run every scenario against a fresh holder built from ``config``.

    Args:
        config (DemoConfig): Number of counters and the client's datum.
        scenarios (tuple[Scenario, ...]): Scenarios to run, in order.

    Returns:
        DemoReport: The original content and one result per scenario.
    """
    originals: list[Counter] = make_counters(config.counter_count)
    holder: ProtectedCollection[Counter] = ProtectedCollection(originals)
    client = Client(config.client_data, holder)
    logger.info(
        "Running %d scenario(s) with %d counter(s), data=%d",
        len(scenarios),
        config.counter_count,
        config.client_data,
    )

    report = DemoReport(original=str(client))
    for label, loop in scenarios:
        report.results.append(run_scenario(label, client, loop))
    return report
