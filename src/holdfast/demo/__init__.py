# holdfast:header:start
#
#   project      : Holdfast
#   file         : __init__.py
#   file_relpath : src/holdfast/demo/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The Holdfast Authors
#
# holdfast:header:end

"""Demonstration of the four `ProtectedCollection` access modes.

- ``counter``: `Counter`, a tiny mutable element.
- ``client``: `Client`, a caller that combines its datum with every counter.
- ``runner``: `run_demo`, which drives the four loops and reports results.
"""

from __future__ import annotations

from holdfast.demo.client import Client
from holdfast.demo.counter import Counter
from holdfast.demo.runner import ScenarioResult, ScenarioStatus, run_demo

__all__: list[str] = [
    "Client",
    "Counter",
    "ScenarioResult",
    "ScenarioStatus",
    "run_demo",
]
