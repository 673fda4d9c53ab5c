# holdfast:header:start
#
#   project      : Holdfast
#   file         : __init__.py
#   file_relpath : src/holdfast/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The Holdfast Authors
#
# holdfast:header:end

"""Holdfast CLI package.

This package groups all Click command definitions and supporting utilities
for the Holdfast command-line interface.

Typical usage:
    The console script entry point is defined in ``pyproject.toml`` as::

        [project.scripts]
        holdfast = "holdfast.cli.main:cli"
"""

from __future__ import annotations

__all__: list[str] = []
# Do NOT import .main or commands at module import time
