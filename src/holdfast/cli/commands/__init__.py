# holdfast:header:start
#
#   project      : Holdfast
#   file         : __init__.py
#   file_relpath : src/holdfast/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The Holdfast Authors
#
# holdfast:header:end

"""Holdfast subcommands (``demo``, ``planets``, ``show-class``, ``version``)."""

from __future__ import annotations
