# holdfast:header:start
#
#   project      : Holdfast
#   file         : __init__.py
#   file_relpath : src/holdfast/cli_shared/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The Holdfast Authors
#
# holdfast:header:end

"""Click-independent helpers shared by CLI frontends (console protocol, exit codes, color)."""

from __future__ import annotations
