# holdfast:header:start
#
#   project      : Holdfast
#   file         : constants.py
#   file_relpath : src/holdfast/constants.py
#   license      : MIT
#   copyright    : (c) 2025 The Holdfast Authors
#
# holdfast:header:end

"""Holdfast Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

HOLDFAST_VERSION: str = get_version("holdfast")

LOG_LEVEL_ENV_VAR: str = "HOLDFAST_LOG_LEVEL"

# pyproject.toml holds the demo settings under this table.
PYPROJECT_TOML_NAME: str = "pyproject.toml"
PYPROJECT_TOOL_TABLE: tuple[str, ...] = ("tool", "holdfast")

DEFAULT_CLIENT_DATA: int = 13
DEFAULT_COUNTER_COUNT: int = 9

DEFAULT_SHOW_CLASS: str = "builtins.str"
