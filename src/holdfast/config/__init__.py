# holdfast:header:start
#
#   project      : Holdfast
#   file         : __init__.py
#   file_relpath : src/holdfast/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The Holdfast Authors
#
# holdfast:header:end

"""Configuration handling for Holdfast.

This package defines the demo configuration model, TOML loading with tomlkit
(``holdfast.toml`` or ``[tool.holdfast]`` in ``pyproject.toml``), and the
logging setup shared by the library and the CLI.
"""

from __future__ import annotations

from holdfast.config.loaders import ConfigError
from holdfast.config.model import DemoConfig, MutableDemoConfig

__all__: list[str] = [
    "ConfigError",
    "DemoConfig",
    "MutableDemoConfig",
]
