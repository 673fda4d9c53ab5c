# holdfast:header:start
#
#   project      : Holdfast
#   file         : loaders.py
#   file_relpath : src/holdfast/config/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 The Holdfast Authors
#
# holdfast:header:end

"""Load TOML configuration sources.

This module reads Holdfast settings from on-disk TOML files:

- a dedicated ``holdfast.toml`` (settings at the document root), or
- a ``pyproject.toml`` (settings under ``[tool.holdfast]``).

Parsing is done with `tomlkit` and returned as plain `dict` structures.
Unlike a best-effort loader, a config file that the user named explicitly must
be readable and well-formed: failures raise `ConfigError`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from holdfast.config.logging import get_logger
from holdfast.constants import PYPROJECT_TOML_NAME, PYPROJECT_TOOL_TABLE
from holdfast.core.errors import HoldfastError

if TYPE_CHECKING:
    from pathlib import Path

    from holdfast.config.logging import HoldfastLogger

logger: HoldfastLogger = get_logger(__name__)

TomlTable = dict[str, Any]


class ConfigError(HoldfastError):
    """A configuration source is unreadable, malformed or holds invalid values."""


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        TomlTable: The parsed TOML content as plain Python values.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        raise ConfigError(f"Cannot read config file {path}: {e}") from e
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        raise ConfigError(f"Malformed TOML in {path}: {e}") from e
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def extract_holdfast_table(path: Path, data: TomlTable) -> TomlTable:
    """Return the part of a parsed document that holds Holdfast settings.

    For ``pyproject.toml`` this is the ``[tool.holdfast]`` table (empty if
    absent); for any other file name it is the whole document.

    Args:
        path (Path): The path the document was loaded from.
        data (TomlTable): The parsed document.

    Returns:
        TomlTable: The Holdfast settings table.

    Raises:
        ConfigError: If the ``[tool.holdfast]`` entry exists but is not a table.
    """
    if path.name != PYPROJECT_TOML_NAME:
        return data
    node: Any = data
    for key in PYPROJECT_TOOL_TABLE:
        if not isinstance(node, dict):
            return {}
        node = cast("TomlTable", node).get(key, {})
    if not isinstance(node, dict):
        raise ConfigError(f"[{'.'.join(PYPROJECT_TOOL_TABLE)}] in {path} must be a table")
    logger.debug("Found [%s] in %s", ".".join(PYPROJECT_TOOL_TABLE), path)
    return cast("TomlTable", node)


def load_config_table(path: Path) -> TomlTable:
    """Load the Holdfast settings table from ``path``.

    Args:
        path (Path): A ``holdfast.toml`` or ``pyproject.toml`` file.

    Returns:
        TomlTable: The Holdfast settings found in the file.
    """
    return extract_holdfast_table(path, load_toml_dict(path))
