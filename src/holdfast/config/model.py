# holdfast:header:start
#
#   project      : Holdfast
#   file         : model.py
#   file_relpath : src/holdfast/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 The Holdfast Authors
#
# holdfast:header:end

"""Configuration model for the Holdfast demo.

The model follows a builder/snapshot split:

- `MutableDemoConfig` is the mutable builder. Layers are merged into it with
  clear precedence (defaults < config file < CLI overrides), then validated.
- `DemoConfig` is the frozen runtime snapshot produced by
  `MutableDemoConfig.freeze`; `DemoConfig.thaw` goes back to a builder.

TOML layout (``holdfast.toml``; the same keys live under ``[tool.holdfast]``
in ``pyproject.toml``):

```toml
[demo]
client_data = 13
counter_count = 9
```
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any, cast

from holdfast.config.loaders import ConfigError, load_config_table
from holdfast.config.logging import get_logger
from holdfast.constants import DEFAULT_CLIENT_DATA, DEFAULT_COUNTER_COUNT

if TYPE_CHECKING:
    from holdfast.config.loaders import TomlTable
    from holdfast.config.logging import HoldfastLogger

logger: HoldfastLogger = get_logger(__name__)

DEMO_SECTION: str = "demo"
KEY_CLIENT_DATA: str = "client_data"
KEY_COUNTER_COUNT: str = "counter_count"


@dataclass(frozen=True, slots=True)
class DemoConfig:
    """Immutable runtime configuration for the encapsulation demo.

    Attributes:
        client_data (int): Value the demo client adds to each counter.
        counter_count (int): Number of counters (valued ``1..counter_count``).
        config_files (tuple[Path, ...]): Config files merged into this snapshot.
    """

    client_data: int = DEFAULT_CLIENT_DATA
    counter_count: int = DEFAULT_COUNTER_COUNT
    config_files: tuple[Path, ...] = ()

    @classmethod
    def from_defaults(cls) -> DemoConfig:
        """Return the built-in defaults as a frozen snapshot."""
        return cls()

    def thaw(self) -> MutableDemoConfig:
        """Return a mutable copy of this frozen config.

        Returns:
            MutableDemoConfig: A builder initialized from this snapshot.
        """
        return MutableDemoConfig(
            client_data=self.client_data,
            counter_count=self.counter_count,
            config_files=list(self.config_files),
        )

    def to_toml_dict(self) -> TomlTable:
        """Return the settings as a TOML-compatible dict (``[demo]`` table)."""
        return {
            DEMO_SECTION: {
                KEY_CLIENT_DATA: self.client_data,
                KEY_COUNTER_COUNT: self.counter_count,
            }
        }


def _coerce_int(section: str, key: str, value: Any) -> int:
    # TOML booleans are ints in Python; reject them explicitly.
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"[{section}] {key} must be an integer, got {value!r}")
    return value


@dataclass
class MutableDemoConfig:
    """Mutable builder for `DemoConfig`.

    Attributes:
        client_data (int): Value the demo client adds to each counter.
        counter_count (int): Number of counters to create.
        config_files (list[Path]): Config files merged so far, in order.
    """

    client_data: int = DEFAULT_CLIENT_DATA
    counter_count: int = DEFAULT_COUNTER_COUNT
    config_files: list[Path] = field(default_factory=lambda: [])

    def merge_toml(self, table: TomlTable, *, source: Path | None = None) -> MutableDemoConfig:
        """Merge a Holdfast settings table into this builder.

        Unknown keys in ``[demo]`` are logged and ignored.

        Args:
            table (TomlTable): Parsed settings (the ``[demo]`` table is read).
            source (Path | None): File the table came from, recorded in
                ``config_files``.

        Returns:
            MutableDemoConfig: ``self``, for chaining.

        Raises:
            ConfigError: If ``[demo]`` is not a table or a value has the wrong type.
        """
        demo_any: Any = table.get(DEMO_SECTION, {})
        if not isinstance(demo_any, dict):
            raise ConfigError(f"[{DEMO_SECTION}] must be a table")
        demo: TomlTable = cast("TomlTable", demo_any)

        for key, value in demo.items():
            if key == KEY_CLIENT_DATA:
                self.client_data = _coerce_int(DEMO_SECTION, key, value)
            elif key == KEY_COUNTER_COUNT:
                self.counter_count = _coerce_int(DEMO_SECTION, key, value)
            else:
                logger.warning("Ignoring unknown key [%s] %s", DEMO_SECTION, key)

        if source is not None:
            self.config_files.append(source)
        return self

    def merge_file(self, path: Path) -> MutableDemoConfig:
        """Load ``path`` and merge its Holdfast settings into this builder."""
        logger.info("Loading config from %s", path)
        return self.merge_toml(load_config_table(path), source=path)

    def apply_overrides(
        self,
        *,
        client_data: int | None = None,
        counter_count: int | None = None,
    ) -> MutableDemoConfig:
        """Apply CLI overrides; ``None`` leaves the current value untouched."""
        if client_data is not None:
            self.client_data = client_data
        if counter_count is not None:
            self.counter_count = counter_count
        return self

    def freeze(self) -> DemoConfig:
        """Validate and return an immutable snapshot.

        Raises:
            ConfigError: If ``counter_count`` is negative.
        """
        if self.counter_count < 0:
            raise ConfigError(f"{KEY_COUNTER_COUNT} must be >= 0, got {self.counter_count}")
        return DemoConfig(
            client_data=self.client_data,
            counter_count=self.counter_count,
            config_files=tuple(self.config_files),
        )

    @classmethod
    def load_merged(
        cls,
        *,
        config_file: Path | None = None,
        client_data: int | None = None,
        counter_count: int | None = None,
    ) -> MutableDemoConfig:
        """Build a config from defaults, an optional file and CLI overrides.

        Args:
            config_file (Path | None): Optional ``holdfast.toml``/``pyproject.toml``.
            client_data (int | None): CLI override for ``client_data``.
            counter_count (int | None): CLI override for ``counter_count``.

        Returns:
            MutableDemoConfig: The merged builder, ready to be frozen.
        """
        draft = cls()
        if config_file is not None:
            draft.merge_file(config_file)
        return draft.apply_overrides(client_data=client_data, counter_count=counter_count)
