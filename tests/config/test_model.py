# holdfast:header:start
#
#   project      : Holdfast
#   file         : test_model.py
#   file_relpath : tests/config/test_model.py
#   license      : MIT
#   copyright    : (c) 2025 The Holdfast Authors
#
# holdfast:header:end

"""Tests for the demo configuration model and TOML loaders."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from holdfast.config import ConfigError, DemoConfig, MutableDemoConfig
from holdfast.config.loaders import extract_holdfast_table, load_config_table, load_toml_dict
from holdfast.constants import DEFAULT_CLIENT_DATA, DEFAULT_COUNTER_COUNT
from holdfast.core.errors import HoldfastError

if TYPE_CHECKING:
    from pathlib import Path


def _write(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


def test_defaults() -> None:
    """Built-in defaults match the documented constants."""
    cfg = DemoConfig.from_defaults()

    assert cfg.client_data == DEFAULT_CLIENT_DATA == 13
    assert cfg.counter_count == DEFAULT_COUNTER_COUNT == 9
    assert cfg.config_files == ()


def test_freeze_thaw_round_trip() -> None:
    """Thawing and re-freezing preserves every field."""
    cfg = DemoConfig(client_data=4, counter_count=2)

    assert cfg.thaw().freeze() == cfg


def test_frozen_config_is_immutable() -> None:
    """The runtime snapshot rejects attribute assignment."""
    cfg = DemoConfig.from_defaults()

    with pytest.raises(AttributeError):
        cfg.client_data = 1  # type: ignore[misc]


def test_to_toml_dict() -> None:
    """The snapshot serializes to a ``[demo]`` table."""
    assert DemoConfig(client_data=1, counter_count=2).to_toml_dict() == {
        "demo": {"client_data": 1, "counter_count": 2}
    }


def test_load_holdfast_toml(tmp_path: Path) -> None:
    """``holdfast.toml`` values override the defaults."""
    path = _write(tmp_path / "holdfast.toml", "[demo]\nclient_data = 7\ncounter_count = 3\n")

    cfg = MutableDemoConfig.load_merged(config_file=path).freeze()

    assert (cfg.client_data, cfg.counter_count) == (7, 3)
    assert cfg.config_files == (path,)


def test_load_pyproject_tool_table(tmp_path: Path) -> None:
    """In ``pyproject.toml`` the settings live under ``[tool.holdfast]``."""
    path = _write(
        tmp_path / "pyproject.toml",
        '[project]\nname = "x"\n\n[tool.holdfast.demo]\nclient_data = 2\n',
    )

    cfg = MutableDemoConfig.load_merged(config_file=path).freeze()

    assert cfg.client_data == 2
    assert cfg.counter_count == DEFAULT_COUNTER_COUNT


def test_pyproject_without_tool_table_uses_defaults(tmp_path: Path) -> None:
    """A ``pyproject.toml`` without ``[tool.holdfast]`` contributes nothing."""
    path = _write(tmp_path / "pyproject.toml", '[project]\nname = "x"\n')

    assert load_config_table(path) == {}


def test_pyproject_tool_entry_must_be_table(tmp_path: Path) -> None:
    """A scalar ``tool.holdfast`` entry is a config error."""
    path = tmp_path / "pyproject.toml"

    with pytest.raises(ConfigError):
        extract_holdfast_table(path, {"tool": {"holdfast": 3}})


def test_cli_overrides_take_precedence(tmp_path: Path) -> None:
    """Overrides win over file values; ``None`` keeps the file value."""
    path = _write(tmp_path / "holdfast.toml", "[demo]\nclient_data = 7\ncounter_count = 3\n")

    cfg = MutableDemoConfig.load_merged(config_file=path, counter_count=5).freeze()

    assert (cfg.client_data, cfg.counter_count) == (7, 5)


def test_missing_file_is_config_error(tmp_path: Path) -> None:
    """Unreadable files raise `ConfigError`, a library error."""
    with pytest.raises(ConfigError) as exc_info:
        load_toml_dict(tmp_path / "nope.toml")

    assert isinstance(exc_info.value, HoldfastError)


def test_malformed_toml_is_config_error(tmp_path: Path) -> None:
    """Parse failures are reported as `ConfigError`."""
    path = _write(tmp_path / "holdfast.toml", "[demo\nclient_data = \n")

    with pytest.raises(ConfigError, match="Malformed TOML"):
        MutableDemoConfig.load_merged(config_file=path)


@pytest.mark.parametrize("raw", ["true", '"13"', "1.5"])
def test_non_integer_values_rejected(tmp_path: Path, raw: str) -> None:
    """Booleans, strings and floats are not accepted as integers."""
    path = _write(tmp_path / "holdfast.toml", f"[demo]\nclient_data = {raw}\n")

    with pytest.raises(ConfigError, match="must be an integer"):
        MutableDemoConfig.load_merged(config_file=path)


def test_demo_must_be_table() -> None:
    """A scalar ``demo`` key is rejected."""
    with pytest.raises(ConfigError):
        MutableDemoConfig().merge_toml({"demo": 1})


def test_unknown_keys_warn(caplog: pytest.LogCaptureFixture) -> None:
    """Unknown ``[demo]`` keys are logged and ignored."""
    caplog.set_level("WARNING", logger="holdfast")

    draft = MutableDemoConfig().merge_toml({"demo": {"colour": "red"}})

    assert draft.freeze() == DemoConfig.from_defaults()
    assert "Ignoring unknown key [demo] colour" in caplog.text


def test_negative_count_rejected_on_freeze() -> None:
    """A negative number of counters fails validation."""
    with pytest.raises(ConfigError, match="counter_count must be >= 0"):
        MutableDemoConfig().apply_overrides(counter_count=-1).freeze()
