# holdfast:header:start
#
#   project      : Holdfast
#   file         : cmd_common.py
#   file_relpath : src/holdfast/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 The Holdfast Authors
#
# holdfast:header:end

"""Helpers shared by Holdfast subcommands (context state access)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from holdfast.cli.cli_types import OutputFormat
from holdfast.cli.console import ClickConsole

if TYPE_CHECKING:
    import click

    from holdfast.cli_shared.console_api import ConsoleLike


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity stored on the context (0 = terse)."""
    obj = ctx.ensure_object(dict)
    return int(obj.get("verbosity_level", 0))


def get_console(ctx: click.Context, output_format: OutputFormat | None = None) -> ConsoleLike:
    """Return the console for this command.

    Machine formats always get a colorless console, regardless of ``--color``.
    """
    obj = ctx.ensure_object(dict)
    console: ConsoleLike = obj.get("console") or ClickConsole(enable_color=False)
    if output_format == OutputFormat.JSON and console.enable_color:
        return ClickConsole(enable_color=False)
    return console
