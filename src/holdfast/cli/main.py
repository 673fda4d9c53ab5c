# holdfast:header:start
#
#   project      : Holdfast
#   file         : main.py
#   file_relpath : src/holdfast/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 The Holdfast Authors
#
# holdfast:header:end

"""Click CLI for Holdfast: a group with shared state and real subcommands.

Key ideas:
- Group-level options (verbosity, color) are initialized once, placed into ``ctx.obj``.
- Internal logging is configured from ``HOLDFAST_LOG_LEVEL``; program output goes
  through the console stored on the context.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from holdfast.cli.commands.demo import demo_command
from holdfast.cli.commands.planets import planets_command
from holdfast.cli.commands.show_class import show_class_command
from holdfast.cli.commands.version import version_command
from holdfast.cli.console import ClickConsole
from holdfast.cli.options import (
    common_color_options,
    common_verbose_options,
    resolve_verbosity,
)
from holdfast.cli_shared.color import ColorMode, resolve_color_mode
from holdfast.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from holdfast.cli_shared.console_api import ConsoleLike

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging and color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.ensure_object(dict)

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    effective_color_mode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color = resolve_color_mode(color_mode_override=effective_color_mode, output_format=None)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)
    logger.debug("CLI state: %s", {k: v for k, v in ctx.obj.items() if k != "console"})


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="Holdfast: encapsulation teaching snippets.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Entry point for the Holdfast CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'holdfast demo' to compare the collection access modes.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(demo_command)

cli.add_command(planets_command)

cli.add_command(show_class_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
