# holdfast:header:start
#
#   project      : Holdfast
#   file         : show_class.py
#   file_relpath : src/holdfast/cli/commands/show_class.py
#   license      : MIT
#   copyright    : (c) 2025 The Holdfast Authors
#
# holdfast:header:end

"""Holdfast `show-class` command.

Prints a synopsis of the named class (constructors, fields, methods it declares
itself), then tries to instantiate it with no arguments and with one string.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from holdfast.cli.cmd_common import get_console
from holdfast.cli.errors import HoldfastUsageError
from holdfast.constants import DEFAULT_SHOW_CLASS
from holdfast.utils.introspection import (
    ClassResolutionError,
    describe_class,
    render_synopsis,
    resolve_class,
    try_instantiate,
)

if TYPE_CHECKING:
    from holdfast.cli_shared.console_api import ConsoleLike


@click.command(
    name="show-class",
    help=f"Display a synopsis of a class (default: {DEFAULT_SHOW_CLASS}).",
)
@click.argument(
    "dotted_name",
    metavar="[DOTTED_NAME]",
    required=False,
    default=DEFAULT_SHOW_CLASS,
)
@click.option(
    "--no-instantiate",
    "no_instantiate",
    is_flag=True,
    default=False,
    help="Only print the synopsis; do not try to construct instances.",
)
def show_class_command(*, dotted_name: str, no_instantiate: bool = False) -> None:
    """Print a class synopsis and the outcome of instantiation attempts.

    Args:
        dotted_name (str): ``package.module.Class`` or a builtin name.
        no_instantiate (bool): Skip the instantiation attempts.

    Raises:
        HoldfastUsageError: If ``dotted_name`` does not resolve to a class.
    """
    ctx = click.get_current_context()
    console: ConsoleLike = get_console(ctx)

    try:
        cls: type = resolve_class(dotted_name)
    except ClassResolutionError as exc:
        raise HoldfastUsageError(str(exc)) from exc

    for line in render_synopsis(describe_class(cls)):
        console.print(line)

    if no_instantiate:
        return

    for attempt in try_instantiate(cls):
        if attempt.ok:
            console.print(f"Printing ({attempt.description}): {attempt.text}")
        else:
            console.warn(f"Cannot instantiate with {attempt.description}: {attempt.text}")
