# holdfast:header:start
#
#   project      : Holdfast
#   file         : version.py
#   file_relpath : src/holdfast/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 The Holdfast Authors
#
# holdfast:header:end

"""Holdfast `version` command.

Prints the current Holdfast version as installed in the active Python environment.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from holdfast.cli.cli_types import OutputFormat
from holdfast.cli.cmd_common import get_console, get_effective_verbosity
from holdfast.cli.options import output_format_option
from holdfast.constants import HOLDFAST_VERSION

if TYPE_CHECKING:
    from holdfast.cli_shared.console_api import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of Holdfast.",
)
@output_format_option
def version_command(*, output_format: OutputFormat | None = None) -> None:
    """Show the current version of Holdfast.

    Args:
        output_format (OutputFormat | None): Optional output format (plain text or JSON).
    """
    ctx = click.get_current_context()
    console: ConsoleLike = get_console(ctx, output_format)

    if output_format == OutputFormat.JSON:
        console.print(json.dumps({"version": HOLDFAST_VERSION}))
    elif get_effective_verbosity(ctx) > 0:
        console.print(console.styled("Holdfast version:\n", bold=True, underline=True))
        console.print(f"    {console.styled(HOLDFAST_VERSION, bold=True)}")
    else:
        console.print(console.styled(HOLDFAST_VERSION, bold=True))
