# holdfast:header:start
#
#   project      : Holdfast
#   file         : errors.py
#   file_relpath : src/holdfast/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 The Holdfast Authors
#
# holdfast:header:end

"""Exceptions for the Holdfast CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes. Library errors (``holdfast.core.errors``,
    ``holdfast.config.ConfigError``) are translated into these at the command
    boundary.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from holdfast.cli_shared.exit_codes import ExitCode


class HoldfastCliError(click.ClickException):
    """Base class for all Holdfast CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorization happens in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))
                return
        super().show(file)


class HoldfastUsageError(HoldfastCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class HoldfastConfigError(HoldfastCliError):
    """Error for configuration errors (unreadable/malformed/invalid config)."""

    exit_code = ExitCode.CONFIG_ERROR
