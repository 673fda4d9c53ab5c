# holdfast:header:start
#
#   project      : Holdfast
#   file         : demo.py
#   file_relpath : src/holdfast/cli/commands/demo.py
#   license      : MIT
#   copyright    : (c) 2025 The Holdfast Authors
#
# holdfast:header:end

"""Holdfast `demo` command.

Runs the four `Client` loops against one `ProtectedCollection` of counters and
prints the holder's content after each loop. Loops rejected by a read-only view
or a non-removable iterator are reported inline; they do not fail the command.

Settings are merged from defaults, an optional ``--config`` file and the
``--data``/``--count`` flags (highest precedence).
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

from holdfast.cli.cli_types import OutputFormat
from holdfast.cli.cmd_common import get_console, get_effective_verbosity
from holdfast.cli.errors import HoldfastConfigError
from holdfast.cli.options import output_format_option
from holdfast.config.loaders import ConfigError
from holdfast.config.logging import get_logger
from holdfast.config.model import DemoConfig, MutableDemoConfig
from holdfast.demo.runner import DemoReport, ScenarioStatus, run_demo

if TYPE_CHECKING:
    from holdfast.cli_shared.console_api import ConsoleLike
    from holdfast.config.logging import HoldfastLogger

logger: HoldfastLogger = get_logger(__name__)

ORIGINAL_LABEL: str = "Original"


def report_to_dict(config: DemoConfig, report: DemoReport) -> dict[str, Any]:
    """Return a JSON-friendly representation of a demo run."""
    return {
        "config": config.to_toml_dict()["demo"],
        "original": report.original,
        "scenarios": [
            {
                "label": r.label,
                "status": r.status.value,
                "content": r.content,
                "error": None if r.error is None else str(r.error),
            }
            for r in report.results
        ],
    }


def render_report(console: ConsoleLike, report: DemoReport) -> None:
    """Print one aligned line per scenario, with rejections highlighted."""
    width: int = max([len(ORIGINAL_LABEL), *(len(r.label) for r in report.results)])
    console.print(f"{ORIGINAL_LABEL:<{width}} : {report.original}")
    for r in report.results:
        line: str = f"{r.label:<{width}} : {r.content}"
        if r.status is ScenarioStatus.REJECTED:
            detail: str = f"[{r.status.value}: {r.error}]"
            line += "  " + r.status.render(detail, enable_color=console.enable_color)
        console.print(line)


@click.command(
    name="demo",
    help="Compare the access modes of a protected collection of counters.",
)
@click.option(
    "--config",
    "config_file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Read settings from a holdfast.toml or pyproject.toml ([tool.holdfast]).",
)
@click.option(
    "--data",
    "client_data",
    type=int,
    default=None,
    help="Value the client adds to each counter (default: 13).",
)
@click.option(
    "--count",
    "counter_count",
    type=int,
    default=None,
    help="Number of counters, valued 1..N (default: 9).",
)
@output_format_option
def demo_command(
    *,
    config_file: Path | None = None,
    client_data: int | None = None,
    counter_count: int | None = None,
    output_format: OutputFormat | None = None,
) -> None:
    """Run the encapsulation demo.

    Args:
        config_file (Path | None): Optional config file.
        client_data (int | None): Override for the client's datum.
        counter_count (int | None): Override for the number of counters.
        output_format (OutputFormat | None): Plain text (default) or JSON.

    Raises:
        HoldfastConfigError: If the config file is unreadable or invalid.
    """
    ctx = click.get_current_context()
    console: ConsoleLike = get_console(ctx, output_format)

    try:
        config: DemoConfig = MutableDemoConfig.load_merged(
            config_file=config_file,
            client_data=client_data,
            counter_count=counter_count,
        ).freeze()
    except ConfigError as exc:
        raise HoldfastConfigError(str(exc)) from exc

    report: DemoReport = run_demo(config)

    if output_format == OutputFormat.JSON:
        console.print(json.dumps(report_to_dict(config, report), indent=2))
        return

    if get_effective_verbosity(ctx) > 0:
        sources: str = ", ".join(str(p) for p in config.config_files) or "(defaults)"
        console.print(console.styled(f"Config: {sources}", bold=True))
        console.print(
            f"Client data: {config.client_data}; counters: {config.counter_count}"
        )
        console.print()

    render_report(console, report)
