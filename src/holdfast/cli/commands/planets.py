# holdfast:header:start
#
#   project      : Holdfast
#   file         : planets.py
#   file_relpath : src/holdfast/cli/commands/planets.py
#   license      : MIT
#   copyright    : (c) 2025 The Holdfast Authors
#
# holdfast:header:end

"""Holdfast `planets` command.

Given a weight measured on Earth, prints the equivalent weight on each planet
(or on the planets selected with ``--planet``).
"""

from __future__ import annotations

import json
import math

import click

from holdfast.cli.cli_types import OutputFormat
from holdfast.cli.cmd_common import get_console
from holdfast.cli.errors import HoldfastUsageError
from holdfast.cli.options import output_format_option
from holdfast.planets import Planet, weights_for


def parse_earth_weight(raw: str) -> float:
    """Parse a positive, finite weight.

    Raises:
        HoldfastUsageError: If ``raw`` is not a number, or not positive and finite.
    """
    try:
        weight = float(raw)
    except ValueError as exc:
        raise HoldfastUsageError(f"EARTH_WEIGHT must be a number, got '{raw}'") from exc
    if not math.isfinite(weight) or weight <= 0:
        raise HoldfastUsageError(f"EARTH_WEIGHT must be a positive number, got '{raw}'")
    return weight


def parse_planets(names: tuple[str, ...]) -> tuple[Planet, ...] | None:
    """Resolve ``--planet`` values (case-insensitive); None selects all planets."""
    if not names:
        return None
    chosen: list[Planet] = []
    for name in names:
        planet: Planet | None = Planet.lookup(name)
        if planet is None:
            known: str = ", ".join(p.name.lower() for p in Planet)
            raise HoldfastUsageError(f"Unknown planet '{name}'. Must be one of: {known}")
        chosen.append(planet)
    return tuple(chosen)


@click.command(
    name="planets",
    help="Show what EARTH_WEIGHT weighs on every planet.",
)
@click.argument("earth_weight", metavar="EARTH_WEIGHT")
@click.option(
    "--planet",
    "planet_names",
    multiple=True,
    help="Only report this planet (repeatable; case-insensitive).",
)
@output_format_option
def planets_command(
    *,
    earth_weight: str,
    planet_names: tuple[str, ...] = (),
    output_format: OutputFormat | None = None,
) -> None:
    """Print the weight on each planet.

    Args:
        earth_weight (str): Weight on Earth (positive number, any unit).
        planet_names (tuple[str, ...]): Optional planet filter.
        output_format (OutputFormat | None): Plain text (default) or JSON.
    """
    ctx = click.get_current_context()
    console = get_console(ctx, output_format)

    weight: float = parse_earth_weight(earth_weight)
    results: list[tuple[Planet, float]] = weights_for(weight, parse_planets(planet_names))

    if output_format == OutputFormat.JSON:
        payload = {
            "earth_weight": weight,
            "weights": {p.name.lower(): w for p, w in results},
        }
        console.print(json.dumps(payload, indent=2))
        return

    for planet, planet_weight in results:
        console.print(f"Your weight on {planet.display_name} is {planet_weight:f}")
