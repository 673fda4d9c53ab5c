# holdfast:header:start
#
#   project      : Holdfast
#   file         : planets.py
#   file_relpath : src/holdfast/planets.py
#   license      : MIT
#   copyright    : (c) 2025 The Holdfast Authors
#
# holdfast:header:end

"""Planets as an enumerated type carrying data and behavior.

An Enum is a class whose instances are all declared up front: the eight
members below are the only `Planet` objects that can ever exist. Each carries
its mass and radius, and regular methods compute surface gravity and weight.
"""

from __future__ import annotations

from enum import Enum
from typing import Final

from holdfast.core.enum_mixins import enum_from_name

# Universal gravitational constant (m3 kg-1 s-2)
G: Final[float] = 6.67300e-11


class Planet(Enum):
    """The planets of the solar system with mass (kg) and radius (m)."""

    MERCURY = (3.303e23, 2.4397e6)
    VENUS = (4.869e24, 6.0518e6)
    EARTH = (5.976e24, 6.37814e6)
    MARS = (6.421e23, 3.3972e6)
    JUPITER = (1.9e27, 7.1492e7)
    SATURN = (5.688e26, 6.0268e7)
    URANUS = (8.686e25, 2.5559e7)
    NEPTUNE = (1.024e26, 2.4746e7)

    def __init__(self, mass: float, radius: float) -> None:
        self._mass: float = mass
        self._radius: float = radius

    @property
    def mass(self) -> float:
        """Mass in kilograms."""
        return self._mass

    @property
    def radius(self) -> float:
        """Radius in meters."""
        return self._radius

    def surface_gravity(self) -> float:
        """Gravitational acceleration at the surface (m s-2)."""
        return G * self._mass / (self._radius * self._radius)

    def surface_weight(self, other_mass: float) -> float:
        """Weight on this planet of an object with mass ``other_mass``."""
        return other_mass * self.surface_gravity()

    @property
    def display_name(self) -> str:
        """Name as shown to users (e.g. ``"Earth"``)."""
        return self.name.capitalize()

    @classmethod
    def lookup(cls, name: str) -> Planet | None:
        """Return the planet named ``name`` (case-insensitive), or None."""
        return enum_from_name(cls, name, case_insensitive=True)


def weights_for(
    earth_weight: float,
    planets: tuple[Planet, ...] | None = None,
) -> list[tuple[Planet, float]]:
    """Return ``(planet, weight)`` for an object weighing ``earth_weight`` on Earth.

    Args:
        earth_weight (float): Weight measured on Earth, in any unit.
        planets (tuple[Planet, ...] | None): Planets to report; all, in
            declaration order, when None.

    Returns:
        list[tuple[Planet, float]]: Weight on each requested planet, same unit.
    """
    mass: float = earth_weight / Planet.EARTH.surface_gravity()
    chosen: tuple[Planet, ...] = tuple(Planet) if planets is None else planets
    return [(p, p.surface_weight(mass)) for p in chosen]
