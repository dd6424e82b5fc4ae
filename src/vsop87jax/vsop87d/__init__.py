"""VSOP87D planetary theory: heliocentric ecliptic spherical coordinates.

Provides longitude, latitude and radius vector of the eight major planets
referred to the ecliptic and equinox of the date:

- **Planets**: ``mercury`` ... ``neptune`` and the ``planet_position_vsop87d``
  dispatcher
- **Series engine**: Poisson-series summation and Horner recombination
- **Tables**: Read-only per-planet series tables and planet ID constants
"""

from ._series import evaluate_coordinate, evaluate_polynomial, evaluate_series
from ._tables import (
    EARTH_ID,
    JUPITER_ID,
    MARS_ID,
    MERCURY_ID,
    NEPTUNE_ID,
    SATURN_ID,
    URANUS_ID,
    VENUS_ID,
    VSOP87D_TABLES,
)
from ._types import COORDINATES, MAX_POWER, SeriesTable, SphericalCoordinates
from .planets import (
    earth,
    jupiter,
    mars,
    mercury,
    neptune,
    planet_position_vsop87d,
    saturn,
    uranus,
    venus,
    vsop87d_spherical,
)

__all__ = [
    # Types
    "SphericalCoordinates",
    "SeriesTable",
    "COORDINATES",
    "MAX_POWER",
    # Series engine
    "evaluate_series",
    "evaluate_polynomial",
    "evaluate_coordinate",
    # Tables - Planet IDs
    "MERCURY_ID",
    "VENUS_ID",
    "EARTH_ID",
    "MARS_ID",
    "JUPITER_ID",
    "SATURN_ID",
    "URANUS_ID",
    "NEPTUNE_ID",
    "VSOP87D_TABLES",
    # Planets
    "vsop87d_spherical",
    "mercury",
    "venus",
    "earth",
    "mars",
    "jupiter",
    "saturn",
    "uranus",
    "neptune",
    "planet_position_vsop87d",
]
