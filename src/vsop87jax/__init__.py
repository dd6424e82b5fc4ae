"""
vsop87jax computes heliocentric planetary positions from the VSOP87D theory, implemented in JAX.
"""

from .constants import (
    DEG2RAD,
    RAD2DEG,
    TWO_PI,
    JD_J2000,
    DAYS_PER_JULIAN_MILLENNIUM,
    AU,
)

from .config import set_dtype, get_dtype

from .time import julian_millennia_from_j2000, julian_millennia_to_jd

from .vsop87d import (
    SphericalCoordinates,
    mercury,
    venus,
    earth,
    mars,
    jupiter,
    saturn,
    uranus,
    neptune,
    planet_position_vsop87d,
)

__all__ = [
    # Constants
    "DEG2RAD",
    "RAD2DEG",
    "TWO_PI",
    "JD_J2000",
    "DAYS_PER_JULIAN_MILLENNIUM",
    "AU",
    # Config
    "set_dtype",
    "get_dtype",
    # Time
    "julian_millennia_from_j2000",
    "julian_millennia_to_jd",
    # VSOP87D
    "SphericalCoordinates",
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
