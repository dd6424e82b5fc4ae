"""Heliocentric planetary positions from the VSOP87D solution.

Provides heliocentric ecliptic spherical coordinates (longitude, latitude,
radius vector) of the eight major planets, referred to the ecliptic and
equinox of the date.  All planets share a single evaluation routine,
:func:`vsop87d_spherical`; the per-planet functions only select a table.

Input is a Julian Day (JDE, dynamical time) as a float.  Longitudes are
returned in ``[0, 2pi)`` radians, latitudes in radians and distances in
astronomical units.  No aberration, nutation or FK5 correction is applied.

Note:
    Tables are evaluated in the configured float dtype (``float64`` by
    default).  Single precision cannot resolve Julian Days to better than
    a quarter of a day and is not suitable for this solution.

References:
    P. Bretagnon & G. Francou, "Planetary theories in rectangular and
    spherical variables. VSOP87 solutions", A&A 202, 309-315 (1988).
"""

from __future__ import annotations

import functools
import operator

import jax
import jax.numpy as jnp
import numpy as np
from jax.typing import ArrayLike

from vsop87jax.config import get_dtype
from vsop87jax.time import julian_millennia_from_j2000
from vsop87jax.utils import wrap_to_two_pi
from vsop87jax.vsop87d._series import evaluate_coordinate
from vsop87jax.vsop87d._tables import (
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
from vsop87jax.vsop87d._types import SeriesTable, SphericalCoordinates


def vsop87d_spherical(table: SeriesTable, jde: ArrayLike) -> SphericalCoordinates:
    """Evaluate a planet's VSOP87D series at a Julian Day.

    Each coordinate is evaluated over the powers of *t* the table uses.
    Longitude is then reduced into ``[0, 2pi)``; latitude and radius
    vector are returned as summed.

    Args:
        table: Series table of the planet.
        jde: Julian Day (Ephemeris), scalar or array.

    Returns:
        Heliocentric ecliptic spherical coordinates, with fields shaped
        like *jde*.
    """
    t = julian_millennia_from_j2000(jde)

    lon = wrap_to_two_pi(evaluate_coordinate(t, table.slots("L")))
    lat = evaluate_coordinate(t, table.slots("B"))
    dist = evaluate_coordinate(t, table.slots("R"))

    return SphericalCoordinates(lon=lon, lat=lat, dist=dist)


def mercury(jde: ArrayLike) -> SphericalCoordinates:
    """Heliocentric ecliptic coordinates of Mercury from VSOP87D.

    Args:
        jde: Julian Day (Ephemeris) at which to evaluate.

    Returns:
        Longitude [rad], latitude [rad] and distance [AU] of Mercury.

    Examples:
        ```python
        from vsop87jax.vsop87d import mercury
        c = mercury(2378495.0)  # December 30th, 1799
        c.longitude(), c.latitude(), c.distance()
        ```
    """
    return vsop87d_spherical(VSOP87D_TABLES[MERCURY_ID], jde)


def venus(jde: ArrayLike) -> SphericalCoordinates:
    """Heliocentric ecliptic coordinates of Venus from VSOP87D.

    Args:
        jde: Julian Day (Ephemeris) at which to evaluate.

    Returns:
        Longitude [rad], latitude [rad] and distance [AU] of Venus.

    Examples:
        ```python
        from vsop87jax.vsop87d import venus
        c = venus(2341970.0)  # December 29th, 1699
        c.longitude(), c.latitude(), c.distance()
        ```
    """
    return vsop87d_spherical(VSOP87D_TABLES[VENUS_ID], jde)


def earth(jde: ArrayLike) -> SphericalCoordinates:
    """Heliocentric ecliptic coordinates of Earth from VSOP87D.

    Args:
        jde: Julian Day (Ephemeris) at which to evaluate.

    Returns:
        Longitude [rad], latitude [rad] and distance [AU] of Earth.

    Examples:
        ```python
        from vsop87jax.vsop87d import earth
        c = earth(2305445.0)  # December 29th, 1599
        c.longitude(), c.latitude(), c.distance()
        ```
    """
    return vsop87d_spherical(VSOP87D_TABLES[EARTH_ID], jde)


def mars(jde: ArrayLike) -> SphericalCoordinates:
    """Heliocentric ecliptic coordinates of Mars from VSOP87D.

    Args:
        jde: Julian Day (Ephemeris) at which to evaluate.

    Returns:
        Longitude [rad], latitude [rad] and distance [AU] of Mars.

    Examples:
        ```python
        from vsop87jax.vsop87d import mars
        c = mars(2268920.0)  # December 19th, 1499
        c.longitude(), c.latitude(), c.distance()
        ```
    """
    return vsop87d_spherical(VSOP87D_TABLES[MARS_ID], jde)


def jupiter(jde: ArrayLike) -> SphericalCoordinates:
    """Heliocentric ecliptic coordinates of Jupiter from VSOP87D.

    Args:
        jde: Julian Day (Ephemeris) at which to evaluate.

    Returns:
        Longitude [rad], latitude [rad] and distance [AU] of Jupiter.

    Examples:
        ```python
        from vsop87jax.vsop87d import jupiter
        c = jupiter(2232395.0)  # December 19th, 1399
        c.longitude(), c.latitude(), c.distance()
        ```
    """
    return vsop87d_spherical(VSOP87D_TABLES[JUPITER_ID], jde)


def saturn(jde: ArrayLike) -> SphericalCoordinates:
    """Heliocentric ecliptic coordinates of Saturn from VSOP87D.

    Args:
        jde: Julian Day (Ephemeris) at which to evaluate.

    Returns:
        Longitude [rad], latitude [rad] and distance [AU] of Saturn.

    Examples:
        ```python
        from vsop87jax.vsop87d import saturn
        c = saturn(2195870.0)  # December 19th, 1299
        c.longitude(), c.latitude(), c.distance()
        ```
    """
    return vsop87d_spherical(VSOP87D_TABLES[SATURN_ID], jde)


def uranus(jde: ArrayLike) -> SphericalCoordinates:
    """Heliocentric ecliptic coordinates of Uranus from VSOP87D.

    Args:
        jde: Julian Day (Ephemeris) at which to evaluate.

    Returns:
        Longitude [rad], latitude [rad] and distance [AU] of Uranus.

    Examples:
        ```python
        from vsop87jax.vsop87d import uranus
        c = uranus(2159345.0)  # December 19th, 1199
        c.longitude(), c.latitude(), c.distance()
        ```
    """
    return vsop87d_spherical(VSOP87D_TABLES[URANUS_ID], jde)


def neptune(jde: ArrayLike) -> SphericalCoordinates:
    """Heliocentric ecliptic coordinates of Neptune from VSOP87D.

    Args:
        jde: Julian Day (Ephemeris) at which to evaluate.

    Returns:
        Longitude [rad], latitude [rad] and distance [AU] of Neptune.

    Examples:
        ```python
        from vsop87jax.vsop87d import neptune
        c = neptune(2122820.0)  # December 19th, 1099
        c.longitude(), c.latitude(), c.distance()
        ```
    """
    return vsop87d_spherical(VSOP87D_TABLES[NEPTUNE_ID], jde)


_BRANCHES = tuple(functools.partial(vsop87d_spherical, table) for table in VSOP87D_TABLES)


def _concrete_planet_id(planet_id) -> int:
    if isinstance(planet_id, (bool, np.bool_)) or getattr(planet_id, "dtype", None) == np.bool_:
        raise ValueError(f"Unknown planet ID {planet_id!r}. Planet IDs are integers, not booleans")
    try:
        index = operator.index(planet_id)
    except TypeError as e:
        raise ValueError(f"Unknown planet ID {planet_id!r}. Planet IDs are integers") from e
    if not 0 <= index < len(VSOP87D_TABLES):
        raise ValueError(f"Unknown planet ID {index}. Must be in 0..{len(VSOP87D_TABLES) - 1}")
    return index


def planet_position_vsop87d(planet_id: int, jde: ArrayLike) -> SphericalCoordinates:
    """Heliocentric ecliptic coordinates of a planet from VSOP87D.

    General dispatcher that accepts a planet ID.  A concrete integer ID
    (Python ``int``, NumPy integer or an eager JAX integer scalar) is
    validated and selects the table directly.  A traced ID (e.g. under ``jax.jit`` or
    ``jax.vmap``) dispatches through ``jax.lax.switch``, which clamps
    out-of-range values to the nearest valid ID.

    Args:
        planet_id: Planet index. Use the module constants:
            ``MERCURY_ID=0``, ``VENUS_ID=1``, ``EARTH_ID=2``, ``MARS_ID=3``,
            ``JUPITER_ID=4``, ``SATURN_ID=5``, ``URANUS_ID=6``, ``NEPTUNE_ID=7``.
        jde: Julian Day (Ephemeris) at which to evaluate.

    Returns:
        Longitude [rad], latitude [rad] and distance [AU] of the planet.

    Raises:
        ValueError: If a concrete *planet_id* is a boolean, is not an
            integer, or is outside ``0..7``.

    Examples:
        ```python
        from vsop87jax.vsop87d import planet_position_vsop87d, MARS_ID
        c = planet_position_vsop87d(MARS_ID, 2451545.0)
        ```
    """
    if not isinstance(planet_id, jax.core.Tracer):
        return vsop87d_spherical(VSOP87D_TABLES[_concrete_planet_id(planet_id)], jde)

    jde = jnp.asarray(jde, dtype=get_dtype())
    return jax.lax.switch(planet_id, _BRANCHES, jde)
