from __future__ import annotations

import jax
import jax.numpy as jnp
from jax.typing import ArrayLike

from .config import get_dtype
from .constants import DAYS_PER_JULIAN_MILLENNIUM, JD_J2000


def julian_millennia_from_j2000(jde: ArrayLike) -> jax.Array:
    """Convert a Julian Day to Julian millennia elapsed since J2000.0.

    This is the independent variable *t* of every VSOP87 series:
    ``t = (jde - 2451545.0) / 365250.0``.  No range check is made; the
    series degrade smoothly far from the epoch.  Non-finite input
    propagates as NaN/Inf.

    Args:
        jde (ArrayLike): Julian Day (Ephemeris), scalar or array.

    Returns:
        Julian millennia from J2000.0, in the configured float dtype.
            Exactly ``0`` at ``jde = 2451545.0``.

    References:

        1. J. Meeus, *Astronomical Algorithms (2nd Ed.)*, 1998, ch. 32.
    """
    _float = get_dtype()
    jde = jnp.asarray(jde, dtype=_float)
    return (jde - _float(JD_J2000)) / _float(DAYS_PER_JULIAN_MILLENNIUM)


def julian_millennia_to_jd(t: ArrayLike) -> jax.Array:
    """Convert Julian millennia from J2000.0 back to a Julian Day.

    Args:
        t (ArrayLike): Julian millennia from J2000.0.

    Returns:
        Julian Day, in the configured float dtype.
    """
    _float = get_dtype()
    t = jnp.asarray(t, dtype=_float)
    return t * _float(DAYS_PER_JULIAN_MILLENNIUM) + _float(JD_J2000)
