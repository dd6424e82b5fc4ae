"""VSOP87D series tables for the eight major planets.

Packs the compiled-in coefficient modules into one read-only
:class:`SeriesTable` per planet at import time.  ``VSOP87D_TABLES`` is
indexed by the planet ID constants below.
"""

from __future__ import annotations

import logging

from vsop87jax.vsop87d._coefficients import (
    earth,
    jupiter,
    mars,
    mercury,
    neptune,
    saturn,
    uranus,
    venus,
)
from vsop87jax.vsop87d._types import SeriesTable

logger = logging.getLogger(__name__)

# Planet ID constants
MERCURY_ID: int = 0
VENUS_ID: int = 1
EARTH_ID: int = 2
MARS_ID: int = 3
JUPITER_ID: int = 4
SATURN_ID: int = 5
URANUS_ID: int = 6
NEPTUNE_ID: int = 7


def _pack(name: str, module) -> SeriesTable:
    table = SeriesTable.from_slots(name, module.L, module.B, module.R)
    logger.debug(
        "Packed VSOP87D %s series: %d terms, powers L=%d B=%d R=%d",
        name,
        table.n_terms,
        table.powers("L"),
        table.powers("B"),
        table.powers("R"),
    )
    return table


VSOP87D_TABLES: tuple[SeriesTable, ...] = (
    _pack("Mercury", mercury),
    _pack("Venus", venus),
    _pack("Earth", earth),
    _pack("Mars", mars),
    _pack("Jupiter", jupiter),
    _pack("Saturn", saturn),
    _pack("Uranus", uranus),
    _pack("Neptune", neptune),
)
