"""Type definitions for the VSOP87D solution.

- :class:`SphericalCoordinates`: Heliocentric ecliptic longitude, latitude
  and radius vector of a planet.
- :class:`SeriesTable`: Read-only descriptor of one planet's periodic terms,
  laid out as a flat term arena plus a ``(start, stop)`` index per
  ``(coordinate, power)`` slot.

Both types are :class:`~typing.NamedTuple` instances.  ``SphericalCoordinates``
is a JAX pytree, so it can be returned from ``jax.jit`` / ``jax.vmap`` /
``jax.lax.switch``.  ``SeriesTable`` is static data closed over by the
evaluation functions, never traced.
"""

from __future__ import annotations

from typing import NamedTuple, Sequence

import numpy as np
from jax import Array

from vsop87jax.utils import from_radians

# Coordinate letters, in table order: longitude, latitude, radius vector.
COORDINATES: tuple[str, ...] = ("L", "B", "R")

# Highest power of t carried by any VSOP87 series.
MAX_POWER: int = 5


class SphericalCoordinates(NamedTuple):
    """Heliocentric ecliptic spherical coordinates of a planet.

    Referred to the ecliptic and equinox of the date (VSOP87D).

    Attributes:
        lon: Ecliptic longitude in radians, always in ``[0, 2pi)``.
        lat: Ecliptic latitude in radians.  Not clamped.
        dist: Radius vector (heliocentric distance) in astronomical units.
    """

    lon: Array
    lat: Array
    dist: Array

    def longitude(self, use_degrees: bool = False) -> Array:
        """Ecliptic longitude, in radians (default) or degrees."""
        return from_radians(self.lon, use_degrees)

    def latitude(self, use_degrees: bool = False) -> Array:
        """Ecliptic latitude, in radians (default) or degrees."""
        return from_radians(self.lat, use_degrees)

    def distance(self) -> Array:
        """Radius vector in astronomical units."""
        return self.dist


class SeriesTable(NamedTuple):
    """Periodic terms of one planet, indexed by coordinate and power of *t*.

    Attributes:
        name: Planet name, e.g. ``"Jupiter"``.
        terms: Term arena of shape ``(N, 3)``, float64.  Each row is
            ``(amplitude, phase [rad], frequency [rad / Julian millennium])``.
        slot_ranges: ``slot_ranges[c][n]`` is the ``(start, stop)`` row range in
            ``terms`` of the ``t**n`` series of coordinate ``COORDINATES[c]``.
            The length of ``slot_ranges[c]`` is the number of powers the solution
            uses for that coordinate.
    """

    name: str
    terms: np.ndarray
    slot_ranges: tuple[tuple[tuple[int, int], ...], ...]

    @classmethod
    def from_slots(
        cls,
        name: str,
        L: Sequence[Sequence[tuple[float, float, float]]],
        B: Sequence[Sequence[tuple[float, float, float]]],
        R: Sequence[Sequence[tuple[float, float, float]]],
    ) -> SeriesTable:
        """Pack per-slot term sequences into a single arena.

        Args:
            name: Planet name.
            L: Longitude series, one term sequence per power of *t*.
            B: Latitude series, one term sequence per power of *t*.
            R: Radius vector series, one term sequence per power of *t*.

        Returns:
            The packed table.

        Raises:
            ValueError: If a coordinate has more than ``MAX_POWER + 1``
                power slots.
        """
        rows: list[tuple[float, float, float]] = []
        slot_ranges = []
        for letter, series in zip(COORDINATES, (L, B, R)):
            if len(series) > MAX_POWER + 1:
                raise ValueError(
                    f"{name} {letter} series has {len(series)} powers; "
                    f"at most {MAX_POWER + 1} are supported"
                )
            ranges = []
            for slot in series:
                start = len(rows)
                rows.extend(slot)
                ranges.append((start, len(rows)))
            slot_ranges.append(tuple(ranges))

        terms = np.asarray(rows, dtype=np.float64).reshape(-1, 3)
        terms.setflags(write=False)
        return cls(name, terms, tuple(slot_ranges))

    @property
    def n_terms(self) -> int:
        """Total number of terms in the table."""
        return self.terms.shape[0]

    def powers(self, coordinate: str) -> int:
        """Number of power slots the solution uses for *coordinate*.

        Args:
            coordinate: One of ``"L"``, ``"B"``, ``"R"``.

        Returns:
            Slot count; the highest power used is one less.

        Raises:
            ValueError: If *coordinate* is not a known coordinate letter.
        """
        return len(self.slot_ranges[_coordinate_index(coordinate)])

    def slot(self, coordinate: str, power: int) -> np.ndarray:
        """Terms of the ``t**power`` series of *coordinate*.

        Powers the solution does not use return an empty ``(0, 3)`` array.

        Raises:
            ValueError: If *coordinate* is unknown or *power* is outside
                ``0..MAX_POWER``.
        """
        ranges = self.slot_ranges[_coordinate_index(coordinate)]
        if not 0 <= power <= MAX_POWER:
            raise ValueError(f"Power must be in 0..{MAX_POWER}, got {power}")
        if power >= len(ranges):
            return self.terms[0:0]
        start, stop = ranges[power]
        return self.terms[start:stop]

    def slots(self, coordinate: str) -> tuple[np.ndarray, ...]:
        """All used power slots of *coordinate*, lowest power first."""
        return tuple(
            self.slot(coordinate, power) for power in range(self.powers(coordinate))
        )


def _coordinate_index(coordinate: str) -> int:
    try:
        return COORDINATES.index(coordinate)
    except ValueError:
        raise ValueError(
            f"Unknown coordinate {coordinate!r}. Must be one of: {', '.join(COORDINATES)}"
        ) from None
