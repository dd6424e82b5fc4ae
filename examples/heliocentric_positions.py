# /// script
# requires-python = ">=3.11"
# dependencies = ["typer>=0.9.0", "vsop87jax"]
#
# [tool.uv.sources]
# vsop87jax = { path = ".." }
# ///
"""Print VSOP87D heliocentric positions of the eight major planets.

Evaluates every planet at one Julian Day (Ephemeris), then optionally
tabulates a single planet over a span of days with a JIT-compiled vmap and
reports its instantaneous longitude rate from ``jax.grad``.

Requires vsop87jax to be installed (``uv pip install -e .`` from the repo root).

Usage:
    uv run examples/heliocentric_positions.py [OPTIONS]

Examples:
    # All planets at J2000.0
    uv run examples/heliocentric_positions.py

    # All planets at a given date, angles in degrees
    uv run examples/heliocentric_positions.py --jd 2460385.0 --degrees

    # Mars every 10 days for a year
    uv run examples/heliocentric_positions.py --planet mars --days 365 --step 10
"""

import enum
import time
from typing import Annotated

import jax
import jax.numpy as jnp
import typer

from vsop87jax import JD_J2000, RAD2DEG
from vsop87jax.vsop87d import (
    EARTH_ID,
    JUPITER_ID,
    MARS_ID,
    MERCURY_ID,
    NEPTUNE_ID,
    SATURN_ID,
    URANUS_ID,
    VENUS_ID,
    planet_position_vsop87d,
)


class Planet(str, enum.Enum):
    mercury = "mercury"
    venus = "venus"
    earth = "earth"
    mars = "mars"
    jupiter = "jupiter"
    saturn = "saturn"
    uranus = "uranus"
    neptune = "neptune"


_IDS = {
    Planet.mercury: MERCURY_ID,
    Planet.venus: VENUS_ID,
    Planet.earth: EARTH_ID,
    Planet.mars: MARS_ID,
    Planet.jupiter: JUPITER_ID,
    Planet.saturn: SATURN_ID,
    Planet.uranus: URANUS_ID,
    Planet.neptune: NEPTUNE_ID,
}


def main(
    jd: Annotated[float, typer.Option(help="Julian Day (Ephemeris)")] = JD_J2000,
    degrees: Annotated[bool, typer.Option(help="Print angles in degrees")] = False,
    planet: Annotated[
        Planet | None, typer.Option(help="Planet to tabulate over time")
    ] = None,
    days: Annotated[float, typer.Option(help="Tabulation span in days")] = 0.0,
    step: Annotated[float, typer.Option(help="Tabulation step in days")] = 1.0,
) -> None:
    unit = "deg" if degrees else "rad"

    print(f"── Heliocentric ecliptic positions at JDE {jd} ──")
    print(f"  {'planet':<8} {'lon [' + unit + ']':>16} {'lat [' + unit + ']':>16} {'dist [AU]':>14}")
    for p in Planet:
        c = planet_position_vsop87d(_IDS[p], jd)
        print(
            f"  {p.value:<8} {float(c.longitude(degrees)):16.10f}"
            f" {float(c.latitude(degrees)):16.10f} {float(c.distance()):14.9f}"
        )

    if planet is None:
        return

    planet_id = _IDS[planet]

    if days > 0.0:
        print(f"\n── {planet.value} from JDE {jd} for {days} days (step {step}) ──")
        jds = jd + jnp.arange(0.0, days + step / 2, step)
        table = jax.jit(jax.vmap(lambda x: planet_position_vsop87d(planet_id, x)))

        t0 = time.perf_counter()
        coords = table(jds)
        coords.dist.block_until_ready()
        print(f"  Evaluated {jds.shape[0]} epochs in {time.perf_counter() - t0:.2f}s (incl. compile)")

        for x, lon, lat, dist in zip(jds, coords.longitude(degrees), coords.latitude(degrees), coords.dist):
            print(f"  {float(x):12.2f} {float(lon):16.10f} {float(lat):16.10f} {float(dist):14.9f}")

    rate = jax.grad(lambda x: planet_position_vsop87d(planet_id, x).lon)(jnp.asarray(jd))
    print(f"\n  {planet.value} longitude rate at JDE {jd}: {float(rate) * RAD2DEG:.6f} deg/day")


if __name__ == "__main__":
    typer.run(main)
