"""Tests for VSOP87D planetary positions.

Validates known heliocentric coordinates for all eight major planets,
the longitude range, purity, continuity, and JIT / vmap / grad support.
"""

import math

import jax
import jax.numpy as jnp
import numpy as np
import pytest

from vsop87jax.constants import TWO_PI
from vsop87jax.vsop87d import (
    EARTH_ID,
    JUPITER_ID,
    MARS_ID,
    MERCURY_ID,
    NEPTUNE_ID,
    SATURN_ID,
    URANUS_ID,
    VENUS_ID,
    VSOP87D_TABLES,
    SphericalCoordinates,
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

_ANGLE_TOL = 1e-9  # rad
_DIST_TOL = 1e-6  # AU

_JD_J2000 = 2451545.0

_PLANET_FUNCS = {
    "mercury": mercury,
    "venus": venus,
    "earth": earth,
    "mars": mars,
    "jupiter": jupiter,
    "saturn": saturn,
    "uranus": uranus,
    "neptune": neptune,
}

_PLANET_IDS = {
    "mercury": MERCURY_ID,
    "venus": VENUS_ID,
    "earth": EARTH_ID,
    "mars": MARS_ID,
    "jupiter": JUPITER_ID,
    "saturn": SATURN_ID,
    "uranus": URANUS_ID,
    "neptune": NEPTUNE_ID,
}

# (JD, longitude [rad], latitude [rad], distance [AU]), one date per century
# between 1099 and 1799.
_REFERENCE = {
    "mercury": (2378495.0, 2.0737894888055, 0.1168184803679, 0.32339095329),
    "venus": (2341970.0, 5.3115708036119, -0.0455979904101, 0.72834075279),
    "earth": (2305445.0, 1.7006065938183, -0.0000016358579, 0.98312543762),
    "mars": (2268920.0, 1.0050966939443, 0.0066676098048, 1.51236226897),
    "jupiter": (2232395.0, 3.0889515349930, 0.0231157946960, 5.44915701443),
    "saturn": (2195870.0, 2.2948875822707, 0.0178533696907, 9.18575968237),
    "uranus": (2159345.0, 1.9333853935462, 0.0088045917989, 18.58414990436),
    "neptune": (2122820.0, 2.2124988266512, 0.0027498092771, 30.06536932263),
}

# At J2000.0 (t = 0) only the t**0 series contribute.
_REFERENCE_J2000 = {
    "mercury": (4.4293481036110, -0.0527573409201, 0.46647147507),
    "venus": (3.1870221832871, 0.0569782849045, 0.72021292527),
    "earth": (1.7519238681146, -0.0000039655716, 0.98332768191),
    "mars": (6.2735389982966, -0.0247779823702, 1.39120769251),
    "jupiter": (0.6334614186051, -0.0205001038742, 4.96538131542),
    "saturn": (0.7980038761293, -0.0401984149011, 9.18384837154),
    "uranus": (5.5225485802580, -0.0119527838106, 19.92404826672),
    "neptune": (5.3045629252260, 0.0042236789499, 30.12053283915),
}

# Heliocentric distance ranges (AU), perihelion to aphelion with margin.
_DISTANCE_RANGES_AU = {
    "mercury": (0.30, 0.48),
    "venus": (0.71, 0.73),
    "earth": (0.98, 1.02),
    "mars": (1.36, 1.67),
    "jupiter": (4.9, 5.5),
    "saturn": (9.0, 10.1),
    "uranus": (18.2, 20.2),
    "neptune": (29.7, 30.4),
}

_PLANETS = list(_PLANET_FUNCS)


def _wrapped_difference(a, b):
    """Signed angular difference ``a - b`` reduced to ``[-pi, pi)``."""
    return (a - b + math.pi) % TWO_PI - math.pi


# ===========================================================================
# Known values
# ===========================================================================

class TestReferenceValues:
    @pytest.mark.parametrize("name", _PLANETS)
    def test_reference_date(self, name):
        jd, lon, lat, dist = _REFERENCE[name]
        c = _PLANET_FUNCS[name](jd)
        assert c.lon == pytest.approx(lon, abs=_ANGLE_TOL)
        assert c.lat == pytest.approx(lat, abs=_ANGLE_TOL)
        assert c.dist == pytest.approx(dist, abs=_DIST_TOL)

    @pytest.mark.parametrize("name", _PLANETS)
    def test_j2000(self, name):
        lon, lat, dist = _REFERENCE_J2000[name]
        c = _PLANET_FUNCS[name](_JD_J2000)
        assert c.lon == pytest.approx(lon, abs=_ANGLE_TOL)
        assert c.lat == pytest.approx(lat, abs=_ANGLE_TOL)
        assert c.dist == pytest.approx(dist, abs=_DIST_TOL)

    def test_jupiter_accessors(self):
        c = jupiter(2232395.0)
        assert c.longitude() == pytest.approx(3.0889515350, abs=_ANGLE_TOL)
        assert c.latitude() == pytest.approx(0.0231157947, abs=_ANGLE_TOL)
        assert c.distance() == pytest.approx(5.449157, abs=_DIST_TOL)

    def test_accessors_in_degrees(self):
        c = earth(_JD_J2000)
        assert c.longitude(use_degrees=True) == pytest.approx(
            math.degrees(1.7519238681146), abs=1e-7
        )
        assert c.latitude(use_degrees=True) == pytest.approx(
            math.degrees(-0.0000039655716), abs=1e-7
        )

    def test_result_type(self):
        c = mars(_JD_J2000)
        assert isinstance(c, SphericalCoordinates)
        assert c._fields == ("lon", "lat", "dist")


# ===========================================================================
# Invariants
# ===========================================================================

class TestInvariants:
    @pytest.mark.parametrize("name", _PLANETS)
    def test_longitude_in_range(self, name):
        c = _PLANET_FUNCS[name](2460385.0)
        assert 0.0 <= float(c.lon) < TWO_PI

    @pytest.mark.parametrize("name", _PLANETS)
    def test_idempotent(self, name):
        first = _PLANET_FUNCS[name](2415020.0)
        second = _PLANET_FUNCS[name](2415020.0)
        assert float(first.lon) == float(second.lon)
        assert float(first.lat) == float(second.lat)
        assert float(first.dist) == float(second.dist)

    @pytest.mark.parametrize("name", _PLANETS)
    def test_distance_in_range_at_j2000(self, name):
        c = _PLANET_FUNCS[name](_JD_J2000)
        lo, hi = _DISTANCE_RANGES_AU[name]
        assert lo < float(c.dist) < hi

    @pytest.mark.parametrize("name", _PLANETS)
    def test_continuity(self, name):
        eps = 1e-3  # days
        func = _PLANET_FUNCS[name]
        for jd in (2122820.0, 2305445.0, _JD_J2000, 2460385.0):
            a = func(jd)
            b = func(jd + eps)
            assert abs(float(_wrapped_difference(b.lon, a.lon))) < 1e-3
            assert abs(float(b.lat - a.lat)) < 1e-4
            assert abs(float(b.dist - a.dist)) < 1e-5

    @pytest.mark.parametrize("name", _PLANETS)
    def test_wide_range_positive_distance(self, name):
        # +/- 3000 years around J2000
        jds = jnp.linspace(_JD_J2000 - 3000 * 365.25, _JD_J2000 + 3000 * 365.25, 121)
        c = jax.vmap(_PLANET_FUNCS[name])(jds)
        assert jnp.all(c.dist > 0.0)
        assert jnp.all(c.lon >= 0.0)
        assert jnp.all(c.lon < TWO_PI)
        assert jnp.all(jnp.isfinite(c.lat))

    def test_planet_ordering_by_distance(self):
        """Heliocentric distances follow Mercury < Venus < ... < Neptune."""
        distances = [float(_PLANET_FUNCS[name](_JD_J2000).dist) for name in _PLANETS]
        for i in range(len(distances) - 1):
            assert distances[i] < distances[i + 1]

    def test_longitude_wrap_is_one_full_turn(self):
        """Across the 0/2pi boundary longitude drops by 2pi minus its daily motion."""
        jds = _JD_J2000 + jnp.arange(0.0, 200.0, 1.0)
        lon = jax.vmap(mercury)(jds).lon
        steps = jnp.diff(lon)
        wraps = steps < -math.pi

        assert int(jnp.sum(wraps)) >= 2
        # Mercury moves between ~0.04 and ~0.11 rad per day
        unwrapped = jnp.where(wraps, steps + TWO_PI, steps)
        assert jnp.all(unwrapped > 0.0)
        assert jnp.all(unwrapped < 0.2)

    def test_non_finite_input_propagates(self):
        c = saturn(jnp.nan)
        assert jnp.isnan(c.lon)
        assert jnp.isnan(c.lat)
        assert jnp.isnan(c.dist)


# ===========================================================================
# Dispatcher
# ===========================================================================

class TestDispatcher:
    @pytest.mark.parametrize("name", _PLANETS)
    def test_dispatcher_matches_individual(self, name):
        jd = 2451000.5
        individual = _PLANET_FUNCS[name](jd)
        general = planet_position_vsop87d(_PLANET_IDS[name], jd)
        assert float(individual.lon) == float(general.lon)
        assert float(individual.lat) == float(general.lat)
        assert float(individual.dist) == float(general.dist)

    def test_dispatcher_matches_generic_assembler(self):
        c = vsop87d_spherical(VSOP87D_TABLES[URANUS_ID], 2159345.0)
        assert c.lon == pytest.approx(_REFERENCE["uranus"][1], abs=_ANGLE_TOL)

    @pytest.mark.parametrize(
        "planet_id",
        [-1, 8, 100, np.int64(9), np.int32(-1), jnp.int32(9), True, False, np.bool_(True), 2.0],
    )
    def test_invalid_planet_id_raises(self, planet_id):
        with pytest.raises(ValueError, match="Unknown planet ID"):
            planet_position_vsop87d(planet_id, _JD_J2000)

    @pytest.mark.parametrize("planet_id", [np.int64(JUPITER_ID), jnp.int32(JUPITER_ID)])
    def test_concrete_integer_ids_accepted(self, planet_id):
        jd, lon, lat, dist = _REFERENCE["jupiter"]
        c = planet_position_vsop87d(planet_id, jd)
        assert c.lon == pytest.approx(lon, abs=_ANGLE_TOL)
        assert c.dist == pytest.approx(dist, abs=_DIST_TOL)

    def test_traced_planet_id(self):
        jd, lon, lat, dist = _REFERENCE["jupiter"]
        c = jax.jit(planet_position_vsop87d)(jnp.int32(JUPITER_ID), jd)
        assert c.lon == pytest.approx(lon, abs=_ANGLE_TOL)
        assert c.lat == pytest.approx(lat, abs=_ANGLE_TOL)
        assert c.dist == pytest.approx(dist, abs=_DIST_TOL)

    def test_vmap_over_planet_ids(self):
        ids = jnp.arange(8)
        c = jax.vmap(planet_position_vsop87d, in_axes=(0, None))(ids, _JD_J2000)
        assert c.dist.shape == (8,)
        for name, planet_id in _PLANET_IDS.items():
            _, _, dist = _REFERENCE_J2000[name]
            assert float(c.dist[planet_id]) == pytest.approx(dist, abs=_DIST_TOL)


# ===========================================================================
# JAX integration
# ===========================================================================

class TestJAXIntegration:
    @pytest.mark.parametrize("name", _PLANETS)
    def test_jit_matches_eager(self, name):
        jd = _REFERENCE[name][0]
        eager = _PLANET_FUNCS[name](jd)
        compiled = jax.jit(_PLANET_FUNCS[name])(jd)
        assert float(compiled.lon) == pytest.approx(float(eager.lon), abs=1e-12)
        assert float(compiled.lat) == pytest.approx(float(eager.lat), abs=1e-12)
        assert float(compiled.dist) == pytest.approx(float(eager.dist), abs=1e-12)

    def test_vmap_over_dates(self):
        jds = jnp.array([2122820.0, 2232395.0, _JD_J2000, 2460385.0])
        batched = jax.vmap(jupiter)(jds)
        assert batched.lon.shape == (4,)
        assert batched.lat.shape == (4,)
        assert batched.dist.shape == (4,)
        single = jupiter(2232395.0)
        assert float(batched.lon[1]) == pytest.approx(float(single.lon), abs=1e-12)

    def test_array_input_without_vmap(self):
        jds = jnp.array([2232395.0, _JD_J2000])
        c = jupiter(jds)
        assert c.lon.shape == (2,)
        assert float(c.lon[0]) == pytest.approx(_REFERENCE["jupiter"][1], abs=_ANGLE_TOL)

    @pytest.mark.parametrize("name", _PLANETS)
    def test_grad_longitude_prograde(self, name):
        """Heliocentric longitude always increases with time."""
        rate = jax.grad(lambda jd: _PLANET_FUNCS[name](jd).lon)(_JD_J2000)
        assert jnp.isfinite(rate)
        assert float(rate) > 0.0

    def test_grad_matches_mean_motion(self):
        # Earth: ~2pi / 365.25 rad per day
        rate = jax.grad(lambda jd: earth(jd).lon)(_JD_J2000)
        assert float(rate) == pytest.approx(TWO_PI / 365.25, rel=0.05)
