import math

import jax
import jax.numpy as jnp
import pytest

from vsop87jax.constants import DAYS_PER_JULIAN_MILLENNIUM, JD_J2000
from vsop87jax.time import julian_millennia_from_j2000, julian_millennia_to_jd


def test_julian_millennia_at_j2000_is_exactly_zero():
    assert float(julian_millennia_from_j2000(2451545.0)) == 0.0


def test_julian_millennia_one_millennium():
    t = julian_millennia_from_j2000(JD_J2000 + DAYS_PER_JULIAN_MILLENNIUM)
    assert t == pytest.approx(1.0, abs=1e-15)


def test_julian_millennia_before_epoch_is_negative():
    # 1399-12-19
    t = julian_millennia_from_j2000(2232395.0)
    assert t == pytest.approx(-0.6, abs=1e-12)


def test_julian_millennia_array_input():
    jds = jnp.array([2451545.0, 2451545.0 + 365250.0, 2451545.0 - 365250.0])
    t = julian_millennia_from_j2000(jds)
    assert t.shape == (3,)
    assert jnp.allclose(t, jnp.array([0.0, 1.0, -1.0]), atol=1e-15)


def test_julian_millennia_far_from_epoch_not_rejected():
    t = julian_millennia_from_j2000(0.0)
    assert t == pytest.approx(-2451545.0 / 365250.0, rel=1e-15)


def test_julian_millennia_nan_propagates():
    assert math.isnan(float(julian_millennia_from_j2000(float("nan"))))


def test_julian_millennia_inf_propagates():
    assert math.isinf(float(julian_millennia_from_j2000(float("inf"))))


def test_julian_millennia_jit():
    t_eager = julian_millennia_from_j2000(2460385.0)
    t_jit = jax.jit(julian_millennia_from_j2000)(2460385.0)
    assert float(t_eager) == float(t_jit)


def test_julian_millennia_to_jd():
    assert julian_millennia_to_jd(0.0) == pytest.approx(2451545.0, abs=1e-9)
    assert julian_millennia_to_jd(-0.6) == pytest.approx(2232395.0, abs=1e-6)


def test_julian_millennia_roundtrip():
    jd = 2305445.0
    assert julian_millennia_to_jd(julian_millennia_from_j2000(jd)) == pytest.approx(jd, abs=1e-6)
