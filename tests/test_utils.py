"""Tests for the angle helpers in vsop87jax.utils."""

import jax
import jax.numpy as jnp
import pytest

from vsop87jax.constants import RAD2DEG, TWO_PI
from vsop87jax.utils import from_radians, wrap_to_two_pi


class TestFromRadians:
    def test_radians_passthrough(self):
        assert from_radians(1.25, False) == pytest.approx(1.25, abs=1e-15)

    def test_degrees(self):
        assert from_radians(1.25, True) == pytest.approx(1.25 * RAD2DEG, abs=1e-12)


class TestWrapToTwoPi:
    def test_in_range_unchanged(self):
        assert wrap_to_two_pi(1.5) == pytest.approx(1.5, abs=1e-15)

    def test_zero(self):
        assert float(wrap_to_two_pi(0.0)) == 0.0

    def test_above_two_pi(self):
        assert wrap_to_two_pi(TWO_PI + 0.25) == pytest.approx(0.25, abs=1e-12)

    def test_many_turns(self):
        assert wrap_to_two_pi(1000.0 * TWO_PI + 3.0) == pytest.approx(3.0, abs=1e-9)

    def test_negative(self):
        assert wrap_to_two_pi(-0.25) == pytest.approx(TWO_PI - 0.25, abs=1e-12)

    def test_large_negative(self):
        assert wrap_to_two_pi(-7.0 * TWO_PI - 1.0) == pytest.approx(TWO_PI - 1.0, abs=1e-9)

    def test_exact_two_pi_wraps_to_zero(self):
        assert float(wrap_to_two_pi(TWO_PI)) == 0.0

    @pytest.mark.parametrize("angle", [-1e-17, -float(jnp.finfo(jnp.float64).tiny)])
    def test_tiny_negative_stays_below_two_pi(self, angle):
        wrapped = float(wrap_to_two_pi(angle))
        assert 0.0 <= wrapped < TWO_PI
        assert wrapped == 0.0

    def test_tiny_negative_in_array(self):
        wrapped = wrap_to_two_pi(jnp.array([-1e-17, -1.0, 0.0]))
        assert jnp.all(wrapped < TWO_PI)
        assert float(wrapped[0]) == 0.0
        assert float(wrapped[1]) == pytest.approx(TWO_PI - 1.0, abs=1e-12)

    def test_array_range(self):
        angles = jnp.linspace(-50.0, 50.0, 1001)
        wrapped = wrap_to_two_pi(angles)
        assert jnp.all(wrapped >= 0.0)
        assert jnp.all(wrapped < TWO_PI)
        # Same angle modulo a full turn
        assert jnp.allclose(jnp.cos(wrapped), jnp.cos(angles), atol=1e-12)
        assert jnp.allclose(jnp.sin(wrapped), jnp.sin(angles), atol=1e-12)

    def test_jit(self):
        assert jax.jit(wrap_to_two_pi)(-1.0) == pytest.approx(TWO_PI - 1.0, abs=1e-12)

    def test_nan_propagates(self):
        assert jnp.isnan(wrap_to_two_pi(jnp.nan))
