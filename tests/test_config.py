"""Tests for the vsop87jax.config module."""

import logging

import jax.numpy as jnp
import numpy as np
import pytest

from vsop87jax.config import get_dtype, set_dtype
from vsop87jax.time import julian_millennia_from_j2000
from vsop87jax.vsop87d import jupiter


@pytest.fixture(autouse=True)
def reset_dtype():
    """Restore the float64 default after each test."""
    yield
    set_dtype(jnp.float64)


class TestGetSetDtype:
    def test_default_dtype(self):
        assert get_dtype() == jnp.float64

    def test_x64_enabled(self):
        assert jnp.asarray(1.0).dtype == jnp.float64

    def test_set_float32(self):
        set_dtype(jnp.float32)
        assert get_dtype() == jnp.float32

    def test_set_float16(self):
        set_dtype(jnp.float16)
        assert get_dtype() == jnp.float16

    def test_set_bfloat16(self):
        set_dtype(jnp.bfloat16)
        assert get_dtype() == jnp.bfloat16

    def test_roundtrip(self):
        for dtype in (jnp.float16, jnp.bfloat16, jnp.float32, jnp.float64):
            set_dtype(dtype)
            assert get_dtype() == dtype

    def test_invalid_dtype_raises(self):
        with pytest.raises(ValueError, match="Unsupported dtype"):
            set_dtype(jnp.int32)

    def test_invalid_dtype_string_raises(self):
        with pytest.raises(ValueError, match="Unsupported dtype"):
            set_dtype("int32")

    def test_set_by_name(self):
        set_dtype("float32")
        assert get_dtype() is jnp.float32
        set_dtype("float64")
        assert get_dtype() is jnp.float64

    def test_numpy_scalar_type_accepted(self):
        set_dtype(np.float32)
        assert get_dtype() is jnp.float32

    def test_change_is_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="vsop87jax.config"):
            set_dtype(jnp.float32)
        assert "float64 to float32" in caplog.text

    def test_invalid_dtype_keeps_previous(self):
        set_dtype(jnp.float32)
        with pytest.raises(ValueError):
            set_dtype(jnp.int8)
        assert get_dtype() is jnp.float32


class TestDtypePropagation:
    def test_time_variable_float32(self):
        set_dtype(jnp.float32)
        t = julian_millennia_from_j2000(2451545.0)
        assert t.dtype == jnp.float32

    def test_time_variable_float64(self):
        t = julian_millennia_from_j2000(2451545.0)
        assert t.dtype == jnp.float64

    def test_planet_float32(self):
        set_dtype(jnp.float32)
        c = jupiter(2451545.0)
        assert c.lon.dtype == jnp.float32
        assert c.lat.dtype == jnp.float32
        assert c.dist.dtype == jnp.float32

    def test_planet_float64(self):
        c = jupiter(2451545.0)
        assert c.lon.dtype == jnp.float64
        assert c.lat.dtype == jnp.float64
        assert c.dist.dtype == jnp.float64
