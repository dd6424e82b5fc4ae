import jax.numpy as jnp
import pytest

from vsop87jax.config import set_dtype


@pytest.fixture(autouse=True)
def _ensure_float64():
    """Set float64 precision before every test.

    Tests that switch precision (e.g. test_config.py) restore it through
    this fixture on the next test, including under pytest-xdist workers.
    """
    set_dtype(jnp.float64)
