"""Angle helpers.

``from_radians`` wraps the ``use_degrees`` convention used throughout
vsop87jax, providing JAX-traceable radian/degree conversion via
``jnp.where``.  ``wrap_to_two_pi`` reduces an angle into ``[0, 2pi)``.
"""

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from vsop87jax.config import get_dtype
from vsop87jax.constants import TWO_PI


def from_radians(angle: ArrayLike, use_degrees: bool) -> Array:
    """Convert angle from radians to degrees if ``use_degrees`` is True.

    Args:
        angle (ArrayLike): Angle in radians.
        use_degrees (bool): If ``True``, convert to degrees.

    Returns:
        Angle in radians or degrees.
    """
    return jnp.where(use_degrees, jnp.rad2deg(angle), angle)


def wrap_to_two_pi(angle: ArrayLike) -> Array:
    """Reduce an angle into ``[0, 2pi)``.

    The remainder is taken with truncated (C ``fmod``) semantics, which keeps
    the sign of *angle*, and a negative remainder is shifted up by one turn.
    A remainder so small that the shift rounds to exactly ``2pi`` maps to 0.

    Args:
        angle (ArrayLike): Angle in radians, any sign or magnitude.

    Returns:
        Equivalent angle in ``[0, 2pi)`` radians.
    """
    two_pi = get_dtype()(TWO_PI)
    reduced = jnp.fmod(angle, two_pi)
    wrapped = jnp.where(reduced < 0.0, reduced + two_pi, reduced)
    return jnp.where(wrapped >= two_pi, jnp.zeros_like(wrapped), wrapped)
