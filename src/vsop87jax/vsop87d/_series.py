"""Poisson-series evaluation shared by every planet.

A VSOP87 coordinate is a polynomial in *t* whose coefficients are
trigonometric series::

    X(t) = sum_n t**n * sum_i A_ni * cos(B_ni + C_ni * t)

``evaluate_series`` computes one inner sum, ``evaluate_polynomial``
recombines the inner sums by Horner's rule and ``evaluate_coordinate``
chains the two for a full coordinate.

All functions accept a scalar or an array of *t* values and are
compatible with ``jax.jit``, ``jax.vmap`` and ``jax.grad``.
"""

from __future__ import annotations

from typing import Sequence

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from vsop87jax.config import get_dtype


def evaluate_series(t: ArrayLike, terms: ArrayLike) -> Array:
    """Sum one series of periodic terms, ``sum(A * cos(B + C * t))``.

    Args:
        t: Julian millennia from J2000.0, scalar or array.
        terms: Term rows ``(A, B, C)``, shape ``(N, 3)``.  ``N`` may be zero,
            in which case the sum is exactly zero.

    Returns:
        The partial sum, same shape as *t*.

    Examples:
        ```python
        import numpy as np
        from vsop87jax.vsop87d import evaluate_series
        evaluate_series(0.0, np.array([[2.0, 0.0, 1.0], [1.0, np.pi, 0.0]]))
        # 1.0
        ```
    """
    _float = get_dtype()
    t = jnp.asarray(t, dtype=_float)
    terms = jnp.asarray(terms, dtype=_float).reshape(-1, 3)

    amplitude = terms[:, 0]
    phase = terms[:, 1]
    frequency = terms[:, 2]

    # Broadcast over the term axis, which is the last one
    return jnp.sum(amplitude * jnp.cos(phase + frequency * t[..., None]), axis=-1)


def evaluate_polynomial(t: ArrayLike, coefficients: Sequence[ArrayLike]) -> Array:
    """Evaluate ``sum_k coefficients[k] * t**k`` by Horner's rule.

    Args:
        t: Polynomial variable, scalar or array.
        coefficients: Coefficients from the constant term upwards.  An
            empty sequence evaluates to zero.

    Returns:
        Polynomial value, same shape as *t*.
    """
    t = jnp.asarray(t, dtype=get_dtype())
    result = jnp.zeros_like(t)
    for coefficient in reversed(coefficients):
        result = result * t + coefficient
    return result


def evaluate_coordinate(t: ArrayLike, slots: Sequence[ArrayLike]) -> Array:
    """Evaluate one VSOP87 coordinate from its per-power term series.

    Args:
        t: Julian millennia from J2000.0, scalar or array.
        slots: ``slots[n]`` holds the terms multiplying ``t**n``.

    Returns:
        Coordinate value, same shape as *t*.
    """
    return evaluate_polynomial(t, [evaluate_series(t, terms) for terms in slots])
