"""Tests for the VSOP87 series engine.

Covers single-series summation, Horner recombination and their
composition, independently of any planet table.
"""

import math

import jax
import jax.numpy as jnp
import numpy as np
import pytest

from vsop87jax.vsop87d import (
    evaluate_coordinate,
    evaluate_polynomial,
    evaluate_series,
)

_TERMS = np.array(
    [
        [2.0, 0.0, 0.0],
        [0.5, 1.0, 10.0],
        [0.25, -0.5, 100.0],
    ]
)


def _reference_series(t, terms):
    return sum(a * math.cos(b + c * t) for a, b, c in terms)


# ===========================================================================
# evaluate_series
# ===========================================================================

class TestEvaluateSeries:
    def test_constant_term(self):
        assert evaluate_series(0.7, [[3.5, 0.0, 0.0]]) == pytest.approx(3.5, abs=1e-15)

    def test_phase_only(self):
        assert evaluate_series(0.0, [[2.0, math.pi, 0.0]]) == pytest.approx(-2.0, abs=1e-15)

    def test_matches_reference_sum(self):
        for t in (-0.9, -0.1, 0.0, 0.3, 2.5):
            assert evaluate_series(t, _TERMS) == pytest.approx(
                _reference_series(t, _TERMS), abs=1e-14
            )

    def test_empty_series_is_zero(self):
        assert float(evaluate_series(0.42, np.empty((0, 3)))) == 0.0

    def test_order_independent(self):
        forward = evaluate_series(0.37, _TERMS)
        backward = evaluate_series(0.37, _TERMS[::-1])
        assert forward == pytest.approx(float(backward), abs=1e-15)

    def test_array_of_times(self):
        ts = jnp.array([-0.5, 0.0, 0.5, 1.0])
        values = evaluate_series(ts, _TERMS)
        assert values.shape == (4,)
        for t, value in zip(ts.tolist(), values.tolist()):
            assert value == pytest.approx(_reference_series(t, _TERMS), abs=1e-14)

    def test_jit(self):
        eager = evaluate_series(0.25, _TERMS)
        compiled = jax.jit(lambda t: evaluate_series(t, _TERMS))(0.25)
        assert float(eager) == pytest.approx(float(compiled), abs=1e-15)

    def test_grad(self):
        # d/dt sum(A cos(B + C t)) = -sum(A C sin(B + C t))
        t = 0.3
        expected = -sum(a * c * math.sin(b + c * t) for a, b, c in _TERMS)
        grad = jax.grad(lambda x: evaluate_series(x, _TERMS))(t)
        assert grad == pytest.approx(expected, rel=1e-12)

    def test_nan_propagates(self):
        assert jnp.isnan(evaluate_series(jnp.nan, _TERMS))


# ===========================================================================
# evaluate_polynomial
# ===========================================================================

class TestEvaluatePolynomial:
    def test_constant(self):
        assert evaluate_polynomial(5.0, [1.5]) == pytest.approx(1.5, abs=1e-15)

    def test_matches_power_sum(self):
        coefficients = [1.0, -2.0, 0.5, 3.0, -0.25, 0.125]
        for t in (-1.3, -0.6, 0.0, 0.4, 2.0):
            expected = sum(c * t**k for k, c in enumerate(coefficients))
            assert evaluate_polynomial(t, coefficients) == pytest.approx(expected, abs=1e-12)

    def test_empty_is_zero(self):
        assert float(evaluate_polynomial(0.8, [])) == 0.0

    def test_zero_t_returns_constant_term(self):
        assert float(evaluate_polynomial(0.0, [4.25, 100.0, -7.0])) == 4.25

    def test_array_of_times(self):
        ts = jnp.array([0.0, 1.0, 2.0])
        values = evaluate_polynomial(ts, [1.0, 1.0, 1.0])
        assert jnp.allclose(values, jnp.array([1.0, 3.0, 7.0]), atol=1e-15)


# ===========================================================================
# evaluate_coordinate
# ===========================================================================

class TestEvaluateCoordinate:
    def test_composition(self):
        slots = [_TERMS, _TERMS[:2], _TERMS[2:]]
        t = -0.45
        expected = sum(
            _reference_series(t, terms) * t**k for k, terms in enumerate(slots)
        )
        assert evaluate_coordinate(t, slots) == pytest.approx(expected, abs=1e-14)

    def test_empty_higher_power_contributes_nothing(self):
        t = 0.65
        with_empty = evaluate_coordinate(t, [_TERMS, np.empty((0, 3))])
        without = evaluate_coordinate(t, [_TERMS])
        assert float(with_empty) == pytest.approx(float(without), abs=1e-15)

    def test_vmap(self):
        slots = [_TERMS, _TERMS]
        ts = jnp.linspace(-1.0, 1.0, 7)
        batched = jax.vmap(lambda t: evaluate_coordinate(t, slots))(ts)
        direct = evaluate_coordinate(ts, slots)
        assert batched.shape == (7,)
        assert jnp.allclose(batched, direct, atol=1e-14)
