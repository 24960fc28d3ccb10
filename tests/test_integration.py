"""Tests for fixed-order Gauss-Legendre quadrature."""

import numpy as np
import jax
import jax.numpy as jnp
import pytest

from cosmodist.core.integration import DEFAULT_ORDER, fixed_quad, gauss_legendre


class TestGaussLegendre:

    def test_nodes_and_weights(self):
        nodes, weights = gauss_legendre(DEFAULT_ORDER)
        assert nodes.shape == (DEFAULT_ORDER,)
        np.testing.assert_allclose(jnp.sum(weights), 2.0, rtol=1e-12)
        assert np.all(np.abs(nodes) < 1)

    def test_cached(self):
        assert gauss_legendre(50) is gauss_legendre(50)


class TestFixedQuad:

    @pytest.mark.parametrize("n", [5, 50, DEFAULT_ORDER])
    def test_polynomial_exact(self, n):
        """An n-point rule integrates polynomials up to degree 2n-1 exactly."""
        result = fixed_quad(lambda x: 3 * x**4 - x + 2, -1.0, 2.0, n)
        expected = (3 / 5) * (32 + 1) - (4 - 1) / 2 + 2 * 3
        np.testing.assert_allclose(result, expected, rtol=1e-12)

    def test_array_bounds(self):
        upper = jnp.array([1.0, 2.0, 3.0])
        result = fixed_quad(lambda x: x, 0.0, upper)
        assert result.shape == (3,)
        np.testing.assert_allclose(result, upper**2 / 2, rtol=1e-12)

    def test_reversed_bounds(self):
        np.testing.assert_allclose(fixed_quad(jnp.cos, jnp.pi / 2, 0.0), -1.0, rtol=1e-12)

    def test_scalar_result(self):
        assert np.ndim(fixed_quad(jnp.exp, 0.0, 1.0)) == 0

    def test_semi_infinite(self):
        np.testing.assert_allclose(fixed_quad(lambda x: jnp.exp(-x), 0.0, jnp.inf), 1.0, rtol=1e-10)
        np.testing.assert_allclose(fixed_quad(lambda x: 1 / (1 + x)**2, 0.0, np.inf), 1.0, rtol=1e-10)

    def test_semi_infinite_array_lower(self):
        lower = jnp.array([0.0, 1.0, 2.0])
        result = fixed_quad(lambda x: jnp.exp(-x), lower, jnp.inf)
        np.testing.assert_allclose(result, jnp.exp(-lower), rtol=1e-10)

    def test_traced_bounds(self):
        """Bounds may be traced values under jit and grad."""
        finite = jax.jit(lambda b: fixed_quad(jnp.exp, 0.0, b))
        np.testing.assert_allclose(finite(1.0), np.e - 1, rtol=1e-12)

        tail = jax.grad(lambda a: fixed_quad(lambda x: jnp.exp(-x), a, jnp.inf))
        np.testing.assert_allclose(tail(0.5), -np.exp(-0.5), rtol=1e-10)
