"""
Fixed-order Gauss-Legendre Integration
======================================

Numerical quadrature used whenever no closed form or elliptic shortcut
applies to a cosmology. The rule has a fixed number of points, so every
integral costs the same and always terminates.

Features:
- Nodes and weights computed once per order and shared
- Vectorized over the integration bounds: an array of redshifts is
  integrated in a single pass of shape ``(..., n)``
- Semi-infinite intervals ``[a, +inf)`` through the change of variables
  ``x = a + t / (1 - t)``
"""

import math
from functools import lru_cache
from typing import Callable, Tuple, Union

import numpy as np
import jax.numpy as jnp

# Order used by every cosmology model
DEFAULT_ORDER = 1000


@lru_cache(maxsize=None)
def gauss_legendre(n: int) -> Tuple[jnp.ndarray, jnp.ndarray]:
    """
    Gauss-Legendre nodes and weights on [-1, 1].

    Parameters
    ----------
    n : int
        Number of quadrature points

    Returns
    -------
    Tuple[jnp.ndarray, jnp.ndarray]
        (nodes, weights), each of shape (n,)
    """
    nodes, weights = np.polynomial.legendre.leggauss(n)
    return jnp.asarray(nodes), jnp.asarray(weights)


def _integrate_finite(func, lower, upper, nodes, weights):
    lower, upper = jnp.broadcast_arrays(lower, upper)
    half = 0.5 * (upper - lower)
    mid = 0.5 * (upper + lower)

    x = mid[..., None] + half[..., None] * nodes
    return half * jnp.sum(weights * func(x), axis=-1)


def _integrate_to_infinity(func, lower, nodes, weights):
    # t in (0, 1) maps onto x in (lower, inf)
    t = 0.5 * (nodes + 1.0)
    one_minus_t = 1.0 - t

    x = lower[..., None] + t / one_minus_t
    jacobian = 1.0 / one_minus_t**2
    return 0.5 * jnp.sum(weights * func(x) * jacobian, axis=-1)


def fixed_quad(func: Callable[[jnp.ndarray], jnp.ndarray],
               lower: Union[float, jnp.ndarray],
               upper: Union[float, jnp.ndarray],
               n: int = DEFAULT_ORDER) -> jnp.ndarray:
    """
    Definite integral of ``func`` with an n-point Gauss-Legendre rule.

    Parameters
    ----------
    func : callable
        Vectorized integrand; called once with an array of abscissae
    lower, upper : float or array_like
        Integration bounds, broadcast against each other. ``upper`` may be
        a Python float ``+inf``, in which case the interval is mapped onto [0, 1)
    n : int
        Number of quadrature points

    Returns
    -------
    jnp.ndarray
        Integral value(s) with the broadcast shape of the bounds
    """
    nodes, weights = gauss_legendre(n)
    lower = jnp.asarray(lower, dtype=float)

    if isinstance(upper, (int, float)) and math.isinf(upper) and upper > 0:
        return _integrate_to_infinity(func, lower, nodes, weights)

    upper = jnp.asarray(upper, dtype=float)
    return _integrate_finite(func, lower, upper, nodes, weights)
