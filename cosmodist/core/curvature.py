"""
Curvature transform between radial and transverse comoving distance.

    D_M = D_H / sqrt(Ωk) * sinh(sqrt(Ωk) * D_C / D_H)

For Ωk < 0 the square root is imaginary and the same expression, evaluated
in complex arithmetic, is real: it equals the spherical-geometry form
D_H / sqrt(|Ωk|) * sin(sqrt(|Ωk|) * D_C / D_H).
"""

from typing import Union

import jax.numpy as jnp


def comoving_transverse_distance(comoving_distance: Union[float, jnp.ndarray],
                                 Ok0: float,
                                 hubble_distance: float) -> jnp.ndarray:
    """
    Transverse comoving distance D_M from the radial comoving distance.

    Parameters
    ----------
    comoving_distance : float or array_like
        Line-of-sight comoving distance D_C in Mpc
    Ok0 : float
        Curvature density at z=0
    hubble_distance : float
        c/H0 in Mpc

    Returns
    -------
    jnp.ndarray
        D_M in Mpc
    """
    D_C = jnp.asarray(comoving_distance)

    if Ok0 == 0:
        return D_C

    if Ok0 > 0:
        sqrt_Ok = jnp.sqrt(Ok0)
        return hubble_distance / sqrt_Ok * jnp.sinh(sqrt_Ok * D_C / hubble_distance)

    # Closed: sqrt(Ok0) is purely imaginary, the product below is real
    sqrt_Ok = jnp.sqrt(jnp.asarray(Ok0, dtype=jnp.complex128))
    D_M = hubble_distance / sqrt_Ok * jnp.sinh(sqrt_Ok * D_C / hubble_distance)
    return jnp.real(D_M)
