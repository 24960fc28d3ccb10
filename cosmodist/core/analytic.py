"""
Closed-form distances and times for single-component universes.

Exact solutions, no integration:
- matter + curvature (Ω_Λ = 0), including Einstein-de Sitter (Ω_m = 1)
- cosmological constant + curvature (Ω_m = 0)
- flat matter + cosmological constant (age only)

References: Mattig (1958); Hogg, arXiv:astro-ph/9905116;
Thomas & Kantowski 2000, PRD 62, 103507, Eqs. 2-4.
"""

from typing import Union

import jax.numpy as jnp

from ..utils.constants import hubble_distance, hubble_time

Redshift = Union[float, jnp.ndarray]


# ==================== Matter + Curvature ====================

def comoving_transverse_distance_matter(z: Redshift, Om0: float, H0: float) -> jnp.ndarray:
    """
    Transverse comoving distance for Ω_m + Ω_k = 1 (Mattig's formula).

    Parameters
    ----------
    z : float or array_like
        Redshift(s)
    Om0 : float
        Matter density at z=0, all non-relativistic
    H0 : float
        Hubble constant in km/s/Mpc

    Returns
    -------
    jnp.ndarray
        D_M in Mpc
    """
    z = jnp.asarray(z)
    return (hubble_distance(H0) * 2 * (2 - Om0 * (1 - z) - (2 - Om0) * jnp.sqrt(1 + Om0 * z))
            / ((1 + z) * Om0 * Om0))


def comoving_distance_matter(z: Redshift, Om0: float, H0: float) -> jnp.ndarray:
    """
    Line-of-sight comoving distance for Ω_m + Ω_k = 1.

    Inverts the curvature transform of the Mattig transverse distance;
    identical to it when Ω_k = 0.
    """
    D_M = comoving_transverse_distance_matter(z, Om0, H0)
    Ok0 = 1 - Om0
    if Ok0 == 0:
        return D_M

    hdk = hubble_distance(H0) / jnp.sqrt(Ok0)
    return hdk * jnp.arcsinh(D_M / hdk)


def comoving_distance_matter_z1z2(z1: Redshift, z2: Redshift, Om0: float, H0: float) -> jnp.ndarray:
    """Comoving distance between z1 and z2 for Ω_m + Ω_k = 1."""
    return comoving_distance_matter(z2, Om0, H0) - comoving_distance_matter(z1, Om0, H0)


def age_einstein_de_sitter(z: Redshift, H0: float) -> jnp.ndarray:
    """Age in Gyr of a flat matter-only universe: (2/3) t_H (1+z)^(-3/2)."""
    z = jnp.asarray(z)
    return (2.0 / 3.0) * hubble_time(H0) * jnp.power(1 + z, -1.5)


def age_matter(z: Redshift, Om0: float, H0: float) -> jnp.ndarray:
    """
    Age in Gyr for a matter + curvature universe (Thomas & Kantowski Eq. 2).

    Ω_m = 1 is handed to the Einstein-de Sitter power law, where the
    general expression divides by zero.

    Notes
    -----
    The two terms are each of order (1 - Ω_m)^(-3/2) and nearly cancel as
    Ω_m -> 1, so the relative rounding error grows like that factor times
    machine epsilon. For 1 - Ω_m below about 1e-5 the result is no closer
    to the Einstein-de Sitter age than ~1e-5 relative.
    """
    if Om0 == 1:
        return age_einstein_de_sitter(z, H0)

    z = jnp.asarray(z)
    return hubble_time(H0) * (
        jnp.sqrt(1 + Om0 * z) / ((1 - Om0) * (1 + z))
        - Om0 * jnp.power(1 - Om0, -1.5) * jnp.arcsinh(jnp.sqrt((1 / Om0 - 1) / (1 + z)))
    )


def lookback_time_matter(z: Redshift, Om0: float, H0: float) -> jnp.ndarray:
    """Look-back time in Gyr for a matter + curvature universe."""
    return age_matter(0.0, Om0, H0) - age_matter(z, Om0, H0)


def lookback_time_einstein_de_sitter(z: Redshift, H0: float) -> jnp.ndarray:
    """Look-back time in Gyr for a flat matter-only universe."""
    return age_einstein_de_sitter(0.0, H0) - age_einstein_de_sitter(z, H0)


# ==================== Cosmological Constant + Curvature ====================

def age_dark_energy(z: Redshift, Ol0: float, H0: float) -> jnp.ndarray:
    """
    Age in Gyr for a cosmological constant + curvature universe
    (Thomas & Kantowski Eq. 3).

    Parameters
    ----------
    z : float or array_like
        Redshift(s)
    Ol0 : float
        Dark energy density at z=0, w = -1
    H0 : float
        Hubble constant in km/s/Mpc
    """
    z = jnp.asarray(z)
    return (hubble_time(H0) / jnp.sqrt(Ol0)
            * jnp.arcsinh(1 / ((1 + z) * jnp.sqrt(1 / Ol0 - 1))))


def lookback_time_dark_energy(z: Redshift, Ol0: float, H0: float) -> jnp.ndarray:
    """Look-back time in Gyr for a cosmological constant + curvature universe."""
    return age_dark_energy(0.0, Ol0, H0) - age_dark_energy(z, Ol0, H0)


# ==================== Flat Matter + Cosmological Constant ====================

def age_flat_lcdm(z: Redshift, Om0: float, H0: float) -> jnp.ndarray:
    """
    Age in Gyr for a flat ΛCDM universe without radiation
    (Thomas & Kantowski Eq. 4).
    """
    z = jnp.asarray(z)
    return (hubble_time(H0) * 2 / (3 * jnp.sqrt(1 - Om0))
            * jnp.arcsinh(jnp.sqrt((1 / Om0 - 1) / (1 + z)**3)))


def lookback_time_flat_lcdm(z: Redshift, Om0: float, H0: float) -> jnp.ndarray:
    """Look-back time in Gyr for a flat ΛCDM universe without radiation."""
    return age_flat_lcdm(0.0, Om0, H0) - age_flat_lcdm(z, Om0, H0)
