"""
Lambda-CDM (ΛCDM) cosmological model with curvature.

Matter, a cosmological constant (w = -1) and curvature Ω_k = 1 - Ω_m - Ω_Λ.
Flat models are handed to FlatLCDM; single-component universes use their
closed forms; everything else is integrated numerically.
"""

from dataclasses import dataclass
from typing import Union

import jax.numpy as jnp

from ..core import analytic
from ..core.base import FLRW
from ..core.dispatch import (
    LAMBDA_CDM_DISTANCE_RULES,
    LAMBDA_CDM_TIME_RULES,
    Method,
    select_method,
)
from .flat_lcdm import to_flat_lcdm


@dataclass(frozen=True)
class LambdaCDM(FLRW):
    """
    ΛCDM model: matter, dark energy with w = -1, and curvature.

    Parameters
    ----------
    H0 : float
        Hubble constant at z=0 in km/s/Mpc
    Om0 : float
        Matter density at z=0
    Ol0 : float
        Vacuum energy density Λ at z=0
    Ogamma0 : float, optional
        Photon density at z=0 (default: 0.0)
    Onu0 : float, optional
        Neutrino density at z=0 (default: 0.0)
    """

    H0: float
    Om0: float
    Ol0: float
    Ogamma0: float = 0.0
    Onu0: float = 0.0

    def E_z(self, z: Union[float, jnp.ndarray]) -> jnp.ndarray:
        """
        Dimensionless Hubble parameter for ΛCDM.

        E²(z) = Ω_r(1+z)⁴ + Ω_m(1+z)³ + Ω_k(1+z)² + Ω_Λ

        Hogg, arXiv:astro-ph/9905116, Eq. 14.
        """
        one_plus_z = 1.0 + jnp.asarray(z)
        Omega_r = self.Ogamma0 + self.Onu0
        Omega_k = 1 - (self.Om0 + self.Ol0)
        return jnp.sqrt(
            one_plus_z**2 * ((Omega_r * one_plus_z + self.Om0) * one_plus_z + Omega_k)
            + self.Ol0
        )

    def comoving_distance_z1z2(self, z1, z2) -> jnp.ndarray:
        """
        Comoving distance between z1 and z2 in Mpc.

        Falls back to the simpler flat cosmology or the matter-only closed
        form where possible, quadrature otherwise.
        """
        method = select_method(LAMBDA_CDM_DISTANCE_RULES, self)
        if method is Method.FLAT_LCDM:
            return to_flat_lcdm(self).comoving_distance_z1z2(z1, z2)
        if method is Method.MATTER_CURVATURE:
            return analytic.comoving_distance_matter_z1z2(z1, z2, self.Om0, self.H0)
        return self._comoving_distance_z1z2_integrate(z1, z2)

    def lookback_time(self, z) -> jnp.ndarray:
        """Time from redshift z to today in Gyr."""
        method = select_method(LAMBDA_CDM_TIME_RULES, self)
        if method is Method.FLAT_LCDM:
            return to_flat_lcdm(self).lookback_time(z)
        if method is Method.MATTER_CURVATURE:
            return analytic.lookback_time_matter(z, self.Om0, self.H0)
        if method is Method.EINSTEIN_DE_SITTER:
            return analytic.lookback_time_einstein_de_sitter(z, self.H0)
        if method is Method.DARK_ENERGY_CURVATURE:
            return analytic.lookback_time_dark_energy(z, self.Ol0, self.H0)
        return self._lookback_time_integrate(z)

    def age(self, z) -> jnp.ndarray:
        """Time from the Big Bang to redshift z in Gyr."""
        method = select_method(LAMBDA_CDM_TIME_RULES, self)
        if method is Method.FLAT_LCDM:
            return to_flat_lcdm(self).age(z)
        if method is Method.MATTER_CURVATURE:
            return analytic.age_matter(z, self.Om0, self.H0)
        if method is Method.EINSTEIN_DE_SITTER:
            return analytic.age_einstein_de_sitter(z, self.H0)
        if method is Method.DARK_ENERGY_CURVATURE:
            return analytic.age_dark_energy(z, self.Ol0, self.H0)
        return self._age_integrate(z)


def to_lambda_cdm(cosmo: FLRW) -> LambdaCDM:
    """LambdaCDM with the densities of ``cosmo``, dropping any w parameters."""
    return LambdaCDM(H0=cosmo.H0, Om0=cosmo.Om0, Ol0=cosmo.Ol0,
                     Ogamma0=cosmo.Ogamma0, Onu0=cosmo.Onu0)
