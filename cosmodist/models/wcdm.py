"""
wCDM cosmological model with constant dark energy equation of state.

Same structure as LambdaCDM with the dark energy density scaling as
(1+z)^(3(1+w0)). w0 = -1 is handed to LambdaCDM.
"""

from dataclasses import dataclass
from typing import Union

import jax.numpy as jnp

from ..core import analytic
from ..core.base import FLRW
from ..core.dispatch import (
    WCDM_DISTANCE_RULES,
    WCDM_TIME_RULES,
    Method,
    select_method,
)
from .lcdm import to_lambda_cdm


@dataclass(frozen=True)
class WCDM(FLRW):
    """
    wCDM model: matter, curvature and dark energy with constant w = W0.

    Parameters
    ----------
    H0 : float
        Hubble constant at z=0 in km/s/Mpc
    Om0 : float
        Matter density at z=0
    Ol0 : float
        Dark energy density at z=0
    W0 : float, optional
        Dark energy equation of state p/ρ (default: -1.0)
    Ogamma0, Onu0 : float, optional
        Photon and neutrino densities at z=0 (default: 0.0)
    """

    H0: float
    Om0: float
    Ol0: float
    W0: float = -1.0
    Ogamma0: float = 0.0
    Onu0: float = 0.0

    _str_fields = ('H0', 'Om0', 'Ol0', 'W0')

    def E_z(self, z: Union[float, jnp.ndarray]) -> jnp.ndarray:
        """Override E_z for wCDM: includes W0 in dark energy evolution."""
        one_plus_z = 1.0 + jnp.asarray(z)
        Omega_r = self.Ogamma0 + self.Onu0
        Omega_k = 1 - (self.Om0 + self.Ol0)

        # Components
        matter_term = self.Om0 * one_plus_z**3
        radiation_term = Omega_r * one_plus_z**4
        curvature_term = Omega_k * one_plus_z**2
        de_term = self.Ol0 * one_plus_z**(3.0 * (1.0 + self.W0))

        return jnp.sqrt(radiation_term + matter_term + curvature_term + de_term)

    def w_z(self, z: Union[float, jnp.ndarray]) -> jnp.ndarray:
        """Override w_z for wCDM: returns constant W0."""
        return jnp.full_like(jnp.asarray(z, dtype=float), self.W0)

    def comoving_distance_z1z2(self, z1, z2) -> jnp.ndarray:
        """
        Comoving distance between z1 and z2 in Mpc.

        Ol0 = 0 is tested first so that (Om0, Ol0) = (1, 0) takes the
        analytic solution rather than the integration.
        """
        method = select_method(WCDM_DISTANCE_RULES, self)
        if method is Method.MATTER_CURVATURE:
            return analytic.comoving_distance_matter_z1z2(z1, z2, self.Om0, self.H0)
        if method is Method.LAMBDA_CDM:
            return to_lambda_cdm(self).comoving_distance_z1z2(z1, z2)
        return self._comoving_distance_z1z2_integrate(z1, z2)

    def lookback_time(self, z) -> jnp.ndarray:
        """Time from redshift z to today in Gyr."""
        method = select_method(WCDM_TIME_RULES, self)
        if method is Method.MATTER_CURVATURE:
            return analytic.lookback_time_matter(z, self.Om0, self.H0)
        if method is Method.EINSTEIN_DE_SITTER:
            return analytic.lookback_time_einstein_de_sitter(z, self.H0)
        if method is Method.LAMBDA_CDM:
            return to_lambda_cdm(self).lookback_time(z)
        return self._lookback_time_integrate(z)

    def age(self, z) -> jnp.ndarray:
        """Time from the Big Bang to redshift z in Gyr."""
        method = select_method(WCDM_TIME_RULES, self)
        if method is Method.MATTER_CURVATURE:
            return analytic.age_matter(z, self.Om0, self.H0)
        if method is Method.EINSTEIN_DE_SITTER:
            return analytic.age_einstein_de_sitter(z, self.H0)
        if method is Method.LAMBDA_CDM:
            return to_lambda_cdm(self).age(z)
        return self._age_integrate(z)


def to_wcdm(cosmo: FLRW) -> WCDM:
    """WCDM with the densities and W0 of ``cosmo``, dropping WA."""
    return WCDM(H0=cosmo.H0, Om0=cosmo.Om0, Ol0=cosmo.Ol0, W0=cosmo.W0,
                Ogamma0=cosmo.Ogamma0, Onu0=cosmo.Onu0)
