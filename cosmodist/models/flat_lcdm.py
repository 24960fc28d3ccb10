"""
Flat Lambda-CDM (ΛCDM) cosmological model.

Matter and a cosmological constant with Ω_Λ = 1 - Ω_m. Distances use the
exact Carlson elliptic-integral form and ages the asinh closed form whenever
the model is radiation-free; quadrature covers the rest.
"""

from dataclasses import dataclass
from typing import Union

import jax.numpy as jnp

from ..core import analytic
from ..core.base import FLRW
from ..core.dispatch import (
    FLAT_LCDM_DISTANCE_RULES,
    FLAT_LCDM_TIME_RULES,
    Method,
    select_method,
)
from ..core.elliptic import comoving_distance_flat_lcdm_z1z2


@dataclass(frozen=True)
class FlatLCDM(FLRW):
    """
    Flat ΛCDM model: matter and dark energy with w = -1, no curvature.

    Parameters
    ----------
    H0 : float
        Hubble constant at z=0 in km/s/Mpc
    Om0 : float
        Matter density at z=0
    Ogamma0 : float, optional
        Photon density at z=0 (default: 0.0)
    Onu0 : float, optional
        Neutrino density at z=0 (default: 0.0)

    Notes
    -----
    Ol0 is 1 - Om0 whether or not radiation is present, and Ok0 is always
    reported as 0. With nonzero Ogamma0 or Onu0 the densities therefore sum
    to 1 + Ogamma0 + Onu0 and E(0) = sqrt(1 + Ogamma0 + Onu0). astropy
    instead sets Ode0 = 1 - Om0 - Ogamma0 - Onu0, so values with radiation
    differ from astropy at the level of the radiation density.
    """

    H0: float
    Om0: float
    Ogamma0: float = 0.0
    Onu0: float = 0.0

    @property
    def Ol0(self) -> float:
        """Dark energy density at z=0: 1 - Om0."""
        return 1 - self.Om0

    @property
    def Ok0(self) -> float:
        """Curvature density at z=0, zero by construction."""
        return 0.0

    _str_fields = ('H0', 'Om0')

    def E_z(self, z: Union[float, jnp.ndarray]) -> jnp.ndarray:
        """
        Dimensionless Hubble parameter for flat ΛCDM.

        E²(z) = Ω_r(1+z)⁴ + Ω_m(1+z)³ + Ω_Λ

        Hogg, arXiv:astro-ph/9905116, Eq. 14.
        """
        one_plus_z = 1.0 + jnp.asarray(z)
        Omega_r = self.Ogamma0 + self.Onu0
        return jnp.sqrt(one_plus_z**3 * (Omega_r * one_plus_z + self.Om0) + self.Ol0)

    def comoving_distance_z1z2(self, z1, z2) -> jnp.ndarray:
        """
        Comoving distance between z1 and z2 in Mpc.

        Elliptic integral for 0 < Om0 < 1, Mattig's formula for Om0 = 1,
        quadrature otherwise.
        """
        method = select_method(FLAT_LCDM_DISTANCE_RULES, self)
        if method is Method.ELLIPTIC:
            return comoving_distance_flat_lcdm_z1z2(z1, z2, self.Om0, self.H0)
        if method is Method.MATTER_CURVATURE:
            return analytic.comoving_distance_matter_z1z2(z1, z2, self.Om0, self.H0)
        return self._comoving_distance_z1z2_integrate(z1, z2)

    def lookback_time(self, z) -> jnp.ndarray:
        """Time from redshift z to today in Gyr."""
        method = select_method(FLAT_LCDM_TIME_RULES, self)
        if method is Method.EINSTEIN_DE_SITTER:
            return analytic.lookback_time_einstein_de_sitter(z, self.H0)
        if method is Method.FLAT_ANALYTIC:
            return analytic.lookback_time_flat_lcdm(z, self.Om0, self.H0)
        return self._lookback_time_integrate(z)

    def age(self, z) -> jnp.ndarray:
        """Time from the Big Bang to redshift z in Gyr."""
        method = select_method(FLAT_LCDM_TIME_RULES, self)
        if method is Method.EINSTEIN_DE_SITTER:
            return analytic.age_einstein_de_sitter(z, self.H0)
        if method is Method.FLAT_ANALYTIC:
            return analytic.age_flat_lcdm(z, self.Om0, self.H0)
        return self._age_integrate(z)


def to_flat_lcdm(cosmo: FLRW) -> FlatLCDM:
    """FlatLCDM with the H0, Om0 and radiation densities of ``cosmo``."""
    return FlatLCDM(H0=cosmo.H0, Om0=cosmo.Om0, Ogamma0=cosmo.Ogamma0, Onu0=cosmo.Onu0)
