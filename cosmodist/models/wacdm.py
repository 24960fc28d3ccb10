"""
w0-wa (Chevallier-Polarski-Linder) dark energy model.

w(a) = W0 + WA (1 - a). WA = 0 is handed to WCDM; the general case is
integrated numerically.
"""

from dataclasses import dataclass
from typing import Union

import jax.numpy as jnp

from ..core import analytic
from ..core.base import FLRW
from ..core.dispatch import (
    WACDM_DISTANCE_RULES,
    WACDM_TIME_RULES,
    Method,
    select_method,
)
from ..utils.constants import z_to_a
from .wcdm import to_wcdm


@dataclass(frozen=True)
class WACDM(FLRW):
    """
    w0-wa CDM model: matter, curvature and time-evolving dark energy.

    Parameters
    ----------
    H0 : float
        Hubble constant at z=0 in km/s/Mpc
    Om0 : float
        Matter density at z=0
    Ol0 : float
        Dark energy density at z=0
    W0 : float, optional
        Equation of state today (default: -1.0)
    WA : float, optional
        Equation of state slope in scale factor (default: 0.0)
    Ogamma0, Onu0 : float, optional
        Photon and neutrino densities at z=0 (default: 0.0)
    """

    H0: float
    Om0: float
    Ol0: float
    W0: float = -1.0
    WA: float = 0.0
    Ogamma0: float = 0.0
    Onu0: float = 0.0

    _str_fields = ('H0', 'Om0', 'Ol0', 'W0', 'WA')

    def _dark_energy_evolution(self, z: Union[float, jnp.ndarray]) -> jnp.ndarray:
        """
        Dark energy density relative to today.

        Linder 2003, PhRvL 90, 091301, Eqs. 5 and 7.
        """
        z = jnp.asarray(z)
        one_plus_z = 1.0 + z
        power_factor = one_plus_z**(3.0 * (1.0 + self.W0 + self.WA))
        exp_factor = jnp.exp(-3.0 * self.WA * z / one_plus_z)
        return power_factor * exp_factor

    def E_z(self, z: Union[float, jnp.ndarray]) -> jnp.ndarray:
        """Override E_z for w0-wa: includes W0, WA in dark energy evolution."""
        one_plus_z = 1.0 + jnp.asarray(z)
        Omega_r = self.Ogamma0 + self.Onu0
        Omega_k = 1 - (self.Om0 + self.Ol0)

        # Components
        matter_term = self.Om0 * one_plus_z**3
        radiation_term = Omega_r * one_plus_z**4
        curvature_term = Omega_k * one_plus_z**2
        de_term = self.Ol0 * self._dark_energy_evolution(z)

        return jnp.sqrt(radiation_term + matter_term + curvature_term + de_term)

    def w_z(self, z: Union[float, jnp.ndarray]) -> jnp.ndarray:
        """Override w_z for w0-wa: w = W0 + WA (1 - a)."""
        a = z_to_a(jnp.asarray(z, dtype=float))
        return self.W0 + self.WA * (1.0 - a)

    def comoving_distance_z1z2(self, z1, z2) -> jnp.ndarray:
        """
        Comoving distance between z1 and z2 in Mpc.

        Ol0 = 0 is tested first so that (Om0, Ol0) = (1, 0) takes the
        analytic solution rather than the integration.
        """
        method = select_method(WACDM_DISTANCE_RULES, self)
        if method is Method.MATTER_CURVATURE:
            return analytic.comoving_distance_matter_z1z2(z1, z2, self.Om0, self.H0)
        if method is Method.WCDM:
            return to_wcdm(self).comoving_distance_z1z2(z1, z2)
        return self._comoving_distance_z1z2_integrate(z1, z2)

    def lookback_time(self, z) -> jnp.ndarray:
        """Time from redshift z to today in Gyr."""
        method = select_method(WACDM_TIME_RULES, self)
        if method is Method.MATTER_CURVATURE:
            return analytic.lookback_time_matter(z, self.Om0, self.H0)
        if method is Method.EINSTEIN_DE_SITTER:
            return analytic.lookback_time_einstein_de_sitter(z, self.H0)
        if method is Method.WCDM:
            return to_wcdm(self).lookback_time(z)
        return self._lookback_time_integrate(z)

    def age(self, z) -> jnp.ndarray:
        """Time from the Big Bang to redshift z in Gyr."""
        method = select_method(WACDM_TIME_RULES, self)
        if method is Method.MATTER_CURVATURE:
            return analytic.age_matter(z, self.Om0, self.H0)
        if method is Method.EINSTEIN_DE_SITTER:
            return analytic.age_einstein_de_sitter(z, self.H0)
        if method is Method.WCDM:
            return to_wcdm(self).age(z)
        return self._age_integrate(z)
