"""
cosmodist Base Class
====================

Abstract FLRW capability set shared by every cosmological model.

Each model provides four primitives (E_z, comoving_distance_z1z2, age,
lookback_time) plus its density fractions; every other distance measure is
derived here from those primitives. The numerical-integration fallbacks used
by the models' dispatch also live here, since they depend only on E_z.
"""

from abc import ABC, abstractmethod
from typing import Union

import jax.numpy as jnp

from .curvature import comoving_transverse_distance
from .integration import DEFAULT_ORDER, fixed_quad
from ..utils.constants import hubble_distance, hubble_time


class FLRW(ABC):
    """
    Minimal abstract base class for all FLRW cosmologies.

    Concrete models are frozen dataclasses holding ``H0``, ``Om0``,
    ``Ogamma0`` and ``Onu0`` (and, where relevant, ``Ol0``, ``W0``, ``WA``).
    No state is cached: every call recomputes from the parameters.
    """

    # ==================== Core Interface ====================

    @abstractmethod
    def E_z(self, z: Union[float, jnp.ndarray]) -> jnp.ndarray:
        """
        Dimensionless Hubble parameter E(z) = H(z)/H0.

        This is the fundamental quantity that defines the cosmological model.
        All other quantities are derived from this.
        """

    @abstractmethod
    def comoving_distance_z1z2(self, z1: Union[float, jnp.ndarray],
                               z2: Union[float, jnp.ndarray]) -> jnp.ndarray:
        """Line-of-sight comoving distance between z1 and z2 in Mpc."""

    @abstractmethod
    def lookback_time(self, z: Union[float, jnp.ndarray]) -> jnp.ndarray:
        """Time from redshift z to today in Gyr."""

    @abstractmethod
    def age(self, z: Union[float, jnp.ndarray]) -> jnp.ndarray:
        """Time from the Big Bang (a -> 0) to redshift z in Gyr."""

    @property
    def Ok0(self) -> float:
        """Curvature density at z=0: 1 - (Om0 + Ol0)."""
        return 1 - (self.Om0 + self.Ol0)

    # ==================== Expansion Rate ====================

    def Einv_z(self, z: Union[float, jnp.ndarray]) -> jnp.ndarray:
        """Inverse dimensionless Hubble parameter 1/E(z)."""
        return 1 / self.E_z(z)

    def H_z(self, z: Union[float, jnp.ndarray]) -> jnp.ndarray:
        """Hubble parameter H(z) in km/s/Mpc."""
        return self.H0 * self.E_z(z)

    def w_z(self, z: Union[float, jnp.ndarray]) -> jnp.ndarray:
        """
        Dark energy equation of state w(z).

        Default implementation for a cosmological constant (w = -1).
        """
        return jnp.full_like(jnp.asarray(z, dtype=float), -1.0)

    def hubble_distance(self) -> float:
        """Hubble distance c/H0 in Mpc."""
        return hubble_distance(self.H0)

    def hubble_time(self) -> float:
        """Hubble time 1/H0 in Gyr."""
        return hubble_time(self.H0)

    # ==================== Distances ====================

    def comoving_distance(self, z: Union[float, jnp.ndarray]) -> jnp.ndarray:
        """
        Comoving distance to redshift z in Mpc.

        The distance between two objects that stays constant with the Hubble
        flow, expressed as the proper distance at z=0. Two objects 10 Mpc
        apart at a=0.5 (z=1) are 20 Mpc apart at a=1: their comoving distance
        is 20 Mpc.
        """
        return self.comoving_distance_z1z2(0.0, z)

    def comoving_transverse_distance(self, z: Union[float, jnp.ndarray]) -> jnp.ndarray:
        """Transverse comoving distance D_M to redshift z in Mpc."""
        return self.comoving_transverse_distance_z1z2(0.0, z)

    def comoving_transverse_distance_z1z2(self, z1: Union[float, jnp.ndarray],
                                          z2: Union[float, jnp.ndarray]) -> jnp.ndarray:
        """
        Transverse comoving distance at z2 as seen from z1, in Mpc.

        D_M = {
            D_H/√Ωk sinh(√Ωk D_C/D_H)      for Ωk > 0 (open)
            D_C                             for Ωk = 0 (flat)
            D_H/√|Ωk| sin(√|Ωk| D_C/D_H)   for Ωk < 0 (closed)
        }
        """
        D_C = self.comoving_distance_z1z2(z1, z2)
        return comoving_transverse_distance(D_C, self.Ok0, self.hubble_distance())

    def angular_diameter_distance(self, z: Union[float, jnp.ndarray]) -> jnp.ndarray:
        """
        Angular diameter distance in Mpc.

        D_A(z) = D_M(z) / (1 + z)
        """
        return self.comoving_transverse_distance(z) / (1 + jnp.asarray(z))

    def luminosity_distance(self, z: Union[float, jnp.ndarray]) -> jnp.ndarray:
        """
        Luminosity distance in Mpc.

        D_L(z) = D_M(z) * (1 + z)
        """
        return (1 + jnp.asarray(z)) * self.comoving_transverse_distance(z)

    def distance_modulus(self, z: Union[float, jnp.ndarray]) -> jnp.ndarray:
        """
        Distance modulus in magnitudes.

        μ(z) = 5 log₁₀(D_L(z) / 10 pc) = 5 log₁₀(D_L(z) [Mpc]) + 25
        """
        return 5 * jnp.log10(self.luminosity_distance(z)) + 25

    # ==================== Quadrature Fallbacks ====================

    def _comoving_distance_z1z2_integrate(self, z1, z2) -> jnp.ndarray:
        """D_H ∫ dz / E(z) over [z1, z2] by Gauss-Legendre quadrature."""
        return self.hubble_distance() * fixed_quad(self.Einv_z, z1, z2, DEFAULT_ORDER)

    def _lookback_time_integrate(self, z) -> jnp.ndarray:
        """t_H ∫ dz / ((1+z) E(z)) over [0, z]."""
        def integrand(zp):
            return self.Einv_z(zp) / (1 + zp)
        return self.hubble_time() * fixed_quad(integrand, 0.0, z, DEFAULT_ORDER)

    def _age_integrate(self, z) -> jnp.ndarray:
        """
        t_H ∫ dz / ((1+z) E(z)) over [z, ∞).

        Thomas & Kantowski 2000, PRD 62, 103507, Eq. 1.
        """
        def integrand(zp):
            return 1 / ((1 + zp) * self.E_z(zp))
        return self.hubble_time() * fixed_quad(integrand, z, jnp.inf, DEFAULT_ORDER)

    _str_fields = ('H0', 'Om0', 'Ol0')

    def __str__(self) -> str:
        fields = ", ".join(f"{name}: {getattr(self, name):g}" for name in self._str_fields)
        return f"{type(self).__name__}{{{fields}}}"
