"""
Tests that distances and times compose with JAX transformations.

jit must reproduce the eager values; grad must give the analytic
derivatives dD_C/dz = D_H / E(z) and dt/dz = -t_H / ((1+z) E(z)).
"""

import numpy as np
import jax
import jax.numpy as jnp
import pytest

from cosmodist import FlatLCDM, LambdaCDM, WCDM, WACDM

from conftest import Z_TABLE

MODELS = [
    FlatLCDM(H0=70, Om0=0.3),                               # elliptic
    FlatLCDM(H0=70, Om0=0.3, Ogamma0=5e-5),                 # quadrature
    LambdaCDM(H0=70, Om0=0.3, Ol0=0.6),                     # open, quadrature
    LambdaCDM(H0=70, Om0=0.3, Ol0=0.9),                     # closed, quadrature
    LambdaCDM(H0=70, Om0=0.3, Ol0=0.0),                     # matter closed form
    LambdaCDM(H0=70, Om0=0.0, Ol0=0.5),                     # Λ closed form
    WCDM(H0=70, Om0=0.3, Ol0=0.7, W0=-0.9),
    WACDM(H0=70, Om0=0.3, Ol0=0.7, W0=-0.9, WA=0.2),
]
METHODS = ("comoving_distance", "comoving_transverse_distance", "luminosity_distance",
           "angular_diameter_distance", "distance_modulus", "age", "lookback_time")


class TestJit:

    @pytest.mark.parametrize("cosmo", MODELS, ids=str)
    @pytest.mark.parametrize("method", METHODS)
    def test_jit_matches_eager(self, cosmo, method):
        func = getattr(cosmo, method)
        np.testing.assert_allclose(jax.jit(func)(Z_TABLE), func(Z_TABLE), rtol=1e-12)

    def test_jit_reference_values(self):
        cosmo = LambdaCDM(H0=70, Om0=0.3, Ol0=0.6)
        expected = [2787.51504671, 6479.83450953, 15347.21516211, 25369.7240234]
        np.testing.assert_allclose(jax.jit(cosmo.luminosity_distance)(Z_TABLE), expected, rtol=1e-5)

    def test_comoving_distance_z1z2(self):
        cosmo = FlatLCDM(H0=70, Om0=0.3)
        result = jax.jit(cosmo.comoving_distance_z1z2)(0.5, Z_TABLE)
        np.testing.assert_allclose(result, cosmo.comoving_distance_z1z2(0.5, Z_TABLE), rtol=1e-12)


class TestVmap:

    @pytest.mark.parametrize("cosmo", MODELS[:3], ids=str)
    def test_vmap_matches_batch(self, cosmo):
        z = jnp.asarray(Z_TABLE)
        np.testing.assert_allclose(jax.vmap(cosmo.comoving_distance)(z), cosmo.comoving_distance(z), rtol=1e-12)


class TestGrad:

    @pytest.mark.parametrize("cosmo", MODELS, ids=str)
    @pytest.mark.parametrize("z", [0.5, 2.0])
    def test_comoving_distance_derivative(self, cosmo, z):
        derivative = jax.grad(cosmo.comoving_distance)(z)
        np.testing.assert_allclose(derivative, cosmo.hubble_distance() / cosmo.E_z(z), rtol=1e-6)

    @pytest.mark.parametrize("cosmo", MODELS, ids=str)
    @pytest.mark.parametrize("z", [0.5, 2.0])
    def test_time_derivatives(self, cosmo, z):
        rate = cosmo.hubble_time() / ((1 + z) * cosmo.E_z(z))
        np.testing.assert_allclose(jax.grad(cosmo.age)(z), -rate, rtol=1e-6)
        np.testing.assert_allclose(jax.grad(cosmo.lookback_time)(z), rate, rtol=1e-6)

    def test_closed_transverse_derivative(self):
        """dD_M/dz = cos(sqrt|Ωk| D_C/D_H) D_H/E for a closed universe."""
        cosmo = LambdaCDM(H0=70, Om0=0.3, Ol0=0.9)
        z = 1.0
        D_H = cosmo.hubble_distance()
        sqrt_ok = np.sqrt(-cosmo.Ok0)
        expected = np.cos(sqrt_ok * cosmo.comoving_distance(z) / D_H) * D_H / cosmo.E_z(z)
        np.testing.assert_allclose(jax.grad(cosmo.comoving_transverse_distance)(z), expected, rtol=1e-6)
