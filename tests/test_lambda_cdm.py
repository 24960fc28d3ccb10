"""
Tests for ΛCDM with curvature.

Flat, open (Ω_k > 0), closed (Ω_k < 0), matter-only and Λ-only
universes against astropy reference values.
"""

import numpy as np
import pytest

from cosmodist import FlatLCDM, LambdaCDM
from cosmodist.models import to_flat_lcdm
from cosmodist.utils.constants import hubble_distance

from conftest import AGE_RTOL, DIST_RTOL, DISTMOD_RTOL, E_RTOL, Z_TABLE

FLAT = LambdaCDM(H0=70, Om0=0.3, Ol0=0.7)
OPEN = LambdaCDM(H0=70, Om0=0.3, Ol0=0.6)
CLOSED = LambdaCDM(H0=70, Om0=0.3, Ol0=0.9)
MATTER = LambdaCDM(H0=70, Om0=0.3, Ol0=0.0)
EDS = LambdaCDM(H0=70, Om0=1.0, Ol0=0.0)
LAMBDA = LambdaCDM(H0=70, Om0=0.0, Ol0=0.5)

REFERENCE_TABLE = [
    (FLAT, "distance_modulus", [42.26118542, 44.10023766, 45.95719725, 47.02611193], DISTMOD_RTOL),
    (FLAT, "luminosity_distance", [2832.9380939, 6607.65761177, 15539.58622323, 25422.74174519], DISTMOD_RTOL),
    (OPEN, "luminosity_distance", [2787.51504671, 6479.83450953, 15347.21516211, 25369.7240234], DISTMOD_RTOL),
    (CLOSED, "luminosity_distance", [2933.96568944, 6896.93040403, 15899.60122012, 25287.53295915], DISTMOD_RTOL),
    (FLAT, "angular_diameter_distance", [1259.08359729, 1651.91440294, 1726.62069147, 1588.92135907], DIST_RTOL),
    (FLAT, "comoving_transverse_distance", [1888.62539593, 3303.82880589, 5179.86207441, 6355.6854363], DIST_RTOL),
    (OPEN, "comoving_transverse_distance", [1858.34336447, 3239.91725476, 5115.73838737, 6342.43100585], DIST_RTOL),
    (CLOSED, "comoving_transverse_distance", [1955.97712629, 3448.46520202, 5299.86707337, 6321.88323979], DIST_RTOL),
    (MATTER, "comoving_distance", [1679.81156606, 2795.15602075, 4244.25192263, 5178.38877021], DIST_RTOL),
    (MATTER, "comoving_transverse_distance", [1710.1240353, 2936.1472205, 4747.54480615, 6107.95517311], DIST_RTOL),
    (EDS, "comoving_distance", [1571.79831586, 2508.77651427, 3620.20576208, 4282.7494], DIST_RTOL),
    (FLAT, "lookback_time", [5.04063793, 7.715337, 10.24035689, 11.35445676], AGE_RTOL),
    (MATTER, "lookback_time", [4.51471693, 6.62532254, 8.57486509, 9.45923582], AGE_RTOL),
    (LAMBDA, "lookback_time", [5.0616361, 7.90494991, 10.94241739, 12.52244605], AGE_RTOL),
    (OPEN, "age", [8.11137578, 5.54558439, 3.13456008, 2.06445301], AGE_RTOL),
    (FLAT, "age", [8.42634602, 5.75164694, 3.22662706, 2.11252719], AGE_RTOL),
    (EDS, "age", [5.06897781, 3.29239767, 1.79215429, 1.16403836], AGE_RTOL),
    (MATTER, "age", [6.78287955, 4.67227393, 2.72273139, 1.83836065], AGE_RTOL),
    (LAMBDA, "age", [12.34935796, 9.50604415, 6.46857667, 4.88854801], AGE_RTOL),
]


class TestLambdaCDM:
    """Test suite for LambdaCDM."""

    @pytest.mark.parametrize("cosmo, method, expected, rtol", REFERENCE_TABLE)
    def test_reference_table(self, cosmo, method, expected, rtol):
        result = getattr(cosmo, method)(Z_TABLE)
        np.testing.assert_allclose(result, expected, rtol=rtol)

    def test_comoving_distance_z1z2(self):
        expected = [1888.62539593, 3303.82880589, 5179.86207441, 6355.6854363]
        np.testing.assert_allclose(FLAT.comoving_distance_z1z2(0.0, Z_TABLE), expected, rtol=DIST_RTOL)

    def test_hubble_parameter(self):
        """E(z=1) = 1.7 for Ω_m = 0.27, Ω_Λ = 0.73."""
        cosmo = LambdaCDM(H0=70, Om0=0.27, Ol0=0.73)
        np.testing.assert_allclose(cosmo.E_z(1.0), 1.7, rtol=E_RTOL)
        np.testing.assert_allclose(cosmo.Einv_z(1.0), 1 / 1.7, rtol=E_RTOL)

    def test_curvature_density(self):
        assert FLAT.Ok0 == 0.0
        assert OPEN.Ok0 == pytest.approx(0.1)
        assert CLOSED.Ok0 == pytest.approx(-0.2)

    @pytest.mark.parametrize("z", [1.0, 10.0, 500.0, 1000.0])
    def test_einstein_de_sitter_distance(self, z):
        expected = 2.0 * hubble_distance(70) * (1 - np.sqrt(1 / (1 + z)))
        np.testing.assert_allclose(EDS.comoving_distance(z), expected, rtol=DIST_RTOL)

    def test_flat_matches_flat_lcdm(self):
        """Flat LambdaCDM and FlatLCDM agree for every quantity."""
        flat = FlatLCDM(H0=70, Om0=0.3)
        z = np.linspace(0.1, 5.0, 11)
        for method in ("comoving_distance", "comoving_transverse_distance",
                       "luminosity_distance", "age", "lookback_time"):
            np.testing.assert_allclose(getattr(FLAT, method)(z), getattr(flat, method)(z), rtol=1e-12)
        assert to_flat_lcdm(FLAT) == flat

    def test_open_closed_quadrature_times(self):
        """Quadrature look-back time equals age(0) - age(z)."""
        for cosmo in (OPEN, CLOSED):
            z = np.array([0.5, 1.0, 2.0])
            np.testing.assert_allclose(cosmo.lookback_time(z), cosmo.age(0.0) - cosmo.age(z), rtol=1e-6)

    def test_matter_closed_form_matches_quadrature(self):
        z = np.array([0.5, 1.0, 3.0])
        np.testing.assert_allclose(MATTER.comoving_distance(z),
                                   MATTER._comoving_distance_z1z2_integrate(0.0, z), rtol=1e-6)
        np.testing.assert_allclose(MATTER.age(z), MATTER._age_integrate(z), rtol=1e-6)
        np.testing.assert_allclose(LAMBDA.lookback_time(z), LAMBDA._lookback_time_integrate(z), rtol=1e-6)

    def test_reciprocity(self):
        z = np.linspace(0.1, 5.0, 20)
        for cosmo in (OPEN, CLOSED, MATTER):
            ratio = cosmo.luminosity_distance(z) / cosmo.angular_diameter_distance(z)
            np.testing.assert_allclose(ratio, (1 + z)**2, rtol=1e-12)

    def test_invalid_parameters_propagate(self):
        """No validation: unphysical input gives non-finite values rather than errors."""
        cosmo = LambdaCDM(H0=70, Om0=-0.5, Ol0=3.0)
        result = cosmo.comoving_distance(np.array([1.0, 5.0]))
        assert result.shape == (2,)
        assert not np.all(np.isfinite(result))

    def test_string(self):
        assert str(FLAT) == "LambdaCDM{H0: 70, Om0: 0.3, Ol0: 0.7}"
