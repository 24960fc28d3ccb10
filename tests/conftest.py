"""Shared tolerances and redshift grid for the cosmodist test suite."""

import numpy as np
import pytest

import cosmodist  # noqa: F401  (enables float64 before any array is built)

# Relative tolerances against the astropy reference values
DIST_RTOL = 1e-6
AGE_RTOL = 1e-6
DISTMOD_RTOL = 1e-5
E_RTOL = 1e-9

Z_TABLE = np.array([0.5, 1.0, 2.0, 3.0])


@pytest.fixture
def z_table():
    return Z_TABLE.copy()
