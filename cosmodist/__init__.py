"""
cosmodist: cosmological distances, ages and look-back times.

Distance, age and look-back-time measures for FLRW universes with a
cosmological constant, constant-w or w0-wa dark energy, matching astropy
reference values. Built on JAX for vectorized evaluation over redshifts.
"""

# 64-bit precision must be enabled before any JAX array is created
import jax
jax.config.update("jax_enable_x64", True)

__version__ = "0.1.0"

from . import core
from . import models
from . import utils
from .core.base import FLRW
from .core.parameters import (
    PRESETS,
    cosmology_from_dict,
    cosmology_to_dict,
    load_cosmology,
    preset,
    save_cosmology,
)
from .models import FlatLCDM, LambdaCDM, WCDM, WACDM

__all__ = [
    "core",
    "models",
    "utils",
    "FLRW",
    "FlatLCDM",
    "LambdaCDM",
    "WCDM",
    "WACDM",
    "PRESETS",
    "cosmology_from_dict",
    "cosmology_to_dict",
    "load_cosmology",
    "preset",
    "save_cosmology",
]
