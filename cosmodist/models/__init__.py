"""
cosmodist Cosmological Models
=============================

FLRW cosmologies sharing the capability set of ``cosmodist.core.FLRW``.

Available models:
- FlatLCDM: flat matter + cosmological constant
- LambdaCDM: matter + cosmological constant + curvature
- WCDM: constant dark energy equation of state
- WACDM: w0-wa (CPL) dark energy equation of state

Each model is an immutable value type and dispatches, per quantity, to the
cheapest exact method for its parameters.
"""

from .flat_lcdm import FlatLCDM, to_flat_lcdm
from .lcdm import LambdaCDM, to_lambda_cdm
from .wcdm import WCDM, to_wcdm
from .wacdm import WACDM

__all__ = [
    'FlatLCDM',
    'LambdaCDM',
    'WCDM',
    'WACDM',
    'to_flat_lcdm',
    'to_lambda_cdm',
    'to_wcdm',
]
