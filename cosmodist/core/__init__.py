"""
cosmodist Core
==============

Building blocks of the distance and age engine.

Key components:
- base: FLRW abstract base class with the shared capability set
- dispatch: decision tables selecting a computation method per model
- analytic / elliptic: exact closed forms
- integration: fixed-order Gauss-Legendre quadrature
- curvature: radial to transverse comoving distance
- parameters: presets and YAML configuration
"""

from .base import FLRW
from .dispatch import Method, Rule, select_method
from .integration import DEFAULT_ORDER, fixed_quad, gauss_legendre
from .curvature import comoving_transverse_distance

__all__ = [
    'FLRW',
    'Method',
    'Rule',
    'select_method',
    'DEFAULT_ORDER',
    'fixed_quad',
    'gauss_legendre',
    'comoving_transverse_distance',
]
