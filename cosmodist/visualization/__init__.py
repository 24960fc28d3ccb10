"""
cosmodist Visualization
=======================

matplotlib plots of computed distances.
"""

from .styles import apply_style, PLOT_STYLE, SCATTER_COLOR
from .plotting import plot_distance_modulus

__all__ = ['apply_style', 'PLOT_STYLE', 'SCATTER_COLOR', 'plot_distance_modulus']
