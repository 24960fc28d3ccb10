"""
cosmodist Visualization - distance plots
"""

from pathlib import Path
from typing import Optional, Sequence, Union

import numpy as np
import matplotlib
import matplotlib.pyplot as plt

from ..core.base import FLRW
from .styles import SCATTER_COLOR, apply_style


def plot_distance_modulus(cosmo: FLRW,
                          z: Sequence[float],
                          filename: Optional[Union[str, Path]] = None,
                          ax: Optional[matplotlib.axes.Axes] = None) -> matplotlib.figure.Figure:
    """
    Scatter plot of the distance modulus against redshift.

    Parameters
    ----------
    cosmo : FLRW
        Cosmology to evaluate
    z : sequence of float
        Redshifts
    filename : str or Path, optional
        Save the figure there when given
    ax : matplotlib.axes.Axes, optional
        Draw into an existing axis

    Returns
    -------
    matplotlib.figure.Figure
        The figure holding the plot
    """
    apply_style()

    z = np.asarray(z, dtype=float)
    mu = np.asarray(cosmo.distance_modulus(z))

    if ax is None:
        fig, ax = plt.subplots(figsize=(7.9, 5.5))
    else:
        fig = ax.figure

    ax.scatter(z, mu, s=25, color=SCATTER_COLOR, zorder=3)
    ax.set_title(str(cosmo))
    ax.set_xlabel(r'$z$')
    ax.set_ylabel(r'Distance Modulus $\mu$ [mag]')

    if filename is not None:
        fig.savefig(filename, dpi=150, bbox_inches='tight')
    return fig
