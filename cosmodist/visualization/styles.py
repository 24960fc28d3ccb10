"""
cosmodist Visualization Styles

rcParams and colours shared by the distance plots.
"""

import matplotlib.pyplot as plt

PLOT_STYLE = {
    'axes.linewidth': 1.2,
    'axes.labelsize': 16,
    'axes.titlesize': 12,
    'xtick.labelsize': 11,
    'ytick.labelsize': 11,
    'axes.grid': True,
    'grid.alpha': 0.3,
    'savefig.facecolor': 'white',
    'mathtext.fontset': 'cm',
}

SCATTER_COLOR = '#C73E1D'


def apply_style(**overrides):
    """Apply the plot style, optionally overriding rcParams."""
    config = PLOT_STYLE.copy()
    config.update(overrides)
    plt.rcParams.update(config)


__all__ = ['apply_style', 'PLOT_STYLE', 'SCATTER_COLOR']
