"""Plotting module for RamanFit.

Figure functions for fitted spectra (three-panel combined figure and its
single panels) and for spectra rejected as noisy.
"""

from ramanfit.plotting.figures import (
    PANELS,
    make_combined_figure,
    make_noisy_figure,
    make_panel_figure,
    plot_grid,
)

__all__ = [
    "PANELS",
    "make_combined_figure",
    "make_noisy_figure",
    "make_panel_figure",
    "plot_grid",
]
