"""Figure functions for fitted and noisy Raman spectra.

All functions return matplotlib Figure objects; saving is left to the
caller. Every panel is drawn over the plotting range (1000 to 1900 cm⁻¹)
with the wavenumber axis increasing to the right.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.figure import Figure

from ramanfit.core.constants import PLOT_RANGE

if TYPE_CHECKING:
    from matplotlib.axes import Axes

    from ramanfit.core.algorithms.background import LinearBackground
    from ramanfit.core.domain.spectrum import Spectrum
    from ramanfit.core.fitting.results import FitOutcome
    from ramanfit.core.shared.typing import FloatArray

PANELS = ("data", "fit", "peaks")
"""Single-panel figures rendered as PNG, in the order of the combined figure."""

_GRID_POINTS = 901
_COMPONENT_COLOURS = {
    "g": "tab:green",
    "d1": "tab:red",
    "d2": "tab:orange",
    "d3": "tab:purple",
    "d4": "tab:brown",
}


def plot_grid() -> FloatArray:
    """Evenly spaced wavenumbers over the plotting range."""
    return np.linspace(PLOT_RANGE[0], PLOT_RANGE[1], _GRID_POINTS)


def _in_range(spectrum: Spectrum) -> tuple[FloatArray, FloatArray]:
    lo, hi = PLOT_RANGE
    mask = (spectrum.x >= lo) & (spectrum.x <= hi)
    return spectrum.x[mask], spectrum.y[mask]


def _decorate(ax: Axes, ylabel: str = "Intensity (a.u.)") -> None:
    ax.set_xlim(*PLOT_RANGE)
    ax.set_xlabel(r"Raman shift (cm$^{-1}$)", fontsize=10)
    ax.set_ylabel(ylabel, fontsize=10)
    ax.grid(True, alpha=0.3)


def draw_data(ax: Axes, spectrum: Spectrum, background: LinearBackground | None) -> None:
    """Raw spectrum with the background line."""
    x, y = _in_range(spectrum)
    ax.plot(x, y, ".", markersize=2, color="black", label="data")
    if background is not None:
        grid = plot_grid()
        ax.plot(grid, background.evaluate(grid), "--", color="tab:blue", label="background")
    ax.legend(fontsize=8, loc="upper left")
    _decorate(ax)


def draw_fit(ax: Axes, spectrum: Spectrum, outcome: FitOutcome) -> None:
    """Spectrum with the full fitted curve and the residual below it."""
    x, y = _in_range(spectrum)
    grid = plot_grid()
    ax.plot(x, y, ".", markersize=2, color="black", label="data")
    ax.plot(grid, outcome.model(grid), color="tab:red", linewidth=1.2, label="fit")
    residual = y - outcome.model(x)
    offset = float(np.min(y)) - float(np.max(residual)) if y.size else 0.0
    ax.plot(x, residual + offset, color="grey", linewidth=0.8, label="residual")
    ax.legend(fontsize=8, loc="upper left")
    _decorate(ax)


def draw_peaks(ax: Axes, spectrum: Spectrum, outcome: FitOutcome) -> None:
    """Background-removed spectrum with every fitted band and their sum."""
    x, y = _in_range(spectrum)
    grid = plot_grid()
    ax.plot(x, y - outcome.background.evaluate(x), ".", markersize=2, color="black", label="data")
    for component in outcome.components:
        ax.plot(
            grid,
            outcome.component_curve(component, grid),
            color=_COMPONENT_COLOURS.get(component.name.value, "tab:gray"),
            linewidth=1.0,
            label=component.name.label,
        )
    ax.plot(grid, outcome.peaks(grid), color="tab:red", linewidth=1.2, label="sum")
    ax.legend(fontsize=8, loc="upper left")
    _decorate(ax, ylabel="Intensity - background (a.u.)")


def make_combined_figure(
    spectrum: Spectrum,
    background: LinearBackground,
    outcome: FitOutcome,
    title: str,
) -> Figure:
    """Create the three-panel figure of a fitted sample.

    Args:
        spectrum: Raw spectrum
        background: Endpoint background estimate
        outcome: Accepted fit
        title: Figure title (sample name and fit style)

    Returns:
        Matplotlib Figure object
    """
    fig, axes = plt.subplots(3, 1, figsize=(8, 11))
    draw_data(axes[0], spectrum, background)
    draw_fit(axes[1], spectrum, outcome)
    draw_peaks(axes[2], spectrum, outcome)
    fig.suptitle(title, fontsize=12, fontweight="bold")
    fig.tight_layout()
    return fig


def make_panel_figure(
    panel: str,
    spectrum: Spectrum,
    background: LinearBackground,
    outcome: FitOutcome,
    title: str,
) -> Figure:
    """Create one panel of the combined figure on its own."""
    fig, ax = plt.subplots(figsize=(8, 5))
    if panel == "data":
        draw_data(ax, spectrum, background)
    elif panel == "fit":
        draw_fit(ax, spectrum, outcome)
    elif panel == "peaks":
        draw_peaks(ax, spectrum, outcome)
    else:
        plt.close(fig)
        msg = f"Unknown panel '{panel}', expected one of {PANELS}"
        raise ValueError(msg)
    ax.set_title(title, fontsize=12, fontweight="bold")
    fig.tight_layout()
    return fig


def make_noisy_figure(spectrum: Spectrum, background: LinearBackground | None, title: str) -> Figure:
    """Create the raw-spectrum figure of a sample rejected as noisy."""
    fig, ax = plt.subplots(figsize=(8, 5))
    draw_data(ax, spectrum, background)
    ax.set_title(title, fontsize=12, fontweight="bold")
    fig.tight_layout()
    return fig


__all__ = [
    "PANELS",
    "draw_data",
    "draw_fit",
    "draw_peaks",
    "make_combined_figure",
    "make_noisy_figure",
    "make_panel_figure",
    "plot_grid",
]
