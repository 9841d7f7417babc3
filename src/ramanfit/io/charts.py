"""Normalized chart data for plotting the fit elsewhere.

Two two-column ``.xy`` files are written per fitted sample, both divided by
the maximum of the background-removed spectrum above 1200 cm⁻¹:

- ``<stem>bgremovedchart.xy``: background-removed spectrum
- ``<stem>peakschart.xy``: sum of the fitted bands on an even grid
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import numpy as np

from ramanfit.core.constants import PLOT_RANGE, POST_FIT_SIGNAL_START
from ramanfit.core.shared.exceptions import DataIOError

if TYPE_CHECKING:
    from ramanfit.core.domain.spectrum import Spectrum
    from ramanfit.core.fitting.results import FitOutcome
    from ramanfit.core.shared.typing import FloatArray

_GRID_STEP = 1.0


def chart_data(
    spectrum: Spectrum, outcome: FitOutcome
) -> tuple[tuple[FloatArray, FloatArray], tuple[FloatArray, FloatArray]]:
    """Return the normalized ``(x, y)`` of the corrected spectrum and of the fit.

    Raises
    ------
        DataIOError: The corrected spectrum has no positive maximum above
            1200 cm⁻¹ to normalize by
    """
    lo, hi = PLOT_RANGE
    mask = (spectrum.x >= lo) & (spectrum.x <= hi)
    x = spectrum.x[mask]
    corrected = spectrum.y[mask] - outcome.background.evaluate(x)

    signal = corrected[x > POST_FIT_SIGNAL_START]
    scale = float(signal.max()) if signal.size else 0.0
    if not scale > 0.0:
        msg = f"{spectrum.name}: no positive background-removed maximum to normalize by"
        raise DataIOError(msg)

    grid = np.arange(lo, hi + _GRID_STEP, _GRID_STEP)
    return (x, corrected / scale), (grid, outcome.peaks(grid) / scale)


def _write_xy(path: Path, x: FloatArray, y: FloatArray) -> None:
    np.savetxt(path, np.column_stack((x, y)), fmt="%.6f")


def write_chart_data(
    directory: Path, stem: str, spectrum: Spectrum, outcome: FitOutcome
) -> list[Path]:
    """Write both chart files into *directory* and return their paths."""
    (data_x, data_y), (fit_x, fit_y) = chart_data(spectrum, outcome)
    data_path = directory / f"{stem}bgremovedchart.xy"
    fit_path = directory / f"{stem}peakschart.xy"
    try:
        _write_xy(data_path, data_x, data_y)
        _write_xy(fit_path, fit_x, fit_y)
    except OSError as exc:
        msg = f"Cannot write chart data for {spectrum.name}: {exc}"
        raise DataIOError(msg) from exc
    return [data_path, fit_path]


__all__ = ["chart_data", "write_chart_data"]
