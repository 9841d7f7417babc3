"""Initial parameter estimation for a fit model.

For every peak the search window is scanned for its maximum intensity. The
background at that wavenumber is subtracted and the model's height factor
applied; the result seeds the amplitude. Location and width seeds follow
the peak set-up.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

from ramanfit.core.algorithms.background import LinearBackground
from ramanfit.core.domain.peaks import PeakName
from ramanfit.core.domain.spectrum import Spectrum
from ramanfit.core.fitting.models import ModelSpec, PeakSetup
from ramanfit.core.shared.typing import FloatArray

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PeakGuess:
    """Located maximum of one peak and its unconstrained optimizer seeds."""

    name: PeakName
    height: float
    location: float
    z_location: float
    z_amplitude: float
    z_width: float


@dataclass(frozen=True)
class InitialGuess:
    """Starting point of one constrained fit."""

    spec: ModelSpec
    background: LinearBackground
    peaks: tuple[PeakGuess, ...]

    def vector(self) -> FloatArray:
        """Optimizer start vector ``[intercept, slope, (loc, amp, width) per peak]``."""
        values = [self.background.intercept, self.background.slope]
        for peak in self.peaks:
            values.extend((peak.z_location, peak.z_amplitude, peak.z_width))
        return np.asarray(values, dtype=np.float64)


def locate_maximum(spectrum: Spectrum, window: tuple[float, float]) -> tuple[float, float] | None:
    """Return ``(wavenumber, intensity)`` of the first maximum inside *window*."""
    x, y = spectrum.window(window)
    if not y.size:
        return None
    index = int(np.argmax(y))
    return float(x[index]), float(y[index])


def _guess_peak(spectrum: Spectrum, background: LinearBackground, setup: PeakSetup) -> PeakGuess:
    located = locate_maximum(spectrum, setup.search_window)
    if located is None:
        logger.debug(
            "%s: no records in %s search window %s", spectrum.name, setup.name.label, setup.search_window
        )
        location = setup.search_centre
        height = 0.0
    else:
        location, maximum = located
        height = (maximum - float(background.evaluate(location))) * setup.height_scale

    if setup.location_seed is not None:
        z_location = setup.location_seed
    elif setup.location_guess is not None:
        z_location = setup.location.seed(setup.location_guess)
    else:
        z_location = setup.location.seed(location)

    return PeakGuess(
        name=setup.name,
        height=height,
        location=location,
        z_location=z_location,
        z_amplitude=height,
        z_width=setup.width_seed,
    )


def initial_guess(
    spectrum: Spectrum, background: LinearBackground, spec: ModelSpec
) -> InitialGuess:
    """Estimate the starting parameters of *spec* for *spectrum*.

    Args:
        spectrum: Raw spectrum
        background: Endpoint background, also the starting background line
        spec: Fit model whose peaks are seeded

    Returns
    -------
        InitialGuess with one PeakGuess per model peak, in model order
    """
    peaks = tuple(_guess_peak(spectrum, background, setup) for setup in spec.peaks)
    return InitialGuess(spec=spec, background=background, peaks=peaks)


__all__ = ["InitialGuess", "PeakGuess", "initial_guess", "locate_maximum"]
