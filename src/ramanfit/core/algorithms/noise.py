"""Signal-to-noise estimation and the noise gate.

Before fitting, the gate compares the strongest first-order band (above the
endpoint background) with the intensity range of a flat reference window.
After fitting, the same ratio is recomputed on the background-removed data
and reported with the record.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from ramanfit.core.algorithms.background import LinearBackground
from ramanfit.core.constants import (
    NOISE_CEILING_SEED,
    NOISE_FLOOR_OFFSET,
    NOISE_WINDOW,
    PLOT_RANGE,
    POST_FIT_NOISE_WINDOW,
    POST_FIT_SIGNAL_START,
    SIGNAL_WINDOW,
)
from ramanfit.core.domain.spectrum import Spectrum
from ramanfit.core.shared.values import NA, NotApplicable


@dataclass(frozen=True, slots=True)
class NoiseEstimate:
    """Quantities behind the pre-fit signal-to-noise ratio."""

    noise_high: float
    noise_low: float
    signal: float
    signal_location: float
    snr: int

    @property
    def noise_range(self) -> float:
        return self.noise_high - self.noise_low

    def is_noisy(self, threshold: float) -> bool:
        """True when the spectrum must not be fitted."""
        return self.snr < threshold


def estimate_snr(spectrum: Spectrum, background: LinearBackground) -> NoiseEstimate:
    """Compute the pre-fit signal-to-noise ratio of *spectrum*.

    The noise maximum starts at 1 and the noise minimum starts at that
    maximum and is lowered by 0.1, so the noise range is at least 0.1 even
    for an empty or perfectly flat reference window. The ratio is truncated
    toward zero.

    Args:
        spectrum: Raw spectrum
        background: Endpoint background

    Returns
    -------
        NoiseEstimate with the integer ``snr``
    """
    _, noise_y = spectrum.window(NOISE_WINDOW)
    noise_high = max(NOISE_CEILING_SEED, float(noise_y.max())) if noise_y.size else NOISE_CEILING_SEED
    noise_low = min(noise_high, float(noise_y.min())) if noise_y.size else noise_high
    noise_low -= NOISE_FLOOR_OFFSET

    signal_x, signal_y = spectrum.window(SIGNAL_WINDOW)
    if signal_y.size:
        index = int(np.argmax(signal_y))
        peak = max(0.0, float(signal_y[index]))
        location = float(signal_x[index])
    else:
        peak = 0.0
        location = 0.5 * (SIGNAL_WINDOW[0] + SIGNAL_WINDOW[1])

    signal = peak - float(background.evaluate(location))
    snr = math.trunc(signal / (noise_high - noise_low))
    return NoiseEstimate(
        noise_high=noise_high,
        noise_low=noise_low,
        signal=signal,
        signal_location=location,
        snr=snr,
    )


def post_fit_snr(
    spectrum: Spectrum,
    background: LinearBackground,
    window: tuple[float, float] = PLOT_RANGE,
) -> int | NotApplicable:
    """Signal-to-noise ratio of the spectrum with the fitted background removed.

    Only records inside *window* take part: the plotting range for Voigt
    fits, the wider ``LORENTZIAN_TABLE_RANGE`` for Lorentzian ones. Returns
    ``NA`` when a window is empty or the noise range is zero.
    """
    lo, hi = window
    in_range = (spectrum.x >= lo) & (spectrum.x <= hi)
    x = spectrum.x[in_range]
    corrected = spectrum.y[in_range] - background.evaluate(x)

    noise_lo, noise_hi = POST_FIT_NOISE_WINDOW
    noise = corrected[(x > noise_lo) & (x < noise_hi)]
    signal = corrected[x > POST_FIT_SIGNAL_START]
    if not noise.size or not signal.size:
        return NA

    noise_range = float(noise.max() - noise.min())
    if noise_range == 0.0:
        return NA
    ratio = float(signal.max()) / noise_range
    return math.trunc(ratio) if math.isfinite(ratio) else NA


__all__ = ["NoiseEstimate", "estimate_snr", "post_fit_snr"]
