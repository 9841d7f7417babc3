"""Linear background estimated from the spectrum endpoints."""

from __future__ import annotations

from dataclasses import dataclass

from ramanfit.core.domain.spectrum import Spectrum
from ramanfit.core.shared.exceptions import InsufficientDataError
from ramanfit.core.shared.typing import FloatArray


@dataclass(frozen=True, slots=True)
class LinearBackground:
    """Straight-line background ``intercept + slope * x``."""

    intercept: float
    slope: float

    def evaluate(self, x: FloatArray | float) -> FloatArray | float:
        """Background value at wavenumber(s) *x*."""
        return self.intercept + self.slope * x


def estimate_background(spectrum: Spectrum) -> LinearBackground:
    """Draw a line through the first and last records of *spectrum*.

    The first record is the high-wavenumber end and the last record the
    low-wavenumber end; the line passes exactly through both.

    Raises
    ------
        InsufficientDataError: Fewer than two records, or both endpoints at
            the same wavenumber
    """
    if len(spectrum) < 2:
        msg = f"{spectrum.name}: {len(spectrum)} record(s), at least 2 needed for a background"
        raise InsufficientDataError(msg)

    x_end, y_end = spectrum.first
    x_init, y_init = spectrum.last
    if x_end == x_init:
        msg = f"{spectrum.name}: spectrum endpoints share wavenumber {x_end}"
        raise InsufficientDataError(msg)

    slope = (y_end - y_init) / (x_end - x_init)
    intercept = y_init - slope * x_init
    return LinearBackground(intercept=intercept, slope=slope)


__all__ = ["LinearBackground", "estimate_background"]
