"""Peak identities and fitted peak components."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class PeakName(str, Enum):
    """Canonical first-order Raman bands of carbonaceous material."""

    G = "g"  # graphite band, ~1580 cm-1
    D1 = "d1"  # ~1350 cm-1
    D2 = "d2"  # ~1620 cm-1
    D3 = "d3"  # ~1500 cm-1
    D4 = "d4"  # ~1200 cm-1

    @property
    def label(self) -> str:
        """Display label (e.g. 'D1')."""
        return self.value.upper()


PEAK_ORDER: tuple[PeakName, ...] = (
    PeakName.G,
    PeakName.D1,
    PeakName.D2,
    PeakName.D3,
    PeakName.D4,
)


class PeakFamily(str, Enum):
    """Line shape family of a fit model."""

    VOIGT = "voigt"
    LORENTZIAN = "lorentzian"


@dataclass(frozen=True, slots=True)
class PeakComponent:
    """Fitted peak, with widths as half widths at half maximum.

    ``amplitude`` is the optimizer's scale factor; ``height`` is the peak
    value at its centre and ``area`` its integral over wavenumber.
    """

    name: PeakName
    family: PeakFamily
    location: float
    amplitude: float
    height: float
    width: float
    area: float


__all__ = ["PEAK_ORDER", "PeakComponent", "PeakFamily", "PeakName"]
