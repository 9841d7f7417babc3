"""Peak set-ups of the two fit models.

Each peak carries its search window (where the initial height is located),
the closed bounds of its location and half width, the factor applied to the
height guess, and the optimizer seeds. A location seed is either a
wavenumber (inverted through the location bound), an unconstrained value
used as is, or absent, in which case the located maximum is inverted.
"""

from __future__ import annotations

from dataclasses import dataclass

from ramanfit.core.domain.peaks import PeakFamily, PeakName
from ramanfit.core.fitting.transforms import BoundedParameter


@dataclass(frozen=True, slots=True)
class PeakSetup:
    """Search window, bounds and seeds of one peak."""

    name: PeakName
    search_window: tuple[float, float]
    location: BoundedParameter
    width: BoundedParameter
    width_seed: float
    height_scale: float = 1.0
    location_guess: float | None = None
    location_seed: float | None = None

    @property
    def search_centre(self) -> float:
        lo, hi = self.search_window
        return 0.5 * (lo + hi)


@dataclass(frozen=True)
class ModelSpec:
    """Ordered peaks of one fit model."""

    family: PeakFamily
    peaks: tuple[PeakSetup, ...]

    @property
    def peak_names(self) -> tuple[PeakName, ...]:
        return tuple(peak.name for peak in self.peaks)

    @property
    def n_parameters(self) -> int:
        """Background intercept and slope plus three per peak."""
        return 2 + 3 * len(self.peaks)


VOIGT_MODEL = ModelSpec(
    family=PeakFamily.VOIGT,
    peaks=(
        PeakSetup(
            name=PeakName.G,
            search_window=(1575.0, 1600.0),
            location=BoundedParameter(1563.0, 1605.0),
            width=BoundedParameter(0.1, 40.1),
            height_scale=10.0,
            location_guess=1580.0,
            width_seed=-5.0,
        ),
        PeakSetup(
            name=PeakName.D1,
            search_window=(1200.0, 1450.0),
            location=BoundedParameter(1345.0, 1365.0),
            width=BoundedParameter(0.1, 100.1),
            height_scale=10.0,
            location_seed=0.1,
            width_seed=-5.0,
        ),
        PeakSetup(
            name=PeakName.D2,
            search_window=(1605.0, 1640.0),
            location=BoundedParameter(1605.0, 1625.0),
            width=BoundedParameter(0.1, 16.1),
            height_scale=10.0,
            location_seed=0.6,
            width_seed=-5.0,
        ),
    ),
)
"""Three Voigt bands (G, D1, D2)."""

LORENTZIAN_MODEL = ModelSpec(
    family=PeakFamily.LORENTZIAN,
    peaks=(
        PeakSetup(
            name=PeakName.G,
            search_window=(1575.0, 1600.0),
            location=BoundedParameter(1567.0, 1605.0),
            width=BoundedParameter(1.0, 41.0),
            width_seed=-1.5,
        ),
        PeakSetup(
            name=PeakName.D1,
            search_window=(1350.0, 1370.0),
            location=BoundedParameter(1350.0, 1370.0),
            width=BoundedParameter(1.0, 101.0),
            width_seed=-0.5,
        ),
        PeakSetup(
            name=PeakName.D2,
            search_window=(1610.0, 1640.0),
            location=BoundedParameter(1590.0, 1630.0),
            width=BoundedParameter(1.0, 41.0),
            location_seed=-5.0,
            width_seed=-1.5,
        ),
        PeakSetup(
            name=PeakName.D3,
            search_window=(1490.0, 1510.0),
            location=BoundedParameter(1475.0, 1525.0),
            width=BoundedParameter(1.0, 101.0),
            location_seed=0.1,
            width_seed=1.0,
        ),
        PeakSetup(
            name=PeakName.D4,
            search_window=(1140.0, 1150.0),
            location=BoundedParameter(1200.0, 1250.0),
            width=BoundedParameter(1.0, 101.0),
            location_seed=5.0,
            width_seed=1.0,
        ),
    ),
)
"""Five Lorentzian bands (G, D1, D2, D3, D4)."""


def model_for(family: PeakFamily) -> ModelSpec:
    """Return the model of a peak family."""
    return VOIGT_MODEL if family is PeakFamily.VOIGT else LORENTZIAN_MODEL


__all__ = ["LORENTZIAN_MODEL", "VOIGT_MODEL", "ModelSpec", "PeakSetup", "model_for"]
