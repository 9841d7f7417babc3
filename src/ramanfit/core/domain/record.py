"""Per-sample result record written to the ledger."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ramanfit.core.domain.peaks import PEAK_ORDER, PeakComponent, PeakName
from ramanfit.core.shared.values import (
    NA,
    IterationCount,
    Metric,
    NotApplicable,
    format_value,
    scale,
)


class FitStyle(str, Enum):
    """Terminal outcome of a sample (ledger ``fitstyle`` column)."""

    NOISY = "Noisy"
    VOIGT1 = "Voigt1"
    VOIGT2 = "Voigt2"
    VOIGT3 = "Voigt3"
    LORENTZIANS = "Lorentzians"


PEAK_FIELDS = ("height", "location", "width", "area")

LEDGER_COLUMNS: tuple[str, ...] = (
    "name",
    *(f"{peak.value}_{field}" for peak in PEAK_ORDER for field in PEAK_FIELDS),
    "r1_ratio",
    "r2_ratio",
    "r2_temp",
    "ra1_ratio",
    "ra1_temp",
    "ra2_ratio",
    "ra2_temp",
    "r2voigt",
    "plottemp",
    "totalwidth",
    "totalwidthvoigt",
    "fitstyle",
    "sig-noise",
    "iterations",
)
"""Column names of the ledger header row, in row order."""


@dataclass(frozen=True, slots=True)
class PeakFields:
    """Reported height, location, width and area of one band."""

    height: Metric = NA
    location: Metric = NA
    width: Metric = NA
    area: Metric = NA

    @classmethod
    def from_component(cls, component: PeakComponent) -> PeakFields:
        return cls(
            height=component.height,
            location=component.location,
            width=component.width,
            area=component.area,
        )

    def doubled_width(self) -> PeakFields:
        """Return a copy with the width converted from HWHM to FWHM."""
        return PeakFields(self.height, self.location, scale(self.width, 2.0), self.area)

    def values(self) -> tuple[Metric, Metric, Metric, Metric]:
        return (self.height, self.location, self.width, self.area)


NOT_FITTED = PeakFields()


@dataclass(frozen=True)
class SampleRecord:
    """Immutable result of one pipeline run for one sample.

    Widths are reported as full widths at half maximum once the record has
    been finalized; fields a model does not produce hold ``NA``.
    """

    name: str
    fit_style: FitStyle
    g: PeakFields = NOT_FITTED
    d1: PeakFields = NOT_FITTED
    d2: PeakFields = NOT_FITTED
    d3: PeakFields = NOT_FITTED
    d4: PeakFields = NOT_FITTED
    r1_ratio: Metric = NA
    r2_ratio: Metric = NA
    r2_temp: Metric = NA
    ra1_ratio: Metric = NA
    ra1_temp: Metric = NA
    ra2_ratio: Metric = NA
    ra2_temp: Metric = NA
    r2_ratio_voigt: Metric = NA
    reported_temp: Metric = NA
    total_width: Metric = NA
    total_width_voigt: Metric = NA
    snr: int | NotApplicable = NA
    iterations: IterationCount | NotApplicable = NA

    def peak(self, name: PeakName) -> PeakFields:
        """Return the reported fields of band *name*."""
        return getattr(self, name.value)

    @classmethod
    def noisy(cls, name: str, snr: int) -> SampleRecord:
        """Sentinel record of a spectrum rejected by the noise gate."""
        return cls(name=name, fit_style=FitStyle.NOISY, snr=snr)

    def to_row(self) -> list[str]:
        """Render the record as ledger cells in ``LEDGER_COLUMNS`` order."""
        cells: list[object] = [self.name]
        for peak in PEAK_ORDER:
            cells.extend(self.peak(peak).values())
        cells.extend(
            [
                self.r1_ratio,
                self.r2_ratio,
                self.r2_temp,
                self.ra1_ratio,
                self.ra1_temp,
                self.ra2_ratio,
                self.ra2_temp,
                self.r2_ratio_voigt,
                self.reported_temp,
                self.total_width,
                self.total_width_voigt,
                self.fit_style.value,
                self.snr,
                self.iterations,
            ]
        )
        return [format_value(cell) for cell in cells]

    def as_dict(self) -> dict[str, str]:
        """Mapping of ledger column name to rendered cell."""
        return dict(zip(LEDGER_COLUMNS, self.to_row(), strict=True))


__all__ = [
    "LEDGER_COLUMNS",
    "NOT_FITTED",
    "PEAK_FIELDS",
    "FitStyle",
    "PeakFields",
    "SampleRecord",
]
