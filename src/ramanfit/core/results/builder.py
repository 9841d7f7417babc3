"""Assembly of the per-sample ledger record from a model selection."""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

from ramanfit.core.domain.peaks import PEAK_ORDER
from ramanfit.core.domain.record import NOT_FITTED, FitStyle, PeakFields, SampleRecord
from ramanfit.core.shared.values import NotApplicable, scale

if TYPE_CHECKING:
    from ramanfit.core.fitting.results import FitOutcome
    from ramanfit.core.fitting.selection import Selection

FWHM_PER_HWHM = 2.0


def _peak_fields(outcome: FitOutcome) -> dict[str, PeakFields]:
    fields = {}
    for name in PEAK_ORDER:
        component = outcome.component(name)
        fields[name.value] = (
            PeakFields.from_component(component) if component is not None else NOT_FITTED
        )
    return fields


def build_record(name: str, selection: Selection, snr: int | NotApplicable) -> SampleRecord:
    """Build the HWHM record of a fitted sample.

    Voigt styles report the Voigt fit, with RA1/RA2, their temperatures and
    the D3/D4 fields left ``NA``; ``reported_temp`` is the R2 temperature.
    Lorentzians report the Lorentzian fit with ``reported_temp`` set to the
    RA2 temperature. ``r2_ratio_voigt`` and ``total_width_voigt`` always come
    from the Voigt fit.

    Args:
        name: Sample name (ledger key)
        selection: Terminal selection
        snr: Post-fit signal-to-noise ratio of the accepted fit

    Returns
    -------
        SampleRecord with widths still as HWHM; see ``finalize_record``
    """
    accepted = selection.accepted
    metrics = selection.metrics
    voigt_metrics = selection.voigt_metrics

    if selection.fit_style is FitStyle.LORENTZIANS:
        ra_fields = {
            "ra1_ratio": metrics.ra1,
            "ra1_temp": metrics.ra1_temp,
            "ra2_ratio": metrics.ra2,
            "ra2_temp": metrics.ra2_temp,
            "reported_temp": metrics.ra2_temp,
        }
    else:
        ra_fields = {"reported_temp": metrics.r2_temp}

    return SampleRecord(
        name=name,
        fit_style=selection.fit_style,
        **_peak_fields(accepted),
        r1_ratio=metrics.r1,
        r2_ratio=metrics.r2,
        r2_temp=metrics.r2_temp,
        r2_ratio_voigt=voigt_metrics.r2,
        total_width=metrics.total_width,
        total_width_voigt=voigt_metrics.total_width,
        snr=snr,
        iterations=accepted.iterations,
        **ra_fields,
    )


def finalize_record(record: SampleRecord) -> SampleRecord:
    """Convert every reported width from HWHM to FWHM.

    Per-peak widths, the total width and the Voigt total width are doubled;
    ``NA`` widths stay ``NA``. Noisy records carry no widths and are
    returned unchanged.
    """
    if record.fit_style is FitStyle.NOISY:
        return record
    peaks = {name.value: record.peak(name).doubled_width() for name in PEAK_ORDER}
    return replace(
        record,
        **peaks,
        total_width=scale(record.total_width, FWHM_PER_HWHM),
        total_width_voigt=scale(record.total_width_voigt, FWHM_PER_HWHM),
    )


def noisy_record(name: str, snr: int) -> SampleRecord:
    """Record of a sample rejected by the noise gate."""
    return SampleRecord.noisy(name, snr)


__all__ = ["FWHM_PER_HWHM", "build_record", "finalize_record", "noisy_record"]
