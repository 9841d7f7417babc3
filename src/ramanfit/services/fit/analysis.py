"""Analysis of one spectrum, from background estimate to final record.

This is the pure part of the pipeline: it neither reads the ledger nor
renders anything, so it can run on spectra built in memory.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ramanfit.core.algorithms.background import LinearBackground, estimate_background
from ramanfit.core.algorithms.noise import NoiseEstimate, estimate_snr, post_fit_snr
from ramanfit.core.constants import LORENTZIAN_TABLE_RANGE, PLOT_RANGE
from ramanfit.core.domain.config import RamanFitConfig
from ramanfit.core.domain.peaks import PeakFamily
from ramanfit.core.domain.record import FitStyle, SampleRecord
from ramanfit.core.fitting.selection import ModelSelector, Optimizer, Selection
from ramanfit.core.results.builder import build_record, finalize_record, noisy_record
from ramanfit.core.shared.reporter import NullReporter, Reporter

if TYPE_CHECKING:
    from ramanfit.core.domain.spectrum import Spectrum


@dataclass(frozen=True)
class SampleAnalysis:
    """Finalized record of a spectrum with the stages that produced it.

    ``selection`` is None for a spectrum rejected by the noise gate: no fit
    model is ever built for it.
    """

    record: SampleRecord
    noise: NoiseEstimate
    background: LinearBackground
    selection: Selection | None = None

    @property
    def is_noisy(self) -> bool:
        return self.record.fit_style is FitStyle.NOISY


def analyse_spectrum(
    spectrum: Spectrum,
    config: RamanFitConfig | None = None,
    *,
    optimizer: Optimizer | None = None,
    reporter: Reporter | None = None,
) -> SampleAnalysis:
    """Run the noise gate and, when it passes, the model selection.

    Args:
        spectrum: Raw spectrum, named after its ledger key
        config: Thresholds and optimizer settings (defaults when None)
        optimizer: Fitting backend passed to the model selector
        reporter: Progress reporting

    Returns
    -------
        SampleAnalysis whose record reports widths as FWHM

    Raises
    ------
        InsufficientDataError: The spectrum cannot support a background or a fit
    """
    config = config if config is not None else RamanFitConfig()
    reporter = reporter if reporter is not None else NullReporter()

    background = estimate_background(spectrum)
    noise = estimate_snr(spectrum, background)
    if noise.is_noisy(config.noise.threshold):
        reporter.warning(
            f"{spectrum.name}: signal/noise {noise.snr} below {config.noise.threshold:g}, "
            "recorded as Noisy"
        )
        return SampleAnalysis(
            record=noisy_record(spectrum.name, noise.snr),
            noise=noise,
            background=background,
        )

    reporter.info(f"{spectrum.name}: signal/noise {noise.snr}, fitting")
    selector = ModelSelector(config, optimizer=optimizer, reporter=reporter)
    selection = selector.select(spectrum, background)
    accepted = selection.accepted
    window = LORENTZIAN_TABLE_RANGE if accepted.family is PeakFamily.LORENTZIAN else PLOT_RANGE
    snr = post_fit_snr(spectrum, accepted.background, window)
    record = finalize_record(build_record(spectrum.name, selection, snr))
    return SampleAnalysis(record=record, noise=noise, background=background, selection=selection)


__all__ = ["SampleAnalysis", "analyse_spectrum"]
