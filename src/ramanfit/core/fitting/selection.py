"""Voigt/Lorentzian model selection.

The selector always fits the three-band Voigt model first and accepts it
when its ratios fall inside the calibrated range::

    AwaitVoigtFit ─┬─> Voigt1             R2 < r2_limit, floor(D1 HWHM) < d1_width_limit
                   ├─> Voigt3             R2 < r2_limit, floor(100 R1) < 100 r1_limit
                   └─> AttemptLorentzian ─┬─> Lorentzians   RA2 within its limit
                                          └─> Voigt2        RA2 above its limit or undefined

Voigt2 reports the Voigt numbers even though the Lorentzian fit ran. The
decision rules are plain functions so their boundaries can be tested on
exact values.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Protocol

from ramanfit.core.domain.config import RamanFitConfig, SelectionConfig
from ramanfit.core.domain.peaks import PeakName
from ramanfit.core.domain.record import FitStyle
from ramanfit.core.fitting.initial import initial_guess
from ramanfit.core.fitting.models import LORENTZIAN_MODEL, VOIGT_MODEL, ModelSpec
from ramanfit.core.fitting.optimizer import ConstrainedOptimizer
from ramanfit.core.results.metrics import ModelMetrics, compute_metrics, floor_percent
from ramanfit.core.shared.reporter import NullReporter, Reporter
from ramanfit.core.shared.values import Metric, format_value, is_value

if TYPE_CHECKING:
    from ramanfit.core.algorithms.background import LinearBackground
    from ramanfit.core.domain.config import OptimizerConfig
    from ramanfit.core.domain.spectrum import Spectrum
    from ramanfit.core.fitting.initial import InitialGuess
    from ramanfit.core.fitting.results import FitOutcome


class SelectorState(str, Enum):
    """States of the model selection."""

    AWAIT_VOIGT_FIT = "AwaitVoigtFit"
    ATTEMPT_LORENTZIAN = "AttemptLorentzian"
    VOIGT1 = "Voigt1"
    VOIGT2 = "Voigt2"
    VOIGT3 = "Voigt3"
    LORENTZIANS = "Lorentzians"

    @property
    def fit_style(self) -> FitStyle:
        """Ledger fit style of a terminal state."""
        return FitStyle(self.value)


class Optimizer(Protocol):
    """Anything that fits a model from an initial guess."""

    def fit(self, spectrum: Spectrum, guess: InitialGuess, config: OptimizerConfig) -> FitOutcome:
        ...


def accepts_voigt1(r2: Metric, d1_width: float, selection: SelectionConfig) -> bool:
    """Voigt fit is accepted with a narrow D1 band."""
    if not is_value(r2):
        return False
    return r2 < selection.r2_limit and math.floor(d1_width) < selection.d1_width_limit


def accepts_voigt3(r2: Metric, r1: Metric, selection: SelectionConfig) -> bool:
    """Voigt fit is accepted with a weak D1 band."""
    if not (is_value(r2) and is_value(r1)):
        return False
    return r2 < selection.r2_limit and floor_percent(r1) < round(100 * selection.r1_limit)


def rejects_lorentzian(ra2: Metric, selection: SelectionConfig) -> bool:
    """Lorentzian fit is discarded; an undefined RA2 also discards it."""
    if not is_value(ra2):
        return True
    return floor_percent(ra2) > round(100 * selection.ra2_limit)


@dataclass(frozen=True)
class Selection:
    """Terminal state of the selector with both fits and their metrics."""

    fit_style: FitStyle
    voigt: FitOutcome
    voigt_metrics: ModelMetrics
    lorentzian: FitOutcome | None = None
    lorentzian_metrics: ModelMetrics | None = None
    path: tuple[SelectorState, ...] = ()

    @property
    def accepted(self) -> FitOutcome:
        """The fit whose numbers are reported."""
        if self.fit_style is FitStyle.LORENTZIANS and self.lorentzian is not None:
            return self.lorentzian
        return self.voigt

    @property
    def metrics(self) -> ModelMetrics:
        """Metrics of the accepted fit."""
        if self.fit_style is FitStyle.LORENTZIANS and self.lorentzian_metrics is not None:
            return self.lorentzian_metrics
        return self.voigt_metrics


class ModelSelector:
    """Runs the Voigt fit, applies the acceptance rules, and falls back to
    the Lorentzian fit when needed.

    Args:
        config: Thresholds and optimizer settings
        optimizer: Fitting backend; ``ConstrainedOptimizer`` by default
        reporter: Progress reporting
    """

    def __init__(
        self,
        config: RamanFitConfig | None = None,
        optimizer: Optimizer | None = None,
        reporter: Reporter | None = None,
    ) -> None:
        self.config = config if config is not None else RamanFitConfig()
        self.optimizer = optimizer if optimizer is not None else ConstrainedOptimizer()
        self.reporter = reporter if reporter is not None else NullReporter()

    def _fit(
        self,
        spectrum: Spectrum,
        background: LinearBackground,
        spec: ModelSpec,
        config: OptimizerConfig,
    ) -> FitOutcome:
        guess = initial_guess(spectrum, background, spec)
        return self.optimizer.fit(spectrum, guess, config)

    def select(self, spectrum: Spectrum, background: LinearBackground) -> Selection:
        """Fit *spectrum* and return the terminal selection.

        Args:
            spectrum: Raw spectrum that passed the noise gate
            background: Endpoint background used to seed both fits

        Returns
        -------
            Selection holding the fit style and the fits it was based on
        """
        rules = self.config.selection
        path = [SelectorState.AWAIT_VOIGT_FIT]

        self.reporter.action(f"{spectrum.name}: fitting {len(VOIGT_MODEL.peaks)} Voigt bands")
        voigt = self._fit(spectrum, background, VOIGT_MODEL, self.config.voigt)
        voigt_metrics = compute_metrics(voigt)
        d1 = voigt.component(PeakName.D1)
        assert d1 is not None

        terminal: SelectorState | None = None
        if accepts_voigt1(voigt_metrics.r2, d1.width, rules):
            terminal = SelectorState.VOIGT1
        elif accepts_voigt3(voigt_metrics.r2, voigt_metrics.r1, rules):
            terminal = SelectorState.VOIGT3
        if terminal is not None:
            path.append(terminal)
            return Selection(
                fit_style=terminal.fit_style,
                voigt=voigt,
                voigt_metrics=voigt_metrics,
                path=tuple(path),
            )

        self.reporter.info(
            f"{spectrum.name}: Voigt fit outside calibration "
            f"(R2 = {format_value(voigt_metrics.r2, 4)}), trying Lorentzians"
        )
        path.append(SelectorState.ATTEMPT_LORENTZIAN)
        self.reporter.action(
            f"{spectrum.name}: fitting {len(LORENTZIAN_MODEL.peaks)} Lorentzian bands"
        )
        lorentzian = self._fit(spectrum, background, LORENTZIAN_MODEL, self.config.lorentzian)
        lorentzian_metrics = compute_metrics(lorentzian)

        if rejects_lorentzian(lorentzian_metrics.ra2, rules):
            self.reporter.info(
                f"{spectrum.name}: RA2 = {format_value(lorentzian_metrics.ra2, 4)} "
                "outside calibration, reporting the Voigt fit"
            )
            terminal = SelectorState.VOIGT2
        else:
            terminal = SelectorState.LORENTZIANS
        path.append(terminal)
        return Selection(
            fit_style=terminal.fit_style,
            voigt=voigt,
            voigt_metrics=voigt_metrics,
            lorentzian=lorentzian,
            lorentzian_metrics=lorentzian_metrics,
            path=tuple(path),
        )


__all__ = [
    "ModelSelector",
    "Optimizer",
    "Selection",
    "SelectorState",
    "accepts_voigt1",
    "accepts_voigt3",
    "rejects_lorentzian",
]
