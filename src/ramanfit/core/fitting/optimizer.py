"""Constrained least-squares optimization of a fit model.

This module interfaces with scipy.optimize.least_squares (Levenberg-Marquardt).
Bounds are not passed to scipy: every location and width is optimized as an
unconstrained value ``z`` mapped through ``BoundedParameter``, and every
amplitude through ``|z|``. The Jacobian is analytic, chained through those
maps.

The parameter vector is laid out as::

    [intercept, slope, z_loc(0), z_amp(0), z_width(0), z_loc(1), ...]
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import numpy as np
from scipy.optimize import least_squares

from ramanfit.core.algorithms.background import LinearBackground
from ramanfit.core.constants import (
    EVALUATIONS_PER_ITERATION,
    LEAST_SQUARES_GTOL,
    LEAST_SQUARES_XTOL,
)
from ramanfit.core.domain.peaks import PeakComponent
from ramanfit.core.fitting.results import FitOutcome
from ramanfit.core.fitting.transforms import amplitude, amplitude_derivative
from ramanfit.core.lineshapes.functions import LineshapeEvaluator, get_evaluator
from ramanfit.core.shared.exceptions import InsufficientDataError
from ramanfit.core.shared.values import ExceededIterationCap, IterationCount

if TYPE_CHECKING:
    from ramanfit.core.domain.config import OptimizerConfig
    from ramanfit.core.domain.spectrum import Spectrum
    from ramanfit.core.fitting.initial import InitialGuess
    from ramanfit.core.fitting.models import ModelSpec
    from ramanfit.core.shared.typing import FloatArray

logger = logging.getLogger(__name__)


class _IterationCapReached(Exception):
    """Raised from the residual callback to stop scipy at the iteration cap."""

    def __init__(self, params: np.ndarray) -> None:
        super().__init__("iteration cap reached")
        self.params = params


@dataclass
class ModelFunction:
    """Residuals and Jacobian of ``background + Σ peaks`` against the data.

    Shapes and their derivatives are evaluated together and cached; scipy
    asks for the Jacobian at the point where it just computed residuals.

    Each Levenberg-Marquardt step starts with one Jacobian at a new point;
    ``jacobian_points`` counts those points. Once more than
    ``max_iterations`` of them were requested, the first trial step away
    from the latest one raises ``_IterationCapReached`` carrying that point.
    The Jacobian scipy evaluates at the solution after MINPACK returns is
    never followed by a trial step.
    """

    spec: ModelSpec
    x: FloatArray
    y: FloatArray
    max_iterations: int | None = None
    jacobian_points: int = field(default=0, init=False)

    _evaluator: LineshapeEvaluator = field(init=False, repr=False)
    _cache_hash: int | None = field(default=None, init=False, repr=False)
    _model: np.ndarray | None = field(default=None, init=False, repr=False)
    _jacobian: np.ndarray | None = field(default=None, init=False, repr=False)
    _step_hash: int | None = field(default=None, init=False, repr=False)
    _step_params: np.ndarray | None = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        self._evaluator = get_evaluator(self.spec.family)

    def _update_state(self, params: np.ndarray) -> None:
        cache_hash = hash(params.tobytes())
        if self._cache_hash == cache_hash:
            return

        n_points = self.x.size
        jacobian = np.empty((n_points, params.size))
        jacobian[:, 0] = 1.0
        jacobian[:, 1] = self.x
        model = params[0] + params[1] * self.x

        for index, setup in enumerate(self.spec.peaks):
            base = 2 + 3 * index
            z_loc, z_amp, z_width = params[base : base + 3]
            location = setup.location.value(z_loc)
            amp = amplitude(z_amp)
            width = setup.width.value(z_width)

            value, d_dx, d_width = self._evaluator.evaluate_derivatives(self.x - location, width)
            model = model + amp * value
            # d(x - loc)/d loc = -1
            jacobian[:, base] = -amp * d_dx * setup.location.derivative(z_loc)
            jacobian[:, base + 1] = amplitude_derivative(z_amp) * value
            jacobian[:, base + 2] = amp * d_width * setup.width.derivative(z_width)

        self._cache_hash = cache_hash
        self._model = model
        self._jacobian = jacobian

    def compute_residuals(self, params: np.ndarray) -> np.ndarray:
        """Model minus data at every record."""
        if (
            self.max_iterations is not None
            and self.jacobian_points > self.max_iterations
            and hash(params.tobytes()) != self._step_hash
        ):
            raise _IterationCapReached(self._step_params)
        self._update_state(params)
        assert self._model is not None
        return self._model - self.y

    def compute_jacobian(self, params: np.ndarray) -> np.ndarray:
        """Analytic Jacobian of the residuals, shape ``(n_points, n_params)``."""
        step_hash = hash(params.tobytes())
        if step_hash != self._step_hash:
            self._step_hash = step_hash
            self._step_params = params.copy()
            self.jacobian_points += 1
        self._update_state(params)
        assert self._jacobian is not None
        return self._jacobian

    def components(self, params: np.ndarray) -> tuple[PeakComponent, ...]:
        """Bound-mapped components with derived height and area."""
        components = []
        for index, setup in enumerate(self.spec.peaks):
            base = 2 + 3 * index
            z_loc, z_amp, z_width = params[base : base + 3]
            amp = amplitude(float(z_amp))
            width = setup.width.value(float(z_width))
            components.append(
                PeakComponent(
                    name=setup.name,
                    family=self.spec.family,
                    location=setup.location.value(float(z_loc)),
                    amplitude=amp,
                    height=self._evaluator.height(amp, width),
                    width=width,
                    area=self._evaluator.area(amp, width),
                )
            )
        return tuple(components)


def fit_model(
    spectrum: Spectrum,
    guess: InitialGuess,
    config: OptimizerConfig,
    verbose: int = 0,
) -> FitOutcome:
    """Fit one model to every record of *spectrum*.

    The background line is fitted alongside the peaks, starting from the
    endpoint estimate. Reaching the iteration cap is not an error: the last
    parameters are kept and ``iterations`` is ``ExceededIterationCap``.

    Args:
        spectrum: Raw spectrum
        guess: Starting point from the initializer
        config: Relative cost tolerance and iteration cap
        verbose: scipy verbosity level

    Returns
    -------
        FitOutcome with bound-mapped components

    Raises
    ------
        InsufficientDataError: Fewer records than fit parameters
    """
    spec = guess.spec
    if len(spectrum) < spec.n_parameters:
        msg = (
            f"{spectrum.name}: {len(spectrum)} record(s) cannot constrain "
            f"{spec.n_parameters} {spec.family.value} parameters"
        )
        raise InsufficientDataError(msg)

    function = ModelFunction(
        spec=spec, x=spectrum.x, y=spectrum.y, max_iterations=config.max_iterations
    )
    try:
        result = least_squares(
            function.compute_residuals,
            guess.vector(),
            jac=function.compute_jacobian,
            method="lm",
            ftol=config.tolerance,
            xtol=LEAST_SQUARES_XTOL,
            gtol=LEAST_SQUARES_GTOL,
            max_nfev=config.max_iterations * EVALUATIONS_PER_ITERATION,
            x_scale="jac",
            verbose=verbose,
        )
    except _IterationCapReached as stop:
        params = stop.params
        residual = function.compute_residuals(params)
        converged = False
        cost = 0.5 * float(np.dot(residual, residual))
        message = f"Iteration cap of {config.max_iterations} reached."
    else:
        params = np.asarray(result.x, dtype=np.float64)
        converged = result.status > 0
        cost = float(result.cost)
        message = str(result.message)

    iterations: IterationCount
    if converged:
        iterations = int(result.njev)
    else:
        iterations = ExceededIterationCap(config.max_iterations)
        logger.info(
            "%s: %s fit stopped at the iteration cap (%d)",
            spectrum.name,
            spec.family.value,
            config.max_iterations,
        )

    outcome = FitOutcome(
        family=spec.family,
        background=LinearBackground(intercept=float(params[0]), slope=float(params[1])),
        components=function.components(params),
        parameters=params,
        cost=cost,
        converged=converged,
        iterations=iterations,
        message=message,
    )
    logger.debug(
        "%s: %s fit finished after %s iteration(s) with cost %.6g (%s)",
        spectrum.name,
        spec.family.value,
        outcome.iterations,
        outcome.cost,
        outcome.message,
    )
    return outcome


class ConstrainedOptimizer:
    """Default optimizer used by the model selector."""

    def __init__(self, verbose: int = 0) -> None:
        self.verbose = verbose

    def fit(self, spectrum: Spectrum, guess: InitialGuess, config: OptimizerConfig) -> FitOutcome:
        return fit_model(spectrum, guess, config, verbose=self.verbose)


__all__ = ["ConstrainedOptimizer", "ModelFunction", "fit_model"]
