"""Tests for the constrained least-squares optimizer."""

import numpy as np
import pytest

from conftest import make_component, make_outcome

from ramanfit.core.algorithms.background import estimate_background
from ramanfit.core.domain.config import OptimizerConfig
from ramanfit.core.domain.peaks import PeakFamily, PeakName
from ramanfit.core.domain.spectrum import Spectrum
from ramanfit.core.fitting.initial import initial_guess
from ramanfit.core.fitting.models import LORENTZIAN_MODEL, VOIGT_MODEL
from ramanfit.core.fitting.optimizer import ConstrainedOptimizer, ModelFunction, fit_model
from ramanfit.core.shared.exceptions import InsufficientDataError
from ramanfit.core.shared.values import ExceededIterationCap

X = np.arange(2000.0, 799.0, -1.0)


@pytest.fixture
def voigt_truth():
    """Three Voigt bands whose parameters lie well inside their bounds."""
    return make_outcome(
        PeakFamily.VOIGT,
        [
            make_component(PeakName.G, PeakFamily.VOIGT, 1582.0, 10.0, 30000.0),
            make_component(PeakName.D1, PeakFamily.VOIGT, 1352.0, 20.0, 18000.0),
            make_component(PeakName.D2, PeakFamily.VOIGT, 1615.0, 8.0, 2500.0),
        ],
    )


@pytest.fixture
def voigt_spectrum(voigt_truth):
    return Spectrum.from_arrays("voigt", X, voigt_truth.model(X))


class TestModelFunction:
    """Tests for residuals and the analytic Jacobian."""

    def test_residuals_are_model_minus_data(self):
        y = np.linspace(0.0, 1.0, X.size)
        function = ModelFunction(spec=VOIGT_MODEL, x=X, y=y)
        params = np.zeros(VOIGT_MODEL.n_parameters)
        params[0] = 5.0

        np.testing.assert_allclose(function.compute_residuals(params), 5.0 - y)

    @pytest.mark.parametrize("spec", [VOIGT_MODEL, LORENTZIAN_MODEL], ids=["voigt", "lorentzian"])
    def test_jacobian_matches_finite_differences(self, spec):
        rng = np.random.default_rng(7)
        function = ModelFunction(spec=spec, x=X, y=np.zeros(X.size))
        params = np.empty(spec.n_parameters)
        params[0], params[1] = 50.0, 0.01
        for index in range(len(spec.peaks)):
            base = 2 + 3 * index
            params[base] = rng.uniform(-2.0, 2.0)
            params[base + 1] = rng.uniform(50.0, 200.0)
            params[base + 2] = rng.uniform(-2.0, 2.0)

        jacobian = function.compute_jacobian(params).copy()

        step = 1e-6
        numeric = np.empty_like(jacobian)
        for column in range(params.size):
            shift = np.zeros_like(params)
            shift[column] = step
            numeric[:, column] = (
                function.compute_residuals(params + shift)
                - function.compute_residuals(params - shift)
            ) / (2 * step)

        np.testing.assert_allclose(jacobian, numeric, rtol=1e-5, atol=1e-4)

    def test_components_report_bounded_values(self):
        function = ModelFunction(spec=LORENTZIAN_MODEL, x=X, y=np.zeros(X.size))
        params = np.zeros(LORENTZIAN_MODEL.n_parameters)
        params[3] = -40.0  # G amplitude

        g = function.components(params)[0]

        assert g.name is PeakName.G
        assert g.amplitude == 40.0
        assert g.height == 40.0
        assert g.location == pytest.approx(0.5 * (1567.0 + 1605.0))
        assert g.area == pytest.approx(40.0 * np.pi * g.width)

    def test_voigt_area_is_amplitude_times_sqrt_pi(self):
        function = ModelFunction(spec=VOIGT_MODEL, x=X, y=np.zeros(X.size))
        params = np.zeros(VOIGT_MODEL.n_parameters)
        params[3] = 40.0  # G amplitude

        g = function.components(params)[0]

        assert g.amplitude == 40.0
        assert g.area == pytest.approx(40.0 * np.sqrt(np.pi))

    def test_counts_each_jacobian_point_once(self):
        function = ModelFunction(spec=LORENTZIAN_MODEL, x=X, y=np.zeros(X.size))
        start = np.zeros(LORENTZIAN_MODEL.n_parameters)
        step = start.copy()
        step[0] = 1.0

        function.compute_jacobian(start)
        function.compute_jacobian(start)
        function.compute_jacobian(step)

        assert function.jacobian_points == 2


class TestFitModel:
    """Tests for fitting a model to a spectrum."""

    def test_recovers_voigt_bands(self, voigt_spectrum, voigt_truth):
        guess = initial_guess(voigt_spectrum, estimate_background(voigt_spectrum), VOIGT_MODEL)

        outcome = fit_model(
            voigt_spectrum, guess, OptimizerConfig(tolerance=1e-10, max_iterations=2000)
        )

        assert outcome.converged
        assert isinstance(outcome.iterations, int)
        for name in (PeakName.G, PeakName.D1, PeakName.D2):
            fitted = outcome.component(name)
            expected = voigt_truth.component(name)
            assert fitted.location == pytest.approx(expected.location, abs=0.05)
            assert fitted.width == pytest.approx(expected.width, rel=1e-3)
            assert fitted.area == pytest.approx(expected.area, rel=1e-3)
        assert outcome.background.slope == pytest.approx(0.02, abs=1e-4)

    def test_components_stay_inside_bounds(self, ordered_spectrum):
        guess = initial_guess(ordered_spectrum, estimate_background(ordered_spectrum), VOIGT_MODEL)

        outcome = fit_model(ordered_spectrum, guess, OptimizerConfig())

        for setup, component in zip(VOIGT_MODEL.peaks, outcome.components, strict=True):
            assert setup.location.contains(component.location)
            assert setup.width.contains(component.width)
            assert component.amplitude >= 0.0

    def test_iteration_cap_is_recorded(self, voigt_spectrum):
        guess = initial_guess(voigt_spectrum, estimate_background(voigt_spectrum), VOIGT_MODEL)

        outcome = fit_model(voigt_spectrum, guess, OptimizerConfig(max_iterations=1))

        assert not outcome.converged
        assert outcome.iterations == ExceededIterationCap(1)
        assert str(outcome.iterations) == ">1"
        assert len(outcome.components) == 3

    def test_cap_counts_iterations_not_evaluations(self, voigt_spectrum):
        guess = initial_guess(voigt_spectrum, estimate_background(voigt_spectrum), VOIGT_MODEL)
        free = fit_model(voigt_spectrum, guess, OptimizerConfig(max_iterations=2000))
        assert free.converged
        needed = free.iterations

        for cap in (needed, needed + 1):
            capped = fit_model(voigt_spectrum, guess, OptimizerConfig(max_iterations=cap))

            assert capped.converged
            assert capped.iterations == needed
            np.testing.assert_array_equal(capped.parameters, free.parameters)

    def test_one_step_short_of_convergence_is_capped(self, voigt_spectrum):
        guess = initial_guess(voigt_spectrum, estimate_background(voigt_spectrum), VOIGT_MODEL)
        needed = fit_model(voigt_spectrum, guess, OptimizerConfig(max_iterations=2000)).iterations

        capped = fit_model(voigt_spectrum, guess, OptimizerConfig(max_iterations=needed - 1))

        assert not capped.converged
        assert capped.iterations == ExceededIterationCap(needed - 1)
        assert capped.message == f"Iteration cap of {needed - 1} reached."

    def test_too_few_records(self):
        spectrum = Spectrum.from_arrays("short", [2000, 1600, 1580, 1350, 800], [1, 2, 9, 4, 1])
        guess = initial_guess(spectrum, estimate_background(spectrum), VOIGT_MODEL)

        with pytest.raises(InsufficientDataError, match="11"):
            fit_model(spectrum, guess, OptimizerConfig())

    def test_constrained_optimizer_delegates(self, voigt_spectrum):
        guess = initial_guess(voigt_spectrum, estimate_background(voigt_spectrum), VOIGT_MODEL)
        config = OptimizerConfig(tolerance=1e-10, max_iterations=2000)

        direct = fit_model(voigt_spectrum, guess, config)
        delegated = ConstrainedOptimizer().fit(voigt_spectrum, guess, config)

        np.testing.assert_array_equal(direct.parameters, delegated.parameters)
