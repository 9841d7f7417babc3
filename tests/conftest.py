"""Pytest configuration and fixtures for RamanFit tests."""

import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest

from ramanfit.core.algorithms.background import LinearBackground
from ramanfit.core.domain.peaks import PeakComponent, PeakFamily, PeakName
from ramanfit.core.domain.spectrum import Spectrum
from ramanfit.core.fitting.results import FitOutcome
from ramanfit.core.lineshapes.functions import get_evaluator

# Descending wavenumber axis: the first record is the high-wavenumber end
WAVENUMBERS = np.arange(2000.0, 799.0, -1.0)

# (height, location, HWHM) of Lorentzian bands
ORDERED_BANDS = {
    "g": (1000.0, 1582.0, 10.0),
    "d1": (300.0, 1352.0, 20.0),
    "d2": (100.0, 1615.0, 8.0),
}
D1_ONLY_BANDS = {"d1": (500.0, 1355.0, 40.0)}


def synthetic_spectrum(
    name: str,
    bands: dict[str, tuple[float, float, float]],
    intercept: float = 100.0,
    slope: float = 0.02,
    noise: float = 2.0,
    seed: int = 0,
) -> Spectrum:
    """Linear background plus Lorentzian bands plus seeded Gaussian noise."""
    x = WAVENUMBERS.copy()
    y = intercept + slope * x
    for height, location, width in bands.values():
        y = y + height * width**2 / ((x - location) ** 2 + width**2)
    if noise > 0:
        y = y + np.random.default_rng(seed).normal(0.0, noise, x.size)
    return Spectrum.from_arrays(name, x, y)


def write_spectrum(path, spectrum: Spectrum, line_ending: str = "\n"):
    """Write a spectrum as a two-column text file."""
    lines = [f"{x:.4f}\t{y:.6f}" for x, y in zip(spectrum.x, spectrum.y, strict=True)]
    path.write_bytes((line_ending.join(lines) + line_ending).encode("utf-8"))
    return path


def make_component(
    name: PeakName,
    family: PeakFamily,
    location: float,
    width: float,
    area: float,
    height: float | None = None,
) -> PeakComponent:
    """Peak component with the amplitude that reproduces *area*."""
    evaluator = get_evaluator(family)
    amplitude = area / evaluator.area(1.0, width)
    return PeakComponent(
        name=name,
        family=family,
        location=location,
        amplitude=amplitude,
        height=evaluator.height(amplitude, width) if height is None else height,
        width=width,
        area=area,
    )


def make_outcome(family: PeakFamily, components, iterations=12) -> FitOutcome:
    """Converged FitOutcome built from ready-made components."""
    return FitOutcome(
        family=family,
        background=LinearBackground(intercept=100.0, slope=0.02),
        components=tuple(components),
        parameters=np.zeros(2 + 3 * len(components)),
        cost=0.0,
        converged=True,
        iterations=iterations,
    )


class MockReporter:
    """Test double for capturing reporter calls."""

    def __init__(self) -> None:
        self.messages: list[tuple[str, str]] = []

    def action(self, message: str) -> None:
        self.messages.append(("action", message))

    def info(self, message: str) -> None:
        self.messages.append(("info", message))

    def warning(self, message: str) -> None:
        self.messages.append(("warning", message))

    def error(self, message: str) -> None:
        self.messages.append(("error", message))

    def success(self, message: str) -> None:
        self.messages.append(("success", message))

    def of_kind(self, kind: str) -> list[str]:
        return [message for level, message in self.messages if level == kind]


class StubOptimizer:
    """Optimizer double returning canned outcomes per peak family."""

    def __init__(self, outcomes: dict[PeakFamily, FitOutcome]) -> None:
        self.outcomes = outcomes
        self.calls: list[PeakFamily] = []

    def fit(self, spectrum, guess, config):
        self.calls.append(guess.spec.family)
        return self.outcomes[guess.spec.family]


@pytest.fixture
def ordered_spectrum():
    """Well-ordered material: strong G, moderate D1, weak D2."""
    return synthetic_spectrum("ordered", ORDERED_BANDS)


@pytest.fixture
def d1_only_spectrum():
    """Spectrum dominated by a single broad D1 band."""
    return synthetic_spectrum("disordered", D1_ONLY_BANDS)


@pytest.fixture
def flat_spectrum():
    """Featureless spectrum that must be rejected by the noise gate."""
    return synthetic_spectrum("flat", {}, intercept=100.0, slope=0.0, noise=0.0)


@pytest.fixture
def mock_reporter():
    return MockReporter()


@pytest.fixture
def voigt2_outcomes():
    """Voigt fit outside calibration and a Lorentzian fit with RA2 > 2."""
    voigt = make_outcome(
        PeakFamily.VOIGT,
        [
            make_component(PeakName.G, PeakFamily.VOIGT, 1581.0, 12.0, 10.0),
            make_component(PeakName.D1, PeakFamily.VOIGT, 1352.0, 30.0, 30.0),
            make_component(PeakName.D2, PeakFamily.VOIGT, 1615.0, 8.0, 5.0),
        ],
        iterations=21,
    )
    lorentzian = make_outcome(
        PeakFamily.LORENTZIAN,
        [
            make_component(PeakName.G, PeakFamily.LORENTZIAN, 1581.0, 12.0, 10.0),
            make_component(PeakName.D1, PeakFamily.LORENTZIAN, 1355.0, 30.0, 30.0),
            make_component(PeakName.D2, PeakFamily.LORENTZIAN, 1615.0, 8.0, 5.0),
            make_component(PeakName.D3, PeakFamily.LORENTZIAN, 1500.0, 40.0, 2.0),
            make_component(PeakName.D4, PeakFamily.LORENTZIAN, 1220.0, 40.0, 10.0),
        ],
        iterations=34,
    )
    return {PeakFamily.VOIGT: voigt, PeakFamily.LORENTZIAN: lorentzian}


@pytest.fixture
def spectrum_file(tmp_path, ordered_spectrum):
    """Spectrum file of the well-ordered synthetic sample."""
    return write_spectrum(tmp_path / "ordered.txt", ordered_spectrum)


@pytest.fixture
def flat_file(tmp_path, flat_spectrum):
    """Spectrum file of the featureless sample."""
    return write_spectrum(tmp_path / "flat.txt", flat_spectrum)
