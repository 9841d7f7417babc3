"""Tests for the initial parameter estimation."""

import numpy as np
import pytest

from conftest import ORDERED_BANDS, synthetic_spectrum

from ramanfit.core.algorithms.background import estimate_background
from ramanfit.core.domain.peaks import PeakFamily, PeakName
from ramanfit.core.domain.spectrum import Spectrum
from ramanfit.core.fitting.initial import initial_guess, locate_maximum
from ramanfit.core.fitting.models import LORENTZIAN_MODEL, VOIGT_MODEL, model_for


@pytest.fixture
def clean_spectrum():
    return synthetic_spectrum("clean", ORDERED_BANDS, noise=0.0)


class TestModels:
    """Tests for the model peak set-ups."""

    def test_peak_order(self):
        assert VOIGT_MODEL.peak_names == (PeakName.G, PeakName.D1, PeakName.D2)
        assert LORENTZIAN_MODEL.peak_names == (
            PeakName.G,
            PeakName.D1,
            PeakName.D2,
            PeakName.D3,
            PeakName.D4,
        )

    def test_parameter_counts(self):
        assert VOIGT_MODEL.n_parameters == 11
        assert LORENTZIAN_MODEL.n_parameters == 17

    def test_model_for(self):
        assert model_for(PeakFamily.VOIGT) is VOIGT_MODEL
        assert model_for(PeakFamily.LORENTZIAN) is LORENTZIAN_MODEL


class TestLocateMaximum:
    def test_first_maximum_in_window(self):
        spectrum = Spectrum.from_arrays("s", [1600, 1590, 1585, 1580], [1, 7, 7, 3])

        assert locate_maximum(spectrum, (1575.0, 1600.0)) == (1590.0, 7.0)

    def test_empty_window(self):
        spectrum = Spectrum.from_arrays("s", [2000, 800], [1, 1])

        assert locate_maximum(spectrum, (1575.0, 1600.0)) is None


class TestInitialGuess:
    """Tests for seeded optimizer start vectors."""

    def test_voigt_heights_are_scaled_above_background(self, clean_spectrum):
        background = estimate_background(clean_spectrum)

        guess = initial_guess(clean_spectrum, background, VOIGT_MODEL)

        g = guess.peaks[0]
        index = int(np.flatnonzero(clean_spectrum.x == 1582.0)[0])
        expected = (clean_spectrum.y[index] - background.evaluate(1582.0)) * 10.0
        assert g.location == 1582.0
        assert g.height == pytest.approx(expected)
        assert g.z_amplitude == g.height

    def test_voigt_seeds(self, clean_spectrum):
        guess = initial_guess(clean_spectrum, estimate_background(clean_spectrum), VOIGT_MODEL)

        g, d1, d2 = guess.peaks
        assert VOIGT_MODEL.peaks[0].location.value(g.z_location) == pytest.approx(1580.0)
        assert d1.z_location == 0.1
        assert d2.z_location == 0.6
        assert {peak.z_width for peak in guess.peaks} == {-5.0}

    def test_lorentzian_heights_are_unscaled(self, clean_spectrum):
        background = estimate_background(clean_spectrum)

        guess = initial_guess(clean_spectrum, background, LORENTZIAN_MODEL)

        g = guess.peaks[0]
        assert g.height == pytest.approx(
            float(np.max(clean_spectrum.window((1575.0, 1600.0))[1]))
            - background.evaluate(g.location)
        )
        assert [peak.z_width for peak in guess.peaks] == [-1.5, -0.5, -1.5, 1.0, 1.0]

    def test_lorentzian_d1_location_from_located_maximum(self, clean_spectrum):
        guess = initial_guess(clean_spectrum, estimate_background(clean_spectrum), LORENTZIAN_MODEL)

        d1 = guess.peaks[1]
        assert d1.location == 1352.0
        assert LORENTZIAN_MODEL.peaks[1].location.value(d1.z_location) == pytest.approx(1352.0)

    def test_empty_search_window_gives_zero_height(self):
        x = np.arange(1599.0, 799.0, -1.0)
        spectrum = Spectrum.from_arrays("short", x, 100.0 + 0.0 * x)

        guess = initial_guess(spectrum, estimate_background(spectrum), VOIGT_MODEL)

        d2 = guess.peaks[2]
        assert d2.height == 0.0
        assert d2.location == pytest.approx(1622.5)
        assert d2.z_location == 0.6

    def test_vector_layout(self, clean_spectrum):
        background = estimate_background(clean_spectrum)

        vector = initial_guess(clean_spectrum, background, VOIGT_MODEL).vector()

        assert vector.shape == (VOIGT_MODEL.n_parameters,)
        assert vector[0] == pytest.approx(background.intercept)
        assert vector[1] == pytest.approx(background.slope)
        assert vector[5] == 0.1  # D1 location seed
