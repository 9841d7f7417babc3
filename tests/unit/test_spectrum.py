"""Tests for spectrum reading, background and noise gate."""

import numpy as np
import pytest

from ramanfit.core.algorithms.background import LinearBackground, estimate_background
from ramanfit.core.algorithms.noise import estimate_snr, post_fit_snr
from ramanfit.core.constants import LORENTZIAN_TABLE_RANGE
from ramanfit.core.domain.spectrum import Spectrum, read_spectrum, sample_name
from ramanfit.core.shared.exceptions import DataIOError, InsufficientDataError
from ramanfit.core.shared.values import NA


def _spectrum(points):
    x, y = zip(*points, strict=True)
    return Spectrum.from_arrays("sample", x, y)


class TestReadSpectrum:
    """Tests for the two-column reader."""

    def test_reads_in_file_order(self, tmp_path):
        path = tmp_path / "a.txt"
        path.write_text("2000 10\n1500 40\n800 5\n")

        spectrum = read_spectrum(path)

        np.testing.assert_array_equal(spectrum.x, [2000.0, 1500.0, 800.0])
        np.testing.assert_array_equal(spectrum.y, [10.0, 40.0, 5.0])
        assert spectrum.first == (2000.0, 10.0)
        assert spectrum.last == (800.0, 5.0)

    def test_accepts_crlf_and_blank_lines(self, tmp_path):
        path = tmp_path / "b.txt"
        path.write_bytes(b"2000\t10\r\n\r\n1500\t40\r\n800\t5\r\n\r\n")

        spectrum = read_spectrum(path)

        assert len(spectrum) == 3
        np.testing.assert_array_equal(spectrum.y, [10.0, 40.0, 5.0])

    def test_missing_file(self, tmp_path):
        with pytest.raises(DataIOError, match="not found"):
            read_spectrum(tmp_path / "missing.txt")

    def test_unparseable_file(self, tmp_path):
        path = tmp_path / "bad.txt"
        path.write_text("wavenumber intensity\nabc def\n")

        with pytest.raises(DataIOError):
            read_spectrum(path)

    def test_sample_name_drops_extension(self, tmp_path):
        assert sample_name(tmp_path / "sample_1.txt") == str(tmp_path / "sample_1")


class TestSpectrumWindow:
    """Tests for open-interval windows."""

    def test_window_excludes_edges(self):
        spectrum = _spectrum([(1830, 1), (1800, 2), (1740, 3), (1700, 4)])

        x, y = spectrum.window((1740.0, 1830.0))

        np.testing.assert_array_equal(x, [1800.0])
        np.testing.assert_array_equal(y, [2.0])

    def test_mismatched_arrays_rejected(self):
        with pytest.raises(ValueError):
            Spectrum.from_arrays("bad", [1.0, 2.0], [1.0])


class TestBackground:
    """Tests for the endpoint background."""

    def test_line_through_endpoints(self):
        spectrum = _spectrum([(2000, 30), (1500, 500), (800, 6)])

        background = estimate_background(spectrum)

        assert background.slope == pytest.approx(0.02)
        assert background.evaluate(2000.0) == pytest.approx(30.0)
        assert background.evaluate(800.0) == pytest.approx(6.0)

    def test_too_few_records(self):
        with pytest.raises(InsufficientDataError):
            estimate_background(_spectrum([(2000, 1)]))

    def test_endpoints_at_same_wavenumber(self):
        with pytest.raises(InsufficientDataError):
            estimate_background(_spectrum([(1500, 1), (1400, 2), (1500, 3)]))


class TestNoiseGate:
    """Tests for the pre-fit signal-to-noise ratio."""

    def test_ratio_of_signal_to_noise_range(self):
        spectrum = _spectrum(
            [(2000, 5), (1820, 10), (1780, 12), (1750, 9), (1500, 100), (800, 5)]
        )

        estimate = estimate_snr(spectrum, estimate_background(spectrum))

        assert estimate.noise_high == 12.0
        assert estimate.noise_low == pytest.approx(8.9)
        assert estimate.signal == pytest.approx(95.0)
        assert estimate.signal_location == 1500.0
        assert estimate.snr == 30

    def test_empty_noise_window_uses_seed_range(self):
        spectrum = _spectrum([(2000, 5), (1500, 8), (800, 5)])

        estimate = estimate_snr(spectrum, estimate_background(spectrum))

        assert estimate.noise_high == 1.0
        assert estimate.noise_range == pytest.approx(0.1)
        assert estimate.snr == 30

    def test_flat_spectrum_is_noisy(self, flat_spectrum):
        estimate = estimate_snr(flat_spectrum, estimate_background(flat_spectrum))

        assert estimate.snr == 0
        assert estimate.is_noisy(2.0)

    def test_threshold_comparison_is_strict(self):
        spectrum = _spectrum([(2000, 5), (1500, 5.2), (800, 5)])

        estimate = estimate_snr(spectrum, estimate_background(spectrum))

        assert estimate.snr == 2
        assert not estimate.is_noisy(2.0)
        assert estimate.is_noisy(2.5)

    def test_synthetic_sample_passes(self, ordered_spectrum):
        estimate = estimate_snr(ordered_spectrum, estimate_background(ordered_spectrum))

        assert estimate.snr > 10


class TestPostFitSnr:
    """Tests for the background-removed signal-to-noise ratio."""

    def test_ratio_on_corrected_data(self):
        spectrum = _spectrum([(1900, 0), (1750, 1), (1720, 3), (1500, 50), (1000, 0)])

        assert post_fit_snr(spectrum, LinearBackground(0.0, 0.0)) == 25

    def test_empty_noise_window(self):
        spectrum = _spectrum([(1900, 0), (1500, 50), (1000, 0)])

        assert post_fit_snr(spectrum, LinearBackground(0.0, 0.0)) is NA

    def test_window_limits_the_signal(self):
        spectrum = _spectrum(
            [(2100, 80), (1900, 0), (1750, 1), (1720, 3), (1500, 50), (1000, 0), (900, 0)]
        )
        flat = LinearBackground(0.0, 0.0)

        assert post_fit_snr(spectrum, flat) == 25
        assert post_fit_snr(spectrum, flat, LORENTZIAN_TABLE_RANGE) == 40

    def test_zero_noise_range(self):
        spectrum = _spectrum([(1900, 0), (1750, 2), (1720, 2), (1500, 50), (1000, 0)])

        assert post_fit_snr(spectrum, LinearBackground(0.0, 0.0)) is NA
