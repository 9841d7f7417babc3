"""Pure NumPy lineshape functions for Raman band fitting.

Two families are supported, both parameterized by the half width at half
maximum ``w`` of their Lorentzian part:

1. **Voigt**: ``Re w(dx + i w)`` where ``w(z)`` is the Faddeeva function.
   This is the convolution of a Gaussian (σ = 1/√2 cm⁻¹) with a Lorentzian
   of HWHM ``w``; its integral over ``dx`` is √π.
2. **Lorentzian**: ``w² / (dx² + w²)``, height-normalized to 1.0 at centre.

Each evaluator returns values and, for the optimizer's analytic Jacobian,
the derivatives with respect to the offset ``dx`` and the width ``w``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np
from scipy.special import wofz

from ramanfit.core.domain.peaks import PeakFamily
from ramanfit.core.shared.typing import FloatArray

_SQRT_PI = np.sqrt(np.pi)
_TWO_OVER_SQRT_PI = 2.0 / _SQRT_PI


class LineshapeEvaluator(ABC):
    """Abstract base for the unit-amplitude line shapes."""

    family: PeakFamily

    def evaluate(self, dx: FloatArray, width: float) -> FloatArray:
        """Evaluate the unit-amplitude shape at offsets *dx*."""
        value, _, _ = self.evaluate_derivatives(dx, width)
        return value

    @abstractmethod
    def evaluate_derivatives(
        self, dx: FloatArray, width: float
    ) -> tuple[FloatArray, FloatArray, FloatArray]:
        """Return ``(value, d_value/d_dx, d_value/d_width)``."""
        ...

    @abstractmethod
    def height(self, amplitude: float, width: float) -> float:
        """Peak value at its centre for the given amplitude."""
        ...

    @abstractmethod
    def area(self, amplitude: float, width: float) -> float:
        """Integral over wavenumber for the given amplitude."""
        ...


class VoigtEvaluator(LineshapeEvaluator):
    """Voigt profile ``V(dx, w) = Re w(dx + i w)``.

    With ``z = dx + i w`` and ``w'(z) = -2 z w(z) + 2i/√π``:
    ``dV/d dx = Re w'(z)`` and ``dV/dw = -Im w'(z)``.
    """

    family = PeakFamily.VOIGT

    def evaluate_derivatives(
        self, dx: FloatArray, width: float
    ) -> tuple[FloatArray, FloatArray, FloatArray]:
        z = np.asarray(dx, dtype=np.float64) + 1j * width
        faddeeva = wofz(z)
        derivative = -2.0 * z * faddeeva + 1j * _TWO_OVER_SQRT_PI
        return faddeeva.real, derivative.real, -derivative.imag

    def height(self, amplitude: float, width: float) -> float:
        return float(amplitude * wofz(1j * width).real)

    def area(self, amplitude: float, width: float) -> float:
        return float(amplitude * _SQRT_PI)


class LorentzianEvaluator(LineshapeEvaluator):
    """Lorentzian lineshape: L(dx) = w² / (w² + dx²) where w is the HWHM."""

    family = PeakFamily.LORENTZIAN

    def evaluate_derivatives(
        self, dx: FloatArray, width: float
    ) -> tuple[FloatArray, FloatArray, FloatArray]:
        dx_arr = np.asarray(dx, dtype=np.float64)
        width2 = width * width
        dx2 = dx_arr * dx_arr
        denom = width2 + dx2
        value = width2 / denom
        denom_inv2 = 1.0 / (denom * denom)
        d_dx = -2.0 * width2 * dx_arr * denom_inv2
        d_width = 2.0 * width * dx2 * denom_inv2
        return value, d_dx, d_width

    def height(self, amplitude: float, width: float) -> float:
        return float(amplitude)

    def area(self, amplitude: float, width: float) -> float:
        return float(amplitude * np.pi * width)


_EVALUATORS: dict[PeakFamily, LineshapeEvaluator] = {
    PeakFamily.VOIGT: VoigtEvaluator(),
    PeakFamily.LORENTZIAN: LorentzianEvaluator(),
}


def get_evaluator(family: PeakFamily) -> LineshapeEvaluator:
    """Return the shared evaluator of a peak family."""
    return _EVALUATORS[family]


def voigt(dx: FloatArray, width: float) -> FloatArray:
    """Evaluate the Voigt profile."""
    return _EVALUATORS[PeakFamily.VOIGT].evaluate(dx, width)


def lorentzian(dx: FloatArray, width: float) -> FloatArray:
    """Evaluate the height-normalized Lorentzian."""
    return _EVALUATORS[PeakFamily.LORENTZIAN].evaluate(dx, width)


__all__ = [
    "LineshapeEvaluator",
    "LorentzianEvaluator",
    "VoigtEvaluator",
    "get_evaluator",
    "lorentzian",
    "voigt",
]
