"""Constrained fitting of the Voigt and Lorentzian band models.

This package provides the bounded reparameterization, the model set-ups,
initial guesses, the Levenberg-Marquardt optimizer and the model selector.
"""

from ramanfit.core.fitting.initial import InitialGuess, PeakGuess, initial_guess
from ramanfit.core.fitting.models import LORENTZIAN_MODEL, VOIGT_MODEL, ModelSpec, PeakSetup
from ramanfit.core.fitting.optimizer import ConstrainedOptimizer, ModelFunction, fit_model
from ramanfit.core.fitting.results import FitOutcome
from ramanfit.core.fitting.selection import (
    ModelSelector,
    Selection,
    SelectorState,
    accepts_voigt1,
    accepts_voigt3,
    rejects_lorentzian,
)
from ramanfit.core.fitting.transforms import BoundedParameter, amplitude, amplitude_derivative

__all__ = [
    "LORENTZIAN_MODEL",
    "VOIGT_MODEL",
    "BoundedParameter",
    "ConstrainedOptimizer",
    "FitOutcome",
    "InitialGuess",
    "ModelFunction",
    "ModelSelector",
    "ModelSpec",
    "PeakGuess",
    "PeakSetup",
    "Selection",
    "SelectorState",
    "accepts_voigt1",
    "accepts_voigt3",
    "amplitude",
    "amplitude_derivative",
    "fit_model",
    "initial_guess",
    "rejects_lorentzian",
]
