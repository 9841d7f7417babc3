"""Unit-amplitude Voigt and Lorentzian line shapes."""

from ramanfit.core.lineshapes.functions import (
    LineshapeEvaluator,
    LorentzianEvaluator,
    VoigtEvaluator,
    get_evaluator,
    lorentzian,
    voigt,
)

__all__ = [
    "LineshapeEvaluator",
    "LorentzianEvaluator",
    "VoigtEvaluator",
    "get_evaluator",
    "lorentzian",
    "voigt",
]
