"""Fitting service: single-spectrum analysis and the batch pipeline."""

from ramanfit.services.fit.analysis import SampleAnalysis, analyse_spectrum
from ramanfit.services.fit.pipeline import FitPipeline, SampleResult, SampleStatus, summarize

__all__ = [
    "FitPipeline",
    "SampleAnalysis",
    "SampleResult",
    "SampleStatus",
    "analyse_spectrum",
    "summarize",
]
