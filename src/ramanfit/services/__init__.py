"""Service layer for RamanFit.

Services coordinate the core algorithms with file I/O and rendering so the
CLI only has to parse arguments and print results.
"""

from ramanfit.services.fit import (
    FitPipeline,
    SampleAnalysis,
    SampleResult,
    SampleStatus,
    analyse_spectrum,
)
from ramanfit.services.plot import RenderService

__all__ = [
    "FitPipeline",
    "RenderService",
    "SampleAnalysis",
    "SampleResult",
    "SampleStatus",
    "analyse_spectrum",
]
