"""RamanFit - Peak fitting and geothermometry of carbonaceous-material Raman spectra.

Public API:
    - analyse_spectrum: Noise gate, model selection and final record of one spectrum
    - FitPipeline: Batch processing with the result ledger
    - ResultLedger: Append-only results table

Configuration:
    - RamanFitConfig: Main configuration object

Domain Objects:
    - Spectrum, SampleRecord, FitStyle
"""

import contextlib
from importlib import metadata

__version__ = "2.1.0"

with contextlib.suppress(metadata.PackageNotFoundError):
    __version__ = metadata.version(__name__)

from ramanfit.core.domain.config import RamanFitConfig
from ramanfit.core.domain.record import FitStyle, SampleRecord
from ramanfit.core.domain.spectrum import Spectrum, read_spectrum
from ramanfit.io.ledger import ResultLedger
from ramanfit.services import FitPipeline, SampleAnalysis, analyse_spectrum

__all__ = [
    # Version
    "__version__",
    # Services
    "FitPipeline",
    "SampleAnalysis",
    "analyse_spectrum",
    "ResultLedger",
    # Configuration
    "RamanFitConfig",
    # Domain
    "FitStyle",
    "SampleRecord",
    "Spectrum",
    "read_spectrum",
]
