"""Domain objects: spectra, peaks, records and configuration."""

from ramanfit.core.domain.config import (
    LedgerConfig,
    NoiseConfig,
    OptimizerConfig,
    OutputConfig,
    RamanFitConfig,
    SelectionConfig,
)
from ramanfit.core.domain.peaks import PEAK_ORDER, PeakComponent, PeakFamily, PeakName
from ramanfit.core.domain.record import LEDGER_COLUMNS, FitStyle, PeakFields, SampleRecord
from ramanfit.core.domain.spectrum import Spectrum, read_spectrum, sample_name

__all__ = [
    "LEDGER_COLUMNS",
    "PEAK_ORDER",
    "FitStyle",
    "LedgerConfig",
    "NoiseConfig",
    "OptimizerConfig",
    "OutputConfig",
    "PeakComponent",
    "PeakFamily",
    "PeakFields",
    "PeakName",
    "RamanFitConfig",
    "SampleRecord",
    "SelectionConfig",
    "Spectrum",
    "read_spectrum",
    "sample_name",
]
