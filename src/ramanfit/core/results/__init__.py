"""Ratios, temperatures and ledger records of fitted spectra."""

from ramanfit.core.results.builder import build_record, finalize_record, noisy_record
from ramanfit.core.results.metrics import (
    ModelMetrics,
    compute_metrics,
    r2_temperature,
    ra1_temperature,
    ra2_temperature,
)

__all__ = [
    "ModelMetrics",
    "build_record",
    "compute_metrics",
    "finalize_record",
    "noisy_record",
    "r2_temperature",
    "ra1_temperature",
    "ra2_temperature",
]
