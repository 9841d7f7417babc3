"""Shared foundational utilities for RamanFit."""

from ramanfit.core.shared.exceptions import (
    ConfigError,
    DataIOError,
    InsufficientDataError,
    LedgerError,
    RamanFitError,
)
from ramanfit.core.shared.reporter import (
    CompositeReporter,
    LoggingReporter,
    NullReporter,
    Reporter,
)
from ramanfit.core.shared.values import (
    NA,
    ExceededIterationCap,
    IterationCount,
    Metric,
    NotApplicable,
)

__all__ = [
    "NA",
    "CompositeReporter",
    "ConfigError",
    "DataIOError",
    "ExceededIterationCap",
    "InsufficientDataError",
    "IterationCount",
    "LedgerError",
    "LoggingReporter",
    "Metric",
    "NotApplicable",
    "NullReporter",
    "RamanFitError",
    "Reporter",
]
