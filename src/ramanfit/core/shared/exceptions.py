"""Exception taxonomy for RamanFit.

This module defines a small, coherent hierarchy of exceptions to improve
error handling across the codebase. Use these instead of generic Exception
to communicate intent and allow callers to handle errors precisely.

Noisy spectra, non-converged fits, undefined ratios and duplicate samples
are recorded outcomes rather than errors and have no exception here.
"""

from __future__ import annotations


class RamanFitError(Exception):
    """Base class for all RamanFit-specific exceptions."""


class ConfigError(RamanFitError):
    """Configuration-related errors (invalid/missing options, schema issues)."""


class DataIOError(RamanFitError):
    """Data loading/saving errors (files, formats, permissions)."""


class InsufficientDataError(RamanFitError):
    """Spectrum too short or degenerate to estimate a background or fit a model."""


class LedgerError(RamanFitError):
    """Result ledger is unreadable or malformed."""


__all__ = [
    "ConfigError",
    "DataIOError",
    "InsufficientDataError",
    "LedgerError",
    "RamanFitError",
]
