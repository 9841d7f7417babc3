"""Sentinel values for reported quantities.

A reported quantity is either a plain ``float`` or one of two explicit
sentinels:

- ``NotApplicable`` for fields a model does not produce and for ratios
  that have no numeric result (division by zero, non-finite values).
- ``ExceededIterationCap`` for an optimizer that stopped at its cap.

Both render to the historical ledger strings (``na`` and ``>500``).
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TypeAlias


@dataclass(frozen=True, slots=True)
class NotApplicable:
    """Marker for a field without a numeric value."""

    def __str__(self) -> str:
        return "na"


NA = NotApplicable()


@dataclass(frozen=True, slots=True)
class ExceededIterationCap:
    """Marker for a fit that reached its iteration cap before converging."""

    cap: int

    def __str__(self) -> str:
        return f">{self.cap}"


Metric: TypeAlias = float | NotApplicable
IterationCount: TypeAlias = int | ExceededIterationCap


def is_value(value: object) -> bool:
    """Return True when *value* is a usable number (not a sentinel)."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def as_metric(value: float) -> Metric:
    """Wrap a computed float, mapping NaN and infinities to ``NA``."""
    return float(value) if math.isfinite(value) else NA


def safe_divide(numerator: Metric, denominator: Metric) -> Metric:
    """Divide two metrics, returning ``NA`` when no numeric result exists."""
    if not (is_value(numerator) and is_value(denominator)):
        return NA
    if denominator == 0.0:
        return NA
    return as_metric(numerator / denominator)


def scale(value: Metric, factor: float) -> Metric:
    """Multiply a metric by *factor*, propagating ``NA``."""
    if not is_value(value):
        return NA
    return as_metric(value * factor)


def linear(value: Metric, slope: float, offset: float) -> Metric:
    """Apply ``slope * value + offset``, propagating ``NA``."""
    if not is_value(value):
        return NA
    return as_metric(slope * value + offset)


def format_value(value: object, precision: int = 8) -> str:
    """Format a value for the whitespace-separated ledger."""
    if isinstance(value, bool):
        return str(value)
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return f"{value:.{precision}g}"
    return str(value)


__all__ = [
    "NA",
    "ExceededIterationCap",
    "IterationCount",
    "Metric",
    "NotApplicable",
    "as_metric",
    "format_value",
    "is_value",
    "linear",
    "safe_divide",
    "scale",
]
