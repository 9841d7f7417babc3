"""Geothermometry ratios and temperatures of a fitted model.

Ratios (all from fitted heights and areas, widths as HWHM):

- ``R1  = D1 height / G height``
- ``R2  = D1 area / (D1 + G + D2 areas)``
- ``RA1 = (D1 + D4) / (G + D1 + D2 + D3 + D4)`` areas
- ``RA2 = (D1 + D4) / (G + D2 + D3)`` areas

RA1 and RA2 only exist for the five-band Lorentzian model. A ratio without
a numeric result (zero denominator, non-finite value) is ``NA`` and so is
every temperature derived from it.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ramanfit.core.constants import (
    R2_TEMP_OFFSET,
    R2_TEMP_SLOPE,
    RA1_TEMP_DIVISOR,
    RA1_TEMP_OFFSET,
    RA2_TEMP_DIVISOR,
    RA2_TEMP_OFFSET,
)
from ramanfit.core.domain.peaks import PeakComponent, PeakName
from ramanfit.core.shared.values import NA, Metric, as_metric, is_value, linear, safe_divide

if TYPE_CHECKING:
    from ramanfit.core.fitting.results import FitOutcome


@dataclass(frozen=True, slots=True)
class ModelMetrics:
    """Ratios, temperatures and total HWHM of one fitted model."""

    r1: Metric = NA
    r2: Metric = NA
    r2_temp: Metric = NA
    ra1: Metric = NA
    ra1_temp: Metric = NA
    ra2: Metric = NA
    ra2_temp: Metric = NA
    total_width: Metric = NA


def r2_temperature(r2: Metric) -> Metric:
    """``T = -445 R2 + 641`` (°C)."""
    return linear(r2, R2_TEMP_SLOPE, R2_TEMP_OFFSET)


def _offset_ratio(value: Metric, offset: float, divisor: float) -> Metric:
    if not is_value(value):
        return NA
    return as_metric((value - offset) / divisor)


def ra1_temperature(ra1: Metric) -> Metric:
    """``T = (RA1 - 0.3758) / 0.0008`` (°C)."""
    return _offset_ratio(ra1, RA1_TEMP_OFFSET, RA1_TEMP_DIVISOR)


def ra2_temperature(ra2: Metric) -> Metric:
    """``T = (RA2 - 0.27) / 0.0045`` (°C)."""
    return _offset_ratio(ra2, RA2_TEMP_OFFSET, RA2_TEMP_DIVISOR)


def _required(outcome: FitOutcome, name: PeakName) -> PeakComponent:
    component = outcome.component(name)
    if component is None:
        msg = f"{outcome.family.value} fit has no {name.label} component"
        raise ValueError(msg)
    return component


def compute_metrics(outcome: FitOutcome) -> ModelMetrics:
    """Compute the ratios and temperatures of a fitted model.

    Args:
        outcome: Fit with at least the G, D1 and D2 components

    Returns
    -------
        ModelMetrics; RA1/RA2 fields are ``NA`` unless D3 and D4 were fitted
    """
    g = _required(outcome, PeakName.G)
    d1 = _required(outcome, PeakName.D1)
    d2 = _required(outcome, PeakName.D2)

    r1 = safe_divide(d1.height, g.height)
    r2 = safe_divide(d1.area, d1.area + g.area + d2.area)
    total_width = as_metric(g.width + d1.width + d2.width)

    d3 = outcome.component(PeakName.D3)
    d4 = outcome.component(PeakName.D4)
    if d3 is None or d4 is None:
        return ModelMetrics(
            r1=r1,
            r2=r2,
            r2_temp=r2_temperature(r2),
            total_width=total_width,
        )

    disordered = d1.area + d4.area
    ra1 = safe_divide(disordered, g.area + d1.area + d2.area + d3.area + d4.area)
    ra2 = safe_divide(disordered, g.area + d2.area + d3.area)
    return ModelMetrics(
        r1=r1,
        r2=r2,
        r2_temp=r2_temperature(r2),
        ra1=ra1,
        ra1_temp=ra1_temperature(ra1),
        ra2=ra2,
        ra2_temp=ra2_temperature(ra2),
        total_width=total_width,
    )


def floor_percent(ratio: float) -> int:
    """``floor(100 * ratio)``, the integer the selection rules compare.

    The product is rounded to nine decimals first, so that decimal ratios
    such as 2.01 floor to 201 and not to 200.
    """
    return math.floor(round(100.0 * ratio, 9))


__all__ = [
    "ModelMetrics",
    "compute_metrics",
    "floor_percent",
    "r2_temperature",
    "ra1_temperature",
    "ra2_temperature",
]
