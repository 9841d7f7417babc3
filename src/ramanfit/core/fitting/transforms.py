"""Reparameterization of bounded fit parameters.

The optimizer works on unconstrained values ``z``. Locations and widths are
mapped into their closed interval with an arctangent; amplitudes are forced
non-negative with an absolute value:

    bound(z)  = (hi - lo) / π * (atan(z) + π/2) + lo
    amp(z)    = |z|

``bound`` approaches but never reaches ``lo`` and ``hi`` for finite ``z``,
so reported values always lie inside their bounds.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

import numpy as np

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class BoundedParameter:
    """Closed interval ``[lo, hi]`` with its arctangent map."""

    lo: float
    hi: float

    def __post_init__(self) -> None:
        if not self.hi > self.lo:
            msg = f"Upper bound {self.hi} must exceed lower bound {self.lo}"
            raise ValueError(msg)

    @property
    def span(self) -> float:
        return self.hi - self.lo

    def contains(self, value: float) -> bool:
        return self.lo <= value <= self.hi

    def value(self, z: float) -> float:
        """Map an unconstrained value into the interval."""
        return self.span / math.pi * (math.atan(z) + math.pi / 2.0) + self.lo

    def derivative(self, z: float) -> float:
        """``d bound / d z``, strictly positive."""
        return self.span / math.pi / (1.0 + z * z)

    def seed(self, value: float) -> float:
        """Unconstrained value that maps back to *value*.

        Values outside the interval (or on its edges) have no exact inverse.
        They are inverted as they are, which yields a large or reflected
        seed, and a warning is logged.
        """
        if not self.lo < value < self.hi:
            logger.warning(
                "Initial value %.6g outside (%.6g, %.6g); optimizer seed will be extreme",
                value,
                self.lo,
                self.hi,
            )
        return math.tan(math.pi * (value - self.lo) / self.span - math.pi / 2.0)


def amplitude(z: float) -> float:
    """Non-negative amplitude for an unconstrained value."""
    return abs(z)


def amplitude_derivative(z: float) -> float:
    """``d |z| / d z``; zero at the origin."""
    return float(np.sign(z))


__all__ = ["BoundedParameter", "amplitude", "amplitude_derivative"]
