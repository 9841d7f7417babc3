"""Fitting result classes."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from ramanfit.core.algorithms.background import LinearBackground
from ramanfit.core.domain.peaks import PeakComponent, PeakFamily, PeakName
from ramanfit.core.lineshapes.functions import get_evaluator
from ramanfit.core.shared.typing import FloatArray
from ramanfit.core.shared.values import IterationCount


@dataclass(frozen=True)
class FitOutcome:
    """Result of one constrained fit.

    ``components`` hold the bound-mapped values; ``parameters`` is the
    unconstrained solution vector the optimizer worked on.
    """

    family: PeakFamily
    background: LinearBackground
    components: tuple[PeakComponent, ...]
    parameters: FloatArray
    cost: float
    converged: bool
    iterations: IterationCount
    message: str = ""

    def component(self, name: PeakName) -> PeakComponent | None:
        """Return the fitted component *name*, or None if the model lacks it."""
        for component in self.components:
            if component.name is name:
                return component
        return None

    def component_curve(self, component: PeakComponent, x: FloatArray) -> FloatArray:
        """Evaluate one fitted component (without background) at *x*."""
        shape = get_evaluator(component.family).evaluate(x - component.location, component.width)
        return component.amplitude * shape

    def peaks(self, x: FloatArray) -> FloatArray:
        """Sum of all fitted components at *x*."""
        total = np.zeros_like(np.asarray(x, dtype=np.float64))
        for component in self.components:
            total += self.component_curve(component, x)
        return total

    def model(self, x: FloatArray) -> FloatArray:
        """Full fitted curve (background plus components) at *x*."""
        return self.background.evaluate(x) + self.peaks(x)


__all__ = ["FitOutcome"]
