"""Shared typing aliases used across RamanFit."""

import numpy as np
import numpy.typing as npt

FloatArray = npt.NDArray[np.float64]
