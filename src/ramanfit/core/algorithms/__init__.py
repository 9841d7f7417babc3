"""Pre-fit algorithms: endpoint background and the noise gate."""

from ramanfit.core.algorithms.background import LinearBackground, estimate_background
from ramanfit.core.algorithms.noise import NoiseEstimate, estimate_snr, post_fit_snr

__all__ = [
    "LinearBackground",
    "NoiseEstimate",
    "estimate_background",
    "estimate_snr",
    "post_fit_snr",
]
