"""Core constants for RamanFit spectral windows and calibrations.

Wavenumbers are in cm⁻¹. Windows are open intervals ``(lo, hi)``: a record
belongs to a window when ``lo < x < hi``.
"""

# =============================================================================
# Noise Gate
# =============================================================================

NOISE_WINDOW = (1740.0, 1830.0)
"""Flat region between the D2 band and the second-order bands used as the
noise reference before fitting."""

SIGNAL_WINDOW = (1200.0, 1790.0)
"""Region searched for the strongest first-order band before fitting."""

NOISE_CEILING_SEED = 1.0
"""Starting value of the noise-window maximum."""

NOISE_FLOOR_OFFSET = 0.1
"""Subtracted from the noise-window minimum so the noise range is never zero."""

# =============================================================================
# Post-fit signal-to-noise
# =============================================================================

POST_FIT_NOISE_WINDOW = (1700.0, 1800.0)
"""Noise reference window used once the fitted background is removed."""

POST_FIT_SIGNAL_START = 1200.0
"""Background-removed signal maximum is taken above this wavenumber."""

PLOT_RANGE = (1000.0, 1900.0)
"""Wavenumber range of the rendered figures and exported chart data."""

LORENTZIAN_TABLE_RANGE = (800.0, 2200.0)
"""Background-removed range behind the signal-to-noise ratio of a Lorentzian fit."""

# =============================================================================
# Geothermometer calibrations
# =============================================================================

R2_TEMP_SLOPE = -445.0
R2_TEMP_OFFSET = 641.0
"""``T(°C) = -445 * R2 + 641``."""

RA1_TEMP_OFFSET = 0.3758
RA1_TEMP_DIVISOR = 0.0008
"""``T(°C) = (RA1 - 0.3758) / 0.0008``."""

RA2_TEMP_OFFSET = 0.27
RA2_TEMP_DIVISOR = 0.0045
"""``T(°C) = (RA2 - 0.27) / 0.0045``."""

# =============================================================================
# Least-Squares Optimization
# =============================================================================

LEAST_SQUARES_XTOL = 1e-12
LEAST_SQUARES_GTOL = 1e-12
"""Parameter and gradient tolerances for Levenberg-Marquardt.

Kept far below the cost tolerance so that the relative cost reduction is
the effective stopping rule. Must stay above machine epsilon for the 'lm'
method.
"""

EVALUATIONS_PER_ITERATION = 100
"""Residual evaluations allowed per Levenberg-Marquardt step.

The iteration cap counts steps (Jacobian evaluations); MINPACK's own
evaluation budget is this multiple of the cap so that it never stops first.
"""
