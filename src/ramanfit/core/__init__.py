"""Core spectral analysis: domain model, pre-fit algorithms, fitting and metrics."""
