"""Rendering service for per-sample figures and chart data."""

from ramanfit.services.plot.service import RenderService, artefact_stem

__all__ = ["RenderService", "artefact_stem"]
