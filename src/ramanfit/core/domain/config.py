"""Domain configuration models for RamanFit."""

from pathlib import Path
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

LedgerMatch = Literal["substring", "exact"]


class NoiseConfig(BaseModel):
    """Configuration of the signal-to-noise gate."""

    model_config = ConfigDict(extra="forbid")

    threshold: Annotated[float, Field(ge=0)] = Field(
        default=2.0,
        description="Spectra with a signal-to-noise ratio below this value are not fitted.",
    )


class SelectionConfig(BaseModel):
    """Decision thresholds of the Voigt/Lorentzian model selection.

    All comparisons are strict: a ratio exactly at its limit fails the
    test it guards.

        [selection]
        r2_limit = 0.6        # Voigt1/Voigt3 need R2 < r2_limit
        d1_width_limit = 60   # Voigt1 needs floor(D1 HWHM) < d1_width_limit
        r1_limit = 0.5        # Voigt3 needs floor(100 R1) < 100 r1_limit
        ra2_limit = 2.0       # Lorentzian rejected when floor(100 RA2) > 100 ra2_limit
    """

    model_config = ConfigDict(extra="forbid")

    r2_limit: Annotated[float, Field(gt=0, le=1)] = Field(
        default=0.6,
        description="Upper (exclusive) R2 limit for accepting the Voigt fit.",
    )
    d1_width_limit: Annotated[int, Field(gt=0)] = Field(
        default=60,
        description="Upper (exclusive) D1 half width, in cm-1, for the Voigt1 style.",
    )
    r1_limit: Annotated[float, Field(gt=0)] = Field(
        default=0.5,
        description="Upper (exclusive) R1 limit for the Voigt3 style.",
    )
    ra2_limit: Annotated[float, Field(gt=0)] = Field(
        default=2.0,
        description="RA2 above this value rejects the Lorentzian fit (Voigt2 style).",
    )


class OptimizerConfig(BaseModel):
    """Stopping rule of one constrained least-squares fit."""

    model_config = ConfigDict(extra="forbid")

    tolerance: Annotated[float, Field(gt=0)] = Field(
        default=1e-8,
        description="Relative reduction of the sum of squares below which the fit has converged.",
    )
    max_iterations: Annotated[int, Field(gt=0)] = Field(
        default=500,
        description="Iteration cap; reaching it is recorded, not treated as failure.",
    )


class LedgerConfig(BaseModel):
    """Location and lookup semantics of the result ledger."""

    model_config = ConfigDict(extra="forbid")

    path: Path = Field(
        default=Path("acombinedresults.txt"),
        description="Whitespace-separated results table shared by all runs.",
    )
    match: LedgerMatch = Field(
        default="substring",
        description=(
            "'substring' treats a sample as processed when its name occurs inside any "
            "recorded name (historical behaviour); 'exact' compares whole names."
        ),
    )


class OutputConfig(BaseModel):
    """Configuration for rendered figures, chart data and logs."""

    model_config = ConfigDict(extra="forbid")

    figure_directory: Path = Field(
        default=Path("pdf"), description="Existing directory for PDF/PNG figures."
    )
    chart_directory: Path = Field(
        default=Path("xy_chart_files"), description="Existing directory for chart data."
    )
    save_figures: bool = Field(default=True, description="Render figures for every sample.")
    save_chart_data: bool = Field(
        default=False,
        description="Export normalised background-removed spectrum and fit as .xy files.",
    )
    log_file: Path | None = Field(
        default=None,
        description="Log file (.log for text, .json for structured). None disables it.",
    )


class RamanFitConfig(BaseModel):
    """Top-level RamanFit configuration.

    Example TOML configuration:
        [noise]
        threshold = 5

        [selection]
        r2_limit = 0.6

        [voigt]
        tolerance = 1e-8
        max_iterations = 500

        [lorentzian]
        tolerance = 1e-4
        max_iterations = 2000

        [ledger]
        path = "acombinedresults.txt"
        match = "substring"
    """

    model_config = ConfigDict(extra="forbid")

    noise: NoiseConfig = Field(default_factory=NoiseConfig)
    selection: SelectionConfig = Field(default_factory=SelectionConfig)
    voigt: OptimizerConfig = Field(
        default_factory=lambda: OptimizerConfig(tolerance=1e-8, max_iterations=500)
    )
    lorentzian: OptimizerConfig = Field(
        default_factory=lambda: OptimizerConfig(tolerance=1e-4, max_iterations=2000)
    )
    ledger: LedgerConfig = Field(default_factory=LedgerConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    def with_threshold(self, threshold: float) -> "RamanFitConfig":
        """Return a copy with a different noise threshold."""
        return self.model_copy(update={"noise": NoiseConfig(threshold=threshold)})


__all__ = [
    "LedgerConfig",
    "LedgerMatch",
    "NoiseConfig",
    "OptimizerConfig",
    "OutputConfig",
    "RamanFitConfig",
    "SelectionConfig",
]
