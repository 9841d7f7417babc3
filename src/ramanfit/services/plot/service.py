"""Rendering service for per-sample figures and chart data.

Rendering is a side effect of the pipeline: a missing output directory, or
a figure that cannot be written, is reported as a warning and never stops
the batch.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import matplotlib.pyplot as plt

from ramanfit.core.shared.exceptions import DataIOError
from ramanfit.core.shared.reporter import NullReporter, Reporter
from ramanfit.io.charts import write_chart_data
from ramanfit.plotting.figures import (
    PANELS,
    make_combined_figure,
    make_noisy_figure,
    make_panel_figure,
)

if TYPE_CHECKING:
    from matplotlib.figure import Figure

    from ramanfit.core.domain.config import OutputConfig
    from ramanfit.core.domain.spectrum import Spectrum
    from ramanfit.services.fit.analysis import SampleAnalysis


def artefact_stem(name: str) -> str:
    """File name prefix of a sample's artefacts (its name without directories)."""
    return Path(name).name


class RenderService:
    """Writes ``<stem>combined.pdf``, the panel PNGs and optional chart data.

    Example:
        service = RenderService(config.output)
        paths = service.render(spectrum, analysis)
    """

    def __init__(self, output: OutputConfig, reporter: Reporter | None = None) -> None:
        self.output = output
        self._reporter = reporter or NullReporter()

    def _directory(self, directory: Path, what: str) -> bool:
        if directory.is_dir():
            return True
        self._reporter.warning(f"Directory '{directory}' does not exist, {what} not saved")
        return False

    def _save(self, fig: Figure, path: Path) -> Path | None:
        try:
            fig.savefig(path)
        except OSError as exc:
            self._reporter.warning(f"Cannot write {path}: {exc}")
            return None
        finally:
            plt.close(fig)
        return path

    def render(self, spectrum: Spectrum, analysis: SampleAnalysis) -> list[Path]:
        """Render every enabled artefact of one sample and return the paths written."""
        written: list[Path] = []
        stem = artefact_stem(spectrum.name)
        title = f"{spectrum.name} ({analysis.record.fit_style.value})"

        if self.output.save_figures and self._directory(self.output.figure_directory, "figures"):
            written.extend(self._render_figures(spectrum, analysis, stem, title))

        if (
            self.output.save_chart_data
            and analysis.selection is not None
            and self._directory(self.output.chart_directory, "chart data")
        ):
            try:
                written.extend(
                    write_chart_data(
                        self.output.chart_directory, stem, spectrum, analysis.selection.accepted
                    )
                )
            except DataIOError as exc:
                self._reporter.warning(str(exc))

        return written

    def _render_figures(
        self, spectrum: Spectrum, analysis: SampleAnalysis, stem: str, title: str
    ) -> list[Path]:
        directory = self.output.figure_directory
        combined = directory / f"{stem}combined.pdf"

        if analysis.selection is None:
            fig = make_noisy_figure(spectrum, analysis.background, title)
            saved = self._save(fig, combined)
            return [saved] if saved is not None else []

        outcome = analysis.selection.accepted
        figures = [(make_combined_figure(spectrum, analysis.background, outcome, title), combined)]
        for panel in PANELS:
            fig = make_panel_figure(panel, spectrum, analysis.background, outcome, title)
            figures.append((fig, directory / f"{stem}{panel}.png"))

        written = []
        for fig, path in figures:
            saved = self._save(fig, path)
            if saved is not None:
                written.append(saved)
        return written


__all__ = ["RenderService", "artefact_stem"]
