"""Batch pipeline coordinating spectrum files, the ledger and rendering."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING

from ramanfit.core.domain.spectrum import read_spectrum, sample_name
from ramanfit.core.shared.exceptions import DataIOError, InsufficientDataError, LedgerError
from ramanfit.core.shared.reporter import NullReporter, Reporter
from ramanfit.io.ledger import ResultLedger
from ramanfit.services.fit.analysis import SampleAnalysis, analyse_spectrum
from ramanfit.ui.console import VERSION
from ramanfit.ui.logging import log, log_dict, log_section

if TYPE_CHECKING:
    from ramanfit.core.domain.config import RamanFitConfig
    from ramanfit.core.domain.record import SampleRecord
    from ramanfit.core.fitting.selection import Optimizer
    from ramanfit.services.plot.service import RenderService


class SampleStatus(str, Enum):
    """Outcome of one file in a batch."""

    PROCESSED = "processed"
    NOISY = "noisy"
    DUPLICATE = "duplicate"
    FAILED = "failed"


@dataclass(frozen=True)
class SampleResult:
    """What happened to one spectrum file."""

    path: Path
    name: str
    status: SampleStatus
    record: SampleRecord | None = None
    analysis: SampleAnalysis | None = None
    artefacts: tuple[Path, ...] = ()
    error: str | None = None


class FitPipeline:
    """High-level orchestrator for a batch of spectrum files.

    Files are processed strictly in order. Each one is skipped when its
    sample is already in the ledger; otherwise it is analysed, appended to
    the ledger and rendered. A file that cannot be read, fitted or written
    to the ledger is reported and the batch carries on.

    Args:
        config: RamanFitConfig instance
        ledger: Result ledger; built from ``config.ledger`` when None
        optimizer: Fitting backend for the model selector
        renderer: Figure/chart writer; nothing is rendered when None
        reporter: Progress reporting
    """

    def __init__(
        self,
        config: RamanFitConfig,
        *,
        ledger: ResultLedger | None = None,
        optimizer: Optimizer | None = None,
        renderer: RenderService | None = None,
        reporter: Reporter | None = None,
    ) -> None:
        self.config = config
        self.ledger = ledger if ledger is not None else ResultLedger.from_config(config, VERSION)
        self.optimizer = optimizer
        self.renderer = renderer
        self.reporter = reporter or NullReporter()

    def process(self, path: Path) -> SampleResult:
        """Analyse one spectrum file and append its record to the ledger."""
        name = sample_name(path)
        if self.ledger.contains(name):
            self.reporter.info(f"{name} already in {self.ledger.path}, skipping")
            return SampleResult(path=path, name=name, status=SampleStatus.DUPLICATE)

        log_section(name)
        self.reporter.action(f"Analysing {path}")
        try:
            spectrum = read_spectrum(path, name)
            analysis = analyse_spectrum(
                spectrum, self.config, optimizer=self.optimizer, reporter=self.reporter
            )
        except (DataIOError, InsufficientDataError) as exc:
            self.reporter.error(f"{name}: {exc}")
            return SampleResult(path=path, name=name, status=SampleStatus.FAILED, error=str(exc))

        record = analysis.record
        try:
            self.ledger.append(record)
        except LedgerError as exc:
            self.reporter.error(f"{name}: {exc}")
            return SampleResult(
                path=path,
                name=name,
                status=SampleStatus.FAILED,
                analysis=analysis,
                error=str(exc),
            )
        log_dict(
            {
                "Sample": name,
                "Fit style": record.fit_style.value,
                "Signal/noise": record.snr,
                "Iterations": record.iterations,
                "Temperature": record.reported_temp,
            }
        )

        artefacts: tuple[Path, ...] = ()
        if self.renderer is not None:
            artefacts = tuple(self.renderer.render(spectrum, analysis))
            for artefact in artefacts:
                log(f"Wrote {artefact}", level="debug")

        status = SampleStatus.NOISY if analysis.is_noisy else SampleStatus.PROCESSED
        if status is SampleStatus.PROCESSED:
            self.reporter.success(f"{name}: {record.fit_style.value}")
        return SampleResult(
            path=path,
            name=name,
            status=status,
            record=record,
            analysis=analysis,
            artefacts=artefacts,
        )

    def run(self, paths: Iterable[Path]) -> list[SampleResult]:
        """Process *paths* in order; never aborts the batch."""
        return [self.process(path) for path in paths]


def summarize(results: Iterable[SampleResult]) -> dict[str, int]:
    """Count results per status, in ``SampleStatus`` order."""
    counts = {status.value: 0 for status in SampleStatus}
    for result in results:
        counts[result.status.value] += 1
    return counts


__all__ = ["FitPipeline", "SampleResult", "SampleStatus", "summarize"]
