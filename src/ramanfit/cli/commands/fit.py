"""Fit command implementation."""

from __future__ import annotations

import pathlib  # noqa: TC003
from typing import Annotated

import typer

from ramanfit.core.domain.config import RamanFitConfig
from ramanfit.core.shared.exceptions import ConfigError, LedgerError
from ramanfit.io.config import load_config, save_config


def _resolve_config(
    config: pathlib.Path | None,
    threshold: float | None,
    ledger: pathlib.Path | None,
    log_file: pathlib.Path | None,
) -> RamanFitConfig:
    fit_config = load_config(config) if config is not None else RamanFitConfig()
    if threshold is not None:
        fit_config = fit_config.with_threshold(threshold)
    if ledger is not None:
        fit_config = fit_config.model_copy(
            update={"ledger": fit_config.ledger.model_copy(update={"path": ledger})}
        )
    if log_file is not None:
        fit_config = fit_config.model_copy(
            update={"output": fit_config.output.model_copy(update={"log_file": log_file})}
        )
    return fit_config


def fit_command(
    files: Annotated[
        list[pathlib.Path] | None,
        typer.Argument(
            help="Two-column spectrum files (wavenumber, intensity), processed in order",
            dir_okay=False,
        ),
    ] = None,
    delete: Annotated[
        bool,
        typer.Option(
            "--delete",
            "-d",
            help="Delete all records from the ledger (asks for confirmation) before fitting",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Only print errors",
        ),
    ] = False,
    threshold: Annotated[
        float | None,
        typer.Option(
            "--threshold",
            "-t",
            help="Signal-to-noise threshold below which a spectrum is recorded as Noisy",
            min=0.0,
        ),
    ] = None,
    config: Annotated[
        pathlib.Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to TOML configuration file",
            exists=True,
            dir_okay=False,
            resolve_path=True,
        ),
    ] = None,
    ledger: Annotated[
        pathlib.Path | None,
        typer.Option(
            "--ledger",
            "-l",
            help="Results ledger (default: acombinedresults.txt)",
            dir_okay=False,
        ),
    ] = None,
    log_file: Annotated[
        pathlib.Path | None,
        typer.Option(
            "--log-file",
            help="Write a log (.log for text, .json for structured records)",
            dir_okay=False,
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Echo log records to the console",
        ),
    ] = False,
    save_config_path: Annotated[
        pathlib.Path | None,
        typer.Option(
            "--save-config",
            help="Write the effective configuration (with command-line overrides) to a TOML file",
            dir_okay=False,
        ),
    ] = None,
) -> None:
    """Fit Raman spectra and append one row per sample to the ledger.

    Every spectrum is first checked against the noise threshold. Spectra
    that pass are fitted with three Voigt bands and, when the Voigt fit is
    outside its calibration, with five Lorentzian bands. Samples already in
    the ledger are skipped, so the command is safe to re-run.

    Examples
    --------
    Fit every spectrum in the current directory:
        $ ramanfit fit *.txt

    Start a new ledger with a stricter noise threshold:
        $ ramanfit fit -d -t 5 *.txt

    Keep the settings of a run next to its ledger:
        $ ramanfit fit -t 5 --save-config run.toml *.txt
    """
    from ramanfit.core.shared.reporter import CompositeReporter, LoggingReporter, Reporter
    from ramanfit.io.ledger import ResultLedger
    from ramanfit.services.fit.pipeline import FitPipeline, summarize
    from ramanfit.services.plot.service import RenderService
    from ramanfit.ui import (
        VERSION,
        ConsoleReporter,
        Verbosity,
        close_logging,
        error,
        info,
        print_record,
        print_summary,
        set_verbosity,
        setup_logging,
        success,
    )

    if quiet:
        set_verbosity(Verbosity.QUIET)
    else:
        set_verbosity(Verbosity.VERBOSE if verbose else Verbosity.NORMAL)

    try:
        fit_config = _resolve_config(config, threshold, ledger, log_file)
    except (ConfigError, FileNotFoundError) as exc:
        error(str(exc))
        raise typer.Exit(code=1) from exc

    if save_config_path is not None:
        try:
            save_config(fit_config, save_config_path)
        except OSError as exc:
            error(f"Cannot write configuration to {save_config_path}: {exc}")
            raise typer.Exit(code=1) from exc
        info(f"Configuration saved to [path]{save_config_path}[/path]")

    setup_logging(log_file=fit_config.output.log_file, verbose=verbose and not quiet)
    result_ledger = ResultLedger.from_config(fit_config, VERSION)

    try:
        if delete:
            try:
                deleted = result_ledger.reset(lambda: typer.confirm("Really delete all records?"))
            except LedgerError as exc:
                error(str(exc))
                raise typer.Exit(code=1) from exc
            if deleted:
                success(f"Deleted all records from [path]{result_ledger.path}[/path]")
            else:
                info(f"Ledger [path]{result_ledger.path}[/path] kept")

        if not files:
            if not delete:
                info("No spectrum files given")
            return

        reporter: Reporter = ConsoleReporter()
        if fit_config.output.log_file is not None:
            reporter = CompositeReporter(
                [ConsoleReporter(do_log=False), LoggingReporter("ramanfit.pipeline")]
            )
        pipeline = FitPipeline(
            fit_config,
            ledger=result_ledger,
            renderer=RenderService(fit_config.output, reporter=reporter),
            reporter=reporter,
        )
        results = []
        for path in files:
            result = pipeline.process(path)
            results.append(result)
            if result.record is not None:
                print_record(result.record)

        print_summary(summarize(results), title="Batch summary")
    finally:
        close_logging()
