"""Main Typer application for RamanFit.

This module provides a thin orchestration layer that:
1. Creates the main Typer application
2. Imports commands from the commands/ subpackage
3. Registers commands
"""

from typing import Annotated

import typer

from ramanfit.cli.callbacks import version_callback
from ramanfit.cli.commands import fit_command, info_command, init_command

app = typer.Typer(
    name="ramanfit",
    help="RamanFit - Peak fitting and geothermometry of carbonaceous-material Raman spectra",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """RamanFit - Voigt/Lorentzian decomposition of Raman spectra of carbonaceous material.

    Fit the G and D bands, compute R1, R2, RA1 and RA2 and the calibrated
    peak temperatures, and collect one row per sample in a shared ledger.
    """


app.command(name="fit")(fit_command)
app.command(name="init")(init_command)
app.command(name="info")(info_command)
