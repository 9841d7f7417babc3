"""Init command implementation."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from ramanfit.io.config import generate_default_config
from ramanfit.ui import bullet, console, error, info, success


def init_command(
    path: Annotated[
        Path,
        typer.Argument(
            help="Path for new configuration file",
            dir_okay=False,
            resolve_path=True,
        ),
    ] = Path("ramanfit.toml"),
    force: Annotated[
        bool,
        typer.Option(
            "--force",
            "-f",
            help="Overwrite existing file",
        ),
    ] = False,
) -> None:
    """Generate a default configuration file.

    Creates a TOML configuration file with the default noise threshold,
    selection limits, optimizer settings, ledger and output locations.

    Examples
    --------
      Create default config:
        $ ramanfit init

      Overwrite existing config:
        $ ramanfit init --force
    """
    if path.exists() and not force:
        error(f"File already exists: [path]{path}[/path]")
        info("Use [code]--force[/code] to overwrite")
        raise typer.Exit(1)

    path.write_text(generate_default_config(), encoding="utf-8")
    success(f"Created configuration file: [path]{path}[/path]")

    console.print("\n[bold cyan]Configuration includes:[/]")
    bullet("[green]Noise gate[/] (signal-to-noise threshold)")
    bullet("[green]Model selection[/] (R2, R1, D1 width and RA2 limits)")
    bullet("[green]Optimizer settings[/] (tolerance and iteration cap per model)")
    bullet("[green]Ledger and output[/] (results file, figure and chart directories)")
    console.print(f"\nRun fitting: [cyan]ramanfit fit --config {path} *.txt[/]\n")
