"""Info command implementation."""

from __future__ import annotations

import sys

from ramanfit.ui import console


def info_command() -> None:
    """Show system information.

    Display the RamanFit version and the versions of its numerical stack.
    """
    import matplotlib
    import numpy as np
    import scipy

    from ramanfit import __version__

    console.print("[bold]RamanFit System Information[/bold]\n")

    console.print(f"[green]RamanFit version:[/green] {__version__}")
    console.print(f"[green]Python version:[/green] {sys.version}")
    console.print(f"[green]NumPy version:[/green] {np.__version__}")
    console.print(f"[green]SciPy version:[/green] {scipy.__version__}")
    console.print(f"[green]Matplotlib version:[/green] {matplotlib.__version__}")

    console.print(
        "\n[dim]Note: spectra are processed one at a time; the ledger is the only shared file.[/dim]"
    )
