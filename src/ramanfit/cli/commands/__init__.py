"""CLI command modules for RamanFit.

This package contains individual command implementations that are
registered with the main Typer application.
"""

from ramanfit.cli.commands.fit import fit_command
from ramanfit.cli.commands.info import info_command
from ramanfit.cli.commands.init import init_command

__all__ = ["fit_command", "info_command", "init_command"]
