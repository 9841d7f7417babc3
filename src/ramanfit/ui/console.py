"""Console configuration and theme for RamanFit UI.

This module provides the central console instance and theme used throughout
the application for consistent styling.
"""

import os
import sys

from rich.console import Console
from rich.theme import Theme

from ramanfit import __version__

# Palette chosen for good contrast in light/dark terminals
RAMANFIT_THEME = Theme(
    {
        # --- Semantic Status ---
        "success": "bold green",
        "warning": "bold yellow",
        "error": "bold red",
        "info": "cyan",
        # --- UI Structure ---
        "header": "bold cyan",
        # --- Data & Values ---
        "key": "cyan",
        "value": "green",
        "metric": "bold green",
        "path": "blue underline",
        # --- Fit styles ---
        "style.voigt": "bold magenta",
        "style.lorentzian": "bold blue",
        "style.noisy": "bold yellow",
    }
)

# Single console instance for entire application
console = Console(theme=RAMANFIT_THEME)

VERSION = __version__


class Verbosity:
    """Verbosity levels for UI output."""

    QUIET = 0  # Errors only
    NORMAL = 1  # Standard output (per-sample progress and summary)
    VERBOSE = 2  # Detailed output (log records echoed to the console)


def set_verbosity(level: int) -> None:
    """Set the global verbosity level.

    Args:
        level: Verbosity level (0=QUIET, 1=NORMAL, 2=VERBOSE)
    """
    console.quiet = level == Verbosity.QUIET


_EMOJI_DISABLED = os.getenv("RAMANFIT_NO_EMOJI", "").lower() in {"1", "true", "yes"}


def _supports_emoji() -> bool:
    """Best-effort detection if the terminal supports Unicode symbols."""
    if _EMOJI_DISABLED:
        return False
    enc = getattr(console, "encoding", None) or sys.getdefaultencoding()
    return enc is None or "utf" in enc.lower()


def icon(name: str) -> str:
    """Return a UI icon string based on terminal capabilities.

    Names: check, warn, error, info, bullet, separator
    """
    use_emoji = _supports_emoji()
    mapping = {
        "check": "✓" if use_emoji else "+",
        "warn": "⚠" if use_emoji else "!",
        "error": "✗" if use_emoji else "x",
        "info": "▸" if use_emoji else ">",
        "bullet": "‣" if use_emoji else "-",
        "separator": "━" if use_emoji else "-",
    }
    return mapping.get(name, mapping["bullet"])


__all__ = [
    "RAMANFIT_THEME",
    "VERSION",
    "Verbosity",
    "console",
    "icon",
    "set_verbosity",
]
