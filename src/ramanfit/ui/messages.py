"""UI messages and status indicators."""

from __future__ import annotations

from ramanfit.ui.console import VERSION, console, icon
from ramanfit.ui.logging import log

__all__ = [
    "action",
    "bullet",
    "error",
    "info",
    "show_version",
    "success",
    "warning",
]


def success(message: str, indent: int = 0, do_log: bool = True) -> None:
    """Display a success message."""
    spaces = "  " * indent
    console.print(f"{spaces}[success]{icon('check')}[/success] {message}")
    if do_log:
        log(message)


def warning(message: str, indent: int = 0, do_log: bool = True) -> None:
    """Display a warning message."""
    spaces = "  " * indent
    console.print(f"{spaces}[warning]{icon('warn')}[/warning]  {message}")
    if do_log:
        log(message, level="warning")


def error(message: str, indent: int = 0, do_log: bool = True) -> None:
    """Display an error message.

    Errors are printed even in quiet mode.
    """
    spaces = "  " * indent
    quiet = console.quiet
    console.quiet = False
    try:
        console.print(f"{spaces}[error]{icon('error')}[/error] {message}")
    finally:
        console.quiet = quiet
    if do_log:
        log(message, level="error")


def info(message: str, indent: int = 0, do_log: bool = True) -> None:
    """Display an info message."""
    spaces = "  " * indent
    console.print(f"{spaces}[dim]{icon('info')}[/dim] {message}")
    if do_log:
        log(message)


def action(message: str, do_log: bool = True) -> None:
    """Display an action/process message with visual separation."""
    console.print(f"\n[bold yellow]{icon('bullet')}[/bold yellow] {message}")
    if do_log:
        log(message)


def bullet(message: str, indent: int = 1, style: str = "default") -> None:
    """Display a bullet point item."""
    spaces = "  " * indent
    colour = style if style in {"success", "warning", "error"} else "cyan"
    console.print(f"{spaces}[{colour}]{icon('bullet')}[/{colour}] {message}")


def show_version() -> None:
    """Show version information (for --version flag)."""
    console.print(f"[header]RamanFit[/header] [dim]v{VERSION}[/dim]")
