"""UI tables for displaying structured data.

This module provides functions for creating and displaying Rich tables
with consistent styling across the application.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich import box
from rich.table import Table

from ramanfit.core.domain.peaks import PEAK_ORDER
from ramanfit.core.domain.record import FitStyle
from ramanfit.core.shared.values import format_value, is_value
from ramanfit.ui.console import console

if TYPE_CHECKING:
    from ramanfit.core.domain.record import SampleRecord

__all__ = [
    "create_table",
    "print_record",
    "print_summary",
]

_STYLE_COLOURS = {
    FitStyle.NOISY: "style.noisy",
    FitStyle.LORENTZIANS: "style.lorentzian",
}


def create_table(title: str | None = None, show_header: bool = True) -> Table:
    """Create a standard table with consistent styling.

    Args:
        title: Optional table title
        show_header: Whether to show table header

    Returns
    -------
        Configured Table instance
    """
    return Table(
        title=title,
        title_style="header" if title else None,
        box=box.ROUNDED,
        show_header=show_header,
        header_style="bold cyan",
        border_style="dim",
    )


def print_summary(items: dict[str, Any], title: str = "Summary") -> None:
    """Print a standard two-column summary table.

    Args:
        items: Dictionary of key-value pairs to display
        title: Table title
    """
    table = create_table(title, show_header=False)
    table.add_column("Item", style="metric")
    table.add_column("Value", style="value")

    for key, value in items.items():
        table.add_row(key, str(value))

    console.print(table)


def _cell(value: object, precision: int = 5) -> str:
    return format_value(value, precision) if is_value(value) else str(value)


def print_record(record: SampleRecord) -> None:
    """Print the per-band table and the ratios of one sample."""
    colour = _STYLE_COLOURS.get(record.fit_style, "style.voigt")
    title = f"{record.name}  [{colour}]{record.fit_style.value}[/{colour}]"

    if record.fit_style is FitStyle.NOISY:
        print_summary({"Signal/noise": _cell(record.snr)}, title=title)
        return

    table = create_table(title)
    table.add_column("Band", style="key")
    for column in ("Height", "Location", "FWHM", "Area"):
        table.add_column(column, style="value", justify="right")
    for name in PEAK_ORDER:
        fields = record.peak(name)
        if not is_value(fields.location):
            continue
        table.add_row(name.label, *(_cell(value) for value in fields.values()))
    console.print(table)

    print_summary(
        {
            "R1": _cell(record.r1_ratio, 4),
            "R2": _cell(record.r2_ratio, 4),
            "RA1": _cell(record.ra1_ratio, 4),
            "RA2": _cell(record.ra2_ratio, 4),
            "Temperature (°C)": _cell(record.reported_temp, 4),
            "Signal/noise": _cell(record.snr),
            "Iterations": _cell(record.iterations),
        },
        title="Ratios",
    )
