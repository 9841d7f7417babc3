"""UI and terminal output styling for RamanFit.

Submodules:
- console: Theme, console instance and verbosity
- logging: File logging utilities
- messages: Status messages (success, error, warning, etc.)
- reporter: Rich implementation of the Reporter protocol
- tables: Table display utilities
"""

from ramanfit.ui.console import (
    RAMANFIT_THEME,
    VERSION,
    Verbosity,
    console,
    icon,
    set_verbosity,
)
from ramanfit.ui.logging import close_logging, log, log_dict, log_section, setup_logging
from ramanfit.ui.messages import (
    action,
    bullet,
    error,
    info,
    show_version,
    success,
    warning,
)
from ramanfit.ui.reporter import ConsoleReporter
from ramanfit.ui.tables import create_table, print_record, print_summary

__all__ = [
    "RAMANFIT_THEME",
    "VERSION",
    "ConsoleReporter",
    "Verbosity",
    "action",
    "bullet",
    "close_logging",
    "console",
    "create_table",
    "error",
    "icon",
    "info",
    "log",
    "log_dict",
    "log_section",
    "print_record",
    "print_summary",
    "set_verbosity",
    "setup_logging",
    "show_version",
    "success",
    "warning",
]
