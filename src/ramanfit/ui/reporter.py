"""Console-based reporter implementation using Rich.

This module provides a Reporter implementation that adapts the Reporter
protocol to the RamanFit UI messages.
"""

from __future__ import annotations

from ramanfit.core.shared.reporter import Reporter
from ramanfit.ui.messages import action, error, info, success, warning


class ConsoleReporter:
    """Reporter implementation using Rich console output.

    Messages are also written to the log unless *do_log* is False, which is
    how the fit command pairs it with a ``LoggingReporter``.

    Example:
        >>> from ramanfit.ui.reporter import ConsoleReporter
        >>> reporter = ConsoleReporter()
        >>> reporter.action("Fitting 3 Voigt bands")
        >>> reporter.success("sample_a: Voigt1")
    """

    def __init__(self, do_log: bool = True) -> None:
        self.do_log = do_log

    def action(self, message: str) -> None:
        action(message, do_log=self.do_log)

    def info(self, message: str) -> None:
        info(message, do_log=self.do_log)

    def warning(self, message: str) -> None:
        warning(message, do_log=self.do_log)

    def error(self, message: str) -> None:
        error(message, do_log=self.do_log)

    def success(self, message: str) -> None:
        success(message, do_log=self.do_log)


# Verify protocol compliance at import time
if not isinstance(ConsoleReporter(), Reporter):
    raise TypeError("ConsoleReporter must satisfy Reporter protocol")
