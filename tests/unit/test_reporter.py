"""Tests for reporter abstraction."""

import logging

import pytest

from conftest import MockReporter

from ramanfit.core.shared.reporter import CompositeReporter, LoggingReporter, NullReporter, Reporter
from ramanfit.ui.reporter import ConsoleReporter


class TestReporterProtocol:
    """Tests for Reporter protocol compliance."""

    @pytest.mark.parametrize(
        "reporter",
        [NullReporter(), LoggingReporter(), MockReporter(), ConsoleReporter()],
        ids=["null", "logging", "mock", "console"],
    )
    def test_satisfies_protocol(self, reporter):
        assert isinstance(reporter, Reporter)

    def test_composite_reporter_satisfies_protocol(self):
        assert isinstance(CompositeReporter([NullReporter()]), Reporter)


class TestLoggingReporter:
    """Tests for LoggingReporter."""

    def test_levels(self, caplog):
        reporter = LoggingReporter("ramanfit.test")

        with caplog.at_level(logging.INFO, logger="ramanfit.test"):
            reporter.action("Fitting Voigt model")
            reporter.warning("Seed outside bounds")
            reporter.success("sample_a: Voigt1")

        levels = [(record.levelno, record.getMessage()) for record in caplog.records]
        assert levels == [
            (logging.INFO, "[ACTION] Fitting Voigt model"),
            (logging.WARNING, "Seed outside bounds"),
            (logging.INFO, "[SUCCESS] sample_a: Voigt1"),
        ]


class TestCompositeReporter:
    def test_delegates_to_all(self):
        first, second = MockReporter(), MockReporter()
        composite = CompositeReporter([first, second])

        composite.action("a")
        composite.info("b")
        composite.warning("c")
        composite.error("d")
        composite.success("e")

        expected = [
            ("action", "a"),
            ("info", "b"),
            ("warning", "c"),
            ("error", "d"),
            ("success", "e"),
        ]
        assert first.messages == expected
        assert second.messages == expected
