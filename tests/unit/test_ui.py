"""Tests for logging setup and console output."""

import json

from ramanfit.core.domain.record import FitStyle, PeakFields, SampleRecord
from ramanfit.ui import Verbosity, console, print_record, set_verbosity
from ramanfit.ui.logging import close_logging, log, log_dict, setup_logging


class TestLogging:
    """Tests for the file log."""

    def test_text_log(self, tmp_path):
        path = tmp_path / "run.log"

        setup_logging(log_file=path)
        log("Analysing sample_a")
        log_dict({"Fit style": "Voigt1"})
        close_logging()

        text = path.read_text()
        assert "Session Started" in text
        assert "Analysing sample_a" in text
        assert "- Fit style: Voigt1" in text
        assert "Session Completed" in text

    def test_json_log(self, tmp_path):
        path = tmp_path / "run.json"

        setup_logging(log_file=path)
        log("fit done", level="warning")
        close_logging()

        records = [json.loads(line) for line in path.read_text().splitlines()]
        assert any(
            record["message"] == "fit done" and record["level"] == "WARNING" for record in records
        )
        assert all(record["logger"] == "ramanfit" for record in records)

    def test_disabled_without_file(self):
        setup_logging()

        log("dropped")
        close_logging()


class TestPrintRecord:
    """Tests for the per-sample console table."""

    def test_fitted_record(self):
        record = SampleRecord(
            name="sample_a",
            fit_style=FitStyle.VOIGT1,
            g=PeakFields(height=950.0, location=1582.0, width=20.0, area=31000.0),
            r2_ratio=0.36,
        )

        set_verbosity(Verbosity.NORMAL)
        with console.capture() as capture:
            print_record(record)

        output = capture.get()
        assert "sample_a" in output
        assert "Voigt1" in output
        assert "1582" in output
        assert "D3" not in output

    def test_noisy_record(self):
        set_verbosity(Verbosity.NORMAL)
        with console.capture() as capture:
            print_record(SampleRecord.noisy("flat", 0))

        output = capture.get()
        assert "Noisy" in output
        assert "Signal/noise" in output
