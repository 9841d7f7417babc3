"""Append-only results table shared by all runs.

Layout of the ledger file::

    name g_height g_location ... fitstyle sig-noise iterations
    # Version = 2.1.0. Noise threshold = 2. This file reports in FWHM
    sample_a 1234.5 1581.2 ...
    sample_b na na ... Noisy 1 na

Rows are whitespace separated and keyed by their first cell. A sample is
written at most once, which makes a batch safe to re-run over a growing set
of files.

Areas are integrals of the fitted band. For Voigt bands this is the
amplitude times √π, so `*_area` cells of Voigt rows are √π larger than in
ledgers that recorded the bare Voigt amplitude. Ratios such as R2 are
unaffected.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterator
from pathlib import Path

from ramanfit.core.domain.config import LedgerMatch, RamanFitConfig
from ramanfit.core.domain.record import LEDGER_COLUMNS, SampleRecord
from ramanfit.core.shared.exceptions import LedgerError
from ramanfit.core.shared.values import format_value

logger = logging.getLogger(__name__)

DEFAULT_LEDGER_NAME = "acombinedresults.txt"
METADATA_TEMPLATE = "# Version = {version}. Noise threshold = {threshold}. This file reports in FWHM"

_WHITESPACE = re.compile(r"\s+")


def ledger_key(name: str) -> str:
    """Ledger key of a sample name; whitespace would split the row."""
    return _WHITESPACE.sub("_", name.strip())


class ResultLedger:
    """Whitespace-separated results table keyed by sample name.

    Args:
        path: Ledger file; created on first append when missing
        version: Program version written to the metadata line
        threshold: Noise threshold written to the metadata line
        match: ``"substring"`` treats a name as present when it occurs
            inside any recorded key; ``"exact"`` compares whole keys
    """

    def __init__(
        self,
        path: Path,
        version: str,
        threshold: float,
        match: LedgerMatch = "substring",
    ) -> None:
        self.path = path
        self.version = version
        self.threshold = threshold
        self.match = match

    @classmethod
    def from_config(cls, config: RamanFitConfig, version: str) -> ResultLedger:
        return cls(
            path=config.ledger.path,
            version=version,
            threshold=config.noise.threshold,
            match=config.ledger.match,
        )

    @property
    def header_line(self) -> str:
        return " ".join(LEDGER_COLUMNS)

    @property
    def metadata_line(self) -> str:
        return METADATA_TEMPLATE.format(
            version=self.version, threshold=format_value(self.threshold)
        )

    def exists(self) -> bool:
        return self.path.is_file()

    def _rows(self) -> Iterator[list[str]]:
        """Yield the cells of every data row, skipping header and metadata."""
        if not self.exists():
            return
        with self.path.open(encoding="utf-8") as fh:
            for line in fh:
                cells = line.split()
                if not cells:
                    continue
                if cells[0].startswith("#") or cells[0] == "Version":
                    continue
                if cells == list(LEDGER_COLUMNS):
                    continue
                yield cells

    def names(self) -> list[str]:
        """Keys of all recorded samples, in file order."""
        return [cells[0] for cells in self._rows()]

    def records(self) -> list[dict[str, str]]:
        """Recorded rows as column-name to cell mappings.

        Raises
        ------
            LedgerError: A row does not have one cell per column
        """
        rows = []
        for cells in self._rows():
            if len(cells) != len(LEDGER_COLUMNS):
                msg = (
                    f"{self.path}: row '{cells[0]}' has {len(cells)} cells, "
                    f"expected {len(LEDGER_COLUMNS)}"
                )
                raise LedgerError(msg)
            rows.append(dict(zip(LEDGER_COLUMNS, cells, strict=True)))
        return rows

    def contains(self, name: str) -> bool:
        """True when *name* has already been recorded.

        In substring mode a name that merely occurs inside a recorded key
        (``"A"`` inside ``"A_2"``) also counts as recorded.
        """
        key = ledger_key(name)
        if self.match == "exact":
            return any(recorded == key for recorded in self.names())
        return any(key in recorded for recorded in self.names())

    def initialize(self) -> None:
        """Write a fresh header and metadata line, discarding any rows."""
        try:
            with self.path.open("w", encoding="utf-8") as fh:
                fh.write(self.header_line + "\n")
                fh.write(self.metadata_line + "\n")
        except OSError as exc:
            msg = f"Cannot write ledger {self.path}: {exc}"
            raise LedgerError(msg) from exc

    def append(self, record: SampleRecord) -> bool:
        """Append *record* unless its name is already recorded.

        Returns
        -------
            True when a row was written, False for a duplicate
        """
        if self.contains(record.name):
            logger.info("%s already in %s, not appended", record.name, self.path)
            return False
        if not self.exists():
            logger.info("Creating ledger %s", self.path)
            self.initialize()

        cells = record.to_row()
        cells[0] = ledger_key(cells[0])
        try:
            with self.path.open("a", encoding="utf-8") as fh:
                fh.write(" ".join(cells) + "\n")
        except OSError as exc:
            msg = f"Cannot append to ledger {self.path}: {exc}"
            raise LedgerError(msg) from exc
        return True

    def reset(self, confirm: Callable[[], bool]) -> bool:
        """Truncate the ledger after an explicit confirmation.

        Args:
            confirm: Called once; the ledger is reset only if it returns True

        Returns
        -------
            True when the ledger was reset
        """
        if not confirm():
            return False
        self.initialize()
        logger.info("Ledger %s reset", self.path)
        return True


__all__ = ["DEFAULT_LEDGER_NAME", "METADATA_TEMPLATE", "ResultLedger", "ledger_key"]
