"""Domain model and reader for single Raman spectra."""

from __future__ import annotations

import warnings
from dataclasses import dataclass
from pathlib import Path

import numpy as np

from ramanfit.core.shared.exceptions import DataIOError
from ramanfit.core.shared.typing import FloatArray


def sample_name(path: Path) -> str:
    """Return the ledger key for a spectrum file: its path without extension."""
    return str(path.with_suffix(""))


@dataclass(frozen=True)
class Spectrum:
    """Ordered (wavenumber, intensity) records of one sample.

    Records keep the file order. By convention the first record is the
    high-wavenumber end and the last record the low-wavenumber end; the
    background estimate depends on that order, so it is never re-sorted.
    """

    name: str
    x: FloatArray
    y: FloatArray

    def __post_init__(self) -> None:
        if self.x.shape != self.y.shape or self.x.ndim != 1:
            msg = f"{self.name}: wavenumber and intensity arrays must be 1D and equal length"
            raise ValueError(msg)

    def __len__(self) -> int:
        return int(self.x.size)

    @property
    def first(self) -> tuple[float, float]:
        """First record (high-wavenumber end)."""
        return float(self.x[0]), float(self.y[0])

    @property
    def last(self) -> tuple[float, float]:
        """Last record (low-wavenumber end)."""
        return float(self.x[-1]), float(self.y[-1])

    def window_mask(self, window: tuple[float, float]) -> np.ndarray:
        """Boolean mask of records strictly inside the open interval *window*."""
        lo, hi = window
        return (self.x > lo) & (self.x < hi)

    def window(self, window: tuple[float, float]) -> tuple[FloatArray, FloatArray]:
        """Return the records strictly inside *window*, in file order."""
        mask = self.window_mask(window)
        return self.x[mask], self.y[mask]

    @classmethod
    def from_arrays(cls, name: str, x: object, y: object) -> Spectrum:
        """Build a spectrum from array-likes."""
        return cls(
            name=name,
            x=np.asarray(x, dtype=np.float64).ravel(),
            y=np.asarray(y, dtype=np.float64).ravel(),
        )


def read_spectrum(path: Path, name: str | None = None) -> Spectrum:
    """Read a two-column whitespace-separated spectrum file.

    Windows line endings and blank lines are accepted. Extra columns are
    ignored.

    Args:
        path: Spectrum text file
        name: Sample name; defaults to the path without its extension

    Returns
    -------
        Spectrum in file order

    Raises
    ------
        DataIOError: If the file cannot be read or parsed
    """
    if not path.exists():
        raise DataIOError(f"Spectrum file not found: {path}")

    try:
        with warnings.catch_warnings():
            # Empty files are reported through InsufficientDataError downstream
            warnings.simplefilter("ignore", UserWarning)
            data = np.loadtxt(path, usecols=(0, 1), ndmin=2, dtype=np.float64)
    except (OSError, ValueError) as exc:
        raise DataIOError(f"Cannot parse spectrum {path}: {exc}") from exc

    return Spectrum.from_arrays(
        name if name is not None else sample_name(path),
        data[:, 0] if data.size else np.empty(0),
        data[:, 1] if data.size else np.empty(0),
    )


__all__ = ["Spectrum", "read_spectrum", "sample_name"]
