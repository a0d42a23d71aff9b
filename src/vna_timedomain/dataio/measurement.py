"""Read VNA S21 sweeps and map them onto a uniform frequency-bin grid."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

import numpy as np

from vna_timedomain.errors import InvalidInputError
from vna_timedomain.utils.validation import frozen_copy

COMMENT_PREFIXES: tuple[str, ...] = ("#", "!", "%")
DEFAULT_BIN_TOLERANCE = 1e-6


@dataclass(frozen=True)
class S21Measurement:
    """Complex S21 sweep placed on integer multiples of the frequency step."""

    frequency_hz: np.ndarray
    spectrum: np.ndarray
    delta_f_hz: float
    f1: int
    f2: int
    bin_index: np.ndarray
    source: Path | None = None

    @property
    def n_points(self) -> int:
        return int(self.spectrum.size)


def load_s21_measurement(
    path: str | Path,
    *,
    delimiter: str | None = None,
    bin_tolerance: float = DEFAULT_BIN_TOLERANCE,
) -> S21Measurement:
    """Load a ``frequency real imag`` table exported from a network analyzer.

    Columns two and three are taken as the real and imaginary parts of S21.
    Leading header lines without any numeric token are skipped, as are
    blank lines and lines starting with ``#``, ``!`` or ``%``. Any other
    line must parse as a data row. A UTF-8 byte-order mark is ignored.
    Columns past the third are ignored.

    Parameters
    ----------
    path : str or Path
        Text file with one sweep point per row.
    delimiter : str or None
        Column separator. ``None`` splits on any whitespace.
    bin_tolerance : float
        Largest allowed distance, in bins, between ``frequency / delta_f``
        and the nearest integer.

    Returns
    -------
    S21Measurement
        Measured spectrum with its frequency step and bin bounds.

    Raises
    ------
    FileNotFoundError
        If *path* does not exist.
    InvalidInputError
        If the table is empty, malformed, shorter than two rows, or its
        frequencies are not a uniform grid of non-negative bin multiples.
    """

    source = Path(path)
    if not source.exists():
        raise FileNotFoundError(source)

    data_lines = _data_lines(
        source.read_text(encoding="utf-8-sig").splitlines(), delimiter=delimiter
    )
    if not data_lines:
        raise InvalidInputError(f"{source}: no numeric rows found.")

    n_columns = len(_split(data_lines[0], delimiter))
    if n_columns < 3:
        raise InvalidInputError(
            f"{source}: expected at least 3 columns (frequency, real, imag), found {n_columns}."
        )

    try:
        table = np.loadtxt(
            data_lines,
            delimiter=delimiter,
            comments=COMMENT_PREFIXES,
            usecols=(0, 1, 2),
            ndmin=2,
            dtype=float,
        )
    except (ValueError, IndexError) as exc:
        raise InvalidInputError(f"{source}: could not parse numeric table: {exc}") from exc

    return measurement_from_columns(
        table[:, 0],
        table[:, 1],
        table[:, 2],
        bin_tolerance=bin_tolerance,
        source=source,
    )


def measurement_from_columns(
    frequency_hz: np.ndarray | Sequence[float],
    real: np.ndarray | Sequence[float],
    imag: np.ndarray | Sequence[float],
    *,
    bin_tolerance: float = DEFAULT_BIN_TOLERANCE,
    source: Path | None = None,
) -> S21Measurement:
    """Build an :class:`S21Measurement` from already-parsed columns."""

    frequency = np.asarray(frequency_hz, dtype=float).reshape(-1)
    real_part = np.asarray(real, dtype=float).reshape(-1)
    imag_part = np.asarray(imag, dtype=float).reshape(-1)
    if not (frequency.size == real_part.size == imag_part.size):
        raise InvalidInputError("frequency, real and imag columns must have the same length.")
    if frequency.size < 2:
        raise InvalidInputError(
            f"at least 2 rows are needed to derive the frequency step, got {frequency.size}."
        )
    if not np.all(np.isfinite(frequency)):
        raise InvalidInputError("frequency column contains non-finite values.")

    delta_f = float(frequency[1] - frequency[0])
    if not delta_f > 0.0:
        raise InvalidInputError(
            f"frequency step must be positive, got {delta_f!r}; frequencies must increase."
        )

    bins = _bin_indices(frequency, delta_f, tolerance=bin_tolerance)
    spectrum = real_part + 1j * imag_part
    return S21Measurement(
        frequency_hz=frozen_copy(frequency),
        spectrum=frozen_copy(spectrum, dtype=np.complex128),
        delta_f_hz=delta_f,
        f1=int(bins[0]),
        f2=int(bins[-1]),
        bin_index=frozen_copy(bins),
        source=source,
    )


def _bin_indices(frequency: np.ndarray, delta_f: float, *, tolerance: float) -> np.ndarray:
    """Round ``frequency / delta_f`` to integers, rejecting off-grid points."""

    ratio = frequency / delta_f
    rounded = np.round(ratio)
    offset = np.abs(ratio - rounded)
    off_grid = np.flatnonzero(offset > tolerance)
    if off_grid.size:
        first = int(off_grid[0])
        raise InvalidInputError(
            f"frequency {frequency[first]!r} is {offset[first]:.3g} bins away from the "
            f"grid implied by delta_f={delta_f!r}; spacing is not uniform."
        )
    bins = rounded.astype(np.int64)
    if np.any(bins < 0):
        raise InvalidInputError("frequency bins must be non-negative.")

    expected = bins[0] + np.arange(bins.size, dtype=np.int64)
    mismatch = np.flatnonzero(bins != expected)
    if mismatch.size:
        first = int(mismatch[0])
        raise InvalidInputError(
            f"row {first} maps to bin {int(bins[first])}, expected {int(expected[first])}; "
            "spacing is not uniform."
        )
    return bins


def _data_lines(lines: Sequence[str], *, delimiter: str | None) -> list[str]:
    """Drop blank lines, comments and leading lines with no numeric token."""

    kept: list[str] = []
    for line in lines:
        stripped = line.strip()
        if not stripped or stripped.startswith(COMMENT_PREFIXES):
            continue
        if not kept and _is_header(stripped, delimiter):
            continue
        kept.append(stripped)
    return kept


def _is_header(line: str, delimiter: str | None) -> bool:
    return not any(_is_number(token) for token in _split(line, delimiter))


def _is_number(token: str) -> bool:
    try:
        float(token)
    except ValueError:
        return False
    return True


def _split(line: str, delimiter: str | None) -> list[str]:
    return [token for token in line.split(delimiter) if token.strip()]


__all__ = [
    "COMMENT_PREFIXES",
    "DEFAULT_BIN_TOLERANCE",
    "S21Measurement",
    "load_s21_measurement",
    "measurement_from_columns",
]
