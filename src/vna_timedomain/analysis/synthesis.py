"""Build a conjugate-symmetric FFT-ordered spectrum from a one-sided sweep."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
import numbers

import numpy as np

from vna_timedomain.dataio.measurement import S21Measurement
from vna_timedomain.errors import IndexOutOfRangeError, InvalidInputError
from vna_timedomain.utils.validation import as_1d_array, frozen_copy

DEFAULT_OVERSAMPLING = 4


@dataclass(frozen=True)
class HermitianSpectrum:
    """Zero-padded one-sided spectrum and its Hermitian extension.

    ``full`` has the layout ``numpy.fft.fft`` would produce for a real
    time signal of length ``sample_rate_bins + 1``: ``left`` holds bins
    ``0 .. Fs/2`` and ``right`` holds the conjugate mirror of bins
    ``Fs/2 .. 1``.
    """

    left: np.ndarray
    right: np.ndarray
    full: np.ndarray
    sample_rate_bins: int
    oversampling: int
    f1: int
    f2: int
    delta_f_hz: float = 1.0

    @property
    def half_length(self) -> int:
        return int(self.left.size)

    def left_frequency_hz(self) -> np.ndarray:
        return np.arange(self.left.size, dtype=float) * self.delta_f_hz

    def frequency_axis_hz(self) -> np.ndarray:
        return np.arange(self.full.size, dtype=float) * self.delta_f_hz


def synthesize_hermitian_spectrum(
    spectrum: np.ndarray | Sequence[complex],
    *,
    f1: int,
    f2: int,
    oversampling: int = DEFAULT_OVERSAMPLING,
    delta_f_hz: float = 1.0,
) -> HermitianSpectrum:
    """Place a measured half-spectrum in a zero buffer and mirror it.

    Parameters
    ----------
    spectrum : array_like
        Complex samples for bins ``f1 .. f2`` in order.
    f1, f2 : int
        First and last measured bin.
    oversampling : int
        Multiplier ``m`` giving the sampling rate ``Fs = m * f2`` in bins.
    delta_f_hz : float
        Frequency step, only used for the axes of the result.

    Returns
    -------
    HermitianSpectrum
        ``left`` (length ``Fs/2 + 1``), ``right`` (length ``Fs/2``) and
        ``full`` (length ``Fs + 1``).

    Raises
    ------
    ValueError
        If *oversampling* is not a positive integer.
    InvalidInputError
        If ``Fs`` is not a positive even number of bins, or the number of
        samples does not match ``f2 - f1 + 1``.
    IndexOutOfRangeError
        If ``f1 .. f2`` does not fit inside ``0 .. Fs/2``.
    """

    values = as_1d_array(spectrum, "spectrum", dtype=np.complex128)
    multiplier = _validate_oversampling(oversampling)
    first, last = int(f1), int(f2)

    sample_rate_bins = multiplier * last
    if sample_rate_bins <= 0:
        raise InvalidInputError(
            f"sampling rate Fs = {multiplier} * {last} must be positive."
        )
    if sample_rate_bins % 2:
        raise InvalidInputError(
            f"sampling rate Fs = {multiplier} * {last} = {sample_rate_bins} bins is odd; "
            "choose an even oversampling multiplier."
        )
    half = sample_rate_bins // 2

    if first < 0 or first > last or last > half:
        raise IndexOutOfRangeError(
            f"measured bins [{first}, {last}] do not fit in half-spectrum [0, {half}]."
        )
    if values.size != last - first + 1:
        raise InvalidInputError(
            f"spectrum has {values.size} samples but bins [{first}, {last}] "
            f"need {last - first + 1}."
        )

    left = np.zeros(half + 1, dtype=np.complex128)
    left[first:last + 1] = values
    right = np.conj(left[1:][::-1])
    full = np.concatenate([left, right])

    return HermitianSpectrum(
        left=frozen_copy(left),
        right=frozen_copy(right),
        full=frozen_copy(full),
        sample_rate_bins=sample_rate_bins,
        oversampling=multiplier,
        f1=first,
        f2=last,
        delta_f_hz=float(delta_f_hz),
    )


def hermitian_spectrum_from_measurement(
    measurement: S21Measurement,
    *,
    oversampling: int = DEFAULT_OVERSAMPLING,
) -> HermitianSpectrum:
    """Run :func:`synthesize_hermitian_spectrum` on a loaded measurement."""

    return synthesize_hermitian_spectrum(
        measurement.spectrum,
        f1=measurement.f1,
        f2=measurement.f2,
        oversampling=oversampling,
        delta_f_hz=measurement.delta_f_hz,
    )


def _validate_oversampling(oversampling: int) -> int:
    if isinstance(oversampling, bool) or not isinstance(oversampling, numbers.Integral):
        raise ValueError(f"oversampling must be an integer, got {oversampling!r}.")
    if oversampling < 1:
        raise ValueError("oversampling must be positive.")
    return int(oversampling)


__all__ = [
    "DEFAULT_OVERSAMPLING",
    "HermitianSpectrum",
    "hermitian_spectrum_from_measurement",
    "synthesize_hermitian_spectrum",
]
