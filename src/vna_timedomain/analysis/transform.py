"""Inverse DFT of a Hermitian spectrum into a time-domain impulse response."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Literal

import numpy as np
import scipy.fft

from vna_timedomain.analysis.synthesis import HermitianSpectrum
from vna_timedomain.errors import NumericError
from vna_timedomain.utils.validation import as_1d_array, frozen_copy

FFTBackend = Literal["numpy", "scipy"]
DEFAULT_REALNESS_TOLERANCE = 1e-9


@dataclass(frozen=True)
class ImpulseResponse:
    """Time samples of the inverse-transformed spectrum."""

    time_s: np.ndarray
    signal: np.ndarray
    raw: np.ndarray
    max_imaginary: float
    relative_imaginary: float

    @property
    def n_samples(self) -> int:
        return int(self.signal.size)

    @property
    def sample_interval_s(self) -> float:
        if self.time_s.size < 2:
            return 0.0
        return float(self.time_s[1] - self.time_s[0])

    def is_real(self, tolerance: float = DEFAULT_REALNESS_TOLERANCE) -> bool:
        return self.relative_imaginary <= tolerance


def inverse_transform(
    full_spectrum: np.ndarray | Sequence[complex],
    *,
    fft_backend: FFTBackend = "numpy",
) -> np.ndarray:
    """Return ``x[n] = (1/N) sum_k X[k] exp(2j*pi*k*n/N)``.

    Raises
    ------
    NumericError
        If the spectrum holds NaN or infinite values.
    ValueError
        If *fft_backend* is not ``"numpy"`` or ``"scipy"``.
    """

    values = as_1d_array(full_spectrum, "full_spectrum", dtype=np.complex128)
    backend = _resolve_fft_backend(fft_backend)

    bad = np.flatnonzero(~np.isfinite(values))
    if bad.size:
        raise NumericError(
            f"spectrum holds {bad.size} non-finite value(s), first at bin {int(bad[0])}."
        )

    if backend == "numpy":
        return np.fft.ifft(values)
    return scipy.fft.ifft(values, workers=-1)


def impulse_response(
    spectrum: HermitianSpectrum,
    *,
    realness_tolerance: float = DEFAULT_REALNESS_TOLERANCE,
    require_real: bool = False,
    fft_backend: FFTBackend = "numpy",
) -> ImpulseResponse:
    """Inverse-transform a :class:`HermitianSpectrum` onto a time axis.

    Sample ``n`` sits at ``n / (Fs * delta_f)``. The imaginary part of the
    transform should vanish for a Hermitian input; its size is recorded on
    the result and, with ``require_real=True``, a relative residual above
    *realness_tolerance* raises :class:`NumericError`.
    """

    if realness_tolerance < 0.0:
        raise ValueError("realness_tolerance must be non-negative.")

    raw = inverse_transform(spectrum.full, fft_backend=fft_backend)
    max_imaginary, relative_imaginary = imaginary_residual(raw)
    if require_real and relative_imaginary > realness_tolerance:
        raise NumericError(
            f"inverse transform is not real: max |imag| = {max_imaginary:.3e} "
            f"({relative_imaginary:.3e} relative, tolerance {realness_tolerance:.1e})."
        )

    time_s = time_axis(raw.size, spectrum.sample_rate_bins, spectrum.delta_f_hz)
    return ImpulseResponse(
        time_s=frozen_copy(time_s),
        signal=frozen_copy(np.real(raw)),
        raw=frozen_copy(raw),
        max_imaginary=max_imaginary,
        relative_imaginary=relative_imaginary,
    )


def time_axis(n_samples: int, sample_rate_bins: int, delta_f_hz: float) -> np.ndarray:
    """Sample times ``n / (Fs * delta_f)`` for ``n = 0 .. n_samples - 1``."""

    if sample_rate_bins <= 0:
        raise ValueError("sample_rate_bins must be positive.")
    if delta_f_hz <= 0.0:
        raise ValueError("delta_f_hz must be positive.")
    return np.arange(n_samples, dtype=float) / (sample_rate_bins * delta_f_hz)


def imaginary_residual(values: np.ndarray) -> tuple[float, float]:
    """Return ``(max |imag|, max |imag| / max |value|)``."""

    magnitude = np.abs(values)
    peak = float(np.max(magnitude)) if magnitude.size else 0.0
    max_imaginary = float(np.max(np.abs(np.imag(values)))) if magnitude.size else 0.0
    if peak == 0.0:
        return max_imaginary, 0.0
    return max_imaginary, max_imaginary / peak


def _resolve_fft_backend(fft_backend: str) -> FFTBackend:
    backend = str(fft_backend).lower()
    if backend not in {"numpy", "scipy"}:
        raise ValueError("fft_backend must be 'numpy' or 'scipy'.")
    return backend  # type: ignore[return-value]


__all__ = [
    "DEFAULT_REALNESS_TOLERANCE",
    "FFTBackend",
    "ImpulseResponse",
    "imaginary_residual",
    "impulse_response",
    "inverse_transform",
    "time_axis",
]
