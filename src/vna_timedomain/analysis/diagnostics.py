"""Observational quantities derived from the measured spectrum and time response."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
import pandas as pd

from vna_timedomain.analysis.transform import ImpulseResponse
from vna_timedomain.dataio.measurement import S21Measurement
from vna_timedomain.utils.validation import as_1d_array


def magnitude_phase(spectrum: np.ndarray | Sequence[complex]) -> tuple[np.ndarray, np.ndarray]:
    """Return ``(|S|, arg S)`` with the phase from a four-quadrant arctangent."""

    values = as_1d_array(spectrum, "spectrum", dtype=np.complex128)
    magnitude = np.hypot(values.real, values.imag)
    phase = np.arctan2(values.imag, values.real)
    return magnitude, phase


def measurement_table(measurement: S21Measurement) -> pd.DataFrame:
    """Tabulate one sweep with magnitude and phase columns."""

    magnitude, phase = magnitude_phase(measurement.spectrum)
    magnitude_db = 20.0 * np.log10(np.maximum(magnitude, np.finfo(float).tiny))
    return pd.DataFrame(
        {
            "frequency_hz": np.asarray(measurement.frequency_hz, dtype=float),
            "bin_index": np.asarray(measurement.bin_index, dtype=int),
            "real": measurement.spectrum.real,
            "imag": measurement.spectrum.imag,
            "magnitude": magnitude,
            "magnitude_db": magnitude_db,
            "phase_rad": phase,
        }
    )


def impulse_summary(response: ImpulseResponse) -> dict[str, float | int]:
    """Peak location, energy and realness of an impulse response."""

    signal = np.asarray(response.signal, dtype=float)
    peak_index = int(np.argmax(np.abs(signal)))
    dt = response.sample_interval_s
    return {
        "n_samples": int(signal.size),
        "sample_interval_s": dt,
        "duration_s": float(dt * signal.size),
        "peak_index": peak_index,
        "peak_time_s": float(response.time_s[peak_index]),
        "peak_amplitude": float(signal[peak_index]),
        "energy": float(np.sum(signal**2)),
        "max_imaginary": float(response.max_imaginary),
        "relative_imaginary": float(response.relative_imaginary),
    }


__all__ = ["impulse_summary", "magnitude_phase", "measurement_table"]
