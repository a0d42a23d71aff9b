"""Unit tests for analysis.diagnostics."""

from __future__ import annotations

import numpy as np
import pytest

from vna_timedomain.analysis.diagnostics import impulse_summary, magnitude_phase, measurement_table
from vna_timedomain.analysis.synthesis import synthesize_hermitian_spectrum
from vna_timedomain.analysis.transform import impulse_response
from vna_timedomain.dataio.measurement import measurement_from_columns


def test_magnitude_phase_uses_four_quadrant_arctangent() -> None:
    spectrum = np.array([1.0, 1.0j, -1.0, -1.0j, 0.0, -2.0 - 2.0j])

    magnitude, phase = magnitude_phase(spectrum)

    assert np.allclose(magnitude, [1.0, 1.0, 1.0, 1.0, 0.0, 2.0 * np.sqrt(2.0)])
    assert np.allclose(phase, [0.0, np.pi / 2, np.pi, -np.pi / 2, 0.0, -3.0 * np.pi / 4])
    assert np.all(np.isfinite(phase))


def test_measurement_table_columns_and_values() -> None:
    measurement = measurement_from_columns([1.0, 2.0, 3.0], [1.0, 0.0, -0.1], [0.0, 1.0, 0.0])

    table = measurement_table(measurement)

    assert list(table.columns) == [
        "frequency_hz",
        "bin_index",
        "real",
        "imag",
        "magnitude",
        "magnitude_db",
        "phase_rad",
    ]
    assert list(table["bin_index"]) == [1, 2, 3]
    assert np.allclose(table["magnitude_db"], [0.0, 0.0, -20.0])
    assert table["phase_rad"].iloc[2] == pytest.approx(np.pi)


def test_impulse_summary_locates_peak_of_cosine() -> None:
    measured = np.array([0.0, 0.0, 1.0, 0.0], dtype=complex)
    spectrum = synthesize_hermitian_spectrum(measured, f1=1, f2=4, delta_f_hz=2.0)

    summary = impulse_summary(impulse_response(spectrum))

    assert summary["n_samples"] == 17
    assert summary["peak_index"] == 0
    assert summary["peak_time_s"] == 0.0
    assert summary["peak_amplitude"] == pytest.approx(2.0 / 17.0)
    assert summary["sample_interval_s"] == pytest.approx(1.0 / 32.0)
    assert summary["energy"] == pytest.approx(2.0 / 17.0)
