"""Unit tests for analysis.synthesis."""

from __future__ import annotations

import numpy as np
import pytest

from vna_timedomain.analysis.synthesis import (
    hermitian_spectrum_from_measurement,
    synthesize_hermitian_spectrum,
)
from vna_timedomain.dataio.measurement import measurement_from_columns
from vna_timedomain.errors import IndexOutOfRangeError, InvalidInputError

MEASURED = np.array([1.0 + 0.0j, 0.0 + 1.0j, -1.0 + 0.0j])


def test_three_point_sweep_layout() -> None:
    result = synthesize_hermitian_spectrum(MEASURED, f1=1, f2=3)

    assert result.sample_rate_bins == 12
    assert result.oversampling == 4
    assert result.left.size == 7
    assert result.half_length == 7
    assert result.right.size == 6
    assert result.full.size == 13
    assert np.array_equal(result.left, [0, 1, 1j, -1, 0, 0, 0])
    assert np.array_equal(result.right, [0, 0, 0, -1, -1j, 1])
    assert np.array_equal(result.full, np.concatenate([result.left, result.right]))


def test_full_spectrum_is_exactly_hermitian() -> None:
    rng = np.random.default_rng(seed=3)
    measured = rng.normal(size=20) + 1j * rng.normal(size=20)
    result = synthesize_hermitian_spectrum(measured, f1=5, f2=24, oversampling=4)

    fs = result.sample_rate_bins
    assert result.full.size == fs + 1
    for i in range(1, fs // 2 + 1):
        assert result.full[fs + 1 - i] == np.conj(result.full[i])


def test_bins_outside_measured_band_are_exactly_zero() -> None:
    result = synthesize_hermitian_spectrum(MEASURED, f1=1, f2=3, oversampling=6)

    fs = result.sample_rate_bins
    occupied = np.zeros(fs + 1, dtype=bool)
    occupied[1:4] = True
    occupied[fs + 1 - 3:fs + 1 - 1 + 1] = True

    assert np.all(result.full[~occupied] == 0.0)
    assert np.all(result.full[occupied] != 0.0)


def test_measured_band_can_reach_nyquist_bin() -> None:
    result = synthesize_hermitian_spectrum(MEASURED, f1=1, f2=3, oversampling=2)

    assert result.sample_rate_bins == 6
    assert result.left[-1] == -1.0
    assert result.right[0] == -1.0
    assert result.full.size == 7


def test_dc_bin_is_filled_when_sweep_starts_at_zero() -> None:
    result = synthesize_hermitian_spectrum([2.0, 1.0], f1=0, f2=1, oversampling=4)

    assert result.left[0] == 2.0
    assert result.full.size == 5
    assert np.array_equal(result.right, [0, 1])


def test_odd_sampling_rate_is_invalid() -> None:
    with pytest.raises(InvalidInputError, match="is odd"):
        synthesize_hermitian_spectrum(MEASURED, f1=1, f2=3, oversampling=3)


def test_pathological_multiplier_raises_index_out_of_range() -> None:
    measured = np.ones(4, dtype=complex)
    with pytest.raises(IndexOutOfRangeError, match="do not fit"):
        synthesize_hermitian_spectrum(measured, f1=1, f2=4, oversampling=1)


def test_index_out_of_range_is_an_index_error() -> None:
    with pytest.raises(IndexError):
        synthesize_hermitian_spectrum(np.ones(4), f1=1, f2=4, oversampling=1)


def test_sample_count_must_match_bin_range() -> None:
    with pytest.raises(InvalidInputError, match="need 3"):
        synthesize_hermitian_spectrum(MEASURED[:2], f1=1, f2=3)


@pytest.mark.parametrize("oversampling", [0, -2, 2.5, True])
def test_oversampling_must_be_positive_integer(oversampling) -> None:
    with pytest.raises(ValueError, match="oversampling"):
        synthesize_hermitian_spectrum(MEASURED, f1=1, f2=3, oversampling=oversampling)


def test_result_buffers_are_read_only() -> None:
    result = synthesize_hermitian_spectrum(MEASURED, f1=1, f2=3)
    with pytest.raises(ValueError):
        result.full[0] = 1.0


def test_from_measurement_carries_frequency_step() -> None:
    measurement = measurement_from_columns(
        [1.0e6, 2.0e6, 3.0e6], MEASURED.real, MEASURED.imag
    )

    result = hermitian_spectrum_from_measurement(measurement, oversampling=4)
    frequency = result.frequency_axis_hz()

    assert result.delta_f_hz == 1.0e6
    assert frequency.size == 13
    assert frequency[-1] == pytest.approx(12.0e6)
    assert result.left_frequency_hz()[-1] == pytest.approx(6.0e6)
    assert np.array_equal(result.left[1:4], MEASURED)
