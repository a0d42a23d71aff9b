"""Unit tests for plotting.axes_plots."""

from __future__ import annotations

import numpy as np
import pytest

matplotlib = pytest.importorskip("matplotlib")
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from vna_timedomain.plotting.axes_plots import (
    plot_complex_trajectory,
    plot_spectrum_component,
    plot_time_response,
)


def test_plot_complex_trajectory_plots_imag_against_real() -> None:
    figure, axis = plt.subplots()
    spectrum = np.array([1.0 + 0.5j, 0.0 + 1.0j, -1.0 - 0.5j])

    line = plot_complex_trajectory(axis, spectrum, label="s21")

    assert np.allclose(line.get_xdata(), spectrum.real)
    assert np.allclose(line.get_ydata(), spectrum.imag)
    assert axis.get_xlabel() == "Re[S21]"
    assert line.get_label() == "s21"
    plt.close(figure)


def test_plot_spectrum_component_phase_against_frequency() -> None:
    figure, axis = plt.subplots()
    frequency = np.array([1.0, 2.0, 3.0])
    spectrum = np.array([1.0 + 1.0j, -2.0 + 0.0j, 0.0 - 1.0j])

    line = plot_spectrum_component(axis, frequency, spectrum, component="phase")

    assert np.allclose(line.get_ydata(), np.angle(spectrum))
    assert axis.get_xlabel() == "Frequency (Hz)"
    assert axis.get_ylabel() == "Phase (rad)"
    plt.close(figure)


def test_plot_spectrum_component_uses_bin_axis_without_frequency() -> None:
    figure, axis = plt.subplots()

    line = plot_spectrum_component(axis, None, np.array([1.0, 2.0, 3.0, 4.0]), component="real")

    assert np.allclose(line.get_xdata(), [0.0, 1.0, 2.0, 3.0])
    assert axis.get_xlabel() == "Bin"
    plt.close(figure)


def test_plot_spectrum_component_magnitude_db() -> None:
    figure, axis = plt.subplots()

    line = plot_spectrum_component(
        axis, None, np.array([1.0, 10.0j, 0.0]), component="magnitude_db", floor_db=-100.0
    )

    assert np.allclose(line.get_ydata(), [0.0, 20.0, -100.0])
    plt.close(figure)


def test_plot_spectrum_component_rejects_unknown_component() -> None:
    figure, axis = plt.subplots()
    with pytest.raises(ValueError, match="Unsupported component"):
        plot_spectrum_component(axis, None, np.ones(3), component="group_delay")  # type: ignore[arg-type]
    plt.close(figure)


def test_plot_spectrum_component_requires_matching_lengths() -> None:
    figure, axis = plt.subplots()
    with pytest.raises(ValueError, match="same length"):
        plot_spectrum_component(axis, np.arange(2.0), np.ones(3))
    plt.close(figure)


def test_plot_time_response_plots_real_part_and_marks_peak() -> None:
    figure, axis = plt.subplots()
    time = np.linspace(0.0, 1.0, 5)
    signal = np.array([0.1, -0.9, 0.3, 0.0, 0.2]) + 1e-15j

    line = plot_time_response(axis, time, signal, mark_peak=True)

    assert np.allclose(line.get_ydata(), signal.real)
    assert len(axis.get_lines()) == 2
    assert axis.get_xlabel() == "Time (s)"
    plt.close(figure)
