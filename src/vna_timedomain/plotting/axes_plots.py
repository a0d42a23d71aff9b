"""Axes-level plotting functions that receive a Matplotlib Axes object."""

from __future__ import annotations

from typing import Literal

import numpy as np
from matplotlib.axes import Axes
from matplotlib.lines import Line2D

from vna_timedomain.analysis.diagnostics import magnitude_phase
from vna_timedomain.utils.validation import as_1d_array, require_same_length

SpectrumComponent = Literal["real", "imag", "magnitude", "magnitude_db", "phase"]


def plot_complex_trajectory(
    ax: Axes,
    spectrum: np.ndarray,
    *,
    label: str | None = None,
    color: str | None = None,
    linewidth: float = 1.5,
    alpha: float = 1.0,
    equal_aspect: bool = True,
    center_lines: bool = True,
    title: str | None = None,
    xlabel: str = "Re[S21]",
    ylabel: str = "Im[S21]",
    grid: bool = True,
) -> Line2D:
    """Plot a complex sweep as imaginary vs real part."""

    values = as_1d_array(spectrum, "spectrum", dtype=np.complex128)

    line, = ax.plot(
        values.real, values.imag, label=label, color=color, linewidth=linewidth, alpha=alpha
    )
    if center_lines:
        ax.axhline(0.0, color="0.65", linewidth=1.0, linestyle="--")
        ax.axvline(0.0, color="0.65", linewidth=1.0, linestyle="--")
    if equal_aspect:
        ax.set_aspect("equal", adjustable="datalim")
    ax.set_xlabel(xlabel)
    ax.set_ylabel(ylabel)
    if title is not None:
        ax.set_title(title)
    if grid:
        ax.grid(True, alpha=0.25)
    return line


def plot_spectrum_component(
    ax: Axes,
    frequency_hz: np.ndarray | None,
    spectrum: np.ndarray,
    *,
    component: SpectrumComponent = "magnitude",
    floor_db: float = -240.0,
    label: str | None = None,
    color: str | None = None,
    linewidth: float = 1.5,
    alpha: float = 1.0,
    title: str | None = None,
    xlabel: str | None = None,
    ylabel: str | None = None,
    grid: bool = True,
) -> Line2D:
    """Plot one component of a complex spectrum.

    With ``frequency_hz=None`` the x axis is the sample index.
    """

    values = as_1d_array(spectrum, "spectrum", dtype=np.complex128)
    if frequency_hz is None:
        x = np.arange(values.size, dtype=float)
        resolved_xlabel = "Bin"
    else:
        x = as_1d_array(frequency_hz, "frequency_hz", dtype=float)
        require_same_length(x, values, "frequency_hz", "spectrum")
        resolved_xlabel = "Frequency (Hz)"

    if component == "real":
        y = values.real
        resolved_ylabel = "Re[S21]"
    elif component == "imag":
        y = values.imag
        resolved_ylabel = "Im[S21]"
    elif component == "magnitude":
        y, _ = magnitude_phase(values)
        resolved_ylabel = "|S21|"
    elif component == "magnitude_db":
        magnitude, _ = magnitude_phase(values)
        floor_linear = 10.0 ** (floor_db / 20.0)
        y = 20.0 * np.log10(np.maximum(magnitude, floor_linear))
        resolved_ylabel = "|S21| (dB)"
    elif component == "phase":
        _, y = magnitude_phase(values)
        resolved_ylabel = "Phase (rad)"
    else:
        raise ValueError(f"Unsupported component: {component}")

    line, = ax.plot(x, y, label=label, color=color, linewidth=linewidth, alpha=alpha)
    ax.set_xlabel(xlabel if xlabel is not None else resolved_xlabel)
    ax.set_ylabel(ylabel if ylabel is not None else resolved_ylabel)
    if title is not None:
        ax.set_title(title)
    if grid:
        ax.grid(True, alpha=0.25)
    return line


def plot_time_response(
    ax: Axes,
    time_s: np.ndarray,
    signal: np.ndarray,
    *,
    label: str | None = None,
    color: str | None = None,
    linewidth: float = 1.5,
    alpha: float = 1.0,
    mark_peak: bool = False,
    title: str | None = None,
    xlabel: str = "Time (s)",
    ylabel: str = "Normalized amplitude",
    grid: bool = True,
) -> Line2D:
    """Plot a real impulse response against time."""

    time = as_1d_array(time_s, "time_s", dtype=float)
    values = as_1d_array(signal, "signal")
    require_same_length(time, values, "time_s", "signal")
    if np.iscomplexobj(values):
        values = values.real

    line, = ax.plot(time, values, label=label, color=color, linewidth=linewidth, alpha=alpha)
    if mark_peak:
        peak = int(np.argmax(np.abs(values)))
        ax.plot([time[peak]], [values[peak]], marker="o", linestyle="none", color="C3")
    ax.set_xlabel(xlabel)
    ax.set_ylabel(ylabel)
    if title is not None:
        ax.set_title(title)
    if grid:
        ax.grid(True, alpha=0.25)
    return line


__all__ = [
    "plot_complex_trajectory",
    "plot_spectrum_component",
    "plot_time_response",
]
