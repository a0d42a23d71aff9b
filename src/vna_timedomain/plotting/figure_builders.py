"""OOP figure builders that use GridSpec for diagnostic layouts."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from matplotlib import pyplot as plt
from matplotlib.axes import Axes
from matplotlib.figure import Figure

from vna_timedomain.analysis.synthesis import HermitianSpectrum
from vna_timedomain.plotting.axes_plots import (
    plot_complex_trajectory,
    plot_spectrum_component,
    plot_time_response,
)
from vna_timedomain.plotting.style import FIGURE_SIZES


@dataclass
class MeasuredSpectrumFigureBuilder:
    """Raw sweep as a complex trajectory plus magnitude and phase."""

    figsize: tuple[float, float] = FIGURE_SIZES["measured"]

    def build(
        self,
        frequency_hz: np.ndarray,
        spectrum: np.ndarray,
        *,
        title: str = "Measured S21",
    ) -> tuple[Figure, dict[str, Axes]]:
        figure = plt.figure(figsize=self.figsize)
        grid = figure.add_gridspec(1, 3, wspace=0.35)
        ax_trajectory = figure.add_subplot(grid[0, 0])
        ax_magnitude = figure.add_subplot(grid[0, 1])
        ax_phase = figure.add_subplot(grid[0, 2], sharex=ax_magnitude)

        plot_complex_trajectory(ax_trajectory, spectrum, title="S21")
        plot_spectrum_component(
            ax_magnitude, frequency_hz, spectrum, component="magnitude", title="|S21|"
        )
        plot_spectrum_component(
            ax_phase, frequency_hz, spectrum, component="phase", title="S21 phase"
        )
        figure.suptitle(title)
        return figure, {
            "trajectory": ax_trajectory,
            "magnitude": ax_magnitude,
            "phase": ax_phase,
        }


@dataclass
class SpectrumConstructionFigureBuilder:
    """Stages of the Hermitian spectrum: imported, left half, right half, full."""

    figsize: tuple[float, float] = FIGURE_SIZES["construction"]
    component: str = "real"

    def build(
        self,
        measured_spectrum: np.ndarray,
        spectrum: HermitianSpectrum,
        *,
        title: str = "FFT-ordered spectrum construction",
    ) -> tuple[Figure, dict[str, Axes]]:
        figure = plt.figure(figsize=self.figsize)
        grid = figure.add_gridspec(2, 3, hspace=0.45, wspace=0.3)
        ax_measured = figure.add_subplot(grid[0, 0])
        ax_left = figure.add_subplot(grid[0, 1])
        ax_right = figure.add_subplot(grid[0, 2])
        ax_full = figure.add_subplot(grid[1, :])

        plot_spectrum_component(
            ax_measured, None, measured_spectrum, component=self.component,
            title="Imported sweep",
        )
        plot_spectrum_component(
            ax_left,
            None,
            spectrum.left,
            component=self.component,
            title=f"Left half ({spectrum.half_length} bins)",
        )
        plot_spectrum_component(
            ax_right, None, spectrum.right, component=self.component, title="Right half"
        )
        plot_spectrum_component(
            ax_full,
            spectrum.frequency_axis_hz(),
            spectrum.full,
            component=self.component,
            title=f"Full spectrum (Fs = {spectrum.sample_rate_bins} bins)",
        )
        figure.suptitle(title)
        return figure, {
            "measured": ax_measured,
            "left": ax_left,
            "right": ax_right,
            "full": ax_full,
        }


@dataclass
class TimeResponseFigureBuilder:
    """Impulse response against time."""

    figsize: tuple[float, float] = FIGURE_SIZES["time"]

    def build(
        self,
        time_s: np.ndarray,
        signal: np.ndarray,
        *,
        title: str = "Time-domain response",
        mark_peak: bool = True,
    ) -> tuple[Figure, dict[str, Axes]]:
        figure = plt.figure(figsize=self.figsize)
        ax = figure.add_subplot(1, 1, 1)
        plot_time_response(ax, time_s, signal, mark_peak=mark_peak, title=title)
        return figure, {"main": ax}


__all__ = [
    "MeasuredSpectrumFigureBuilder",
    "SpectrumConstructionFigureBuilder",
    "TimeResponseFigureBuilder",
]
