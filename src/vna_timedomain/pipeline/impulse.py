"""Straight-line S21 -> impulse-response pipeline and its diagnostic figures."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from matplotlib import pyplot as plt
from matplotlib.figure import Figure

from vna_timedomain.analysis.synthesis import (
    DEFAULT_OVERSAMPLING,
    HermitianSpectrum,
    hermitian_spectrum_from_measurement,
)
from vna_timedomain.analysis.transform import (
    DEFAULT_REALNESS_TOLERANCE,
    FFTBackend,
    ImpulseResponse,
    impulse_response,
)
from vna_timedomain.dataio.measurement import (
    DEFAULT_BIN_TOLERANCE,
    S21Measurement,
    load_s21_measurement,
)
from vna_timedomain.plotting.figure_builders import (
    MeasuredSpectrumFigureBuilder,
    SpectrumConstructionFigureBuilder,
    TimeResponseFigureBuilder,
)
from vna_timedomain.plotting.style import diagnostic_style

DEFAULT_MEASUREMENT_PATH = Path("s21.dat")
DEFAULT_FIGURE_DIR = Path("figures")

FIGURE_FILENAMES: dict[str, str] = {
    "measured": "s21_measured.png",
    "construction": "s21_spectrum_construction.png",
    "time": "s21_time_response.png",
}


@dataclass(frozen=True)
class ImpulseResponseConfig:
    """Tunable parameters for one pipeline run."""

    oversampling: int = DEFAULT_OVERSAMPLING
    bin_tolerance: float = DEFAULT_BIN_TOLERANCE
    realness_tolerance: float = DEFAULT_REALNESS_TOLERANCE
    require_real: bool = False
    fft_backend: FFTBackend = "numpy"
    delimiter: str | None = None


@dataclass(frozen=True)
class ImpulseResponseResult:
    """Every intermediate artifact of one run."""

    measurement: S21Measurement
    spectrum: HermitianSpectrum
    response: ImpulseResponse
    config: ImpulseResponseConfig = field(default_factory=ImpulseResponseConfig)


def run_impulse_pipeline(
    path: str | Path = DEFAULT_MEASUREMENT_PATH,
    *,
    config: ImpulseResponseConfig | None = None,
) -> ImpulseResponseResult:
    """Load a sweep file and transform it into a time-domain response."""

    resolved = config if config is not None else ImpulseResponseConfig()
    measurement = load_s21_measurement(
        path,
        delimiter=resolved.delimiter,
        bin_tolerance=resolved.bin_tolerance,
    )
    return process_measurement(measurement, config=resolved)


def process_measurement(
    measurement: S21Measurement,
    *,
    config: ImpulseResponseConfig | None = None,
) -> ImpulseResponseResult:
    """Synthesize the Hermitian spectrum of *measurement* and inverse-transform it."""

    resolved = config if config is not None else ImpulseResponseConfig()
    spectrum = hermitian_spectrum_from_measurement(
        measurement, oversampling=resolved.oversampling
    )
    response = impulse_response(
        spectrum,
        realness_tolerance=resolved.realness_tolerance,
        require_real=resolved.require_real,
        fft_backend=resolved.fft_backend,
    )
    return ImpulseResponseResult(
        measurement=measurement,
        spectrum=spectrum,
        response=response,
        config=resolved,
    )


def build_diagnostic_figures(result: ImpulseResponseResult) -> dict[str, Figure]:
    """Render the measured, construction and time-response figures."""

    measured_figure, _ = MeasuredSpectrumFigureBuilder().build(
        result.measurement.frequency_hz,
        result.measurement.spectrum,
    )
    construction_figure, _ = SpectrumConstructionFigureBuilder().build(
        result.measurement.spectrum,
        result.spectrum,
    )
    time_figure, _ = TimeResponseFigureBuilder().build(
        result.response.time_s,
        result.response.signal,
    )
    return {
        "measured": measured_figure,
        "construction": construction_figure,
        "time": time_figure,
    }


def write_diagnostic_figures(
    result: ImpulseResponseResult,
    output_dir: str | Path = DEFAULT_FIGURE_DIR,
) -> dict[str, Path]:
    """Render and save the diagnostic figures as PNG files."""

    destination = Path(output_dir)
    destination.mkdir(parents=True, exist_ok=True)

    paths: dict[str, Path] = {}
    with diagnostic_style():
        figures = build_diagnostic_figures(result)
        for key, figure in figures.items():
            path = destination / FIGURE_FILENAMES[key]
            figure.savefig(path)
            plt.close(figure)
            paths[key] = path
    return paths


def show_diagnostic_figures(result: ImpulseResponseResult) -> None:
    """Display the diagnostic figures in interactive windows."""

    with diagnostic_style():
        figures = build_diagnostic_figures(result)
        plt.show()
    for figure in figures.values():
        plt.close(figure)


__all__ = [
    "DEFAULT_FIGURE_DIR",
    "DEFAULT_MEASUREMENT_PATH",
    "FIGURE_FILENAMES",
    "ImpulseResponseConfig",
    "ImpulseResponseResult",
    "build_diagnostic_figures",
    "process_measurement",
    "run_impulse_pipeline",
    "show_diagnostic_figures",
    "write_diagnostic_figures",
]
