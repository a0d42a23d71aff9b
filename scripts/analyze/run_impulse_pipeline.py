#!/usr/bin/env python3
"""Turn a VNA S21 sweep into a time-domain impulse response and plot it."""

from __future__ import annotations

import argparse
from pathlib import Path

from vna_timedomain.analysis.diagnostics import impulse_summary
from vna_timedomain.analysis.synthesis import DEFAULT_OVERSAMPLING
from vna_timedomain.analysis.transform import DEFAULT_REALNESS_TOLERANCE
from vna_timedomain.errors import TimeDomainError
from vna_timedomain.pipeline.impulse import (
    DEFAULT_FIGURE_DIR,
    DEFAULT_MEASUREMENT_PATH,
    ImpulseResponseConfig,
    run_impulse_pipeline,
    show_diagnostic_figures,
    write_diagnostic_figures,
)


def _positive_int(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected an integer, got {raw!r}.") from exc
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}.")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "measurement",
        type=Path,
        nargs="?",
        default=DEFAULT_MEASUREMENT_PATH,
        help="Text file with 'frequency real imag' rows (default: s21.dat).",
    )
    parser.add_argument(
        "--oversampling",
        type=_positive_int,
        default=DEFAULT_OVERSAMPLING,
        help="Sampling rate as a multiple of the highest measured bin (default: 4).",
    )
    parser.add_argument(
        "--delimiter",
        default=None,
        help="Column separator (default: any whitespace).",
    )
    parser.add_argument(
        "--fft-backend",
        choices=("numpy", "scipy"),
        default="numpy",
        help="Inverse FFT implementation (default: numpy).",
    )
    parser.add_argument(
        "--require-real",
        action="store_true",
        help="Fail if the inverse transform has a non-negligible imaginary part.",
    )
    parser.add_argument(
        "--realness-tolerance",
        type=float,
        default=DEFAULT_REALNESS_TOLERANCE,
        help="Relative imaginary residual accepted as real (default: 1e-9).",
    )
    parser.add_argument(
        "--figure-dir",
        type=Path,
        default=DEFAULT_FIGURE_DIR,
        help="Output directory for diagnostic PNG figures.",
    )
    parser.add_argument(
        "--show",
        action="store_true",
        help="Open the diagnostic figures in windows instead of saving them.",
    )
    parser.add_argument(
        "--no-figures",
        action="store_true",
        help="Skip the diagnostic figures entirely.",
    )
    return parser


def main() -> None:
    parser = build_parser()
    args = parser.parse_args()

    config = ImpulseResponseConfig(
        oversampling=int(args.oversampling),
        realness_tolerance=float(args.realness_tolerance),
        require_real=bool(args.require_real),
        fft_backend=args.fft_backend,
        delimiter=args.delimiter,
    )
    try:
        result = run_impulse_pipeline(args.measurement, config=config)
    except (TimeDomainError, FileNotFoundError) as exc:
        parser.exit(2, f"error: {exc}\n")

    measurement = result.measurement
    spectrum = result.spectrum
    summary = impulse_summary(result.response)

    print(f"Measurement: {args.measurement}")
    print(f"Sweep points: {measurement.n_points}")
    print(f"Frequency step: {measurement.delta_f_hz:.6g} Hz")
    print(f"Measured bins: [{measurement.f1}, {measurement.f2}]")
    print(f"Sampling rate: {spectrum.sample_rate_bins} bins (x{spectrum.oversampling})")
    print(f"Full spectrum length: {spectrum.full.size}")
    print(f"Time samples: {summary['n_samples']}")
    print(f"Sample interval: {summary['sample_interval_s']:.6g} s")
    print(f"Peak: {summary['peak_amplitude']:.6g} at {summary['peak_time_s']:.6g} s")
    print(
        f"Max |imag|: {summary['max_imaginary']:.3e} "
        f"({summary['relative_imaginary']:.3e} relative)"
    )

    if args.no_figures:
        return
    if args.show:
        show_diagnostic_figures(result)
        return
    paths = write_diagnostic_figures(result, args.figure_dir)
    for key, path in paths.items():
        print(f"Figure ({key}): {path}")


if __name__ == "__main__":
    main()
