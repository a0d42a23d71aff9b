"""Reusable pipeline helpers."""

from vna_timedomain.pipeline.impulse import (
    DEFAULT_FIGURE_DIR,
    DEFAULT_MEASUREMENT_PATH,
    ImpulseResponseConfig,
    ImpulseResponseResult,
    build_diagnostic_figures,
    process_measurement,
    run_impulse_pipeline,
    show_diagnostic_figures,
    write_diagnostic_figures,
)

__all__ = [
    "DEFAULT_FIGURE_DIR",
    "DEFAULT_MEASUREMENT_PATH",
    "ImpulseResponseConfig",
    "ImpulseResponseResult",
    "build_diagnostic_figures",
    "process_measurement",
    "run_impulse_pipeline",
    "show_diagnostic_figures",
    "write_diagnostic_figures",
]
