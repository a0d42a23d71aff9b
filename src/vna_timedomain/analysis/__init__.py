from vna_timedomain.analysis.diagnostics import (
    impulse_summary,
    magnitude_phase,
    measurement_table,
)
from vna_timedomain.analysis.synthesis import (
    DEFAULT_OVERSAMPLING,
    HermitianSpectrum,
    hermitian_spectrum_from_measurement,
    synthesize_hermitian_spectrum,
)
from vna_timedomain.analysis.transform import (
    ImpulseResponse,
    imaginary_residual,
    impulse_response,
    inverse_transform,
    time_axis,
)

__all__ = [
    "DEFAULT_OVERSAMPLING",
    "HermitianSpectrum",
    "ImpulseResponse",
    "hermitian_spectrum_from_measurement",
    "imaginary_residual",
    "impulse_response",
    "impulse_summary",
    "inverse_transform",
    "magnitude_phase",
    "measurement_table",
    "synthesize_hermitian_spectrum",
    "time_axis",
]
