"""Time-domain impulse response from VNA S21 sweeps."""

from vna_timedomain.errors import (
    IndexOutOfRangeError,
    InvalidInputError,
    NumericError,
    TimeDomainError,
)

__version__ = "0.1.0"

__all__ = [
    "IndexOutOfRangeError",
    "InvalidInputError",
    "NumericError",
    "TimeDomainError",
    "__version__",
]
