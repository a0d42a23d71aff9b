"""Exception types raised by the impulse-response pipeline."""

from __future__ import annotations


class TimeDomainError(RuntimeError):
    """Base class for failures that abort a pipeline run."""


class InvalidInputError(TimeDomainError, ValueError):
    """Raised when a measurement is malformed, too short, or not uniformly spaced."""


class IndexOutOfRangeError(TimeDomainError, IndexError):
    """Raised when measured bins do not fit inside the allocated spectrum buffer."""


class NumericError(TimeDomainError, ArithmeticError):
    """Raised when non-finite values reach the inverse transform."""


__all__ = [
    "IndexOutOfRangeError",
    "InvalidInputError",
    "NumericError",
    "TimeDomainError",
]
