"""Input validation helpers shared across the package."""

from __future__ import annotations

import numpy as np


def as_1d_array(values: np.ndarray, name: str, *, dtype: np.dtype | None = None) -> np.ndarray:
    """Return a validated non-empty 1D NumPy array."""

    array = np.asarray(values, dtype=dtype)
    if array.ndim != 1:
        raise ValueError(f"{name} must be a 1D array.")
    if array.size == 0:
        raise ValueError(f"{name} cannot be empty.")
    return array


def require_same_length(
    left: np.ndarray,
    right: np.ndarray,
    left_name: str,
    right_name: str,
) -> None:
    if left.size != right.size:
        raise ValueError(f"{left_name} and {right_name} must have the same length.")


def frozen_copy(values: np.ndarray, *, dtype: np.dtype | None = None) -> np.ndarray:
    """Return a contiguous copy of ``values`` with the write flag cleared."""

    array = np.array(values, dtype=dtype, copy=True)
    array.setflags(write=False)
    return array


__all__ = ["as_1d_array", "frozen_copy", "require_same_length"]
