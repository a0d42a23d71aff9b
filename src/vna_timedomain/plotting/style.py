"""Matplotlib settings for the S21 diagnostic figures."""

from __future__ import annotations

from collections.abc import Mapping
from contextlib import contextmanager
from typing import Iterator

import matplotlib as mpl

# Sweep axes run in GHz and time axes in ns, so tick labels switch to
# scientific offsets outside 1e-3 .. 1e4.
DIAGNOSTIC_RC_PARAMS: dict[str, object] = {
    "axes.formatter.limits": [-3, 4],
    "axes.formatter.use_mathtext": True,
    "axes.titlesize": 11,
    "axes.labelsize": 10,
    "figure.titlesize": 13,
    "grid.alpha": 0.25,
    "lines.markersize": 5.0,
    "savefig.dpi": 160,
    "savefig.bbox": "tight",
}

FIGURE_SIZES: dict[str, tuple[float, float]] = {
    "measured": (13.0, 4.0),
    "construction": (12.0, 7.0),
    "time": (10.0, 4.5),
}


@contextmanager
def diagnostic_style(*, overrides: Mapping[str, object] | None = None) -> Iterator[None]:
    """Render the diagnostic figures with :data:`DIAGNOSTIC_RC_PARAMS`."""

    params = dict(DIAGNOSTIC_RC_PARAMS)
    if overrides:
        params.update(dict(overrides))
    with mpl.rc_context(params):
        yield


__all__ = ["DIAGNOSTIC_RC_PARAMS", "FIGURE_SIZES", "diagnostic_style"]
