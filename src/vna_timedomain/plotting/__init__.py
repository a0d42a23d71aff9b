"""plotting subpackage for diagnostic figures."""

from vna_timedomain.plotting.axes_plots import *  # noqa: F401,F403
from vna_timedomain.plotting.figure_builders import *  # noqa: F401,F403
from vna_timedomain.plotting.style import *  # noqa: F401,F403

from vna_timedomain.plotting.axes_plots import __all__ as _axes_all
from vna_timedomain.plotting.figure_builders import __all__ as _builders_all
from vna_timedomain.plotting.style import __all__ as _style_all

__all__ = sorted({*_axes_all, *_builders_all, *_style_all})
