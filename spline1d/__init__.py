"""
One-dimensional interpolation through a set of knots.

A `Spline` holds references to knot coordinates `X`, values `Y` and optionally
tangents `M`, and evaluates one of four interpolants at any site `x`:

    - `Degree.STEP`: the value at the knot to the left of `x`,
    - `Degree.LINEAR`: linear interpolation,
    - `Degree.HERMITE`: cubic Hermite interpolation using the tangents `M`,
    - `Degree.CATMULL_ROM`: cubic Hermite interpolation using tangents formed
      from the neighbouring knots.

Outside `[X[0], X[-1]]` the value at the nearest end is returned; there is no
extrapolation.

The interpolation kernels are compiled with `numba`, and may be used directly
from other `numba.njit` functions via `spline1d.interp1d`.
"""
__version__ = "1.0.0"

import importlib as _importlib

from .degree import Degree, parse_degree, STEP, LINEAR, HERMITE, CATMULL
from .hermite import hermite, catmull_tangent, catmull_tangents
from .spline import Spline
from .tools import make_kernel

# List of modules not explicitly imported above
modules = ["interp1d", "linear"]

__all__ = modules + [
    k
    for (k, v) in locals().items()
    if not k.startswith("_") and k != "modules" and k not in modules
]  # all local, public names


def __dir__():
    return __all__


# Lazy load of modules.
def __getattr__(name):
    if name in modules:
        return _importlib.import_module(f"spline1d.{name}")
    else:
        try:
            return globals()[name]
        except KeyError:
            raise AttributeError(f"Module 'spline1d' has no attribute '{name}'")
