from .degree import Degree, parse_degree
from .linear import _step, _linterp
from .hermite import _hermite, _catmull


_kernels = {
    Degree.STEP: _step,
    Degree.LINEAR: _linterp,
    Degree.HERMITE: _hermite,
    Degree.CATMULL_ROM: _catmull,
}


def make_kernel(degree):
    """
    Select the interpolating kernel for a given degree.

    Parameters
    ----------
    degree : Degree or int or str
        Anything accepted by `spline1d.degree.parse_degree`.

    Returns
    -------
    f : function
        A `numba.njit`ed kernel taking `(x, X, Y, M, i)`, suitable as the `f`
        input to `spline1d.interp1d._value_1`.
    """
    return _kernels[parse_degree(degree)]
