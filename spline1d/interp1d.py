"""Core functions to evaluate a spline with an arbitrary interpolation kernel
(such as in `.linear` or `.hermite`) in one dimension.

The evaluation site is located within the independent data by a circular scan
that begins at a remembered segment (the "cursor") and wraps around once.  When
successive evaluation sites are near one another, as when sweeping through `x`
in increasing order, the scan ends after a step or two.

The functions in this module are not intended to be called directly (though they
can be).  Rather, they are used by `spline1d.spline.Spline`, which selects the
kernel `f` via `spline1d.tools.make_kernel`.
"""

import numpy as np
import numba as nb


@nb.njit
def _value_1(f, x, X, Y, M, i0):
    """
    Apply a given kernel of interpolation once.

    Parameters
    ----------
    f : function

        The "kernel" of interpolation: A function that performs a single
        interpolation within a known segment.
        The parameters to `f` are

        `x : float`

        `X : ndarray(float, 1d)`

        `Y : ndarray(float, 1d)`

        `M : ndarray(float, 1d)`

        `i : int`

        and the return value of `f` is

        `y : float`

        which is `Y` as a function of `X` interpolated to the value `x`.
        This function will only be called when `X[i] < x < X[i+1]`.

    x : float
        Evaluation site

    X : ndarray(float, 1d)
        The independent data.  Should be non-decreasing; this is not checked.

    Y : ndarray(float, 1d)
        The dependent data, with the same length as `X`.

    M : ndarray(float, 1d)
        Tangents, passed through to `f`.  May be empty if `f` does not use it.

    i0 : int
        Segment at which to begin searching.

    Returns
    -------
    y : float
        The value of `Y` interpolated to `X` at `x`.
        `Y[0]` if `x < X[0]` and `Y[-1]` if `X[-1] < x`.
        NaN if `x` is NaN, or if no segment contains `x`.

    i : int
        Index of the segment (or knot, if `x` equals a knot) that was used.
        Equal to `i0` if `x` is NaN or out of range, and -1 if no segment
        contains `x`, which can only happen if `X` is not sorted.
    """
    n = len(X)

    if np.isnan(x):
        return np.nan, i0

    # Clamp, without extrapolating
    if x < X[0]:
        return float(Y[0]), i0
    if X[n - 1] < x:
        return float(Y[n - 1]), i0

    for j in range(n):
        i = (i0 + j) % n
        if X[i] == x:
            return float(Y[i]), i
        elif i < n - 1 and X[i] < x and x < X[i + 1]:
            return float(f(x, X, Y, M, i)), i

    return np.nan, -1


@nb.njit
def _values(f, x, X, Y, M, i0):
    """
    As _value_1 but applies the interpolation kernel at many evaluation sites.

    Parameters
    ----------
    f, X, Y, M, i0 : see `_value_1`

    x : ndarray(float, 1d)
        Evaluation sites.  They are visited in order, and the segment found for
        one site is where the search starts for the next.

    Returns
    -------
    y : ndarray(float, 1d)
        `y[j]` is `Y` interpolated to `X` at `x[j]`.

    i : int
        The segment used for the last evaluation site.

    bad : int
        -1 if all went well.  Otherwise, the index into `x` of the first site
        for which no segment could be found, and evaluation stopped there.
    """
    y = np.empty(x.size, dtype=np.float64)
    i = i0
    for j in range(x.size):
        y[j], k = _value_1(f, x[j], X, Y, M, i)
        if k < 0:
            return y, i, j
        i = k
    return y, i, -1
