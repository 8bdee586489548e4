"""Kernels for cubic Hermite and Catmull-Rom interpolation"""
import numpy as np
import numba as nb


@nb.njit
def hermite_00(t):
    return 2 * t**3 - 3 * t**2 + 1


@nb.njit
def hermite_10(t):
    return t**3 - 2 * t**2 + t


@nb.njit
def hermite_01(t):
    return 3 * t**2 - 2 * t**3


@nb.njit
def hermite_11(t):
    return t**3 - t**2


@nb.njit
def hermite(t, p0, p1, m0, m1, x0, x1):
    """
    Evaluate a cubic Hermite polynomial on one segment.

    Parameters
    ----------
    t : float
        Normalized position in the segment, `0 <= t <= 1`.

    p0, p1 : float
        Values at the left and right ends of the segment.

    m0, m1 : float
        Tangents (slopes with respect to `x`) at the left and right ends.

    x0, x1 : float
        Coordinates of the left and right ends.  Only the width `x1 - x0` is
        used, to scale the tangents to the normalized coordinate `t`.

    Returns
    -------
    y : float
        The cubic evaluated at `t`.  Gives `p0` at `t = 0` and `p1` at `t = 1`.
    """
    h = x1 - x0
    return (
        hermite_00(t) * p0
        + hermite_10(t) * h * m0
        + hermite_01(t) * p1
        + hermite_11(t) * h * m1
    )


@nb.njit
def _hermite(x, X, Y, M, i):
    """
    The "kernel" of cubic Hermite interpolation with tangents `M` given.

    Inputs and outputs analogous to `spline1d.linear._step`, except `M` is used
    and must have the same length as `X`.
    """
    t = (x - X[i]) / (X[i + 1] - X[i])
    return hermite(t, Y[i], Y[i + 1], M[i], M[i + 1], X[i], X[i + 1])


@nb.njit
def catmull_tangent(X, Y, i):
    """
    Catmull-Rom tangent at an interior knot.

    Parameters
    ----------
    X, Y : ndarray(float, 1d)
        Independent and dependent data.

    i : int
        Index of the knot, `1 <= i <= len(X) - 2`.  Not checked.

    Returns
    -------
    m : float
        Slope between the two neighbours of knot `i`, or 0 if the neighbours
        share the same `X`.
    """
    if X[i + 1] == X[i - 1]:
        return 0.0
    return (Y[i + 1] - Y[i - 1]) / (X[i + 1] - X[i - 1])


@nb.njit
def catmull_tangents(X, Y):
    """Catmull-Rom tangents at every knot; the first and last are 0."""
    n = len(X)
    M = np.zeros(n, dtype=np.float64)
    for i in range(1, n - 1):
        M[i] = catmull_tangent(X, Y, i)
    return M


@nb.njit
def _catmull(x, X, Y, M, i):
    """
    The "kernel" of Catmull-Rom interpolation.

    Inputs and outputs analogous to `spline1d.linear._step`.  `M` is unused:
    tangents come from `catmull_tangent`.

    A tangent cannot be formed at the first or last knot, so in the first
    segment this returns `Y[1]` and in the last segment `Y[-2]`, without
    interpolating.
    """
    n = len(X)
    if i == 0:
        return Y[1]
    elif i == n - 2:
        return Y[n - 2]

    t = (x - X[i]) / (X[i + 1] - X[i])
    m0 = catmull_tangent(X, Y, i)
    m1 = catmull_tangent(X, Y, i + 1)
    return hermite(t, Y[i], Y[i + 1], m0, m1, X[i], X[i + 1])
