"""Kernels for step (zero-order hold) and linear interpolation"""
import numba as nb


@nb.njit
def _step(x, X, Y, M, i):
    """
    The "kernel" of step interpolation: hold the value at the left knot.

    Parameters
    ----------
    x : float
        The evaluation site

    X : ndarray(float, 1d)
        The independent data.

    Y : ndarray(float, 1d)
        The dependent data.

    M : ndarray(float, 1d)
        Tangents at each knot.  Unused; present so all kernels share a signature.

    i : int
        The segment of `X` that contains `x`, such that `X[i] < x < X[i+1]`.

        This is assumed true; it is not checked.
        (This function will not be called if `x <= X[0]` or `X[-1] <= x`, or if
        `x` equals any knot.)

    Returns
    -------
    y : float
        The value of `Y` interpolated to `X` at `x`.
    """
    return Y[i]


@nb.njit
def _linterp(x, X, Y, M, i):
    """
    The "kernel" of linear interpolation.

    Inputs and outputs analogous to `_step`.
    """
    if X[i] == X[i + 1]:
        # zero-width segment
        return Y[i]
    return Y[i] + (Y[i + 1] - Y[i]) * (x - X[i]) / (X[i + 1] - X[i])
