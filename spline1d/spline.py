"""The `Spline` evaluator: one-dimensional interpolation through a set of knots."""
import warnings
import numpy as np

from .degree import Degree, parse_degree
from .interp1d import _value_1, _values
from .tools import make_kernel


class Spline:
    """Interpolate `Y` as a function of `X`, optionally with tangents `M`.

    Parameters
    ----------
    X : ndarray(float, 1d), optional

        Independent data (the knot coordinates).  Should be non-decreasing;
        this is not checked.

    Y : ndarray(float, 1d), optional

        Dependent data (the knot values), at least as long as `X` is used.

    M : ndarray(float, 1d), optional

        Tangents at each knot, for Hermite interpolation.  If given, the degree
        is set to `Degree.HERMITE` and the `degree` argument is ignored.
        A scalar here is taken as the point count, so `Spline(X, Y, n, degree)`
        works as well as `Spline(X, Y, M, n)`.

    n : int, optional

        Number of knots to use.  Defaults to `len(X)`.

    degree : Degree or int or str, Default `Degree.LINEAR`

        Interpolation kernel; anything accepted by `parse_degree`.

    Notes
    -----
    The arrays are not copied: numpy arrays given here are referenced, and
    changes made to them later are seen by the evaluator.  Keep them alive and
    unchanged while the evaluator is in use.

    The evaluator remembers the segment it last used (the "cursor") and starts
    its next search there.  This changes how fast a value is found, not the
    value, unless `X` holds duplicate coordinates: then an `x` equal to a
    duplicated knot returns the value of whichever copy the search meets first.
    Since every evaluation updates the cursor, one instance should not be
    shared between threads; give each thread its own `copy()`, or lock.

    Examples
    --------
    >>> s = Spline([0.0, 1.0, 2.0], [0.0, 10.0, 0.0])
    >>> s.value(0.5)  # 5.0
    >>> s(np.array([-1.0, 0.25, 1.5, 3.0]))  # [0.0, 2.5, 5.0, 0.0]
    >>> s.set_degree("step")
    >>> s.value(1.9)  # 10.0
    """

    def __init__(self, X=None, Y=None, M=None, n=None, degree=Degree.LINEAR):
        self._X = None
        self._Y = None
        self._M = None
        self._n = 0
        self._prev_point = 0

        if M is not None and np.ndim(M) == 0:
            # Spline(X, Y, n, degree)
            if n is not None:
                degree = n
            M, n = None, M
        self._degree = parse_degree(degree)

        if X is not None:
            if M is None:
                self.set_points(X, Y, n=n)
            else:
                self.set_points(X, Y, M, n)
                self._degree = Degree.HERMITE

    def set_points(self, X, Y, M=None, n=None):
        """Bind new knots, and optionally new tangents.

        Called as `set_points(X, Y, n)` with a scalar third argument, that
        argument is the point count and no tangents are bound.

        Nothing is validated.  The degree is unchanged, even when `M` is given:
        call `set_degree(Degree.HERMITE)` to interpolate with the new tangents.
        If `M` is None, any previously bound tangents are kept.
        """
        if M is not None and np.ndim(M) == 0:
            M, n = None, M
        self._X = np.asarray(X)
        self._Y = np.asarray(Y)
        if M is not None:
            self._M = np.asarray(M)
        self._n = len(self._X) if n is None else int(n)

    def set_degree(self, degree):
        """Select the interpolation kernel for subsequent evaluations."""
        self._degree = parse_degree(degree)
        if self._degree == Degree.HERMITE and self._M is None:
            warnings.warn(
                "Hermite interpolation selected but no tangents are set; "
                "provide them with `set_points(X, Y, M)` before evaluating.",
                RuntimeWarning,
                2,
            )

    def reset_cursor(self):
        """Forget the last used segment; the next search starts from the first."""
        self._prev_point = 0

    def copy(self):
        """A new evaluator on the same arrays and degree, with its own cursor."""
        new = Spline(degree=self._degree)
        new._X, new._Y, new._M, new._n = self._X, self._Y, self._M, self._n
        return new

    @property
    def X(self):
        return self._X

    @property
    def Y(self):
        return self._Y

    @property
    def M(self):
        return self._M

    @property
    def n(self):
        return self._n

    @property
    def degree(self):
        return self._degree

    def value(self, x):
        """Evaluate the spline at a single site `x`.

        Returns `Y[0]` for `x < X[0]` and `Y[n-1]` for `x > X[n-1]`, the knot
        value when `x` equals a knot, and otherwise the interpolant selected by
        `degree`.  A NaN `x` gives NaN.
        """
        X, Y, M = self._bound()
        x = float(x)
        y, i = _value_1(make_kernel(self._degree), x, X, Y, M, self._prev_point)
        if i < 0:
            raise ValueError(
                f"No segment of X contains x = {x}; X must be sorted in "
                "non-decreasing order"
            )
        self._prev_point = i
        return self._dtype.type(y)

    def values(self, x):
        """Evaluate the spline at every element of `x`.

        Sites are visited in flattened order, so sorting `x` makes the search
        fastest.  Returns an array the shape of `x`, or a scalar if `x` is a
        scalar.
        """
        x = np.asarray(x)
        if x.ndim == 0:
            return self.value(x.item())

        X, Y, M = self._bound()
        xflat = np.ascontiguousarray(x, dtype=np.float64).ravel()
        y, i, bad = _values(
            make_kernel(self._degree), xflat, X, Y, M, self._prev_point
        )
        if bad >= 0:
            raise ValueError(
                f"No segment of X contains x = {xflat[bad]}; X must be sorted "
                "in non-decreasing order"
            )
        self._prev_point = i
        return y.astype(self._dtype, copy=False).reshape(x.shape)

    __call__ = values

    def setPoints(self, X, Y, M=None, n=None):
        warnings.warn("Replace with `set_points(X, Y, M, n)`", DeprecationWarning, 2)
        self.set_points(X, Y, M, n)

    def setDegree(self, degree):
        warnings.warn("Replace with `set_degree(degree)`", DeprecationWarning, 2)
        self.set_degree(degree)

    @property
    def _dtype(self):
        # Floating Y keeps its precision; anything else is evaluated as float64
        if np.issubdtype(self._Y.dtype, np.floating):
            return self._Y.dtype
        return np.dtype(np.float64)

    def _bound(self):
        """Views of the first `n` knots (and tangents), checked for evaluation."""
        if self._X is None or self._n < 1:
            raise ValueError("No points are set; call `set_points(X, Y)` first.")

        n = self._n
        X = self._X[:n]
        Y = self._Y[:n]
        if len(X) < n or len(Y) < n:
            raise ValueError(
                f"Expected X and Y to have at least n = {n} elements; "
                f"got {len(self._X)} and {len(self._Y)}"
            )

        if self._degree == Degree.HERMITE:
            if self._M is None or len(self._M) < n:
                raise ValueError(
                    f"Hermite interpolation requires tangents M with at least "
                    f"n = {n} elements"
                )
            M = self._M[:n]
        else:
            M = np.empty(0, dtype=Y.dtype)

        return X, Y, M

    def __repr__(self):
        return f"Spline(n={self._n}, degree={self._degree.name})"
