"""Interpolation degrees (kernels) understood by `Spline`"""
import enum


class Degree(enum.IntEnum):
    """Kernel used to interpolate within a segment.

    The integer values are fixed, so that a degree stored as a plain number
    elsewhere keeps its meaning.
    """

    STEP = 0
    LINEAR = 1
    HERMITE = 10
    CATMULL_ROM = 11


STEP = Degree.STEP
LINEAR = Degree.LINEAR
HERMITE = Degree.HERMITE
CATMULL = Degree.CATMULL_ROM

_names = {
    "step": Degree.STEP,
    "linear": Degree.LINEAR,
    "hermite": Degree.HERMITE,
    "catmull": Degree.CATMULL_ROM,
    "catmull_rom": Degree.CATMULL_ROM,
    "catmull-rom": Degree.CATMULL_ROM,
    "catmullrom": Degree.CATMULL_ROM,
}


def parse_degree(degree):
    """Convert `degree` to a `Degree`.

    Parameters
    ----------
    degree : Degree or int or str

        - A `Degree` is returned as is.
        - An int must be one of the values 0, 1, 10, 11.
        - A str is matched case-insensitively against "step", "linear",
          "hermite", "catmull" (also "catmull_rom", "catmull-rom").

    Returns
    -------
    degree : Degree
    """
    if isinstance(degree, Degree):
        return degree

    if isinstance(degree, str):
        try:
            return _names[degree.lower()]
        except KeyError:
            raise ValueError(
                f"Expected `degree` in {tuple(_names)}; got {degree}"
            ) from None

    try:
        return Degree(degree)
    except ValueError:
        raise ValueError(
            f"Expected `degree` in {tuple(int(d) for d in Degree)}; got {degree}"
        ) from None
