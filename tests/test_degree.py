import pytest

from spline1d import Degree, parse_degree, STEP, LINEAR, HERMITE, CATMULL


def test_values():
    assert (int(STEP), int(LINEAR), int(HERMITE), int(CATMULL)) == (0, 1, 10, 11)
    assert CATMULL is Degree.CATMULL_ROM


@pytest.mark.parametrize(
    "given,expected",
    [
        (Degree.HERMITE, Degree.HERMITE),
        (0, Degree.STEP),
        (1, Degree.LINEAR),
        (10, Degree.HERMITE),
        (11, Degree.CATMULL_ROM),
        ("Step", Degree.STEP),
        ("LINEAR", Degree.LINEAR),
        ("catmull", Degree.CATMULL_ROM),
        ("catmull_rom", Degree.CATMULL_ROM),
        ("Catmull-Rom", Degree.CATMULL_ROM),
    ],
)
def test_parse_degree(given, expected):
    assert parse_degree(given) is expected


@pytest.mark.parametrize("given", [2, 3, -1, "cubic", "", None])
def test_parse_degree_bad(given):
    with pytest.raises(ValueError):
        parse_degree(given)
