import pytest

from practools.tutorial.chapter01 import taxi


@pytest.mark.parametrize(
    ("distance", "want"),
    [
        ("1700", (500, 600)),
        ("34500", (13700, 16440)),
        ("8900m", (3400, 4080)),
        ("1500m", (500, 600)),
        ("1.8km", (600, 720)),
        ("56km", (22300, 26760)),
        ("360000cm", (1300, 1560)),
        ("9240000cm", (36800, 44160)),
    ],
)
def test_taxi(distance, want):
    assert taxi(distance) == want


def test_taxi_invalid_distance():
    with pytest.raises(ValueError):
        taxi("far")