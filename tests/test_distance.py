import pytest

from practools.tutorial.distance import parse_distance


@pytest.mark.parametrize(
    ("dist", "want"),
    [
        ("1.55km", 1550),
        ("2500m", 2500),
        ("4800cm", 48),
        ("790000mm", 790),
        ("4739", 4739),
    ],
)
def test_parse_distance(dist, want):
    assert parse_distance(dist) == want


def test_unknown_unit_counts_as_metres():
    assert parse_distance("120ft") == 120


def test_large_centimetre_value():
    assert parse_distance("9240000cm") == 92400


@pytest.mark.parametrize("dist", ["km", "", ".", "1.2.3m"])
def test_invalid_distance_raises(dist):
    with pytest.raises(ValueError):
        parse_distance(dist)