import pytest

from practools.tutorial.chapter02 import CoinCount, minimum_coins


@pytest.mark.parametrize(
    ("price", "want"),
    [
        (298, (0, 3, 0, 2, 1, 2)),
        (1907, (4, 0, 1, 4, 1, 2)),
        (87, (0, 0, 1, 4, 1, 0)),
        (15801, (34, 3, 1, 3, 0, 1)),
        (12, (0, 0, 0, 1, 0, 3)),
        (495, (1, 0, 0, 4, 0, 4)),
        (0, (0, 0, 0, 0, 0, 0)),
    ],
)
def test_minimum_coins(price, want):
    assert minimum_coins(price) == CoinCount(*want)


def test_named_fields():
    coins = minimum_coins(298)
    assert coins.count100 == 3
    assert coins.count001 == 2


def test_negative_price_raises():
    with pytest.raises(ValueError):
        minimum_coins(-1)