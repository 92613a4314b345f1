"""Car-sharing fees for three classes of car."""

from __future__ import annotations

from abc import ABC, abstractmethod

_DAY_MINUTES = 360
_UNIT_MINUTES = 15


class Car(ABC):
    """A car class with a price per started 15 minutes and a cap per 6 hours."""

    @property
    @abstractmethod
    def price_per_15_minutes(self) -> int:
        """Price of each started 15-minute unit."""

    @property
    @abstractmethod
    def max_price(self) -> int:
        """Highest price charged for one 6-hour block."""


class Basic(Car):
    """The cheapest car class."""

    @property
    def price_per_15_minutes(self) -> int:
        return 220

    @property
    def max_price(self) -> int:
        return 4290


class Middle(Car):
    """The middle car class."""

    @property
    def price_per_15_minutes(self) -> int:
        return 330

    @property
    def max_price(self) -> int:
        return 6490


class Premium(Car):
    """The most expensive car class."""

    @property
    def price_per_15_minutes(self) -> int:
        return 440

    @property
    def max_price(self) -> int:
        return 8690


def calc(car: Car, minutes: int) -> int:
    """Fee for using ``car`` for ``minutes``: full 6-hour blocks at the cap, the rest per unit."""
    if minutes < 0:
        raise ValueError(f"minutes must not be negative: {minutes}")
    blocks, rest = divmod(minutes, _DAY_MINUTES)
    rest_price = (rest // _UNIT_MINUTES + 1) * car.price_per_15_minutes
    if rest_price >= car.max_price:
        return car.max_price * (blocks + 1)
    return rest_price + car.max_price * blocks