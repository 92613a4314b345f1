"""Ticket gate: fares between loop-line stations paid by ticket or card."""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol, Union

from practools.tutorial.stations import (
    inner_loop_distance,
    inner_next_station,
    outer_loop_distance,
    outer_next_station,
)

_MAX_STEPS = 30
_LOWER_BOUNDS = (4000, 7000, 11000, 16000, 21000, 26000, 31000)
_TICKET_FARES = (140, 160, 170, 200, 270, 350, 420, 490)
_CARD_FARES = (136, 157, 168, 198, 264, 341, 418, 484)


class FareError(ValueError):
    """No fare can be worked out for a journey."""


class Charger(Protocol):
    """Something that can pay a fare."""

    @property
    def amount(self) -> int: ...

    def use(self, charge: int) -> None: ...


@dataclass(frozen=True)
class Fare:
    """A journey between two stations, travelled the shorter way round."""

    from_station: str
    to_station: str

    def _loop_distance(
        self,
        next_station: Callable[[str], str],
        loop_distance: Callable[[str], int],
    ) -> int:
        if self.from_station == self.to_station:
            return 0
        total = 0
        current = self.from_station
        for _ in range(_MAX_STEPS):
            current = next_station(current)
            total += loop_distance(current)
            if current == self.to_station:
                break
        return total

    def distance(self) -> int:
        """Metres along the shorter of the inner and outer loops."""
        inner = self._loop_distance(inner_next_station, inner_loop_distance)
        outer = self._loop_distance(outer_next_station, outer_loop_distance)
        return min(inner, outer)

    def _charge(self, fares: tuple[int, ...]) -> int:
        dist = self.distance()
        if dist == 0:
            return 0
        return fares[bisect_right(_LOWER_BOUNDS, dist)]

    def ticket_charge(self) -> int:
        """Fare when paying by ticket; 0 if the distance is 0."""
        return self._charge(_TICKET_FARES)

    def card_charge(self) -> int:
        """Fare when paying by card; 0 if the distance is 0."""
        return self._charge(_CARD_FARES)


@dataclass
class Ticket:
    """A paper ticket bought for a given price."""

    price: int
    used: bool = False

    @property
    def amount(self) -> int:
        return self.price

    def use(self, charge: int) -> None:
        """Mark the ticket as used; the charge does not matter."""
        self.used = True


@dataclass
class Card:
    """A prepaid card; points are spent before the balance."""

    balance: int
    point: int

    @property
    def amount(self) -> int:
        return self.balance + self.point

    def use(self, charge: int) -> None:
        """Pay ``charge``, from points first and the rest from the balance."""
        if self.point > charge:
            self.point -= charge
            return
        self.balance -= charge - self.point
        self.point = 0


def kaisatsu(
    from_station: str, to_station: str, charger: Union[Ticket, Card, Charger]
) -> bool:
    """Pass the gate if ``charger`` covers the fare, charging it; False otherwise.

    Raises FareError when no fare can be worked out for the journey.
    """
    fare = Fare(from_station, to_station)
    if isinstance(charger, Ticket):
        charge = fare.ticket_charge()
    elif isinstance(charger, Card):
        charge = fare.card_charge()
    else:
        charge = 0
    if charge == 0:
        raise FareError("could not calculate charge")
    if charge > charger.amount:
        return False
    charger.use(charge)
    return True