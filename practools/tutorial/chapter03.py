"""Ticket fares from Tokyo station around the loop line."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Callable

from practools.tutorial.stations import (
    INNER_STATIONS,
    inner_loop_distance,
    inner_next_station,
    outer_loop_distance,
    outer_next_station,
)

ORIGIN = "東京"
_UPPER_BOUNDS = (3999, 6999, 10999, 15999, 20999, 25999, 30999)
_FARES = (140, 160, 170, 200, 270, 350, 420, 490)


def _fare(distance: int) -> int:
    return _FARES[bisect_left(_UPPER_BOUNDS, distance)]


def _distance_from_origin(
    station: str,
    next_station: Callable[[str], str],
    loop_distance: Callable[[str], int],
) -> int:
    if station not in INNER_STATIONS:
        raise ValueError(f"unknown station: {station!r}")
    current, distance = ORIGIN, 0
    while True:
        current = next_station(current)
        distance += loop_distance(current)
        if current == station:
            return distance


def inner_charge_from_tokyo(station: str) -> int:
    """Fare from Tokyo to ``station`` along the inner loop; 0 for Tokyo itself."""
    if station == ORIGIN:
        return 0
    return _fare(_distance_from_origin(station, inner_next_station, inner_loop_distance))


def outer_charge_from_tokyo(station: str) -> int:
    """Fare from Tokyo to ``station`` along the outer loop; 0 for Tokyo itself."""
    if station == ORIGIN:
        return 0
    return _fare(_distance_from_origin(station, outer_next_station, outer_loop_distance))