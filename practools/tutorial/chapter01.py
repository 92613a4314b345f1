"""Taxi fares for a given distance."""

from __future__ import annotations

from practools.tutorial.distance import parse_distance

FIRST_PRICE = 500
PER_PRICE = 100
FIRST_RIDE_DISTANCE = 1500
PER_DISTANCE = 250
LATE_NIGHT_RATE = 1.2


def taxi(distance: str) -> tuple[int, int]:
    """Return the normal and the late-night fare for a distance string."""
    metres = parse_distance(distance)
    if metres <= FIRST_RIDE_DISTANCE:
        normal = FIRST_PRICE
    else:
        normal = FIRST_PRICE + PER_PRICE * ((metres - FIRST_RIDE_DISTANCE) // PER_DISTANCE)
    return normal, int(normal * LATE_NIGHT_RATE)