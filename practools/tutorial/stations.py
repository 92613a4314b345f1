"""Stations of the Yamanote loop line and the distances between them."""

from __future__ import annotations

# Inner-loop order, each station with the metres from the station before it.
_INNER_LOOP: tuple[tuple[str, int], ...] = (
    ("神田", 1300), ("秋葉原", 700), ("御徒町", 1000), ("上野", 600),
    ("鶯谷", 1100), ("日暮里", 1100), ("西日暮里", 500), ("田端", 800),
    ("駒込", 1600), ("巣鴨", 700), ("大塚", 1100), ("池袋", 1800),
    ("目白", 1200), ("高田馬場", 900), ("新大久保", 1400), ("新宿", 1300),
    ("代々木", 700), ("原宿", 1500), ("渋谷", 1200), ("恵比寿", 1600),
    ("目黒", 1500), ("五反田", 1200), ("大崎", 900), ("品川", 2000),
    ("高輪ゲートウェイ", 900), ("田町", 1300), ("浜松町", 1500), ("新橋", 1200),
    ("有楽町", 1100), ("東京", 800),
)

# Outer-loop figures that do not equal the matching inner-loop segment.
_OUTER_OVERRIDES = {"西日暮里": 500}

INNER_STATIONS: tuple[str, ...] = tuple(name for name, _ in _INNER_LOOP)
INNER_DISTANCE: dict[str, int] = dict(_INNER_LOOP)

# The outer loop runs the other way round and also ends at Tokyo.
OUTER_STATIONS: tuple[str, ...] = INNER_STATIONS[-2::-1] + (INNER_STATIONS[-1],)


def _next(stations: tuple[str, ...], current: str) -> str:
    try:
        index = stations.index(current)
    except ValueError:
        return current
    return stations[(index + 1) % len(stations)]


# On the outer loop, the segment ending at a station is the inner-loop segment
# that starts there.
OUTER_DISTANCE: dict[str, int] = {
    name: _OUTER_OVERRIDES.get(name, INNER_DISTANCE[_next(INNER_STATIONS, name)])
    for name in OUTER_STATIONS
}


def inner_next_station(current: str) -> str:
    """The station after ``current`` on the inner loop; unknown names come back unchanged."""
    return _next(INNER_STATIONS, current)


def inner_loop_distance(station: str) -> int:
    """Metres from the previous inner-loop station to ``station``; 0 if unknown."""
    return INNER_DISTANCE.get(station, 0)


def outer_next_station(current: str) -> str:
    """The station after ``current`` on the outer loop; unknown names come back unchanged."""
    return _next(OUTER_STATIONS, current)


def outer_loop_distance(station: str) -> int:
    """Metres from the previous outer-loop station to ``station``; 0 if unknown."""
    return OUTER_DISTANCE.get(station, 0)