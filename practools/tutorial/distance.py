"""Parsing of distance strings such as ``"1.85km"`` into metres."""

from __future__ import annotations

import re
import struct

_NUMBER = re.compile(r"^[0-9.]+")
_UNIT = re.compile(r"\D+$", re.ASCII)
_SCALES = {"km": 1000.0, "cm": 0.01, "mm": 0.001}


def _float32(value: float) -> float:
    """Round ``value`` to single precision."""
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError as exc:
        raise ValueError(f"value out of range: {value!r}") from exc


def parse_distance(dist: str) -> int:
    """Convert a distance string to whole metres.

    A bare number is taken as metres; the units ``km``, ``cm`` and ``mm`` are
    recognised, anything else counts as metres. Raises ValueError if the string
    does not start with a number.
    """
    match = _NUMBER.match(dist)
    number = match.group() if match else ""
    try:
        value = _float32(float(number))
    except ValueError:
        raise ValueError(f"invalid distance: {dist!r}") from None
    unit = _UNIT.search(dist)
    scale = _SCALES.get(unit.group() if unit else "", 1.0)
    return int(_float32(value * _float32(scale)))