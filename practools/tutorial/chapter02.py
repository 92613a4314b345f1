"""Paying a taxed price with the fewest coins."""

from __future__ import annotations

from typing import NamedTuple

TAX_RATE = 0.1
COINS = (500, 100, 50, 10, 5, 1)


class CoinCount(NamedTuple):
    """How many coins of each denomination make up a sum."""

    count500: int
    count100: int
    count050: int
    count010: int
    count005: int
    count001: int


def minimum_coins(price: int) -> CoinCount:
    """Fewest coins that pay ``price`` with tax added (fractions of a yen dropped)."""
    if price < 0:
        raise ValueError(f"price must not be negative: {price}")
    remaining = int(price * (1 + TAX_RATE))
    counts = []
    for coin in COINS:
        count, remaining = divmod(remaining, coin)
        counts.append(count)
    return CoinCount(*counts)