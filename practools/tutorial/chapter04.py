"""Passing a ticket gate with a prepaid card that holds a balance and points."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Card:
    """A prepaid card; points are spent before the balance."""

    balance: int
    point: int


def kaisatsu(charge: int, card: Card) -> bool:
    """Charge ``card`` and return True, or leave it untouched and return False if it cannot pay."""
    if card.balance + card.point < charge:
        return False
    if card.point < charge:
        card.balance -= charge - card.point
        card.point = 0
    else:
        card.point -= charge
    return True