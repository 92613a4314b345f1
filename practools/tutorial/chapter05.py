"""List exercises: dropping the middle piece and building a product table."""

from __future__ import annotations

from collections.abc import Sequence


def daruma_drop(daruma: Sequence[int]) -> list[int]:
    """Return ``daruma`` with its middle piece removed.

    With an even count the smaller of the two middle pieces goes (the upper one
    on a tie); lists of fewer than two pieces come back unchanged.
    """
    pieces = list(daruma)
    if len(pieces) < 2:
        return pieces
    mid = len(pieces) // 2
    if len(pieces) % 2 == 0 and pieces[mid - 1] < pieces[mid]:
        drop = mid - 1
    else:
        drop = mid
    return pieces[:drop] + pieces[drop + 1:]


def matrix_multiple(seed: Sequence[int]) -> list[list[int]]:
    """Square table whose cell (i, j) holds ``seed[i] * seed[j]``."""
    return [[row * column for column in seed] for row in seed]