"""The simplest exercise: adding two numbers."""

from __future__ import annotations


def add(a: int, b: int) -> int:
    """Return the sum of ``a`` and ``b``."""
    return a + b