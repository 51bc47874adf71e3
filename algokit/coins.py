"""Coin change and rod cutting problems."""

from __future__ import annotations

from collections.abc import Iterable

__all__ = ["min_coins", "count_change_ways", "max_cuts"]


def _checked_denominations(denominations: Iterable[int]) -> list[int]:
    values = list(denominations)
    if any(value <= 0 for value in values):
        raise ValueError("denominations must be positive")
    return values


def _checked_target(target: int) -> None:
    if target < 0:
        raise ValueError("target must not be negative")


def min_coins(denominations: Iterable[int], target: int) -> int | None:
    """Return the fewest coins that make ``target``, or None if it cannot be made.

    Each denomination may be used any number of times.
    """
    _checked_target(target)
    fewest: list[int | None] = [0] + [None] * target
    for denom in _checked_denominations(denominations):
        for amount in range(denom, target + 1):
            rest = fewest[amount - denom]
            if rest is not None and (fewest[amount] is None or rest + 1 < fewest[amount]):
                fewest[amount] = rest + 1
    return fewest[target]


def count_change_ways(denominations: Iterable[int], target: int) -> int:
    """Return the number of coin combinations that make ``target``.

    Combinations differing only in order count once; each denomination may
    be used any number of times.
    """
    _checked_target(target)
    ways = [1] + [0] * target
    for denom in _checked_denominations(denominations):
        for amount in range(denom, target + 1):
            ways[amount] += ways[amount - denom]
    return ways[target]


def max_cuts(length: int, x: int, y: int, z: int) -> int:
    """Return the most pieces of length ``x``, ``y`` or ``z`` that ``length`` splits into.

    The pieces must use the whole length exactly; 0 is returned when that is
    impossible.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    pieces = _checked_denominations((x, y, z))
    most: list[int | None] = [0] + [None] * length
    for amount in range(1, length + 1):
        options = [
            most[amount - piece]
            for piece in pieces
            if piece <= amount and most[amount - piece] is not None
        ]
        if options:
            most[amount] = max(options) + 1
    return most[length] or 0