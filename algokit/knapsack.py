"""Solutions to the 0/1 knapsack problem."""

from __future__ import annotations

from collections.abc import Sequence
from functools import lru_cache

__all__ = ["knapsack_bottom_up", "knapsack_brute_force", "knapsack_memoized"]


def _items(profits: Sequence[int], weights: Sequence[int]) -> list[tuple[int, int]]:
    if len(profits) != len(weights):
        raise ValueError("profits and weights must have the same length")
    if any(weight < 0 for weight in weights):
        raise ValueError("weights must not be negative")
    return list(zip(profits, weights))


def knapsack_bottom_up(profits: Sequence[int], weights: Sequence[int], capacity: int) -> int:
    """Return the best profit within ``capacity``, filling a table from below."""
    items = _items(profits, weights)
    if capacity <= 0 or not items:
        return 0
    best = [0] * (capacity + 1)
    for profit, weight in items:
        for room in range(capacity, weight - 1, -1):
            best[room] = max(best[room], profit + best[room - weight])
    return best[capacity]


def knapsack_brute_force(profits: Sequence[int], weights: Sequence[int], capacity: int) -> int:
    """Return the best profit within ``capacity`` by trying every selection."""
    items = _items(profits, weights)

    def best(index: int, room: int) -> int:
        if room <= 0 or index >= len(items):
            return 0
        profit, weight = items[index]
        taken = profit + best(index + 1, room - weight) if weight <= room else 0
        return max(taken, best(index + 1, room))

    return best(0, capacity)


def knapsack_memoized(profits: Sequence[int], weights: Sequence[int], capacity: int) -> int:
    """Return the best profit within ``capacity``, recursing with a cache."""
    items = _items(profits, weights)

    @lru_cache(maxsize=None)
    def best(index: int, room: int) -> int:
        if room <= 0 or index >= len(items):
            return 0
        profit, weight = items[index]
        taken = profit + best(index + 1, room - weight) if weight <= room else 0
        return max(taken, best(index + 1, room))

    return best(0, capacity)