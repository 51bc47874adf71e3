"""Array, subset and bit problems solved with dynamic programming and recursion."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

__all__ = [
    "max_sums_no_adjacent",
    "max_sum_no_adjacent",
    "trapped_rain_water",
    "min_jumps",
    "max_gold",
    "subset_sum",
    "can_partition",
    "count_product_subsequences",
    "merge_sort",
    "powerset",
    "copy_set_bits",
]


def max_sums_no_adjacent(values: Iterable[int]) -> list[int]:
    """Return, for each prefix, the best sum of non-adjacent elements in it.

    Every prefix takes at least one element.
    """
    sums: list[int] = []
    for value in values:
        if not sums:
            sums.append(value)
        elif len(sums) == 1:
            sums.append(max(sums[0], value))
        else:
            sums.append(max(sums[-1], sums[-2] + value))
    return sums


def max_sum_no_adjacent(values: Iterable[int]) -> int:
    """Return the best sum of elements no two of which are adjacent.

    Taking no element at all is allowed, so the result is never negative.
    """
    before_previous, previous = 0, 0
    for value in values:
        before_previous, previous = previous, max(previous, before_previous + value)
    return previous


def trapped_rain_water(heights: Sequence[int]) -> int:
    """Return how much water the bars of ``heights`` hold after rain."""
    left, right = 0, len(heights) - 1
    max_left = max_right = 0
    total = 0
    while left <= right:
        if heights[left] < heights[right]:
            if heights[left] > max_left:
                max_left = heights[left]
            else:
                total += max_left - heights[left]
            left += 1
        else:
            if heights[right] > max_right:
                max_right = heights[right]
            else:
                total += max_right - heights[right]
            right -= 1
    return total


def min_jumps(steps: Sequence[int]) -> int | None:
    """Return the fewest jumps from the first position to the last.

    From position ``i`` a jump reaches any position up to ``i + steps[i]``.
    None is returned when the end cannot be reached.
    """
    if not steps:
        raise ValueError("steps must not be empty")
    fewest: list[int | None] = [0]
    for target in range(1, len(steps)):
        candidates = [
            jumps + 1
            for origin, (jumps, reach) in enumerate(zip(fewest, steps))
            if jumps is not None and origin + reach >= target
        ]
        fewest.append(min(candidates, default=None))
    return fewest[-1]


def max_gold(grid: Iterable[Iterable[int]]) -> int:
    """Return the most gold collected crossing ``grid`` from left to right.

    The path starts in any cell of the first column and moves each step to
    the next column, to the cell on the right or diagonally up or down.
    """
    rows = [list(row) for row in grid]
    if not rows or not rows[0]:
        return 0
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("all rows must have the same length")
    best = [row[-1] for row in rows]
    for column in range(width - 2, -1, -1):
        best = [
            row[column] + max(best[max(i - 1, 0):i + 2])
            for i, row in enumerate(rows)
        ]
    return max(best)


def subset_sum(values: Iterable[int], target: int) -> bool:
    """Return whether some subset of the non-negative ``values`` sums to ``target``."""
    items = list(values)
    if any(value < 0 for value in items):
        raise ValueError("values must not be negative")
    reachable = {0}
    for value in items:
        reachable |= {total + value for total in reachable if total + value <= target}
    return target in reachable


def can_partition(values: Iterable[int]) -> bool:
    """Return whether ``values`` splits into two subsets of equal sum."""
    items = list(values)
    total = sum(items)
    if total % 2:
        return False
    return subset_sum(items, total // 2)


def count_product_subsequences(values: Iterable[int], k: int) -> int:
    """Count the non-empty subsequences whose product is at most ``k``.

    The values must be positive integers.
    """
    items = list(values)
    if any(value <= 0 for value in items):
        raise ValueError("values must be positive")
    if k < 0:
        raise ValueError("k must not be negative")
    # counts[limit] is the number of subsequences so far with product <= limit.
    counts = [0] * (k + 1)
    for value in items:
        counts = [
            count + (counts[limit // value] + 1 if value <= limit else 0)
            for limit, count in enumerate(counts)
        ]
    return counts[k]


def _merge(left: list, right: list) -> list:
    merged = []
    left_iter, right_iter = iter(left), iter(right)
    left_item = next(left_iter, _END)
    right_item = next(right_iter, _END)
    while left_item is not _END and right_item is not _END:
        if left_item <= right_item:
            merged.append(left_item)
            left_item = next(left_iter, _END)
        else:
            merged.append(right_item)
            right_item = next(right_iter, _END)
    if left_item is not _END:
        merged.append(left_item)
        merged.extend(left_iter)
    if right_item is not _END:
        merged.append(right_item)
        merged.extend(right_iter)
    return merged


_END = object()


def merge_sort(values: Iterable) -> list:
    """Return a new list of ``values`` in ascending order, sorted stably."""
    items = list(values)
    if len(items) <= 1:
        return items
    middle = len(items) // 2
    return _merge(merge_sort(items[:middle]), merge_sort(items[middle:]))


def powerset(items: Iterable) -> list[list]:
    """Return every subset of ``items``.

    Subsets keep the order of ``items``; the subsets that hold a later item
    come after all those that do not.
    """
    subsets: list[list] = [[]]
    for item in items:
        subsets += [subset + [item] for subset in subsets]
    return subsets


def copy_set_bits(x: int, y: int, low: int, high: int) -> int:
    """Return ``x`` with the set bits of ``y`` in positions ``low`` to ``high`` copied in.

    Positions count from 1 for the lowest bit and go up to 31.
    """
    if low < 1 or high > 31 or low > high:
        raise ValueError("bit range must satisfy 1 <= low <= high <= 31")
    mask = ((1 << (high - low + 1)) - 1) << (low - 1)
    return x | (y & mask)