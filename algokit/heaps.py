"""A bounded binary min-heap and problems solved with heaps."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Iterator

__all__ = ["HeapOverflowError", "MinHeap", "running_medians", "sort_k_sorted"]


class HeapOverflowError(Exception):
    """Raised when a key is inserted into a full heap."""


class MinHeap:
    """A binary min-heap stored in a list, optionally limited in size."""

    def __init__(self, capacity: int | None = None, items: Iterable = ()) -> None:
        self._items = list(items)
        if capacity is not None and capacity < len(self._items):
            raise ValueError("capacity is smaller than the number of items")
        self.capacity = capacity
        for index in reversed(range(len(self._items) // 2)):
            self._sift_down(index)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator:
        """Yield the keys in the order they are stored in the heap."""
        return iter(list(self._items))

    def _sift_up(self, index: int) -> None:
        items = self._items
        while index > 0:
            parent = (index - 1) // 2
            if items[parent] <= items[index]:
                break
            items[parent], items[index] = items[index], items[parent]
            index = parent

    def _sift_down(self, index: int) -> None:
        items = self._items
        size = len(items)
        while True:
            smallest = index
            for child in (2 * index + 1, 2 * index + 2):
                if child < size and items[child] < items[smallest]:
                    smallest = child
            if smallest == index:
                return
            items[smallest], items[index] = items[index], items[smallest]
            index = smallest

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError("heap index out of range")

    def insert(self, key) -> None:
        """Add ``key``; raise HeapOverflowError if the heap is full."""
        if self.capacity is not None and len(self._items) >= self.capacity:
            raise HeapOverflowError("heap is full")
        self._items.append(key)
        self._sift_up(len(self._items) - 1)

    def peek(self):
        """Return the smallest key without removing it."""
        if not self._items:
            raise IndexError("peek at an empty heap")
        return self._items[0]

    def extract_min(self):
        """Remove and return the smallest key."""
        if not self._items:
            raise IndexError("extract from an empty heap")
        last = self._items.pop()
        if not self._items:
            return last
        root = self._items[0]
        self._items[0] = last
        self._sift_down(0)
        return root

    def find(self, value) -> int | None:
        """Return the storage index of ``value``, or None if it is absent."""
        return next(
            (index for index, item in enumerate(self._items) if item == value), None
        )

    def update_key(self, index: int, new_value) -> None:
        """Replace the key at ``index`` and restore the heap order."""
        self._check_index(index)
        old_value = self._items[index]
        self._items[index] = new_value
        if new_value < old_value:
            self._sift_up(index)
        elif old_value < new_value:
            self._sift_down(index)

    def delete_key(self, index: int) -> None:
        """Remove the key stored at ``index``."""
        self._check_index(index)
        last = self._items.pop()
        if index < len(self._items):
            self._items[index] = last
            self._sift_up(index)
            self._sift_down(index)

    def delete(self, value) -> None:
        """Remove one occurrence of ``value``; raise ValueError if it is absent."""
        index = self.find(value)
        if index is None:
            raise ValueError(f"{value!r} is not in the heap")
        self.delete_key(index)

    def heap_sort(self) -> list:
        """Sort the stored keys in ascending order and return them.

        An ascending list is itself a valid min-heap, so the heap stays usable.
        """
        ordered = [self.extract_min() for _ in range(len(self._items))]
        self._items = ordered
        return list(ordered)


def running_medians(values: Iterable) -> list:
    """Return the median of the values seen so far after each one arrives.

    With an even count the median is the mean of the two middle values.
    """
    lower: list = []  # max-heap of the smaller half, stored negated
    upper: list = []  # min-heap of the larger half
    medians = []
    for value in values:
        if not lower or value <= -lower[0]:
            heapq.heappush(lower, -value)
        else:
            heapq.heappush(upper, value)
        if len(lower) > len(upper) + 1:
            heapq.heappush(upper, -heapq.heappop(lower))
        elif len(upper) > len(lower):
            heapq.heappush(lower, -heapq.heappop(upper))
        if len(lower) == len(upper):
            medians.append((-lower[0] + upper[0]) / 2)
        else:
            medians.append(-lower[0])
    return medians


def sort_k_sorted(values: Iterable, k: int) -> list:
    """Sort values in which each element is at most ``k`` places from its place."""
    if k < 0:
        raise ValueError("k must not be negative")
    items = list(values)
    heap = MinHeap(items=items[:k])
    result = []
    for incoming in items[k:]:
        heap.insert(incoming)
        result.append(heap.extract_min())
    while heap:
        result.append(heap.extract_min())
    return result