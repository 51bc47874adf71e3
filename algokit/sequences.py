"""Dynamic-programming algorithms over strings and sequences."""

from __future__ import annotations

import operator
from collections.abc import Sequence
from itertools import accumulate

__all__ = [
    "edit_distance",
    "longest_common_subsequence",
    "longest_repeating_subsequence",
    "wildcard_match",
    "count_palindromic_subsequences",
    "is_interleaving",
]


def edit_distance(a: Sequence, b: Sequence) -> int:
    """Return the Levenshtein distance between ``a`` and ``b``.

    Insertions, deletions and substitutions each cost one.
    """
    previous = list(range(len(b) + 1))
    for i, item_a in enumerate(a, 1):
        current = [i]
        for j, item_b in enumerate(b, 1):
            if item_a == item_b:
                current.append(previous[j - 1])
            else:
                current.append(1 + min(current[j - 1], previous[j], previous[j - 1]))
        previous = current
    return previous[-1]


def longest_common_subsequence(a: Sequence, b: Sequence) -> int:
    """Return the length of the longest common subsequence of ``a`` and ``b``."""
    previous = [0] * (len(b) + 1)
    for item_a in a:
        current = [0]
        for j, item_b in enumerate(b, 1):
            if item_a == item_b:
                current.append(previous[j - 1] + 1)
            else:
                current.append(max(previous[j], current[j - 1]))
        previous = current
    return previous[-1]


def longest_repeating_subsequence(text: Sequence) -> int:
    """Return the length of the longest subsequence that occurs twice in ``text``.

    The two occurrences may overlap but never use the same position for the
    same element of the subsequence. Only two rows of the table are kept.
    """
    previous = [0] * (len(text) + 1)
    for i, item_i in enumerate(text, 1):
        current = [0]
        for j, item_j in enumerate(text, 1):
            if item_i == item_j and i != j:
                current.append(previous[j - 1] + 1)
            else:
                current.append(max(previous[j], current[j - 1]))
        previous = current
    return previous[-1]


def wildcard_match(text: str, pattern: str) -> bool:
    """Return whether ``pattern`` matches the whole of ``text``.

    ``?`` matches any single character and ``*`` matches any run of
    characters, including an empty one.
    """
    # matches[k] tells whether the pattern read so far matches text[:k].
    matches = [True] + [False] * len(text)
    for symbol in pattern:
        if symbol == "*":
            matches = list(accumulate(matches, operator.or_))
        else:
            matches = [False] + [
                before and (symbol == "?" or symbol == char)
                for before, char in zip(matches, text)
            ]
    return matches[-1]


def count_palindromic_subsequences(text: Sequence) -> int:
    """Count the palindromic subsequences of ``text``.

    Subsequences taken from different positions count separately, even when
    they spell the same thing. The empty subsequence is not counted.
    """
    n = len(text)
    counts = [[0] * n for _ in range(n)]
    for i in reversed(range(n)):
        counts[i][i] = 1
        for j in range(i + 1, n):
            outer = counts[i + 1][j] + counts[i][j - 1]
            if text[i] == text[j]:
                counts[i][j] = 1 + outer
            else:
                counts[i][j] = outer - counts[i + 1][j - 1]
    return counts[0][n - 1] if n else 0


def is_interleaving(x: Sequence, y: Sequence, z: Sequence) -> bool:
    """Return whether ``z`` interleaves ``x`` and ``y`` keeping each one's order."""
    if len(x) + len(y) != len(z):
        return False
    row = [True]
    for j, item_y in enumerate(y, 1):
        row.append(row[-1] and item_y == z[j - 1])
    for i, item_x in enumerate(x, 1):
        current = [row[0] and item_x == z[i - 1]]
        for j, item_y in enumerate(y, 1):
            target = z[i + j - 1]
            current.append(
                (row[j] and item_x == target) or (current[j - 1] and item_y == target)
            )
        row = current
    return row[-1]