"""Search problems on square grids: maze paths and knight moves."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence

__all__ = ["find_maze_paths", "knight_min_steps"]

_MOVES = (("L", 0, -1), ("R", 0, 1), ("U", -1, 0), ("D", 1, 0))

_KNIGHT_MOVES = ((-2, -1), (-2, 1), (2, -1), (2, 1), (-1, -2), (-1, 2), (1, -2), (1, 2))


def find_maze_paths(maze: Sequence[Sequence[int]]) -> list[str]:
    """Return every path through a square maze, in sorted order.

    Paths run from the top-left cell to the bottom-right one through open
    cells (non-zero), never visiting a cell twice. Each path is written as
    moves ``L``, ``R``, ``U`` and ``D``.
    """
    grid = [list(row) for row in maze]
    size = len(grid)
    if any(len(row) != size for row in grid):
        raise ValueError("maze must be square")
    if size == 0 or not grid[0][0] or not grid[-1][-1]:
        return []

    visited = [[False] * size for _ in range(size)]
    paths: list[str] = []
    moves: list[str] = []

    def walk(row: int, column: int) -> None:
        if not (0 <= row < size and 0 <= column < size):
            return
        if not grid[row][column] or visited[row][column]:
            return
        if row == size - 1 and column == size - 1:
            paths.append("".join(moves))
            return
        visited[row][column] = True
        for letter, d_row, d_column in _MOVES:
            moves.append(letter)
            walk(row + d_row, column + d_column)
            moves.pop()
        visited[row][column] = False

    walk(0, 0)
    return sorted(paths)


def knight_min_steps(
    start: Sequence[int], target: Sequence[int], size: int
) -> int | None:
    """Return the fewest knight moves from ``start`` to ``target``.

    Positions are (row, column) pairs counted from 0 on a ``size`` by
    ``size`` board. None is returned when the target cannot be reached.
    """
    if size <= 0:
        raise ValueError("board size must be positive")
    origin = tuple(start)
    goal = tuple(target)
    for row, column in (origin, goal):
        if not (0 <= row < size and 0 <= column < size):
            raise ValueError("positions must lie on the board")
    steps = {origin: 0}
    queue = deque([origin])
    while queue:
        row, column = queue.popleft()
        if (row, column) == goal:
            return steps[goal]
        for d_row, d_column in _KNIGHT_MOVES:
            nxt = (row + d_row, column + d_column)
            if 0 <= nxt[0] < size and 0 <= nxt[1] < size and nxt not in steps:
                steps[nxt] = steps[(row, column)] + 1
                queue.append(nxt)
    return None