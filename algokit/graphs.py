"""Directed and undirected graphs, traversals, cycle checks and spanning trees."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

__all__ = ["WeightedEdge", "DirectedGraph", "UndirectedGraph", "kruskal_mst"]


@dataclass(frozen=True, order=True)
class WeightedEdge:
    """An edge from ``src`` to ``dest`` carrying ``weight``."""

    src: int
    dest: int
    weight: int = 0


def _check_vertex_count(vertex_count: int) -> None:
    if vertex_count < 0:
        raise ValueError("vertex count must not be negative")


def _check_vertex(vertex: int, vertex_count: int) -> None:
    if not 0 <= vertex < vertex_count:
        raise IndexError(f"vertex {vertex} is out of range")


class DirectedGraph:
    """A weighted directed graph on vertices ``0`` to ``vertex_count - 1``.

    Each vertex keeps its outgoing edges in the order they were added.
    """

    def __init__(self, vertex_count: int) -> None:
        _check_vertex_count(vertex_count)
        self.vertex_count = vertex_count
        self._adjacency: list[list[tuple[int, int]]] = [[] for _ in range(vertex_count)]

    def add_edge(self, src: int, dest: int, weight: int = 0) -> None:
        """Add an edge from ``src`` to ``dest``."""
        _check_vertex(src, self.vertex_count)
        _check_vertex(dest, self.vertex_count)
        self._adjacency[src].append((dest, weight))

    def edges(self) -> list[WeightedEdge]:
        """Return every edge, grouped by source vertex in ascending order."""
        return [
            WeightedEdge(src, dest, weight)
            for src, neighbours in enumerate(self._adjacency)
            for dest, weight in neighbours
        ]

    def _neighbours(self, vertex: int) -> Iterator[int]:
        return (dest for dest, _ in self._adjacency[vertex])

    def bfs(self, start: int = 0) -> list[int]:
        """Return the vertices reachable from ``start`` in breadth-first order."""
        _check_vertex(start, self.vertex_count)
        visited = [False] * self.vertex_count
        visited[start] = True
        queue = deque([start])
        order = []
        while queue:
            vertex = queue.popleft()
            order.append(vertex)
            for dest in self._neighbours(vertex):
                if not visited[dest]:
                    visited[dest] = True
                    queue.append(dest)
        return order

    def _visit(self, start: int, visited: list[bool], order: list[int]) -> None:
        visited[start] = True
        order.append(start)
        stack = [self._neighbours(start)]
        while stack:
            for dest in stack[-1]:
                if not visited[dest]:
                    visited[dest] = True
                    order.append(dest)
                    stack.append(self._neighbours(dest))
                    break
            else:
                stack.pop()

    def dfs(self) -> list[int]:
        """Return every vertex in depth-first order, starting new searches in index order."""
        visited = [False] * self.vertex_count
        order: list[int] = []
        for vertex in range(self.vertex_count):
            if not visited[vertex]:
                self._visit(vertex, visited, order)
        return order

    def dfs_from(self, start: int) -> list[int]:
        """Return the vertices reachable from ``start`` in depth-first order."""
        _check_vertex(start, self.vertex_count)
        order: list[int] = []
        self._visit(start, [False] * self.vertex_count, order)
        return order

    def has_cycle(self) -> bool:
        """Return whether the graph contains a directed cycle, self-loops included."""
        visited = [False] * self.vertex_count
        on_path = [False] * self.vertex_count
        for root in range(self.vertex_count):
            if visited[root]:
                continue
            visited[root] = on_path[root] = True
            stack = [(root, self._neighbours(root))]
            while stack:
                vertex, neighbours = stack[-1]
                for dest in neighbours:
                    if on_path[dest]:
                        return True
                    if not visited[dest]:
                        visited[dest] = on_path[dest] = True
                        stack.append((dest, self._neighbours(dest)))
                        break
                else:
                    on_path[vertex] = False
                    stack.pop()
        return False

    def clone(self) -> DirectedGraph:
        """Return an independent copy of the graph."""
        copy = DirectedGraph(self.vertex_count)
        copy._adjacency = [list(neighbours) for neighbours in self._adjacency]
        return copy


class UndirectedGraph:
    """An unweighted undirected graph on vertices ``0`` to ``vertex_count - 1``."""

    def __init__(self, vertex_count: int) -> None:
        _check_vertex_count(vertex_count)
        self.vertex_count = vertex_count
        self._adjacency: list[list[int]] = [[] for _ in range(vertex_count)]

    def add_edge(self, src: int, dest: int) -> None:
        """Connect ``src`` and ``dest``."""
        _check_vertex(src, self.vertex_count)
        _check_vertex(dest, self.vertex_count)
        self._adjacency[src].append(dest)
        self._adjacency[dest].append(src)

    def has_cycle(self) -> bool:
        """Return whether the graph contains a cycle, self-loops included."""
        visited = [False] * self.vertex_count
        for root in range(self.vertex_count):
            if visited[root]:
                continue
            visited[root] = True
            stack = [(root, -1, iter(self._adjacency[root]))]
            while stack:
                vertex, parent, neighbours = stack[-1]
                for other in neighbours:
                    if not visited[other]:
                        visited[other] = True
                        stack.append((other, vertex, iter(self._adjacency[other])))
                        break
                    if other != parent:
                        return True
                else:
                    stack.pop()
        return False


class _DisjointSets:
    def __init__(self, size: int) -> None:
        self._parent = list(range(size))
        self._rank = [0] * size

    def find(self, item: int) -> int:
        root = item
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[item] != root:
            self._parent[item], item = root, self._parent[item]
        return root

    def union(self, first: int, second: int) -> None:
        first, second = self.find(first), self.find(second)
        if self._rank[first] > self._rank[second]:
            self._parent[second] = first
        else:
            self._parent[first] = second
            if self._rank[first] == self._rank[second]:
                self._rank[second] += 1


def kruskal_mst(
    vertex_count: int, edges: Iterable[WeightedEdge | tuple[int, int, int]]
) -> tuple[int, list[WeightedEdge]]:
    """Return the total weight and the edges of a minimum spanning forest.

    Edges are taken in order of weight, then source, then destination, and
    are reported in the order they were chosen.
    """
    _check_vertex_count(vertex_count)
    candidates = []
    for edge in edges:
        if not isinstance(edge, WeightedEdge):
            edge = WeightedEdge(*edge)
        _check_vertex(edge.src, vertex_count)
        _check_vertex(edge.dest, vertex_count)
        candidates.append(edge)
    candidates.sort(key=lambda edge: (edge.weight, edge.src, edge.dest))

    sets = _DisjointSets(vertex_count)
    chosen = []
    for edge in candidates:
        root_src, root_dest = sets.find(edge.src), sets.find(edge.dest)
        if root_src != root_dest:
            chosen.append(edge)
            sets.union(root_src, root_dest)
    return sum(edge.weight for edge in chosen), chosen