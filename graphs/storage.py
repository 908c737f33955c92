"""
Reference adjacency-list storages.

Both storages keep every adjacency list sorted and duplicate-free, so the
vertex set and each neighbourhood come out in the canonical ascending order
the search algorithms rely on. Parallel edges collapse on insertion.

Example:
    >>> g = DiGraph.from_edges([(0, 1), (1, 2), (2, 0)])
    >>> g.children(1)
    (2,)
    >>> g.parents(0)
    (2,)
"""

from abc import ABC, abstractmethod
from bisect import bisect_left, insort
from collections.abc import Iterable, Iterator
from typing import Generic, Self

from localtypes import V

from .errors import VertexError


def _insert_sorted(adjacent: list[V], x: V) -> bool:
    """Inserts x keeping the list sorted, returns False if already present."""
    i = bisect_left(adjacent, x)
    if i < len(adjacent) and adjacent[i] == x:
        return False
    adjacent.insert(i, x)
    return True


class AdjacencyList(ABC, Generic[V]):
    """Vertex set and sorted adjacency lists shared by both directions."""

    def __init__(
        self, vertices: Iterable[V] = (), edges: Iterable[tuple[V, V]] = ()
    ) -> None:
        self._adjacency: dict[V, list[V]] = {}
        self._vertices: list[V] = []
        for x in vertices:
            self.add_vertex(x)
        for x, y in edges:
            self.add_edge(x, y)

    @classmethod
    def from_edges(cls, edges: Iterable[tuple[V, V]]) -> Self:
        """Builds a graph whose vertex set is the set of edge endpoints."""
        return cls(edges=edges)

    @abstractmethod
    def add_edge(self, x: V, y: V) -> bool:
        """Adds the edge (x, y) and its endpoints, returns False if present."""

    @abstractmethod
    def edges(self) -> Iterator[tuple[V, V]]:
        """Yields every edge once, in canonical order."""

    def order(self) -> int:
        return len(self._vertices)

    def size(self) -> int:
        return sum(1 for _ in self.edges())

    def has_vertex(self, x: V) -> bool:
        return x in self._adjacency

    def vertices(self) -> tuple[V, ...]:
        return tuple(self._vertices)

    def add_vertex(self, x: V) -> bool:
        """Adds a vertex, returns False if it was already present."""
        if x in self._adjacency:
            return False
        self._adjacency[x] = []
        insort(self._vertices, x)
        return True

    def has_edge(self, x: V, y: V) -> bool:
        adjacent = self._adjacent(x)
        i = bisect_left(adjacent, y)
        return i < len(adjacent) and adjacent[i] == y

    def _adjacent(self, x: V) -> list[V]:
        try:
            return self._adjacency[x]
        except KeyError:
            raise VertexError(f"Vertex {x!r} is not in the graph") from None

    def __len__(self) -> int:
        return self.order()

    def __contains__(self, x: object) -> bool:
        return x in self._adjacency

    def __iter__(self) -> Iterator[V]:
        return iter(self._vertices)

    def __repr__(self) -> str:
        edges = list(self.edges())
        return f"{type(self).__name__}(vertices={self._vertices!r}, edges={edges!r})"


class DiGraph(AdjacencyList[V]):
    """Directed graph: children lists plus a mirrored parents index."""

    def __init__(
        self, vertices: Iterable[V] = (), edges: Iterable[tuple[V, V]] = ()
    ) -> None:
        self._parents: dict[V, list[V]] = {}
        super().__init__(vertices, edges)

    def add_vertex(self, x: V) -> bool:
        if not super().add_vertex(x):
            return False
        self._parents[x] = []
        return True

    def add_edge(self, x: V, y: V) -> bool:
        self.add_vertex(x)
        self.add_vertex(y)
        if not _insert_sorted(self._adjacency[x], y):
            return False
        _insert_sorted(self._parents[y], x)
        return True

    def edges(self) -> Iterator[tuple[V, V]]:
        for x in self._vertices:
            for y in self._adjacency[x]:
                yield x, y

    def children(self, x: V) -> tuple[V, ...]:
        return tuple(self._adjacent(x))

    def parents(self, x: V) -> tuple[V, ...]:
        self._adjacent(x)
        return tuple(self._parents[x])

    def in_degree(self, x: V) -> int:
        self._adjacent(x)
        return len(self._parents[x])

    def out_degree(self, x: V) -> int:
        return len(self._adjacent(x))


class Graph(AdjacencyList[V]):
    """Undirected graph: each edge is stored in both endpoints' lists."""

    def add_edge(self, x: V, y: V) -> bool:
        self.add_vertex(x)
        self.add_vertex(y)
        if not _insert_sorted(self._adjacency[x], y):
            return False
        # A self-loop is listed once
        if x != y:
            _insert_sorted(self._adjacency[y], x)
        return True

    def edges(self) -> Iterator[tuple[V, V]]:
        for x in self._vertices:
            for y in self._adjacency[x]:
                if not y < x:
                    yield x, y

    def neighbors(self, x: V) -> tuple[V, ...]:
        return tuple(self._adjacent(x))

    def degree(self, x: V) -> int:
        return len(self._adjacent(x))


__all__ = ["AdjacencyList", "DiGraph", "Graph"]
