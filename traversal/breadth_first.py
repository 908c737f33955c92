"""
Breadth-first search as a lazy iterator.

Vertices are produced in BFS pre-order, one per `next()` call. The `distance`
and `predecessor` maps are filled as the search advances, so a partially
consumed search still exposes valid maps for everything discovered so far.

Example:
    >>> g = DiGraph.from_edges([(0, 1), (0, 2), (1, 3)])
    >>> search = BreadthFirstSearch(g, 0)
    >>> list(search)
    [0, 1, 2, 3]
    >>> search.distance[3]
    2
"""

import logging
from collections import deque
from collections.abc import Iterator
from typing import Generic

from constants import INFINITY
from graphs import default_adjacency, source_vertex
from localtypes import Adjacency, Storage, Traversal, V

logger = logging.getLogger(__name__)


class BreadthFirstSearch(Generic[V]):
    """
    Breadth-first search over a graph.

    Attributes:
        distance: Number of edges from the root of each discovered vertex.
            In Forest mode, roots seeded after the source get INFINITY, and so
            does everything discovered from them.
        predecessor: Vertex from which each non-root vertex was discovered.
    """

    def __init__(
        self,
        graph: Storage[V],
        source: V | None = None,
        adjacent: Adjacency[V] | None = None,
        mode: Traversal = Traversal.TREE,
    ) -> None:
        self.graph = graph
        self.adjacent = adjacent if adjacent is not None else default_adjacency(graph)
        self.mode = mode
        self.distance: dict[V, int | float] = {}
        self.predecessor: dict[V, V] = {}
        self._queue: deque[V] = deque()
        # Candidate roots for Forest mode, in canonical order
        self._forest: deque[V] = deque()

        root = source_vertex(graph, source)
        if root is None:
            return
        if mode is Traversal.FOREST:
            self._forest.extend(graph.vertices())
        self.distance[root] = 0
        self._queue.append(root)
        logger.debug(f"BFS from {root!r} ({mode.value}) over {graph.order()} vertices")

    def _seed(self) -> None:
        """Pushes the next vertex not yet reached as a new root."""
        while self._forest:
            x = self._forest.popleft()
            if x not in self.distance:
                self.distance[x] = INFINITY
                self._queue.append(x)
                logger.debug(f"BFS seeding unreached vertex {x!r}")
                return

    def __iter__(self) -> Iterator[V]:
        return self

    def __next__(self) -> V:
        if not self._queue and self.mode is Traversal.FOREST:
            self._seed()
        if not self._queue:
            raise StopIteration

        x = self._queue.popleft()
        for y in self.adjacent(x):
            if y not in self.distance:
                # INFINITY + 1 stays INFINITY
                self.distance[y] = self.distance[x] + 1
                self.predecessor[y] = x
                self._queue.append(y)
        return x
