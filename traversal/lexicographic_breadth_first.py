"""
Lexicographic breadth-first search (LexBFS) by partition refinement.

The unvisited vertices are kept as an ordered sequence of partitions. Each
step removes the first vertex x of the first partition, then splits every
partition into the neighbors of x followed by the non-neighbors, keeping the
relative order inside each part and dropping empty parts. Once every neighbor
of x has been placed, the remaining partitions are kept as they are.

On a chordal graph the reversed visit order is a perfect elimination ordering.

Example:
    >>> g = Graph.from_edges([(0, 1), (0, 2), (1, 3)])
    >>> list(LexicographicBreadthFirstSearch(g))
    [0, 1, 2, 3]
"""

import logging
from collections import deque
from collections.abc import Iterator
from typing import Generic

from graphs import default_adjacency, source_vertex
from localtypes import Adjacency, Storage, V

logger = logging.getLogger(__name__)


class LexicographicBreadthFirstSearch(Generic[V]):
    """
    LexBFS over every vertex of a graph, starting from the source.

    Attributes:
        predecessor: First visited neighbor of each vertex, for every vertex
            but the roots.
    """

    def __init__(
        self,
        graph: Storage[V],
        source: V | None = None,
        adjacent: Adjacency[V] | None = None,
    ) -> None:
        self.graph = graph
        self.adjacent = adjacent if adjacent is not None else default_adjacency(graph)
        self.predecessor: dict[V, V] = {}
        self._partitions: deque[deque[V]] = deque()
        self._visited: set[V] = set()

        root = source_vertex(graph, source)
        if root is None:
            return
        first = deque(x for x in graph.vertices() if x != root)
        first.appendleft(root)
        self._partitions.append(first)
        logger.debug(f"LexBFS from {root!r} over {graph.order()} vertices")

    def _refine(self, x: V) -> None:
        """Splits every partition around the neighbors of x."""
        pending = {y for y in self.adjacent(x) if y not in self._visited}
        refined: deque[deque[V]] = deque()
        while self._partitions and pending:
            partition = self._partitions.popleft()
            inside: deque[V] = deque()
            outside: deque[V] = deque()
            for y in partition:
                if y in pending:
                    pending.discard(y)
                    self.predecessor.setdefault(y, x)
                    inside.append(y)
                else:
                    outside.append(y)
            refined.extend(part for part in (inside, outside) if part)
        refined.extend(self._partitions)
        self._partitions = refined

    def __iter__(self) -> Iterator[V]:
        return self

    def __next__(self) -> V:
        while self._partitions and not self._partitions[0]:
            self._partitions.popleft()
        if not self._partitions:
            raise StopIteration

        x = self._partitions[0].popleft()
        self._visited.add(x)
        self._refine(x)
        return x
