"""
Lexicographic depth-first search (LexDFS).

Every unvisited vertex carries a label, the visit indices of its visited
neighbors with the most recent first. Each step visits the vertex with the
lexicographically largest label, the first in canonical order on ties, then
prepends the current index to the labels of its unvisited neighbors. Labels
compare as sequences, so a vertex adjacent to a more recent visit always wins.

Example:
    >>> g = Graph.from_edges([(0, 1), (0, 2), (1, 3)])
    >>> list(LexicographicDepthFirstSearch(g))
    [0, 1, 3, 2]
"""

import logging
from collections import deque
from collections.abc import Iterator
from typing import Generic

from graphs import default_adjacency
from localtypes import Adjacency, Storage, V

logger = logging.getLogger(__name__)


class LexicographicDepthFirstSearch(Generic[V]):
    """
    LexDFS over every vertex of a graph.

    Attributes:
        index: Number of vertices visited so far.
        predecessor: Most recently visited neighbor of each vertex at the time
            it was visited, for every vertex but the roots.
    """

    def __init__(self, graph: Storage[V], adjacent: Adjacency[V] | None = None) -> None:
        self.graph = graph
        self.adjacent = adjacent if adjacent is not None else default_adjacency(graph)
        self.index = 0
        self.predecessor: dict[V, V] = {}
        # Unvisited vertices in canonical order, with their labels
        self._labels: dict[V, deque[int]] = {x: deque() for x in graph.vertices()}
        logger.debug(f"LexDFS over {graph.order()} vertices")

    def _select(self) -> V:
        candidates = iter(self._labels.items())
        best, top = next(candidates)
        for x, label in candidates:
            if label > top:
                best, top = x, label
        return best

    def __iter__(self) -> Iterator[V]:
        return self

    def __next__(self) -> V:
        if not self._labels:
            raise StopIteration

        x = self._select()
        del self._labels[x]
        for y in self.adjacent(x):
            if y in self._labels:
                self.predecessor[y] = x
                self._labels[y].appendleft(self.index)
        self.index += 1
        return x
