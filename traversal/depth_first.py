"""
Depth-first search as a lazy iterator.

Recursive DFS is simulated with an explicit stack so that vertices can be
produced one at a time, in pre-order. Vertex colours are derived from the
timestamp maps:

    WHITE: not in discovery_time
    GRAY:  in discovery_time, not in finish_time
    BLACK: in both

A vertex may sit on the stack several times. The topmost copy is the one that
gets discovered; the copies below it are discarded when they surface.
"""

import logging
from collections.abc import Iterator
from typing import Generic

from graphs import default_adjacency, source_vertex
from localtypes import Adjacency, Storage, Traversal, V

logger = logging.getLogger(__name__)


class DepthFirstSearch(Generic[V]):
    """
    Depth-first search over a graph.

    Attributes:
        time: Global clock, incremented on every discovery and every finish.
        discovery_time: Clock value when each vertex turned GRAY.
        finish_time: Clock value when each vertex turned BLACK.
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
        self.time = 0
        self.discovery_time: dict[V, int] = {}
        self.finish_time: dict[V, int] = {}
        self.predecessor: dict[V, V] = {}
        self._stack: list[V] = []

        root = source_vertex(graph, source)
        if root is None:
            return
        if mode is Traversal.FOREST:
            # Reversed, so the remaining roots surface in canonical order
            self._stack.extend(reversed([x for x in graph.vertices() if x != root]))
        self._stack.append(root)
        logger.debug(f"DFS from {root!r} ({mode.value}) over {graph.order()} vertices")

    def __iter__(self) -> Iterator[V]:
        return self

    def __next__(self) -> V:
        while self._stack:
            x = self._stack[-1]
            if x not in self.discovery_time:
                self.discovery_time[x] = self.time
                self.time += 1
                white = [y for y in self.adjacent(x) if y not in self.discovery_time]
                for y in white:
                    self.predecessor[y] = x
                # Pushed in reverse, so descent follows the adjacency order
                self._stack.extend(reversed(white))
                return x

            self._stack.pop()
            if x not in self.finish_time:
                self.finish_time[x] = self.time
                self.time += 1

        raise StopIteration
