"""
Depth-first search producing classified edges.

Where DepthFirstSearch produces vertices, this search produces every edge it
examines, tagged with its kind in the DFS forest:

    TREE:    the target was WHITE and is discovered through this edge
    BACK:    the target is GRAY, an ancestor still open (self-loops included)
    FORWARD: the target is BLACK and was discovered after the source
    CROSS:   the target is BLACK and was discovered before the source

The stack holds pending (source, target) pairs, plus a finish marker for every
discovered vertex. Roots are pushed as (root, root). Edges surface in the same
order a recursive DFS examines them, so the colours read from the timestamp
maps at that moment classify them.

On undirected graphs each edge is reported once: the tree edge back to the
predecessor is skipped, and an edge towards a BLACK vertex was already reported
as BACK from the other endpoint. FORWARD and CROSS never occur.
"""

import logging
from collections.abc import Iterator
from enum import Enum
from typing import Generic, NamedTuple

from graphs import default_adjacency, is_directed, source_vertex
from localtypes import Adjacency, Storage, Traversal, V

logger = logging.getLogger(__name__)


class EdgeKind(Enum):
    TREE = "tree"
    BACK = "back"
    FORWARD = "forward"
    CROSS = "cross"


class DFSEdge(NamedTuple):
    kind: EdgeKind
    source: object
    target: object


class DepthFirstSearchEdges(Generic[V]):
    """
    Depth-first search over a graph, one classified edge per `next()` call.

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
        directed: bool | None = None,
    ) -> None:
        self.graph = graph
        self.adjacent = adjacent if adjacent is not None else default_adjacency(graph)
        self.directed = directed if directed is not None else is_directed(graph)
        self.mode = mode
        self.time = 0
        self.discovery_time: dict[V, int] = {}
        self.finish_time: dict[V, int] = {}
        self.predecessor: dict[V, V] = {}
        # (source, target, finish marker)
        self._stack: list[tuple[V, V, bool]] = []

        root = source_vertex(graph, source)
        if root is None:
            return
        if mode is Traversal.FOREST:
            others = [(x, x, False) for x in graph.vertices() if x != root]
            self._stack.extend(reversed(others))
        self._stack.append((root, root, False))
        logger.debug(
            f"DFS edges from {root!r} ({mode.value}) over {graph.order()} vertices"
        )

    def _tick(self) -> int:
        now = self.time
        self.time += 1
        return now

    def _expand(self, y: V) -> None:
        """Pushes the finish marker of y, then its outgoing edges."""
        self._stack.append((y, y, True))
        parent = self.predecessor.get(y)
        pending = [
            (y, z, False)
            for z in self.adjacent(y)
            if self.directed or parent is None or z != parent
        ]
        self._stack.extend(reversed(pending))

    def __iter__(self) -> Iterator[DFSEdge]:
        return self

    def __next__(self) -> DFSEdge:
        while self._stack:
            x, y, finish = self._stack.pop()
            if finish:
                self.finish_time[y] = self._tick()
                continue

            if y not in self.discovery_time:
                # Only a root or a tree edge can reach a WHITE vertex
                self.discovery_time[y] = self._tick()
                if x != y:
                    self.predecessor[y] = x
                self._expand(y)
                if x != y:
                    return DFSEdge(EdgeKind.TREE, x, y)
                continue

            if y not in self.finish_time:
                return DFSEdge(EdgeKind.BACK, x, y)
            if x == y or not self.directed:
                # Stale root, or an undirected edge already reported
                continue
            if self.discovery_time[x] < self.discovery_time[y]:
                return DFSEdge(EdgeKind.FORWARD, x, y)
            return DFSEdge(EdgeKind.CROSS, x, y)

        raise StopIteration
