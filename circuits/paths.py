"""
Simple path enumeration between two vertices.
"""

import logging
from collections.abc import Iterator
from typing import Generic, Self

from graphs import VertexError, default_adjacency
from localtypes import Adjacency, Path, Storage, V

logger = logging.getLogger(__name__)


class AllSimplePaths(Generic[V]):
    """
    All simple paths from a source to a target vertex, in discovery order.

    Paths are extended depth-first following the adjacency order, never
    revisiting a vertex already on the current path.

    Example:
        >>> g = DiGraph.from_edges([(0, 1), (0, 2), (0, 3), (1, 2), (1, 3), (2, 3)])
        >>> AllSimplePaths(g, 0, 3).run().simple_paths
        [[0, 1, 2, 3], [0, 1, 3], [0, 2, 3], [0, 3]]

    Raises:
        VertexError: If the source or the target is absent from the graph.
    """

    def __init__(
        self,
        graph: Storage[V],
        source: V,
        target: V,
        adjacent: Adjacency[V] | None = None,
    ) -> None:
        for x in (source, target):
            if not graph.has_vertex(x):
                raise VertexError(f"Vertex {x!r} is not in the graph")
        self.graph = graph
        self.source = source
        self.target = target
        self.adjacent = adjacent if adjacent is not None else default_adjacency(graph)
        self.stack: list[V] = []
        self.visited: set[V] = set()
        self.simple_paths: list[Path[V]] = []

    def _visit(self, x: V) -> Iterator[Path[V]]:
        self.stack.append(x)
        self.visited.add(x)
        for y in self.adjacent(x):
            if y == self.target:
                path = [*self.stack, y]
                self.simple_paths.append(path)
                yield path
            elif y not in self.visited:
                yield from self._visit(y)
        self.visited.remove(x)
        self.stack.pop()

    def __iter__(self) -> Iterator[Path[V]]:
        """Yields paths lazily; starting over discards previous results."""
        self.stack.clear()
        self.visited.clear()
        self.simple_paths.clear()
        yield from self._visit(self.source)

    def run(self) -> Self:
        """Enumerates every path and stores the results for later queries."""
        for _ in self:
            pass
        logger.debug(
            f"Found {len(self.simple_paths)} path(s) "
            f"from {self.source!r} to {self.target!r}"
        )
        return self
