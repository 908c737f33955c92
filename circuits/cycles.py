"""
Elementary circuit enumeration (Hawick & James, 2008).

Every vertex of the graph, in canonical order, is used in turn as the root of
a backtracking search. Adjacent vertices smaller than the root are skipped, so
each circuit is reported exactly once, by its minimum vertex. Vertices from
which the root cannot be reached again are blocked; a blocked vertex is
released, together with every vertex it blocks, as soon as a circuit is found
through it.

`blocked` maps each blocked vertex to the set of vertices blocked *by* it.
A vertex is blocked iff it is a key of the map.

Reference:
    Hawick, K. A., & James, H. A. (2008). Enumerating Circuits and Loops in
    Graphs with Self-Arcs and Multiple-Arcs.

Example:
    >>> g = DiGraph.from_edges([(0, 1), (1, 2), (2, 3), (2, 4), (3, 4), (4, 1)])
    >>> AllCycles(g).run().cycles
    [[1, 2, 3, 4, 1], [1, 2, 4, 1]]
"""

import logging
from collections.abc import Generator, Iterator
from typing import Generic, Self

from graphs import default_adjacency, is_directed
from localtypes import Adjacency, Cycle, Storage, V

logger = logging.getLogger(__name__)


class AllCycles(Generic[V]):
    """
    All elementary circuits of a graph.

    Works on directed and undirected graphs, with self-loops and several
    connected components. On undirected graphs the search runs over the
    symmetric adjacency and reports each cycle once: a self-loop, or a path of
    at least three vertices whose second vertex is smaller than its last.

    Args:
        graph: Graph to search.
        adjacent: Adjacency strategy, defaults to children or neighbors.
        directed: Whether circuits are directed, defaults to the graph direction.

    Attributes:
        cycles: Circuits in discovery order, each closed by its first vertex.
    """

    def __init__(
        self,
        graph: Storage[V],
        adjacent: Adjacency[V] | None = None,
        directed: bool | None = None,
    ) -> None:
        self.graph = graph
        self.adjacent = adjacent if adjacent is not None else default_adjacency(graph)
        self.directed = is_directed(graph) if directed is None else directed
        self.stack: list[V] = []
        self.blocked: dict[V, set[V]] = {}
        self.cycles: list[Cycle[V]] = []

    def _reports(self) -> bool:
        """Whether the path on the stack, closed on its root, is reported."""
        if self.directed or len(self.stack) == 1:
            return True
        # Skip the edge just walked and the mirrored orientation
        return len(self.stack) > 2 and self.stack[1] < self.stack[-1]

    def _record(self, cycle: Cycle[V]) -> None:
        self.cycles.append(cycle)

    def _block(self, x: V) -> None:
        root = self.stack[0]
        for y in self.adjacent(x):
            if y < root:
                continue
            self.blocked.setdefault(y, set()).add(x)

    def _unblock(self, x: V) -> None:
        for y in self.blocked.pop(x, ()):
            self._unblock(y)

    def _circuit(self, x: V) -> Generator[Cycle[V], None, bool]:
        """Yields the circuits through the current path, returns whether any."""
        found = False
        self.stack.append(x)
        self.blocked.setdefault(x, set())
        root = self.stack[0]

        for y in self.adjacent(x):
            if y < root:
                continue
            if y == root:
                if self._reports():
                    cycle = [*self.stack, y]
                    self._record(cycle)
                    yield cycle
                found = True
            elif y not in self.blocked:
                found |= yield from self._circuit(y)

        if found:
            self._unblock(x)
        else:
            self._block(x)

        self.stack.pop()
        return found

    def _reset(self) -> None:
        self.stack.clear()
        self.blocked.clear()
        self.cycles.clear()

    def __iter__(self) -> Iterator[Cycle[V]]:
        """Yields circuits lazily; starting over discards previous results."""
        self._reset()
        for root in self.graph.vertices():
            count = len(self.cycles)
            yield from self._circuit(root)
            self.blocked.clear()
            if len(self.cycles) > count:
                logger.debug(f"Root {root!r}: {len(self.cycles) - count} circuit(s)")

    def run(self) -> Self:
        """Enumerates every circuit and stores the results for later queries."""
        for _ in self:
            pass
        logger.debug(f"Found {len(self.cycles)} circuit(s)")
        return self


class AllSimpleCycles(AllCycles[V]):
    """
    All elementary circuits, with the popularity of each vertex.

    Attributes:
        popularity: Number of circuits each vertex appears in. Vertices on no
            circuit are absent.

    Example:
        >>> g = DiGraph.from_edges([(0, 1), (1, 2), (2, 3), (2, 4), (3, 4), (4, 1)])
        >>> search = AllSimpleCycles(g).run()
        >>> search.popularity
        {1: 2, 2: 2, 3: 1, 4: 2}
    """

    def __init__(
        self,
        graph: Storage[V],
        adjacent: Adjacency[V] | None = None,
        directed: bool | None = None,
    ) -> None:
        super().__init__(graph, adjacent, directed)
        self.popularity: dict[V, int] = {}

    @property
    def simple_cycles(self) -> list[Cycle[V]]:
        return self.cycles

    def _record(self, cycle: Cycle[V]) -> None:
        super()._record(cycle)
        for x in self.stack:
            self.popularity[x] = self.popularity.get(x, 0) + 1

    def _reset(self) -> None:
        super()._reset()
        self.popularity.clear()
