"""
Topological ordering of directed graphs.

Functions:
    topological_sort(graph) - Kahn's algorithm, collected into a tuple

Classes:
    TopologicalSort - Kahn's algorithm as a lazy iterator
"""

import logging
from collections import deque
from collections.abc import Iterator
from typing import Generic

from localtypes import Directed, V

logger = logging.getLogger(__name__)


class TopologicalSort(Generic[V]):
    """
    Lazy topological ordering using Kahn's algorithm.

    Vertices with in-degree zero are queued in canonical order; each produced
    vertex decrements the in-degree of its children.

    Raises:
        ValueError: While iterating, once the graph is found to contain a cycle.
    """

    def __init__(self, graph: Directed[V]) -> None:
        self.graph = graph
        self._queue: deque[V] = deque()
        # In-degree of the vertices not yet released
        self._in_degree: dict[V, int] = {}

        for x in graph.vertices():
            degree = len(graph.parents(x))
            if degree == 0:
                self._queue.append(x)
            else:
                self._in_degree[x] = degree

    def __iter__(self) -> Iterator[V]:
        return self

    def __next__(self) -> V:
        if self._queue:
            x = self._queue.popleft()
            for y in self.graph.children(x):
                if y not in self._in_degree:
                    continue
                self._in_degree[y] -= 1
                if self._in_degree[y] == 0:
                    del self._in_degree[y]
                    self._queue.append(y)
            return x

        if self._in_degree:
            logger.debug(f"Cycle among {len(self._in_degree)} unreleased vertices")
            raise ValueError("Graph contains a cycle")

        raise StopIteration


def topological_sort(graph: Directed[V]) -> tuple[V, ...]:
    """
    Returns vertices in topological order using Kahn's algorithm.

    Args:
        graph: Directed graph.

    Returns:
        Vertices ordered so parents come before children.

    Raises:
        ValueError: If the graph contains a cycle.
    """
    return tuple(TopologicalSort(graph))
