"""
Type definitions shared by the traversal and circuit packages.

The algorithms never own a graph: they consume a read-only contract made of
a vertex set in canonical (ascending) order and a per-vertex adjacency query.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from enum import Enum
from typing import Protocol, TypeAlias, TypeVar, runtime_checkable

# Vertices are opaque, hashable and totally ordered
V = TypeVar("V")
T = TypeVar("T")


# Adjacency strategy: vertex -> ordered, duplicate-free adjacent vertices
Adjacency: TypeAlias = Callable[[T], Iterable[T]]

Path: TypeAlias = list[T]
Cycle: TypeAlias = list[T]


class Traversal(Enum):
    """Structural variant of a search."""

    # Only vertices reachable from the source are visited
    TREE = "tree"
    # Every vertex is visited, unreached components are seeded in canonical order
    FOREST = "forest"


@runtime_checkable
class Storage(Protocol[V]):
    """Minimal read-only graph contract."""

    def order(self) -> int: ...

    def has_vertex(self, x: V) -> bool: ...

    def vertices(self) -> Sequence[V]: ...


@runtime_checkable
class Directed(Storage[V], Protocol[V]):
    def children(self, x: V) -> Sequence[V]: ...

    def parents(self, x: V) -> Sequence[V]: ...


@runtime_checkable
class Undirected(Storage[V], Protocol[V]):
    def neighbors(self, x: V) -> Sequence[V]: ...


__all__ = [
    "V",
    "Adjacency",
    "Path",
    "Cycle",
    "Traversal",
    "Storage",
    "Directed",
    "Undirected",
]
