"""
Direction-based adjacency selection.

A search is parameterized by an adjacency strategy, a callable returning the
vertices one step away from a given vertex. For directed storages the default
is the children relation, for undirected storages the neighbor relation.
Searches also resolve their starting vertex here.
"""

from localtypes import Adjacency, Directed, Storage, Undirected, V

from .errors import VertexError


def is_directed(graph: Storage[V]) -> bool:
    """Whether the storage exposes the directed contract."""
    return isinstance(graph, Directed)


def default_adjacency(graph: Storage[V]) -> Adjacency[V]:
    """
    Returns the adjacency strategy matching the graph direction.

    Raises:
        TypeError: If the storage is neither directed nor undirected.
    """
    if isinstance(graph, Directed):
        return graph.children
    if isinstance(graph, Undirected):
        return graph.neighbors
    raise TypeError(f"{type(graph).__name__} exposes no adjacency relation")


def source_vertex(graph: Storage[V], source: V | None) -> V | None:
    """
    Resolves the source of a search.

    Returns the given source, the first vertex in canonical order when no
    source is given, or None for an empty graph.

    Raises:
        VertexError: If the source is absent from the graph, or if a source is
            given for an empty graph.
    """
    if graph.order() == 0:
        if source is not None:
            raise VertexError(f"Source vertex {source!r} given for an empty graph")
        return None
    if source is None:
        return graph.vertices()[0]
    if not graph.has_vertex(source):
        raise VertexError(f"Source vertex {source!r} is not in the graph")
    return source
