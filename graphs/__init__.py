"""
Graph contract collaborators.

The search and enumeration algorithms only read graphs through the
`Storage` / `Directed` / `Undirected` protocols of localtypes.py. This package
provides what sits on the other side of that contract:

**Storage** (storage.py)
    Sorted adjacency-list storages.
    - DiGraph: children / parents
    - Graph: neighbors

**Adjacency** (adjacency.py)
    Direction-based selection of the adjacency strategy.
    - default_adjacency(graph) -> children or neighbors
    - is_directed(graph)
    - source_vertex(graph, source): validated search source

**Errors** (errors.py)
    - VertexError: a required vertex is absent from the graph
"""

from .adjacency import default_adjacency, is_directed, source_vertex
from .errors import VertexError
from .storage import AdjacencyList, DiGraph, Graph

__all__ = [
    # Storage
    "AdjacencyList",
    "DiGraph",
    "Graph",
    # Adjacency
    "default_adjacency",
    "is_directed",
    "source_vertex",
    # Errors
    "VertexError",
]
