"""
Graph traversals.

Modules:
    breadth_first               - BFS iterator with distance and predecessor maps
    depth_first                 - DFS iterator with discovery/finish times and predecessor map
    depth_first_edges           - DFS iterator over tree/back/forward/cross edges
    lexicographic_breadth_first - LexBFS by partition refinement
    lexicographic_depth_first   - LexDFS by label comparison
    topological                 - Kahn's topological ordering

Every search reads the graph through an adjacency strategy chosen at
construction time (children by default for directed graphs, neighbors for
undirected ones). BFS and DFS run in Tree or Forest mode; the lexicographic
searches always cover every vertex.
"""

from localtypes import Traversal

from .breadth_first import BreadthFirstSearch
from .depth_first import DepthFirstSearch
from .depth_first_edges import DepthFirstSearchEdges, DFSEdge, EdgeKind
from .lexicographic_breadth_first import LexicographicBreadthFirstSearch
from .lexicographic_depth_first import LexicographicDepthFirstSearch
from .topological import TopologicalSort, topological_sort

__all__ = [
    "Traversal",
    "BreadthFirstSearch",
    "DepthFirstSearch",
    "DepthFirstSearchEdges",
    "DFSEdge",
    "EdgeKind",
    "LexicographicBreadthFirstSearch",
    "LexicographicDepthFirstSearch",
    "TopologicalSort",
    "topological_sort",
]
