"""Tests for circuits/paths.py"""

import pytest

from circuits import AllSimplePaths
from graphs import DiGraph, Graph, VertexError

EDGES = [(0, 1), (0, 2), (0, 3), (1, 2), (1, 3), (2, 3)]


class TestAllSimplePaths:
    def test_directed(self):
        search = AllSimplePaths(DiGraph.from_edges(EDGES), 0, 3).run()
        assert search.simple_paths == [
            [0, 1, 2, 3],
            [0, 1, 3],
            [0, 2, 3],
            [0, 3],
        ]

    def test_undirected(self):
        search = AllSimplePaths(Graph.from_edges(EDGES), 0, 3).run()
        assert search.simple_paths == [
            [0, 1, 2, 3],
            [0, 1, 3],
            [0, 2, 1, 3],
            [0, 2, 3],
            [0, 3],
        ]

    def test_no_path(self):
        g = DiGraph.from_edges([(0, 1), (2, 1)])
        assert AllSimplePaths(g, 0, 2).run().simple_paths == []

    def test_lazy_iteration(self):
        search = AllSimplePaths(DiGraph.from_edges(EDGES), 0, 3)
        paths = iter(search)
        assert next(paths) == [0, 1, 2, 3]
        assert search.simple_paths == [[0, 1, 2, 3]]

    def test_absent_endpoint(self):
        g = DiGraph.from_edges(EDGES)
        with pytest.raises(VertexError):
            AllSimplePaths(g, 0, 42)

    def test_null_graph(self):
        with pytest.raises(VertexError):
            AllSimplePaths(DiGraph(), 0, 1)
