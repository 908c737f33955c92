"""Tests for the graphs package."""

import pytest

from graphs import (
    DiGraph,
    Graph,
    VertexError,
    default_adjacency,
    is_directed,
    source_vertex,
)


class TestDiGraph:
    def test_canonical_order(self):
        g = DiGraph.from_edges([(3, 1), (2, 0), (3, 0)])
        assert g.vertices() == (0, 1, 2, 3)
        assert g.children(3) == (0, 1)
        assert g.parents(0) == (2, 3)
        assert list(g) == [0, 1, 2, 3]

    def test_parallel_edges_collapse(self):
        g = DiGraph()
        assert g.add_edge(0, 1)
        assert not g.add_edge(0, 1)
        assert g.size() == 1
        assert g.children(0) == (1,)

    def test_isolated_vertices(self):
        g = DiGraph([5, 4], [(0, 1)])
        assert g.order() == len(g) == 4
        assert 5 in g
        assert g.children(5) == ()
        assert g.in_degree(1) == 1
        assert g.out_degree(0) == 1

    def test_edges_and_has_edge(self):
        g = DiGraph.from_edges([(1, 0), (0, 1), (1, 1)])
        assert list(g.edges()) == [(0, 1), (1, 0), (1, 1)]
        assert g.has_edge(1, 0)
        assert not g.has_edge(0, 0)

    def test_absent_vertex(self):
        g = DiGraph([0])
        with pytest.raises(VertexError):
            g.children(1)
        with pytest.raises(VertexError):
            g.parents(1)
        assert not g.has_vertex(1)


class TestGraph:
    def test_neighbors_are_symmetric(self):
        g = Graph.from_edges([(2, 0), (0, 1)])
        assert g.neighbors(0) == (1, 2)
        assert g.neighbors(2) == (0,)
        assert list(g.edges()) == [(0, 1), (0, 2)]
        assert g.degree(0) == 2

    def test_self_loop_listed_once(self):
        g = Graph.from_edges([(0, 0), (0, 0)])
        assert g.neighbors(0) == (0,)
        assert g.size() == 1

    def test_absent_vertex(self):
        with pytest.raises(VertexError, match="not in the graph"):
            Graph().neighbors(0)


class TestAdjacency:
    def test_direction(self):
        assert is_directed(DiGraph())
        assert not is_directed(Graph())

    def test_default_adjacency(self):
        d = DiGraph.from_edges([(0, 1)])
        u = Graph.from_edges([(0, 1)])
        assert list(default_adjacency(d)(1)) == []
        assert list(default_adjacency(u)(1)) == [0]

    def test_unsupported_storage(self):
        with pytest.raises(TypeError):
            default_adjacency(object())

    def test_source_vertex(self):
        g = DiGraph.from_edges([(2, 1), (1, 0)])
        assert source_vertex(g, None) == 0
        assert source_vertex(g, 2) == 2
        assert source_vertex(DiGraph(), None) is None

    def test_source_vertex_preconditions(self):
        with pytest.raises(VertexError, match="not in the graph"):
            source_vertex(Graph.from_edges([(0, 1)]), 5)
        with pytest.raises(VertexError, match="empty graph"):
            source_vertex(Graph(), 0)
