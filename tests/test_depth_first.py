"""Tests for traversal/depth_first.py"""

import numpy as np
import pytest

from graphs import DiGraph, Graph, VertexError
from traversal import DepthFirstSearch, Traversal

EDGES = [
    (0, 1), (1, 2), (0, 3), (3, 4), (3, 5),
    (4, 5), (4, 6), (5, 6), (5, 7), (6, 7), (7, 7),
]


def random_edges(seed: int, n: int = 10, p: float = 0.2) -> list[tuple[int, int]]:
    rng = np.random.default_rng(seed)
    mask = rng.random((n, n)) < p
    return [(int(i), int(j)) for i, j in zip(*np.nonzero(mask))]


def check_bracket_nesting(search: DepthFirstSearch) -> None:
    for x, start in search.discovery_time.items():
        assert start < search.finish_time[x]
    for x, parent in search.predecessor.items():
        assert search.discovery_time[parent] < search.discovery_time[x]
        assert search.finish_time[x] < search.finish_time[parent]


class TestDepthFirstTree:
    def test_single_vertex(self):
        g = DiGraph([0])
        search = DepthFirstSearch(g)
        assert list(search) == [0]
        assert search.discovery_time == {0: 0}
        assert search.finish_time == {0: 1}
        assert search.predecessor == {}

    def test_single_edge(self):
        g = DiGraph.from_edges([(0, 1)])
        search = DepthFirstSearch(g, 0)
        assert list(search) == [0, 1]
        assert search.discovery_time == {0: 0, 1: 1}
        assert search.finish_time == {1: 2, 0: 3}
        assert search.predecessor == {1: 0}

    def test_unreachable_vertex_not_visited(self):
        g = DiGraph([0, 1, 2], [(0, 1)])
        search = DepthFirstSearch(g, 0)
        list(search)
        assert 2 not in search.discovery_time
        assert 2 not in search.finish_time
        assert 2 not in search.predecessor

    def test_reference_graph(self):
        g = DiGraph.from_edges(EDGES)
        search = DepthFirstSearch(g, 0)

        assert list(search) == [0, 1, 2, 3, 4, 5, 6, 7]
        assert search.discovery_time == {
            0: 0, 1: 1, 2: 2, 3: 5, 4: 6, 5: 7, 6: 8, 7: 9,
        }
        assert search.finish_time == {
            2: 3, 1: 4, 7: 10, 6: 11, 5: 12, 4: 13, 3: 14, 0: 15,
        }
        assert search.predecessor == {1: 0, 2: 1, 3: 0, 4: 3, 5: 4, 6: 5, 7: 6}
        assert search.time == 16

    def test_undirected_uses_neighbors(self):
        g = Graph.from_edges([(0, 1), (1, 2), (2, 0), (2, 3)])
        search = DepthFirstSearch(g, 0)
        assert list(search) == [0, 1, 2, 3]
        assert search.predecessor == {1: 0, 2: 1, 3: 2}
        check_bracket_nesting(search)

    def test_empty_graph(self):
        search = DepthFirstSearch(DiGraph())
        assert list(search) == []
        assert search.time == 0


class TestDepthFirstForest:
    def test_disconnected_components(self):
        g = DiGraph([0, 1, 2, 3, 4], [(0, 1), (2, 3)])
        search = DepthFirstSearch(g, 2, mode=Traversal.FOREST)

        assert list(search) == [2, 3, 0, 1, 4]
        assert search.discovery_time == {2: 0, 3: 1, 0: 4, 1: 5, 4: 8}
        assert search.finish_time == {3: 2, 2: 3, 1: 6, 0: 7, 4: 9}
        assert search.predecessor == {3: 2, 1: 0}

    @pytest.mark.parametrize("seed", range(8))
    def test_visits_every_vertex_once(self, seed):
        g = DiGraph.from_edges(random_edges(seed))
        order = list(DepthFirstSearch(g, mode=Traversal.FOREST))
        assert sorted(order) == list(g.vertices())


class TestDepthFirstProperties:
    @pytest.mark.parametrize("seed", range(8))
    @pytest.mark.parametrize("mode", [Traversal.TREE, Traversal.FOREST])
    def test_bracket_nesting(self, seed, mode):
        g = DiGraph.from_edges(random_edges(seed))
        search = DepthFirstSearch(g, mode=mode)
        list(search)
        check_bracket_nesting(search)
        # Two ticks per discovered vertex
        assert search.time == 2 * len(search.discovery_time)

    @pytest.mark.parametrize("seed", range(8))
    def test_predecessors_are_edges(self, seed):
        g = Graph.from_edges(random_edges(seed, p=0.1))
        search = DepthFirstSearch(g, mode=Traversal.FOREST)
        list(search)
        for x, parent in search.predecessor.items():
            assert g.has_edge(parent, x)

    def test_partial_consumption_keeps_maps(self):
        g = DiGraph.from_edges(EDGES)
        search = DepthFirstSearch(g, 0)
        assert [next(search), next(search), next(search)] == [0, 1, 2]
        assert search.discovery_time == {0: 0, 1: 1, 2: 2}
        assert search.finish_time == {}
        assert next(search) == 3
        assert search.finish_time == {2: 3, 1: 4}


class TestDepthFirstPreconditions:
    def test_absent_source(self):
        g = Graph.from_edges([(0, 1)])
        with pytest.raises(VertexError):
            DepthFirstSearch(g, 42)

    def test_source_on_empty_graph(self):
        with pytest.raises(VertexError):
            DepthFirstSearch(Graph(), 0, mode=Traversal.FOREST)
