"""Tests for the built-in Graph and the GraphLike helpers."""

import pytest

from graph_svg import Direction, Graph
from graph_svg.graph import node_count, out_degree
from graph_svg.validation import InvalidLinkError


class TestGraphConstruction:
    """Building graphs node by node and from links."""

    def test_add_node_returns_dense_handles(self):
        """Node handles are consecutive integers."""
        graph = Graph()
        assert [graph.add_node(label) for label in "abc"] == [0, 1, 2]
        assert graph.node_count == 3
        assert graph.node_weight(1) == "b"

    def test_add_edge_returns_handle(self):
        """Edge handles are consecutive integers with stored weights."""
        graph = Graph()
        a, b = graph.add_node(), graph.add_node()
        edge = graph.add_edge(a, b, "road")
        assert edge == 0
        assert graph.edge_count == 1
        assert graph.edge_endpoints(edge) == (a, b)
        assert graph.edge_weight(edge) == "road"

    def test_add_edge_out_of_bounds_raises(self):
        """Edges must reference existing nodes."""
        graph = Graph()
        graph.add_node()
        with pytest.raises(InvalidLinkError, match="target 5 out of bounds"):
            graph.add_edge(0, 5)

    def test_from_links_accepts_pairs_and_dicts(self):
        """Links may be pairs or dicts with an optional weight."""
        graph = Graph.from_links(3, [(0, 1), {"source": 1, "target": 2, "weight": 7}])
        assert graph.node_count == 3
        assert list(graph.edge_ids()) == [0, 1]
        assert graph.edge_weight(1) == 7

    def test_from_links_invalid_index_raises(self):
        """Out of bounds link indices are reported together."""
        with pytest.raises(InvalidLinkError, match="Invalid link indices"):
            Graph.from_links(2, [(0, 1), (1, 4)])

    def test_self_loops_and_parallel_edges(self):
        """Self loops and parallel edges are allowed."""
        graph = Graph.from_links(2, [(0, 0), (0, 1), (0, 1)])
        assert graph.edge_count == 3
        assert list(graph.neighbors(0)) == [0, 1, 1]

    def test_repr(self):
        """repr names direction and sizes."""
        assert repr(Graph.from_links(2, [(0, 1)], directed=False)) == (
            "Graph(undirected, nodes=2, edges=1)"
        )


class TestGraphAccess:
    """GraphLike methods."""

    def test_index_round_trip(self):
        """Node handles are their own dense index."""
        graph = Graph(nodes=["x", "y"])
        assert graph.node_bound() == 2
        assert graph.to_index(1) == 1
        assert graph.from_index(0) == 0

    def test_directed_neighbors(self):
        """Directed graphs separate outgoing and incoming neighbors."""
        graph = Graph.from_links(3, [(0, 1), (2, 1)])
        assert list(graph.neighbors(0)) == [1]
        assert list(graph.neighbors(1)) == []
        assert list(graph.neighbors_directed(1, Direction.INCOMING)) == [0, 2]
        assert list(graph.neighbors_directed(0, Direction.OUTGOING)) == [1]

    def test_undirected_neighbors_ignore_direction(self):
        """Undirected edges are traversable both ways."""
        graph = Graph.from_links(3, [(0, 1), (1, 2)], directed=False)
        assert list(graph.neighbors(1)) == [0, 2]
        assert list(graph.neighbors_directed(1, Direction.INCOMING)) == [0, 2]
        assert list(graph.neighbors_directed(1, Direction.OUTGOING)) == [0, 2]

    def test_undirected_self_loop_listed_once(self):
        """An undirected self loop is not doubled."""
        graph = Graph.from_links(1, [(0, 0)], directed=False)
        assert list(graph.neighbors(0)) == [0]

    def test_helpers(self):
        """out_degree and node_count work on any GraphLike."""
        graph = Graph.from_links(4, [(0, 1), (0, 2), (0, 3)])
        assert out_degree(graph, 0) == 3
        assert out_degree(graph, 3) == 0
        assert node_count(graph) == 4
