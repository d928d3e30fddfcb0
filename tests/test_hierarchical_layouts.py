"""
Tests for HierarchicalLayout.
"""

import pytest

from graph_svg import Graph, HierarchicalLayout, Orientation, hierarchical_layout

NODES = ["a", "b", "c", "d", "e"]


def chain():
    """a -> b, b -> c, b -> d, d -> e"""
    return Graph.from_links(5, [(0, 1), (1, 2), (1, 3), (3, 4)])


def assert_positions(position_map, expected):
    for node, (ex, ey) in expected.items():
        x, y = position_map(node)
        assert x == pytest.approx(ex), NODES[node] if node < len(NODES) else node
        assert y == pytest.approx(ey), NODES[node] if node < len(NODES) else node


class TestHierarchicalBasic:
    """Basic functionality tests."""

    def test_layout_runs_without_error(self):
        """run() returns self."""
        layout = HierarchicalLayout(graph=chain())
        assert layout.run() is layout

    def test_chain_top_to_bottom(self):
        """Rows follow depth, b is centred over c and d."""
        position_map = hierarchical_layout(chain())
        assert_positions(
            position_map,
            {
                0: (0.5, 0.0),
                1: (0.5, 1 / 3),
                2: (0.0, 2 / 3),
                3: (1.0, 2 / 3),
                4: (1.0, 1.0),
            },
        )

    def test_grid_positions(self):
        """Grid positions are (column, row) before normalization."""
        layout = HierarchicalLayout(graph=chain()).run()
        assert layout.grid_positions == {
            0: (0.5, 0),
            1: (0.5, 1),
            2: (0.0, 2),
            3: (1.0, 2),
            4: (1.0, 3),
        }
        assert layout.max_row == 3
        assert layout.max_col == 1

    def test_tree_edges_step_one_row(self):
        """Children sit exactly one row below their parent."""
        graph = chain()
        layout = HierarchicalLayout(graph=graph).run()
        rows = {node: row for node, (_, row) in layout.grid_positions.items()}
        for edge in graph.edge_ids():
            parent, child = graph.edge_endpoints(edge)
            assert rows[child] == rows[parent] + 1

    def test_rows_in_unit_interval(self):
        """Normalized coordinates lie in [0, 1]."""
        position_map = hierarchical_layout(chain())
        for x, y in position_map.as_dict().values():
            assert 0.0 <= x <= 1.0
            assert 0.0 <= y <= 1.0

    def test_empty_graph(self):
        """Empty graph should not raise errors."""
        assert len(hierarchical_layout(Graph())) == 0

    def test_single_node(self):
        """A single node sits at the origin of the grid."""
        assert hierarchical_layout(Graph(nodes=[None]))(0) == (0.0, 0.0)


class TestHierarchicalOrientation:
    """Orientation transforms."""

    def test_bottom_to_top_mirrors_rows(self):
        """BOTTOM_TO_TOP flips the row axis."""
        graph = chain()
        down = hierarchical_layout(graph, Orientation.TOP_TO_BOTTOM)
        up = hierarchical_layout(graph, Orientation.BOTTOM_TO_TOP)
        for node in graph.node_ids():
            assert up(node)[0] == pytest.approx(down(node)[0])
            assert up(node)[1] == pytest.approx(1.0 - down(node)[1])

    def test_left_to_right_transposes(self):
        """LEFT_TO_RIGHT swaps rows and columns."""
        graph = chain()
        down = hierarchical_layout(graph)
        right = hierarchical_layout(graph, "left-to-right")
        for node in graph.node_ids():
            assert right(node) == (pytest.approx(down(node)[1]), pytest.approx(down(node)[0]))

    def test_right_to_left_mirrors_transpose(self):
        """RIGHT_TO_LEFT is the mirrored transpose."""
        graph = chain()
        down = hierarchical_layout(graph)
        left = hierarchical_layout(graph, Orientation.RIGHT_TO_LEFT)
        for node in graph.node_ids():
            assert left(node)[0] == pytest.approx(1.0 - down(node)[1])
            assert left(node)[1] == pytest.approx(down(node)[0])

    def test_orientation_property(self):
        """orientation accepts members and strings."""
        layout = HierarchicalLayout(orientation="bottom-to-top")
        assert layout.orientation is Orientation.BOTTOM_TO_TOP
        layout.orientation = Orientation.LEFT_TO_RIGHT
        assert layout.orientation is Orientation.LEFT_TO_RIGHT

    def test_invalid_orientation_raises(self):
        """Unknown orientations are rejected."""
        with pytest.raises(ValueError, match="orientation must be one of"):
            HierarchicalLayout(orientation="diagonal")


class TestHierarchicalStructure:
    """Cycles, undirected and disconnected graphs."""

    def test_cycle_terminates(self):
        """A directed cycle is laid out as a chain from node 0."""
        graph = Graph.from_links(3, [(0, 1), (1, 2), (2, 0)])
        assert_positions(
            hierarchical_layout(graph),
            {0: (0.0, 0.0), 1: (0.0, 0.5), 2: (0.0, 1.0)},
        )

    def test_undirected_root_is_highest_degree(self):
        """Without sources the busiest node becomes the root."""
        graph = Graph.from_links(3, [(0, 1), (1, 2)], directed=False)
        assert_positions(
            hierarchical_layout(graph),
            {1: (0.5, 0.0), 0: (0.0, 1.0), 2: (1.0, 1.0)},
        )

    def test_components_tiled_left_to_right(self):
        """Disconnected trees occupy separate columns."""
        graph = Graph.from_links(4, [(0, 1), (2, 3)])
        assert_positions(
            hierarchical_layout(graph),
            {0: (0.0, 0.0), 1: (0.0, 1.0), 2: (1.0, 0.0), 3: (1.0, 1.0)},
        )

    def test_deep_chain_does_not_recurse(self):
        """Very deep hierarchies stay within the recursion limit."""
        n = 5000
        graph = Graph.from_links(n, [(i, i + 1) for i in range(n - 1)])
        position_map = hierarchical_layout(graph)
        assert position_map(n - 1) == (0.0, 1.0)
