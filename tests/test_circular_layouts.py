"""
Tests for CircularLayout.
"""

import math

import pytest

from graph_svg import CircularLayout, EventType, Graph, LayoutNotRunError, circular_layout


def ring(n, directed=False):
    return Graph.from_links(n, [(i, (i + 1) % n) for i in range(n)], directed=directed)


class TestCircularLayoutBasic:
    """Basic functionality tests."""

    def test_layout_runs_without_error(self):
        """run() returns self."""
        layout = CircularLayout(graph=ring(5))
        assert layout.run() is layout

    def test_positions_on_circle(self):
        """Every node lies at distance 0.5 from the centre."""
        graph = ring(7)
        position_map = circular_layout(graph)

        for node in graph.node_ids():
            x, y = position_map(node)
            assert math.hypot(x - 0.5, y - 0.5) == pytest.approx(0.5)

    @pytest.mark.parametrize("n", [2, 4, 6, 10])
    def test_opposite_indices_antipodal(self, n):
        """Index 0 and index N/2 are antipodal."""
        position_map = circular_layout(ring(n))
        x0, y0 = position_map(0)
        xh, yh = position_map(n // 2)

        assert x0 + xh == pytest.approx(1.0)
        assert y0 + yh == pytest.approx(1.0)

    def test_index_zero_at_top(self):
        """Index 0 starts at the top of the circle."""
        x, y = circular_layout(ring(4))(0)
        assert x == pytest.approx(0.5)
        assert y == pytest.approx(0.0)

    def test_square_positions(self):
        """Four nodes go to top, right, bottom, left."""
        position_map = circular_layout(ring(4))
        expected = [(0.5, 0.0), (1.0, 0.5), (0.5, 1.0), (0.0, 0.5)]
        for node, (ex, ey) in enumerate(expected):
            x, y = position_map(node)
            assert x == pytest.approx(ex, abs=1e-12)
            assert y == pytest.approx(ey, abs=1e-12)

    def test_empty_graph(self):
        """Empty graph produces an empty map."""
        position_map = circular_layout(Graph())
        assert len(position_map) == 0
        assert position_map.as_dict() == {}

    def test_single_node_at_centre(self):
        """A single node sits at the centre."""
        graph = Graph(nodes=["only"])
        assert circular_layout(graph)(0) == (0.5, 0.5)

    def test_position_map_before_run_raises(self):
        """Results are unavailable before run()."""
        with pytest.raises(LayoutNotRunError):
            CircularLayout(graph=ring(3)).position_map

    def test_run_without_graph_raises(self):
        """A graph is required."""
        with pytest.raises(ValueError, match="requires a graph"):
            CircularLayout().run()


class TestCircularLayoutConfiguration:
    """Configuration property tests."""

    def test_start_angle(self):
        """start_angle rotates the first slot."""
        layout = CircularLayout(start_angle=0.0)
        assert layout.start_angle == 0.0
        x, y = layout.run(ring(4)).position_map(0)
        assert x == pytest.approx(1.0)
        assert y == pytest.approx(0.5)

    def test_sort_by_degree(self):
        """The highest degree node takes the first slot."""
        graph = Graph.from_links(4, [(3, 0), (3, 1), (3, 2)])
        position_map = CircularLayout(sort_by="degree").run(graph).position_map
        x, y = position_map(3)
        assert x == pytest.approx(0.5)
        assert y == pytest.approx(0.0)

    def test_sort_by_callable(self):
        """A callable sort key orders the slots."""
        graph = Graph(nodes=["c", "a", "b"])
        layout = CircularLayout(sort_by=graph.node_weight)
        position_map = layout.run(graph).position_map
        # "a" (node 1) sorts first
        assert position_map(1)[1] == pytest.approx(0.0)

    def test_invalid_sort_by_raises(self):
        """Unknown sort keys are rejected at run time."""
        with pytest.raises(ValueError, match="sort_by"):
            CircularLayout(sort_by="weight").run(ring(3))

    def test_layout_is_reusable(self):
        """One instance can lay out several graphs."""
        layout = CircularLayout()
        assert len(layout(ring(3))) == 3
        assert len(layout(ring(5))) == 5


class TestCircularLayoutEvents:
    """Event system tests."""

    def test_start_and_end_events(self):
        """Static layouts fire start and end."""
        fired = []
        layout = CircularLayout(
            graph=ring(3),
            on_start=lambda e: fired.append(e["type"]),
            on_end=lambda e: fired.append(e["type"]),
        )
        layout.run()
        assert fired == [EventType.start, EventType.end]

    def test_on_method_with_string(self):
        """on() accepts event names."""
        fired = []
        CircularLayout(graph=ring(3)).on("end", fired.append).run()
        assert len(fired) == 1
