"""Tests for scene composition."""

import pytest

from graph_svg import Circle, Graph, Line, Settings, Text, compose_scene
from graph_svg.scene import EDGE_CLOSENESS_THRESHOLD, edge_line, scale_position

SQUARE_POSITIONS = {0: (0.25, 0.25), 1: (0.75, 0.25), 2: (0.75, 0.75), 3: (0.25, 0.75)}


def square():
    return Graph.from_links(4, [(0, 1), (1, 2), (2, 3), (3, 0)], directed=False)


def square_settings(**options):
    return Settings(width=500, height=500, layout=SQUARE_POSITIONS.__getitem__, **options)


class TestScalePosition:
    """Normalized to canvas coordinates."""

    def test_margins_respected(self):
        """0 and 1 map to the inner margin edges."""
        assert scale_position((0.0, 0.0), 0.1, 0.2, 1000, 500) == pytest.approx((100.0, 100.0))
        assert scale_position((1.0, 1.0), 0.1, 0.2, 1000, 500) == pytest.approx((900.0, 400.0))

    def test_zero_margin(self):
        """Without margins the unit square fills the canvas."""
        assert scale_position((0.5, 0.25), 0.0, 0.0, 200, 100) == (100.0, 25.0)


class TestEdgeLine:
    """Edge trimming and the closeness rule."""

    def test_trimmed_by_radius(self):
        """Lines end on the circle boundaries."""
        line = edge_line((0.0, 0.0), (100.0, 0.0), 10.0, "black", 2.0)
        assert (line.x1, line.y1, line.x2, line.y2) == (10.0, 0.0, 90.0, 0.0)
        assert line.midpoint == (50.0, 0.0)

    def test_diagonal(self):
        """Trimming follows the edge direction."""
        line = edge_line((0.0, 0.0), (30.0, 40.0), 5.0, "black", 1.0)
        assert line.x1 == pytest.approx(3.0)
        assert line.y1 == pytest.approx(4.0)
        assert line.x2 == pytest.approx(27.0)
        assert line.y2 == pytest.approx(36.0)

    def test_close_endpoints_skipped(self):
        """Endpoints closer than the threshold produce no line."""
        assert edge_line((1.0, 1.0), (1.0, 1.0), 5.0, "black", 1.0) is None
        near = (1.0 + EDGE_CLOSENESS_THRESHOLD / 2, 1.0)
        assert edge_line((1.0, 1.0), near, 5.0, "black", 1.0) is None


class TestComposeScene:
    """Primitive order and styling."""

    def test_square_primitive_order(self):
        """Nodes first (circle, label), then edges (line, label)."""
        scene = compose_scene(square(), SQUARE_POSITIONS.__getitem__, square_settings())
        kinds = [type(p) for p in scene]
        assert kinds == [Circle, Text] * 4 + [Line, Text] * 4

    def test_square_geometry(self):
        """Positions are scaled into the canvas and edges trimmed."""
        scene = compose_scene(square(), SQUARE_POSITIONS.__getitem__, square_settings())

        circle, label = scene[0], scene[1]
        assert (circle.cx, circle.cy) == (pytest.approx(137.5), pytest.approx(137.5))
        assert (circle.r, circle.fill, circle.stroke) == (25.0, "white", "black")
        assert label.text == "0"
        assert label.x == pytest.approx(137.5)

        line, edge_label = scene[8], scene[9]
        assert line.x1 == pytest.approx(162.5)
        assert line.y1 == pytest.approx(137.5)
        assert line.x2 == pytest.approx(337.5)
        assert line.stroke == "black"
        assert line.stroke_width == 5.0
        assert edge_label.text == ""
        assert edge_label.fill == "blue"
        assert edge_label.x == pytest.approx(250.0)

    def test_self_loop_skipped(self):
        """A self loop draws its node but no line or label."""
        graph = Graph.from_links(1, [(0, 0)])
        scene = compose_scene(graph, lambda node: (0.5, 0.5), Settings())
        assert [type(p) for p in scene] == [Circle, Text]

    def test_coincident_nodes_skip_edge(self):
        """Edges between coincident nodes are dropped, nodes kept."""
        graph = Graph.from_links(3, [(0, 1), (1, 2)])
        positions = {0: (0.5, 0.5), 1: (0.5, 0.5), 2: (1.0, 1.0)}
        scene = compose_scene(graph, positions.__getitem__, Settings())
        assert sum(isinstance(p, Circle) for p in scene) == 3
        assert sum(isinstance(p, Line) for p in scene) == 1

    def test_label_and_color_functions(self):
        """Custom label and color functions are applied."""
        graph = Graph(nodes=["Ljubljana", "Bielefeld"], links=[(0, 1)])
        settings = square_settings(
            node_label_fn=graph.node_weight,
            edge_label_fn=lambda edge: f"e{edge}",
            node_color_fn=lambda node: "yellow",
            edge_color_fn=lambda edge: "red",
        )
        scene = compose_scene(graph, SQUARE_POSITIONS.__getitem__, settings)

        assert scene[0].fill == "yellow"
        assert scene[1].text == "Ljubljana"
        assert scene[3].text == "Bielefeld"
        assert scene[4].stroke == "red"
        assert scene[5].text == "e0"

    def test_empty_graph(self):
        """An empty graph yields an empty scene."""
        assert compose_scene(Graph(), lambda node: (0.0, 0.0), Settings()) == []
