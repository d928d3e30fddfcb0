#!/usr/bin/env python3
"""
SVG showcase of graph rendering.

Renders a set of example graphs with every layout algorithm, custom labels
and custom colors, and collects them on one HTML page.

Usage:
    python scripts/showcase.py

Output:
    build/*.svg
    build/showcase.html
"""

from __future__ import annotations

from dataclasses import dataclass
from html import escape
from pathlib import Path
from typing import Callable

from graph_svg import (
    BipartiteLayout,
    CircularLayout,
    FruchtermanReingoldLayout,
    Graph,
    HierarchicalLayout,
    Orientation,
    Settings,
    SettingsBuilder,
)
from graph_svg.export import graph_to_svg

# Output directory
BUILD_DIR = Path(__file__).parent.parent / "build"

LAYER_COLORS = ["red", "orange", "yellow", "green", "cyan", "blue", "purple"]


@dataclass
class Example:
    """One rendered example."""

    name: str
    description: str
    build: Callable[[], tuple[Graph, Settings]]


# =============================================================================
# Graphs
# =============================================================================


def chorded_ring() -> Graph:
    """Ten node ring with three chords."""
    links = [(i, (i + 1) % 10) for i in range(10)] + [(0, 5), (2, 7), (3, 8)]
    return Graph.from_links(10, links, directed=False)


def complete_graph(n: int) -> Graph:
    links = [(i, j) for i in range(n) for j in range(i + 1, n)]
    return Graph.from_links(n, links, directed=False)


def nested_squares(layers: int = 7) -> tuple[Graph, list[int], dict[int, tuple[float, float]]]:
    """
    Concentric square rings joined at their corners.

    Returns the graph, the ring of every node, and fixed positions.
    """
    graph = Graph(directed=False)
    ring_of: list[int] = []
    positions: dict[int, tuple[float, float]] = {}
    rings: list[list[int]] = []

    for ring in range(layers):
        side = (ring + 1) * 2
        scale = 0.15 + 0.8 * ring / (layers - 1)
        low, high = 0.5 - scale / 2, 0.5 + scale / 2
        step = scale / (side - 1)

        # Clockwise from the top-left corner
        points = [(low + i * step, low) for i in range(side)]
        points += [(high, low + i * step) for i in range(1, side)]
        points += [(high - i * step, high) for i in range(1, side)]
        points += [(low, high - i * step) for i in range(1, side - 1)]

        nodes = []
        for point in points:
            node = graph.add_node()
            nodes.append(node)
            ring_of.append(ring)
            positions[node] = point
        for i, node in enumerate(nodes):
            graph.add_edge(node, nodes[(i + 1) % len(nodes)])
        rings.append(nodes)

    for inner, outer in zip(rings, rings[1:]):
        for corner in range(4):
            graph.add_edge(
                inner[corner * len(inner) // 4],
                outer[corner * len(outer) // 4],
            )

    return graph, ring_of, positions


# =============================================================================
# Examples
# =============================================================================


def custom_labels() -> tuple[Graph, Settings]:
    graph = Graph(
        directed=False,
        nodes=["Ljubljana", "Bielefeld", "Cape Town", "Lima"],
        links=[(0, 1), (1, 2), (2, 3), (3, 0)],
    )
    settings = (
        SettingsBuilder()
        .node_radius(50)
        .margin_x(0.1)
        .margin_y(0.1)
        .node_label_fn(graph.node_weight)
        .edge_label_fn(lambda edge: "An edge")
        .build()
    )
    return graph, settings


def custom_colors() -> tuple[Graph, Settings]:
    graph, ring_of, positions = nested_squares()
    settings = (
        SettingsBuilder()
        .node_radius(15)
        .position_map(lambda node: positions.get(node, (0.5, 0.5)))
        .node_color_fn(lambda node: LAYER_COLORS[ring_of[node]])
        .node_label_fn(lambda node: "")
        .margin_x(0.01)
        .margin_y(0.01)
        .build()
    )
    return graph, settings


def square_with_position_map() -> tuple[Graph, Settings]:
    graph = Graph.from_links(4, [(0, 1), (1, 2), (2, 3), (3, 0)], directed=False)
    positions = {0: (0.25, 0.25), 1: (0.75, 0.25), 2: (0.75, 0.75), 3: (0.25, 0.75)}
    return graph, Settings(width=500, height=500, layout=positions.__getitem__)


def with_layout(graph_fn: Callable[[], Graph], layout, **options) -> Callable:
    def build() -> tuple[Graph, Settings]:
        return graph_fn(), Settings(layout=layout, **options)

    return build


EXAMPLES: list[Example] = [
    Example(
        "complete_graph_circular",
        "Complete graph on 100 nodes, circular layout",
        with_layout(lambda: complete_graph(100), CircularLayout(), node_radius=5, stroke_width=2),
    ),
    Example(
        "bipartite_layout",
        "Chorded ring, discovered bipartition",
        with_layout(chorded_ring, BipartiteLayout(), node_radius=30, font_size=20),
    ),
    Example(
        "force_directed_layout",
        "Chorded ring, Fruchterman-Reingold",
        with_layout(
            chorded_ring,
            FruchtermanReingoldLayout(iterations=2000),
            node_radius=30,
            font_size=20,
        ),
    ),
    Example(
        "hierarchical_layout",
        "Complete graph on 5 nodes, right to left",
        with_layout(
            lambda: complete_graph(5),
            HierarchicalLayout(orientation=Orientation.RIGHT_TO_LEFT),
        ),
    ),
    Example("custom_labels", "Node and edge labels", custom_labels),
    Example("custom_colors", "Fixed positions, colored by ring", custom_colors),
    Example("square_position_map", "Custom position map", square_with_position_map),
]


def generate_html(rendered: list[tuple[Example, Path]]) -> str:
    """Build an HTML page embedding every rendered SVG."""
    cards = "\n".join(
        f'<figure><img src="{escape(path.name)}" width="400">'
        f"<figcaption><b>{escape(example.name)}</b><br>{escape(example.description)}"
        f"</figcaption></figure>"
        for example, path in rendered
    )
    return (
        "<!DOCTYPE html>\n<html>\n<head><meta charset=\"utf-8\">"
        "<title>graph-svg showcase</title></head>\n"
        f"<body>\n<h1>graph-svg showcase</h1>\n{cards}\n</body>\n</html>\n"
    )


def main() -> None:
    rendered = []
    for example in EXAMPLES:
        print(f"Rendering {example.name}...")
        graph, settings = example.build()
        path = graph_to_svg(graph, settings, BUILD_DIR / f"{example.name}.svg", background="white")
        print(f"  Saved: {path}")
        rendered.append((example, path))

    output_path = BUILD_DIR / "showcase.html"
    output_path.write_text(generate_html(rendered), encoding="utf-8")
    print(f"\nShowcase saved to: {output_path.absolute()}")


if __name__ == "__main__":
    main()
