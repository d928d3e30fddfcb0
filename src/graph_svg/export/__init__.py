"""
Export functionality for graph renderings.

This module provides functions to turn graphs and scenes into files:
- SVG: Scalable Vector Graphics, always available
- PNG: Raster images via cairosvg, in ``graph_svg.export.image``
  (install the ``img`` extra)

Example usage:
    from graph_svg import Graph, Settings
    from graph_svg.export import graph_to_svg, graph_to_svg_string

    graph = Graph.from_links(5, [(i, (i + 1) % 5) for i in range(5)], directed=False)
    settings = Settings(width=400, height=400)

    svg_content = graph_to_svg_string(graph, settings)
    graph_to_svg(graph, settings, "build/graph.svg")
"""

from .svg import graph_to_svg, graph_to_svg_string, scene_to_svg

__all__ = [
    "scene_to_svg",
    "graph_to_svg_string",
    "graph_to_svg",
]
