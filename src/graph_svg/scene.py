"""
Scene composition.

Turns a position map plus render settings into an ordered list of draw
primitives in absolute canvas coordinates. This is the only consumer of
position maps, so any layout (or hand-written position function) renders
the same way.

Order: for every node a Circle followed by its Text label, then for every
edge a Line followed by its Text label.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Union

from .graph import GraphLike
from .settings import DEFAULT_EDGE_COLOR, DEFAULT_NODE_COLOR, Settings
from .types import Position, PositionMapFn

# Scaled endpoints closer than this produce no edge (self loops, coincident nodes)
EDGE_CLOSENESS_THRESHOLD = 0.001

FONT_FAMILY = "DejaVu Sans, sans-serif"
NODE_STROKE = "black"
NODE_LABEL_FILL = "black"
EDGE_LABEL_FILL = "blue"


@dataclass(frozen=True)
class Circle:
    """A node disc."""

    cx: float
    cy: float
    r: float
    fill: str
    stroke: str = NODE_STROKE


@dataclass(frozen=True)
class Text:
    """A label centred on (x, y)."""

    x: float
    y: float
    text: str
    font_size: float
    fill: str = NODE_LABEL_FILL
    font_family: str = FONT_FAMILY


@dataclass(frozen=True)
class Line:
    """A straight edge segment."""

    x1: float
    y1: float
    x2: float
    y2: float
    stroke: str
    stroke_width: float

    @property
    def midpoint(self) -> Position:
        """Get the midpoint of the segment."""
        return (self.x1 + self.x2) / 2, (self.y1 + self.y2) / 2


Primitive = Union[Circle, Text, Line]


def scale_position(
    position: Position,
    margin_x: float,
    margin_y: float,
    width: float,
    height: float,
) -> Position:
    """
    Map a normalized position onto the canvas, leaving the margins free.

    ``scaled = margin * dimension + normalized * dimension * (1 - 2 * margin)``
    """
    x, y = position
    return (
        margin_x * width + x * width * (1.0 - 2.0 * margin_x),
        margin_y * height + y * height * (1.0 - 2.0 * margin_y),
    )


def compose_scene(
    graph: GraphLike,
    position_map: PositionMapFn,
    settings: Settings,
) -> list[Primitive]:
    """
    Build the draw primitives for ``graph``.

    Args:
        graph: Graph to draw
        position_map: Node handle -> normalized (x, y)
        settings: Geometry, label and color settings

    Returns:
        Primitives in drawing order
    """
    scene: list[Primitive] = []
    radius = settings.node_radius
    font_size = settings.font_size

    def scaled(node: Any) -> Position:
        return scale_position(
            position_map(node),
            settings.margin_x,
            settings.margin_y,
            settings.width,
            settings.height,
        )

    for node in graph.node_ids():
        x, y = scaled(node)
        label = (
            settings.node_label_fn(node)
            if settings.node_label_fn is not None
            else str(graph.to_index(node))
        )
        fill = settings.node_color_fn(node) if settings.node_color_fn else DEFAULT_NODE_COLOR
        scene.append(Circle(x, y, radius, fill))
        scene.append(Text(x, y, str(label), font_size))

    for edge in graph.edge_ids():
        source, target = graph.edge_endpoints(edge)
        line = edge_line(
            scaled(source),
            scaled(target),
            radius,
            settings.edge_color_fn(edge) if settings.edge_color_fn else DEFAULT_EDGE_COLOR,
            settings.stroke_width,
        )
        if line is None:
            continue

        label = settings.edge_label_fn(edge) if settings.edge_label_fn is not None else ""
        mid_x, mid_y = line.midpoint
        scene.append(line)
        scene.append(Text(mid_x, mid_y, str(label), font_size, fill=EDGE_LABEL_FILL))

    return scene


def edge_line(
    source: Position,
    target: Position,
    radius: float,
    stroke: str,
    stroke_width: float,
) -> Line | None:
    """
    Line between two node centres, trimmed to the circle boundaries.

    Returns None when the centres are closer than EDGE_CLOSENESS_THRESHOLD.
    """
    dx = target[0] - source[0]
    dy = target[1] - source[1]
    distance = math.hypot(dx, dy)
    if distance < EDGE_CLOSENESS_THRESHOLD:
        return None

    ux = dx / distance
    uy = dy / distance
    return Line(
        source[0] + radius * ux,
        source[1] + radius * uy,
        target[0] - radius * ux,
        target[1] - radius * uy,
        stroke,
        stroke_width,
    )


__all__ = [
    "Circle",
    "Text",
    "Line",
    "Primitive",
    "EDGE_CLOSENESS_THRESHOLD",
    "scale_position",
    "compose_scene",
    "edge_line",
]
