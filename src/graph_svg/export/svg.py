"""
SVG export for graph scenes.

Serializes draw primitives into an SVG document, and offers the
graph -> layout -> scene -> SVG pipeline in one call.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Optional, Sequence, Union
from xml.sax.saxutils import escape

from ..scene import Circle, Line, Primitive, Text, compose_scene

if TYPE_CHECKING:
    from ..graph import GraphLike
    from ..settings import Settings


def scene_to_svg(
    scene: Sequence[Primitive],
    width: float,
    height: float,
    *,
    background: Optional[str] = None,
) -> str:
    """
    Serialize a scene to an SVG document.

    Args:
        scene: Primitives in drawing order
        width: Canvas width in pixels
        height: Canvas height in pixels
        background: Background color (default None for transparent)

    Returns:
        SVG string
    """
    w, h = _fmt(width), _fmt(height)
    svg_parts = [
        f'<svg xmlns="http://www.w3.org/2000/svg" '
        f'width="{w}" height="{h}" viewBox="0 0 {w} {h}">'
    ]

    if background:
        svg_parts.append(f'  <rect width="100%" height="100%" fill="{escape(background)}"/>')

    for primitive in scene:
        svg_parts.append(_render(primitive))

    svg_parts.append("</svg>")
    return "\n".join(svg_parts)


def graph_to_svg_string(
    graph: GraphLike,
    settings: Settings,
    *,
    background: Optional[str] = None,
) -> str:
    """
    Lay out ``graph`` and render it to an SVG string.

    The layout (or custom position map) comes from ``settings``.
    """
    position_map = settings.position_map_for(graph)
    scene = compose_scene(graph, position_map, settings)
    return scene_to_svg(scene, settings.width, settings.height, background=background)


def graph_to_svg(
    graph: GraphLike,
    settings: Settings,
    path: Union[str, Path],
    *,
    background: Optional[str] = None,
) -> Path:
    """
    Render ``graph`` to an SVG file, creating parent directories as needed.

    Returns:
        Path of the written file

    Raises:
        OSError: If the file cannot be written.
    """
    path = Path(path)
    svg = graph_to_svg_string(graph, settings, background=background)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(svg, encoding="utf-8")
    return path


def _render(primitive: Primitive) -> str:
    """Render one primitive as an SVG element."""
    if isinstance(primitive, Circle):
        return (
            f'  <circle cx="{_fmt(primitive.cx)}" cy="{_fmt(primitive.cy)}" '
            f'r="{_fmt(primitive.r)}" fill="{escape(primitive.fill)}" '
            f'stroke="{escape(primitive.stroke)}"/>'
        )
    if isinstance(primitive, Line):
        return (
            f'  <line x1="{_fmt(primitive.x1)}" y1="{_fmt(primitive.y1)}" '
            f'x2="{_fmt(primitive.x2)}" y2="{_fmt(primitive.y2)}" '
            f'stroke="{escape(primitive.stroke)}" stroke-width="{_fmt(primitive.stroke_width)}"/>'
        )
    if isinstance(primitive, Text):
        return (
            f'  <text x="{_fmt(primitive.x)}" y="{_fmt(primitive.y)}" '
            f'font-size="{_fmt(primitive.font_size)}px" '
            f'font-family="{escape(primitive.font_family)}" fill="{escape(primitive.fill)}" '
            f'text-anchor="middle" dominant-baseline="central">'
            f"{escape(primitive.text)}</text>"
        )
    raise TypeError(f"Unknown primitive: {primitive!r}")


def _fmt(value: float) -> str:
    """Format a coordinate with at most 3 decimals and no trailing zeros."""
    text = f"{value:.3f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


__all__ = [
    "scene_to_svg",
    "graph_to_svg_string",
    "graph_to_svg",
]
