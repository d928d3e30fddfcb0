"""
PNG export for graph renderings.

Rasterizes SVG documents with cairosvg. Requires the ``img`` extra:

    pip install graph-svg[img]

Example usage:
    from graph_svg.export.image import graph_to_png

    graph_to_png(graph, settings, "build/graph.png")
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Union
from xml.etree.ElementTree import ParseError

import cairosvg

from .svg import graph_to_svg_string

if TYPE_CHECKING:
    from ..graph import GraphLike
    from ..settings import Settings


class SvgToImageError(RuntimeError):
    """Raised when SVG data cannot be parsed or rasterized."""

    pass


def svg_to_png_bytes(svg_data: str, width: float, height: float) -> bytes:
    """
    Rasterize SVG data to PNG bytes of ``width`` x ``height`` pixels.

    Raises:
        SvgToImageError: If the SVG data cannot be parsed or rendered.
    """
    try:
        png = cairosvg.svg2png(
            bytestring=svg_data.encode("utf-8"),
            output_width=int(width),
            output_height=int(height),
        )
    except (ParseError, ValueError) as exc:
        raise SvgToImageError(f"SVG parsing error: {exc}") from exc
    if png is None:
        raise SvgToImageError("Rasterizer produced no output")
    return png


def svg_to_png(
    svg_data: str,
    width: float,
    height: float,
    path: Union[str, Path],
) -> Path:
    """
    Rasterize SVG data into a PNG file, creating parent directories.

    Raises:
        SvgToImageError: If the SVG data cannot be parsed or rendered.
        OSError: If the file cannot be written.
    """
    path = Path(path)
    png = svg_to_png_bytes(svg_data, width, height)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(png)
    return path


def graph_to_png(graph: GraphLike, settings: Settings, path: Union[str, Path]) -> Path:
    """Lay out ``graph`` and render it to a PNG file sized by ``settings``."""
    svg = graph_to_svg_string(graph, settings, background="white")
    return svg_to_png(svg, settings.width, settings.height, path)


__all__ = [
    "SvgToImageError",
    "svg_to_png_bytes",
    "svg_to_png",
    "graph_to_png",
]
