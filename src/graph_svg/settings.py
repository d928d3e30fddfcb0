"""
Settings for graph rendering.

``Settings`` bundles canvas geometry, the layout (or a custom position map)
and the label/color functions used by the scene composer. Values are
validated when set, so a ``Settings`` instance is always renderable.

``SettingsBuilder`` offers the same configuration as a fluent chain that is
validated once, on ``build()``.

Example:
    settings = (
        SettingsBuilder()
        .width(500)
        .height(500)
        .node_radius(30)
        .layout(HierarchicalLayout(orientation="left-to-right"))
        .node_label_fn(lambda node: graph.node_weight(node))
        .build()
    )
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Optional, Union

if TYPE_CHECKING:
    from typing_extensions import Self

from .base import BaseLayout
from .circular import CircularLayout
from .graph import GraphLike
from .types import PositionMapFn
from .validation import (
    validate_dimensions,
    validate_font_size,
    validate_margins,
    validate_radius,
    validate_stroke_width,
)

DEFAULT_WIDTH = 1000.0
DEFAULT_HEIGHT = 1000.0
DEFAULT_RADIUS = 25.0
DEFAULT_FONT_SIZE = 16.0
DEFAULT_STROKE_WIDTH = 5.0
DEFAULT_MARGIN = 0.05
DEFAULT_NODE_COLOR = "white"
DEFAULT_EDGE_COLOR = "black"

LabelFn = Callable[[Any], str]
ColorFn = Callable[[Any], str]
LayoutOrPositionMap = Union[BaseLayout, PositionMapFn]


class Settings:
    """
    Validated render settings.

    Attributes:
        width, height: Canvas size in pixels (> 0)
        node_radius: Circle radius in pixels (> 0)
        font_size: Label font size in pixels (> 0)
        stroke_width: Edge line width in pixels (> 0)
        margin_x, margin_y: Fraction of width/height left free on each
            side, in [0.0, 0.5)
        layout: A layout instance, or any callable mapping a node handle to
            normalized (x, y)
        node_label_fn: Node handle -> label. None labels nodes by dense index.
        edge_label_fn: Edge handle -> label. None leaves edges unlabeled.
        node_color_fn: Node handle -> fill color. None fills white.
        edge_color_fn: Edge handle -> stroke color. None strokes black.
    """

    def __init__(
        self,
        *,
        width: float = DEFAULT_WIDTH,
        height: float = DEFAULT_HEIGHT,
        node_radius: float = DEFAULT_RADIUS,
        font_size: float = DEFAULT_FONT_SIZE,
        stroke_width: float = DEFAULT_STROKE_WIDTH,
        margin_x: float = DEFAULT_MARGIN,
        margin_y: float = DEFAULT_MARGIN,
        layout: Optional[LayoutOrPositionMap] = None,
        node_label_fn: Optional[LabelFn] = None,
        edge_label_fn: Optional[LabelFn] = None,
        node_color_fn: Optional[ColorFn] = None,
        edge_color_fn: Optional[ColorFn] = None,
    ) -> None:
        """
        Initialize settings.

        Raises:
            InvalidDimensionsError: If width or height is not positive.
            InvalidRadiusError: If node_radius is not positive.
            InvalidFontSizeError: If font_size is not positive.
            InvalidStrokeWidthError: If stroke_width is not positive.
            InvalidMarginError: If a margin is outside [0.0, 0.5).
            TypeError: If layout is neither a layout nor a callable.
        """
        self._width, self._height = validate_dimensions(width, height)
        self._node_radius = validate_radius(node_radius)
        self._font_size = validate_font_size(font_size)
        self._stroke_width = validate_stroke_width(stroke_width)
        self._margin_x, self._margin_y = validate_margins(margin_x, margin_y)
        self.layout = layout if layout is not None else CircularLayout()
        self.node_label_fn: Optional[LabelFn] = node_label_fn
        self.edge_label_fn: Optional[LabelFn] = edge_label_fn
        self.node_color_fn: Optional[ColorFn] = node_color_fn
        self.edge_color_fn: Optional[ColorFn] = edge_color_fn

    # -------------------------------------------------------------------------
    # Geometry
    # -------------------------------------------------------------------------

    @property
    def width(self) -> float:
        """Get canvas width."""
        return self._width

    @width.setter
    def width(self, value: float) -> None:
        """Set canvas width (> 0)."""
        self._width, _ = validate_dimensions(value, self._height)

    @property
    def height(self) -> float:
        """Get canvas height."""
        return self._height

    @height.setter
    def height(self, value: float) -> None:
        """Set canvas height (> 0)."""
        _, self._height = validate_dimensions(self._width, value)

    @property
    def size(self) -> tuple[float, float]:
        """Get canvas size as (width, height)."""
        return self._width, self._height

    @property
    def node_radius(self) -> float:
        """Get node radius."""
        return self._node_radius

    @node_radius.setter
    def node_radius(self, value: float) -> None:
        """Set node radius (> 0)."""
        self._node_radius = validate_radius(value)

    @property
    def font_size(self) -> float:
        """Get font size."""
        return self._font_size

    @font_size.setter
    def font_size(self, value: float) -> None:
        """Set font size (> 0)."""
        self._font_size = validate_font_size(value)

    @property
    def stroke_width(self) -> float:
        """Get edge stroke width."""
        return self._stroke_width

    @stroke_width.setter
    def stroke_width(self, value: float) -> None:
        """Set edge stroke width (> 0)."""
        self._stroke_width = validate_stroke_width(value)

    @property
    def margin_x(self) -> float:
        """Get horizontal margin fraction."""
        return self._margin_x

    @margin_x.setter
    def margin_x(self, value: float) -> None:
        """Set horizontal margin fraction, in [0.0, 0.5)."""
        self._margin_x, _ = validate_margins(value, self._margin_y)

    @property
    def margin_y(self) -> float:
        """Get vertical margin fraction."""
        return self._margin_y

    @margin_y.setter
    def margin_y(self, value: float) -> None:
        """Set vertical margin fraction, in [0.0, 0.5)."""
        _, self._margin_y = validate_margins(self._margin_x, value)

    # -------------------------------------------------------------------------
    # Layout
    # -------------------------------------------------------------------------

    @property
    def layout(self) -> LayoutOrPositionMap:
        """Get the layout or custom position map."""
        return self._layout

    @layout.setter
    def layout(self, value: LayoutOrPositionMap) -> None:
        """Set a layout instance or a custom position map."""
        if not callable(value):
            raise TypeError(f"layout must be a layout or a callable position map, got {value!r}")
        self._layout = value

    def position_map_for(self, graph: GraphLike) -> PositionMapFn:
        """Run the configured layout on ``graph``, or return the custom position map."""
        if isinstance(self._layout, BaseLayout):
            return self._layout.run(graph).position_map
        return self._layout

    def __repr__(self) -> str:
        return (
            f"Settings(width={self._width}, height={self._height}, "
            f"node_radius={self._node_radius}, layout={self._layout!r})"
        )


class SettingsBuilder:
    """
    Fluent builder for ``Settings``.

    Setters only record values; everything is validated by ``build()``,
    which raises the matching ``InvalidSettingsError`` subclass.
    """

    def __init__(self) -> None:
        self._options: dict[str, Any] = {}

    def _set(self, name: str, value: Any) -> Self:
        self._options[name] = value
        return self

    def width(self, width: float) -> Self:
        return self._set("width", width)

    def height(self, height: float) -> Self:
        return self._set("height", height)

    def node_radius(self, radius: float) -> Self:
        return self._set("node_radius", radius)

    def font_size(self, font_size: float) -> Self:
        return self._set("font_size", font_size)

    def stroke_width(self, stroke_width: float) -> Self:
        return self._set("stroke_width", stroke_width)

    def margin_x(self, margin_x: float) -> Self:
        return self._set("margin_x", margin_x)

    def margin_y(self, margin_y: float) -> Self:
        return self._set("margin_y", margin_y)

    def layout(self, layout: BaseLayout) -> Self:
        return self._set("layout", layout)

    def position_map(self, position_map: PositionMapFn) -> Self:
        """Use a custom position map instead of a layout algorithm."""
        return self._set("layout", position_map)

    def node_label_fn(self, fn: LabelFn) -> Self:
        return self._set("node_label_fn", fn)

    def edge_label_fn(self, fn: LabelFn) -> Self:
        return self._set("edge_label_fn", fn)

    def node_color_fn(self, fn: ColorFn) -> Self:
        return self._set("node_color_fn", fn)

    def edge_color_fn(self, fn: ColorFn) -> Self:
        return self._set("edge_color_fn", fn)

    def build(self) -> Settings:
        """
        Validate the collected values and create ``Settings``.

        Raises:
            InvalidSettingsError: Subclass naming the first invalid value.
        """
        return Settings(**self._options)


__all__ = [
    "Settings",
    "SettingsBuilder",
    "LayoutOrPositionMap",
    "DEFAULT_WIDTH",
    "DEFAULT_HEIGHT",
    "DEFAULT_RADIUS",
    "DEFAULT_FONT_SIZE",
    "DEFAULT_STROKE_WIDTH",
    "DEFAULT_MARGIN",
    "DEFAULT_NODE_COLOR",
    "DEFAULT_EDGE_COLOR",
]
