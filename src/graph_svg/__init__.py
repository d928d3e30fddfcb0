"""
graph-svg: Graph layout and SVG rendering in Python.

This package computes normalized 2-D positions for the nodes of any graph
and renders the result as an SVG document (optionally rasterized to PNG).

Available algorithms:
- circular: Nodes evenly spaced on a circle
- basic: Uniform random placement
- bipartite: Two parallel columns
- hierarchical: Rows by depth, four orientations
- force: Fruchterman-Reingold force-directed placement

Optional extras:
- graph_svg.adapters: networkx graphs (``networkx`` extra)
- graph_svg.export.image: PNG output (``img`` extra)
"""

__version__ = "0.1.0"

# Base classes for building layouts
from .base import (
    BaseLayout,
    IterativeLayout,
    LayoutNotRunError,
    StaticLayout,
)

# Bipartite layout
from .bipartite import BipartiteLayout, BipartiteStructureWarning, Side, bipartite_layout

# Basic layouts
from .basic import RandomLayout, random_layout

# Circular layout
from .circular import CircularLayout, circular_layout

# Export
from .export import graph_to_svg, graph_to_svg_string, scene_to_svg

# Force-directed layout
from .force import FruchtermanReingoldLayout, force_directed_layout

# Graph access
from .graph import Direction, Graph, GraphLike

# Hierarchical layout
from .hierarchical import HierarchicalLayout, hierarchical_layout

# Scene composition
from .scene import Circle, Line, Text, compose_scene

# Settings
from .settings import Settings, SettingsBuilder

# Shared types
from .types import (
    Event,
    EventType,
    Orientation,
    Position,
    PositionMap,
    PositionMapFn,
)

# Validation
from .validation import (
    InvalidDimensionsError,
    InvalidFontSizeError,
    InvalidLinkError,
    InvalidMarginError,
    InvalidRadiusError,
    InvalidSettingsError,
    InvalidStrokeWidthError,
    ValidationError,
)

__all__ = [
    # Version
    "__version__",
    # Base classes
    "BaseLayout",
    "IterativeLayout",
    "StaticLayout",
    "LayoutNotRunError",
    # Graph
    "Graph",
    "GraphLike",
    "Direction",
    # Types
    "Event",
    "EventType",
    "Orientation",
    "Position",
    "PositionMap",
    "PositionMapFn",
    # Layouts
    "CircularLayout",
    "circular_layout",
    "RandomLayout",
    "random_layout",
    "BipartiteLayout",
    "BipartiteStructureWarning",
    "Side",
    "bipartite_layout",
    "HierarchicalLayout",
    "hierarchical_layout",
    "FruchtermanReingoldLayout",
    "force_directed_layout",
    # Rendering
    "Settings",
    "SettingsBuilder",
    "Circle",
    "Line",
    "Text",
    "compose_scene",
    "scene_to_svg",
    "graph_to_svg_string",
    "graph_to_svg",
    # Validation
    "ValidationError",
    "InvalidSettingsError",
    "InvalidDimensionsError",
    "InvalidRadiusError",
    "InvalidFontSizeError",
    "InvalidStrokeWidthError",
    "InvalidMarginError",
    "InvalidLinkError",
]
