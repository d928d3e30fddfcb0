"""
Common types for graph layout and rendering.

This module provides the fundamental types shared by all layout algorithms
and by the scene composer:
- PositionMap: Callable mapping a node handle to normalized (x, y)
- Orientation: Direction of hierarchical layouts
- EventType: Layout lifecycle events
- Event: Event payload for callbacks
"""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import TYPE_CHECKING, Any, Callable, Hashable, TypedDict

import numpy as np

if TYPE_CHECKING:
    from .graph import GraphLike


Position = tuple[float, float]
"""Normalized (x, y) pair, conceptually within [0, 1] x [0, 1]."""

NodeId = Hashable
EdgeId = Hashable

PositionMapFn = Callable[[Any], Position]
"""Anything that maps a node handle to a position can stand in for a layout."""


class EventType(IntEnum):
    """
    Layout lifecycle events.

    - start: Layout computation has begun
    - tick: Fired once per iteration (iterative layouts only)
    - end: Layout has finished
    """

    start = 0
    tick = 1
    end = 2


class Event(TypedDict, total=False):
    """Event payload passed to event listeners."""

    type: EventType
    alpha: float
    iteration: int
    temperature: float


class Orientation(Enum):
    """Direction in which hierarchical layouts grow from their roots."""

    TOP_TO_BOTTOM = "top-to-bottom"
    BOTTOM_TO_TOP = "bottom-to-top"
    LEFT_TO_RIGHT = "left-to-right"
    RIGHT_TO_LEFT = "right-to-left"

    @classmethod
    def coerce(cls, value: Orientation | str) -> Orientation:
        """Accept an Orientation member or its string value."""
        if isinstance(value, Orientation):
            return value
        try:
            return cls(value)
        except ValueError:
            valid = ", ".join(repr(o.value) for o in cls)
            raise ValueError(f"orientation must be one of {valid}, got {value!r}") from None


class PositionMap:
    """
    Position lookup produced by a layout run.

    Backed by a table of shape (node_bound, 2) indexed by the graph's dense
    node index, so each call is O(1). The table is shared read-only.

    Example:
        position_map = CircularLayout().run(graph).position_map
        x, y = position_map(node)
    """

    __slots__ = ("_graph", "_table")

    def __init__(self, graph: GraphLike, table: np.ndarray) -> None:
        self._graph = graph
        self._table = table
        self._table.setflags(write=False)

    def __call__(self, node: Any) -> Position:
        x, y = self._table[self._graph.to_index(node)]
        return float(x), float(y)

    def __len__(self) -> int:
        return len(self._table)

    @property
    def table(self) -> np.ndarray:
        """Read-only (node_bound, 2) coordinate table."""
        return self._table

    def as_dict(self) -> dict[Any, Position]:
        """Positions of every node in the graph, keyed by node handle."""
        return {node: self(node) for node in self._graph.node_ids()}

    def __repr__(self) -> str:
        return f"PositionMap(nodes={len(self._table)})"


def empty_table(node_bound: int) -> np.ndarray:
    """Allocate a zeroed coordinate table for ``node_bound`` nodes."""
    return np.zeros((node_bound, 2), dtype=np.float64)


__all__ = [
    "Position",
    "NodeId",
    "EdgeId",
    "PositionMapFn",
    "EventType",
    "Event",
    "Orientation",
    "PositionMap",
    "empty_table",
]
