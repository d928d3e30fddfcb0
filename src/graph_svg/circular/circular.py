"""
Circular layout algorithm.

Places all nodes evenly distributed on the circle of radius 0.5 centred at
(0.5, 0.5), so every coordinate stays within [0, 1].
"""

from __future__ import annotations

import math
from typing import Any, Callable, Optional, Union

from ..base import StaticLayout
from ..graph import GraphLike, out_degree
from ..types import Event, PositionMap

# Index 0 sits at the top of the circle; y grows downwards on screen, so
# increasing angles run clockwise.
TOP = -math.pi / 2


class CircularLayout(StaticLayout):
    """
    Circular layout - positions nodes on a circle.

    The node with dense index ``i`` out of ``N`` nodes is placed at angle
    ``start_angle + i / N * 2π``. The order can be customized using a sort
    function. A graph with a single node places it at the centre.

    Example:
        layout = CircularLayout(graph=graph)
        layout.run()
        x, y = layout.position_map(node)
    """

    def __init__(
        self,
        *,
        graph: Optional[GraphLike] = None,
        random_seed: Optional[int] = None,
        on_start: Optional[Callable[[Optional[Event]], None]] = None,
        on_tick: Optional[Callable[[Optional[Event]], None]] = None,
        on_end: Optional[Callable[[Optional[Event]], None]] = None,
        # Circular-specific parameters
        start_angle: float = TOP,
        sort_by: Optional[Union[str, Callable[[Any], Any]]] = None,
    ) -> None:
        """
        Initialize Circular layout.

        Args:
            graph: Graph to lay out
            random_seed: Unused; accepted for a uniform constructor
            on_start: Callback for start event
            on_tick: Callback for tick event
            on_end: Callback for end event
            start_angle: Angle of the first slot in radians (default: top).
            sort_by: Slot order. Options:
                - None: Dense index order
                - 'degree': Sort by out-degree (descending)
                - callable: Custom function taking a node handle and returning a sort key
        """
        super().__init__(
            graph=graph,
            random_seed=random_seed,
            on_start=on_start,
            on_tick=on_tick,
            on_end=on_end,
        )

        self._start_angle: float = float(start_angle)
        self._sort_by: Optional[Union[str, Callable[[Any], Any]]] = sort_by

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def start_angle(self) -> float:
        """Get starting angle in radians."""
        return self._start_angle

    @start_angle.setter
    def start_angle(self, value: float) -> None:
        """Set starting angle in radians."""
        self._start_angle = float(value)

    @property
    def sort_by(self) -> Optional[Union[str, Callable[[Any], Any]]]:
        """Get sort key for node ordering."""
        return self._sort_by

    @sort_by.setter
    def sort_by(self, value: Optional[Union[str, Callable[[Any], Any]]]) -> None:
        """Set sort key for node ordering."""
        self._sort_by = value

    # -------------------------------------------------------------------------
    # Layout Computation
    # -------------------------------------------------------------------------

    def _slot_order(self, graph: GraphLike) -> list[tuple[int, Any]]:
        """Return (slot, node) pairs in placement order."""
        nodes = list(graph.node_ids())

        if self._sort_by is None:
            return [(graph.to_index(node), node) for node in nodes]

        if self._sort_by == "degree":
            degrees = {graph.to_index(node): out_degree(graph, node) for node in nodes}
            nodes.sort(key=lambda node: -degrees[graph.to_index(node)])
        elif callable(self._sort_by):
            sort_fn = self._sort_by
            nodes.sort(key=sort_fn)
        else:
            raise ValueError(f"sort_by must be None, 'degree' or a callable, got {self._sort_by!r}")

        return list(enumerate(nodes))

    def _compute(self, graph: GraphLike, table: Any, **kwargs: Any) -> None:
        """Compute circular layout positions."""
        order = self._slot_order(graph)
        n = len(order)
        if n == 0:
            return

        if n == 1:
            _, node = order[0]
            table[graph.to_index(node)] = (0.5, 0.5)
            return

        angle_step = 2 * math.pi / n
        for slot, node in order:
            angle = self._start_angle + slot * angle_step
            table[graph.to_index(node)] = (
                0.5 + 0.5 * math.cos(angle),
                0.5 + 0.5 * math.sin(angle),
            )


def circular_layout(graph: GraphLike) -> PositionMap:
    """Arrange nodes of ``graph`` evenly on a circle, index 0 at the top."""
    return CircularLayout(graph=graph).run().position_map


__all__ = ["CircularLayout", "circular_layout"]
