"""
Bipartite layout algorithm.

Places nodes on two vertical lines: the left partition at x = 0.25 and the
right partition at x = 0.75.
"""

from __future__ import annotations

import warnings
from enum import Enum
from typing import Any, Callable, Collection, Optional

from ..base import StaticLayout
from ..graph import GraphLike
from ..types import Event, PositionMap

LEFT_X = 0.25
RIGHT_X = 0.75


class BipartiteStructureWarning(UserWarning):
    """Warning issued when a discovered partition has edges inside one side."""

    pass


class Side(Enum):
    """Partition side of a node."""

    LEFT = "left"
    RIGHT = "right"


class BipartiteLayout(StaticLayout):
    """
    Bipartite layout algorithm.

    Places the two sides of a graph on parallel vertical lines. Within a side
    nodes are spaced evenly from y = 0 to y = 1 in encounter order; a side
    with a single node places it at y = 0.

    If ``left`` is given it is trusted as is: every node in the set is on the
    left, every other node on the right, and no check is made that the
    partition is edge-free.

    If ``left`` is None the partition is discovered by depth-first traversal
    from every unvisited node, alternating sides by depth parity. This always
    succeeds, also for graphs that are not bipartite (odd cycles): the
    resulting 2-coloring then simply has edges within a side. Such input is
    reported with a ``BipartiteStructureWarning`` but never rejected.

    Example:
        # User-item graph with users given explicitly
        layout = BipartiteLayout(graph=graph, left={0, 1, 2})
        layout.run()

    Attributes:
        left_nodes: Left side in encounter order (after run)
        right_nodes: Right side in encounter order (after run)
        same_side_edges: Number of edges joining nodes on the same side
    """

    def __init__(
        self,
        *,
        graph: Optional[GraphLike] = None,
        random_seed: Optional[int] = None,
        on_start: Optional[Callable[[Optional[Event]], None]] = None,
        on_tick: Optional[Callable[[Optional[Event]], None]] = None,
        on_end: Optional[Callable[[Optional[Event]], None]] = None,
        # Bipartite-specific parameters
        left: Optional[Collection[Any]] = None,
    ) -> None:
        """
        Initialize Bipartite layout.

        Args:
            graph: Graph to lay out
            random_seed: Unused; accepted for a uniform constructor
            on_start: Callback for start event
            on_tick: Callback for tick event
            on_end: Callback for end event
            left: Node handles of the left partition. If None, the partition
                is discovered by traversal.
        """
        super().__init__(
            graph=graph,
            random_seed=random_seed,
            on_start=on_start,
            on_tick=on_tick,
            on_end=on_end,
        )

        self._left: Optional[frozenset[Any]] = frozenset(left) if left is not None else None

        # Results
        self._left_nodes: list[Any] = []
        self._right_nodes: list[Any] = []
        self._same_side_edges: int = 0

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def left(self) -> Optional[frozenset[Any]]:
        """Get the configured left partition (None = discover)."""
        return self._left

    @left.setter
    def left(self, value: Optional[Collection[Any]]) -> None:
        """Set the left partition (None = discover)."""
        self._left = frozenset(value) if value is not None else None

    @property
    def left_nodes(self) -> list[Any]:
        """Get left side nodes in encounter order."""
        return self._left_nodes

    @property
    def right_nodes(self) -> list[Any]:
        """Get right side nodes in encounter order."""
        return self._right_nodes

    @property
    def same_side_edges(self) -> int:
        """Get the number of edges whose endpoints share a side."""
        return self._same_side_edges

    # -------------------------------------------------------------------------
    # Layout Computation
    # -------------------------------------------------------------------------

    def _compute(self, graph: GraphLike, table: Any, **kwargs: Any) -> None:
        """Compute bipartite layout positions."""
        if self._left is not None:
            sides = self._sides_from_partition(graph, self._left)
        else:
            sides = self._discover_sides(graph)

        self._left_nodes = [node for node, side in sides if side is Side.LEFT]
        self._right_nodes = [node for node, side in sides if side is Side.RIGHT]

        self._place_column(graph, table, self._left_nodes, LEFT_X)
        self._place_column(graph, table, self._right_nodes, RIGHT_X)

        lookup = {graph.to_index(node): side for node, side in sides}
        self._same_side_edges = 0
        for edge in graph.edge_ids():
            source, target = graph.edge_endpoints(edge)
            if lookup[graph.to_index(source)] is lookup[graph.to_index(target)]:
                self._same_side_edges += 1

        if self._left is None and self._same_side_edges:
            warnings.warn(
                f"Graph is not bipartite: {self._same_side_edges} edge(s) join nodes "
                "on the same side. The layout keeps the traversal 2-coloring.",
                BipartiteStructureWarning,
                stacklevel=3,
            )

    def _sides_from_partition(
        self, graph: GraphLike, left: frozenset[Any]
    ) -> list[tuple[Any, Side]]:
        """Tag nodes from a given left set, in node order."""
        return [(node, Side.LEFT if node in left else Side.RIGHT) for node in graph.node_ids()]

    def _discover_sides(self, graph: GraphLike) -> list[tuple[Any, Side]]:
        """
        Two-color nodes by depth parity of a depth-first traversal.

        Returns (node, side) pairs in the order nodes were first visited.
        """
        visited = [False] * graph.node_bound()
        sides: list[tuple[Any, Side]] = []

        for start in graph.node_ids():
            if visited[graph.to_index(start)]:
                continue

            stack: list[tuple[Any, int]] = [(start, 0)]
            while stack:
                node, depth = stack.pop()
                idx = graph.to_index(node)
                if visited[idx]:
                    continue
                visited[idx] = True
                sides.append((node, Side.LEFT if depth % 2 == 0 else Side.RIGHT))

                for neighbor in graph.neighbors(node):
                    if not visited[graph.to_index(neighbor)]:
                        stack.append((neighbor, depth + 1))

        return sides

    def _place_column(self, graph: GraphLike, table: Any, nodes: list[Any], x: float) -> None:
        """Space ``nodes`` evenly over y in [0, 1] on the line at ``x``."""
        spacing = 1.0 / (len(nodes) - 1) if len(nodes) > 1 else 0.0
        for i, node in enumerate(nodes):
            table[graph.to_index(node)] = (x, i * spacing)


def bipartite_layout(graph: GraphLike, left: Optional[Collection[Any]] = None) -> PositionMap:
    """
    Arrange ``graph`` on two vertical lines.

    Nodes in ``left`` go to x = 0.25, all others to x = 0.75. Without
    ``left`` the sides are discovered by traversal, which always succeeds
    even for non-bipartite graphs.
    """
    return BipartiteLayout(graph=graph, left=left).run().position_map


__all__ = [
    "BipartiteLayout",
    "BipartiteStructureWarning",
    "Side",
    "bipartite_layout",
]
