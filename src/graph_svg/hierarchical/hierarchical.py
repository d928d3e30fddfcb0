"""
Hierarchical layout algorithm.

Roots-first tree placement: every node gets a row (its depth below the root
that reached it) and a column (leaves take consecutive slots, parents sit
midway between their first and last child). Components are tiled left to
right. The grid is then normalized to the unit square and rotated or
mirrored according to the requested orientation.
"""

from __future__ import annotations

from typing import Any, Callable, Optional, Union

from ..base import StaticLayout
from ..graph import Direction, GraphLike, out_degree
from ..types import Event, Orientation, PositionMap


class _Frame:
    """Pending visit of one node during depth assignment."""

    __slots__ = (
        "index",
        "start_col",
        "row",
        "children",
        "next_child",
        "child_col",
        "max_col",
        "max_row",
        "first_col",
        "last_col",
    )

    def __init__(self, index: int, start_col: int, row: int, children: list[int]) -> None:
        self.index = index
        self.start_col = start_col
        self.row = row
        self.children = children
        self.next_child = 0

        # Column handed to the next child subtree
        self.child_col = start_col
        self.max_col = start_col
        self.max_row = row

        # Columns of the first and last child placed under this node
        self.first_col: Optional[float] = None
        self.last_col: Optional[float] = None


class HierarchicalLayout(StaticLayout):
    """
    Hierarchical layout - rows by depth, parents centred over children.

    Roots are the nodes without incoming edges, taken in node order. Nodes
    not reachable from any of them (e.g. every node of an undirected graph,
    or cycles without an entry point) are then used as roots themselves, by
    descending out-degree.

    Cycles are safe: a node is placed at its first visit and back edges are
    never followed again.

    Example:
        layout = HierarchicalLayout(graph=graph, orientation="left-to-right")
        layout.run()

    Attributes:
        grid_positions: (column, row) of every node before normalization
        max_row: Deepest row over all components
        max_col: Rightmost column over all components
    """

    def __init__(
        self,
        *,
        graph: Optional[GraphLike] = None,
        random_seed: Optional[int] = None,
        on_start: Optional[Callable[[Optional[Event]], None]] = None,
        on_tick: Optional[Callable[[Optional[Event]], None]] = None,
        on_end: Optional[Callable[[Optional[Event]], None]] = None,
        # Hierarchical-specific parameters
        orientation: Union[Orientation, str] = Orientation.TOP_TO_BOTTOM,
    ) -> None:
        """
        Initialize Hierarchical layout.

        Args:
            graph: Graph to lay out
            random_seed: Unused; accepted for a uniform constructor
            on_start: Callback for start event
            on_tick: Callback for tick event
            on_end: Callback for end event
            orientation: Layout direction - an Orientation or one of
                'top-to-bottom', 'bottom-to-top', 'left-to-right',
                'right-to-left'.
        """
        super().__init__(
            graph=graph,
            random_seed=random_seed,
            on_start=on_start,
            on_tick=on_tick,
            on_end=on_end,
        )

        self._orientation: Orientation = Orientation.coerce(orientation)

        # Results
        self._grid: dict[Any, tuple[float, int]] = {}
        self._max_row: int = 0
        self._max_col: int = 0

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def orientation(self) -> Orientation:
        """Get layout orientation."""
        return self._orientation

    @orientation.setter
    def orientation(self, value: Union[Orientation, str]) -> None:
        """Set layout orientation."""
        self._orientation = Orientation.coerce(value)

    @property
    def grid_positions(self) -> dict[Any, tuple[float, int]]:
        """Get (column, row) per node before normalization."""
        return self._grid

    @property
    def max_row(self) -> int:
        """Get the deepest row."""
        return self._max_row

    @property
    def max_col(self) -> int:
        """Get the rightmost column."""
        return self._max_col

    # -------------------------------------------------------------------------
    # Layout Computation
    # -------------------------------------------------------------------------

    def _root_candidates(self, graph: GraphLike) -> list[Any]:
        """Nodes without incoming edges, then every node by descending out-degree."""
        nodes = list(graph.node_ids())
        sources = [
            node
            for node in nodes
            if next(iter(graph.neighbors_directed(node, Direction.INCOMING)), None) is None
        ]
        # sorted() is stable, so ties keep node order
        by_degree = sorted(nodes, key=lambda node: out_degree(graph, node), reverse=True)
        return sources + by_degree

    def _compute(self, graph: GraphLike, table: Any, **kwargs: Any) -> None:
        """Compute hierarchical layout positions."""
        visited = [False] * graph.node_bound()

        next_col = 0
        max_row = 0
        max_col = 0
        for root in self._root_candidates(graph):
            root_idx = graph.to_index(root)
            if visited[root_idx]:
                continue

            tree_max_col, tree_max_row = self._assign_levels(
                graph, visited, table, root_idx, next_col
            )
            max_row = max(max_row, tree_max_row)
            max_col = max(max_col, tree_max_col)
            next_col = tree_max_col + 1

        self._max_row = max_row
        self._max_col = max_col
        self._grid = {
            node: (float(table[graph.to_index(node)][0]), int(table[graph.to_index(node)][1]))
            for node in graph.node_ids()
        }

        self._normalize(table, max_col, max_row)

    def _assign_levels(
        self,
        graph: GraphLike,
        visited: list[bool],
        table: Any,
        root: int,
        start_col: int,
    ) -> tuple[int, int]:
        """
        Place the tree reachable from ``root`` starting at column ``start_col``.

        Writes (column, row) into ``table`` for every node reached and
        returns the (max_col, max_row) of the tree. Uses an explicit stack so
        deep hierarchies do not hit the recursion limit.
        """

        def children(index: int) -> list[int]:
            node = graph.from_index(index)
            return [
                graph.to_index(child)
                for child in graph.neighbors_directed(node, Direction.OUTGOING)
            ]

        visited[root] = True
        stack = [_Frame(root, start_col, 0, children(root))]
        finished: Optional[_Frame] = None
        finished_col = 0.0

        while stack:
            frame = stack[-1]

            if finished is not None:
                # Fold the subtree that just completed into its parent
                frame.max_col = max(frame.max_col, finished.max_col)
                frame.max_row = max(frame.max_row, finished.max_row)
                frame.child_col = finished.max_col + 1
                if frame.first_col is None:
                    frame.first_col = finished_col
                frame.last_col = finished_col
                finished = None

            descended = False
            while frame.next_child < len(frame.children):
                child = frame.children[frame.next_child]
                frame.next_child += 1
                if visited[child]:
                    continue
                visited[child] = True
                stack.append(_Frame(child, frame.child_col, frame.row + 1, children(child)))
                descended = True
                break
            if descended:
                continue

            if frame.first_col is not None and frame.last_col is not None:
                col = (frame.first_col + frame.last_col) / 2
            else:
                col = float(frame.start_col)
            table[frame.index] = (col, frame.row)

            stack.pop()
            finished = frame
            finished_col = col

        assert finished is not None
        return finished.max_col, finished.max_row

    def _normalize(self, table: Any, max_col: int, max_row: int) -> None:
        """Scale the grid into the unit square and apply the orientation."""
        if len(table) == 0:
            return

        col_scale = 1.0 / max_col if max_col > 0 else 1.0
        row_scale = 1.0 / max_row if max_row > 0 else 1.0

        cols = table[:, 0] * col_scale
        rows = table[:, 1] * row_scale

        if self._orientation is Orientation.TOP_TO_BOTTOM:
            table[:, 0], table[:, 1] = cols, rows
        elif self._orientation is Orientation.BOTTOM_TO_TOP:
            table[:, 0], table[:, 1] = cols, 1.0 - rows
        elif self._orientation is Orientation.LEFT_TO_RIGHT:
            table[:, 0], table[:, 1] = rows, cols
        else:
            table[:, 0], table[:, 1] = 1.0 - rows, cols


def hierarchical_layout(
    graph: GraphLike,
    orientation: Union[Orientation, str] = Orientation.TOP_TO_BOTTOM,
) -> PositionMap:
    """Arrange ``graph`` as a hierarchy growing in ``orientation``."""
    return HierarchicalLayout(graph=graph, orientation=orientation).run().position_map


__all__ = ["HierarchicalLayout", "hierarchical_layout"]
