"""
Fruchterman-Reingold force-directed layout algorithm.

Based on the paper:
"Graph Drawing by Force-directed Placement" by Fruchterman and Reingold (1991)

The algorithm simulates a physical system where:
- All nodes repel each other (like electrical charges)
- Connected nodes attract each other (like springs)
- A "temperature" parameter limits movement and decreases over time

The simulation runs in an unbounded plane; the final positions are mapped
onto the unit square by their bounding box.
"""

from __future__ import annotations

import math
from typing import Any, Callable, Optional

import numpy as np

from ..base import IterativeLayout, LayoutNotRunError
from ..graph import GraphLike
from ..types import Event, EventType, PositionMap

# Axis ranges at or below this are treated as a single point
DEGENERATE_RANGE = 1e-9


class FruchtermanReingoldLayout(IterativeLayout):
    """
    Fruchterman-Reingold force-directed graph layout.

    This algorithm positions nodes by simulating a physical system where:
    - All node pairs have repulsive forces k² / d
    - Connected node pairs have attractive forces d² / k
    - Movement per iteration is limited by a temperature that cools
      linearly from ``initial_temperature`` to zero over ``iterations``

    Nodes start evenly spaced on the unit circle, so the result is fully
    deterministic: repeated runs on the same graph give identical output.

    Example:
        layout = FruchtermanReingoldLayout(graph=graph, iterations=2000)
        layout.run()

        for node in graph.node_ids():
            print(node, layout.position_map(node))
    """

    def __init__(
        self,
        *,
        graph: Optional[GraphLike] = None,
        random_seed: Optional[int] = None,
        on_start: Optional[Callable[[Optional[Event]], None]] = None,
        on_tick: Optional[Callable[[Optional[Event]], None]] = None,
        on_end: Optional[Callable[[Optional[Event]], None]] = None,
        # IterativeLayout parameters
        iterations: int = 10_000,
        # FruchtermanReingold-specific parameters
        optimal_distance: Optional[float] = None,
        initial_temperature: float = 0.1,
        min_distance: float = 0.01,
        area: float = 1.0,
    ) -> None:
        """
        Initialize Fruchterman-Reingold layout.

        Args:
            graph: Graph to lay out
            random_seed: Unused; the initial placement is deterministic
            on_start: Callback for start event
            on_tick: Callback for tick event, fired once per iteration
            on_end: Callback for end event
            iterations: Number of simulation steps. Trades runtime for quality.
            optimal_distance: Ideal edge length k. If None, sqrt(area / n).
            initial_temperature: Maximum displacement in the first iteration.
            min_distance: Floor for node distances, avoids singular forces.
            area: Simulation area used to derive k.
        """
        super().__init__(
            graph=graph,
            random_seed=random_seed,
            on_start=on_start,
            on_tick=on_tick,
            on_end=on_end,
            iterations=iterations,
        )

        self._optimal_distance: Optional[float] = (
            float(optimal_distance) if optimal_distance is not None else None
        )
        self._initial_temperature: float = max(0.0, float(initial_temperature))
        self._min_distance: float = max(1e-12, float(min_distance))
        self._area: float = float(area)

        # Internal state
        self._k: float = 1.0
        self._pos: Optional[np.ndarray] = None
        self._sources: Optional[np.ndarray] = None
        self._targets: Optional[np.ndarray] = None

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def optimal_distance(self) -> Optional[float]:
        """Get the configured ideal distance (None = derived from area)."""
        return self._optimal_distance

    @optimal_distance.setter
    def optimal_distance(self, value: Optional[float]) -> None:
        """Set the ideal distance between connected nodes."""
        self._optimal_distance = float(value) if value is not None else None

    @property
    def initial_temperature(self) -> float:
        """Get the starting temperature."""
        return self._initial_temperature

    @initial_temperature.setter
    def initial_temperature(self, value: float) -> None:
        """Set the starting temperature (clamped to >= 0)."""
        self._initial_temperature = max(0.0, float(value))

    @property
    def min_distance(self) -> float:
        """Get the distance floor."""
        return self._min_distance

    @min_distance.setter
    def min_distance(self, value: float) -> None:
        """Set the distance floor."""
        self._min_distance = max(1e-12, float(value))

    @property
    def area(self) -> float:
        """Get the simulation area."""
        return self._area

    @area.setter
    def area(self, value: float) -> None:
        """Set the simulation area."""
        self._area = float(value)

    @property
    def temperature(self) -> float:
        """Get the temperature of the next iteration."""
        return self._initial_temperature * (1.0 - self._iteration / self._iterations)

    @property
    def ideal_distance(self) -> float:
        """Get the ideal distance k used by the last run."""
        return self._k

    @property
    def raw_positions(self) -> np.ndarray:
        """
        Get simulation coordinates before normalization.

        Rows follow node iteration order. The array is a read-only copy.
        """
        if self._pos is None:
            raise LayoutNotRunError(f"{type(self).__name__} has not been run")
        pos = self._pos.copy()
        pos.setflags(write=False)
        return pos

    # -------------------------------------------------------------------------
    # Layout Implementation
    # -------------------------------------------------------------------------

    def _compute_optimal_distance(self, n: int) -> float:
        """Compute the ideal distance from area and node count."""
        return math.sqrt(self._area / max(1, n))

    def run(self, graph: Optional[GraphLike] = None, **kwargs: Any) -> FruchtermanReingoldLayout:
        """
        Run the layout algorithm.

        Args:
            graph: Graph to lay out. Replaces the configured graph if given.

        Returns:
            self for chaining
        """
        graph = self._resolve_graph(graph)
        table = self._new_table(graph)

        indices = np.array([graph.to_index(node) for node in graph.node_ids()], dtype=np.intp)
        n = len(indices)
        local = {int(idx): i for i, idx in enumerate(indices)}

        sources: list[int] = []
        targets: list[int] = []
        for edge in graph.edge_ids():
            source, target = graph.edge_endpoints(edge)
            sources.append(local[graph.to_index(source)])
            targets.append(local[graph.to_index(target)])
        self._sources = np.array(sources, dtype=np.intp)
        self._targets = np.array(targets, dtype=np.intp)

        # Start on the unit circle to avoid all nodes coinciding
        angles = np.arange(n, dtype=np.float64) / max(1, n) * 2 * math.pi
        self._pos = np.column_stack((np.cos(angles), np.sin(angles)))

        self._k = self._optimal_distance or self._compute_optimal_distance(n)
        self._iteration = 0

        self.trigger({"type": EventType.start, "alpha": 1.0})

        if n > 0:
            self.kick()
            table[indices] = self._normalize(self._pos)

        self._finish(graph, table)
        self.trigger({"type": EventType.end, "alpha": 0.0})
        return self

    def tick(self) -> bool:
        """
        Perform one iteration of the layout.

        Returns:
            True once the iteration budget is spent, False otherwise.
        """
        # These are set in run() before tick() is called
        assert self._pos is not None
        assert self._sources is not None and self._targets is not None

        if self._iteration >= self._iterations:
            return True

        temperature = self.temperature
        pos = self._pos

        disp = self._compute_repulsive(pos, self._k * self._k)
        self._apply_attractive(pos, disp, self._k)

        # Limit displacement by temperature, never amplifying it
        length = np.hypot(disp[:, 0], disp[:, 1])
        scale = np.zeros_like(length)
        moving = length > 0
        scale[moving] = np.minimum(length[moving], temperature) / length[moving]
        pos += disp * scale[:, None]

        self._iteration += 1

        alpha = temperature / self._initial_temperature if self._initial_temperature else 0.0
        self.trigger(
            {
                "type": EventType.tick,
                "alpha": alpha,
                "iteration": self._iteration,
                "temperature": temperature,
            }
        )

        return self._iteration >= self._iterations

    def _compute_repulsive(self, pos: np.ndarray, k_sq: float) -> np.ndarray:
        """Compute repulsive displacement for all node pairs at once."""
        delta = pos[:, None, :] - pos[None, :, :]
        dist = np.sqrt(np.einsum("ijk,ijk->ij", delta, delta))
        np.maximum(dist, self._min_distance, out=dist)

        # f_r = k^2 / d along the unit vector delta / d; the diagonal has delta = 0
        return np.einsum("ijk,ij->ik", delta, k_sq / (dist * dist))

    def _apply_attractive(self, pos: np.ndarray, disp: np.ndarray, k: float) -> None:
        """Add attractive displacement along every edge into ``disp``."""
        assert self._sources is not None and self._targets is not None
        if len(self._sources) == 0:
            return

        delta = pos[self._sources] - pos[self._targets]
        dist = np.maximum(np.hypot(delta[:, 0], delta[:, 1]), self._min_distance)

        # f_a = d^2 / k along the unit vector delta / d
        force = delta * (dist / k)[:, None]
        np.subtract.at(disp, self._sources, force)
        np.add.at(disp, self._targets, force)

    def _normalize(self, pos: np.ndarray) -> np.ndarray:
        """Map the bounding box onto [0, 1]²; a flat axis collapses to 0.5."""
        low = pos.min(axis=0)
        span = pos.max(axis=0) - low

        out = np.full_like(pos, 0.5)
        for axis in (0, 1):
            if span[axis] > DEGENERATE_RANGE:
                out[:, axis] = (pos[:, axis] - low[axis]) / span[axis]
        return out


def force_directed_layout(graph: GraphLike, iterations: int = 10_000) -> PositionMap:
    """Arrange ``graph`` with a Fruchterman-Reingold simulation."""
    return FruchtermanReingoldLayout(graph=graph, iterations=iterations).run().position_map


__all__ = ["FruchtermanReingoldLayout", "force_directed_layout", "DEGENERATE_RANGE"]
