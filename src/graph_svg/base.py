"""
Base classes for graph layout algorithms.

This module provides abstract base classes that define the common interface
and shared functionality for all layout algorithms:

- BaseLayout: Abstract base with event system, graph and result management
- IterativeLayout: For simulations with a tick loop (force-directed)
- StaticLayout: For single-pass layouts (circular, bipartite, tree, etc.)

Every layout produces a ``PositionMap`` with coordinates normalized to
[0, 1] x [0, 1]. Layouts are reusable: the same configured instance can be
run against any number of graphs.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Callable, Optional

if TYPE_CHECKING:
    from typing_extensions import Self

from .graph import GraphLike
from .types import Event, EventType, PositionMap, empty_table
from .validation import validate_iterations


class LayoutNotRunError(RuntimeError):
    """Raised when results are requested from a layout that has not run."""

    pass


class BaseLayout(ABC):
    """
    Abstract base class for all layout algorithms.

    Provides shared infrastructure:
    - Event system (start/tick/end events)
    - Graph management via properties
    - Position map bookkeeping

    Example:
        layout = SomeLayout(graph=graph)
        layout.run()

        position_map = layout.position_map
        for node in graph.node_ids():
            print(node, position_map(node))
    """

    def __init__(
        self,
        *,
        graph: Optional[GraphLike] = None,
        random_seed: Optional[int] = None,
        on_start: Optional[Callable[[Optional[Event]], None]] = None,
        on_tick: Optional[Callable[[Optional[Event]], None]] = None,
        on_end: Optional[Callable[[Optional[Event]], None]] = None,
    ) -> None:
        """
        Initialize layout with configuration.

        Args:
            graph: Graph to lay out (anything implementing GraphLike).
                Can also be passed to run().
            random_seed: Random seed for reproducible layouts
            on_start: Callback for start event
            on_tick: Callback for tick event (iterative layouts)
            on_end: Callback for end event
        """
        self._graph: Optional[GraphLike] = graph
        self._random_seed: Optional[int] = random_seed
        self._position_map: Optional[PositionMap] = None
        self._events: dict[EventType, Callable[[Optional[Event]], None]] = {}

        if on_start:
            self._events[EventType.start] = on_start
        if on_tick:
            self._events[EventType.tick] = on_tick
        if on_end:
            self._events[EventType.end] = on_end

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def graph(self) -> Optional[GraphLike]:
        """Get the graph being laid out."""
        return self._graph

    @graph.setter
    def graph(self, value: Optional[GraphLike]) -> None:
        """Set the graph and discard previous results."""
        self._graph = value
        self._position_map = None

    @property
    def random_seed(self) -> Optional[int]:
        """Get random seed for reproducible layouts."""
        return self._random_seed

    @random_seed.setter
    def random_seed(self, value: Optional[int]) -> None:
        """Set random seed for reproducible layouts."""
        self._random_seed = value

    @property
    def position_map(self) -> PositionMap:
        """
        Get the position map computed by the last run().

        Raises:
            LayoutNotRunError: If run() has not completed yet.
        """
        if self._position_map is None:
            raise LayoutNotRunError(f"{type(self).__name__} has not been run")
        return self._position_map

    # -------------------------------------------------------------------------
    # Event System
    # -------------------------------------------------------------------------

    def on(self, event: EventType | str, callback: Callable[[Optional[Event]], None]) -> Self:
        """
        Subscribe to a layout event.

        Args:
            event: Event type (EventType enum or string name)
            callback: Function to call when event fires

        Returns:
            self (for chaining)
        """
        if isinstance(event, str):
            event = EventType[event]
        self._events[event] = callback
        return self

    def trigger(self, event: Event) -> None:
        """Trigger an event, calling the registered callback."""
        event_type = event.get("type")
        if event_type is not None and event_type in self._events:
            self._events[event_type](event)

    # -------------------------------------------------------------------------
    # Lifecycle Methods
    # -------------------------------------------------------------------------

    @abstractmethod
    def run(self, graph: Optional[GraphLike] = None, **kwargs: Any) -> Self:
        """
        Run the layout algorithm.

        Args:
            graph: Graph to lay out. Replaces the configured graph if given.

        Returns:
            self (for chaining)
        """
        pass

    def __call__(self, graph: GraphLike) -> PositionMap:
        """Run against ``graph`` and return the resulting position map."""
        return self.run(graph).position_map

    # -------------------------------------------------------------------------
    # Utility Methods
    # -------------------------------------------------------------------------

    def _resolve_graph(self, graph: Optional[GraphLike]) -> GraphLike:
        """Pick the graph passed to run() or the configured one."""
        if graph is not None:
            self.graph = graph
        if self._graph is None:
            raise ValueError(f"{type(self).__name__} requires a graph to run")
        return self._graph

    def _new_table(self, graph: GraphLike) -> Any:
        """Allocate a coordinate table sized by the graph's node bound."""
        return empty_table(graph.node_bound())

    def _finish(self, graph: GraphLike, table: Any) -> None:
        """Publish the coordinate table as the layout result."""
        self._position_map = PositionMap(graph, table)


class IterativeLayout(BaseLayout):
    """
    Base class for iterative layout algorithms.

    Provides:
    - Iteration budget management
    - Tick-based iteration loop

    Example:
        layout = SomeForceLayout(graph=graph, iterations=500)
        layout.run()
    """

    def __init__(
        self,
        *,
        graph: Optional[GraphLike] = None,
        random_seed: Optional[int] = None,
        on_start: Optional[Callable[[Optional[Event]], None]] = None,
        on_tick: Optional[Callable[[Optional[Event]], None]] = None,
        on_end: Optional[Callable[[Optional[Event]], None]] = None,
        # IterativeLayout-specific parameters
        iterations: int = 300,
    ) -> None:
        """
        Initialize iterative layout.

        Args:
            graph: Graph to lay out
            random_seed: Random seed for reproducible layouts
            on_start: Callback for start event
            on_tick: Callback for tick event
            on_end: Callback for end event
            iterations: Number of iterations to simulate

        Raises:
            ValidationError: If iterations < 1
        """
        super().__init__(
            graph=graph,
            random_seed=random_seed,
            on_start=on_start,
            on_tick=on_tick,
            on_end=on_end,
        )
        self._iterations: int = validate_iterations(iterations)
        self._iteration: int = 0

    @property
    def iterations(self) -> int:
        """Get the iteration budget."""
        return self._iterations

    @iterations.setter
    def iterations(self, value: int) -> None:
        """Set the iteration budget (must be >= 1)."""
        self._iterations = validate_iterations(value)

    @property
    def iteration(self) -> int:
        """Get the number of iterations performed by the current run."""
        return self._iteration

    @abstractmethod
    def tick(self) -> bool:
        """
        Perform one iteration of the layout.

        Returns:
            True if the iteration budget is spent, False otherwise.
        """
        pass

    def kick(self) -> None:
        """Run tick() repeatedly until the iteration budget is spent."""
        for _ in range(self._iterations):
            if self.tick():
                break


class StaticLayout(BaseLayout):
    """
    Base class for single-pass layout algorithms.

    These layouts compute positions in one pass without iteration.
    Examples: circular, random, bipartite, hierarchical layouts.

    Example:
        layout = CircularLayout(graph=graph)
        layout.run()
    """

    def run(self, graph: Optional[GraphLike] = None, **kwargs: Any) -> Self:
        """
        Run the layout algorithm.

        Fires start event, computes layout, fires end event.

        Args:
            graph: Graph to lay out. Replaces the configured graph if given.
            **kwargs: Additional arguments passed to _compute()

        Returns:
            self (for chaining)
        """
        graph = self._resolve_graph(graph)
        self.trigger({"type": EventType.start, "alpha": 1.0})

        table = self._new_table(graph)
        # Subclasses implement _compute()
        self._compute(graph, table, **kwargs)
        self._finish(graph, table)

        self.trigger({"type": EventType.end, "alpha": 0.0})
        return self

    @abstractmethod
    def _compute(self, graph: GraphLike, table: Any, **kwargs: Any) -> None:
        """
        Compute node positions into ``table``.

        ``table`` has shape (node_bound, 2) and is indexed by dense node index.
        """
        pass


__all__ = [
    "LayoutNotRunError",
    "BaseLayout",
    "IterativeLayout",
    "StaticLayout",
]
