"""
Random layout algorithm.

Places nodes at uniformly random positions in the unit square.
Useful as a baseline and as a fallback when structure doesn't matter.
"""

from __future__ import annotations

import random
from typing import Any, Callable, Optional

from ..base import StaticLayout
from ..graph import GraphLike
from ..types import Event, PositionMap
from ..validation import validate_fraction


class RandomLayout(StaticLayout):
    """
    Random layout - positions nodes uniformly at random.

    Each node independently receives (x, y) in [margin, 1 - margin]². Without
    a seed every run differs. Pass ``random_seed`` or inject a ``rng`` to get
    reproducible output.

    Example:
        layout = RandomLayout(graph=graph, random_seed=42)
        layout.run()

        # With margin to keep nodes away from the border
        layout = RandomLayout(graph=graph, margin=0.1)
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
        # Random-specific parameters
        margin: float = 0.0,
        rng: Optional[random.Random] = None,
    ) -> None:
        """
        Initialize Random layout.

        Args:
            graph: Graph to lay out
            random_seed: Random seed for reproducible layouts
            on_start: Callback for start event
            on_tick: Callback for tick event
            on_end: Callback for end event
            margin: Fraction of the unit square kept free on every side,
                in [0.0, 0.5). Default 0.
            rng: Random number generator to draw from. Takes precedence over
                random_seed.

        Raises:
            ValidationError: If margin is outside [0.0, 0.5).
        """
        super().__init__(
            graph=graph,
            random_seed=random_seed,
            on_start=on_start,
            on_tick=on_tick,
            on_end=on_end,
        )

        self._margin: float = validate_fraction("margin", margin)
        self._rng: Optional[random.Random] = rng

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def margin(self) -> float:
        """Get margin (padding from the unit square border)."""
        return self._margin

    @margin.setter
    def margin(self, value: float) -> None:
        """Set margin, in [0.0, 0.5)."""
        self._margin = validate_fraction("margin", value)

    @property
    def rng(self) -> Optional[random.Random]:
        """Get the injected random number generator, if any."""
        return self._rng

    @rng.setter
    def rng(self, value: Optional[random.Random]) -> None:
        """Inject a random number generator."""
        self._rng = value

    # -------------------------------------------------------------------------
    # Layout Computation
    # -------------------------------------------------------------------------

    def _compute(self, graph: GraphLike, table: Any, **kwargs: Any) -> None:
        """Compute random layout positions."""
        # A fresh generator per run keeps seeded runs identical
        rng = self._rng if self._rng is not None else random.Random(self._random_seed)

        low = self._margin
        high = 1.0 - self._margin
        for node in graph.node_ids():
            table[graph.to_index(node)] = (rng.uniform(low, high), rng.uniform(low, high))


def random_layout(
    graph: GraphLike,
    *,
    random_seed: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> PositionMap:
    """Place every node of ``graph`` uniformly at random in the unit square."""
    return RandomLayout(graph=graph, random_seed=random_seed, rng=rng).run().position_map


__all__ = ["RandomLayout", "random_layout"]
