"""
Graph access interface and a concrete graph type.

Layout algorithms never touch a concrete graph class. They are written
against the small read-only capability set described by ``GraphLike``:

- iterate node handles and edge handles
- resolve an edge handle to its (source, target) endpoints
- map a node handle to a dense index in [0, node_bound) and back
- iterate neighbors, optionally by direction

Any object providing these methods is layout-compatible. ``Graph`` is the
built-in implementation; ``graph_svg.adapters`` wraps third-party graphs.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Hashable, Iterable, Iterator, Optional, Protocol, Sequence

from .validation import InvalidLinkError, validate_link_indices


class Direction(Enum):
    """Edge direction relative to a node."""

    OUTGOING = "outgoing"
    INCOMING = "incoming"


class GraphLike(Protocol):
    """Read-only capability set consumed by layouts and the scene composer."""

    def node_ids(self) -> Iterable[Hashable]: ...

    def edge_ids(self) -> Iterable[Hashable]: ...

    def edge_endpoints(self, edge: Any) -> tuple[Any, Any]: ...

    def node_bound(self) -> int: ...

    def to_index(self, node: Any) -> int: ...

    def from_index(self, index: int) -> Any: ...

    def neighbors(self, node: Any) -> Iterable[Any]: ...

    def neighbors_directed(self, node: Any, direction: Direction) -> Iterable[Any]: ...


class Graph:
    """
    Adjacency-list graph with integer node and edge handles.

    Node handles are their own dense indices (0, 1, 2, ...), edge handles
    likewise. Each node and edge may carry an arbitrary weight, e.g. a
    label. Parallel edges and self loops are allowed.

    For directed graphs ``neighbors`` yields outgoing neighbors only. For
    undirected graphs every edge is traversable both ways, so
    ``neighbors_directed`` ignores the requested direction.

    Example:
        graph = Graph(directed=False)
        a = graph.add_node("Ljubljana")
        b = graph.add_node("Bielefeld")
        graph.add_edge(a, b)

        # Or in one go from index pairs
        square = Graph.from_links(4, [(0, 1), (1, 2), (2, 3), (3, 0)], directed=False)
    """

    def __init__(
        self,
        *,
        directed: bool = True,
        nodes: Optional[Sequence[Any]] = None,
        links: Optional[Sequence[Any]] = None,
    ) -> None:
        """
        Initialize graph.

        Args:
            directed: Whether edges have a direction
            nodes: Node weights; one node is added per entry
            links: Edges as (source, target) pairs, dicts with source/target
                and optional weight, or objects with source/target attributes

        Raises:
            InvalidLinkError: If a link references a node index out of bounds.
        """
        self._directed = bool(directed)
        self._node_weights: list[Any] = []
        self._edges: list[tuple[int, int]] = []
        self._edge_weights: list[Any] = []
        self._outgoing: list[list[int]] = []
        self._incoming: list[list[int]] = []

        if nodes is not None:
            for weight in nodes:
                self.add_node(weight)
        if links is not None:
            validate_link_indices(links, self.node_count, strict=True)
            for link in links:
                self._add_link(link)

    @classmethod
    def from_links(
        cls,
        node_count: int,
        links: Sequence[Any],
        *,
        directed: bool = True,
    ) -> Graph:
        """Build a graph with ``node_count`` unweighted nodes and the given links."""
        return cls(directed=directed, nodes=[None] * node_count, links=links)

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def is_directed(self) -> bool:
        """Whether edges have a direction."""
        return self._directed

    @property
    def node_count(self) -> int:
        """Number of nodes."""
        return len(self._node_weights)

    @property
    def edge_count(self) -> int:
        """Number of edges."""
        return len(self._edges)

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    def add_node(self, weight: Any = None) -> int:
        """Add a node and return its handle."""
        self._node_weights.append(weight)
        self._outgoing.append([])
        self._incoming.append([])
        return len(self._node_weights) - 1

    def add_edge(self, source: int, target: int, weight: Any = None) -> int:
        """
        Add an edge and return its handle.

        Raises:
            InvalidLinkError: If source or target is not a node of this graph.
        """
        n = self.node_count
        for name, node in (("source", source), ("target", target)):
            if not isinstance(node, int) or not 0 <= node < n:
                raise InvalidLinkError(f"Edge {name} {node!r} out of bounds [0, {n})")

        self._edges.append((source, target))
        self._edge_weights.append(weight)
        self._outgoing[source].append(target)
        self._incoming[target].append(source)
        if not self._directed and source != target:
            self._outgoing[target].append(source)
            self._incoming[source].append(target)
        return len(self._edges) - 1

    def _add_link(self, link: Any) -> None:
        if isinstance(link, dict):
            self.add_edge(link["source"], link["target"], link.get("weight"))
        elif hasattr(link, "source") and hasattr(link, "target"):
            self.add_edge(link.source, link.target, getattr(link, "weight", None))
        else:
            source, target = link
            self.add_edge(source, target)

    # -------------------------------------------------------------------------
    # Weights
    # -------------------------------------------------------------------------

    def node_weight(self, node: int) -> Any:
        """Get the weight stored on a node."""
        return self._node_weights[node]

    def edge_weight(self, edge: int) -> Any:
        """Get the weight stored on an edge."""
        return self._edge_weights[edge]

    # -------------------------------------------------------------------------
    # GraphLike
    # -------------------------------------------------------------------------

    def node_ids(self) -> Iterator[int]:
        return iter(range(self.node_count))

    def edge_ids(self) -> Iterator[int]:
        return iter(range(self.edge_count))

    def edge_endpoints(self, edge: int) -> tuple[int, int]:
        return self._edges[edge]

    def node_bound(self) -> int:
        return self.node_count

    def to_index(self, node: int) -> int:
        return node

    def from_index(self, index: int) -> int:
        return index

    def neighbors(self, node: int) -> Iterator[int]:
        return iter(self._outgoing[node])

    def neighbors_directed(self, node: int, direction: Direction) -> Iterator[int]:
        if direction is Direction.INCOMING:
            return iter(self._incoming[node])
        return iter(self._outgoing[node])

    def __repr__(self) -> str:
        kind = "directed" if self._directed else "undirected"
        return f"Graph({kind}, nodes={self.node_count}, edges={self.edge_count})"


def out_degree(graph: GraphLike, node: Any) -> int:
    """Count outgoing neighbors of ``node``."""
    return sum(1 for _ in graph.neighbors_directed(node, Direction.OUTGOING))


def node_count(graph: GraphLike) -> int:
    """Count nodes by iteration; ``node_bound`` may exceed this."""
    return sum(1 for _ in graph.node_ids())


__all__ = [
    "Direction",
    "GraphLike",
    "Graph",
    "out_degree",
    "node_count",
]
