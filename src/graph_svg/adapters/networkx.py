"""
networkx adapter.

Wraps a networkx graph so every layout and the scene composer can consume it
directly. Node handles are the networkx nodes themselves; edge handles are
the tuples yielded by ``G.edges`` (``(u, v)``, or ``(u, v, key)`` for
multigraphs).

Example:
    import networkx as nx
    from graph_svg import Settings
    from graph_svg.adapters import NetworkXAdapter
    from graph_svg.export import graph_to_svg

    graph = NetworkXAdapter(nx.petersen_graph())
    graph_to_svg(graph, Settings(), "build/petersen.svg")
"""

from __future__ import annotations

from typing import Any, Hashable, Iterator

import networkx as nx

from ..graph import Direction


class NetworkXAdapter:
    """
    GraphLike view of a networkx graph.

    Dense indices follow ``list(G.nodes)`` at construction time, so the
    adapter must be rebuilt after nodes are added or removed.
    """

    def __init__(self, graph: nx.Graph) -> None:
        self._graph = graph
        self._nodes: list[Hashable] = list(graph.nodes)
        self._index: dict[Hashable, int] = {node: i for i, node in enumerate(self._nodes)}
        self._multigraph = graph.is_multigraph()

    @property
    def nx_graph(self) -> nx.Graph:
        """Get the wrapped networkx graph."""
        return self._graph

    @property
    def is_directed(self) -> bool:
        """Whether the wrapped graph is directed."""
        return bool(self._graph.is_directed())

    def node_ids(self) -> Iterator[Hashable]:
        return iter(self._nodes)

    def edge_ids(self) -> Iterator[tuple[Any, ...]]:
        if self._multigraph:
            return iter(self._graph.edges(keys=True))
        return iter(self._graph.edges())

    def edge_endpoints(self, edge: tuple[Any, ...]) -> tuple[Any, Any]:
        return edge[0], edge[1]

    def node_bound(self) -> int:
        return len(self._nodes)

    def to_index(self, node: Hashable) -> int:
        return self._index[node]

    def from_index(self, index: int) -> Hashable:
        return self._nodes[index]

    def neighbors(self, node: Hashable) -> Iterator[Hashable]:
        return iter(self._graph.neighbors(node))

    def neighbors_directed(self, node: Hashable, direction: Direction) -> Iterator[Hashable]:
        if not self._graph.is_directed():
            return iter(self._graph.neighbors(node))
        if direction is Direction.INCOMING:
            return iter(self._graph.predecessors(node))
        return iter(self._graph.successors(node))

    def __repr__(self) -> str:
        return (
            f"NetworkXAdapter({type(self._graph).__name__}, "
            f"nodes={len(self._nodes)}, edges={self._graph.number_of_edges()})"
        )


__all__ = ["NetworkXAdapter"]
