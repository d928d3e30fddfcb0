"""
Adapters exposing third-party graph types through the GraphLike protocol.

- NetworkXAdapter: networkx Graph, DiGraph, MultiGraph and MultiDiGraph
  (install the ``networkx`` extra)
"""

from .networkx import NetworkXAdapter

__all__ = ["NetworkXAdapter"]
