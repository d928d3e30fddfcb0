"""
Hierarchical graph layout.

This module lays out trees and DAGs (and, best effort, any other graph)
in rows by depth, in one of four orientations.
"""

from .hierarchical import HierarchicalLayout, hierarchical_layout

__all__ = [
    "HierarchicalLayout",
    "hierarchical_layout",
]
