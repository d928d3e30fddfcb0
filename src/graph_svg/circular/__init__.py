"""
Circular graph layout.

Positions nodes evenly on a circle inscribed in the unit square.
"""

from .circular import CircularLayout, circular_layout

__all__ = [
    "CircularLayout",
    "circular_layout",
]
