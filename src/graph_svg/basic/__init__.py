"""
Basic layout algorithms.

- RandomLayout: Uniform random placement, a baseline and fallback
"""

from .random import RandomLayout, random_layout

__all__ = [
    "RandomLayout",
    "random_layout",
]
