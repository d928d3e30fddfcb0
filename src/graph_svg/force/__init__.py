"""
Force-directed graph layout.

- FruchtermanReingoldLayout: Classic force-directed with repulsion/attraction
"""

from .fruchterman_reingold import FruchtermanReingoldLayout, force_directed_layout

__all__ = [
    "FruchtermanReingoldLayout",
    "force_directed_layout",
]
