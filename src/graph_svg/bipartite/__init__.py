"""
Bipartite layout algorithm.

Bipartite layouts position nodes on two parallel vertical lines, suitable
for graphs whose nodes split into two sets with edges running between them.

Common use cases:
- User-item networks (recommendations)
- Author-paper networks (bibliometrics)
- Matching problems
"""

from .bipartite import BipartiteLayout, BipartiteStructureWarning, Side, bipartite_layout

__all__ = [
    "BipartiteLayout",
    "BipartiteStructureWarning",
    "Side",
    "bipartite_layout",
]
