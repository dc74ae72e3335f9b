"""Social Graph - In-memory social network analysis.

A small graph engine for modelling friendships with:
- User and friendship storage (undirected, unweighted)
- Traversal (BFS, DFS, shortest paths, connected components)
- Analytics (mutual friends, recommendations, influencers, statistics)
- Snapshot export for visualisation tools
"""

__version__ = "0.1.0"
__author__ = "Social Graph Team"
