"""Graph module for social network analysis.

Provides the user/friendship store (backed by RustworkX), traversals
and analytics.
"""

from social_graph.graph.algorithms import GraphAnalytics
from social_graph.graph.engine import SocialGraph
from social_graph.graph.export import build_snapshot, snapshot_to_json
from social_graph.graph.models import (
    CentralityResult,
    GraphSnapshot,
    MutationResult,
    MutationStatus,
    NetworkStats,
    PathResult,
    PathStatus,
    Recommendation,
    SnapshotEdge,
    SnapshotNode,
    UserProfile,
    normalize_username,
)
from social_graph.graph.traversal import GraphTraversal

__all__ = [
    # Engine
    "SocialGraph",
    # Models
    "UserProfile",
    "MutationStatus",
    "MutationResult",
    "PathStatus",
    "PathResult",
    "Recommendation",
    "CentralityResult",
    "NetworkStats",
    "SnapshotNode",
    "SnapshotEdge",
    "GraphSnapshot",
    "normalize_username",
    # Traversal
    "GraphTraversal",
    # Algorithms
    "GraphAnalytics",
    # Export
    "build_snapshot",
    "snapshot_to_json",
]
