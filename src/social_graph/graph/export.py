"""Snapshot export for visualization front ends.

Builds a plain-data view of the network in which every friendship
appears once and every degree matches the store.
"""

import json

from social_graph.config import get_settings
from social_graph.graph.engine import SocialGraph
from social_graph.graph.models import GraphSnapshot, SnapshotEdge, SnapshotNode
from social_graph.utils.logging import get_logger

logger = get_logger(__name__)


def build_snapshot(graph: SocialGraph) -> GraphSnapshot:
    """Build a snapshot of all users and friendships.

    Args:
        graph: The graph to snapshot.

    Returns:
        GraphSnapshot with nodes sorted by id and deduplicated edges.
    """
    nodes = [
        SnapshotNode(
            id=profile.username,
            display_name=profile.name,
            degree=graph.degree(profile.username),
        )
        for profile in graph.get_all_users()
    ]
    edges = [SnapshotEdge(source=a, target=b) for a, b in graph.friendships()]

    logger.debug("Built snapshot", node_count=len(nodes), edge_count=len(edges))
    return GraphSnapshot(nodes=nodes, edges=edges)


def snapshot_to_json(graph: SocialGraph, indent: int | None = None) -> str:
    """Serialize a snapshot of the graph to a JSON string.

    Args:
        graph: The graph to snapshot.
        indent: JSON indentation. Defaults to the configured value.

    Returns:
        JSON text with ``nodes`` and ``edges`` arrays.
    """
    if indent is None:
        indent = get_settings().graph.snapshot_indent
    return json.dumps(build_snapshot(graph).to_dict(), indent=indent)
