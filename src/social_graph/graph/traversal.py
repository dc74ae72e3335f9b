"""Graph traversal for social network analysis.

Breadth-first and depth-first search, shortest paths and connected
components. Neighbors are always visited in username order so results
are reproducible.
"""

from collections import deque

from social_graph.graph.engine import SocialGraph
from social_graph.graph.models import PathResult, PathStatus, normalize_username
from social_graph.utils.logging import get_logger

logger = get_logger(__name__)


class GraphTraversal:
    """Read-only traversals over a SocialGraph."""

    def __init__(self, graph: SocialGraph) -> None:
        """Initialize with a social graph.

        Args:
            graph: The SocialGraph to traverse.
        """
        self.graph = graph

    def bfs(self, start: str) -> list[str]:
        """Visit users in breadth-first (level) order.

        Args:
            start: Starting username.

        Returns:
            Usernames in visitation order, or an empty list for an unknown start.
        """
        return [user for level in self.bfs_levels(start) for user in level]

    def bfs_levels(self, start: str) -> list[list[str]]:
        """Group breadth-first visitation by distance from the start.

        Args:
            start: Starting username.

        Returns:
            One list per level; level 0 is ``[start]``.
        """
        start = normalize_username(start)
        if not self.graph.exists(start):
            return []

        levels: list[list[str]] = []
        visited = {start}
        frontier = [start]

        while frontier:
            levels.append(frontier)
            next_frontier: list[str] = []
            for user in frontier:
                for neighbor in self.graph.sorted_neighbors(user):
                    if neighbor not in visited:
                        visited.add(neighbor)
                        next_frontier.append(neighbor)
            frontier = next_frontier

        return levels

    def bfs_parents(self, start: str) -> dict[str, str | None]:
        """Build the BFS parent-pointer map from a start user.

        Args:
            start: Starting username.

        Returns:
            Mapping of each reachable user to the user it was discovered
            from; the start maps to None. Empty for an unknown start.
        """
        start = normalize_username(start)
        if not self.graph.exists(start):
            return {}

        parents: dict[str, str | None] = {start: None}
        queue = deque([start])

        while queue:
            current = queue.popleft()
            for neighbor in self.graph.sorted_neighbors(current):
                if neighbor not in parents:
                    parents[neighbor] = current
                    queue.append(neighbor)

        return parents

    def shortest_path(self, start: str, end: str) -> PathResult:
        """Find a minimum-hop path between two users.

        Args:
            start: Starting username.
            end: Target username.

        Returns:
            PathResult with FOUND and the path, NO_PATH if the users are
            disconnected, or NOT_FOUND if either user is unknown.
        """
        start = normalize_username(start)
        end = normalize_username(end)

        if not self.graph.exists(start) or not self.graph.exists(end):
            return PathResult(status=PathStatus.NOT_FOUND)

        if start == end:
            return PathResult(status=PathStatus.FOUND, path=[start])

        parents: dict[str, str | None] = {start: None}
        queue = deque([start])

        while queue:
            current = queue.popleft()
            if current == end:
                return PathResult(
                    status=PathStatus.FOUND,
                    path=self._reconstruct(parents, end),
                )

            for neighbor in self.graph.sorted_neighbors(current):
                if neighbor not in parents:
                    parents[neighbor] = current
                    queue.append(neighbor)

        logger.debug("No path between users", start=start, end=end)
        return PathResult(status=PathStatus.NO_PATH)

    def degrees_of_separation(self, start: str, end: str) -> int | None:
        """Get the edge count of the shortest path, or None without one."""
        return self.shortest_path(start, end).degrees

    def dfs(self, start: str, target: str | None = None) -> list[str]:
        """Visit users in depth-first order using an explicit stack.

        Args:
            start: Starting username.
            target: Optional username at which to stop.

        Returns:
            Usernames in visitation order (ending with target if it was reached).
        """
        start = normalize_username(start)
        if not self.graph.exists(start):
            return []
        if target is not None:
            target = normalize_username(target)

        visited: set[str] = set()
        order: list[str] = []
        stack = [start]

        while stack:
            current = stack.pop()
            if current in visited:
                continue

            visited.add(current)
            order.append(current)
            if current == target:
                break

            # Reverse push so the smallest username is popped first
            for neighbor in reversed(self.graph.sorted_neighbors(current)):
                if neighbor not in visited:
                    stack.append(neighbor)

        return order

    def connected_components(self) -> list[list[str]]:
        """Partition all users into connected components.

        Returns:
            Components as sorted username lists, largest first, ties by
            first username.
        """
        visited: set[str] = set()
        components: list[list[str]] = []

        for user in self.graph.usernames():
            if user in visited:
                continue

            component = self.bfs(user)
            visited.update(component)
            components.append(sorted(component))

        components.sort(key=lambda c: (-len(c), c[0]))
        return components

    def component_of(self, username: str) -> list[str]:
        """Get the sorted component containing a user (empty if unknown)."""
        return sorted(self.bfs(username))

    @staticmethod
    def _reconstruct(parents: dict[str, str | None], end: str) -> list[str]:
        path: list[str] = []
        node: str | None = end
        while node is not None:
            path.append(node)
            node = parents[node]
        path.reverse()
        return path
