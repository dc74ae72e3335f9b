"""Graph algorithms for social network analysis.

Provides mutual-friend lookup, friend recommendation, degree-centrality
ranking and aggregate network statistics.
"""

from collections import Counter, defaultdict

from social_graph.config import get_settings
from social_graph.graph.engine import SocialGraph
from social_graph.graph.models import (
    CentralityResult,
    NetworkStats,
    Recommendation,
    normalize_username,
)
from social_graph.utils.logging import get_logger

logger = get_logger(__name__)


class GraphAnalytics:
    """High-level analytics over a SocialGraph.

    Rankings sort by score descending, then username ascending.
    """

    def __init__(self, graph: SocialGraph) -> None:
        """Initialize with a social graph.

        Args:
            graph: The SocialGraph to analyze.
        """
        self.graph = graph

    def mutual_friends(self, user_a: str, user_b: str) -> frozenset[str]:
        """Find friends shared by two users.

        Args:
            user_a: First username.
            user_b: Second username.

        Returns:
            Usernames of mutual friends; empty if either user is unknown.
        """
        friends_a = self.graph.neighbors(user_a)
        friends_b = self.graph.neighbors(user_b)
        if len(friends_a) > len(friends_b):
            friends_a, friends_b = friends_b, friends_a
        return frozenset(f for f in friends_a if f in friends_b)

    def recommend_friends(
        self,
        username: str,
        top_n: int | None = None,
    ) -> list[Recommendation]:
        """Suggest friends-of-friends ranked by number of mutual friends.

        Every 2-hop path user -> friend -> candidate counts once toward
        the candidate, skipping the user and existing friends.

        Args:
            username: The user to recommend for.
            top_n: Maximum suggestions. Defaults to the configured value.

        Returns:
            Recommendations, highest mutual count first.

        Raises:
            ValueError: If top_n is negative.
        """
        if top_n is None:
            top_n = get_settings().graph.recommendation_top_n
        self._check_top_n(top_n)

        user = normalize_username(username)
        friends = self.graph.neighbors(user)

        via: dict[str, list[str]] = defaultdict(list)
        for friend in sorted(friends):
            for candidate in self.graph.neighbors(friend):
                if candidate != user and candidate not in friends:
                    via[candidate].append(friend)

        ranked = sorted(via.items(), key=lambda item: (-len(item[1]), item[0]))
        recommendations = [
            Recommendation(username=candidate, mutual_count=len(paths), via=paths)
            for candidate, paths in ranked[:top_n]
        ]

        logger.debug(
            "Computed recommendations",
            username=user,
            candidates=len(via),
            returned=len(recommendations),
        )
        return recommendations

    def degree_centrality(self) -> list[CentralityResult]:
        """Rank every user by degree.

        Returns:
            CentralityResult for all users, highest degree first.
        """
        n = self.graph.user_count
        scale = 1.0 / (n - 1) if n > 1 else 0.0

        results = [
            CentralityResult(
                username=user,
                score=self.graph.degree(user),
                normalized=self.graph.degree(user) * scale,
            )
            for user in self.graph.usernames()
        ]
        results.sort(key=lambda r: (-r.score, r.username))
        return results

    def influencers(self, top_n: int | None = None) -> list[CentralityResult]:
        """Get the most connected users.

        Args:
            top_n: Number of users to return. Defaults to the configured value.

        Returns:
            Top users by degree.

        Raises:
            ValueError: If top_n is negative.
        """
        if top_n is None:
            top_n = get_settings().graph.default_top_n
        self._check_top_n(top_n)
        return self.degree_centrality()[:top_n]

    def degree_distribution(self) -> dict[int, int]:
        """Count users per degree.

        Returns:
            Mapping of degree to number of users, in degree order.
        """
        counts = Counter(self.graph.degree(user) for user in self.graph.usernames())
        return dict(sorted(counts.items()))

    def network_statistics(self) -> NetworkStats:
        """Compute aggregate statistics about the network.

        Returns:
            NetworkStats with counts, average degree and density.
        """
        users = self.graph.usernames()
        n = len(users)
        if n == 0:
            return NetworkStats(user_count=0, friendship_count=0)

        degrees = {user: self.graph.degree(user) for user in users}
        total_degree = sum(degrees.values())
        edges = total_degree // 2

        possible = n * (n - 1) / 2
        density = edges / possible if n > 1 else 0.0

        # usernames() is sorted, so max() keeps the lowest username on ties
        top_user = max(users, key=lambda u: degrees[u])
        max_degree = degrees[top_user]

        return NetworkStats(
            user_count=n,
            friendship_count=edges,
            average_degree=total_degree / n,
            density=density,
            component_count=self.graph.component_count(),
            isolated_count=sum(1 for d in degrees.values() if d == 0),
            max_degree=max_degree,
            most_connected=top_user if max_degree > 0 else None,
        )

    @staticmethod
    def _check_top_n(top_n: int) -> None:
        if top_n < 0:
            raise ValueError(f"top_n must be non-negative, got {top_n}")
