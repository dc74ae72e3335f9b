"""Social graph engine using RustworkX.

Provides the Graph Store: users (vertices) with profile attributes and
the symmetric friendship relation between them.
"""

from collections.abc import Iterator

import rustworkx as rx

from social_graph.graph.models import (
    MutationResult,
    MutationStatus,
    UserProfile,
    normalize_username,
)
from social_graph.utils.logging import get_logger

logger = get_logger(__name__)


class SocialGraph:
    """An undirected, unweighted graph of users and friendships.

    Backed by a RustworkX ``PyGraph`` with ``multigraph=False``, so each
    friendship is stored once and is visible from both endpoints.
    Usernames are normalized before every lookup.
    """

    def __init__(self) -> None:
        """Initialize an empty social graph."""
        self._graph: rx.PyGraph[UserProfile, None] = rx.PyGraph(multigraph=False)
        self._username_to_index: dict[str, int] = {}

    @property
    def user_count(self) -> int:
        """Get the number of users in the graph."""
        return len(self._graph)

    @property
    def friendship_count(self) -> int:
        """Get the number of friendships in the graph."""
        return self._graph.num_edges()

    def __len__(self) -> int:
        return self.user_count

    def __contains__(self, username: object) -> bool:
        return isinstance(username, str) and self.exists(username)

    def __iter__(self) -> Iterator[str]:
        return iter(self.usernames())

    def add_user(
        self,
        username: str,
        name: str = "",
        age: int = 0,
        location: str = "",
    ) -> MutationResult:
        """Add a user with no friends.

        Args:
            username: Unique username (normalized to lower case).
            name: Display name. Defaults to the username.
            age: Age in years, must be non-negative.
            location: Free-text location.

        Returns:
            MutationResult with SUCCESS, ALREADY_EXISTS, INVALID_USERNAME
            or INVALID_PROFILE.
        """
        key = normalize_username(username)
        if not key:
            logger.info("Rejected user - empty username", username=username)
            return MutationResult(MutationStatus.INVALID_USERNAME, (username,))

        if key in self._username_to_index:
            logger.info("Rejected user - already exists", username=key)
            return MutationResult(MutationStatus.ALREADY_EXISTS, (key,))

        if age < 0:
            reason = f"Age must be non-negative, got {age}"
            logger.info("Rejected user - invalid profile", username=key, reason=reason)
            return MutationResult(MutationStatus.INVALID_PROFILE, (key,), reason=reason)

        profile = UserProfile(
            username=key,
            name=name.strip() or key,
            age=age,
            location=location.strip(),
        )
        index = self._graph.add_node(profile)
        self._username_to_index[key] = index

        logger.debug("Added user", username=key, index=index)
        return MutationResult(MutationStatus.SUCCESS, (key,))

    def add_friendship(self, user_a: str, user_b: str) -> MutationResult:
        """Add an undirected friendship between two existing users.

        Args:
            user_a: First username.
            user_b: Second username.

        Returns:
            MutationResult with SUCCESS, NOT_FOUND, SELF_LOOP or
            ALREADY_FRIENDS. Nothing changes unless the status is SUCCESS.
        """
        key_a = normalize_username(user_a)
        key_b = normalize_username(user_b)
        names = (key_a, key_b)

        missing = self._missing(key_a, key_b)
        if missing:
            logger.info("Rejected friendship - user not found", user_a=key_a, user_b=key_b, missing=missing)
            return MutationResult(MutationStatus.NOT_FOUND, names, missing=missing)

        if key_a == key_b:
            logger.info("Rejected friendship - self loop", username=key_a)
            return MutationResult(MutationStatus.SELF_LOOP, names)

        index_a = self._username_to_index[key_a]
        index_b = self._username_to_index[key_b]
        if self._graph.has_edge(index_a, index_b):
            logger.info("Rejected friendship - already friends", user_a=key_a, user_b=key_b)
            return MutationResult(MutationStatus.ALREADY_FRIENDS, names)

        self._graph.add_edge(index_a, index_b, None)
        logger.debug("Added friendship", user_a=key_a, user_b=key_b)
        return MutationResult(MutationStatus.SUCCESS, names)

    def remove_friendship(self, user_a: str, user_b: str) -> MutationResult:
        """Remove the friendship between two users.

        Args:
            user_a: First username.
            user_b: Second username.

        Returns:
            MutationResult with SUCCESS, NOT_FOUND (unknown user) or
            NOT_FRIENDS (both exist but are not friends).
        """
        key_a = normalize_username(user_a)
        key_b = normalize_username(user_b)
        names = (key_a, key_b)

        missing = self._missing(key_a, key_b)
        if missing:
            logger.info("Rejected unfriend - user not found", user_a=key_a, user_b=key_b, missing=missing)
            return MutationResult(MutationStatus.NOT_FOUND, names, missing=missing)

        index_a = self._username_to_index[key_a]
        index_b = self._username_to_index[key_b]
        if key_a == key_b or not self._graph.has_edge(index_a, index_b):
            logger.info("Rejected unfriend - not friends", user_a=key_a, user_b=key_b)
            return MutationResult(MutationStatus.NOT_FRIENDS, names)

        self._graph.remove_edge(index_a, index_b)
        logger.debug("Removed friendship", user_a=key_a, user_b=key_b)
        return MutationResult(MutationStatus.SUCCESS, names)

    def exists(self, username: str) -> bool:
        """Check if a user exists.

        Args:
            username: The username to check.

        Returns:
            True if the user exists.
        """
        return normalize_username(username) in self._username_to_index

    def get_user(self, username: str) -> UserProfile | None:
        """Get a user's profile.

        Args:
            username: The username to look up.

        Returns:
            The UserProfile, or None if not found.
        """
        index = self._username_to_index.get(normalize_username(username))
        if index is None:
            return None
        return self._graph[index]

    def neighbors(self, username: str) -> frozenset[str]:
        """Get the friends of a user.

        Args:
            username: The username to look up.

        Returns:
            Friend usernames; empty for an unknown user.
        """
        index = self._username_to_index.get(normalize_username(username))
        if index is None:
            return frozenset()
        return frozenset(
            self._graph[neighbor].username for neighbor in self._graph.neighbors(index)
        )

    def sorted_neighbors(self, username: str) -> list[str]:
        """Get the friends of a user in username order."""
        return sorted(self.neighbors(username))

    def are_friends(self, user_a: str, user_b: str) -> bool:
        """Check whether two users are direct friends.

        Args:
            user_a: First username.
            user_b: Second username.

        Returns:
            True if the friendship exists; False for unknown users.
        """
        index_a = self._username_to_index.get(normalize_username(user_a))
        index_b = self._username_to_index.get(normalize_username(user_b))
        if index_a is None or index_b is None:
            return False
        return self._graph.has_edge(index_a, index_b)

    def degree(self, username: str) -> int:
        """Get the number of friends of a user (0 if unknown)."""
        index = self._username_to_index.get(normalize_username(username))
        if index is None:
            return 0
        return self._graph.degree(index)

    def usernames(self) -> list[str]:
        """Get all usernames, sorted.

        Returns:
            Sorted list of usernames.
        """
        return sorted(self._username_to_index)

    def get_all_users(self) -> list[UserProfile]:
        """Get all user profiles, sorted by username."""
        return [self._graph[self._username_to_index[name]] for name in self.usernames()]

    def friendships(self) -> list[tuple[str, str]]:
        """Get every friendship exactly once.

        Returns:
            Sorted list of (a, b) pairs with a < b.
        """
        pairs = []
        for index_a, index_b in self._graph.edge_list():
            name_a = self._graph[index_a].username
            name_b = self._graph[index_b].username
            pairs.append((name_a, name_b) if name_a < name_b else (name_b, name_a))
        return sorted(pairs)

    def component_count(self) -> int:
        """Get the number of connected components.

        Returns:
            Component count, with each isolated user counted as one.
        """
        return len(rx.connected_components(self._graph))

    def clear(self) -> None:
        """Remove all users and friendships."""
        self._graph = rx.PyGraph(multigraph=False)
        self._username_to_index.clear()
        logger.debug("Graph cleared")

    def _missing(self, *keys: str) -> tuple[str, ...]:
        """Return the given normalized keys that are not users, deduplicated."""
        return tuple(dict.fromkeys(k for k in keys if k not in self._username_to_index))
