"""Graph models for social network analysis.

Defines user profiles, mutation outcomes and the plain-data results
returned by traversal and analytics queries.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from social_graph.core.exceptions import (
    AlreadyFriendsError,
    InvalidProfileError,
    InvalidUsernameError,
    NotFriendsError,
    SelfFriendshipError,
    SocialGraphError,
    UserAlreadyExistsError,
    UserNotFoundError,
)


def normalize_username(username: str) -> str:
    """Normalize a username to its canonical key (trimmed, lower-case)."""
    return username.strip().lower()


class MutationStatus(str, Enum):
    """Outcome of a Graph Store mutation."""

    SUCCESS = "success"
    ALREADY_EXISTS = "already_exists"
    NOT_FOUND = "not_found"
    SELF_LOOP = "self_loop"
    ALREADY_FRIENDS = "already_friends"
    NOT_FRIENDS = "not_friends"
    INVALID_USERNAME = "invalid_username"
    INVALID_PROFILE = "invalid_profile"


class PathStatus(str, Enum):
    """Outcome of a shortest-path query."""

    FOUND = "found"
    NO_PATH = "no_path"  # Both users exist but are disconnected
    NOT_FOUND = "not_found"  # One or both users are unknown


@dataclass
class UserProfile:
    """A user (vertex) in the social graph.

    Attributes:
        username: Unique, normalized key.
        name: Display name.
        age: Age in years.
        location: Free-text location.
        created_at: When the user was added (UTC).
    """

    username: str
    name: str
    age: int = 0
    location: str = ""
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "username": self.username,
            "name": self.name,
            "age": self.age,
            "location": self.location,
            "created_at": self.created_at.isoformat(),
        }


@dataclass
class MutationResult:
    """Result of adding or removing users and friendships.

    Attributes:
        status: The outcome.
        usernames: Normalized usernames the mutation referred to.
        missing: Usernames that were not found (NOT_FOUND only).
        reason: Extra detail for INVALID_PROFILE.
    """

    status: MutationStatus
    usernames: tuple[str, ...] = ()
    missing: tuple[str, ...] = ()
    reason: str = ""

    @property
    def ok(self) -> bool:
        """Whether the mutation took effect."""
        return self.status == MutationStatus.SUCCESS

    def to_error(self) -> SocialGraphError | None:
        """Build the exception matching this result, or None on success."""
        names = self.usernames
        if self.status == MutationStatus.SUCCESS:
            return None
        if self.status == MutationStatus.ALREADY_EXISTS:
            return UserAlreadyExistsError(names[0])
        if self.status == MutationStatus.NOT_FOUND:
            return UserNotFoundError(list(self.missing or names))
        if self.status == MutationStatus.SELF_LOOP:
            return SelfFriendshipError(names[0])
        if self.status == MutationStatus.ALREADY_FRIENDS:
            return AlreadyFriendsError(names[0], names[1])
        if self.status == MutationStatus.NOT_FRIENDS:
            return NotFriendsError(names[0], names[1])
        if self.status == MutationStatus.INVALID_USERNAME:
            return InvalidUsernameError(names[0] if names else "")
        return InvalidProfileError(names[0], self.reason)

    def raise_for_status(self) -> None:
        """Raise the matching exception if the mutation failed."""
        error = self.to_error()
        if error is not None:
            raise error


@dataclass
class PathResult:
    """Result of a shortest-path query.

    Attributes:
        status: FOUND, NO_PATH or NOT_FOUND.
        path: Usernames from start to end (empty unless FOUND).
    """

    status: PathStatus
    path: list[str] = field(default_factory=list)

    @property
    def found(self) -> bool:
        """Whether a path exists."""
        return self.status == PathStatus.FOUND

    @property
    def degrees(self) -> int | None:
        """Degrees of separation (edge count), or None without a path."""
        if not self.found:
            return None
        return len(self.path) - 1


@dataclass
class Recommendation:
    """A suggested friend.

    Attributes:
        username: The candidate.
        mutual_count: Number of 2-hop paths (mutual friends) to the candidate.
        via: The mutual friends linking user and candidate, sorted.
    """

    username: str
    mutual_count: int
    via: list[str] = field(default_factory=list)


@dataclass
class CentralityResult:
    """Degree centrality of a user.

    Attributes:
        username: The user being ranked.
        score: Degree (number of friends).
        normalized: Degree divided by the maximum possible (n - 1).
    """

    username: str
    score: int
    normalized: float = 0.0


@dataclass
class NetworkStats:
    """Aggregate statistics about the network.

    Attributes:
        user_count: Number of users.
        friendship_count: Number of undirected friendships.
        average_degree: Total degree / user count (0 if empty).
        density: Actual / possible friendships (0 for fewer than 2 users).
        component_count: Number of connected components.
        isolated_count: Users with no friends.
        max_degree: Highest degree in the network.
        most_connected: User with the highest degree (lowest username on ties),
            or None when nobody has a friend.
    """

    user_count: int
    friendship_count: int
    average_degree: float = 0.0
    density: float = 0.0
    component_count: int = 0
    isolated_count: int = 0
    max_degree: int = 0
    most_connected: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "user_count": self.user_count,
            "friendship_count": self.friendship_count,
            "average_degree": self.average_degree,
            "density": self.density,
            "component_count": self.component_count,
            "isolated_count": self.isolated_count,
            "max_degree": self.max_degree,
            "most_connected": self.most_connected,
        }


@dataclass
class SnapshotNode:
    """A user as seen by a visualisation snapshot."""

    id: str
    display_name: str
    degree: int

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary representation."""
        return {"id": self.id, "name": self.display_name, "connections": self.degree}


@dataclass
class SnapshotEdge:
    """A friendship as seen by a visualisation snapshot (source < target)."""

    source: str
    target: str

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary representation."""
        return {"source": self.source, "target": self.target}


@dataclass
class GraphSnapshot:
    """Read-only snapshot of the whole network.

    Attributes:
        nodes: Every user with display name and degree, sorted by id.
        edges: Every friendship exactly once, sorted.
    """

    nodes: list[SnapshotNode] = field(default_factory=list)
    edges: list[SnapshotEdge] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "nodes": [node.to_dict() for node in self.nodes],
            "edges": [edge.to_dict() for edge in self.edges],
        }
