"""Custom exceptions for the Social Graph engine.

Engine operations report domain failures as structured results; these
exceptions exist for callers that prefer raising, via
``MutationResult.raise_for_status()``.
"""

from typing import Any


class SocialGraphError(Exception):
    """Base exception for all Social Graph errors."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.cause = cause

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a plain dictionary for presentation layers."""
        result: dict[str, Any] = {
            "error": self.__class__.__name__,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Graph Errors
# =============================================================================


class GraphError(SocialGraphError):
    """Base class for graph-related errors."""

    pass


class UserNotFoundError(GraphError):
    """One or more referenced users do not exist."""

    def __init__(self, usernames: list[str]) -> None:
        super().__init__(
            message=f"User not found: {', '.join(usernames)}",
            details={"usernames": usernames},
        )


class UserAlreadyExistsError(GraphError):
    """A user with the same username already exists."""

    def __init__(self, username: str) -> None:
        super().__init__(
            message=f"User already exists: {username}",
            details={"username": username},
        )


class InvalidUsernameError(GraphError):
    """Username is empty after normalization."""

    def __init__(self, username: str) -> None:
        super().__init__(
            message=f"Invalid username: {username!r}",
            details={"username": username},
        )


class InvalidProfileError(GraphError):
    """Profile attributes are out of range."""

    def __init__(self, username: str, reason: str) -> None:
        super().__init__(
            message=f"Invalid profile for {username}. {reason}",
            details={"username": username, "reason": reason},
        )


class SelfFriendshipError(GraphError):
    """A user cannot be friends with themselves."""

    def __init__(self, username: str) -> None:
        super().__init__(
            message=f"Cannot befriend self: {username}",
            details={"username": username},
        )


class AlreadyFriendsError(GraphError):
    """The friendship already exists."""

    def __init__(self, user_a: str, user_b: str) -> None:
        super().__init__(
            message=f"Already friends: {user_a} - {user_b}",
            details={"user_a": user_a, "user_b": user_b},
        )


class NotFriendsError(GraphError):
    """The friendship to remove does not exist."""

    def __init__(self, user_a: str, user_b: str) -> None:
        super().__init__(
            message=f"Not friends: {user_a} - {user_b}",
            details={"user_a": user_a, "user_b": user_b},
        )
